"""CLI adapter printing the monthly billing rows.

This module wires the CalculateMonthlyBillingUseCase to the SQL stores and
prints one summary line per billed person followed by the grand total.
"""

import argparse

from meal_billing.domain.errors import BillingError
from meal_billing.domain.services import format_billing_line, summarize_rows
from meal_billing.infrastructure.container import build_calculate_use_case
from meal_billing.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)
from meal_billing.utils.formatting import format_currency


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Print the monthly meal billing rows.",
    )
    parser.add_argument("year", type=int, help="Billing year, e.g. 2024")
    parser.add_argument("month", type=int, help="Billing month, 1-12")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the monthly billing calculation and print the rows.

    Args:
        argv: Command-line arguments, defaults to ``sys.argv[1:]``.

    Returns:
        int: Process exit status.
    """
    args = _build_parser().parse_args(argv)
    logger = get_app_logger()
    get_usage_logger().info(
        f"calculate_monthly_cli year={args.year} month={args.month}"
    )

    use_case = build_calculate_use_case()
    try:
        rows = use_case.execute(args.year, args.month)
    except BillingError as exc:
        logger.error(str(exc))
        print(f"Billing failed: {exc}")
        return 1

    if not rows:
        print(f"No orders for {args.year}-{args.month:02d}.")
        return 0
    for row in rows:
        print(format_billing_line(row))
    totals = summarize_rows(rows)
    print(f"Total: {format_currency(totals.total)} ({len(rows)} persons)")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
