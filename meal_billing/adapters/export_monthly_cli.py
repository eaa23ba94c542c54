"""CLI adapter exporting the monthly collective invoice."""

import argparse

from meal_billing.domain.errors import (
    BillingCancelledError,
    BillingError,
    DataIntegrityError,
    ExportError,
    InvalidBillingPeriodError,
)
from meal_billing.infrastructure.container import (
    RENDERER_FORMATS,
    build_export_use_case,
)
from meal_billing.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Export the monthly collective invoice.",
    )
    parser.add_argument("year", type=int, help="Billing year, e.g. 2024")
    parser.add_argument("month", type=int, help="Billing month, 1-12")
    parser.add_argument("destination", help="Output file path")
    parser.add_argument(
        "--format",
        dest="output_format",
        choices=RENDERER_FORMATS,
        default="pdf",
        help="Document format (default: pdf)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Export the invoice and report the outcome.

    Args:
        argv: Command-line arguments, defaults to ``sys.argv[1:]``.

    Returns:
        int: Process exit status.
    """
    args = _build_parser().parse_args(argv)
    logger = get_app_logger()
    get_usage_logger().info(
        f"export_monthly_cli year={args.year} month={args.month} "
        f"format={args.output_format}"
    )

    use_case = build_export_use_case(args.output_format)
    try:
        written = use_case.execute(args.year, args.month, args.destination)
    except ExportError as exc:
        print(exc.user_message)
        return 2
    except InvalidBillingPeriodError as exc:
        print(f"Invalid period: {exc}")
        return 1
    except DataIntegrityError as exc:
        logger.error(str(exc))
        print(f"Data integrity problem, invoice not created: {exc}")
        return 1
    except BillingCancelledError:
        print("Export cancelled.")
        return 1
    except BillingError as exc:
        logger.error(str(exc))
        print(f"Billing failed: {exc}")
        return 1

    print(f"Invoice written to {written}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
