"""Partitioning and summarizing billing rows for the monthly invoice."""

from collections.abc import Iterable, Sequence
from decimal import Decimal

from meal_billing.domain.constants import (
    DEFAULT_ORGANIZATION_NAME,
    GERMAN_MONTH_NAMES,
)
from meal_billing.domain.models import (
    BillingRow,
    BillingSection,
    BillingTotals,
    MonthlyBillingReport,
    PersonCategory,
)
from meal_billing.domain.services.validation import validate_billing_period
from meal_billing.utils.decimal_utils import quantize_money
from meal_billing.utils.formatting import format_currency

SECTION_ORDER: tuple[tuple[PersonCategory, str], ...] = (
    (PersonCategory.PENSIONER, "Pensionisten"),
    (PersonCategory.CHILD_GROUP, "Kindergruppe"),
    (PersonCategory.FREE_MEAL, "Gratis"),
)


def format_period_label(year: int, month: int) -> str:
    """Return the German month label, e.g. ``"März 2024"``."""
    validate_billing_period(year, month)
    return f"{GERMAN_MONTH_NAMES[month - 1]} {year}"


def summarize_rows(rows: Iterable[BillingRow]) -> BillingTotals:
    """Sum quantities and amounts over rows.

    Args:
        rows: Billing rows to total.

    Returns:
        BillingTotals: Totals; all zero for no rows.
    """
    quantity = 0
    delivery_count = 0
    meal_amount = Decimal("0")
    delivery_amount = Decimal("0")
    additional = Decimal("0")
    total = Decimal("0")
    for row in rows:
        quantity += row.quantity
        delivery_count += row.delivery_count
        meal_amount += row.meal_amount
        delivery_amount += row.delivery_amount
        additional += row.additional_charges
        total += row.total
    return BillingTotals(
        quantity=quantity,
        delivery_count=delivery_count,
        meal_amount=quantize_money(meal_amount),
        delivery_amount=quantize_money(delivery_amount),
        additional_charges=quantize_money(additional),
        total=quantize_money(total),
    )


def build_monthly_report(
    rows: Sequence[BillingRow],
    year: int,
    month: int,
    organization_name: str = DEFAULT_ORGANIZATION_NAME,
) -> MonthlyBillingReport:
    """Partition rows into category sections with subtotals.

    Sections follow the fixed order pensioners, child groups, free meals;
    a category without rows produces no section. Row order inside a
    section is the order of ``rows``.

    Args:
        rows: Billing rows of the month.
        year: Billing year.
        month: Billing month.
        organization_name: Name printed in the header.

    Returns:
        MonthlyBillingReport: Report with section and grand totals.
    """
    sections: list[BillingSection] = []
    for category, title in SECTION_ORDER:
        section_rows = [row for row in rows if row.category == category]
        if not section_rows:
            continue
        sections.append(
            BillingSection(
                category=category,
                title=title,
                rows=section_rows,
                totals=summarize_rows(section_rows),
            )
        )
    return MonthlyBillingReport(
        organization_name=organization_name,
        year=year,
        month=month,
        period_label=format_period_label(year, month),
        sections=sections,
        grand_totals=summarize_rows(
            row for section in sections for row in section.rows
        ),
    )


def format_billing_line(row: BillingRow) -> str:
    """Return the one-line summary shown on the monthly screen."""
    return (
        f"{row.name} | {format_currency(row.unit_price)} x {row.quantity} "
        f"+ {row.delivery_count} x {format_currency(row.delivery_surcharge)} "
        f"= {format_currency(row.total)}"
    )


__all__ = [
    "SECTION_ORDER",
    "format_period_label",
    "summarize_rows",
    "build_monthly_report",
    "format_billing_line",
]
