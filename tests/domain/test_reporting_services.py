"""Tests for report partitioning, totals and period helpers."""

from decimal import Decimal

import pytest

from meal_billing.domain.errors import InvalidBillingPeriodError
from meal_billing.domain.models import BillingRow, PersonCategory
from meal_billing.domain.services import (
    build_monthly_report,
    format_billing_line,
    format_period_label,
    month_bounds,
    validate_billing_period,
)


def _row(
    person_id: int,
    name: str,
    category: PersonCategory,
    unit_price: str,
    quantity: int,
    delivery_count: int = 0,
    additional: str = "0.00",
) -> BillingRow:
    unit = Decimal(unit_price)
    surcharge = Decimal("3.50")
    extra = Decimal(additional)
    return BillingRow(
        person_id=person_id,
        name=name,
        address="",
        category=category,
        unit_price=unit,
        quantity=quantity,
        delivery_count=delivery_count,
        delivery_surcharge=surcharge,
        additional_charges=extra,
        total=unit * quantity + surcharge * delivery_count + extra,
    )


def test_sections_follow_fixed_order_and_subtotals() -> None:
    """Sections should be pensioners, child groups, free meals."""
    rows = [
        _row(1, "Anna", PersonCategory.PENSIONER, "4.50", 20, 5, "15.00"),
        _row(2, "Bären", PersonCategory.CHILD_GROUP, "2.90", 100),
        _row(3, "Carl", PersonCategory.FREE_MEAL, "0.00", 4),
        _row(4, "Dora", PersonCategory.PENSIONER, "4.50", 2, 2),
    ]

    report = build_monthly_report(rows, 2024, 3, organization_name="Küche")

    assert [section.title for section in report.sections] == [
        "Pensionisten",
        "Kindergruppe",
        "Gratis",
    ]
    pensioners = report.sections[0]
    assert [row.name for row in pensioners.rows] == ["Anna", "Dora"]
    assert pensioners.totals.quantity == 22
    assert pensioners.totals.delivery_count == 7
    assert pensioners.totals.meal_amount == Decimal("99.00")
    assert pensioners.totals.delivery_amount == Decimal("24.50")
    assert pensioners.totals.additional_charges == Decimal("15.00")
    assert pensioners.totals.total == Decimal("138.50")
    assert report.sections[1].totals.total == Decimal("290.00")
    assert report.grand_totals.total == Decimal("428.50")
    assert report.grand_totals.total == sum(row.total for row in rows)
    assert report.organization_name == "Küche"
    assert report.period_label == "März 2024"


def test_only_free_meal_rows_omit_other_sections() -> None:
    """A month with only free meals should have a single section."""
    rows = [
        _row(1, "Gast", PersonCategory.FREE_MEAL, "0.00", 3),
        _row(2, "Helfer", PersonCategory.FREE_MEAL, "1.00", 2, 1),
    ]

    report = build_monthly_report(rows, 2024, 1)

    assert len(report.sections) == 1
    assert report.sections[0].category is PersonCategory.FREE_MEAL
    assert report.grand_totals.total == Decimal("5.50")
    assert report.grand_totals.total == sum(row.total for row in rows)


def test_empty_rows_give_empty_report_with_header() -> None:
    """No rows should give no sections and zero totals."""
    report = build_monthly_report([], 2024, 12)

    assert report.is_empty
    assert report.period_label == "Dezember 2024"
    assert report.grand_totals.total == Decimal("0.00")
    assert report.grand_totals.quantity == 0


def test_format_billing_line_matches_screen_summary() -> None:
    """The one-line summary should show unit, deliveries and total."""
    row = _row(1, "Anna", PersonCategory.PENSIONER, "4.50", 20, 5)

    line = format_billing_line(row)

    assert line == "Anna | 4,50 € x 20 + 5 x 3,50 € = 107,50 €"


def test_month_bounds_are_half_open() -> None:
    """Bounds should end at the first day of the next month."""
    first, next_first = month_bounds(2023, 12)

    assert first.isoformat() == "2023-12-01"
    assert next_first.isoformat() == "2024-01-01"


@pytest.mark.parametrize(
    ("year", "month"),
    [(2024, 0), (2024, 13), (0, 5), (10000, 1), ("2024", 3), (2024, 2.0), (True, 1)],
)
def test_validate_billing_period_rejects_invalid_input(year, month) -> None:
    """Out-of-range or non-integer periods should be refused."""
    with pytest.raises(InvalidBillingPeriodError):
        validate_billing_period(year, month)


def test_invalid_period_is_a_value_error() -> None:
    """Callers catching ValueError should see invalid periods."""
    with pytest.raises(ValueError):
        format_period_label(2024, 13)
