"""Tests for the Streamlit billing page helpers."""

from decimal import Decimal

from meal_billing.adapters.interface.streamlit import app
from meal_billing.domain.models import BillingRow, PersonCategory
from meal_billing.domain.services import build_monthly_report


def _row(name: str, category: PersonCategory, total: str) -> BillingRow:
    return BillingRow(
        person_id=1,
        name=name,
        address="Hauptstraße 3\n4020 Linz",
        category=category,
        unit_price=Decimal("4.50"),
        quantity=2,
        delivery_count=1,
        delivery_surcharge=Decimal("3.50"),
        additional_charges=Decimal("0.00"),
        total=Decimal(total),
    )


def test_fetch_monthly_rows_invokes_use_case(monkeypatch) -> None:
    """_fetch_monthly_rows should build and execute the use case."""
    calls = []

    class _FakeUseCase:
        def execute(self, year, month):
            calls.append((year, month))
            return ["row"]

    monkeypatch.setattr(app, "build_calculate_use_case", _FakeUseCase)

    assert app._fetch_monthly_rows(2024, 3) == ["row"]
    assert calls == [(2024, 3)]


def test_rows_to_records_formats_amounts() -> None:
    records = app._rows_to_records(
        [_row("Anna", PersonCategory.PENSIONER, "12.50")]
    )

    assert records == [
        {
            "Name": "Anna",
            "Anschrift": "Hauptstraße 3, 4020 Linz",
            "Einzelpreis": "4,50 €",
            "Menge": "2",
            "Lieferungen": "1",
            "Zusatzkosten": "0,00 €",
            "Summe": "12,50 €",
        }
    ]


def test_category_chart_data_follows_sections() -> None:
    report = build_monthly_report(
        [
            _row("Kita", PersonCategory.CHILD_GROUP, "29.00"),
            _row("Anna", PersonCategory.PENSIONER, "12.50"),
        ],
        2024,
        3,
    )

    assert app._category_chart_data(report) == [
        {"category": "Pensionisten", "total": 12.5},
        {"category": "Kindergruppe", "total": 29.0},
    ]
