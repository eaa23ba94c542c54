"""Streamlit page for the monthly meal billing."""

import io
from collections.abc import Sequence
from datetime import date

import altair as alt
import streamlit as st

from meal_billing.domain.constants import GERMAN_MONTH_NAMES
from meal_billing.domain.errors import BillingError
from meal_billing.domain.models import BillingRow, MonthlyBillingReport
from meal_billing.domain.services import (
    build_monthly_report,
    format_period_label,
)
from meal_billing.infrastructure.container import (
    build_calculate_use_case,
    build_export_use_case,
)
from meal_billing.infrastructure.settings import BillingSettings
from meal_billing.utils.formatting import format_currency


def _fetch_monthly_rows(year: int, month: int) -> list[BillingRow]:
    """Compute the billing rows of a month from the kitchen database."""
    use_case = build_calculate_use_case()
    return use_case.execute(year, month)


@st.cache_data(show_spinner=False, ttl=60)
def _load_monthly_rows(year: int, month: int) -> list[BillingRow]:
    """Cached wrapper around _fetch_monthly_rows."""
    return _fetch_monthly_rows(year, month)


def _export_pdf_bytes(year: int, month: int) -> bytes:
    """Render the month's invoice as PDF bytes."""
    buffer = io.BytesIO()
    build_export_use_case("pdf").execute(year, month, buffer)
    return buffer.getvalue()


def _rows_to_records(rows: Sequence[BillingRow]) -> list[dict[str, str]]:
    """Convert billing rows into display records for the table."""
    return [
        {
            "Name": row.name,
            "Anschrift": row.address.replace("\n", ", "),
            "Einzelpreis": format_currency(row.unit_price),
            "Menge": str(row.quantity),
            "Lieferungen": str(row.delivery_count),
            "Zusatzkosten": format_currency(row.additional_charges),
            "Summe": format_currency(row.total),
        }
        for row in rows
    ]


def _category_chart_data(
    report: MonthlyBillingReport,
) -> list[dict[str, object]]:
    """Return one record per section with its total as float."""
    return [
        {"category": section.title, "total": float(section.totals.total)}
        for section in report.sections
    ]


def _render_category_chart(report: MonthlyBillingReport) -> None:
    """Render a bar chart of section totals."""
    data = _category_chart_data(report)
    if not data:
        return
    chart = (
        alt.Chart(alt.Data(values=data))
        .mark_bar()
        .encode(
            x=alt.X("category:N", title=None, sort=None),
            y=alt.Y("total:Q", title="Summe (€)"),
            tooltip=[
                alt.Tooltip("category:N", title="Kategorie"),
                alt.Tooltip("total:Q", title="Summe", format=",.2f"),
            ],
        )
        .properties(height=260)
    )
    st.altair_chart(chart, use_container_width=True)


def main() -> None:
    """Render the monthly billing page."""
    st.set_page_config(page_title="Monatsabrechnung", layout="wide")
    st.title("Monatsabrechnung")

    today = date.today()
    col_year, col_month = st.columns(2)
    year = int(
        col_year.number_input(
            "Jahr",
            min_value=2000,
            max_value=2100,
            value=today.year,
            step=1,
        )
    )
    month = int(
        col_month.selectbox(
            "Monat",
            options=list(range(1, 13)),
            index=today.month - 1,
            format_func=lambda value: GERMAN_MONTH_NAMES[value - 1],
        )
    )

    try:
        rows = _load_monthly_rows(year, month)
    except BillingError as exc:
        st.error(f"Abrechnung fehlgeschlagen: {exc}")
        return

    settings = BillingSettings.from_env()
    report = build_monthly_report(
        rows,
        year,
        month,
        organization_name=settings.organization_name,
    )
    st.caption(f"Sammelabrechnung {format_period_label(year, month)}")
    if not rows:
        st.info("Keine Bestellungen in diesem Monat.")
        return

    st.dataframe(_rows_to_records(rows), hide_index=True)
    st.metric("Gesamtsumme", format_currency(report.grand_totals.total))
    _render_category_chart(report)

    try:
        pdf_bytes = _export_pdf_bytes(year, month)
    except BillingError as exc:
        st.warning(f"PDF konnte nicht erstellt werden: {exc}")
        return
    st.download_button(
        "PDF herunterladen",
        data=pdf_bytes,
        file_name=f"Sammelabrechnung_{year}_{month:02d}.pdf",
        mime="application/pdf",
    )


if __name__ == "__main__":  # pragma: no cover
    main()
