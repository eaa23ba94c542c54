"""Plain-text rendering of the monthly collective invoice."""

from meal_billing.application.ports.document import DocumentRendererPort
from meal_billing.domain.models import (
    BillingRow,
    BillingTotals,
    MonthlyBillingReport,
)
from meal_billing.utils.formatting import format_currency

PAGE_BREAK = "\f"
COLUMNS = (
    ("Name", 24, "<"),
    ("Anschrift", 28, "<"),
    ("Einzelpreis", 11, ">"),
    ("Menge", 5, ">"),
    ("Essen", 11, ">"),
    ("Liefer.", 7, ">"),
    ("Lieferung", 11, ">"),
    ("Zusatzk.", 11, ">"),
    ("Summe", 12, ">"),
)


def _fit(value: str, width: int) -> str:
    if len(value) <= width:
        return value
    return value[: width - 1] + "…"


def _format_line(cells: list[str]) -> str:
    parts = [
        f"{_fit(cell, width):{align}{width}}"
        for cell, (_, width, align) in zip(cells, COLUMNS)
    ]
    return " ".join(parts).rstrip()


class PlainTextRenderer(DocumentRendererPort):
    """Render the report as fixed-width UTF-8 text split into pages.

    Pages are separated by form feeds; a ``Seite n / N`` footer is added
    only when there is more than one page.
    """

    media_type = "text/plain"

    def __init__(self, lines_per_page: int = 60) -> None:
        if lines_per_page < 10:
            raise ValueError("lines_per_page must be at least 10")
        self._lines_per_page = lines_per_page

    def render(self, report: MonthlyBillingReport) -> bytes:
        header = [
            report.organization_name,
            f"Sammelabrechnung {report.period_label}",
            "",
        ]
        body: list[str] = []
        if report.is_empty:
            body.append("Keine Bestellungen in diesem Monat.")
        for section in report.sections:
            body.append(section.title)
            body.append(_format_line([name for name, _, _ in COLUMNS]))
            for row in section.rows:
                body.extend(self._row_lines(row))
            body.append(self._totals_line("Zwischensumme", section.totals))
            body.append("")
        if not report.is_empty:
            body.append(self._totals_line("Gesamtsumme", report.grand_totals))

        pages = self._paginate(header, body)
        return PAGE_BREAK.join("\n".join(page) + "\n" for page in pages).encode(
            "utf-8"
        )

    def _paginate(self, header: list[str], body: list[str]) -> list[list[str]]:
        # header on every page, two lines kept free for the footer
        capacity = self._lines_per_page - len(header) - 2
        chunks = [
            body[start:start + capacity]
            for start in range(0, len(body), capacity)
        ] or [[]]
        pages = []
        for number, chunk in enumerate(chunks, start=1):
            page = header + chunk
            if len(chunks) > 1:
                page = page + ["", f"Seite {number} / {len(chunks)}"]
            pages.append(page)
        return pages

    @staticmethod
    def _row_lines(row: BillingRow) -> list[str]:
        address_lines = row.address.split("\n") if row.address else [""]
        first = _format_line(
            [
                row.name,
                address_lines[0],
                format_currency(row.unit_price),
                str(row.quantity),
                format_currency(row.meal_amount),
                str(row.delivery_count) if row.delivery_count else "",
                format_currency(row.delivery_amount) if row.delivery_count else "",
                format_currency(row.additional_charges)
                if row.additional_charges > 0
                else "",
                format_currency(row.total),
            ]
        )
        rest = [_format_line(["", line]) for line in address_lines[1:]]
        return [first, *rest]

    @staticmethod
    def _totals_line(label: str, totals: BillingTotals) -> str:
        return _format_line(
            [
                label,
                "",
                "",
                str(totals.quantity),
                format_currency(totals.meal_amount),
                str(totals.delivery_count),
                format_currency(totals.delivery_amount),
                format_currency(totals.additional_charges),
                format_currency(totals.total),
            ]
        )


__all__ = ["PlainTextRenderer"]
