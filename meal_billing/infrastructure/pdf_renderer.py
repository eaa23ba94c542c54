"""ReportLab rendering of the monthly collective invoice."""

import io
from functools import partial
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.pdfgen import canvas
from reportlab.platypus import (
    Paragraph,
    SimpleDocTemplate,
    Spacer,
    Table,
    TableStyle,
)

from meal_billing.application.ports.document import DocumentRendererPort
from meal_billing.domain.models import (
    BillingRow,
    BillingSection,
    BillingTotals,
    MonthlyBillingReport,
)
from meal_billing.utils.formatting import format_currency

PAGE_MARGIN = 28
FOOTER_NOTE = "Automatisch erstellt mit der Monatsabrechnung"
TABLE_HEADER = (
    "Name",
    "Anschrift",
    "Einzelpreis",
    "Menge",
    "Essen",
    "Liefer.",
    "Lieferung",
    "Zusatzk.",
    "Summe",
)
COLUMN_WEIGHTS = (3, 4, 2, 1, 2, 1, 2, 2, 2)
STRIPE_COLOR = colors.HexColor("#f5f5f5")


class _NumberedCanvas(canvas.Canvas):
    """Canvas drawing the footer once the page count is known."""

    def __init__(self, *args, footer_note: str = FOOTER_NOTE, **kwargs):
        super().__init__(*args, **kwargs)
        self._footer_note = footer_note
        self._saved_page_states: list[dict] = []

    def showPage(self):
        self._saved_page_states.append(dict(self.__dict__))
        self._startPage()

    def save(self):
        page_count = len(self._saved_page_states)
        for state in self._saved_page_states:
            self.__dict__.update(state)
            self._draw_footer(page_count)
            super().showPage()
        super().save()

    def _draw_footer(self, page_count: int) -> None:
        width, _ = self._pagesize
        self.setFont("Helvetica", 8)
        self.drawString(PAGE_MARGIN, PAGE_MARGIN / 2, self._footer_note)
        if page_count > 1:
            self.drawRightString(
                width - PAGE_MARGIN,
                PAGE_MARGIN / 2,
                f"Seite {self.getPageNumber()} / {page_count}",
            )


class ReportLabPdfRenderer(DocumentRendererPort):
    """Render the report as an A4 PDF with one table per category."""

    media_type = "application/pdf"

    def __init__(self, footer_note: str = FOOTER_NOTE) -> None:
        self._footer_note = footer_note
        styles = getSampleStyleSheet()
        self._title_style = styles["Title"]
        self._heading_style = styles["Heading3"]
        self._normal_style = styles["Normal"]
        self._cell_style = ParagraphStyle(
            "BillingCell",
            parent=styles["Normal"],
            fontSize=8,
            leading=10,
        )

    def render(self, report: MonthlyBillingReport) -> bytes:
        buf = io.BytesIO()
        doc = SimpleDocTemplate(
            buf,
            pagesize=A4,
            rightMargin=PAGE_MARGIN,
            leftMargin=PAGE_MARGIN,
            topMargin=PAGE_MARGIN,
            bottomMargin=PAGE_MARGIN,
            title=f"Sammelabrechnung {report.period_label}",
            author=report.organization_name,
        )
        elements = [
            Paragraph(escape(report.organization_name), self._title_style),
            Paragraph(
                escape(f"Sammelabrechnung {report.period_label}"),
                self._normal_style,
            ),
            Spacer(1, 12),
        ]
        if report.is_empty:
            elements.append(
                Paragraph("Keine Bestellungen in diesem Monat.", self._normal_style)
            )
        for section in report.sections:
            elements.extend(self._section_elements(section, doc.width))
        if not report.is_empty:
            elements.append(Spacer(1, 12))
            elements.append(Paragraph("Gesamt", self._heading_style))
            elements.append(
                self._table(
                    [self._totals_cells("Gesamtsumme", report.grand_totals)],
                    doc.width,
                    striped=False,
                )
            )

        doc.build(
            elements,
            canvasmaker=partial(_NumberedCanvas, footer_note=self._footer_note),
        )
        return buf.getvalue()

    def _section_elements(self, section: BillingSection, width: float) -> list:
        data = [self._row_cells(row) for row in section.rows]
        data.append(self._totals_cells("Zwischensumme", section.totals))
        return [
            Spacer(1, 8),
            Paragraph(escape(section.title), self._heading_style),
            self._table(data, width, striped=True),
        ]

    def _table(self, body: list[list], width: float, striped: bool) -> Table:
        unit = width / sum(COLUMN_WEIGHTS)
        table = Table(
            [list(TABLE_HEADER)] + body,
            colWidths=[weight * unit for weight in COLUMN_WEIGHTS],
            repeatRows=1,
        )
        style = [
            ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
            ("FONTSIZE", (0, 0), (-1, -1), 8),
            ("ALIGN", (2, 0), (-1, -1), "RIGHT"),
            ("VALIGN", (0, 0), (-1, -1), "TOP"),
            ("LINEBELOW", (0, 0), (-1, 0), 0.5, colors.grey),
        ]
        if striped:
            style.append(("FONTNAME", (0, -1), (-1, -1), "Helvetica-Bold"))
            style.append(("LINEABOVE", (0, -1), (-1, -1), 0.5, colors.grey))
            for index in range(1, len(body)):
                if index % 2 == 1:
                    style.append(
                        ("BACKGROUND", (0, index), (-1, index), STRIPE_COLOR)
                    )
        else:
            style.append(("FONTNAME", (0, 1), (-1, -1), "Helvetica-Bold"))
        table.setStyle(TableStyle(style))
        return table

    def _row_cells(self, row: BillingRow) -> list:
        address = escape(row.address).replace("\n", "<br/>")
        return [
            Paragraph(escape(row.name), self._cell_style),
            Paragraph(address, self._cell_style),
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

    @staticmethod
    def _totals_cells(label: str, totals: BillingTotals) -> list:
        return [
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


__all__ = ["ReportLabPdfRenderer"]
