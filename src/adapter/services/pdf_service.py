"""ReportLab PDF Generation Service Implementation

Renders client invoices using the ReportLab library.
"""

from io import BytesIO
from typing import List

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import mm
from reportlab.platypus import (
    SimpleDocTemplate,
    Table,
    TableStyle,
    Paragraph,
    Spacer,
)

from src.app.services.pdf_service import PdfService
from src.domain.client import Client
from src.domain.invoice import Invoice, InvoiceStatus
from src.domain.invoice_item import InvoiceItem

COLUMN_WIDTHS = [80 * mm, 25 * mm, 30 * mm, 35 * mm]


class ReportLabPdfService(PdfService):
    """
    ReportLab implementation of PdfService
    """

    def generate_invoice(
        self,
        invoice: Invoice,
        items: List[InvoiceItem],
        client: Client,
        company_name: str,
        company_address: str = "",
        currency: str = "USD",
    ) -> bytes:
        buffer = BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            rightMargin=20 * mm,
            leftMargin=20 * mm,
            topMargin=20 * mm,
            bottomMargin=20 * mm,
            title=f"Invoice {invoice.invoice_number}",
        )

        styles = getSampleStyleSheet()
        title_style = ParagraphStyle(
            "TitleStyle",
            parent=styles["Heading1"],
            fontSize=22,
            spaceAfter=6,
            textColor=colors.HexColor("#2C3E50"),
        )
        header_style = ParagraphStyle(
            "HeaderStyle",
            parent=styles["Normal"],
            fontSize=10,
            textColor=colors.HexColor("#7F8C8D"),
        )
        normal_style = ParagraphStyle("NormalStyle", parent=styles["Normal"], fontSize=10)
        bold_style = ParagraphStyle(
            "BoldStyle",
            parent=styles["Normal"],
            fontSize=10,
            fontName="Helvetica-Bold",
        )

        elements = [Paragraph(company_name, title_style)]
        if company_address:
            elements.append(Paragraph(company_address, header_style))
        elements.append(Spacer(1, 10 * mm))

        invoice_info = [
            ["Invoice Number:", invoice.invoice_number],
            ["Status:", invoice.status.value.upper()],
            ["Issue Date:", invoice.issue_date.strftime("%Y-%m-%d")],
            ["Due Date:", invoice.due_date.strftime("%Y-%m-%d")],
        ]
        if invoice.billing_period:
            invoice_info.append(["Billing Period:", invoice.billing_period])

        invoice_table = Table(invoice_info, colWidths=[40 * mm, 100 * mm])
        invoice_table.setStyle(
            TableStyle(
                [
                    ("FONTNAME", (0, 0), (0, -1), "Helvetica-Bold"),
                    ("FONTSIZE", (0, 0), (-1, -1), 10),
                    ("TEXTCOLOR", (0, 0), (0, -1), colors.HexColor("#7F8C8D")),
                    ("VALIGN", (0, 0), (-1, -1), "TOP"),
                    ("BOTTOMPADDING", (0, 0), (-1, -1), 4),
                ]
            )
        )
        elements.append(invoice_table)
        elements.append(Spacer(1, 10 * mm))

        elements.append(Paragraph("Bill To:", bold_style))
        elements.append(Paragraph(client.company_name, normal_style))
        elements.append(Paragraph(f"Client Code: {client.client_code}", normal_style))
        if client.email:
            elements.append(Paragraph(client.email, normal_style))
        elements.append(Spacer(1, 10 * mm))

        line_data = [["Description", "Quantity", "Unit Price", "Total"]]
        for item in items:
            line_data.append(
                [
                    item.description,
                    f"{item.quantity:,.2f}".rstrip("0").rstrip("."),
                    f"{currency} {item.unit_price:,.2f}",
                    f"{currency} {item.total:,.2f}",
                ]
            )

        line_table = Table(line_data, colWidths=COLUMN_WIDTHS)
        line_table.setStyle(
            TableStyle(
                [
                    ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#2C3E50")),
                    ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
                    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                    ("FONTSIZE", (0, 0), (-1, 0), 10),
                    ("ALIGN", (0, 0), (-1, 0), "CENTER"),
                    ("FONTSIZE", (0, 1), (-1, -1), 9),
                    ("ALIGN", (1, 1), (-1, -1), "RIGHT"),
                    ("GRID", (0, 0), (-1, -1), 0.5, colors.HexColor("#BDC3C7")),
                    ("BOTTOMPADDING", (0, 0), (-1, -1), 6),
                    ("TOPPADDING", (0, 0), (-1, -1), 6),
                ]
            )
        )
        elements.append(line_table)
        elements.append(Spacer(1, 5 * mm))

        totals = [
            ["", "", "Subtotal:", f"{currency} {invoice.subtotal:,.2f}"],
            ["", "", "Tax:", f"{currency} {invoice.tax:,.2f}"],
            ["", "", "Total:", f"{currency} {invoice.total:,.2f}"],
            ["", "", "Paid:", f"{currency} {invoice.amount_paid:,.2f}"],
            ["", "", "Amount Due:", f"{currency} {invoice.amount_due:,.2f}"],
        ]
        totals_table = Table(totals, colWidths=COLUMN_WIDTHS)
        totals_table.setStyle(
            TableStyle(
                [
                    ("FONTNAME", (2, 0), (-1, -1), "Helvetica-Bold"),
                    ("FONTSIZE", (0, 0), (-1, -1), 10),
                    ("ALIGN", (2, 0), (-1, -1), "RIGHT"),
                    ("LINEABOVE", (2, 2), (-1, 2), 1.5, colors.HexColor("#2C3E50")),
                    ("TOPPADDING", (0, 0), (-1, -1), 4),
                ]
            )
        )
        elements.append(totals_table)

        if invoice.status == InvoiceStatus.CANCELLED:
            elements.append(Spacer(1, 10 * mm))
            elements.append(
                Paragraph(
                    "<i>This invoice has been cancelled.</i>",
                    ParagraphStyle(
                        "FooterNote",
                        parent=styles["Normal"],
                        fontSize=9,
                        textColor=colors.HexColor("#E74C3C"),
                    ),
                )
            )

        doc.build(elements)
        pdf_bytes = buffer.getvalue()
        buffer.close()

        return pdf_bytes
