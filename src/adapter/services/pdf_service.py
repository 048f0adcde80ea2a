"""ReportLab PDF Generation Service Implementation

Renders purchase bills and sales invoices with ReportLab.
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
from src.domain.invoice import Invoice, DocumentType, PaymentStatus
from src.domain.invoice_line import InvoiceLine
from src.domain.party import Party

DOCUMENT_TITLES = {
    DocumentType.PURCHASE_BILL: "PURCHASE BILL",
    DocumentType.SALES_INVOICE: "SALES INVOICE",
}

STATUS_COLORS = {
    PaymentStatus.PAID: "#27AE60",
    PaymentStatus.PARTIAL: "#F39C12",
    PaymentStatus.DUE: "#E74C3C",
}


class ReportLabPdfService(PdfService):
    """
    ReportLab implementation of PdfService

    Layout: company header, document title, document details, party block,
    line items (with VAT), totals with paid/due split.
    """

    def generate_invoice(
        self,
        invoice: Invoice,
        invoice_lines: List[InvoiceLine],
        party: Party,
        company_name: str,
        company_address: str,
        currency_symbol: str,
    ) -> bytes:
        buffer = BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            rightMargin=20 * mm,
            leftMargin=20 * mm,
            topMargin=20 * mm,
            bottomMargin=20 * mm,
        )

        styles = getSampleStyleSheet()
        elements = []

        title_style = ParagraphStyle(
            "TitleStyle",
            parent=styles["Heading1"],
            fontSize=22,
            spaceAfter=10,
            textColor=colors.HexColor("#2C3E50"),
        )
        document_style = ParagraphStyle(
            "DocumentStyle",
            parent=styles["Heading2"],
            fontSize=14,
            textColor=colors.HexColor(STATUS_COLORS[invoice.payment_status]),
            spaceAfter=16,
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

        def amount(value) -> str:
            return f"{currency_symbol} {value:,.2f}"

        # Header
        elements.append(Paragraph(company_name, title_style))
        elements.append(Paragraph(company_address, header_style))
        elements.append(Spacer(1, 8 * mm))
        elements.append(Paragraph(DOCUMENT_TITLES[invoice.document_type], document_style))

        # Document details
        details = [
            ["Number:", invoice.invoice_number],
            ["Status:", invoice.payment_status.value.upper()],
            ["Billing Date:", invoice.billing_date.strftime("%Y-%m-%d")],
        ]
        if invoice.due_date:
            details.append(["Due Date:", invoice.due_date.strftime("%Y-%m-%d")])
        if invoice.from_date and invoice.to_date:
            details.append(
                [
                    "Service Period:",
                    f"{invoice.from_date.strftime('%Y-%m-%d')} to {invoice.to_date.strftime('%Y-%m-%d')}",
                ]
            )

        details_table = Table(details, colWidths=[40 * mm, 100 * mm])
        details_table.setStyle(
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
        elements.append(details_table)
        elements.append(Spacer(1, 8 * mm))

        # Party
        label = "Bill From:" if invoice.document_type == DocumentType.PURCHASE_BILL else "Bill To:"
        elements.append(Paragraph(label, bold_style))
        elements.append(Paragraph(party.name, normal_style))
        company = getattr(party, "company_name", None)
        if company:
            elements.append(Paragraph(company, normal_style))
        for contact in (party.phone, party.email):
            if contact:
                elements.append(Paragraph(contact, header_style))
        elements.append(Spacer(1, 8 * mm))

        # Line items
        line_data = [["Item", "Qty", "Rate", "VAT", "Total"]]
        for line in invoice_lines:
            item = line.item_name
            if line.description:
                item = f"{item} - {line.description}"
            line_data.append(
                [
                    Paragraph(item, normal_style),
                    f"{line.quantity:,.2f}".rstrip("0").rstrip("."),
                    amount(line.rate),
                    amount(line.vat_amount),
                    amount(line.total),
                ]
            )

        col_widths = [65 * mm, 20 * mm, 28 * mm, 25 * mm, 32 * mm]
        line_table = Table(line_data, colWidths=col_widths)
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
                    (
                        "ROWBACKGROUNDS",
                        (0, 1),
                        (-1, -1),
                        [colors.white, colors.HexColor("#F8F9F9")],
                    ),
                ]
            )
        )
        elements.append(line_table)
        elements.append(Spacer(1, 5 * mm))

        # Totals
        totals = [
            ["", "", "", "Subtotal:", amount(invoice.subtotal)],
            ["", "", "", "VAT:", amount(invoice.vat_amount)],
        ]
        if invoice.discount:
            totals.append(["", "", "", "Discount:", f"- {amount(invoice.discount)}"])
        totals.extend(
            [
                ["", "", "", "Total:", amount(invoice.total_amount)],
                ["", "", "", "Paid:", amount(invoice.paid_amount)],
                ["", "", "", "Due:", amount(invoice.due_amount)],
            ]
        )
        total_row = len(totals) - 3
        totals_table = Table(totals, colWidths=col_widths)
        totals_table.setStyle(
            TableStyle(
                [
                    ("FONTSIZE", (0, 0), (-1, -1), 10),
                    ("ALIGN", (3, 0), (-1, -1), "RIGHT"),
                    ("FONTNAME", (3, total_row), (-1, total_row), "Helvetica-Bold"),
                    ("LINEABOVE", (3, total_row), (-1, total_row), 1.5, colors.HexColor("#2C3E50")),
                    ("FONTNAME", (3, -1), (-1, -1), "Helvetica-Bold"),
                    ("TOPPADDING", (0, 0), (-1, -1), 4),
                ]
            )
        )
        elements.append(totals_table)

        if invoice.remarks:
            elements.append(Spacer(1, 10 * mm))
            elements.append(
                Paragraph(
                    f"<i>{invoice.remarks}</i>",
                    ParagraphStyle(
                        "FooterNote",
                        parent=styles["Normal"],
                        fontSize=9,
                        textColor=colors.HexColor("#95A5A6"),
                    ),
                )
            )

        doc.build(elements)
        pdf_bytes = buffer.getvalue()
        buffer.close()

        return pdf_bytes
