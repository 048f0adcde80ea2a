from datetime import date
from decimal import Decimal

from src.adapter.services.pdf_service import ReportLabPdfService
from src.domain.invoice import Invoice, DocumentType
from src.domain.invoice_line import InvoiceLine
from src.domain.party import Client, PartyKind


def test_generates_sales_invoice_pdf():
    """
    Given: A partially paid sales invoice with one VAT line
    When: The PDF is rendered
    Then: A non-empty PDF document is returned
    """
    client = Client(id="client_1", tenant_id="tenant_isp01", name="Office Park", company_name="Office Park Ltd")
    invoice = Invoice(
        id="invoice_1",
        tenant_id="tenant_isp01",
        document_type=DocumentType.SALES_INVOICE,
        invoice_number="SI-TEST0001",
        party_kind=PartyKind.CLIENT,
        party_id="client_1",
        billing_date=date(2024, 2, 1),
        subtotal=Decimal("1000.00"),
        vat_amount=Decimal("50.00"),
        total_amount=Decimal("1050.00"),
        remarks="February bandwidth",
    )
    invoice.apply_payment(Decimal("500"))
    line = InvoiceLine(
        invoice_id="invoice_1",
        item_name="Dedicated 100 Mbps",
        quantity=Decimal("1"),
        rate=Decimal("1000.00"),
        vat_percent=Decimal("5"),
        vat_amount=Decimal("50.00"),
        total=Decimal("1050.00"),
    )

    pdf_bytes = ReportLabPdfService().generate_invoice(
        invoice, [line], client, "Example ISP", "House 1, Road 2, Dhaka", "Tk"
    )

    assert pdf_bytes.startswith(b"%PDF")
    assert len(pdf_bytes) > 1000
