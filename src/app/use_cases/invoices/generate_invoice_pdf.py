"""GenerateInvoicePdf Use Case

Renders a purchase bill or sales invoice as a PDF document.
"""

import base64
from datetime import datetime
from libs.result import Result, Return, Error
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.invoice_line_repository import InvoiceLineRepository
from src.app.repositories.party_repository import PartyRepository
from src.app.services.pdf_service import PdfService
from .dtos import InvoicePdfResponseDTO


class GenerateInvoicePdf:
    """
    Use Case: Generate invoice PDF

    Business Rules:
    1. Invoice must exist
    2. The PDF shows the party, line items, totals and paid/due split
    3. Returns PDF as base64-encoded string

    Flow:
    1. Retrieve invoice and line items
    2. Retrieve the billed party
    3. Generate PDF using PDF service
    4. Return response with PDF as base64
    """

    def __init__(
        self,
        invoice_repo: InvoiceRepository,
        invoice_line_repo: InvoiceLineRepository,
        party_repo: PartyRepository,
        pdf_service: PdfService,
        company_name: str = "ISP Back Office",
        company_address: str = "",
        currency_symbol: str = "৳",
    ):
        self.invoice_repo = invoice_repo
        self.invoice_line_repo = invoice_line_repo
        self.party_repo = party_repo
        self.pdf_service = pdf_service
        self.company_name = company_name
        self.company_address = company_address
        self.currency_symbol = currency_symbol

    async def execute(self, invoice_id: str) -> Result[InvoicePdfResponseDTO]:
        try:
            # Step 1: Retrieve invoice
            invoice = await self.invoice_repo.get_by_id(invoice_id)

            if not invoice:
                return Return.err(
                    Error(
                        code="INVOICE_NOT_FOUND",
                        message=f"Invoice {invoice_id} not found",
                        reason="Invoice does not exist",
                    )
                )

            invoice_lines = await self.invoice_line_repo.get_by_invoice_id(invoice.id)

            # Step 2: Retrieve party
            party = await self.party_repo.get_by_id(invoice.party_kind, invoice.party_id)

            if not party:
                return Return.err(
                    Error(
                        code="PARTY_NOT_FOUND",
                        message=f"{invoice.party_kind.value.capitalize()} {invoice.party_id} not found",
                    )
                )

            # Step 3: Generate PDF
            pdf_bytes = self.pdf_service.generate_invoice(
                invoice=invoice,
                invoice_lines=invoice_lines,
                party=party,
                company_name=self.company_name,
                company_address=self.company_address,
                currency_symbol=self.currency_symbol,
            )

            # Step 4: Build response
            return Return.ok(
                InvoicePdfResponseDTO(
                    invoice_id=invoice.id,
                    invoice_number=invoice.invoice_number,
                    document_type=invoice.document_type.value,
                    pdf_base64=base64.b64encode(pdf_bytes).decode("utf-8"),
                    generated_at=datetime.utcnow(),
                )
            )

        except Exception as e:
            return Return.err(
                Error(
                    code="GENERATE_PDF_FAILED",
                    message="Failed to generate invoice PDF",
                    reason=str(e),
                )
            )
