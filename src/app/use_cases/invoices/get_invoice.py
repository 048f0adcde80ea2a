"""GetInvoice Use Case"""

from libs.result import Result, Return, Error
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.invoice_line_repository import InvoiceLineRepository
from .dtos import InvoiceResponseDTO
from .mappers import to_invoice_response


class GetInvoice:
    """Use Case: Retrieve an invoice with its line items"""

    def __init__(self, invoice_repo: InvoiceRepository, invoice_line_repo: InvoiceLineRepository):
        self.invoice_repo = invoice_repo
        self.invoice_line_repo = invoice_line_repo

    async def execute(self, invoice_id: str) -> Result[InvoiceResponseDTO]:
        try:
            invoice = await self.invoice_repo.get_by_id(invoice_id)

            if not invoice:
                return Return.err(
                    Error(
                        code="INVOICE_NOT_FOUND",
                        message=f"Invoice {invoice_id} not found",
                    )
                )

            lines = await self.invoice_line_repo.get_by_invoice_id(invoice.id)
            return Return.ok(to_invoice_response(invoice, lines))

        except Exception as e:
            return Return.err(
                Error(
                    code="GET_INVOICE_FAILED",
                    message="Failed to retrieve invoice",
                    reason=str(e),
                )
            )
