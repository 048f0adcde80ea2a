"""ListInvoices Use Case"""

from libs.result import Result, Return, Error
from src.app.repositories.invoice_repository import InvoiceRepository
from .dtos import ListInvoicesQueryDTO, ListInvoicesResponseDTO
from .mappers import to_invoice_response


class ListInvoices:
    """
    Use Case: List a tenant's invoices

    Supports filtering by document type, party and payment status.
    Line items are not included.
    """

    def __init__(self, invoice_repo: InvoiceRepository):
        self.invoice_repo = invoice_repo

    async def execute(self, query: ListInvoicesQueryDTO) -> Result[ListInvoicesResponseDTO]:
        try:
            filters = dict(
                document_type=query.document_type,
                party_id=query.party_id,
                payment_status=query.payment_status,
            )
            invoices = await self.invoice_repo.get_by_tenant_id(
                query.tenant_id, limit=query.limit, offset=query.offset, **filters
            )
            total = await self.invoice_repo.count_by_tenant_id(query.tenant_id, **filters)

            return Return.ok(
                ListInvoicesResponseDTO(
                    invoices=[to_invoice_response(invoice) for invoice in invoices],
                    total=total,
                    limit=query.limit,
                    offset=query.offset,
                )
            )

        except Exception as e:
            return Return.err(
                Error(
                    code="LIST_INVOICES_FAILED",
                    message="Failed to list invoices",
                    reason=str(e),
                )
            )
