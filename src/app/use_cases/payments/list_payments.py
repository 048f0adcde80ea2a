"""ListPayments Use Case"""

from libs.result import Result, Return, Error
from src.app.repositories.payment_repository import PaymentRepository
from .dtos import ListPaymentsQueryDTO, ListPaymentsResponseDTO
from .mappers import to_payment_response


class ListPayments:

    def __init__(self, payment_repo: PaymentRepository):
        self.payment_repo = payment_repo

    async def execute(self, query: ListPaymentsQueryDTO) -> Result[ListPaymentsResponseDTO]:
        try:
            payments = await self.payment_repo.get_by_tenant_id(
                query.tenant_id,
                payment_type=query.payment_type,
                party_id=query.party_id,
                limit=query.limit,
                offset=query.offset,
            )
            return Return.ok(
                ListPaymentsResponseDTO(
                    payments=[to_payment_response(payment) for payment in payments],
                    limit=query.limit,
                    offset=query.offset,
                )
            )

        except Exception as e:
            return Return.err(
                Error(
                    code="LIST_PAYMENTS_FAILED",
                    message="Failed to list payments",
                    reason=str(e),
                )
            )
