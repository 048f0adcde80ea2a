"""ListRecharges Use Case"""

from libs.result import Result, Return, Error
from src.app.repositories.customer_recharge_repository import CustomerRechargeRepository
from .dtos import ListRechargesQueryDTO, ListRechargesResponseDTO
from .mappers import to_recharge_response


class ListRecharges:
    """Use Case: List recharges, e.g. the pending_manual review queue"""

    def __init__(self, recharge_repo: CustomerRechargeRepository):
        self.recharge_repo = recharge_repo

    async def execute(self, query: ListRechargesQueryDTO) -> Result[ListRechargesResponseDTO]:
        try:
            recharges = await self.recharge_repo.get_by_tenant_id(
                query.tenant_id,
                customer_id=query.customer_id,
                status=query.status,
                limit=query.limit,
                offset=query.offset,
            )
            return Return.ok(
                ListRechargesResponseDTO(
                    recharges=[to_recharge_response(r) for r in recharges],
                    limit=query.limit,
                    offset=query.offset,
                )
            )

        except Exception as e:
            return Return.err(
                Error(
                    code="LIST_RECHARGES_FAILED",
                    message="Failed to list recharges",
                    reason=str(e),
                )
            )
