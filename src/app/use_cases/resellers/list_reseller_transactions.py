"""ListResellerTransactions Use Case"""

from libs.result import Result, Return, Error
from src.app.repositories.party_repository import PartyRepository
from src.app.repositories.reseller_transaction_repository import ResellerTransactionRepository
from src.domain.party import PartyKind
from .dtos import ListResellerTransactionsResponseDTO
from .mappers import to_transaction_dto


class ListResellerTransactions:
    """
    Use Case: List a reseller's wallet transactions

    Returns newest first with the total count for pagination.
    """

    def __init__(self, party_repo: PartyRepository, transaction_repo: ResellerTransactionRepository):
        self.party_repo = party_repo
        self.transaction_repo = transaction_repo

    async def execute(
        self,
        reseller_id: str,
        limit: int = 50,
        offset: int = 0,
    ) -> Result[ListResellerTransactionsResponseDTO]:
        try:
            reseller = await self.party_repo.get_by_id(PartyKind.RESELLER, reseller_id)

            if not reseller:
                return Return.err(
                    Error(code="RESELLER_NOT_FOUND", message=f"Reseller {reseller_id} not found")
                )

            transactions = await self.transaction_repo.get_by_reseller_id(reseller_id, limit=limit, offset=offset)
            total = await self.transaction_repo.count_by_reseller_id(reseller_id)

            return Return.ok(
                ListResellerTransactionsResponseDTO(
                    reseller_id=reseller_id,
                    transactions=[to_transaction_dto(t) for t in transactions],
                    total=total,
                    limit=limit,
                    offset=offset,
                )
            )

        except Exception as e:
            return Return.err(
                Error(
                    code="LIST_TRANSACTIONS_FAILED",
                    message="Failed to list reseller transactions",
                    reason=str(e),
                )
            )
