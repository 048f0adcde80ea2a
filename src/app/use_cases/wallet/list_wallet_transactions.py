"""ListWalletTransactions Use Case"""

from libs.result import Result, Return, Error
from src.app.repositories.party_repository import PartyRepository
from src.app.repositories.wallet_transaction_repository import WalletTransactionRepository
from src.domain.party import PartyKind
from .dtos import ListWalletTransactionsResponseDTO
from .mappers import to_wallet_transaction_dto


class ListWalletTransactions:

    def __init__(self, party_repo: PartyRepository, wallet_transaction_repo: WalletTransactionRepository):
        self.party_repo = party_repo
        self.wallet_transaction_repo = wallet_transaction_repo

    async def execute(self, customer_id: str, limit: int = 50, offset: int = 0) -> Result[ListWalletTransactionsResponseDTO]:
        try:
            customer = await self.party_repo.get_by_id(PartyKind.CUSTOMER, customer_id)

            if not customer:
                return Return.err(
                    Error(code="CUSTOMER_NOT_FOUND", message=f"Customer {customer_id} not found")
                )

            transactions = await self.wallet_transaction_repo.get_by_customer_id(
                customer_id, limit=limit, offset=offset
            )
            return Return.ok(
                ListWalletTransactionsResponseDTO(
                    customer_id=customer_id,
                    wallet_balance=customer.wallet_balance,
                    transactions=[to_wallet_transaction_dto(t) for t in transactions],
                    limit=limit,
                    offset=offset,
                )
            )

        except Exception as e:
            return Return.err(
                Error(
                    code="LIST_WALLET_TRANSACTIONS_FAILED",
                    message="Failed to list wallet transactions",
                    reason=str(e),
                )
            )
