"""TopUpReseller Use Case

ISP recharges a reseller's wallet.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.party_repository import PartyRepository
from src.app.repositories.party_ledger_repository import PartyLedgerRepository
from src.app.repositories.reseller_transaction_repository import ResellerTransactionRepository
from src.app.use_cases.balance_posting import post_balance_change
from src.domain.base import money
from src.domain.party import PartyKind
from src.domain.party_ledger_entry import LedgerEntryType
from src.domain.reseller_transaction import ResellerTransaction, ResellerTransactionType
from .dtos import TopUpResellerCommandDTO, ResellerTransactionDTO
from .mappers import to_transaction_dto

logger = logging.getLogger(__name__)


class TopUpReseller:

    def __init__(
        self,
        uow: UnitOfWork,
        party_repo: PartyRepository,
        ledger_repo: PartyLedgerRepository,
        transaction_repo: ResellerTransactionRepository,
    ):
        self.uow = uow
        self.party_repo = party_repo
        self.ledger_repo = ledger_repo
        self.transaction_repo = transaction_repo

    async def execute(self, command: TopUpResellerCommandDTO) -> Result[ResellerTransactionDTO]:
        try:
            amount = money(command.amount)
            reseller = await self.party_repo.get_by_id(PartyKind.RESELLER, command.reseller_id, for_update=True)

            if not reseller:
                return Return.err(
                    Error(code="RESELLER_NOT_FOUND", message=f"Reseller {command.reseller_id} not found")
                )

            balance_before = money(reseller.balance)
            await post_balance_change(
                self.party_repo, self.ledger_repo, reseller, amount, LedgerEntryType.TOP_UP,
            )
            transaction = await self.transaction_repo.create(
                ResellerTransaction(
                    tenant_id=reseller.tenant_id,
                    reseller_id=reseller.id,
                    type=ResellerTransactionType.RECHARGE,
                    amount=amount,
                    balance_before=balance_before,
                    balance_after=money(reseller.balance),
                    description=command.description or "Balance recharge",
                )
            )

            await self.uow.commit()

            logger.info(f"Topped up reseller {reseller.id} with {amount}")
            return Return.ok(to_transaction_dto(transaction))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to top up reseller {command.reseller_id}: {e}")
            return Return.err(
                Error(
                    code="TOP_UP_FAILED",
                    message="Failed to top up reseller balance",
                    reason=str(e),
                )
            )
