"""DeductSubReseller Use Case

Pulls balance back from a sub-reseller to its parent reseller.
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
from .dtos import TransferCommandDTO, TransferResponseDTO
from .mappers import to_transaction_dto

logger = logging.getLogger(__name__)


class DeductSubReseller:
    """
    Use Case: Deduct balance from a sub-reseller

    Business Rules:
    1. The sub-reseller must be a direct child of the reseller
    2. amount <= sub-reseller balance
    3. Parent gets a transfer_in row (+amount), sub gets a deduction row (-amount)
    """

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

    async def execute(self, command: TransferCommandDTO) -> Result[TransferResponseDTO]:
        try:
            amount = money(command.amount)

            reseller = await self.party_repo.get_by_id(PartyKind.RESELLER, command.reseller_id, for_update=True)

            if not reseller:
                return Return.err(
                    Error(code="RESELLER_NOT_FOUND", message=f"Reseller {command.reseller_id} not found")
                )

            sub = await self.party_repo.get_by_id(PartyKind.RESELLER, command.sub_reseller_id, for_update=True)

            if not sub or sub.parent_id != reseller.id:
                return Return.err(
                    Error(
                        code="SUB_RESELLER_NOT_FOUND",
                        message="Sub-reseller not found or not authorized",
                        reason=f"{command.sub_reseller_id} is not a sub-reseller of {reseller.id}",
                    )
                )

            if money(sub.balance) < amount:
                return Return.err(
                    Error(
                        code="INSUFFICIENT_BALANCE",
                        message=f"Sub-reseller has insufficient balance. Has {money(sub.balance)}",
                    )
                )

            parent_before = money(reseller.balance)
            await post_balance_change(
                self.party_repo, self.ledger_repo, reseller, amount, LedgerEntryType.TRANSFER_IN,
                reference_type="reseller", reference_id=sub.id,
            )
            parent_tx = await self.transaction_repo.create(
                ResellerTransaction(
                    tenant_id=reseller.tenant_id,
                    reseller_id=reseller.id,
                    type=ResellerTransactionType.TRANSFER_IN,
                    amount=amount,
                    balance_before=parent_before,
                    balance_after=money(reseller.balance),
                    from_reseller_id=sub.id,
                    description=command.description or f"Balance deducted from {sub.name}",
                )
            )

            sub_before = money(sub.balance)
            await post_balance_change(
                self.party_repo, self.ledger_repo, sub, -amount, LedgerEntryType.TRANSFER_OUT,
                reference_type="reseller", reference_id=reseller.id,
            )
            sub_tx = await self.transaction_repo.create(
                ResellerTransaction(
                    tenant_id=reseller.tenant_id,
                    reseller_id=sub.id,
                    type=ResellerTransactionType.DEDUCTION,
                    amount=-amount,
                    balance_before=sub_before,
                    balance_after=money(sub.balance),
                    to_reseller_id=reseller.id,
                    description=command.description or f"Balance deducted by {reseller.name}",
                )
            )

            await self.uow.commit()

            logger.info(f"Reseller {reseller.id} deducted {amount} from sub-reseller {sub.id}")

            return Return.ok(
                TransferResponseDTO(
                    reseller_id=reseller.id,
                    sub_reseller_id=sub.id,
                    amount=amount,
                    reseller_balance=money(reseller.balance),
                    sub_reseller_balance=money(sub.balance),
                    reseller_transaction=to_transaction_dto(parent_tx),
                    sub_reseller_transaction=to_transaction_dto(sub_tx),
                )
            )

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to deduct from sub-reseller {command.sub_reseller_id}: {e}")
            return Return.err(
                Error(
                    code="TRANSFER_FAILED",
                    message="Failed to deduct balance",
                    reason=str(e),
                )
            )
