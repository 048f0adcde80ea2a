"""RecordWalletTransaction Use Case

Manual customer wallet top-up, bonus or withdrawal.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.party_repository import PartyRepository
from src.app.repositories.wallet_transaction_repository import WalletTransactionRepository
from src.domain.base import money
from src.domain.party import PartyKind
from src.domain.wallet_transaction import WalletTransaction, WalletTransactionType, CREDIT_TYPES
from .dtos import RecordWalletTransactionCommandDTO, WalletTransactionDTO
from .mappers import to_wallet_transaction_dto

logger = logging.getLogger(__name__)


class RecordWalletTransaction:
    """
    Use Case: Move money on a customer's wallet

    Business Rules:
    1. topup/bonus add to the wallet, withdraw subtracts
    2. A withdrawal cannot exceed the wallet balance
    3. recharge_payment rows are only written by the wallet service
    """

    def __init__(
        self,
        uow: UnitOfWork,
        party_repo: PartyRepository,
        wallet_transaction_repo: WalletTransactionRepository,
    ):
        self.uow = uow
        self.party_repo = party_repo
        self.wallet_transaction_repo = wallet_transaction_repo

    async def execute(self, command: RecordWalletTransactionCommandDTO) -> Result[WalletTransactionDTO]:
        try:
            if command.transaction_type == WalletTransactionType.RECHARGE_PAYMENT:
                return Return.err(
                    Error(
                        code="INVALID_TRANSACTION_TYPE",
                        message="recharge_payment movements are created by recharge verification",
                    )
                )

            customer = await self.party_repo.get_by_id(PartyKind.CUSTOMER, command.customer_id, for_update=True)

            if not customer:
                return Return.err(
                    Error(code="CUSTOMER_NOT_FOUND", message=f"Customer {command.customer_id} not found")
                )

            amount = money(command.amount)
            wallet_balance = money(customer.wallet_balance)

            if command.transaction_type in CREDIT_TYPES:
                signed = amount
            else:
                if wallet_balance < amount:
                    return Return.err(
                        Error(
                            code="INSUFFICIENT_WALLET_BALANCE",
                            message=f"Wallet balance {wallet_balance} is less than {amount}",
                        )
                    )
                signed = -amount

            customer.wallet_balance = wallet_balance + signed
            await self.party_repo.update(customer)

            transaction = await self.wallet_transaction_repo.create(
                WalletTransaction(
                    tenant_id=customer.tenant_id,
                    customer_id=customer.id,
                    transaction_type=command.transaction_type,
                    amount=signed,
                    balance_after=customer.wallet_balance,
                    notes=command.notes,
                    processed_by=command.processed_by,
                )
            )

            await self.uow.commit()

            logger.info(
                f"Wallet {command.transaction_type.value} of {amount} for customer {customer.id}, "
                f"balance now {customer.wallet_balance}"
            )
            return Return.ok(to_wallet_transaction_dto(transaction))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to record wallet transaction for customer {command.customer_id}: {e}")
            return Return.err(
                Error(
                    code="WALLET_TRANSACTION_FAILED",
                    message="Failed to record wallet transaction",
                    reason=str(e),
                )
            )
