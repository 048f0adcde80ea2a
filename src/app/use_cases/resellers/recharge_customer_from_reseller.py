"""RechargeCustomerFromReseller Use Case

A reseller pays for one of its tenant's customers out of its own balance.
"""

import logging
from datetime import datetime
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.party_repository import PartyRepository
from src.app.repositories.party_ledger_repository import PartyLedgerRepository
from src.app.repositories.reseller_transaction_repository import ResellerTransactionRepository
from src.app.repositories.customer_recharge_repository import CustomerRechargeRepository
from src.app.repositories.customer_payment_repository import CustomerPaymentRepository
from src.app.use_cases.balance_posting import post_balance_change
from src.app.use_cases.recharges.mappers import to_recharge_response
from src.domain.base import money
from src.domain.customer_payment import CustomerPayment
from src.domain.customer_recharge import CustomerRecharge, RechargeStatus, compute_new_expiry
from src.domain.party import PartyKind, CustomerStatus
from src.domain.party_ledger_entry import LedgerEntryType
from src.domain.reseller_transaction import ResellerTransaction, ResellerTransactionType
from .dtos import ResellerRechargeCustomerCommandDTO, ResellerRechargeCustomerResponseDTO
from .mappers import to_transaction_dto

logger = logging.getLogger(__name__)

RESELLER_WALLET_METHOD = "reseller_wallet"


class RechargeCustomerFromReseller:
    """
    Use Case: Reseller pays a customer's renewal

    Business Rules:
    1. The reseller must have can_recharge_customers
    2. amount <= reseller balance, nothing is written otherwise
    3. Customer and reseller belong to the same tenant
    4. The recharge is completed at once with payment_method "reseller_wallet":
       expiry extended, customer active, due_amount settled
    5. The reseller gets a customer_payment row (-amount) with its
       before/after balance and the customer it paid for

    Flow:
    1. Lock reseller, then customer (SELECT FOR UPDATE, fixed order)
    2. Validate permission, tenant and balance
    3. Insert completed recharge and apply it to the customer
    4. Debit the reseller and write its transaction row
    5. Commit transaction
    """

    def __init__(
        self,
        uow: UnitOfWork,
        party_repo: PartyRepository,
        ledger_repo: PartyLedgerRepository,
        transaction_repo: ResellerTransactionRepository,
        recharge_repo: CustomerRechargeRepository,
        customer_payment_repo: CustomerPaymentRepository,
        default_validity_days: int = 30,
    ):
        self.uow = uow
        self.party_repo = party_repo
        self.ledger_repo = ledger_repo
        self.transaction_repo = transaction_repo
        self.recharge_repo = recharge_repo
        self.customer_payment_repo = customer_payment_repo
        self.default_validity_days = default_validity_days

    async def execute(
        self, command: ResellerRechargeCustomerCommandDTO
    ) -> Result[ResellerRechargeCustomerResponseDTO]:
        try:
            amount = money(command.amount)

            # Step 1: Lock reseller, then customer
            reseller = await self.party_repo.get_by_id(PartyKind.RESELLER, command.reseller_id, for_update=True)

            if not reseller:
                return Return.err(
                    Error(code="RESELLER_NOT_FOUND", message=f"Reseller {command.reseller_id} not found")
                )

            customer = await self.party_repo.get_by_id(PartyKind.CUSTOMER, command.customer_id, for_update=True)

            # Step 2: Validate
            if not reseller.can_recharge_customers:
                return Return.err(
                    Error(
                        code="RECHARGE_NOT_ALLOWED",
                        message=f"Reseller {reseller.id} is not allowed to recharge customers",
                    )
                )

            if not customer or customer.tenant_id != reseller.tenant_id:
                return Return.err(
                    Error(code="CUSTOMER_NOT_FOUND", message=f"Customer {command.customer_id} not found")
                )

            if money(reseller.balance) < amount:
                return Return.err(
                    Error(
                        code="INSUFFICIENT_BALANCE",
                        message=f"Insufficient balance. Need {amount}, have {money(reseller.balance)}",
                    )
                )

            # Step 3: Completed recharge
            today = command.recharge_date or datetime.utcnow().date()
            validity_days = command.validity_days or self.default_validity_days
            old_expiry = customer.expiry_date
            new_expiry = compute_new_expiry(old_expiry, today, command.months, validity_days)
            month_label = "month" if command.months == 1 else "months"

            recharge = await self.recharge_repo.create(
                CustomerRecharge(
                    tenant_id=customer.tenant_id,
                    customer_id=customer.id,
                    reseller_id=reseller.id,
                    amount=amount,
                    months=command.months,
                    payment_method=RESELLER_WALLET_METHOD,
                    old_expiry=old_expiry,
                    new_expiry=new_expiry,
                    status=RechargeStatus.COMPLETED,
                    collected_by_type="reseller",
                    collected_by_name=reseller.name,
                )
            )

            customer.expiry_date = new_expiry
            customer.status = CustomerStatus.ACTIVE
            customer.last_payment_date = today
            await self.party_repo.update(customer)
            await post_balance_change(
                self.party_repo,
                self.ledger_repo,
                customer,
                -money(customer.due_amount),
                LedgerEntryType.RECHARGE_SETTLED,
                reference_type="customer_recharge",
                reference_id=recharge.id,
            )
            await self.customer_payment_repo.create(
                CustomerPayment(
                    tenant_id=customer.tenant_id,
                    customer_id=customer.id,
                    recharge_id=recharge.id,
                    amount=amount,
                    payment_method=RESELLER_WALLET_METHOD,
                    notes=f"Paid by reseller {reseller.name} for {command.months} {month_label}",
                )
            )

            # Step 4: Debit reseller
            balance_before = money(reseller.balance)
            await post_balance_change(
                self.party_repo,
                self.ledger_repo,
                reseller,
                -amount,
                LedgerEntryType.CUSTOMER_RECHARGE,
                reference_type="customer_recharge",
                reference_id=recharge.id,
            )
            transaction = await self.transaction_repo.create(
                ResellerTransaction(
                    tenant_id=reseller.tenant_id,
                    reseller_id=reseller.id,
                    type=ResellerTransactionType.CUSTOMER_PAYMENT,
                    amount=-amount,
                    balance_before=balance_before,
                    balance_after=money(reseller.balance),
                    customer_id=customer.id,
                    description=f"Recharge for {customer.name} ({command.months} {month_label})",
                )
            )

            # Step 5: Commit transaction
            await self.uow.commit()

            logger.info(
                f"Reseller {reseller.id} recharged customer {customer.id} for {amount}, "
                f"expiry {old_expiry} -> {new_expiry}"
            )

            return Return.ok(
                ResellerRechargeCustomerResponseDTO(
                    reseller_id=reseller.id,
                    reseller_balance=money(reseller.balance),
                    reseller_transaction=to_transaction_dto(transaction),
                    recharge=to_recharge_response(recharge, customer),
                )
            )

        except Exception as e:
            await self.uow.rollback()
            logger.error(
                f"Failed to recharge customer {command.customer_id} from reseller {command.reseller_id}: {e}"
            )
            return Return.err(
                Error(
                    code="RESELLER_RECHARGE_FAILED",
                    message="Failed to recharge customer from reseller balance",
                    reason=str(e),
                )
            )
