"""RechargeCustomer Use Case

Renews a customer's service window and records how it was paid.
"""

import logging
from datetime import datetime
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.party_repository import PartyRepository
from src.app.repositories.party_ledger_repository import PartyLedgerRepository
from src.app.repositories.customer_recharge_repository import CustomerRechargeRepository
from src.app.repositories.customer_payment_repository import CustomerPaymentRepository
from src.app.use_cases.balance_posting import post_balance_change
from src.domain.base import money
from src.domain.customer_payment import CustomerPayment
from src.domain.customer_recharge import (
    CustomerRecharge,
    RechargeStatus,
    DUE_PAYMENT_METHOD,
    compute_new_expiry,
)
from src.domain.party import PartyKind, CustomerStatus
from src.domain.party_ledger_entry import LedgerEntryType
from .dtos import RechargeCustomerCommandDTO, RechargeResponseDTO
from .mappers import to_recharge_response

logger = logging.getLogger(__name__)


class RechargeCustomer:
    """
    Use Case: Recharge a customer

    Business Rules:
    1. new_expiry = max(current expiry, today) + validity_days * months
    2. payment_method "due": status=due, expiry extended, due_amount += amount
    3. manual=True: status=pending_manual, customer untouched until verified
    4. Otherwise: status=completed, expiry extended, due_amount cleared,
       payment history row written
    5. Customer row is locked for the whole operation

    Flow:
    1. Lock customer (SELECT FOR UPDATE)
    2. Compute the new service window
    3. Insert recharge
    4. Apply customer effect for the chosen status
    5. Commit transaction
    """

    def __init__(
        self,
        uow: UnitOfWork,
        party_repo: PartyRepository,
        ledger_repo: PartyLedgerRepository,
        recharge_repo: CustomerRechargeRepository,
        customer_payment_repo: CustomerPaymentRepository,
        default_validity_days: int = 30,
    ):
        self.uow = uow
        self.party_repo = party_repo
        self.ledger_repo = ledger_repo
        self.recharge_repo = recharge_repo
        self.customer_payment_repo = customer_payment_repo
        self.default_validity_days = default_validity_days

    async def execute(self, command: RechargeCustomerCommandDTO) -> Result[RechargeResponseDTO]:
        """
        Execute customer recharge

        Args:
            command: RechargeCustomerCommandDTO with customer, amount, months and payment method

        Returns:
            Result[RechargeResponseDTO]: Recharge with the customer's resulting state
        """
        try:
            # Step 1: Lock customer
            customer = await self.party_repo.get_by_id(
                PartyKind.CUSTOMER, command.customer_id, for_update=True
            )

            if not customer or customer.tenant_id != command.tenant_id:
                return Return.err(
                    Error(
                        code="CUSTOMER_NOT_FOUND",
                        message=f"Customer {command.customer_id} not found",
                    )
                )

            # Step 2: Service window
            today = command.recharge_date or datetime.utcnow().date()
            validity_days = command.validity_days or self.default_validity_days
            old_expiry = customer.expiry_date
            new_expiry = compute_new_expiry(old_expiry, today, command.months, validity_days)

            if command.payment_method == DUE_PAYMENT_METHOD:
                status = RechargeStatus.DUE
            elif command.manual:
                status = RechargeStatus.PENDING_MANUAL
            else:
                status = RechargeStatus.COMPLETED

            amount = money(command.amount)

            # Step 3: Insert recharge
            recharge = await self.recharge_repo.create(
                CustomerRecharge(
                    tenant_id=customer.tenant_id,
                    customer_id=customer.id,
                    amount=amount,
                    months=command.months,
                    discount=money(command.discount),
                    payment_method=command.payment_method,
                    old_expiry=old_expiry,
                    new_expiry=new_expiry,
                    status=status,
                    collected_by_type=command.collected_by_type,
                    collected_by_name=command.collected_by_name,
                    transaction_id=command.transaction_id,
                    notes=command.notes,
                )
            )

            # Step 4: Customer effect
            if status == RechargeStatus.DUE:
                customer.expiry_date = new_expiry
                customer.status = CustomerStatus.ACTIVE
                await self.party_repo.update(customer)
                await post_balance_change(
                    self.party_repo,
                    self.ledger_repo,
                    customer,
                    amount,
                    LedgerEntryType.RECHARGE_DUE,
                    reference_type="customer_recharge",
                    reference_id=recharge.id,
                )

            elif status == RechargeStatus.COMPLETED:
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
                month_label = "month" if command.months == 1 else "months"
                await self.customer_payment_repo.create(
                    CustomerPayment(
                        tenant_id=customer.tenant_id,
                        customer_id=customer.id,
                        recharge_id=recharge.id,
                        amount=amount,
                        payment_method=command.payment_method,
                        transaction_id=command.transaction_id,
                        notes=f"Recharge for {command.months} {month_label}",
                    )
                )

            # Step 5: Commit transaction
            await self.uow.commit()

            logger.info(
                f"Recharged customer {customer.id}: {amount} via {command.payment_method} "
                f"({status.value}), expiry {old_expiry} -> {new_expiry}"
            )

            return Return.ok(to_recharge_response(recharge, customer))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to recharge customer {command.customer_id}: {e}")
            return Return.err(
                Error(
                    code="RECHARGE_FAILED",
                    message="Failed to recharge customer",
                    reason=str(e),
                )
            )
