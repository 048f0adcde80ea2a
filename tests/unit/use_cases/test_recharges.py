"""Unit tests for the customer recharge state machine

due -> completed (mark paid), pending_manual -> completed (verify) and
pending_manual -> rejected (reject).
"""

import pytest
from datetime import date
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from src.app.services.wallet_service import WalletDebitResult
from src.app.use_cases.recharges import (
    RechargeCustomer,
    BulkRechargeCustomers,
    MarkRechargePaid,
    VerifyManualRecharge,
    RejectManualRecharge,
    RechargeCustomerCommandDTO,
    BulkRechargeCommandDTO,
    MarkRechargePaidCommandDTO,
    VerifyManualRechargeCommandDTO,
    RejectManualRechargeCommandDTO,
)
from src.domain.customer_recharge import CustomerRecharge, RechargeStatus
from src.domain.party import Customer, CustomerStatus
from src.domain.party_ledger_entry import LedgerEntryType


@pytest.fixture
def customer():
    return Customer(
        id="customer_1",
        tenant_id="tenant_isp01",
        name="Rahim Uddin",
        status=CustomerStatus.EXPIRED,
        expiry_date=date(2024, 3, 10),
        monthly_bill=Decimal("500"),
    )


@pytest.fixture
def mock_wallet_service():
    service = MagicMock()
    service.debit = AsyncMock(return_value=WalletDebitResult(success=True, balance_after=Decimal("50.00")))
    return service


def recharge_command(**overrides):
    data = dict(
        tenant_id="tenant_isp01",
        customer_id="customer_1",
        amount=Decimal("500"),
        months=1,
        payment_method="cash",
        recharge_date=date(2024, 3, 1),
    )
    data.update(overrides)
    return RechargeCustomerCommandDTO(**data)


def make_recharge(status, **overrides):
    data = dict(
        id="recharge_1",
        tenant_id="tenant_isp01",
        customer_id="customer_1",
        amount=Decimal("500.00"),
        months=1,
        payment_method="due" if status == RechargeStatus.DUE else "bkash",
        old_expiry=date(2024, 3, 10),
        new_expiry=date(2024, 4, 9),
        status=status,
    )
    data.update(overrides)
    return CustomerRecharge(**data)


@pytest.fixture
def recharge_use_case(mock_uow, mock_party_repo, mock_ledger_repo, mock_recharge_repo, mock_customer_payment_repo):
    return RechargeCustomer(mock_uow, mock_party_repo, mock_ledger_repo, mock_recharge_repo, mock_customer_payment_repo)


@pytest.mark.asyncio
class TestRechargeCustomer:

    async def test_due_recharge_extends_and_adds_due(
        self, recharge_use_case, mock_party_repo, mock_ledger_repo, mock_customer_payment_repo, customer
    ):
        """
        Given: Customer expiring 2024-03-10 with no due
        When: Recharged for 500 on credit ("due")
        Then: Expiry extended by 30 days, due becomes 500, no payment row
        """
        mock_party_repo.get_by_id = AsyncMock(return_value=customer)

        result = await recharge_use_case.execute(recharge_command(payment_method="due"))

        assert result.is_ok()
        assert result.value.status == "due"
        assert result.value.new_expiry == date(2024, 4, 9)
        assert result.value.customer_due_amount == Decimal("500.00")
        assert result.value.customer_status == "active"
        entry = mock_ledger_repo.create.call_args[0][0]
        assert entry.entry_type == LedgerEntryType.RECHARGE_DUE
        assert entry.amount == Decimal("500.00")
        mock_customer_payment_repo.create.assert_not_called()

    async def test_paid_recharge_settles_existing_due(
        self, recharge_use_case, mock_party_repo, mock_ledger_repo, mock_customer_payment_repo, customer
    ):
        customer.due_amount = Decimal("300.00")
        customer.expiry_date = date(2024, 2, 1)
        mock_party_repo.get_by_id = AsyncMock(return_value=customer)

        result = await recharge_use_case.execute(recharge_command(months=2))

        assert result.is_ok()
        assert result.value.status == "completed"
        assert result.value.new_expiry == date(2024, 4, 30)
        assert result.value.customer_due_amount == Decimal("0.00")
        assert customer.last_payment_date == date(2024, 3, 1)
        entry = mock_ledger_repo.create.call_args[0][0]
        assert entry.entry_type == LedgerEntryType.RECHARGE_SETTLED
        assert entry.amount == Decimal("-300.00")
        payment = mock_customer_payment_repo.create.call_args[0][0]
        assert payment.notes == "Recharge for 2 months"
        assert payment.amount == Decimal("500.00")

    async def test_manual_recharge_waits_for_verification(
        self, recharge_use_case, mock_party_repo, mock_ledger_repo, mock_customer_payment_repo, customer
    ):
        mock_party_repo.get_by_id = AsyncMock(return_value=customer)

        result = await recharge_use_case.execute(
            recharge_command(payment_method="bkash", manual=True, transaction_id="TRX998877")
        )

        assert result.is_ok()
        assert result.value.status == "pending_manual"
        assert customer.expiry_date == date(2024, 3, 10)
        assert customer.status == CustomerStatus.EXPIRED
        mock_party_repo.update.assert_not_called()
        mock_ledger_repo.create.assert_not_called()
        mock_customer_payment_repo.create.assert_not_called()

    async def test_customer_of_other_tenant_not_found(self, recharge_use_case, mock_party_repo, customer):
        customer.tenant_id = "tenant_other"
        mock_party_repo.get_by_id = AsyncMock(return_value=customer)

        result = await recharge_use_case.execute(recharge_command())

        assert result.error.code == "CUSTOMER_NOT_FOUND"


@pytest.mark.asyncio
class TestBulkRechargeCustomers:

    async def test_reports_each_customer(self, recharge_use_case, mock_uow, mock_party_repo, customer):
        mock_party_repo.get_by_id = AsyncMock(side_effect=[customer, None])
        use_case = BulkRechargeCustomers(mock_uow, recharge_use_case)

        result = await use_case.execute(
            BulkRechargeCommandDTO(
                items=[recharge_command(), recharge_command(customer_id="customer_missing")]
            )
        )

        assert result.is_ok()
        assert result.value.succeeded == 1
        assert result.value.failed == 1
        assert result.value.results[0].success is True
        assert result.value.results[1].error_code == "CUSTOMER_NOT_FOUND"
        mock_uow.rollback.assert_called_once()


@pytest.mark.asyncio
class TestMarkRechargePaid:

    @pytest.fixture
    def use_case(self, mock_uow, mock_party_repo, mock_ledger_repo, mock_recharge_repo,
                 mock_customer_payment_repo, mock_activity_log_repo):
        return MarkRechargePaid(
            mock_uow, mock_party_repo, mock_ledger_repo, mock_recharge_repo,
            mock_customer_payment_repo, mock_activity_log_repo,
        )

    async def test_collect_due_recharge(
        self, use_case, mock_party_repo, mock_ledger_repo, mock_recharge_repo, mock_customer_payment_repo, customer
    ):
        """
        Given: Due recharge of 500, customer owes 500
        When: Marked paid with cash
        Then: Recharge completed, original method kept as "due", customer due cleared
        """
        customer.due_amount = Decimal("500.00")
        mock_recharge_repo.get_by_id = AsyncMock(return_value=make_recharge(RechargeStatus.DUE))
        mock_party_repo.get_by_id = AsyncMock(return_value=customer)

        result = await use_case.execute(
            MarkRechargePaidCommandDTO(recharge_id="recharge_1", payment_method="cash", paid_by_name="Front Desk")
        )

        assert result.is_ok()
        assert result.value.status == "completed"
        assert result.value.payment_method == "cash"
        assert result.value.original_payment_method == "due"
        assert result.value.paid_at is not None
        assert result.value.customer_due_amount == Decimal("0.00")
        entry = mock_ledger_repo.create.call_args[0][0]
        assert entry.entry_type == LedgerEntryType.RECHARGE_PAID
        payment = mock_customer_payment_repo.create.call_args[0][0]
        assert payment.notes == "Due recharge collected"

    @pytest.mark.parametrize("method", ["", "   ", "due"])
    async def test_collection_method_required(self, use_case, mock_recharge_repo, method):
        result = await use_case.execute(MarkRechargePaidCommandDTO(recharge_id="recharge_1", payment_method=method))

        assert result.error.code == "INVALID_PAYMENT_METHOD"
        mock_recharge_repo.get_by_id.assert_not_called()

    async def test_only_due_recharges(self, use_case, mock_recharge_repo, mock_uow):
        mock_recharge_repo.get_by_id = AsyncMock(return_value=make_recharge(RechargeStatus.COMPLETED))

        result = await use_case.execute(MarkRechargePaidCommandDTO(recharge_id="recharge_1", payment_method="cash"))

        assert result.error.code == "INVALID_RECHARGE_STATE"
        mock_uow.commit.assert_not_called()

    async def test_recharge_not_found(self, use_case):
        result = await use_case.execute(MarkRechargePaidCommandDTO(recharge_id="missing", payment_method="cash"))

        assert result.error.code == "RECHARGE_NOT_FOUND"


@pytest.mark.asyncio
class TestVerifyManualRecharge:

    @pytest.fixture
    def use_case(self, mock_uow, mock_party_repo, mock_ledger_repo, mock_recharge_repo,
                 mock_customer_payment_repo, mock_activity_log_repo, mock_wallet_service):
        return VerifyManualRecharge(
            mock_uow, mock_party_repo, mock_ledger_repo, mock_recharge_repo,
            mock_customer_payment_repo, mock_activity_log_repo, mock_wallet_service,
        )

    async def test_verify_with_wallet_contribution(
        self, use_case, mock_party_repo, mock_recharge_repo, mock_customer_payment_repo,
        mock_wallet_service, mock_uow, customer
    ):
        """
        Given: Pending manual recharge whose notes record a 200 wallet contribution
        When: Verified
        Then: Wallet debited 200, customer renewed, payment notes mention the wallet
        """
        recharge = make_recharge(RechargeStatus.PENDING_MANUAL, notes="Package change to 20 Mbps (Wallet: ৳200)")
        mock_recharge_repo.get_by_id = AsyncMock(return_value=recharge)
        mock_party_repo.get_by_id = AsyncMock(return_value=customer)

        result = await use_case.execute(
            VerifyManualRechargeCommandDTO(recharge_id="recharge_1", paid_by_name="Billing Officer")
        )

        assert result.is_ok()
        assert result.value.status == "completed"
        assert result.value.wallet_amount_used == Decimal("200")
        assert result.value.customer_expiry_date == date(2024, 4, 9)
        assert result.value.customer_status == "active"
        mock_wallet_service.debit.assert_called_once_with(
            "customer_1", Decimal("200"), "Wallet used for verified manual payment", reference_id="recharge_1"
        )
        payment = mock_customer_payment_repo.create.call_args[0][0]
        assert payment.notes == (
            "Manual payment verified (Package Change) (Wallet: ৳200): Package change to 20 Mbps (Wallet: ৳200)"
        )
        mock_uow.commit.assert_called_once()

    async def test_verify_without_wallet(self, use_case, mock_party_repo, mock_recharge_repo, mock_wallet_service, customer):
        mock_recharge_repo.get_by_id = AsyncMock(
            return_value=make_recharge(RechargeStatus.PENDING_MANUAL, notes="bKash TRX998877")
        )
        mock_party_repo.get_by_id = AsyncMock(return_value=customer)

        result = await use_case.execute(VerifyManualRechargeCommandDTO(recharge_id="recharge_1"))

        assert result.is_ok()
        assert result.value.wallet_amount_used is None
        mock_wallet_service.debit.assert_not_called()

    async def test_wallet_refusal_aborts(
        self, use_case, mock_party_repo, mock_recharge_repo, mock_wallet_service, mock_uow, customer
    ):
        recharge = make_recharge(RechargeStatus.PENDING_MANUAL, notes="Wallet: 200")
        mock_recharge_repo.get_by_id = AsyncMock(return_value=recharge)
        mock_party_repo.get_by_id = AsyncMock(return_value=customer)
        mock_wallet_service.debit = AsyncMock(
            return_value=WalletDebitResult(success=False, error="Insufficient wallet balance")
        )

        result = await use_case.execute(VerifyManualRechargeCommandDTO(recharge_id="recharge_1"))

        assert result.error.code == "WALLET_DEBIT_FAILED"
        assert result.error.reason == "Insufficient wallet balance"
        assert recharge.status == RechargeStatus.PENDING_MANUAL
        mock_uow.rollback.assert_called_once()
        mock_uow.commit.assert_not_called()

    async def test_wallet_error_aborts(
        self, use_case, mock_party_repo, mock_recharge_repo, mock_wallet_service, mock_uow, customer
    ):
        mock_recharge_repo.get_by_id = AsyncMock(
            return_value=make_recharge(RechargeStatus.PENDING_MANUAL, notes="(Wallet: ৳75.50)")
        )
        mock_party_repo.get_by_id = AsyncMock(return_value=customer)
        mock_wallet_service.debit = AsyncMock(side_effect=Exception("wallet RPC unreachable"))

        result = await use_case.execute(VerifyManualRechargeCommandDTO(recharge_id="recharge_1"))

        assert result.error.code == "WALLET_DEBIT_FAILED"
        mock_uow.rollback.assert_called_once()

    async def test_only_pending_manual(self, use_case, mock_recharge_repo):
        mock_recharge_repo.get_by_id = AsyncMock(return_value=make_recharge(RechargeStatus.REJECTED))

        result = await use_case.execute(VerifyManualRechargeCommandDTO(recharge_id="recharge_1"))

        assert result.error.code == "INVALID_RECHARGE_STATE"

    async def test_customer_missing(self, use_case, mock_recharge_repo):
        mock_recharge_repo.get_by_id = AsyncMock(return_value=make_recharge(RechargeStatus.PENDING_MANUAL))

        result = await use_case.execute(VerifyManualRechargeCommandDTO(recharge_id="recharge_1"))

        assert result.error.code == "CUSTOMER_NOT_FOUND"


@pytest.mark.asyncio
class TestRejectManualRecharge:

    @pytest.fixture
    def use_case(self, mock_uow, mock_recharge_repo, mock_activity_log_repo):
        return RejectManualRecharge(mock_uow, mock_recharge_repo, mock_activity_log_repo)

    async def test_reject_appends_reason(self, use_case, mock_recharge_repo, mock_activity_log_repo, mock_uow):
        recharge = make_recharge(RechargeStatus.PENDING_MANUAL, notes="bKash TRX998877")
        mock_recharge_repo.get_by_id = AsyncMock(return_value=recharge)

        result = await use_case.execute(
            RejectManualRechargeCommandDTO(recharge_id="recharge_1", reason="Transaction ID not found")
        )

        assert result.is_ok()
        assert result.value.status == "rejected"
        assert result.value.rejection_reason == "Transaction ID not found"
        assert result.value.notes == "bKash TRX998877 | Rejected: Transaction ID not found"
        assert mock_activity_log_repo.create.call_args[0][0].action == "reject_recharge"
        mock_uow.commit.assert_called_once()

    async def test_reason_without_prior_notes(self, use_case, mock_recharge_repo):
        mock_recharge_repo.get_by_id = AsyncMock(return_value=make_recharge(RechargeStatus.PENDING_MANUAL))

        result = await use_case.execute(RejectManualRechargeCommandDTO(recharge_id="recharge_1", reason="Duplicate"))

        assert result.value.notes == "Rejected: Duplicate"

    async def test_reason_required(self, use_case, mock_recharge_repo):
        result = await use_case.execute(RejectManualRechargeCommandDTO(recharge_id="recharge_1", reason="  "))

        assert result.error.code == "REJECTION_REASON_REQUIRED"
        mock_recharge_repo.get_by_id.assert_not_called()

    async def test_completed_recharge_cannot_be_rejected(self, use_case, mock_recharge_repo):
        mock_recharge_repo.get_by_id = AsyncMock(return_value=make_recharge(RechargeStatus.COMPLETED))

        result = await use_case.execute(RejectManualRechargeCommandDTO(recharge_id="recharge_1", reason="Late"))

        assert result.error.code == "INVALID_RECHARGE_STATE"
