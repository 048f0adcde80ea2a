import pytest
from datetime import date
from decimal import Decimal
from unittest.mock import AsyncMock

from src.app.use_cases.resellers import (
    FundSubReseller,
    DeductSubReseller,
    TopUpReseller,
    RechargeCustomerFromReseller,
    TransferCommandDTO,
    TopUpResellerCommandDTO,
    ResellerRechargeCustomerCommandDTO,
)
from src.domain.customer_recharge import RechargeStatus
from src.domain.party import Reseller, Customer, CustomerStatus
from src.domain.party_ledger_entry import LedgerEntryType


@pytest.fixture
def parent():
    return Reseller(id="reseller_1", tenant_id="tenant_isp01", name="Zone Reseller", balance=Decimal("1000.00"))


@pytest.fixture
def sub():
    return Reseller(
        id="reseller_2",
        tenant_id="tenant_isp01",
        name="Street Reseller",
        parent_id="reseller_1",
        level=2,
        balance=Decimal("100.00"),
    )


def resellers_by_id(*resellers):
    by_id = {r.id: r for r in resellers}

    async def get_by_id(kind, party_id, for_update=False):
        return by_id.get(party_id)

    return AsyncMock(side_effect=get_by_id)


def transfer(amount="300"):
    return TransferCommandDTO(reseller_id="reseller_1", sub_reseller_id="reseller_2", amount=Decimal(amount))


@pytest.fixture
def fund(mock_uow, mock_party_repo, mock_ledger_repo, mock_reseller_transaction_repo):
    return FundSubReseller(mock_uow, mock_party_repo, mock_ledger_repo, mock_reseller_transaction_repo)


@pytest.fixture
def deduct(mock_uow, mock_party_repo, mock_ledger_repo, mock_reseller_transaction_repo):
    return DeductSubReseller(mock_uow, mock_party_repo, mock_ledger_repo, mock_reseller_transaction_repo)


@pytest.mark.asyncio
class TestFundSubReseller:

    async def test_fund_moves_balance(self, fund, mock_party_repo, mock_reseller_transaction_repo, mock_uow, parent, sub):
        """
        Given: Parent with 1000, sub-reseller with 100
        When: Parent funds the sub-reseller with 300
        Then: Parent 700, sub 400, one row per side with its own balance_after
        """
        mock_party_repo.get_by_id = resellers_by_id(parent, sub)

        result = await fund.execute(transfer())

        assert result.is_ok()
        assert result.value.reseller_balance == Decimal("700.00")
        assert result.value.sub_reseller_balance == Decimal("400.00")

        out_tx = result.value.reseller_transaction
        assert out_tx.type == "transfer_out"
        assert out_tx.amount == Decimal("-300.00")
        assert out_tx.balance_before == Decimal("1000.00")
        assert out_tx.balance_after == Decimal("700.00")
        assert out_tx.to_reseller_id == "reseller_2"

        in_tx = result.value.sub_reseller_transaction
        assert in_tx.type == "transfer_in"
        assert in_tx.amount == Decimal("300.00")
        assert in_tx.balance_after == Decimal("400.00")
        assert in_tx.from_reseller_id == "reseller_1"
        assert in_tx.description == "Balance received from Zone Reseller"

        assert mock_reseller_transaction_repo.create.call_count == 2
        mock_uow.commit.assert_called_once()

    async def test_insufficient_balance(self, fund, mock_party_repo, mock_reseller_transaction_repo, parent, sub):
        mock_party_repo.get_by_id = resellers_by_id(parent, sub)

        result = await fund.execute(transfer("1000.01"))

        assert result.error.code == "INSUFFICIENT_BALANCE"
        assert parent.balance == Decimal("1000.00")
        mock_reseller_transaction_repo.create.assert_not_called()

    async def test_transfer_not_allowed(self, fund, mock_party_repo, parent, sub):
        parent.can_transfer_balance = False
        mock_party_repo.get_by_id = resellers_by_id(parent, sub)

        result = await fund.execute(transfer())

        assert result.error.code == "TRANSFER_NOT_ALLOWED"

    async def test_unrelated_reseller_rejected(self, fund, mock_party_repo, parent, sub):
        sub.parent_id = "reseller_9"
        mock_party_repo.get_by_id = resellers_by_id(parent, sub)

        result = await fund.execute(transfer())

        assert result.error.code == "SUB_RESELLER_NOT_FOUND"

    async def test_parent_not_found(self, fund):
        result = await fund.execute(transfer())

        assert result.error.code == "RESELLER_NOT_FOUND"


@pytest.mark.asyncio
class TestDeductSubReseller:

    async def test_deduct_returns_balance_to_parent(self, deduct, mock_party_repo, parent, sub):
        mock_party_repo.get_by_id = resellers_by_id(parent, sub)

        result = await deduct.execute(transfer("60"))

        assert result.is_ok()
        assert result.value.reseller_balance == Decimal("1060.00")
        assert result.value.sub_reseller_balance == Decimal("40.00")
        assert result.value.reseller_transaction.type == "transfer_in"
        assert result.value.sub_reseller_transaction.type == "deduction"
        assert result.value.sub_reseller_transaction.amount == Decimal("-60.00")

    async def test_deduct_ignores_transfer_permission(self, deduct, mock_party_repo, parent, sub):
        parent.can_transfer_balance = False
        mock_party_repo.get_by_id = resellers_by_id(parent, sub)

        result = await deduct.execute(transfer("60"))

        assert result.is_ok()

    async def test_sub_reseller_balance_checked(self, deduct, mock_party_repo, parent, sub):
        mock_party_repo.get_by_id = resellers_by_id(parent, sub)

        result = await deduct.execute(transfer("150"))

        assert result.error.code == "INSUFFICIENT_BALANCE"
        assert sub.balance == Decimal("100.00")


@pytest.mark.asyncio
class TestTopUpReseller:

    async def test_top_up(self, mock_uow, mock_party_repo, mock_ledger_repo, mock_reseller_transaction_repo, parent):
        mock_party_repo.get_by_id = AsyncMock(return_value=parent)
        use_case = TopUpReseller(mock_uow, mock_party_repo, mock_ledger_repo, mock_reseller_transaction_repo)

        result = await use_case.execute(TopUpResellerCommandDTO(reseller_id="reseller_1", amount=Decimal("500")))

        assert result.is_ok()
        assert result.value.type == "recharge"
        assert result.value.balance_after == Decimal("1500.00")
        assert result.value.description == "Balance recharge"


@pytest.fixture
def customer():
    return Customer(
        id="customer_1",
        tenant_id="tenant_isp01",
        name="Rahim Uddin",
        status=CustomerStatus.EXPIRED,
        expiry_date=date(2024, 3, 10),
        due_amount=Decimal("200.00"),
    )


@pytest.fixture
def recharge_from_reseller(
    mock_uow, mock_party_repo, mock_ledger_repo, mock_reseller_transaction_repo, mock_recharge_repo,
    mock_customer_payment_repo
):
    return RechargeCustomerFromReseller(
        mock_uow,
        mock_party_repo,
        mock_ledger_repo,
        mock_reseller_transaction_repo,
        mock_recharge_repo,
        mock_customer_payment_repo,
    )


def reseller_recharge(amount="500", months=1):
    return ResellerRechargeCustomerCommandDTO(
        reseller_id="reseller_1",
        customer_id="customer_1",
        amount=Decimal(amount),
        months=months,
        recharge_date=date(2024, 3, 1),
    )


@pytest.mark.asyncio
class TestRechargeCustomerFromReseller:

    async def test_reseller_pays_customer_renewal(
        self, recharge_from_reseller, mock_party_repo, mock_ledger_repo, mock_reseller_transaction_repo,
        mock_recharge_repo, mock_customer_payment_repo, mock_uow, parent, customer
    ):
        """
        Given: Reseller with 1000, customer expiring 2024-03-10 owing 200
        When: The reseller pays a 500 one-month renewal
        Then: Recharge completed via reseller_wallet, customer active and settled,
              reseller 500 with a customer_payment row
        """
        mock_party_repo.get_by_id = resellers_by_id(parent, customer)

        result = await recharge_from_reseller.execute(reseller_recharge())

        assert result.is_ok()
        assert result.value.reseller_balance == Decimal("500.00")

        recharge = result.value.recharge
        assert recharge.status == RechargeStatus.COMPLETED.value
        assert recharge.payment_method == "reseller_wallet"
        assert recharge.reseller_id == "reseller_1"
        assert recharge.old_expiry == date(2024, 3, 10)
        assert recharge.new_expiry == date(2024, 4, 9)
        assert recharge.customer_due_amount == Decimal("0.00")
        assert recharge.customer_status == "active"
        assert customer.last_payment_date == date(2024, 3, 1)

        tx = result.value.reseller_transaction
        assert tx.type == "customer_payment"
        assert tx.amount == Decimal("-500.00")
        assert tx.balance_before == Decimal("1000.00")
        assert tx.balance_after == Decimal("500.00")
        assert tx.customer_id == "customer_1"
        assert tx.description == "Recharge for Rahim Uddin (1 month)"

        entry_types = [call.args[0].entry_type for call in mock_ledger_repo.create.call_args_list]
        assert entry_types == [LedgerEntryType.RECHARGE_SETTLED, LedgerEntryType.CUSTOMER_RECHARGE]
        assert mock_customer_payment_repo.create.call_args[0][0].payment_method == "reseller_wallet"
        mock_uow.commit.assert_called_once()

    async def test_recharge_not_allowed(
        self, recharge_from_reseller, mock_party_repo, mock_recharge_repo, parent, customer
    ):
        parent.can_recharge_customers = False
        mock_party_repo.get_by_id = resellers_by_id(parent, customer)

        result = await recharge_from_reseller.execute(reseller_recharge())

        assert result.error.code == "RECHARGE_NOT_ALLOWED"
        mock_recharge_repo.create.assert_not_called()

    async def test_insufficient_balance_leaves_customer_untouched(
        self, recharge_from_reseller, mock_party_repo, mock_recharge_repo, mock_reseller_transaction_repo,
        mock_uow, parent, customer
    ):
        mock_party_repo.get_by_id = resellers_by_id(parent, customer)

        result = await recharge_from_reseller.execute(reseller_recharge("1000.01"))

        assert result.error.code == "INSUFFICIENT_BALANCE"
        assert parent.balance == Decimal("1000.00")
        assert customer.expiry_date == date(2024, 3, 10)
        mock_recharge_repo.create.assert_not_called()
        mock_reseller_transaction_repo.create.assert_not_called()
        mock_uow.commit.assert_not_called()

    async def test_customer_of_other_tenant_not_found(self, recharge_from_reseller, mock_party_repo, parent, customer):
        customer.tenant_id = "tenant_isp02"
        mock_party_repo.get_by_id = resellers_by_id(parent, customer)

        result = await recharge_from_reseller.execute(reseller_recharge())

        assert result.error.code == "CUSTOMER_NOT_FOUND"

    async def test_reseller_not_found(self, recharge_from_reseller):
        result = await recharge_from_reseller.execute(reseller_recharge())

        assert result.error.code == "RESELLER_NOT_FOUND"

    async def test_store_failure_rolls_back(
        self, recharge_from_reseller, mock_party_repo, mock_recharge_repo, mock_uow, parent, customer
    ):
        mock_party_repo.get_by_id = resellers_by_id(parent, customer)
        mock_recharge_repo.create = AsyncMock(side_effect=Exception("connection reset"))

        result = await recharge_from_reseller.execute(reseller_recharge())

        assert result.error.code == "RESELLER_RECHARGE_FAILED"
        mock_uow.rollback.assert_called_once()
        mock_uow.commit.assert_not_called()
