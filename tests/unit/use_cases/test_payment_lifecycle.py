"""Unit tests for RecordPayment, EditPayment and DeletePayment use cases

Walks one purchase bill of 10000 through pay 4000, edit to 6000 and delete,
checking invoice paid/due/status and the provider balance at each step.
"""

import pytest
from datetime import date
from decimal import Decimal
from unittest.mock import AsyncMock

from src.app.use_cases.payments import (
    RecordPayment,
    EditPayment,
    DeletePayment,
    RecordPaymentCommandDTO,
    EditPaymentCommandDTO,
    DeletePaymentCommandDTO,
)
from src.domain.invoice import Invoice, DocumentType
from src.domain.party import Provider, Client, PartyKind
from src.domain.party_ledger_entry import LedgerEntryType
from src.domain.payment import Payment, PaymentType


@pytest.fixture
def provider():
    return Provider(id="provider_1", tenant_id="tenant_isp01", name="Upstream Transit", total_due=Decimal("10000.00"))


@pytest.fixture
def bill():
    invoice = Invoice(
        id="bill_1",
        tenant_id="tenant_isp01",
        document_type=DocumentType.PURCHASE_BILL,
        invoice_number="PB-TEST0001",
        party_kind=PartyKind.PROVIDER,
        party_id="provider_1",
        billing_date=date(2024, 1, 1),
        total_amount=Decimal("10000.00"),
    )
    invoice.recalculate()
    return invoice


@pytest.fixture
def payment():
    return Payment(
        id="payment_1",
        tenant_id="tenant_isp01",
        payment_type=PaymentType.PROVIDER_PAYMENT,
        payment_number="PP-TEST0001",
        invoice_id="bill_1",
        party_kind=PartyKind.PROVIDER,
        party_id="provider_1",
        amount=Decimal("4000.00"),
        payment_method="bank",
        payment_date=date(2024, 1, 5),
    )


@pytest.fixture
def record_use_case(mock_uow, mock_party_repo, mock_ledger_repo, mock_invoice_repo, mock_payment_repo):
    return RecordPayment(mock_uow, mock_party_repo, mock_ledger_repo, mock_invoice_repo, mock_payment_repo)


@pytest.fixture
def edit_use_case(mock_uow, mock_party_repo, mock_ledger_repo, mock_invoice_repo, mock_payment_repo, mock_activity_log_repo):
    return EditPayment(
        mock_uow, mock_party_repo, mock_ledger_repo, mock_invoice_repo, mock_payment_repo, mock_activity_log_repo
    )


@pytest.fixture
def delete_use_case(mock_uow, mock_party_repo, mock_ledger_repo, mock_invoice_repo, mock_payment_repo, mock_activity_log_repo):
    return DeletePayment(
        mock_uow, mock_party_repo, mock_ledger_repo, mock_invoice_repo, mock_payment_repo, mock_activity_log_repo
    )


def record_command(**overrides):
    data = dict(
        tenant_id="tenant_isp01",
        payment_type=PaymentType.PROVIDER_PAYMENT,
        party_id="provider_1",
        invoice_id="bill_1",
        amount=Decimal("4000"),
        payment_method="bank",
    )
    data.update(overrides)
    return RecordPaymentCommandDTO(**data)


@pytest.mark.asyncio
class TestRecordPayment:

    async def test_partial_payment_against_bill(
        self, record_use_case, mock_party_repo, mock_invoice_repo, mock_ledger_repo, mock_uow, provider, bill
    ):
        """
        Given: Bill of 10000, provider owes 10000
        When: 4000 is paid against the bill
        Then: Bill partial with 6000 due, provider owes 6000
        """
        mock_party_repo.get_by_id = AsyncMock(return_value=provider)
        mock_invoice_repo.get_by_id = AsyncMock(return_value=bill)

        result = await record_use_case.execute(record_command())

        assert result.is_ok()
        response = result.value
        assert response.payment_number.startswith("PP-")
        assert response.invoice_paid_amount == Decimal("4000.00")
        assert response.invoice_due_amount == Decimal("6000.00")
        assert response.invoice_payment_status == "partial"
        assert response.party_balance == Decimal("6000.00")

        entry = mock_ledger_repo.create.call_args[0][0]
        assert entry.entry_type == LedgerEntryType.PAYMENT_APPLIED
        assert entry.amount == Decimal("-4000.00")
        mock_invoice_repo.get_by_id.assert_called_once_with("bill_1", for_update=True)
        mock_uow.commit.assert_called_once()

    async def test_payment_without_invoice_floors_balance(
        self, record_use_case, mock_party_repo, mock_ledger_repo, mock_invoice_repo
    ):
        client = Client(id="client_1", tenant_id="tenant_isp01", name="Office Park", total_receivable=Decimal("300"))
        mock_party_repo.get_by_id = AsyncMock(return_value=client)

        result = await record_use_case.execute(
            record_command(payment_type=PaymentType.COLLECTION, party_id="client_1", invoice_id=None, amount=Decimal("500"))
        )

        assert result.is_ok()
        assert result.value.payment_number.startswith("RC-")
        assert result.value.invoice_id is None
        assert client.total_receivable == Decimal("0.00")
        entry = mock_ledger_repo.create.call_args[0][0]
        assert entry.amount == Decimal("-300.00")
        mock_invoice_repo.get_by_id.assert_not_called()

    async def test_invoice_not_found(self, record_use_case, mock_party_repo, mock_invoice_repo, mock_payment_repo, provider):
        mock_party_repo.get_by_id = AsyncMock(return_value=provider)
        mock_invoice_repo.get_by_id = AsyncMock(return_value=None)

        result = await record_use_case.execute(record_command())

        assert result.error.code == "INVOICE_NOT_FOUND"
        mock_payment_repo.create.assert_not_called()

    async def test_invoice_of_other_party_rejected(self, record_use_case, mock_party_repo, mock_invoice_repo, provider, bill):
        bill.party_id = "provider_2"
        mock_party_repo.get_by_id = AsyncMock(return_value=provider)
        mock_invoice_repo.get_by_id = AsyncMock(return_value=bill)

        result = await record_use_case.execute(record_command())

        assert result.error.code == "INVOICE_PARTY_MISMATCH"

    async def test_collection_cannot_settle_purchase_bill(self, record_use_case, mock_party_repo, mock_invoice_repo, bill):
        client = Client(id="provider_1", tenant_id="tenant_isp01", name="Same id, other kind")
        mock_party_repo.get_by_id = AsyncMock(return_value=client)
        mock_invoice_repo.get_by_id = AsyncMock(return_value=bill)

        result = await record_use_case.execute(record_command(payment_type=PaymentType.COLLECTION))

        assert result.error.code == "INVOICE_PARTY_MISMATCH"

    async def test_party_not_found(self, record_use_case, mock_party_repo):
        result = await record_use_case.execute(record_command())

        assert result.error.code == "PARTY_NOT_FOUND"

    async def test_store_failure_rolls_back(self, record_use_case, mock_party_repo, mock_invoice_repo, mock_payment_repo, mock_uow, provider, bill):
        mock_party_repo.get_by_id = AsyncMock(return_value=provider)
        mock_invoice_repo.get_by_id = AsyncMock(return_value=bill)
        mock_payment_repo.create = AsyncMock(side_effect=Exception("Database error"))

        result = await record_use_case.execute(record_command())

        assert result.error.code == "RECORD_PAYMENT_FAILED"
        mock_uow.rollback.assert_called_once()


@pytest.mark.asyncio
class TestEditPayment:

    async def test_increase_amount_moves_invoice_and_party(
        self, edit_use_case, mock_party_repo, mock_invoice_repo, mock_payment_repo, mock_ledger_repo,
        mock_activity_log_repo, provider, bill, payment
    ):
        """
        Given: Bill partial at 4000 paid, provider owes 6000
        When: Payment is edited from 4000 to 6000
        Then: Bill due 4000, provider owes 4000, audit entry written
        """
        bill.apply_payment(Decimal("4000"))
        provider.total_due = Decimal("6000.00")
        mock_payment_repo.get_by_id = AsyncMock(return_value=payment)
        mock_invoice_repo.get_by_id = AsyncMock(return_value=bill)
        mock_party_repo.get_by_id = AsyncMock(return_value=provider)

        result = await edit_use_case.execute(
            EditPaymentCommandDTO(payment_id="payment_1", amount=Decimal("6000"), actor="accounts")
        )

        assert result.is_ok()
        assert result.value.amount == Decimal("6000.00")
        assert result.value.invoice_due_amount == Decimal("4000.00")
        assert result.value.invoice_payment_status == "partial"
        assert provider.total_due == Decimal("4000.00")

        entry = mock_ledger_repo.create.call_args[0][0]
        assert entry.entry_type == LedgerEntryType.PAYMENT_ADJUSTED
        assert entry.amount == Decimal("-2000.00")

        log = mock_activity_log_repo.create.call_args[0][0]
        assert log.action == "update_payment"
        assert log.actor == "accounts"
        assert log.details["old_amount"] == "4000.00"
        assert log.details["new_amount"] == "6000.00"

    async def test_previous_amount_hint_used_for_delta(
        self, edit_use_case, mock_party_repo, mock_invoice_repo, mock_payment_repo, provider, bill, payment
    ):
        bill.apply_payment(Decimal("4000"))
        provider.total_due = Decimal("6000.00")
        mock_payment_repo.get_by_id = AsyncMock(return_value=payment)
        mock_invoice_repo.get_by_id = AsyncMock(return_value=bill)
        mock_party_repo.get_by_id = AsyncMock(return_value=provider)

        result = await edit_use_case.execute(
            EditPaymentCommandDTO(payment_id="payment_1", amount=Decimal("6000"), previous_amount=Decimal("5000"))
        )

        assert result.is_ok()
        assert bill.paid_amount == Decimal("5000.00")
        assert provider.total_due == Decimal("5000.00")

    async def test_same_amount_only_updates_fields(
        self, edit_use_case, mock_party_repo, mock_invoice_repo, mock_payment_repo, mock_ledger_repo,
        mock_activity_log_repo, provider, bill, payment
    ):
        mock_payment_repo.get_by_id = AsyncMock(return_value=payment)
        mock_invoice_repo.get_by_id = AsyncMock(return_value=bill)
        mock_party_repo.get_by_id = AsyncMock(return_value=provider)

        result = await edit_use_case.execute(
            EditPaymentCommandDTO(payment_id="payment_1", remarks="Cheque #1142")
        )

        assert result.is_ok()
        assert result.value.remarks == "Cheque #1142"
        mock_invoice_repo.update.assert_not_called()
        mock_ledger_repo.create.assert_not_called()
        mock_activity_log_repo.create.assert_called_once()

    async def test_decrease_on_floored_payment_absorbs_unapplied_part(
        self, edit_use_case, mock_party_repo, mock_invoice_repo, mock_payment_repo, mock_ledger_repo
    ):
        """
        Given: A 1200 collection on a 1000 invoice; the zero floor only took 1000 off the client
        When: Payment is edited from 1200 to 900
        Then: The first 200 of the reduction is absorbed, the client owes 100 again
        """
        client = Client(id="client_1", tenant_id="tenant_isp01", name="Office Park", total_receivable=Decimal("0.00"))
        invoice = Invoice(
            id="si_1",
            tenant_id="tenant_isp01",
            document_type=DocumentType.SALES_INVOICE,
            invoice_number="SI-TEST0001",
            party_kind=PartyKind.CLIENT,
            party_id="client_1",
            billing_date=date(2024, 1, 1),
            total_amount=Decimal("1000.00"),
        )
        invoice.apply_payment(Decimal("1200"))
        collection = Payment(
            id="payment_2",
            tenant_id="tenant_isp01",
            payment_type=PaymentType.COLLECTION,
            payment_number="CL-TEST0001",
            invoice_id="si_1",
            party_kind=PartyKind.CLIENT,
            party_id="client_1",
            amount=Decimal("1200.00"),
            payment_date=date(2024, 1, 5),
        )
        mock_payment_repo.get_by_id = AsyncMock(return_value=collection)
        mock_invoice_repo.get_by_id = AsyncMock(return_value=invoice)
        mock_party_repo.get_by_id = AsyncMock(return_value=client)
        mock_ledger_repo.get_sum_by_reference = AsyncMock(return_value=Decimal("-1000.00"))

        result = await edit_use_case.execute(EditPaymentCommandDTO(payment_id="payment_2", amount=Decimal("900")))

        assert result.is_ok()
        assert result.value.invoice_due_amount == Decimal("100.00")
        assert client.total_receivable == Decimal("100.00")
        entry = mock_ledger_repo.create.call_args[0][0]
        assert entry.amount == Decimal("100.00")

    async def test_small_decrease_on_floored_payment_leaves_balance(
        self, edit_use_case, mock_party_repo, mock_invoice_repo, mock_payment_repo, mock_ledger_repo
    ):
        client = Client(id="client_1", tenant_id="tenant_isp01", name="Office Park", total_receivable=Decimal("0.00"))
        collection = Payment(
            id="payment_2",
            tenant_id="tenant_isp01",
            payment_type=PaymentType.COLLECTION,
            payment_number="CL-TEST0002",
            party_kind=PartyKind.CLIENT,
            party_id="client_1",
            amount=Decimal("1200.00"),
            payment_date=date(2024, 1, 5),
        )
        mock_payment_repo.get_by_id = AsyncMock(return_value=collection)
        mock_party_repo.get_by_id = AsyncMock(return_value=client)
        mock_ledger_repo.get_sum_by_reference = AsyncMock(return_value=Decimal("-1000.00"))

        result = await edit_use_case.execute(EditPaymentCommandDTO(payment_id="payment_2", amount=Decimal("1100")))

        assert result.is_ok()
        assert client.total_receivable == Decimal("0.00")
        mock_ledger_repo.create.assert_not_called()

    async def test_payment_not_found(self, edit_use_case, mock_uow):
        result = await edit_use_case.execute(EditPaymentCommandDTO(payment_id="missing", amount=Decimal("50")))

        assert result.error.code == "PAYMENT_NOT_FOUND"
        mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
class TestDeletePayment:

    async def test_delete_restores_invoice_and_party(
        self, delete_use_case, mock_party_repo, mock_invoice_repo, mock_payment_repo, mock_ledger_repo,
        mock_activity_log_repo, mock_uow, provider, bill, payment
    ):
        """
        Given: Bill with 6000 paid (due 4000), provider owes 4000
        When: The 6000 payment is deleted
        Then: Bill back to due 10000, provider owes 10000
        """
        payment.amount = Decimal("6000.00")
        bill.apply_payment(Decimal("6000"))
        provider.total_due = Decimal("4000.00")
        mock_payment_repo.get_by_id = AsyncMock(return_value=payment)
        mock_ledger_repo.get_sum_by_reference = AsyncMock(return_value=Decimal("-6000.00"))
        mock_invoice_repo.get_by_id = AsyncMock(return_value=bill)
        mock_party_repo.get_by_id = AsyncMock(return_value=provider)

        result = await delete_use_case.execute(DeletePaymentCommandDTO(payment_id="payment_1"))

        assert result.is_ok()
        assert result.value.invoice_paid_amount == Decimal("0")
        assert result.value.invoice_due_amount == Decimal("10000.00")
        assert result.value.invoice_payment_status == "due"
        assert result.value.party_balance == Decimal("10000.00")

        entry = mock_ledger_repo.create.call_args[0][0]
        assert entry.entry_type == LedgerEntryType.PAYMENT_REVERSED
        assert entry.amount == Decimal("6000.00")
        mock_payment_repo.delete.assert_called_once_with(payment)
        assert mock_activity_log_repo.create.call_args[0][0].action == "delete_payment"
        mock_ledger_repo.get_sum_by_reference.assert_called_once_with("payment", "payment_1")
        mock_uow.commit.assert_called_once()

    async def test_delete_floored_payment_reverses_only_applied_amount(
        self, delete_use_case, mock_party_repo, mock_invoice_repo, mock_payment_repo, mock_ledger_repo
    ):
        """
        Given: A 1200 collection on a 1000 invoice that only took 1000 off the client
        When: The collection is deleted
        Then: Invoice due 1000 and the client owes 1000, not 1200
        """
        client = Client(id="client_1", tenant_id="tenant_isp01", name="Office Park", total_receivable=Decimal("0.00"))
        invoice = Invoice(
            id="si_1",
            tenant_id="tenant_isp01",
            document_type=DocumentType.SALES_INVOICE,
            invoice_number="SI-TEST0001",
            party_kind=PartyKind.CLIENT,
            party_id="client_1",
            billing_date=date(2024, 1, 1),
            total_amount=Decimal("1000.00"),
        )
        invoice.apply_payment(Decimal("1200"))
        collection = Payment(
            id="payment_2",
            tenant_id="tenant_isp01",
            payment_type=PaymentType.COLLECTION,
            payment_number="CL-TEST0001",
            invoice_id="si_1",
            party_kind=PartyKind.CLIENT,
            party_id="client_1",
            amount=Decimal("1200.00"),
            payment_date=date(2024, 1, 5),
        )
        mock_payment_repo.get_by_id = AsyncMock(return_value=collection)
        mock_invoice_repo.get_by_id = AsyncMock(return_value=invoice)
        mock_party_repo.get_by_id = AsyncMock(return_value=client)
        mock_ledger_repo.get_sum_by_reference = AsyncMock(return_value=Decimal("-1000.00"))

        result = await delete_use_case.execute(DeletePaymentCommandDTO(payment_id="payment_2"))

        assert result.is_ok()
        assert result.value.invoice_due_amount == Decimal("1000.00")
        assert result.value.party_balance == Decimal("1000.00")
        entry = mock_ledger_repo.create.call_args[0][0]
        assert entry.amount == Decimal("1000.00")

    async def test_payment_not_found(self, delete_use_case, mock_payment_repo):
        result = await delete_use_case.execute(DeletePaymentCommandDTO(payment_id="missing"))

        assert result.error.code == "PAYMENT_NOT_FOUND"
        mock_payment_repo.delete.assert_not_called()
