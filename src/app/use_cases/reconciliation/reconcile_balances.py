"""ReconcileBalances Use Case

Checks every cached party balance against its ledger and every invoice's
due amount and status against its totals.
"""

import logging
import time
from datetime import datetime
from typing import Optional
from libs.result import Result, Return, Error
from src.app.repositories.party_repository import PartyRepository
from src.app.repositories.party_ledger_repository import PartyLedgerRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.base import money
from src.domain.invoice import derive_due_amount, derive_payment_status
from src.domain.party import PartyKind, balance_of
from .dtos import PartyBalanceDiscrepancyDTO, InvoiceDiscrepancyDTO, ReconciliationReportDTO

logger = logging.getLogger(__name__)


class ReconcileBalances:
    """
    Use Case: Reconcile cached balances against the party ledger

    Business Rules:
    1. For every party: cached balance must equal the sum of its ledger entries
    2. For every invoice: due_amount == max(0, total - paid) and the
       payment status matches the derived status
    3. Does NOT modify any data (read-only reconciliation)

    Flow:
    1. For each party kind, compare each party with its ledger sum
    2. Check each invoice's derived fields
    3. Return report with all discrepancies
    """

    def __init__(
        self,
        party_repo: PartyRepository,
        ledger_repo: PartyLedgerRepository,
        invoice_repo: InvoiceRepository,
    ):
        self.party_repo = party_repo
        self.ledger_repo = ledger_repo
        self.invoice_repo = invoice_repo

    async def execute(self, tenant_id: Optional[str] = None) -> Result[ReconciliationReportDTO]:
        """
        Execute balance reconciliation

        Args:
            tenant_id: Restrict the run to one tenant (None = all tenants)

        Returns:
            Result[ReconciliationReportDTO]: Report with any discrepancies
        """
        start_time = time.time()
        reconciliation_time = datetime.utcnow()

        try:
            logger.info("Starting balance reconciliation")

            # Step 1: Parties
            party_discrepancies: list[PartyBalanceDiscrepancyDTO] = []
            parties_checked = 0

            for kind in PartyKind:
                parties = await self.party_repo.list_by_kind(kind, tenant_id=tenant_id)
                for party in parties:
                    parties_checked += 1
                    cached = money(balance_of(party))
                    ledger_sum = money(await self.ledger_repo.get_sum(kind, party.id))

                    if cached != ledger_sum:
                        party_discrepancies.append(
                            PartyBalanceDiscrepancyDTO(
                                tenant_id=party.tenant_id,
                                party_kind=kind.value,
                                party_id=party.id,
                                party_name=party.name,
                                cached_balance=cached,
                                ledger_balance=ledger_sum,
                                difference=cached - ledger_sum,
                            )
                        )
                        logger.warning(
                            f"Balance discrepancy for {kind.value} {party.id} (tenant {party.tenant_id}): "
                            f"cached={cached}, ledger_sum={ledger_sum}, difference={cached - ledger_sum}"
                        )

            # Step 2: Invoices
            invoice_discrepancies: list[InvoiceDiscrepancyDTO] = []
            invoices = await self.invoice_repo.get_all(tenant_id=tenant_id)

            for invoice in invoices:
                expected_due = derive_due_amount(invoice.total_amount, invoice.paid_amount)
                expected_status = derive_payment_status(money(invoice.total_amount), money(invoice.paid_amount))

                if money(invoice.due_amount) != expected_due or invoice.payment_status != expected_status:
                    invoice_discrepancies.append(
                        InvoiceDiscrepancyDTO(
                            tenant_id=invoice.tenant_id,
                            invoice_id=invoice.id,
                            invoice_number=invoice.invoice_number,
                            total_amount=invoice.total_amount,
                            paid_amount=invoice.paid_amount,
                            due_amount=invoice.due_amount,
                            expected_due_amount=expected_due,
                            payment_status=invoice.payment_status.value,
                            expected_payment_status=expected_status.value,
                        )
                    )
                    logger.warning(
                        f"Invoice discrepancy for {invoice.invoice_number}: "
                        f"due={invoice.due_amount} (expected {expected_due}), "
                        f"status={invoice.payment_status.value} (expected {expected_status.value})"
                    )

            # Step 3: Build report
            execution_time_ms = int((time.time() - start_time) * 1000)

            report = ReconciliationReportDTO(
                parties_checked=parties_checked,
                invoices_checked=len(invoices),
                party_discrepancies=party_discrepancies,
                invoice_discrepancies=invoice_discrepancies,
                reconciliation_time=reconciliation_time,
                execution_time_ms=execution_time_ms,
            )

            if report.discrepancies_found:
                logger.warning(
                    f"Reconciliation complete. Found {report.discrepancies_found} discrepancies "
                    f"across {parties_checked} parties and {len(invoices)} invoices in {execution_time_ms}ms"
                )
            else:
                logger.info(
                    f"Reconciliation complete. All {parties_checked} parties and {len(invoices)} invoices "
                    f"balanced in {execution_time_ms}ms"
                )

            return Return.ok(report)

        except Exception as e:
            logger.error(f"Balance reconciliation failed: {e}")
            return Return.err(
                Error(
                    code="RECONCILIATION_FAILED",
                    message="Failed to reconcile balances",
                    reason=str(e),
                )
            )
