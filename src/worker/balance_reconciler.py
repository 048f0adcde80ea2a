"""Balance Reconciliation Background Worker

Periodically checks cached party balances against the party ledger and
invoice due amounts against their totals, alerting when they drift.
Can be run as a standalone script or integrated with a scheduler.
"""

import asyncio
import logging
from datetime import datetime
from typing import Optional
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.adapter.repositories.party_repository import SqlAlchemyPartyRepository
from src.adapter.repositories.party_ledger_repository import SqlAlchemyPartyLedgerRepository
from src.adapter.repositories.invoice_repository import SqlAlchemyInvoiceRepository
from src.adapter.services.notification_service import create_notification_service
from src.app.services.notification_service import NotificationService
from src.app.use_cases.reconciliation import ReconcileBalances, ReconciliationReportDTO

logger = logging.getLogger(__name__)


class BalanceReconcilerWorker:
    """
    Background worker for balance reconciliation

    Features:
    - Compares cached balances against ledger sums for every party kind
    - Checks invoice due amounts and payment statuses
    - Sends an alert through the notification service when anything drifts
    - Can run once or continuously

    Usage:
        worker = BalanceReconcilerWorker()
        report = await worker.run_once()

        await worker.run_forever(interval_seconds=86400)
    """

    def __init__(
        self,
        db_uri: Optional[str] = None,
        notification_service: Optional[NotificationService] = None,
        tenant_id: Optional[str] = None,
    ):
        """
        Initialize the worker

        Args:
            db_uri: Database URI (defaults to ApplicationConfig.DB_URI)
            notification_service: Alert channel (defaults to log, plus webhook when configured)
            tenant_id: Restrict runs to one tenant
        """
        self.db_uri = db_uri or ApplicationConfig.DB_URI
        self.tenant_id = tenant_id
        self.notification_service = notification_service or create_notification_service(
            ApplicationConfig.RECONCILIATION_NOTIFICATION_WEBHOOK
        )

        self.engine = create_async_engine(self.db_uri, echo=False, future=True)
        self.async_session_factory = sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
        )

        logger.info("BalanceReconcilerWorker initialized")

    async def run_once(self) -> ReconciliationReportDTO:
        """
        Run reconciliation once

        Returns:
            ReconciliationReportDTO with reconciliation results

        Raises:
            RuntimeError: If the reconciliation itself fails
        """
        if not ApplicationConfig.RECONCILIATION_ENABLED:
            logger.info("Balance reconciliation is disabled, skipping")
            return ReconciliationReportDTO(
                parties_checked=0,
                invoices_checked=0,
                reconciliation_time=datetime.utcnow(),
                execution_time_ms=0,
            )

        async with self.async_session_factory() as session:
            use_case = ReconcileBalances(
                party_repo=SqlAlchemyPartyRepository(session),
                ledger_repo=SqlAlchemyPartyLedgerRepository(session),
                invoice_repo=SqlAlchemyInvoiceRepository(session),
            )

            result = await use_case.execute(tenant_id=self.tenant_id)

            if result.is_err():
                logger.error(f"Reconciliation failed: {result.error.message}")
                raise RuntimeError(f"Reconciliation failed: {result.error.message}")

            report = result.value

            if report.discrepancies_found > 0:
                logger.error(f"ALERT: {report.discrepancies_found} balance discrepancies found!")
                sent = await self.notification_service.send_discrepancy_alert(report)
                if not sent:
                    logger.error("Reconciliation alert could not be delivered")

            return report

    async def run_forever(self, interval_seconds: Optional[int] = None):
        """
        Run reconciliation continuously at specified interval

        Args:
            interval_seconds: Seconds between runs (default: RECONCILIATION_INTERVAL_SECONDS)
        """
        interval_seconds = interval_seconds or ApplicationConfig.RECONCILIATION_INTERVAL_SECONDS
        logger.info(f"Starting continuous balance reconciliation with {interval_seconds}s interval")

        while True:
            try:
                report = await self.run_once()
                logger.info(
                    f"Reconciliation cycle complete. "
                    f"Checked {report.parties_checked} parties and {report.invoices_checked} invoices, "
                    f"found {report.discrepancies_found} discrepancies "
                    f"in {report.execution_time_ms}ms"
                )
            except Exception as e:
                logger.error(f"Reconciliation cycle failed: {e}")

            await asyncio.sleep(interval_seconds)

    async def shutdown(self):
        """Cleanup resources"""
        await self.engine.dispose()
        logger.info("BalanceReconcilerWorker shutdown complete")


async def main():
    """
    Entry point for running the worker as a standalone script

    Usage:
        python -m src.worker.balance_reconciler --once
        python -m src.worker.balance_reconciler --interval 3600
        python -m src.worker.balance_reconciler --once --tenant tenant_isp01
    """
    import argparse

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    parser = argparse.ArgumentParser(description="Balance Reconciliation Worker")
    parser.add_argument("--once", action="store_true", help="Run once and exit")
    parser.add_argument(
        "--interval", type=int, default=None,
        help="Interval between runs in seconds (default: RECONCILIATION_INTERVAL_SECONDS)"
    )
    parser.add_argument("--tenant", default=None, help="Only reconcile this tenant")
    args = parser.parse_args()

    worker = BalanceReconcilerWorker(tenant_id=args.tenant)

    try:
        if args.once:
            report = await worker.run_once()
            print("Reconciliation complete:")
            print(f"  Parties checked: {report.parties_checked}")
            print(f"  Invoices checked: {report.invoices_checked}")
            print(f"  Discrepancies found: {report.discrepancies_found}")
            print(f"  Execution time: {report.execution_time_ms}ms")
            for d in report.party_discrepancies:
                print(
                    f"  - {d.party_kind} {d.party_id}: cached={d.cached_balance}, "
                    f"ledger={d.ledger_balance}, diff={d.difference}"
                )
            for d in report.invoice_discrepancies:
                print(
                    f"  - invoice {d.invoice_number}: due={d.due_amount} (expected {d.expected_due_amount}), "
                    f"status={d.payment_status} (expected {d.expected_payment_status})"
                )
        else:
            await worker.run_forever(interval_seconds=args.interval)
    except KeyboardInterrupt:
        logger.info("Received shutdown signal")
    finally:
        await worker.shutdown()


if __name__ == "__main__":
    asyncio.run(main())
