"""Reconciliation alert channels

Log-only alerts for development, a JSON webhook for operations, and a
fan-out wrapper that tries every configured channel.
"""

import logging
from typing import Optional
import httpx
from src.app.services.notification_service import NotificationService
from src.app.use_cases.reconciliation.dtos import ReconciliationReportDTO

logger = logging.getLogger(__name__)

ALERT_TYPE = "reconciliation_alert"


class LoggingNotificationService(NotificationService):
    """Writes one warning line per drifting party balance or invoice"""

    async def send_discrepancy_alert(self, report: ReconciliationReportDTO) -> bool:
        logger.warning(
            f"[RECONCILIATION ALERT] {report.discrepancies_found} discrepancies "
            f"({len(report.party_discrepancies)} party balances, "
            f"{len(report.invoice_discrepancies)} invoices) "
            f"at {report.reconciliation_time.isoformat()}"
        )
        for item in report.party_discrepancies:
            logger.warning(
                f"[RECONCILIATION ALERT] {item.party_kind} {item.party_id} ({item.party_name}): "
                f"cached={item.cached_balance}, ledger={item.ledger_balance}, difference={item.difference}"
            )
        for item in report.invoice_discrepancies:
            logger.warning(
                f"[RECONCILIATION ALERT] invoice {item.invoice_number}: "
                f"due={item.due_amount} expected={item.expected_due_amount}, "
                f"status={item.payment_status} expected={item.expected_payment_status}"
            )
        return True


class WebhookNotificationService(NotificationService):
    """
    POSTs the full reconciliation report as JSON

    The body is the report itself plus a "type" discriminator so one
    operations endpoint can receive several alert kinds.
    """

    def __init__(self, webhook_url: str, timeout: float = 10.0):
        self.webhook_url = webhook_url
        self.timeout = timeout

    async def send_discrepancy_alert(self, report: ReconciliationReportDTO) -> bool:
        """
        Deliver the report to the webhook

        Returns:
            False when the endpoint is unreachable or answers with an error status
        """
        body = {"type": ALERT_TYPE, **report.model_dump(mode="json")}

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(self.webhook_url, json=body)
                response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(f"Reconciliation webhook {self.webhook_url} failed: {e}")
            return False

        logger.info(f"Reconciliation report delivered to {self.webhook_url}")
        return True


class CompositeNotificationService(NotificationService):
    """Fans an alert out to every channel; delivered if any channel accepts it"""

    def __init__(self, services: list[NotificationService]):
        self.services = services

    async def send_discrepancy_alert(self, report: ReconciliationReportDTO) -> bool:
        delivered = []
        for channel in self.services:
            try:
                delivered.append(await channel.send_discrepancy_alert(report))
            except Exception as e:
                logger.error(f"Alert channel {type(channel).__name__} raised: {e}")
                delivered.append(False)
        return any(delivered)


def create_notification_service(webhook_url: Optional[str] = None) -> NotificationService:
    """
    Build the alert channel for the reconciler

    Always logs; adds the webhook when RECONCILIATION_NOTIFICATION_WEBHOOK is set.
    """
    logging_channel = LoggingNotificationService()
    if not webhook_url:
        return logging_channel
    return CompositeNotificationService([logging_channel, WebhookNotificationService(webhook_url)])
