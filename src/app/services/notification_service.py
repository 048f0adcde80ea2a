"""Notification Service Interface

Defines the contract for sending alerts about reconciliation discrepancies.
"""

from abc import ABC, abstractmethod
from src.app.use_cases.reconciliation.dtos import ReconciliationReportDTO


class NotificationService(ABC):
    """
    Abstract notification service for sending alerts

    Implementations can send notifications via:
    - Log output
    - Webhook (HTTP POST)
    """

    @abstractmethod
    async def send_discrepancy_alert(self, report: ReconciliationReportDTO) -> bool:
        """
        Send alert for a reconciliation run that found discrepancies

        Args:
            report: ReconciliationReportDTO with the discrepancies found

        Returns:
            True if notification sent successfully, False otherwise
        """
        pass
