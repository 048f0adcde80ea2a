"""Activity Log Repository Interface"""

from abc import ABC, abstractmethod
from typing import List
from src.domain.activity_log import ActivityLog


class ActivityLogRepository(ABC):
    """Repository interface for the administrative audit trail"""

    @abstractmethod
    async def create(self, log: ActivityLog) -> ActivityLog:
        """
        Append an activity log entry

        Args:
            log: ActivityLog entity to persist

        Returns:
            Created ActivityLog
        """
        pass

    @abstractmethod
    async def get_by_entity(self, entity_type: str, entity_id: str) -> List[ActivityLog]:
        """
        Retrieve the audit trail of one entity

        Args:
            entity_type: Entity type (e.g. "payment", "invoice", "recharge")
            entity_id: Entity ID

        Returns:
            List of entries, oldest first
        """
        pass
