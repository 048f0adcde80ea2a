"""Reseller Transaction Repository Interface"""

from abc import ABC, abstractmethod
from typing import List
from src.domain.reseller_transaction import ResellerTransaction


class ResellerTransactionRepository(ABC):
    """Repository interface for reseller wallet transactions (append-only)"""

    @abstractmethod
    async def create(self, transaction: ResellerTransaction) -> ResellerTransaction:
        """
        Create a reseller transaction

        Args:
            transaction: ResellerTransaction entity to persist

        Returns:
            Created ResellerTransaction
        """
        pass

    @abstractmethod
    async def get_by_reseller_id(
        self,
        reseller_id: str,
        limit: int = 50,
        offset: int = 0,
    ) -> List[ResellerTransaction]:
        """
        Retrieve transactions of a reseller

        Args:
            reseller_id: Reseller ID
            limit: Maximum number of transactions to return
            offset: Offset for pagination

        Returns:
            List of transactions, newest first
        """
        pass

    @abstractmethod
    async def count_by_reseller_id(self, reseller_id: str) -> int:
        pass
