"""Customer Wallet Transaction Repository Interface"""

from abc import ABC, abstractmethod
from typing import List
from src.domain.wallet_transaction import WalletTransaction


class WalletTransactionRepository(ABC):
    """Repository interface for customer wallet movements (append-only)"""

    @abstractmethod
    async def create(self, transaction: WalletTransaction) -> WalletTransaction:
        pass

    @abstractmethod
    async def get_by_customer_id(self, customer_id: str, limit: int = 50, offset: int = 0) -> List[WalletTransaction]:
        """
        Retrieve wallet movements of a customer

        Args:
            customer_id: Customer ID
            limit: Maximum number of rows
            offset: Offset for pagination

        Returns:
            List of wallet transactions, newest first
        """
        pass
