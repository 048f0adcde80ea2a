"""Customer Recharge Repository Interface"""

from abc import ABC, abstractmethod
from typing import Optional, List
from src.domain.customer_recharge import CustomerRecharge, RechargeStatus


class CustomerRechargeRepository(ABC):
    """
    Repository interface for CustomerRecharge persistence

    Status transitions lock the recharge with SELECT FOR UPDATE so that a
    recharge cannot be verified and rejected concurrently.
    """

    @abstractmethod
    async def create(self, recharge: CustomerRecharge) -> CustomerRecharge:
        """
        Create a new recharge

        Args:
            recharge: CustomerRecharge entity to persist

        Returns:
            Created CustomerRecharge
        """
        pass

    @abstractmethod
    async def get_by_id(self, recharge_id: str, for_update: bool = False) -> Optional[CustomerRecharge]:
        """
        Retrieve recharge by ID

        Args:
            recharge_id: Recharge ID
            for_update: If True, lock the row with SELECT FOR UPDATE

        Returns:
            CustomerRecharge if found, None otherwise
        """
        pass

    @abstractmethod
    async def update(self, recharge: CustomerRecharge) -> CustomerRecharge:
        pass

    @abstractmethod
    async def get_by_tenant_id(
        self,
        tenant_id: str,
        customer_id: Optional[str] = None,
        status: Optional[RechargeStatus] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[CustomerRecharge]:
        """
        Retrieve recharges by tenant ID

        Args:
            tenant_id: Tenant identifier
            customer_id: Optional filter by customer
            status: Optional filter by status
            limit: Maximum number of recharges to return
            offset: Offset for pagination

        Returns:
            List of recharges, newest first
        """
        pass
