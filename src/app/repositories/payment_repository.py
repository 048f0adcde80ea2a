"""Payment Repository Interface

Defines the contract for collection/provider payment persistence.
"""

from abc import ABC, abstractmethod
from typing import Optional, List
from src.domain.payment import Payment, PaymentType


class PaymentRepository(ABC):
    """
    Repository interface for Payment persistence

    get_by_id supports SELECT FOR UPDATE so that edit and delete can lock
    the payment before touching its invoice and party.
    """

    @abstractmethod
    async def create(self, payment: Payment) -> Payment:
        """
        Create a new payment

        Args:
            payment: Payment entity to persist

        Returns:
            Created Payment
        """
        pass

    @abstractmethod
    async def get_by_id(self, payment_id: str, for_update: bool = False) -> Optional[Payment]:
        """
        Retrieve payment by ID

        Args:
            payment_id: Payment ID
            for_update: If True, lock the row with SELECT FOR UPDATE

        Returns:
            Payment if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_by_invoice_id(self, invoice_id: str) -> List[Payment]:
        """
        Retrieve all payments applied to an invoice

        Args:
            invoice_id: Invoice ID

        Returns:
            List of payments, oldest first
        """
        pass

    @abstractmethod
    async def get_by_tenant_id(
        self,
        tenant_id: str,
        payment_type: Optional[PaymentType] = None,
        party_id: Optional[str] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Payment]:
        """
        Retrieve payments by tenant ID

        Args:
            tenant_id: Tenant identifier
            payment_type: Optional filter by payment type
            party_id: Optional filter by party
            limit: Maximum number of payments to return
            offset: Offset for pagination

        Returns:
            List of payments, newest first
        """
        pass

    @abstractmethod
    async def update(self, payment: Payment) -> Payment:
        """
        Update an existing payment

        Args:
            payment: Payment entity with updated values

        Returns:
            Updated Payment
        """
        pass

    @abstractmethod
    async def delete(self, payment: Payment) -> None:
        """
        Delete a payment

        Args:
            payment: Payment entity to delete
        """
        pass
