"""Invoice Repository Interface

Persistence contract for purchase bills and sales invoices.
"""

from abc import ABC, abstractmethod
from typing import Optional, List
from src.domain.invoice import Invoice, DocumentType, PaymentStatus


class InvoiceRepository(ABC):
    """
    Repository interface for bills and invoices

    Payment application locks the invoice through get_by_id(for_update=True)
    before changing paid_amount.
    """

    @abstractmethod
    async def create(self, invoice: Invoice) -> Invoice:
        """Persist a new bill or invoice (lines are stored separately)"""
        pass

    @abstractmethod
    async def get_by_id(self, invoice_id: str, for_update: bool = False) -> Optional[Invoice]:
        """
        Look up a bill or invoice

        Args:
            invoice_id: Invoice ID
            for_update: Lock the row until the unit of work ends

        Returns:
            The invoice, or None when it does not exist
        """
        pass

    @abstractmethod
    async def get_by_tenant_id(
        self,
        tenant_id: str,
        document_type: Optional[DocumentType] = None,
        party_id: Optional[str] = None,
        payment_status: Optional[PaymentStatus] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Invoice]:
        """
        Page through a tenant's documents, newest first

        Args:
            tenant_id: Tenant identifier
            document_type: Only bills or only invoices
            party_id: Only documents of this provider/client
            payment_status: Only due, partial or paid documents
            limit: Page size
            offset: Page start
        """
        pass

    @abstractmethod
    async def count_by_tenant_id(
        self,
        tenant_id: str,
        document_type: Optional[DocumentType] = None,
        party_id: Optional[str] = None,
        payment_status: Optional[PaymentStatus] = None,
    ) -> int:
        """Count documents matching the get_by_tenant_id filters"""
        pass

    @abstractmethod
    async def get_all(self, tenant_id: Optional[str] = None) -> List[Invoice]:
        """Every document of one tenant, or across tenants when tenant_id is None (reconciliation)"""
        pass

    @abstractmethod
    async def update(self, invoice: Invoice) -> Invoice:
        """Persist changed paid/due amounts and status"""
        pass

    @abstractmethod
    async def delete(self, invoice: Invoice) -> None:
        """Remove a document; its lines go with it"""
        pass
