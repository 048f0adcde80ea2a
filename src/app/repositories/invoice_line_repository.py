"""Invoice Line Repository Interface

Defines the contract for invoice line persistence operations.
"""

from abc import ABC, abstractmethod
from typing import List
from src.domain.invoice_line import InvoiceLine


class InvoiceLineRepository(ABC):
    """
    Repository interface for InvoiceLine persistence

    Provides access to invoice line items for billing operations.
    """

    @abstractmethod
    async def get_by_invoice_id(self, invoice_id: str) -> List[InvoiceLine]:
        """
        Retrieve all line items for an invoice

        Args:
            invoice_id: Invoice ID

        Returns:
            List of InvoiceLine items
        """
        pass

    @abstractmethod
    async def create_many(self, invoice_lines: List[InvoiceLine]) -> List[InvoiceLine]:
        """
        Create multiple invoice line items in one flush

        Args:
            invoice_lines: List of InvoiceLine entities to persist

        Returns:
            List of created InvoiceLine items
        """
        pass

    @abstractmethod
    async def delete_by_invoice_id(self, invoice_id: str) -> int:
        """
        Delete all line items of an invoice

        Args:
            invoice_id: Invoice ID

        Returns:
            Number of deleted lines
        """
        pass
