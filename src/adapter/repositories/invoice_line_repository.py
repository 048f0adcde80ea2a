"""SQLAlchemy Invoice Line Repository Implementation

Implements invoice line persistence using SQLAlchemy async session.
"""

from typing import List
from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.invoice_line_repository import InvoiceLineRepository
from src.domain.invoice_line import InvoiceLine


class SqlAlchemyInvoiceLineRepository(InvoiceLineRepository):
    """
    SQLAlchemy implementation of InvoiceLineRepository

    Uses async session for database operations.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_invoice_id(self, invoice_id: str) -> List[InvoiceLine]:
        """
        Retrieve all line items for an invoice

        Args:
            invoice_id: Invoice ID

        Returns:
            List of InvoiceLine items in insertion order
        """
        statement = (
            select(InvoiceLine)
            .where(InvoiceLine.invoice_id == invoice_id)
            .order_by(InvoiceLine.created_at)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def create_many(self, invoice_lines: List[InvoiceLine]) -> List[InvoiceLine]:
        """
        Create multiple invoice line items

        Args:
            invoice_lines: List of InvoiceLine entities to persist

        Returns:
            List of created InvoiceLine items
        """
        for line in invoice_lines:
            self.session.add(line)
        await self.session.flush()
        for line in invoice_lines:
            await self.session.refresh(line)
        return invoice_lines

    async def delete_by_invoice_id(self, invoice_id: str) -> int:
        statement = delete(InvoiceLine).where(InvoiceLine.invoice_id == invoice_id)
        result = await self.session.execute(statement)
        return result.rowcount or 0
