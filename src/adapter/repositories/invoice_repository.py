"""SQLAlchemy Invoice Repository Implementation

Bills and invoices on an AsyncSession; flush-only, the unit of work commits.
"""

from typing import Optional, List
from datetime import datetime
from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.invoice import Invoice, DocumentType, PaymentStatus


class SqlAlchemyInvoiceRepository(InvoiceRepository):
    """SQLAlchemy implementation of InvoiceRepository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, invoice: Invoice) -> Invoice:
        """Raises IntegrityError when invoice_number is already taken"""
        self.session.add(invoice)
        await self.session.flush()
        await self.session.refresh(invoice)
        return invoice

    async def get_by_id(self, invoice_id: str, for_update: bool = False) -> Optional[Invoice]:
        """
        Retrieve invoice by ID with optional row-level locking

        Args:
            invoice_id: Invoice ID
            for_update: If True, locks the row with SELECT FOR UPDATE

        Returns:
            Invoice if found, None otherwise
        """
        statement = select(Invoice).where(Invoice.id == invoice_id)

        if for_update:
            statement = statement.with_for_update()

        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    def _filtered(self, statement, tenant_id, document_type, party_id, payment_status):
        statement = statement.where(Invoice.tenant_id == tenant_id)

        if document_type:
            statement = statement.where(Invoice.document_type == document_type)
        if party_id:
            statement = statement.where(Invoice.party_id == party_id)
        if payment_status:
            statement = statement.where(Invoice.payment_status == payment_status)

        return statement

    async def get_by_tenant_id(
        self,
        tenant_id: str,
        document_type: Optional[DocumentType] = None,
        party_id: Optional[str] = None,
        payment_status: Optional[PaymentStatus] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Invoice]:
        """Newest first; None filters are ignored"""
        statement = self._filtered(
            select(Invoice), tenant_id, document_type, party_id, payment_status
        )
        statement = statement.order_by(Invoice.created_at.desc())
        statement = statement.limit(limit).offset(offset)

        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def count_by_tenant_id(
        self,
        tenant_id: str,
        document_type: Optional[DocumentType] = None,
        party_id: Optional[str] = None,
        payment_status: Optional[PaymentStatus] = None,
    ) -> int:
        statement = self._filtered(
            select(func.count()).select_from(Invoice),
            tenant_id,
            document_type,
            party_id,
            payment_status,
        )
        result = await self.session.execute(statement)
        return result.scalar() or 0

    async def get_all(self, tenant_id: Optional[str] = None) -> List[Invoice]:
        statement = select(Invoice)
        if tenant_id:
            statement = statement.where(Invoice.tenant_id == tenant_id)
        statement = statement.order_by(Invoice.created_at)
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def update(self, invoice: Invoice) -> Invoice:
        invoice.updated_at = datetime.utcnow()
        self.session.add(invoice)
        await self.session.flush()
        return invoice

    async def delete(self, invoice: Invoice) -> None:
        await self.session.delete(invoice)
        await self.session.flush()
