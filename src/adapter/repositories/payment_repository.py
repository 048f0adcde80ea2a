"""SQLAlchemy Payment Repository Implementation"""

from typing import Optional, List
from datetime import datetime
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.payment_repository import PaymentRepository
from src.domain.payment import Payment, PaymentType


class SqlAlchemyPaymentRepository(PaymentRepository):
    """
    SQLAlchemy implementation of PaymentRepository

    Features:
    - Pessimistic locking via SELECT FOR UPDATE for edit/delete
    - Unique payment_number enforced by the database
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, payment: Payment) -> Payment:
        self.session.add(payment)
        await self.session.flush()
        await self.session.refresh(payment)
        return payment

    async def get_by_id(self, payment_id: str, for_update: bool = False) -> Optional[Payment]:
        """
        Retrieve payment by ID with optional row-level locking

        Args:
            payment_id: Payment ID
            for_update: If True, locks the row with SELECT FOR UPDATE

        Returns:
            Payment if found, None otherwise
        """
        stmt = select(Payment).where(Payment.id == payment_id)

        if for_update:
            stmt = stmt.with_for_update()

        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_invoice_id(self, invoice_id: str) -> List[Payment]:
        stmt = (
            select(Payment)
            .where(Payment.invoice_id == invoice_id)
            .order_by(Payment.created_at)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_by_tenant_id(
        self,
        tenant_id: str,
        payment_type: Optional[PaymentType] = None,
        party_id: Optional[str] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Payment]:
        stmt = select(Payment).where(Payment.tenant_id == tenant_id)

        if payment_type:
            stmt = stmt.where(Payment.payment_type == payment_type)
        if party_id:
            stmt = stmt.where(Payment.party_id == party_id)

        stmt = stmt.order_by(Payment.created_at.desc()).limit(limit).offset(offset)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def update(self, payment: Payment) -> Payment:
        payment.updated_at = datetime.utcnow()
        self.session.add(payment)
        await self.session.flush()
        return payment

    async def delete(self, payment: Payment) -> None:
        await self.session.delete(payment)
        await self.session.flush()
