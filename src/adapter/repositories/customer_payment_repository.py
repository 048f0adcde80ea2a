"""SQLAlchemy Customer Payment Repository Implementation"""

from typing import List
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.customer_payment_repository import CustomerPaymentRepository
from src.domain.customer_payment import CustomerPayment


class SqlAlchemyCustomerPaymentRepository(CustomerPaymentRepository):

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, payment: CustomerPayment) -> CustomerPayment:
        self.session.add(payment)
        await self.session.flush()
        await self.session.refresh(payment)
        return payment

    async def get_by_customer_id(self, customer_id: str) -> List[CustomerPayment]:
        stmt = (
            select(CustomerPayment)
            .where(CustomerPayment.customer_id == customer_id)
            .order_by(CustomerPayment.payment_date.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
