"""SQLAlchemy implementation of ResellerTransactionRepository

Reseller transactions are immutable; there is no update or delete.
"""

from typing import List
from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.reseller_transaction_repository import ResellerTransactionRepository
from src.domain.reseller_transaction import ResellerTransaction


class SqlAlchemyResellerTransactionRepository(ResellerTransactionRepository):

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, transaction: ResellerTransaction) -> ResellerTransaction:
        self.session.add(transaction)
        await self.session.flush()
        await self.session.refresh(transaction)
        return transaction

    async def get_by_reseller_id(
        self,
        reseller_id: str,
        limit: int = 50,
        offset: int = 0,
    ) -> List[ResellerTransaction]:
        stmt = (
            select(ResellerTransaction)
            .where(ResellerTransaction.reseller_id == reseller_id)
            .order_by(ResellerTransaction.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count_by_reseller_id(self, reseller_id: str) -> int:
        stmt = select(func.count()).select_from(ResellerTransaction).where(
            ResellerTransaction.reseller_id == reseller_id
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0
