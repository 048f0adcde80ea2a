"""SQLAlchemy Customer Wallet Transaction Repository Implementation"""

from typing import List
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.wallet_transaction_repository import WalletTransactionRepository
from src.domain.wallet_transaction import WalletTransaction


class SqlAlchemyWalletTransactionRepository(WalletTransactionRepository):

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, transaction: WalletTransaction) -> WalletTransaction:
        self.session.add(transaction)
        await self.session.flush()
        await self.session.refresh(transaction)
        return transaction

    async def get_by_customer_id(self, customer_id: str, limit: int = 50, offset: int = 0) -> List[WalletTransaction]:
        stmt = (
            select(WalletTransaction)
            .where(WalletTransaction.customer_id == customer_id)
            .order_by(WalletTransaction.processed_at.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
