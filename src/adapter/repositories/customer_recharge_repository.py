"""SQLAlchemy Customer Recharge Repository Implementation"""

from typing import Optional, List
from datetime import datetime
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.customer_recharge_repository import CustomerRechargeRepository
from src.domain.customer_recharge import CustomerRecharge, RechargeStatus


class SqlAlchemyCustomerRechargeRepository(CustomerRechargeRepository):
    """SQLAlchemy implementation of CustomerRechargeRepository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, recharge: CustomerRecharge) -> CustomerRecharge:
        self.session.add(recharge)
        await self.session.flush()
        await self.session.refresh(recharge)
        return recharge

    async def get_by_id(self, recharge_id: str, for_update: bool = False) -> Optional[CustomerRecharge]:
        stmt = select(CustomerRecharge).where(CustomerRecharge.id == recharge_id)

        if for_update:
            stmt = stmt.with_for_update()

        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def update(self, recharge: CustomerRecharge) -> CustomerRecharge:
        recharge.updated_at = datetime.utcnow()
        self.session.add(recharge)
        await self.session.flush()
        return recharge

    async def get_by_tenant_id(
        self,
        tenant_id: str,
        customer_id: Optional[str] = None,
        status: Optional[RechargeStatus] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[CustomerRecharge]:
        stmt = select(CustomerRecharge).where(CustomerRecharge.tenant_id == tenant_id)

        if customer_id:
            stmt = stmt.where(CustomerRecharge.customer_id == customer_id)
        if status:
            stmt = stmt.where(CustomerRecharge.status == status)

        stmt = stmt.order_by(CustomerRecharge.recharge_date.desc()).limit(limit).offset(offset)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
