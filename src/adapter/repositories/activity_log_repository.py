"""SQLAlchemy Activity Log Repository Implementation"""

from typing import List
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.activity_log_repository import ActivityLogRepository
from src.domain.activity_log import ActivityLog


class SqlAlchemyActivityLogRepository(ActivityLogRepository):

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, log: ActivityLog) -> ActivityLog:
        self.session.add(log)
        await self.session.flush()
        await self.session.refresh(log)
        return log

    async def get_by_entity(self, entity_type: str, entity_id: str) -> List[ActivityLog]:
        stmt = (
            select(ActivityLog)
            .where(ActivityLog.entity_type == entity_type, ActivityLog.entity_id == entity_id)
            .order_by(ActivityLog.created_at)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
