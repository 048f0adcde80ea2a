"""SQLAlchemy Item Catalogue Repository Implementations"""

from typing import Optional, List
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.item_repository import ItemCategoryRepository, ItemRepository
from src.domain.item import ItemCategory, Item


class SqlAlchemyItemCategoryRepository(ItemCategoryRepository):

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, category: ItemCategory) -> ItemCategory:
        self.session.add(category)
        await self.session.flush()
        await self.session.refresh(category)
        return category

    async def get_by_id(self, category_id: str) -> Optional[ItemCategory]:
        result = await self.session.execute(select(ItemCategory).where(ItemCategory.id == category_id))
        return result.scalar_one_or_none()

    async def get_by_tenant_id(self, tenant_id: str, active_only: bool = False) -> List[ItemCategory]:
        stmt = select(ItemCategory).where(ItemCategory.tenant_id == tenant_id)
        if active_only:
            stmt = stmt.where(ItemCategory.is_active == True)  # noqa: E712
        result = await self.session.execute(stmt.order_by(ItemCategory.name))
        return list(result.scalars().all())


class SqlAlchemyItemRepository(ItemRepository):

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, item: Item) -> Item:
        self.session.add(item)
        await self.session.flush()
        await self.session.refresh(item)
        return item

    async def get_by_id(self, item_id: str) -> Optional[Item]:
        result = await self.session.execute(select(Item).where(Item.id == item_id))
        return result.scalar_one_or_none()

    async def get_by_tenant_id(
        self,
        tenant_id: str,
        category_id: Optional[str] = None,
        active_only: bool = False,
    ) -> List[Item]:
        stmt = select(Item).where(Item.tenant_id == tenant_id)
        if category_id:
            stmt = stmt.where(Item.category_id == category_id)
        if active_only:
            stmt = stmt.where(Item.is_active == True)  # noqa: E712
        result = await self.session.execute(stmt.order_by(Item.name))
        return list(result.scalars().all())
