"""Item Catalogue Repository Interfaces"""

from abc import ABC, abstractmethod
from typing import Optional, List
from src.domain.item import ItemCategory, Item


class ItemCategoryRepository(ABC):
    """Repository interface for item categories"""

    @abstractmethod
    async def create(self, category: ItemCategory) -> ItemCategory:
        pass

    @abstractmethod
    async def get_by_id(self, category_id: str) -> Optional[ItemCategory]:
        pass

    @abstractmethod
    async def get_by_tenant_id(self, tenant_id: str, active_only: bool = False) -> List[ItemCategory]:
        """Categories of a tenant ordered by name"""
        pass


class ItemRepository(ABC):
    """Repository interface for catalogue items"""

    @abstractmethod
    async def create(self, item: Item) -> Item:
        pass

    @abstractmethod
    async def get_by_id(self, item_id: str) -> Optional[Item]:
        pass

    @abstractmethod
    async def get_by_tenant_id(
        self,
        tenant_id: str,
        category_id: Optional[str] = None,
        active_only: bool = False,
    ) -> List[Item]:
        """
        Items of a tenant ordered by name

        Args:
            tenant_id: Tenant identifier
            category_id: Only items of this category
            active_only: Skip deactivated items
        """
        pass
