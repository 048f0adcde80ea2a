"""ListItemCategories and ListItems Use Cases"""

import logging
from typing import Optional
from libs.result import Result, Return, Error
from src.app.repositories.item_repository import ItemCategoryRepository, ItemRepository
from .dtos import ListItemCategoriesResponseDTO, ListItemsResponseDTO
from .mappers import to_category_dto, to_item_dto

logger = logging.getLogger(__name__)


class ListItemCategories:
    def __init__(self, category_repo: ItemCategoryRepository):
        self.category_repo = category_repo

    async def execute(self, tenant_id: str, active_only: bool = False) -> Result[ListItemCategoriesResponseDTO]:
        try:
            categories = await self.category_repo.get_by_tenant_id(tenant_id, active_only=active_only)
        except Exception as e:
            logger.error(f"Failed to list item categories of tenant {tenant_id}: {e}")
            return Return.err(
                Error(code="LIST_ITEM_CATEGORIES_FAILED", message="Failed to list item categories", reason=str(e))
            )

        return Return.ok(ListItemCategoriesResponseDTO(categories=[to_category_dto(c) for c in categories]))


class ListItems:
    """Catalogue items of a tenant, each with its category name"""

    def __init__(self, category_repo: ItemCategoryRepository, item_repo: ItemRepository):
        self.category_repo = category_repo
        self.item_repo = item_repo

    async def execute(
        self,
        tenant_id: str,
        category_id: Optional[str] = None,
        active_only: bool = False,
    ) -> Result[ListItemsResponseDTO]:
        try:
            items = await self.item_repo.get_by_tenant_id(
                tenant_id, category_id=category_id, active_only=active_only
            )
            categories = {c.id: c for c in await self.category_repo.get_by_tenant_id(tenant_id)}
        except Exception as e:
            logger.error(f"Failed to list items of tenant {tenant_id}: {e}")
            return Return.err(Error(code="LIST_ITEMS_FAILED", message="Failed to list items", reason=str(e)))

        return Return.ok(
            ListItemsResponseDTO(items=[to_item_dto(item, categories.get(item.category_id)) for item in items])
        )
