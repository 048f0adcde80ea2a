"""CreateItem Use Case

Adds a priced item to a tenant's catalogue.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.item_repository import ItemCategoryRepository, ItemRepository
from src.domain.base import money
from src.domain.item import Item
from .dtos import CreateItemCommandDTO, ItemDTO
from .mappers import to_item_dto

logger = logging.getLogger(__name__)


class CreateItem:
    """
    Use Case: Add a catalogue item

    Business Rules:
    1. category_id, when given, must name a category of the same tenant
    2. unit_price is stored rounded to 0.01
    """

    def __init__(self, uow: UnitOfWork, category_repo: ItemCategoryRepository, item_repo: ItemRepository):
        self.uow = uow
        self.category_repo = category_repo
        self.item_repo = item_repo

    async def execute(self, command: CreateItemCommandDTO) -> Result[ItemDTO]:
        try:
            category = None
            if command.category_id:
                category = await self.category_repo.get_by_id(command.category_id)
                if not category or category.tenant_id != command.tenant_id:
                    return Return.err(
                        Error(
                            code="CATEGORY_NOT_FOUND",
                            message=f"Item category {command.category_id} not found",
                        )
                    )

            item = await self.item_repo.create(
                Item(
                    tenant_id=command.tenant_id,
                    category_id=command.category_id,
                    name=command.name,
                    description=command.description,
                    unit=command.unit,
                    unit_price=money(command.unit_price),
                    is_active=command.is_active,
                )
            )
            await self.uow.commit()

            logger.info(f"Created item {item.id} ({item.name} at {item.unit_price}/{item.unit})")
            return Return.ok(to_item_dto(item, category))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to create item {command.name}: {e}")
            return Return.err(
                Error(
                    code="CREATE_ITEM_FAILED",
                    message="Failed to create item",
                    reason=str(e),
                )
            )
