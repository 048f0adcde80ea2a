"""CreateItemCategory Use Case"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.item_repository import ItemCategoryRepository
from src.domain.item import ItemCategory
from .dtos import CreateItemCategoryCommandDTO, ItemCategoryDTO
from .mappers import to_category_dto

logger = logging.getLogger(__name__)


class CreateItemCategory:
    def __init__(self, uow: UnitOfWork, category_repo: ItemCategoryRepository):
        self.uow = uow
        self.category_repo = category_repo

    async def execute(self, command: CreateItemCategoryCommandDTO) -> Result[ItemCategoryDTO]:
        try:
            category = await self.category_repo.create(
                ItemCategory(
                    tenant_id=command.tenant_id,
                    name=command.name,
                    description=command.description,
                    is_active=command.is_active,
                )
            )
            await self.uow.commit()

            logger.info(f"Created item category {category.id} ({category.name}) for tenant {command.tenant_id}")
            return Return.ok(to_category_dto(category))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to create item category {command.name}: {e}")
            return Return.err(
                Error(
                    code="CREATE_ITEM_CATEGORY_FAILED",
                    message="Failed to create item category",
                    reason=str(e),
                )
            )
