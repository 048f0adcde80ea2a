from typing import Optional
from src.domain.item import ItemCategory, Item
from .dtos import ItemCategoryDTO, ItemDTO


def to_category_dto(category: ItemCategory) -> ItemCategoryDTO:
    return ItemCategoryDTO(
        id=category.id,
        tenant_id=category.tenant_id,
        name=category.name,
        description=category.description,
        is_active=category.is_active,
        created_at=category.created_at,
    )


def to_item_dto(item: Item, category: Optional[ItemCategory] = None) -> ItemDTO:
    return ItemDTO(
        id=item.id,
        tenant_id=item.tenant_id,
        category_id=item.category_id,
        category_name=category.name if category else None,
        name=item.name,
        description=item.description,
        unit=item.unit,
        unit_price=item.unit_price,
        is_active=item.is_active,
        created_at=item.created_at,
    )
