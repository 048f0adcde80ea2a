"""Item catalogue use cases"""
from .create_item_category import CreateItemCategory
from .create_item import CreateItem
from .list_items import ListItemCategories, ListItems
from .dtos import (
    CreateItemCategoryCommandDTO,
    CreateItemCommandDTO,
    ItemCategoryDTO,
    ItemDTO,
    ListItemCategoriesResponseDTO,
    ListItemsResponseDTO,
)

__all__ = [
    "CreateItemCategory",
    "CreateItem",
    "ListItemCategories",
    "ListItems",
    "CreateItemCategoryCommandDTO",
    "CreateItemCommandDTO",
    "ItemCategoryDTO",
    "ItemDTO",
    "ListItemCategoriesResponseDTO",
    "ListItemsResponseDTO",
]
