"""Item Catalogue API Routes

Categories and priced items that bill and invoice lines are picked from.
"""

from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.use_cases.items import (
    CreateItemCategory,
    CreateItem,
    ListItemCategories,
    ListItems,
    CreateItemCategoryCommandDTO,
    CreateItemCommandDTO,
    ItemCategoryDTO,
    ItemDTO,
    ListItemCategoriesResponseDTO,
    ListItemsResponseDTO,
)
from src.adapter.repositories import SqlAlchemyItemCategoryRepository, SqlAlchemyItemRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session
from src.api.error import ClientError

router = APIRouter(tags=["Items"])


@router.post("/item-categories", response_model=ItemCategoryDTO, status_code=status.HTTP_201_CREATED)
async def create_item_category(
    request: CreateItemCategoryCommandDTO,
    session: AsyncSession = Depends(get_session)
):
    use_case = CreateItemCategory(SqlAlchemyUnitOfWork(session), SqlAlchemyItemCategoryRepository(session))
    result = await use_case.execute(request)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get("/item-categories", response_model=ListItemCategoriesResponseDTO)
async def list_item_categories(
    tenant_id: str = Query(..., min_length=1),
    active_only: bool = Query(False),
    session: AsyncSession = Depends(get_session)
):
    result = await ListItemCategories(SqlAlchemyItemCategoryRepository(session)).execute(
        tenant_id, active_only=active_only
    )

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.post("/items", response_model=ItemDTO, status_code=status.HTTP_201_CREATED)
async def create_item(
    request: CreateItemCommandDTO,
    session: AsyncSession = Depends(get_session)
):
    """
    Add a catalogue item.

    **Returns:**
    - 201: Item created
    - 404: Category not found in the tenant
    """
    use_case = CreateItem(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyItemCategoryRepository(session),
        SqlAlchemyItemRepository(session),
    )
    result = await use_case.execute(request)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get("/items", response_model=ListItemsResponseDTO)
async def list_items(
    tenant_id: str = Query(..., min_length=1),
    category_id: Optional[str] = Query(None),
    active_only: bool = Query(False),
    session: AsyncSession = Depends(get_session)
):
    use_case = ListItems(SqlAlchemyItemCategoryRepository(session), SqlAlchemyItemRepository(session))
    result = await use_case.execute(tenant_id, category_id=category_id, active_only=active_only)

    if result.is_err():
        raise ClientError(result.error)

    return result.value
