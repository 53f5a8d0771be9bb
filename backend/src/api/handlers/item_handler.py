"""
Item Handler

The canonical CRUD resource: create, list with search/filter/sort,
read, replace, patch and delete.

ARCHITECTURE:
=============
    Handler → ItemService → ItemRepository → Item

Every route requires a bearer token and only sees the caller's items.

PUT vs PATCH:
=============
    PUT   /items/{id}   Full replacement, omitted optional fields reset
    PATCH /items/{id}   Only the fields present in the body change
"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Query, status

from src.api.dependencies import CurrentUser, ItemServiceDep, Pagination
from src.shared.models.enums import ItemSortField, SortOrder
from src.shared.schemas.common import PaginatedResponse, PaginationMeta
from src.shared.schemas.item import ItemCreate, ItemResponse, ItemUpdate


router = APIRouter()


@router.post(
    "",
    response_model=ItemResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_item(
    data: ItemCreate,
    current_user: CurrentUser,
    item_service: ItemServiceDep,
):
    """Create an item owned by the authenticated user."""
    return await item_service.create_item(current_user.id, data)


@router.get("", response_model=PaginatedResponse[ItemResponse])
async def list_items(
    current_user: CurrentUser,
    pagination: Pagination,
    item_service: ItemServiceDep,
    q: Optional[str] = Query(None, max_length=100, description="Search name and description"),
    min_price: Optional[float] = Query(None, ge=0),
    max_price: Optional[float] = Query(None, ge=0),
    is_offer: Optional[bool] = Query(None),
    # Plain str so unknown fields get the 400 business error, not a 422
    sort_by: str = Query(ItemSortField.CREATED_AT.value, description="created_at, name or price"),
    sort_order: SortOrder = Query(SortOrder.DESC),
):
    """
    List the authenticated user's items.

    Raises:
        400: Unknown sort_by, or min_price greater than max_price
    """
    result = await item_service.list_items(
        current_user.id,
        page=pagination.page,
        per_page=pagination.per_page,
        q=q,
        min_price=min_price,
        max_price=max_price,
        is_offer=is_offer,
        sort_by=sort_by,
        sort_order=sort_order,
    )
    return PaginatedResponse[ItemResponse](
        data=[ItemResponse.model_validate(item) for item in result.items],
        pagination=PaginationMeta.create(
            page=result.page,
            per_page=result.per_page,
            total=result.total,
        ),
    )


@router.get("/{item_id}", response_model=ItemResponse)
async def get_item(
    item_id: UUID,
    current_user: CurrentUser,
    item_service: ItemServiceDep,
):
    """
    Raises:
        404: Missing or not owned by the caller
    """
    return await item_service.get_item(current_user.id, item_id)


@router.put("/{item_id}", response_model=ItemResponse)
async def replace_item(
    item_id: UUID,
    data: ItemCreate,
    current_user: CurrentUser,
    item_service: ItemServiceDep,
):
    """Replace every field of an item."""
    return await item_service.replace_item(current_user.id, item_id, data)


@router.patch("/{item_id}", response_model=ItemResponse)
async def update_item(
    item_id: UUID,
    data: ItemUpdate,
    current_user: CurrentUser,
    item_service: ItemServiceDep,
):
    """
    Partially update an item.

    Raises:
        400: A required field was sent as null
    """
    return await item_service.update_item(current_user.id, item_id, data)


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_item(
    item_id: UUID,
    current_user: CurrentUser,
    item_service: ItemServiceDep,
) -> None:
    await item_service.delete_item(current_user.id, item_id)
