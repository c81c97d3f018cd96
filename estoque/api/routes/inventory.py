"""Inventory item endpoints."""

from fastapi import APIRouter, Depends, Query, status

from estoque.api.dependencies import (
    get_create_item_use_case,
    get_current_user,
    get_delete_item_use_case,
    get_inv_store,
    get_update_item_use_case,
)
from estoque.application.dto.mappers import item_to_response
from estoque.application.dto.requests import CreateItemRequest, UpdateItemRequest
from estoque.application.dto.responses import (
    DeleteItemResponse,
    ErrorResponse,
    InventoryItemResponse,
    ItemMutationResponse,
)
from estoque.application.use_cases import CreateItemUseCase, DeleteItemUseCase, UpdateItemUseCase
from estoque.config import get_settings
from estoque.core.entities.inventory import Category, StockLevel
from estoque.core.exceptions import ItemNotFoundError
from estoque.core.messages import translate
from estoque.infrastructure.storage.sqlite import SQLiteInventoryStore

router = APIRouter(
    prefix="/api/inventory",
    tags=["inventory"],
    dependencies=[Depends(get_current_user)],
)


@router.get("", response_model=list[InventoryItemResponse])
async def list_items(
    search: str | None = Query(default=None, description="Case-insensitive name filter"),
    category: Category | None = None,
    status_filter: StockLevel | None = Query(default=None, alias="status"),
    limit: int = Query(default=500, ge=1, le=5000),
    offset: int = Query(default=0, ge=0),
    store: SQLiteInventoryStore = Depends(get_inv_store),
) -> list[InventoryItemResponse]:
    """List items ordered by name, each with its stock status."""
    locale = get_settings().inventory.locale
    items = await store.list_items(
        search=search,
        category=category.value if category else None,
        limit=limit,
        offset=offset,
    )
    responses = [item_to_response(item, locale) for item in items]
    if status_filter is not None:
        responses = [r for r in responses if r.status.status == status_filter.value]
    return responses


@router.post(
    "",
    response_model=ItemMutationResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def create_item(
    request: CreateItemRequest,
    use_case: CreateItemUseCase = Depends(get_create_item_use_case),
) -> ItemMutationResponse:
    """Create an item. A quantity under the minimum stock comes back as a warning."""
    result = await use_case.execute(request)
    return use_case.to_response(result)


@router.get(
    "/{item_id}",
    response_model=InventoryItemResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_item(
    item_id: int,
    store: SQLiteInventoryStore = Depends(get_inv_store),
) -> InventoryItemResponse:
    """Get one item."""
    locale = get_settings().inventory.locale
    item = await store.get_item(item_id)
    if item is None:
        raise ItemNotFoundError(item_id, message=translate("item_not_found", locale))
    return item_to_response(item, locale)


@router.put(
    "/{item_id}",
    response_model=ItemMutationResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def update_item(
    item_id: int,
    request: UpdateItemRequest,
    use_case: UpdateItemUseCase = Depends(get_update_item_use_case),
) -> ItemMutationResponse:
    """
    Update item attributes.

    A changed quantity is recorded as an ajuste movement.
    """
    result = await use_case.execute(item_id, request)
    return use_case.to_response(result)


@router.delete(
    "/{item_id}",
    response_model=DeleteItemResponse,
    responses={404: {"model": ErrorResponse}},
)
async def delete_item(
    item_id: int,
    use_case: DeleteItemUseCase = Depends(get_delete_item_use_case),
) -> DeleteItemResponse:
    """Delete an item; its movements stay in history."""
    result = await use_case.execute(item_id)
    return use_case.to_response(result)
