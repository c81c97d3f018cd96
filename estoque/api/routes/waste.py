"""Waste record endpoints."""

from datetime import date

from fastapi import APIRouter, Depends, Query

from estoque.api.dependencies import get_current_user, get_inv_store
from estoque.api.routes.stock_movements import day_bounds
from estoque.application.dto.mappers import waste_to_response
from estoque.application.dto.responses import WasteRecordResponse
from estoque.config import get_settings
from estoque.infrastructure.storage.sqlite import SQLiteInventoryStore

router = APIRouter(
    prefix="/api/waste",
    tags=["waste"],
    dependencies=[Depends(get_current_user)],
)


@router.get("", response_model=list[WasteRecordResponse])
async def list_waste(
    date_from: date | None = None,
    date_to: date | None = None,
    limit: int = Query(default=100, ge=1, le=1000),
    store: SQLiteInventoryStore = Depends(get_inv_store),
) -> list[WasteRecordResponse]:
    """List waste records, newest first."""
    start, end = day_bounds(date_from, date_to)
    records = await store.list_waste(date_from=start, date_to=end, limit=limit)

    item_names: dict[int, str] = {}
    for item_id in {r.item_id for r in records if r.item_id is not None}:
        item = await store.get_item(item_id)
        if item is not None:
            item_names[item_id] = item.name

    locale = get_settings().inventory.locale
    return [waste_to_response(r, item_names, locale) for r in records]
