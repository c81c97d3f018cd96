"""Stock movement endpoints: the ledger."""

from datetime import date, datetime, timedelta

from fastapi import APIRouter, Depends, Query, status

from estoque.api.dependencies import get_current_user, get_inv_store, get_record_movement_use_case
from estoque.application.dto.mappers import movement_to_response
from estoque.application.dto.requests import RecordMovementRequest
from estoque.application.dto.responses import (
    ErrorResponse,
    RecordMovementResponse,
    StockMovementResponse,
)
from estoque.application.use_cases import RecordStockMovementUseCase
from estoque.config import get_settings
from estoque.core.entities.inventory import MovementType
from estoque.infrastructure.storage.sqlite import SQLiteInventoryStore

router = APIRouter(
    prefix="/api/stock-movements",
    tags=["stock-movements"],
    dependencies=[Depends(get_current_user)],
)


def day_bounds(
    date_from: date | None, date_to: date | None
) -> tuple[datetime | None, datetime | None]:
    """Turn an inclusive date range into half-open datetime bounds."""
    start = datetime(date_from.year, date_from.month, date_from.day) if date_from else None
    end = (
        datetime(date_to.year, date_to.month, date_to.day) + timedelta(days=1)
        if date_to
        else None
    )
    return start, end


@router.get("", response_model=list[StockMovementResponse])
async def list_movements(
    item_id: int | None = None,
    movement_type: MovementType | None = Query(default=None, alias="type"),
    date_from: date | None = None,
    date_to: date | None = None,
    limit: int = Query(default=100, ge=1, le=1000),
    offset: int = Query(default=0, ge=0),
    store: SQLiteInventoryStore = Depends(get_inv_store),
) -> list[StockMovementResponse]:
    """List movements, newest first. Movements of deleted items are kept."""
    start, end = day_bounds(date_from, date_to)
    movements = await store.list_movements(
        item_id=item_id,
        movement_type=movement_type,
        date_from=start,
        date_to=end,
        limit=limit,
        offset=offset,
    )
    locale = get_settings().inventory.locale
    return [movement_to_response(m, locale) for m in movements]


@router.post(
    "",
    response_model=RecordMovementResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def record_movement(
    request: RecordMovementRequest,
    use_case: RecordStockMovementUseCase = Depends(get_record_movement_use_case),
) -> RecordMovementResponse:
    """
    Submit a movement.

    Validation failures return every offending field. Resubmitting an
    idempotency key returns the original movement with ``replayed`` set.
    """
    result = await use_case.execute(request)
    return use_case.to_response(result)
