"""Recent activity endpoint."""

from fastapi import APIRouter, Depends, Query

from estoque.api.dependencies import get_act_store, get_current_user
from estoque.application.dto.mappers import activity_to_response
from estoque.application.dto.responses import ActivityResponse
from estoque.infrastructure.storage.sqlite import SQLiteActivityStore

router = APIRouter(
    prefix="/api/activity",
    tags=["activity"],
    dependencies=[Depends(get_current_user)],
)


@router.get("", response_model=list[ActivityResponse])
async def recent_activity(
    limit: int = Query(default=10, ge=1, le=100),
    store: SQLiteActivityStore = Depends(get_act_store),
) -> list[ActivityResponse]:
    """Most recent activity entries, newest first."""
    entries = await store.list_recent(limit=limit)
    return [activity_to_response(a) for a in entries]
