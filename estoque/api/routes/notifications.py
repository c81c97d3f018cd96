"""Notification endpoints."""

from fastapi import APIRouter, Depends, Query

from estoque.api.dependencies import get_current_user, get_notifications_use_case
from estoque.application.dto.mappers import notification_to_response
from estoque.application.dto.requests import NotificationTargetRequest
from estoque.application.dto.responses import (
    ErrorResponse,
    NotificationActionResponse,
    NotificationResponse,
    UnreadCountResponse,
)
from estoque.application.use_cases import ManageNotificationsUseCase

router = APIRouter(
    prefix="/api/notifications",
    tags=["notifications"],
    dependencies=[Depends(get_current_user)],
)


@router.get("", response_model=list[NotificationResponse])
async def list_notifications(
    unread: bool = False,
    limit: int = Query(default=20, ge=1, le=200),
    use_case: ManageNotificationsUseCase = Depends(get_notifications_use_case),
) -> list[NotificationResponse]:
    """List notifications, newest first."""
    notifications = await use_case.list_notifications(unread_only=unread, limit=limit)
    return [notification_to_response(n) for n in notifications]


@router.get("/unread-count", response_model=UnreadCountResponse)
async def unread_count(
    use_case: ManageNotificationsUseCase = Depends(get_notifications_use_case),
) -> UnreadCountResponse:
    """Unread count plus the interval clients should poll at."""
    return await use_case.unread_count()


@router.patch(
    "",
    response_model=NotificationActionResponse,
    responses={404: {"model": ErrorResponse}},
)
async def mark_read(
    request: NotificationTargetRequest,
    use_case: ManageNotificationsUseCase = Depends(get_notifications_use_case),
) -> NotificationActionResponse:
    """Mark one notification as read, or every one with ``"all"``."""
    affected = await use_case.mark_read(request.id)
    return NotificationActionResponse(affected=affected)


@router.delete(
    "",
    response_model=NotificationActionResponse,
    responses={404: {"model": ErrorResponse}},
)
async def delete_notifications(
    request: NotificationTargetRequest,
    use_case: ManageNotificationsUseCase = Depends(get_notifications_use_case),
) -> NotificationActionResponse:
    """Delete one notification, or every read one with ``"all"``."""
    affected = await use_case.delete(request.id)
    return NotificationActionResponse(affected=affected)
