"""
Dependency injection container for FastAPI.

Provides use case and store instances to route handlers.
"""

from fastapi import Request

from estoque.application.use_cases import (
    BuildChartsUseCase,
    CreateItemUseCase,
    DeleteItemUseCase,
    GenerateReportUseCase,
    GetDashboardStatsUseCase,
    ManageNotificationsUseCase,
    ManagePreferencesUseCase,
    RecordStockMovementUseCase,
    UpdateItemUseCase,
)
from estoque.config import get_settings
from estoque.core.exceptions import UnauthorizedError
from estoque.core.messages import translate
from estoque.infrastructure.storage.sqlite import (
    SQLiteActivityStore,
    SQLiteInventoryStore,
    get_activity_store,
    get_inventory_store,
)

ANONYMOUS_USER = "anonymous"


# Auth dependency
def get_current_user(request: Request) -> str:
    """
    User id set by the auth provider in front of the API.

    The header name is configurable. Without it the request is rejected
    unless the API runs with ``require_user`` disabled.
    """
    settings = get_settings()
    user_id = (request.headers.get(settings.api.user_header) or "").strip()
    if user_id:
        return user_id
    if settings.api.require_user:
        raise UnauthorizedError(translate("unauthorized", settings.inventory.locale))
    return ANONYMOUS_USER


# Store dependencies
async def get_inv_store() -> SQLiteInventoryStore:
    """Get inventory store."""
    return await get_inventory_store()


async def get_act_store() -> SQLiteActivityStore:
    """Get activity store."""
    return await get_activity_store()


# Use case dependencies
def get_record_movement_use_case() -> RecordStockMovementUseCase:
    """Get record stock movement use case."""
    return RecordStockMovementUseCase()


def get_create_item_use_case() -> CreateItemUseCase:
    """Get create item use case."""
    return CreateItemUseCase()


def get_update_item_use_case() -> UpdateItemUseCase:
    """Get update item use case."""
    return UpdateItemUseCase()


def get_delete_item_use_case() -> DeleteItemUseCase:
    """Get delete item use case."""
    return DeleteItemUseCase()


def get_notifications_use_case() -> ManageNotificationsUseCase:
    """Get manage notifications use case."""
    return ManageNotificationsUseCase()


def get_preferences_use_case() -> ManagePreferencesUseCase:
    """Get manage preferences use case."""
    return ManagePreferencesUseCase()


def get_charts_use_case() -> BuildChartsUseCase:
    """Get build charts use case."""
    return BuildChartsUseCase()


def get_dashboard_stats_use_case() -> GetDashboardStatsUseCase:
    """Get dashboard stats use case."""
    return GetDashboardStatsUseCase()


def get_report_use_case() -> GenerateReportUseCase:
    """Get generate report use case."""
    return GenerateReportUseCase()
