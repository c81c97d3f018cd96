"""Fixtures for API tests: the app with stores replaced by mocks."""

from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient

from estoque.api import dependencies as deps
from estoque.api.main import app
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
from estoque.core.entities.report import InventorySnapshot
from estoque.core.services.ledger import LedgerEngine

USER_HEADERS = {"X-User-Id": "chef-1"}


@pytest.fixture
def mock_inventory_store():
    store = AsyncMock()
    store.list_items.return_value = []
    store.list_movements.return_value = []
    store.list_waste.return_value = []
    store.get_item_by_name.return_value = None
    store.get_movement_by_key.return_value = None
    store.get_inventory_snapshot.return_value = InventorySnapshot(current_total=0)
    return store


@pytest.fixture
def mock_notification_store():
    store = AsyncMock()
    store.list_notifications.return_value = []
    store.count_unread.return_value = 0
    return store


@pytest.fixture
def mock_preferences_store():
    store = AsyncMock()
    store.get.return_value = None
    store.upsert.side_effect = lambda preferences: preferences
    return store


@pytest.fixture
def mock_activity_store():
    store = AsyncMock()
    store.list_recent.return_value = []
    return store


@pytest.fixture
async def client(
    mock_inventory_store, mock_notification_store, mock_preferences_store, mock_activity_store
):
    """Client wired to real use cases over mocked stores."""
    inv, notes, prefs = mock_inventory_store, mock_notification_store, mock_preferences_store
    overrides = {
        deps.get_inv_store: lambda: inv,
        deps.get_act_store: lambda: mock_activity_store,
        deps.get_record_movement_use_case: lambda: RecordStockMovementUseCase(
            inventory_store=inv, ledger=LedgerEngine()
        ),
        deps.get_create_item_use_case: lambda: CreateItemUseCase(inventory_store=inv),
        deps.get_update_item_use_case: lambda: UpdateItemUseCase(
            inventory_store=inv, ledger=LedgerEngine()
        ),
        deps.get_delete_item_use_case: lambda: DeleteItemUseCase(inventory_store=inv),
        deps.get_notifications_use_case: lambda: ManageNotificationsUseCase(
            notification_store=notes
        ),
        deps.get_preferences_use_case: lambda: ManagePreferencesUseCase(preferences_store=prefs),
        deps.get_charts_use_case: lambda: BuildChartsUseCase(
            inventory_store=inv, preferences_store=prefs
        ),
        deps.get_dashboard_stats_use_case: lambda: GetDashboardStatsUseCase(inventory_store=inv),
        deps.get_report_use_case: lambda: GenerateReportUseCase(
            inventory_store=inv, preferences_store=prefs
        ),
    }
    app.dependency_overrides.update(overrides)
    transport = ASGITransport(app=app)
    async with AsyncClient(
        transport=transport, base_url="http://test", headers=USER_HEADERS
    ) as ac:
        yield ac
    for dependency in overrides:
        app.dependency_overrides.pop(dependency, None)


@pytest.fixture
async def anonymous_client(client):
    """Same wiring, without the user header."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
