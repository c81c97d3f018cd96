"""Tests for health, activity and waste endpoints."""

from datetime import datetime

from httpx import AsyncClient

from estoque.core.entities.activity import ActivityLog
from estoque.core.entities.inventory import WasteRecord


async def test_root_health_check(client: AsyncClient):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


async def test_api_health_needs_no_user(anonymous_client: AsyncClient):
    response = await anonymous_client.get("/api/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert "uptime_seconds" in data


async def test_request_id_header(client: AsyncClient):
    response = await client.get("/api/health")
    assert len(response.headers["X-Request-ID"]) == 8


async def test_recent_activity(client: AsyncClient, mock_activity_store):
    mock_activity_store.list_recent.return_value = [
        ActivityLog(
            id=1, item_id=1, action="Saída", quantity=3, description="Tomate: 10.00 → 7.00 kg"
        )
    ]

    response = await client.get("/api/activity", params={"limit": 5})

    assert response.json()[0]["action"] == "Saída"
    mock_activity_store.list_recent.assert_awaited_once_with(limit=5)


async def test_waste_list_names(client: AsyncClient, mock_inventory_store, make_item):
    mock_inventory_store.list_waste.return_value = [
        WasteRecord(
            id=1, item_id=1, quantity=2, reason="Vencido", cost=10, date=datetime(2024, 6, 1)
        ),
        WasteRecord(
            id=2, item_id=None, quantity=1, reason="Caiu", cost=4, date=datetime(2024, 6, 2)
        ),
    ]
    mock_inventory_store.get_item.return_value = make_item()

    response = await client.get("/api/waste")

    assert [r["item_name"] for r in response.json()] == ["Tomate", "Item removido"]
