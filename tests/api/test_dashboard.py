"""API tests for charts, stats and reports."""

from datetime import date, datetime

from httpx import AsyncClient

from estoque.core.entities.inventory import WasteRecord
from estoque.core.entities.report import InventorySnapshot


class TestChartsAPI:
    async def test_inventory_chart(self, client: AsyncClient, mock_inventory_store):
        mock_inventory_store.get_inventory_snapshot.return_value = InventorySnapshot(
            current_total=42.5
        )

        response = await client.get("/api/charts/inventory")

        assert response.status_code == 200
        data = response.json()
        assert data["current_total"] == 42.5
        assert len(data["points"]) == 6
        assert all(p["total"] == 42.5 for p in data["points"])

    async def test_waste_chart(self, client: AsyncClient, mock_inventory_store):
        mock_inventory_store.list_waste.return_value = [
            WasteRecord(quantity=1, reason="Vencido", cost=350, date=datetime.utcnow()),
        ]

        response = await client.get("/api/charts/waste")

        data = response.json()
        assert data["currency"] == "R$"
        assert data["thresholds"] == {"safe": 100, "critical": 300}
        assert data["points"][-1]["zone"] == "critical"


class TestStatsAPI:
    async def test_stats(self, client: AsyncClient, mock_inventory_store, make_item):
        mock_inventory_store.list_items.return_value = [make_item(), make_item(id=2, name="Sal")]

        response = await client.get("/api/stats")

        assert response.json() == {
            "total_items": 2,
            "low_stock_count": 2,
            "monthly_waste": 0,
            "total_value": 100,
        }


class TestReportAPI:
    async def test_explicit_period(self, client: AsyncClient, mock_inventory_store):
        response = await client.get(
            "/api/reports/summary", params={"start": "2024-05-01", "end": "2024-05-31"}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["period_start"] == "2024-05-01"
        assert data["period_end"] == "2024-05-31"
        assert data["restaurant_name"] == "Restaurante"
        kwargs = mock_inventory_store.list_waste.call_args.kwargs
        assert kwargs["date_to"] == datetime(2024, 6, 1)

    async def test_default_period(self, client: AsyncClient):
        response = await client.get("/api/reports/summary")

        today = datetime.utcnow().date()
        assert response.json()["period_start"] == today.replace(day=1).isoformat()

    async def test_inverted_period(self, client: AsyncClient):
        response = await client.get(
            "/api/reports/summary", params={"start": "2024-06-10", "end": "2024-06-01"}
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "start"

    async def test_single_day(self, client: AsyncClient):
        day = date(2024, 6, 10).isoformat()
        response = await client.get("/api/reports/summary", params={"start": day, "end": day})
        assert response.status_code == 200
