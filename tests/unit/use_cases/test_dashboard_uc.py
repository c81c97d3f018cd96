"""Tests for the chart, stats and report use cases."""

from datetime import date, datetime
from unittest.mock import AsyncMock

import pytest

from estoque.application.use_cases.build_charts import BuildChartsUseCase
from estoque.application.use_cases.generate_report import GenerateReportUseCase
from estoque.application.use_cases.get_dashboard_stats import GetDashboardStatsUseCase
from estoque.core.entities.inventory import MovementType, StockMovement, WasteRecord
from estoque.core.entities.preferences import UserPreferences
from estoque.core.entities.report import InventorySnapshot


@pytest.fixture
def mock_inventory_store():
    store = AsyncMock()
    store.list_items.return_value = []
    store.list_movements.return_value = []
    store.list_waste.return_value = []
    return store


@pytest.fixture
def mock_preferences_store():
    store = AsyncMock()
    store.get.return_value = UserPreferences(
        user_id="chef", waste_safe_threshold=20, waste_critical_threshold=60
    )
    return store


class TestBuildChartsUseCase:
    @pytest.fixture
    def use_case(self, mock_inventory_store, mock_preferences_store):
        return BuildChartsUseCase(
            inventory_store=mock_inventory_store, preferences_store=mock_preferences_store
        )

    async def test_inventory_levels_from_snapshot(self, use_case, mock_inventory_store):
        mock_inventory_store.get_inventory_snapshot.return_value = InventorySnapshot(
            current_total=50,
            movements=[
                StockMovement(
                    item_id=1,
                    movement_type=MovementType.ENTRADA,
                    quantity=10,
                    previous_quantity=0,
                    new_quantity=10,
                    created_at=datetime(2024, 6, 2),
                )
            ],
        )

        total, points = await use_case.inventory_levels(today=date(2024, 6, 20))

        assert total == 50
        assert [p.total for p in points][-2:] == [40, 50]
        cutoff = mock_inventory_store.get_inventory_snapshot.call_args[0][0]
        assert cutoff == datetime(2024, 1, 1)

        response = use_case.to_inventory_response(total, points)
        assert response.points[-1].label == "Jun"

    async def test_waste_uses_user_thresholds(self, use_case, mock_inventory_store):
        mock_inventory_store.list_waste.return_value = [
            WasteRecord(quantity=2, reason="Vencido", cost=30, date=datetime(2024, 6, 3)),
        ]

        thresholds, points = await use_case.waste("chef", today=date(2024, 6, 20))

        assert thresholds.safe == 20
        assert points[-1].zone.value == "warning"
        response = use_case.to_waste_response(thresholds, points)
        assert response.currency == "R$"
        assert response.thresholds.critical == 60

    async def test_waste_reads_whole_window(self, use_case, mock_inventory_store):
        await use_case.waste("chef", today=date(2024, 6, 20))

        kwargs = mock_inventory_store.list_waste.call_args.kwargs
        assert kwargs["date_from"] == datetime(2024, 1, 1)
        assert kwargs["limit"] is None


class TestGetDashboardStatsUseCase:
    async def test_stats(self, mock_inventory_store, make_item):
        mock_inventory_store.list_items.return_value = [make_item()]
        mock_inventory_store.list_waste.return_value = [
            WasteRecord(quantity=1, reason="Vencido", cost=5.5),
        ]
        use_case = GetDashboardStatsUseCase(inventory_store=mock_inventory_store)

        stats = await use_case.execute(now=datetime(2024, 6, 30))

        assert stats.total_items == 1
        assert stats.low_stock_count == 1
        assert stats.monthly_waste == 5.5
        since = mock_inventory_store.list_waste.call_args.kwargs["date_from"]
        assert since == datetime(2024, 5, 31)
        assert mock_inventory_store.list_waste.call_args.kwargs["limit"] is None


class TestGenerateReportUseCase:
    @pytest.fixture
    def use_case(self, mock_inventory_store, mock_preferences_store):
        return GenerateReportUseCase(
            inventory_store=mock_inventory_store, preferences_store=mock_preferences_store
        )

    async def test_period_end_is_inclusive(self, use_case, mock_inventory_store):
        report = await use_case.execute("chef", date(2024, 5, 1), date(2024, 5, 31))

        kwargs = mock_inventory_store.list_movements.call_args.kwargs
        assert kwargs["date_from"] == datetime(2024, 5, 1)
        assert kwargs["date_to"] == datetime(2024, 6, 1)
        assert kwargs["limit"] is None
        assert mock_inventory_store.list_waste.call_args.kwargs["limit"] is None
        assert report.thresholds.safe == 20
        assert report.restaurant_name == "Restaurante"

    async def test_default_period_is_month_to_date(self, use_case):
        report = await use_case.execute("chef")

        today = datetime.utcnow().date()
        assert report.period_end == today
        assert report.period_start == today.replace(day=1)

    async def test_response_carries_currency(self, use_case):
        response = use_case.to_response(await use_case.execute("chef"))
        assert response.currency == "R$"
