"""Dashboard Stats Use Case."""

from datetime import datetime, timedelta

from estoque.application.dto.responses import DashboardStatsResponse
from estoque.config import get_settings
from estoque.core.entities.report import DashboardStats
from estoque.core.interfaces.inventory_store import IInventoryStore
from estoque.core.services.reporting import compute_dashboard_stats


class GetDashboardStatsUseCase:
    def __init__(self, inventory_store: IInventoryStore | None = None):
        self._inventory_store = inventory_store
        self.settings = get_settings().inventory

    async def _get_inventory_store(self) -> IInventoryStore:
        if self._inventory_store is None:
            from estoque.infrastructure.storage.sqlite import get_inventory_store

            self._inventory_store = await get_inventory_store()
        return self._inventory_store

    async def execute(self, now: datetime | None = None) -> DashboardStats:
        """Stats with waste cost over the configured trailing window."""
        now = now or datetime.utcnow()
        store = await self._get_inventory_store()

        items = await store.list_items(limit=None)
        recent_waste = await store.list_waste(
            date_from=now - timedelta(days=self.settings.stats_window_days),
            limit=None,
        )
        return compute_dashboard_stats(items, recent_waste)

    @staticmethod
    def to_response(stats: DashboardStats) -> DashboardStatsResponse:
        return DashboardStatsResponse(**stats.model_dump())
