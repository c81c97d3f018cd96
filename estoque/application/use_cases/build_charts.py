"""Build Charts Use Case: six-month inventory and waste series."""

from datetime import date, datetime

from estoque.application.dto.responses import (
    InventoryChartResponse,
    InventoryLevelPointResponse,
    ThresholdsResponse,
    WasteChartResponse,
    WastePointResponse,
)
from estoque.application.use_cases.manage_preferences import ManagePreferencesUseCase
from estoque.config import get_logger, get_settings
from estoque.core.entities.preferences import WasteThresholds
from estoque.core.entities.report import InventoryLevelPoint, WastePoint
from estoque.core.interfaces.inventory_store import IInventoryStore
from estoque.core.interfaces.preferences_store import IPreferencesStore
from estoque.core.services.aggregation import (
    inventory_level_series,
    trailing_months,
    waste_series,
)

logger = get_logger(__name__)


class BuildChartsUseCase:
    """Derive the dashboard time series from a point-in-time read of the ledger."""

    def __init__(
        self,
        inventory_store: IInventoryStore | None = None,
        preferences_store: IPreferencesStore | None = None,
    ):
        self._inventory_store = inventory_store
        self._preferences = ManagePreferencesUseCase(preferences_store)
        self.settings = get_settings().inventory

    async def _get_inventory_store(self) -> IInventoryStore:
        if self._inventory_store is None:
            from estoque.infrastructure.storage.sqlite import get_inventory_store

            self._inventory_store = await get_inventory_store()
        return self._inventory_store

    def _window_start(self, today: date) -> datetime:
        first = trailing_months(today, self.settings.chart_months)[0]
        return datetime(first.year, first.month, 1)

    async def inventory_levels(
        self, today: date | None = None
    ) -> tuple[float, list[InventoryLevelPoint]]:
        """Current total and one point per month, oldest first."""
        today = today or datetime.utcnow().date()
        store = await self._get_inventory_store()

        snapshot = await store.get_inventory_snapshot(self._window_start(today))
        points = inventory_level_series(
            snapshot.current_total,
            snapshot.movements,
            today,
            months=self.settings.chart_months,
            locale=self.settings.locale,
        )
        logger.info(
            "inventory_chart_built",
            current_total=snapshot.current_total,
            movements=len(snapshot.movements),
        )
        return snapshot.current_total, points

    async def waste(
        self, user_id: str, today: date | None = None
    ) -> tuple[WasteThresholds, list[WastePoint]]:
        """Monthly waste cost classified against the user's thresholds."""
        today = today or datetime.utcnow().date()
        store = await self._get_inventory_store()

        thresholds = (await self._preferences.get(user_id)).thresholds
        records = await store.list_waste(date_from=self._window_start(today), limit=None)
        points = waste_series(
            records,
            today,
            thresholds,
            months=self.settings.chart_months,
            locale=self.settings.locale,
        )
        return thresholds, points

    @staticmethod
    def to_inventory_response(
        current_total: float, points: list[InventoryLevelPoint]
    ) -> InventoryChartResponse:
        return InventoryChartResponse(
            current_total=current_total,
            points=[InventoryLevelPointResponse(**p.model_dump()) for p in points],
        )

    def to_waste_response(
        self, thresholds: WasteThresholds, points: list[WastePoint]
    ) -> WasteChartResponse:
        return WasteChartResponse(
            points=[
                WastePointResponse(
                    month=p.month,
                    label=p.label,
                    value=p.value,
                    quantity=p.quantity,
                    zone=p.zone.value,
                )
                for p in points
            ],
            thresholds=ThresholdsResponse(safe=thresholds.safe, critical=thresholds.critical),
            currency=self.settings.currency_symbol,
        )
