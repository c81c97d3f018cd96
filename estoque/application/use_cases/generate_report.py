"""Generate Report Use Case: data behind the period report."""

from datetime import date, datetime, timedelta

from estoque.application.dto.responses import ReportSummaryResponse
from estoque.application.use_cases.manage_preferences import ManagePreferencesUseCase
from estoque.config import get_logger, get_settings
from estoque.core.entities.report import ReportSummary
from estoque.core.interfaces.inventory_store import IInventoryStore
from estoque.core.interfaces.preferences_store import IPreferencesStore
from estoque.core.services.reporting import build_report_summary

logger = get_logger(__name__)


class GenerateReportUseCase:
    """
    Summarize inventory, movements and waste for a period.

    The period defaults to the current month up to today. Rendering the
    summary (PDF, Markdown) belongs to the client.
    """

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

    async def execute(
        self,
        user_id: str,
        period_start: date | None = None,
        period_end: date | None = None,
    ) -> ReportSummary:
        today = datetime.utcnow().date()
        period_end = period_end or today
        period_start = period_start or period_end.replace(day=1)

        # Inclusive end date
        date_from = datetime(period_start.year, period_start.month, period_start.day)
        date_to = datetime(period_end.year, period_end.month, period_end.day) + timedelta(days=1)

        store = await self._get_inventory_store()
        items = await store.list_items(limit=None)
        movements = await store.list_movements(date_from=date_from, date_to=date_to, limit=None)
        waste = await store.list_waste(date_from=date_from, date_to=date_to, limit=None)
        preferences = await self._preferences.get(user_id)

        report = build_report_summary(
            items,
            movements,
            waste,
            restaurant_name=self.settings.restaurant_name,
            period_start=period_start,
            period_end=period_end,
            thresholds=preferences.thresholds,
            locale=self.settings.locale,
        )
        logger.info(
            "report_generated",
            period_start=period_start.isoformat(),
            period_end=period_end.isoformat(),
            movements=len(movements),
            waste_records=len(waste),
        )
        return report

    def to_response(self, report: ReportSummary) -> ReportSummaryResponse:
        return ReportSummaryResponse(
            **report.model_dump(),
            currency=self.settings.currency_symbol,
        )
