"""Dashboard endpoints: charts, stats and the period report."""

from datetime import date

from fastapi import APIRouter, Depends

from estoque.api.dependencies import (
    get_charts_use_case,
    get_current_user,
    get_dashboard_stats_use_case,
    get_report_use_case,
)
from estoque.application.dto.responses import (
    DashboardStatsResponse,
    ErrorResponse,
    InventoryChartResponse,
    ReportSummaryResponse,
    WasteChartResponse,
)
from estoque.application.use_cases import (
    BuildChartsUseCase,
    GenerateReportUseCase,
    GetDashboardStatsUseCase,
)
from estoque.config import get_settings
from estoque.core.exceptions import ValidationError
from estoque.core.messages import translate

router = APIRouter(prefix="/api", tags=["dashboard"], dependencies=[Depends(get_current_user)])


@router.get("/charts/inventory", response_model=InventoryChartResponse)
async def inventory_chart(
    use_case: BuildChartsUseCase = Depends(get_charts_use_case),
) -> InventoryChartResponse:
    """Total stock at the end of each of the last months, with monthly flows."""
    current_total, points = await use_case.inventory_levels()
    return use_case.to_inventory_response(current_total, points)


@router.get("/charts/waste", response_model=WasteChartResponse)
async def waste_chart(
    user_id: str = Depends(get_current_user),
    use_case: BuildChartsUseCase = Depends(get_charts_use_case),
) -> WasteChartResponse:
    """Monthly waste cost, zoned against the user's thresholds."""
    thresholds, points = await use_case.waste(user_id)
    return use_case.to_waste_response(thresholds, points)


@router.get("/stats", response_model=DashboardStatsResponse)
async def dashboard_stats(
    use_case: GetDashboardStatsUseCase = Depends(get_dashboard_stats_use_case),
) -> DashboardStatsResponse:
    stats = await use_case.execute()
    return use_case.to_response(stats)


@router.get(
    "/reports/summary",
    response_model=ReportSummaryResponse,
    responses={400: {"model": ErrorResponse}},
)
async def report_summary(
    start: date | None = None,
    end: date | None = None,
    user_id: str = Depends(get_current_user),
    use_case: GenerateReportUseCase = Depends(get_report_use_case),
) -> ReportSummaryResponse:
    """
    Report data for a period, both ends inclusive.

    Defaults to the current month up to today.
    """
    if start and end and start > end:
        raise ValidationError(
            "start", translate("invalid_period", get_settings().inventory.locale), start
        )
    report = await use_case.execute(user_id, period_start=start, period_end=end)
    return use_case.to_response(report)
