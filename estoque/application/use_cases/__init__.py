"""Application use cases."""

from estoque.application.use_cases.build_charts import BuildChartsUseCase
from estoque.application.use_cases.create_item import CreateItemResult, CreateItemUseCase
from estoque.application.use_cases.delete_item import DeleteItemResult, DeleteItemUseCase
from estoque.application.use_cases.generate_report import GenerateReportUseCase
from estoque.application.use_cases.get_dashboard_stats import GetDashboardStatsUseCase
from estoque.application.use_cases.manage_notifications import ManageNotificationsUseCase
from estoque.application.use_cases.manage_preferences import ManagePreferencesUseCase
from estoque.application.use_cases.record_stock_movement import (
    RecordMovementResult,
    RecordStockMovementUseCase,
)
from estoque.application.use_cases.update_item import UpdateItemResult, UpdateItemUseCase

__all__ = [
    "RecordStockMovementUseCase",
    "RecordMovementResult",
    "CreateItemUseCase",
    "CreateItemResult",
    "UpdateItemUseCase",
    "UpdateItemResult",
    "DeleteItemUseCase",
    "DeleteItemResult",
    "BuildChartsUseCase",
    "GetDashboardStatsUseCase",
    "GenerateReportUseCase",
    "ManagePreferencesUseCase",
    "ManageNotificationsUseCase",
]
