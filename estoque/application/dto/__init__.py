"""Request and response DTOs."""

from estoque.application.dto.requests import (
    CreateItemRequest,
    NotificationTargetRequest,
    RecordMovementRequest,
    UpdateItemRequest,
    UpdatePreferencesRequest,
)
from estoque.application.dto.responses import (
    ActivityResponse,
    DashboardStatsResponse,
    DeleteItemResponse,
    ErrorResponse,
    FieldIssueResponse,
    HealthResponse,
    InventoryChartResponse,
    InventoryItemResponse,
    ItemMutationResponse,
    NotificationActionResponse,
    NotificationResponse,
    PreferencesResponse,
    RecordMovementResponse,
    ReportSummaryResponse,
    StockMovementResponse,
    UnreadCountResponse,
    WasteChartResponse,
    WasteRecordResponse,
)

__all__ = [
    # Requests
    "RecordMovementRequest",
    "CreateItemRequest",
    "UpdateItemRequest",
    "NotificationTargetRequest",
    "UpdatePreferencesRequest",
    # Responses
    "InventoryItemResponse",
    "ItemMutationResponse",
    "DeleteItemResponse",
    "StockMovementResponse",
    "RecordMovementResponse",
    "NotificationResponse",
    "NotificationActionResponse",
    "UnreadCountResponse",
    "WasteRecordResponse",
    "ActivityResponse",
    "InventoryChartResponse",
    "WasteChartResponse",
    "DashboardStatsResponse",
    "ReportSummaryResponse",
    "PreferencesResponse",
    "FieldIssueResponse",
    "HealthResponse",
    "ErrorResponse",
]
