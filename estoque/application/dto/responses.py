"""Response DTOs for API endpoints.

Pydantic v2 models for API response serialization.
These are the ONLY contracts between use cases and API layer.
"""

from datetime import date, datetime

from pydantic import BaseModel, Field

from estoque.core.entities.report import ReportSummary


class StockStatusResponse(BaseModel):
    """Stock health of an item."""

    status: str = Field(..., description="critical, low, medium or good")
    label: str
    percentage: float


class InventoryItemResponse(BaseModel):
    """Inventory item response DTO."""

    id: int
    name: str
    category: str
    quantity: float
    unit: str
    min_stock: float
    cost_per_unit: float
    total_value: float
    supplier: str | None = None
    image_url: str | None = None
    last_restocked: datetime | None = None
    status: StockStatusResponse
    created_at: datetime
    updated_at: datetime


class FieldIssueResponse(BaseModel):
    """A field-level validation message."""

    field: str
    message: str
    code: str


class ItemMutationResponse(BaseModel):
    """Response for item create/update."""

    success: bool = True
    item: InventoryItemResponse
    warnings: list[FieldIssueResponse] = Field(default_factory=list)
    notifications: list["NotificationResponse"] = Field(default_factory=list)


class DeleteItemResponse(BaseModel):
    success: bool = True
    id: int
    movements_kept: int = Field(..., description="Movements left in history with no item")


class StockMovementResponse(BaseModel):
    """Stock movement response DTO."""

    id: int
    item_id: int | None = None
    item_name: str
    movement_type: str
    quantity: float
    previous_quantity: float
    new_quantity: float
    reason: str | None = None
    cost: float
    created_at: datetime


class NotificationResponse(BaseModel):
    """Notification response DTO."""

    id: int
    type: str
    title: str
    message: str
    item_id: int | None = None
    read: bool
    created_at: datetime


class RecordMovementResponse(BaseModel):
    """Response for a movement submission."""

    success: bool = True
    new_quantity: float
    movement: StockMovementResponse
    notifications: list[NotificationResponse] = Field(default_factory=list)
    replayed: bool = Field(
        default=False,
        description="True when the idempotency key matched an earlier submission",
    )


class WasteRecordResponse(BaseModel):
    id: int
    item_id: int | None = None
    item_name: str
    quantity: float
    reason: str
    cost: float
    date: datetime


class ActivityResponse(BaseModel):
    id: int
    item_id: int | None = None
    action: str
    quantity: float | None = None
    description: str
    created_at: datetime


class UnreadCountResponse(BaseModel):
    """Polling helper for the notification bell."""

    count: int
    poll_interval_seconds: int


class NotificationActionResponse(BaseModel):
    success: bool = True
    affected: int


class InventoryLevelPointResponse(BaseModel):
    month: date
    label: str
    total: float
    entradas: float
    saidas: float
    desperdicio: float


class WastePointResponse(BaseModel):
    month: date
    label: str
    value: float
    quantity: float
    zone: str


class ThresholdsResponse(BaseModel):
    safe: float
    critical: float


class InventoryChartResponse(BaseModel):
    """Six-month inventory level series, oldest first."""

    points: list[InventoryLevelPointResponse]
    current_total: float


class WasteChartResponse(BaseModel):
    """Six-month waste cost series, oldest first."""

    points: list[WastePointResponse]
    thresholds: ThresholdsResponse
    currency: str


class DashboardStatsResponse(BaseModel):
    total_items: int
    low_stock_count: int
    monthly_waste: float
    total_value: float


class ReportSummaryResponse(ReportSummary):
    """Report data; rendering it to a document is left to the client."""

    currency: str = "R$"


class PreferencesResponse(BaseModel):
    user_id: str
    waste_safe_threshold: float
    waste_critical_threshold: float
    updated_at: datetime


class ComponentHealthResponse(BaseModel):
    """Health of a dependency."""

    name: str
    available: bool
    latency_ms: float | None = None
    error: str | None = None


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str = "1.0.0"
    uptime_seconds: float
    database: ComponentHealthResponse | None = None


class ErrorResponse(BaseModel):
    """Standardized error response DTO.

    Every error response includes:
    - error_code: machine-readable code (e.g. ITEM_NOT_FOUND)
    - message: human-readable description in the configured language
    - hint: suggested recovery action
    - errors: every field-level violation, when there are any
    - path: request path that triggered the error
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error description")
    hint: str | None = Field(default=None, description="Suggested recovery action")
    detail: str | None = Field(default=None, description="Additional details")
    errors: list[FieldIssueResponse] = Field(default_factory=list)
    path: str | None = Field(default=None, description="Request path")
    timestamp: datetime = Field(default_factory=datetime.now)


ItemMutationResponse.model_rebuild()
