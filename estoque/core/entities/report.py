"""Read models for charts, dashboard stats and the summary report."""

from datetime import date, datetime

from pydantic import BaseModel, Field

from estoque.core.entities.inventory import StockMovement
from estoque.core.entities.preferences import WasteThresholds, WasteZone


class InventorySnapshot(BaseModel):
    """Current stock total and the movements since a cutoff, read together."""

    current_total: float
    movements: list[StockMovement] = Field(default_factory=list)
    taken_at: datetime = Field(default_factory=datetime.utcnow)


class InventoryLevelPoint(BaseModel):
    """Reconstructed quantity on hand at the end of a month."""

    month: date
    label: str
    total: float
    entradas: float = 0.0
    saidas: float = 0.0
    desperdicio: float = 0.0


class WastePoint(BaseModel):
    """Monthly waste cost and its zone."""

    month: date
    label: str
    value: float
    quantity: float = 0.0
    zone: WasteZone


class DashboardStats(BaseModel):
    """Headline numbers for the dashboard."""

    total_items: int = 0
    low_stock_count: int = 0
    monthly_waste: float = 0.0
    total_value: float = 0.0


class RankedItem(BaseModel):
    """Item aggregate used by report top lists."""

    item_id: int | None = None
    name: str
    quantity: float
    cost: float = 0.0


class CategoryCost(BaseModel):
    category: str
    value: float


class InventorySummary(BaseModel):
    total_items: int = 0
    total_value: float = 0.0
    low_stock_items: int = 0
    critical_items: int = 0


class WasteSummary(BaseModel):
    total_quantity: float = 0.0
    total_cost: float = 0.0
    by_category: list[CategoryCost] = Field(default_factory=list)


class MovementSummary(BaseModel):
    entries: float = 0.0
    exits: float = 0.0
    waste: float = 0.0
    adjustments: int = 0


class ReportSummary(BaseModel):
    """Period summary behind the exported report."""

    restaurant_name: str
    period_start: date
    period_end: date
    generated_at: datetime = Field(default_factory=datetime.utcnow)
    inventory: InventorySummary = Field(default_factory=InventorySummary)
    waste: WasteSummary = Field(default_factory=WasteSummary)
    movements: MovementSummary = Field(default_factory=MovementSummary)
    most_used_items: list[RankedItem] = Field(default_factory=list)
    most_wasted_items: list[RankedItem] = Field(default_factory=list)
    thresholds: WasteThresholds = Field(default_factory=WasteThresholds)
