"""Domain entities."""

from estoque.core.entities.activity import (
    ACTION_ADD,
    ACTION_DELETE,
    ACTION_UPDATE,
    ActivityLog,
)
from estoque.core.entities.inventory import (
    QUANTITY_TOLERANCE,
    Category,
    InventoryItem,
    MovementType,
    StockLevel,
    StockMovement,
    StockStatus,
    Unit,
    WasteRecord,
)
from estoque.core.entities.notification import Notification, NotificationType
from estoque.core.entities.preferences import UserPreferences, WasteThresholds, WasteZone
from estoque.core.entities.report import (
    CategoryCost,
    DashboardStats,
    InventoryLevelPoint,
    InventorySnapshot,
    InventorySummary,
    MovementSummary,
    RankedItem,
    ReportSummary,
    WastePoint,
    WasteSummary,
)

__all__ = [
    # Inventory
    "Category",
    "Unit",
    "MovementType",
    "StockLevel",
    "StockStatus",
    "InventoryItem",
    "StockMovement",
    "WasteRecord",
    "QUANTITY_TOLERANCE",
    # Notifications
    "Notification",
    "NotificationType",
    # Activity
    "ActivityLog",
    "ACTION_ADD",
    "ACTION_UPDATE",
    "ACTION_DELETE",
    # Preferences
    "UserPreferences",
    "WasteThresholds",
    "WasteZone",
    # Reports
    "InventorySnapshot",
    "InventoryLevelPoint",
    "WastePoint",
    "DashboardStats",
    "RankedItem",
    "CategoryCost",
    "InventorySummary",
    "WasteSummary",
    "MovementSummary",
    "ReportSummary",
]
