"""
Core business logic services.

Layer-pure services that depend only on:
- estoque/core/entities/*
- estoque/core/exceptions.py
- estoque/core/messages.py

NO infrastructure imports. Stores are used by the application layer.
"""

from estoque.core.services.aggregation import (
    classify_waste,
    inventory_level_series,
    trailing_months,
    waste_series,
)
from estoque.core.services.item_validator import validate_inventory_item
from estoque.core.services.ledger import (
    LedgerEngine,
    LedgerEntry,
    MovementTransition,
    compute_transition,
)
from estoque.core.services.movement_validator import (
    MOVEMENT_RULES,
    MovementValidator,
    ValidationIssue,
    ValidationResult,
    parse_quantity,
)
from estoque.core.services.notification_trigger import NotificationTrigger
from estoque.core.services.reporting import build_report_summary, compute_dashboard_stats
from estoque.core.services.stock_status import classify_stock, is_low_stock

__all__ = [
    # Stock status
    "classify_stock",
    "is_low_stock",
    # Validation
    "MovementValidator",
    "MOVEMENT_RULES",
    "ValidationIssue",
    "ValidationResult",
    "parse_quantity",
    "validate_inventory_item",
    # Ledger
    "LedgerEngine",
    "LedgerEntry",
    "MovementTransition",
    "compute_transition",
    # Notifications
    "NotificationTrigger",
    # Aggregation
    "trailing_months",
    "inventory_level_series",
    "waste_series",
    "classify_waste",
    # Reporting
    "compute_dashboard_stats",
    "build_report_summary",
]
