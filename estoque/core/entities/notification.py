"""Notification entity for stock alerts."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class NotificationType(str, Enum):
    """Kinds of notification."""

    LOW_STOCK = "low_stock"
    CRITICAL_STOCK = "critical_stock"
    WASTE = "waste"
    RESTOCK = "restock"
    INFO = "info"


class Notification(BaseModel):
    """
    Advisory message produced by stock movements.

    Clients poll for unread ones; only ``read`` ever changes after creation.
    """

    id: int | None = None
    type: NotificationType
    title: str
    message: str
    item_id: int | None = None
    read: bool = False
    created_at: datetime = Field(default_factory=datetime.utcnow)
