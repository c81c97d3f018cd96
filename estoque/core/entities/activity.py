"""Activity log entity."""

from datetime import datetime

from pydantic import BaseModel, Field

# Action labels for item maintenance; movements use their localized label
ACTION_ADD = "add"
ACTION_UPDATE = "update"
ACTION_DELETE = "delete"


class ActivityLog(BaseModel):
    """Append-only audit trail entry."""

    id: int | None = None
    item_id: int | None = None
    action: str
    quantity: float | None = None
    description: str
    created_at: datetime = Field(default_factory=datetime.utcnow)
