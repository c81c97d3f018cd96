"""Per-user preferences consumed by reporting."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class WasteZone(str, Enum):
    """Presentation zone of a monthly waste cost."""

    SAFE = "safe"
    WARNING = "warning"
    CRITICAL = "critical"


class WasteThresholds(BaseModel):
    """Monthly waste cost thresholds, in the reporting currency."""

    safe: float = 100.0
    critical: float = 300.0

    def classify(self, value: float) -> WasteZone:
        """Zone of a monthly waste cost."""
        if value <= self.safe:
            return WasteZone.SAFE
        if value < self.critical:
            return WasteZone.WARNING
        return WasteZone.CRITICAL


class UserPreferences(BaseModel):
    """Settings stored per authenticated user."""

    user_id: str
    waste_safe_threshold: float = Field(default=100.0, ge=0)
    waste_critical_threshold: float = Field(default=300.0, ge=0)
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    @property
    def thresholds(self) -> WasteThresholds:
        return WasteThresholds(
            safe=self.waste_safe_threshold,
            critical=self.waste_critical_threshold,
        )
