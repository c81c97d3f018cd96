"""Request DTOs for API endpoints.

Pydantic v2 models for API request validation.
These are the ONLY contracts between API and use cases.

Numeric inputs typed by operators arrive as numbers or strings and are
checked by the domain validators, which report every offending field with
a localized message instead of a schema error.
"""

from typing import Literal

from pydantic import BaseModel, Field

RawNumber = float | str


class RecordMovementRequest(BaseModel):
    """Request to apply a stock movement to an item."""

    item_id: int = Field(..., description="Inventory item ID")
    type: str = Field(
        ...,
        description="Movement kind",
        examples=["entrada", "saida", "desperdicio", "ajuste"],
    )
    quantity: RawNumber = Field(
        ...,
        description="Magnitude of the movement; for ajuste the new absolute quantity",
        examples=[3, "2,5"],
    )
    reason: str | None = Field(
        default=None,
        description="Reason (required for desperdicio, at least 5 characters)",
        examples=["Vencido"],
    )
    idempotency_key: str | None = Field(
        default=None,
        max_length=100,
        description="Client-generated key; resubmitting it returns the original movement",
    )


class CreateItemRequest(BaseModel):
    """Request to create an inventory item."""

    name: str = Field(..., description="Item name, unique case-insensitively")
    category: str = Field(..., examples=["carnes", "laticinios"])
    quantity: RawNumber = Field(default=0, description="Initial quantity")
    unit: str = Field(..., examples=["kg", "unid"])
    min_stock: RawNumber = Field(default=0, description="Reorder threshold")
    cost_per_unit: RawNumber = Field(..., description="Cost per unit")
    supplier: str | None = None
    image_url: str | None = Field(default=None, description="Image reference")


class UpdateItemRequest(BaseModel):
    """Partial update of an inventory item.

    A quantity change is recorded as an ajuste movement.
    """

    name: str | None = None
    category: str | None = None
    quantity: RawNumber | None = None
    unit: str | None = None
    min_stock: RawNumber | None = None
    cost_per_unit: RawNumber | None = None
    supplier: str | None = None
    image_url: str | None = None


class NotificationTargetRequest(BaseModel):
    """Target of a notification action: one ID or every one."""

    id: int | Literal["all"] = Field(..., description="Notification ID or 'all'")


class UpdatePreferencesRequest(BaseModel):
    """Partial update of the waste thresholds."""

    waste_safe_threshold: float | None = Field(default=None, examples=[100])
    waste_critical_threshold: float | None = Field(default=None, examples=[300])
