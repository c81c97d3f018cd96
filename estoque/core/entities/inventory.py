"""Inventory domain entities."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field, model_validator

# Quantities are kept with 2 decimal places
QUANTITY_TOLERANCE = 0.005


class Category(str, Enum):
    """Inventory item categories."""

    CARNES = "carnes"
    LATICINIOS = "laticinios"
    VEGETAIS = "vegetais"
    FRUTAS = "frutas"
    GRAOS = "graos"
    BEBIDAS = "bebidas"
    TEMPEROS = "temperos"
    CONGELADOS = "congelados"
    PADARIA = "padaria"
    LIMPEZA = "limpeza"
    DESCARTAVEIS = "descartaveis"
    OUTROS = "outros"


class Unit(str, Enum):
    """Units of measure."""

    KG = "kg"
    G = "g"
    L = "L"
    ML = "ml"
    UNID = "unid"
    CX = "cx"
    PCT = "pct"
    DZ = "dz"


class MovementType(str, Enum):
    """Kinds of stock movement."""

    ENTRADA = "entrada"  # restock
    SAIDA = "saida"  # consumption
    DESPERDICIO = "desperdicio"  # waste
    AJUSTE = "ajuste"  # absolute set

    @property
    def is_outflow(self) -> bool:
        """Saida and desperdicio remove stock and carry a cost."""
        return self in (MovementType.SAIDA, MovementType.DESPERDICIO)

    @property
    def is_absolute(self) -> bool:
        """Ajuste sets the quantity instead of moving it."""
        return self is MovementType.AJUSTE

    def resulting_quantity(self, previous: float, quantity: float) -> float:
        """Quantity on hand after applying a movement of this kind."""
        if self is MovementType.ENTRADA:
            return round(previous + quantity, 2)
        if self.is_outflow:
            return round(max(0.0, previous - quantity), 2)
        return round(quantity, 2)


class StockLevel(str, Enum):
    """Stock health classification."""

    CRITICAL = "critical"
    LOW = "low"
    MEDIUM = "medium"
    GOOD = "good"


class StockStatus(BaseModel):
    """Classification of an item's quantity against its minimum stock."""

    status: StockLevel
    label: str
    percentage: float


class InventoryItem(BaseModel):
    """A stocked ingredient or supply."""

    id: int | None = None
    name: str
    category: Category
    quantity: float = Field(default=0.0, ge=0)
    unit: Unit
    min_stock: float = Field(default=0.0, ge=0)
    cost_per_unit: float = Field(gt=0)
    supplier: str | None = None
    image_url: str | None = None
    last_restocked: datetime | None = None
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    @property
    def name_key(self) -> str:
        """Case-insensitive identity of the name."""
        return self.name.strip().casefold()

    @property
    def total_value(self) -> float:
        """Stock value = quantity * cost_per_unit."""
        return round(self.quantity * self.cost_per_unit, 2)


class StockMovement(BaseModel):
    """
    Immutable ledger entry.

    The previous/new snapshots make each entry self-auditing: the pair must
    match what the movement kind does to the previous quantity, even if the
    item is later edited or deleted.
    """

    id: int | None = None
    item_id: int | None = None  # NULL once the item is deleted
    movement_type: MovementType
    quantity: float = Field(ge=0)
    previous_quantity: float = Field(ge=0)
    new_quantity: float = Field(ge=0)
    reason: str | None = None
    cost: float = Field(default=0.0, ge=0)
    idempotency_key: str | None = None
    created_at: datetime = Field(default_factory=datetime.utcnow)
    item_name: str | None = None  # read-side join, not persisted

    @model_validator(mode="after")
    def check_snapshot(self) -> "StockMovement":
        if not self.movement_type.is_absolute and self.quantity <= 0:
            raise ValueError("movement quantity must be greater than zero")
        expected = self.movement_type.resulting_quantity(
            self.previous_quantity, self.quantity
        )
        if abs(expected - self.new_quantity) > QUANTITY_TOLERANCE:
            raise ValueError(
                f"new_quantity {self.new_quantity} does not follow from "
                f"{self.movement_type.value} of {self.quantity} on {self.previous_quantity}"
            )
        return self

    @property
    def net_change(self) -> float:
        """Signed change in quantity on hand."""
        return round(self.new_quantity - self.previous_quantity, 2)


class WasteRecord(BaseModel):
    """Queryable projection of a desperdicio movement."""

    id: int | None = None
    item_id: int | None = None
    movement_id: int | None = None
    quantity: float = Field(gt=0)
    reason: str = Field(min_length=1)
    cost: float = Field(default=0.0, ge=0)
    date: datetime = Field(default_factory=datetime.utcnow)
    created_at: datetime = Field(default_factory=datetime.utcnow)
