"""
Ledger Engine.

Turns a validated movement request into everything that has to be written
for it: the updated item, the immutable movement row, the waste projection,
notifications and the activity entry. Persisting the entry is the store's
job (``IInventoryStore.record_movement``), which writes it atomically.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from estoque.config import get_logger
from estoque.core.entities.activity import ActivityLog
from estoque.core.entities.inventory import (
    InventoryItem,
    MovementType,
    StockMovement,
    WasteRecord,
)
from estoque.core.entities.notification import Notification
from estoque.core.exceptions import InsufficientStockError, MovementValidationError
from estoque.core.messages import DEFAULT_LOCALE, translate
from estoque.core.services.movement_validator import (
    MovementValidator,
    ValidationIssue,
    ValidationResult,
)
from estoque.core.services.notification_trigger import NotificationTrigger

logger = get_logger(__name__)

# Tries per movement when a concurrent write changes the item in between
MAX_WRITE_ATTEMPTS = 3


@dataclass(frozen=True)
class MovementTransition:
    """Quantity before and after a movement, with its cost."""

    movement_type: MovementType
    quantity: float
    previous_quantity: float
    new_quantity: float
    cost: float

    @property
    def net_change(self) -> float:
        return round(self.new_quantity - self.previous_quantity, 2)


def compute_transition(
    item: InventoryItem, movement_type: MovementType, quantity: float
) -> MovementTransition:
    """
    Apply the transition function of a movement kind.

    Outflows are costed at the item's current unit cost; entrada and ajuste
    cost nothing.
    """
    previous = round(item.quantity, 2)
    quantity = round(quantity, 2)
    cost = round(quantity * item.cost_per_unit, 2) if movement_type.is_outflow else 0.0
    return MovementTransition(
        movement_type=movement_type,
        quantity=quantity,
        previous_quantity=previous,
        new_quantity=movement_type.resulting_quantity(previous, quantity),
        cost=cost,
    )


def raise_for_result(result: ValidationResult, available: float, unit: str) -> None:
    """Raise the typed error for a failed movement validation."""
    if result.is_valid:
        return
    if result.has_code("insufficient_stock"):
        raise InsufficientStockError(result.issues, available=available, unit=unit)
    raise MovementValidationError(result.issues)


def describe_transition(
    item: InventoryItem, transition: MovementTransition, reason: str | None
) -> str:
    description = (
        f"{item.name}: {transition.previous_quantity:.2f} → "
        f"{transition.new_quantity:.2f} {item.unit.value}"
    )
    if reason:
        description += f" ({reason})"
    return description


@dataclass
class LedgerEntry:
    """All rows produced by one movement, written together."""

    item: InventoryItem
    movement: StockMovement
    transition: MovementTransition
    activity: ActivityLog
    waste_record: WasteRecord | None = None
    notifications: list[Notification] = field(default_factory=list)


class LedgerEngine:
    """Validates movements and assembles ledger entries."""

    def __init__(
        self,
        validator: MovementValidator | None = None,
        trigger: NotificationTrigger | None = None,
        locale: str = DEFAULT_LOCALE,
    ) -> None:
        self.validator = validator or MovementValidator(locale=locale)
        self.trigger = trigger or NotificationTrigger(locale=locale)
        self.locale = locale

    @classmethod
    def from_settings(cls) -> "LedgerEngine":
        from estoque.config import get_settings

        inventory = get_settings().inventory
        return cls(
            validator=MovementValidator.from_settings(),
            trigger=NotificationTrigger(
                locale=inventory.locale,
                currency_symbol=inventory.currency_symbol,
            ),
            locale=inventory.locale,
        )

    def prepare(
        self,
        item: InventoryItem,
        movement_type: Any,
        quantity: Any,
        reason: str | None = None,
        idempotency_key: str | None = None,
        now: datetime | None = None,
    ) -> LedgerEntry:
        """
        Validate a movement against an item and build its ledger entry.

        Raises:
            InsufficientStockError: An outflow exceeds the quantity on hand.
            MovementValidationError: Any other rule is broken.
        """
        result = self.validator.validate(
            movement_type, quantity, item.quantity, reason, item.unit.value
        )
        if not result.is_valid:
            logger.info(
                "movement_rejected",
                item_id=item.id,
                movement_type=str(movement_type),
                codes=[issue.code for issue in result.issues],
            )
            raise_for_result(result, available=item.quantity, unit=item.unit.value)

        kind, value = result.movement_type, result.quantity
        if kind is None or value is None:
            code = "invalid_movement_type" if kind is None else "quantity_not_a_number"
            field_name = "type" if kind is None else "quantity"
            raise MovementValidationError(
                [ValidationIssue(field_name, translate(code, self.locale), code)]
            )

        now = now or datetime.utcnow()
        reason_text = (reason or "").strip() or None
        transition = compute_transition(item, kind, value)

        update: dict[str, Any] = {"quantity": transition.new_quantity, "updated_at": now}
        if kind is MovementType.ENTRADA:
            update["last_restocked"] = now
        updated_item = item.model_copy(update=update)

        movement = StockMovement(
            item_id=item.id,
            movement_type=kind,
            quantity=transition.quantity,
            previous_quantity=transition.previous_quantity,
            new_quantity=transition.new_quantity,
            reason=reason_text,
            cost=transition.cost,
            idempotency_key=idempotency_key,
            created_at=now,
            item_name=item.name,
        )

        waste_record = None
        if kind is MovementType.DESPERDICIO:
            waste_record = WasteRecord(
                item_id=item.id,
                quantity=transition.quantity,
                reason=reason_text or "",
                cost=transition.cost,
                date=now,
                created_at=now,
            )

        activity = ActivityLog(
            item_id=item.id,
            action=translate(f"activity_{kind.value}", self.locale),
            quantity=transition.quantity,
            description=describe_transition(item, transition, reason_text),
            created_at=now,
        )

        return LedgerEntry(
            item=updated_item,
            movement=movement,
            transition=transition,
            activity=activity,
            waste_record=waste_record,
            notifications=self.trigger.evaluate(updated_item, transition, reason_text, now),
        )
