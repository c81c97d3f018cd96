"""Update Item Use Case."""

from dataclasses import dataclass, field
from typing import Any

from estoque.application.dto.mappers import (
    issues_to_response,
    item_to_response,
    notification_to_response,
)
from estoque.application.dto.requests import UpdateItemRequest
from estoque.application.dto.responses import ItemMutationResponse
from estoque.config import get_logger, get_settings
from estoque.core.entities.activity import ACTION_UPDATE, ActivityLog
from estoque.core.entities.inventory import (
    Category,
    InventoryItem,
    MovementType,
    StockMovement,
    Unit,
)
from estoque.core.entities.notification import Notification
from estoque.core.exceptions import (
    DuplicateItemError,
    ItemNotFoundError,
    ItemValidationError,
    StockChangedError,
)
from estoque.core.interfaces.inventory_store import IInventoryStore
from estoque.core.messages import translate
from estoque.core.services.item_validator import validate_inventory_item
from estoque.core.services.ledger import MAX_WRITE_ATTEMPTS, LedgerEngine
from estoque.core.services.movement_validator import ValidationIssue, parse_quantity

logger = get_logger(__name__)


@dataclass
class UpdateItemResult:
    item: InventoryItem
    movement: StockMovement | None = None
    notifications: list[Notification] = field(default_factory=list)
    warnings: list[ValidationIssue] = field(default_factory=list)


class UpdateItemUseCase:
    """
    Edit an item's attributes.

    Quantity never changes in place: a new quantity is recorded as an ajuste
    movement so the edit shows up in the ledger and raises stock alerts.
    """

    def __init__(
        self,
        inventory_store: IInventoryStore | None = None,
        ledger: LedgerEngine | None = None,
    ):
        self._inventory_store = inventory_store
        self._ledger = ledger
        self.settings = get_settings().inventory

    async def _get_inventory_store(self) -> IInventoryStore:
        if self._inventory_store is None:
            from estoque.infrastructure.storage.sqlite import get_inventory_store

            self._inventory_store = await get_inventory_store()
        return self._inventory_store

    def _get_ledger(self) -> LedgerEngine:
        if self._ledger is None:
            self._ledger = LedgerEngine.from_settings()
        return self._ledger

    async def execute(self, item_id: int, request: UpdateItemRequest) -> UpdateItemResult:
        locale = self.settings.locale
        store = await self._get_inventory_store()

        item = await store.get_item(item_id)
        if item is None:
            raise ItemNotFoundError(item_id, message=translate("item_not_found", locale))

        payload = request.model_dump(exclude_unset=True)
        validation = validate_inventory_item(
            {"unit": item.unit.value, **payload},
            locale=locale,
            partial=True,
            currency=self.settings.currency_symbol,
            max_quantity=self.settings.max_quantity,
        )
        if not validation.is_valid:
            logger.info("item_rejected", item_id=item_id, codes=[i.code for i in validation.issues])
            raise ItemValidationError(validation.issues)

        duplicate_message = translate("duplicate_item_name", locale)
        if "name" in payload:
            existing = await store.get_item_by_name(payload["name"])
            if existing is not None and existing.id != item.id:
                raise DuplicateItemError(payload["name"], message=duplicate_message)

        changes = self._attribute_changes(payload)
        updated = item.model_copy(update=changes)
        activity = ActivityLog(
            item_id=item.id,
            action=ACTION_UPDATE,
            description=translate("activity_item_updated", locale, name=updated.name),
        )

        try:
            updated = await store.update_item(updated, activity)
        except DuplicateItemError as e:
            raise DuplicateItemError(updated.name, message=duplicate_message) from e

        result = UpdateItemResult(item=updated, warnings=list(validation.warnings))

        new_quantity = parse_quantity(payload.get("quantity"))
        if new_quantity is not None and round(new_quantity, 2) != round(item.quantity, 2):
            for attempt in range(1, MAX_WRITE_ATTEMPTS + 1):
                entry = self._get_ledger().prepare(
                    updated,
                    MovementType.AJUSTE,
                    new_quantity,
                    reason=translate("item_edit_adjustment", locale),
                )
                try:
                    result.movement = await store.record_movement(entry)
                    break
                except StockChangedError as e:
                    if attempt == MAX_WRITE_ATTEMPTS:
                        raise StockChangedError(
                            item_id,
                            e.details["expected"],
                            e.details["actual"],
                            message=translate("stock_changed", locale),
                        ) from e
                    current = await store.get_item(item_id)
                    if current is None:
                        raise ItemNotFoundError(
                            item_id, message=translate("item_not_found", locale)
                        ) from e
                    updated = current
            result.item = entry.item
            result.notifications = entry.notifications

        if result.item.min_stock > 0 and result.item.quantity < result.item.min_stock:
            if not any(w.code == "quantity_below_min_stock" for w in result.warnings):
                result.warnings.append(
                    ValidationIssue(
                        field="quantity",
                        message=translate("quantity_below_min_stock", locale),
                        code="quantity_below_min_stock",
                    )
                )

        logger.info(
            "item_update_complete",
            item_id=item_id,
            fields=sorted(payload),
            adjusted=result.movement is not None,
        )
        return result

    @staticmethod
    def _attribute_changes(payload: dict[str, Any]) -> dict[str, Any]:
        changes: dict[str, Any] = {}
        if "name" in payload:
            changes["name"] = payload["name"].strip()
        if "category" in payload:
            changes["category"] = Category(payload["category"].strip())
        if "unit" in payload:
            changes["unit"] = Unit(payload["unit"].strip())
        if payload.get("min_stock") is not None:
            changes["min_stock"] = round(parse_quantity(payload["min_stock"]) or 0.0, 2)
        if "cost_per_unit" in payload:
            changes["cost_per_unit"] = round(parse_quantity(payload["cost_per_unit"]) or 0.0, 2)
        if "supplier" in payload:
            changes["supplier"] = (payload["supplier"] or "").strip() or None
        if "image_url" in payload:
            changes["image_url"] = payload["image_url"] or None
        return changes

    def to_response(self, result: UpdateItemResult) -> ItemMutationResponse:
        return ItemMutationResponse(
            item=item_to_response(result.item, self.settings.locale),
            warnings=issues_to_response(result.warnings),
            notifications=[notification_to_response(n) for n in result.notifications],
        )
