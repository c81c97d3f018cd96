"""Entity to response DTO conversions shared by use cases and routes."""

from estoque.application.dto.responses import (
    ActivityResponse,
    FieldIssueResponse,
    InventoryItemResponse,
    NotificationResponse,
    StockMovementResponse,
    StockStatusResponse,
    WasteRecordResponse,
)
from estoque.core.entities.activity import ActivityLog
from estoque.core.entities.inventory import InventoryItem, StockMovement, WasteRecord
from estoque.core.entities.notification import Notification
from estoque.core.messages import DEFAULT_LOCALE, translate
from estoque.core.services.movement_validator import ValidationIssue
from estoque.core.services.stock_status import classify_stock


def item_to_response(item: InventoryItem, locale: str = DEFAULT_LOCALE) -> InventoryItemResponse:
    status = classify_stock(item.quantity, item.min_stock, locale)
    return InventoryItemResponse(
        id=item.id,  # type: ignore[arg-type]
        name=item.name,
        category=item.category.value,
        quantity=item.quantity,
        unit=item.unit.value,
        min_stock=item.min_stock,
        cost_per_unit=item.cost_per_unit,
        total_value=item.total_value,
        supplier=item.supplier,
        image_url=item.image_url,
        last_restocked=item.last_restocked,
        status=StockStatusResponse(
            status=status.status.value,
            label=status.label,
            percentage=status.percentage,
        ),
        created_at=item.created_at,
        updated_at=item.updated_at,
    )


def movement_to_response(
    movement: StockMovement, locale: str = DEFAULT_LOCALE
) -> StockMovementResponse:
    """Movements of deleted items show the removed-item fallback name."""
    return StockMovementResponse(
        id=movement.id,  # type: ignore[arg-type]
        item_id=movement.item_id,
        item_name=movement.item_name or translate("removed_item", locale),
        movement_type=movement.movement_type.value,
        quantity=movement.quantity,
        previous_quantity=movement.previous_quantity,
        new_quantity=movement.new_quantity,
        reason=movement.reason,
        cost=movement.cost,
        created_at=movement.created_at,
    )


def notification_to_response(notification: Notification) -> NotificationResponse:
    return NotificationResponse(
        id=notification.id,  # type: ignore[arg-type]
        type=notification.type.value,
        title=notification.title,
        message=notification.message,
        item_id=notification.item_id,
        read=notification.read,
        created_at=notification.created_at,
    )


def waste_to_response(
    record: WasteRecord, item_names: dict[int, str], locale: str = DEFAULT_LOCALE
) -> WasteRecordResponse:
    name = item_names.get(record.item_id) if record.item_id is not None else None
    return WasteRecordResponse(
        id=record.id,  # type: ignore[arg-type]
        item_id=record.item_id,
        item_name=name or translate("removed_item", locale),
        quantity=record.quantity,
        reason=record.reason,
        cost=record.cost,
        date=record.date,
    )


def activity_to_response(activity: ActivityLog) -> ActivityResponse:
    return ActivityResponse(
        id=activity.id,  # type: ignore[arg-type]
        item_id=activity.item_id,
        action=activity.action,
        quantity=activity.quantity,
        description=activity.description,
        created_at=activity.created_at,
    )


def issues_to_response(issues: list[ValidationIssue]) -> list[FieldIssueResponse]:
    return [FieldIssueResponse(field=i.field, message=i.message, code=i.code) for i in issues]
