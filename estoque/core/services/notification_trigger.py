"""Notification Trigger: advisory notifications for a stock movement."""

from datetime import datetime
from typing import TYPE_CHECKING

from estoque.core.entities.inventory import InventoryItem, MovementType
from estoque.core.entities.notification import Notification, NotificationType
from estoque.core.messages import DEFAULT_LOCALE, translate
from estoque.core.services.stock_status import CRITICAL_RATIO

if TYPE_CHECKING:
    from estoque.core.services.ledger import MovementTransition


def plain_number(value: float) -> str:
    """Up to 2 decimals, without trailing zeros (7.0 -> "7")."""
    return f"{round(value, 2):.2f}".rstrip("0").rstrip(".")


class NotificationTrigger:
    """
    Builds the notifications a movement produces.

    A stock alert is raised whenever the new quantity is at or below the
    minimum; a waste movement always raises a waste alert. Repeated
    crossings raise repeated alerts.
    """

    def __init__(self, locale: str = DEFAULT_LOCALE, currency_symbol: str = "R$") -> None:
        self.locale = locale
        self.currency_symbol = currency_symbol

    def evaluate(
        self,
        item: InventoryItem,
        transition: "MovementTransition",
        reason: str | None = None,
        now: datetime | None = None,
    ) -> list[Notification]:
        created_at = now or datetime.utcnow()
        notifications: list[Notification] = []

        new_quantity = transition.new_quantity
        if item.min_stock > 0 and new_quantity <= item.min_stock:
            critical = new_quantity <= item.min_stock * CRITICAL_RATIO
            notifications.append(
                Notification(
                    type=(
                        NotificationType.CRITICAL_STOCK
                        if critical
                        else NotificationType.LOW_STOCK
                    ),
                    title=translate(
                        "notification_critical_title" if critical else "notification_low_title",
                        self.locale,
                    ),
                    message=translate(
                        "notification_stock_message",
                        self.locale,
                        name=item.name,
                        quantity=plain_number(new_quantity),
                        unit=item.unit.value,
                        min_stock=plain_number(item.min_stock),
                    ),
                    item_id=item.id,
                    created_at=created_at,
                )
            )

        if transition.movement_type is MovementType.DESPERDICIO:
            notifications.append(
                Notification(
                    type=NotificationType.WASTE,
                    title=translate("notification_waste_title", self.locale),
                    message=translate(
                        "notification_waste_message",
                        self.locale,
                        name=item.name,
                        quantity=plain_number(transition.quantity),
                        unit=item.unit.value,
                        currency=self.currency_symbol,
                        cost=f"{transition.cost:.2f}",
                        reason=reason or translate("no_reason", self.locale),
                    ),
                    item_id=item.id,
                    created_at=created_at,
                )
            )

        return notifications
