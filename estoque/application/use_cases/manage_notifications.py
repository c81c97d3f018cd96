"""Notification Use Case: listing, polling and read-state changes."""

from typing import Literal

from estoque.application.dto.responses import UnreadCountResponse
from estoque.config import get_logger, get_settings
from estoque.core.entities.notification import Notification
from estoque.core.exceptions import NotificationNotFoundError
from estoque.core.interfaces.notification_store import INotificationStore
from estoque.core.messages import translate

logger = get_logger(__name__)

Target = int | Literal["all"]


class ManageNotificationsUseCase:
    """Notifications are produced by movements; clients only read and dismiss them."""

    def __init__(self, notification_store: INotificationStore | None = None):
        self._notification_store = notification_store
        self.settings = get_settings().inventory

    async def _get_notification_store(self) -> INotificationStore:
        if self._notification_store is None:
            from estoque.infrastructure.storage.sqlite import get_notification_store

            self._notification_store = await get_notification_store()
        return self._notification_store

    async def list_notifications(
        self, unread_only: bool = False, limit: int = 20
    ) -> list[Notification]:
        store = await self._get_notification_store()
        return await store.list_notifications(unread_only=unread_only, limit=limit)

    async def unread_count(self) -> UnreadCountResponse:
        store = await self._get_notification_store()
        return UnreadCountResponse(
            count=await store.count_unread(),
            poll_interval_seconds=self.settings.notification_poll_seconds,
        )

    async def mark_read(self, target: Target) -> int:
        """Mark one notification, or every unread one, as read."""
        store = await self._get_notification_store()
        if target == "all":
            return await store.mark_all_read()
        if not await store.mark_read(target):
            raise self._not_found(target)
        return 1

    async def delete(self, target: Target) -> int:
        """Delete one notification, or every read one."""
        store = await self._get_notification_store()
        if target == "all":
            return await store.delete_all_read()
        if not await store.delete(target):
            raise self._not_found(target)
        return 1

    def _not_found(self, notification_id: int) -> NotificationNotFoundError:
        return NotificationNotFoundError(
            notification_id,
            message=translate("notification_not_found", self.settings.locale),
        )
