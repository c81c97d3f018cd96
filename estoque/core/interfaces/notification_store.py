"""Abstract interface for notification storage."""

from abc import ABC, abstractmethod

from estoque.core.entities.notification import Notification


class INotificationStore(ABC):
    """Interface for notification persistence."""

    @abstractmethod
    async def list_notifications(
        self, unread_only: bool = False, limit: int = 20
    ) -> list[Notification]:
        """List notifications, newest first."""
        pass

    @abstractmethod
    async def count_unread(self) -> int:
        pass

    @abstractmethod
    async def mark_read(self, notification_id: int) -> bool:
        """Mark one notification as read. Returns False if it does not exist."""
        pass

    @abstractmethod
    async def mark_all_read(self) -> int:
        """Mark every unread notification as read. Returns the number changed."""
        pass

    @abstractmethod
    async def delete(self, notification_id: int) -> bool:
        """Delete one notification. Returns False if it does not exist."""
        pass

    @abstractmethod
    async def delete_all_read(self) -> int:
        """Delete read notifications. Returns the number deleted."""
        pass
