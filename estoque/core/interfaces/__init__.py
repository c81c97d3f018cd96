"""Core interfaces (ports) for dependency injection."""

from estoque.core.interfaces.activity_store import IActivityStore
from estoque.core.interfaces.inventory_store import IInventoryStore
from estoque.core.interfaces.notification_store import INotificationStore
from estoque.core.interfaces.preferences_store import IPreferencesStore

__all__ = [
    "IInventoryStore",
    "INotificationStore",
    "IActivityStore",
    "IPreferencesStore",
]
