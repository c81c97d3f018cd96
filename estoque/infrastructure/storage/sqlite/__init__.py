"""SQLite storage implementations."""

from estoque.infrastructure.storage.sqlite.activity_store import SQLiteActivityStore
from estoque.infrastructure.storage.sqlite.connection import (
    ConnectionPool,
    close_pool,
    get_connection,
    get_pool,
    get_snapshot,
    get_transaction,
)
from estoque.infrastructure.storage.sqlite.inventory_store import SQLiteInventoryStore
from estoque.infrastructure.storage.sqlite.notification_store import SQLiteNotificationStore
from estoque.infrastructure.storage.sqlite.preferences_store import SQLitePreferencesStore

# Singleton instances
_inventory_store: SQLiteInventoryStore | None = None
_notification_store: SQLiteNotificationStore | None = None
_activity_store: SQLiteActivityStore | None = None
_preferences_store: SQLitePreferencesStore | None = None


async def get_inventory_store() -> SQLiteInventoryStore:
    """Get singleton inventory store instance."""
    global _inventory_store
    if _inventory_store is None:
        _inventory_store = SQLiteInventoryStore()
    return _inventory_store


async def get_notification_store() -> SQLiteNotificationStore:
    """Get singleton notification store instance."""
    global _notification_store
    if _notification_store is None:
        _notification_store = SQLiteNotificationStore()
    return _notification_store


async def get_activity_store() -> SQLiteActivityStore:
    """Get singleton activity store instance."""
    global _activity_store
    if _activity_store is None:
        _activity_store = SQLiteActivityStore()
    return _activity_store


async def get_preferences_store() -> SQLitePreferencesStore:
    """Get singleton preferences store instance."""
    global _preferences_store
    if _preferences_store is None:
        _preferences_store = SQLitePreferencesStore()
    return _preferences_store


__all__ = [
    # Connection
    "ConnectionPool",
    "get_pool",
    "close_pool",
    "get_connection",
    "get_transaction",
    "get_snapshot",
    # Store classes
    "SQLiteInventoryStore",
    "SQLiteNotificationStore",
    "SQLiteActivityStore",
    "SQLitePreferencesStore",
    # Factory functions
    "get_inventory_store",
    "get_notification_store",
    "get_activity_store",
    "get_preferences_store",
]
