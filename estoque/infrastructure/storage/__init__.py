"""Storage infrastructure implementations."""

from estoque.infrastructure.storage.sqlite import (
    SQLiteActivityStore,
    SQLiteInventoryStore,
    SQLiteNotificationStore,
    SQLitePreferencesStore,
    close_pool,
    get_connection,
    get_pool,
    get_transaction,
)

__all__ = [
    "SQLiteInventoryStore",
    "SQLiteNotificationStore",
    "SQLiteActivityStore",
    "SQLitePreferencesStore",
    "get_pool",
    "close_pool",
    "get_connection",
    "get_transaction",
]
