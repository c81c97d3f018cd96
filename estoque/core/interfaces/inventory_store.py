"""Abstract interface for inventory storage."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import TYPE_CHECKING

from estoque.core.entities.activity import ActivityLog
from estoque.core.entities.inventory import (
    InventoryItem,
    MovementType,
    StockMovement,
    WasteRecord,
)
from estoque.core.entities.report import InventorySnapshot

if TYPE_CHECKING:
    from estoque.core.services.ledger import LedgerEntry


class IInventoryStore(ABC):
    """Interface for inventory items, the movement ledger and waste records."""

    @abstractmethod
    async def create_item(
        self, item: InventoryItem, activity: ActivityLog | None = None
    ) -> InventoryItem:
        """Create a new inventory item, with its activity entry."""
        pass

    @abstractmethod
    async def get_item(self, item_id: int) -> InventoryItem | None:
        """Get inventory item by ID."""
        pass

    @abstractmethod
    async def get_item_by_name(self, name: str) -> InventoryItem | None:
        """Get inventory item by name, case-insensitively."""
        pass

    @abstractmethod
    async def update_item(
        self, item: InventoryItem, activity: ActivityLog | None = None
    ) -> InventoryItem:
        """Update item attributes other than quantity."""
        pass

    @abstractmethod
    async def delete_item(self, item_id: int, activity: ActivityLog | None = None) -> bool:
        """Delete an item; its history keeps a NULL item reference."""
        pass

    @abstractmethod
    async def list_items(
        self,
        search: str | None = None,
        category: str | None = None,
        limit: int | None = 500,
        offset: int = 0,
    ) -> list[InventoryItem]:
        """List items ordered by name, optionally filtered. ``limit=None`` reads all."""
        pass

    @abstractmethod
    async def record_movement(self, entry: "LedgerEntry") -> StockMovement:
        """
        Persist a ledger entry atomically.

        Writes the item quantity, the movement, the waste record, the
        notifications and the activity entry in one transaction.

        Raises:
            ItemNotFoundError: The item disappeared before the write.
            StockChangedError: The stored quantity no longer matches the
                movement's previous quantity.
            DuplicateSubmissionError: The idempotency key is already used.
            PersistenceError: The database rejected the write.
        """
        pass

    @abstractmethod
    async def get_movement_by_key(self, idempotency_key: str) -> StockMovement | None:
        """Get a movement by its idempotency key."""
        pass

    @abstractmethod
    async def list_movements(
        self,
        item_id: int | None = None,
        movement_type: MovementType | None = None,
        date_from: datetime | None = None,
        date_to: datetime | None = None,
        limit: int | None = 100,
        offset: int = 0,
    ) -> list[StockMovement]:
        """List movements, newest first. ``limit=None`` reads all."""
        pass

    @abstractmethod
    async def count_movements(self, item_id: int) -> int:
        """Count movements recorded for an item."""
        pass

    @abstractmethod
    async def list_waste(
        self,
        date_from: datetime | None = None,
        date_to: datetime | None = None,
        limit: int | None = 1000,
    ) -> list[WasteRecord]:
        """List waste records, newest first. ``limit=None`` reads all."""
        pass

    @abstractmethod
    async def get_inventory_snapshot(self, since: datetime) -> InventorySnapshot:
        """Current quantity total and movements since ``since``, read together."""
        pass
