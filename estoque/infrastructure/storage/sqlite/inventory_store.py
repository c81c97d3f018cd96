"""SQLite implementation of inventory storage."""

from datetime import datetime

import aiosqlite

from estoque.config import get_logger
from estoque.core.entities.activity import ActivityLog
from estoque.core.entities.inventory import (
    Category,
    InventoryItem,
    MovementType,
    StockMovement,
    Unit,
    WasteRecord,
)
from estoque.core.entities.report import InventorySnapshot
from estoque.core.exceptions import (
    DuplicateItemError,
    DuplicateSubmissionError,
    ItemNotFoundError,
    PersistenceError,
    StockChangedError,
)
from estoque.core.interfaces.inventory_store import IInventoryStore
from estoque.core.services.ledger import LedgerEntry
from estoque.infrastructure.storage.sqlite.connection import (
    get_connection,
    get_snapshot,
    get_transaction,
)
from estoque.infrastructure.storage.sqlite.rows import escape_like, parse_timestamp, to_iso

logger = get_logger(__name__)

# SQLite reads a negative LIMIT as "no limit"
NO_LIMIT = -1

MOVEMENT_SELECT = """
    SELECT m.*, i.name AS item_name
    FROM stock_movements m
    LEFT JOIN inventory_items i ON i.id = m.item_id
"""


async def insert_activity(conn: aiosqlite.Connection, activity: ActivityLog) -> ActivityLog:
    """Append an activity entry on an open transaction."""
    cursor = await conn.execute(
        """
        INSERT INTO activity_log (item_id, action, quantity, description, created_at)
        VALUES (?, ?, ?, ?, ?)
        """,
        (
            activity.item_id,
            activity.action,
            activity.quantity,
            activity.description,
            activity.created_at.isoformat(),
        ),
    )
    activity.id = cursor.lastrowid
    return activity


class SQLiteInventoryStore(IInventoryStore):
    """SQLite implementation of items, the movement ledger and waste records."""

    async def create_item(
        self, item: InventoryItem, activity: ActivityLog | None = None
    ) -> InventoryItem:
        """Create a new inventory item."""
        now = datetime.utcnow()
        item.created_at = now
        item.updated_at = now
        try:
            async with get_transaction() as conn:
                cursor = await conn.execute(
                    """
                    INSERT INTO inventory_items (
                        name, name_key, category, quantity, unit, min_stock,
                        cost_per_unit, supplier, image_url, last_restocked,
                        created_at, updated_at
                    ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                    """,
                    (
                        item.name,
                        item.name_key,
                        item.category.value,
                        item.quantity,
                        item.unit.value,
                        item.min_stock,
                        item.cost_per_unit,
                        item.supplier,
                        item.image_url,
                        to_iso(item.last_restocked),
                        item.created_at.isoformat(),
                        item.updated_at.isoformat(),
                    ),
                )
                item.id = cursor.lastrowid
                if activity is not None:
                    activity.item_id = item.id
                    await insert_activity(conn, activity)
        except aiosqlite.IntegrityError as e:
            if "name_key" in str(e):
                raise DuplicateItemError(item.name) from e
            raise PersistenceError("create_item", str(e)) from e
        except aiosqlite.Error as e:
            raise PersistenceError("create_item", str(e)) from e

        logger.info("inventory_item_created", item_id=item.id, name=item.name)
        return item

    async def get_item(self, item_id: int) -> InventoryItem | None:
        """Get inventory item by ID."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT * FROM inventory_items WHERE id = ?", (item_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_inventory_item(row)

    async def get_item_by_name(self, name: str) -> InventoryItem | None:
        """Get inventory item by case-insensitive name."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT * FROM inventory_items WHERE name_key = ?",
                (name.strip().casefold(),),
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_inventory_item(row)

    async def update_item(
        self, item: InventoryItem, activity: ActivityLog | None = None
    ) -> InventoryItem:
        """Update item attributes. Quantity only changes through the ledger."""
        item.updated_at = datetime.utcnow()
        try:
            async with get_transaction() as conn:
                cursor = await conn.execute(
                    """
                    UPDATE inventory_items SET
                        name = ?,
                        name_key = ?,
                        category = ?,
                        unit = ?,
                        min_stock = ?,
                        cost_per_unit = ?,
                        supplier = ?,
                        image_url = ?,
                        updated_at = ?
                    WHERE id = ?
                    """,
                    (
                        item.name,
                        item.name_key,
                        item.category.value,
                        item.unit.value,
                        item.min_stock,
                        item.cost_per_unit,
                        item.supplier,
                        item.image_url,
                        item.updated_at.isoformat(),
                        item.id,
                    ),
                )
                if cursor.rowcount == 0:
                    raise ItemNotFoundError(item.id or 0)
                if activity is not None:
                    await insert_activity(conn, activity)
        except aiosqlite.IntegrityError as e:
            if "name_key" in str(e):
                raise DuplicateItemError(item.name) from e
            raise PersistenceError("update_item", str(e)) from e
        except aiosqlite.Error as e:
            raise PersistenceError("update_item", str(e)) from e

        logger.info("inventory_item_updated", item_id=item.id)
        return item

    async def delete_item(self, item_id: int, activity: ActivityLog | None = None) -> bool:
        """Delete an item. Movements, waste, notifications and activity keep a NULL reference."""
        try:
            async with get_transaction() as conn:
                cursor = await conn.execute(
                    "DELETE FROM inventory_items WHERE id = ?", (item_id,)
                )
                deleted = cursor.rowcount > 0
                if deleted and activity is not None:
                    activity.item_id = None
                    await insert_activity(conn, activity)
        except aiosqlite.Error as e:
            raise PersistenceError("delete_item", str(e)) from e

        if deleted:
            logger.info("inventory_item_deleted", item_id=item_id)
        return deleted

    async def list_items(
        self,
        search: str | None = None,
        category: str | None = None,
        limit: int | None = 500,
        offset: int = 0,
    ) -> list[InventoryItem]:
        """List items ordered by name."""
        clauses: list[str] = []
        params: list = []
        if search and search.strip():
            clauses.append("name_key LIKE ? ESCAPE '\\'")
            params.append(f"%{escape_like(search.strip().casefold())}%")
        if category:
            clauses.append("category = ?")
            params.append(category)

        where = f"WHERE {' AND '.join(clauses)}" if clauses else ""
        params.extend([NO_LIMIT if limit is None else limit, offset])

        async with get_connection() as conn:
            cursor = await conn.execute(
                f"""
                SELECT * FROM inventory_items
                {where}
                ORDER BY name_key
                LIMIT ? OFFSET ?
                """,
                params,
            )
            rows = await cursor.fetchall()
            return [self._row_to_inventory_item(row) for row in rows]

    async def record_movement(self, entry: LedgerEntry) -> StockMovement:
        """
        Persist a ledger entry in one transaction.

        The item update comes first and only applies while the stored
        quantity still equals the movement's previous quantity; otherwise
        nothing is written. Any failure rolls back the whole entry.

        Raises:
            ItemNotFoundError: The item was deleted.
            StockChangedError: Another movement changed the quantity first.
            DuplicateSubmissionError: The idempotency key is already recorded.
        """
        item = entry.item
        movement = entry.movement
        try:
            async with get_transaction() as conn:
                cursor = await conn.execute(
                    """
                    UPDATE inventory_items SET
                        quantity = ?,
                        last_restocked = ?,
                        updated_at = ?
                    WHERE id = ? AND ROUND(quantity, 2) = ROUND(?, 2)
                    """,
                    (
                        item.quantity,
                        to_iso(item.last_restocked),
                        item.updated_at.isoformat(),
                        item.id,
                        movement.previous_quantity,
                    ),
                )
                if cursor.rowcount == 0:
                    await self._raise_for_missed_update(conn, item.id or 0, movement)

                cursor = await conn.execute(
                    """
                    INSERT INTO stock_movements (
                        item_id, movement_type, quantity, previous_quantity,
                        new_quantity, reason, cost, idempotency_key, created_at
                    ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
                    """,
                    (
                        movement.item_id,
                        movement.movement_type.value,
                        movement.quantity,
                        movement.previous_quantity,
                        movement.new_quantity,
                        movement.reason,
                        movement.cost,
                        movement.idempotency_key,
                        movement.created_at.isoformat(),
                    ),
                )
                movement.id = cursor.lastrowid

                if entry.waste_record is not None:
                    waste = entry.waste_record
                    waste.movement_id = movement.id
                    cursor = await conn.execute(
                        """
                        INSERT INTO waste_tracking (
                            item_id, movement_id, quantity, reason, cost, date, created_at
                        ) VALUES (?, ?, ?, ?, ?, ?, ?)
                        """,
                        (
                            waste.item_id,
                            waste.movement_id,
                            waste.quantity,
                            waste.reason,
                            waste.cost,
                            waste.date.isoformat(),
                            waste.created_at.isoformat(),
                        ),
                    )
                    waste.id = cursor.lastrowid

                for notification in entry.notifications:
                    cursor = await conn.execute(
                        """
                        INSERT INTO notifications (type, title, message, item_id, read, created_at)
                        VALUES (?, ?, ?, ?, ?, ?)
                        """,
                        (
                            notification.type.value,
                            notification.title,
                            notification.message,
                            notification.item_id,
                            int(notification.read),
                            notification.created_at.isoformat(),
                        ),
                    )
                    notification.id = cursor.lastrowid

                await insert_activity(conn, entry.activity)

        except aiosqlite.IntegrityError as e:
            if movement.idempotency_key and "idempotency_key" in str(e):
                raise DuplicateSubmissionError(movement.idempotency_key) from e
            logger.error("persistence_failed", operation="record_movement", error=str(e))
            raise PersistenceError("record_movement", str(e)) from e
        except aiosqlite.Error as e:
            logger.error("persistence_failed", operation="record_movement", error=str(e))
            raise PersistenceError("record_movement", str(e)) from e

        logger.info(
            "stock_movement_recorded",
            movement_id=movement.id,
            item_id=movement.item_id,
            type=movement.movement_type.value,
            qty=movement.quantity,
            previous=movement.previous_quantity,
            new=movement.new_quantity,
            notifications=len(entry.notifications),
        )
        return movement

    @staticmethod
    async def _raise_for_missed_update(
        conn: aiosqlite.Connection, item_id: int, movement: StockMovement
    ) -> None:
        cursor = await conn.execute(
            "SELECT quantity FROM inventory_items WHERE id = ?", (item_id,)
        )
        row = await cursor.fetchone()
        if row is None:
            raise ItemNotFoundError(item_id)
        logger.info(
            "stock_changed_concurrently",
            item_id=item_id,
            expected=movement.previous_quantity,
            actual=row["quantity"],
        )
        raise StockChangedError(item_id, movement.previous_quantity, float(row["quantity"]))

    async def get_movement_by_key(self, idempotency_key: str) -> StockMovement | None:
        async with get_connection() as conn:
            cursor = await conn.execute(
                f"{MOVEMENT_SELECT} WHERE m.idempotency_key = ?",
                (idempotency_key,),
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_movement(row)

    async def list_movements(
        self,
        item_id: int | None = None,
        movement_type: MovementType | None = None,
        date_from: datetime | None = None,
        date_to: datetime | None = None,
        limit: int | None = 100,
        offset: int = 0,
    ) -> list[StockMovement]:
        """List movements, newest first."""
        clauses: list[str] = []
        params: list = []
        if item_id is not None:
            clauses.append("m.item_id = ?")
            params.append(item_id)
        if movement_type is not None:
            clauses.append("m.movement_type = ?")
            params.append(movement_type.value)
        if date_from is not None:
            clauses.append("m.created_at >= ?")
            params.append(date_from.isoformat())
        if date_to is not None:
            clauses.append("m.created_at < ?")
            params.append(date_to.isoformat())

        where = f"WHERE {' AND '.join(clauses)}" if clauses else ""
        params.extend([NO_LIMIT if limit is None else limit, offset])

        async with get_connection() as conn:
            cursor = await conn.execute(
                f"""
                {MOVEMENT_SELECT}
                {where}
                ORDER BY m.created_at DESC, m.id DESC
                LIMIT ? OFFSET ?
                """,
                params,
            )
            rows = await cursor.fetchall()
            return [self._row_to_movement(row) for row in rows]

    async def count_movements(self, item_id: int) -> int:
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT COUNT(*) FROM stock_movements WHERE item_id = ?", (item_id,)
            )
            row = await cursor.fetchone()
            return int(row[0]) if row else 0

    async def list_waste(
        self,
        date_from: datetime | None = None,
        date_to: datetime | None = None,
        limit: int | None = 1000,
    ) -> list[WasteRecord]:
        """List waste records, newest first."""
        clauses: list[str] = []
        params: list = []
        if date_from is not None:
            clauses.append("date >= ?")
            params.append(date_from.isoformat())
        if date_to is not None:
            clauses.append("date < ?")
            params.append(date_to.isoformat())

        where = f"WHERE {' AND '.join(clauses)}" if clauses else ""
        params.append(NO_LIMIT if limit is None else limit)

        async with get_connection() as conn:
            cursor = await conn.execute(
                f"SELECT * FROM waste_tracking {where} ORDER BY date DESC, id DESC LIMIT ?",
                params,
            )
            rows = await cursor.fetchall()
            return [self._row_to_waste(row) for row in rows]

    async def get_inventory_snapshot(self, since: datetime) -> InventorySnapshot:
        """Read the quantity total and the movements since ``since`` in one snapshot."""
        async with get_snapshot() as conn:
            cursor = await conn.execute(
                "SELECT COALESCE(SUM(quantity), 0) FROM inventory_items"
            )
            row = await cursor.fetchone()
            current_total = float(row[0]) if row else 0.0

            cursor = await conn.execute(
                f"""
                {MOVEMENT_SELECT}
                WHERE m.created_at >= ?
                ORDER BY m.created_at, m.id
                """,
                (since.isoformat(),),
            )
            rows = await cursor.fetchall()

        return InventorySnapshot(
            current_total=round(current_total, 2),
            movements=[self._row_to_movement(r) for r in rows],
        )

    @staticmethod
    def _row_to_inventory_item(row: aiosqlite.Row) -> InventoryItem:
        """Convert a database row to an InventoryItem entity."""
        now = datetime.utcnow()
        return InventoryItem(
            id=row["id"],
            name=row["name"],
            category=Category(row["category"]),
            quantity=float(row["quantity"]),
            unit=Unit(row["unit"]),
            min_stock=float(row["min_stock"]),
            cost_per_unit=float(row["cost_per_unit"]),
            supplier=row["supplier"],
            image_url=row["image_url"],
            last_restocked=parse_timestamp(row["last_restocked"]),
            created_at=parse_timestamp(row["created_at"], now),
            updated_at=parse_timestamp(row["updated_at"], now),
        )

    @staticmethod
    def _row_to_movement(row: aiosqlite.Row) -> StockMovement:
        """Convert a database row to a StockMovement entity."""
        return StockMovement(
            id=row["id"],
            item_id=row["item_id"],
            movement_type=MovementType(row["movement_type"]),
            quantity=float(row["quantity"]),
            previous_quantity=float(row["previous_quantity"]),
            new_quantity=float(row["new_quantity"]),
            reason=row["reason"],
            cost=float(row["cost"]),
            idempotency_key=row["idempotency_key"],
            created_at=parse_timestamp(row["created_at"], datetime.utcnow()),
            item_name=row["item_name"],
        )

    @staticmethod
    def _row_to_waste(row: aiosqlite.Row) -> WasteRecord:
        now = datetime.utcnow()
        return WasteRecord(
            id=row["id"],
            item_id=row["item_id"],
            movement_id=row["movement_id"],
            quantity=float(row["quantity"]),
            reason=row["reason"],
            cost=float(row["cost"]),
            date=parse_timestamp(row["date"], now),
            created_at=parse_timestamp(row["created_at"], now),
        )
