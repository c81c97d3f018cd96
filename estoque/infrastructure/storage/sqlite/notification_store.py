"""SQLite implementation of notification storage."""

from datetime import datetime

import aiosqlite

from estoque.config import get_logger
from estoque.core.entities.notification import Notification, NotificationType
from estoque.core.exceptions import PersistenceError
from estoque.core.interfaces.notification_store import INotificationStore
from estoque.infrastructure.storage.sqlite.connection import get_connection, get_transaction
from estoque.infrastructure.storage.sqlite.rows import parse_timestamp

logger = get_logger(__name__)


class SQLiteNotificationStore(INotificationStore):
    """Notifications are inserted by the inventory store with their movement."""

    async def list_notifications(
        self, unread_only: bool = False, limit: int = 20
    ) -> list[Notification]:
        where = "WHERE read = 0" if unread_only else ""
        async with get_connection() as conn:
            cursor = await conn.execute(
                f"""
                SELECT * FROM notifications
                {where}
                ORDER BY created_at DESC, id DESC
                LIMIT ?
                """,
                (limit,),
            )
            rows = await cursor.fetchall()
            return [self._row_to_notification(row) for row in rows]

    async def count_unread(self) -> int:
        async with get_connection() as conn:
            cursor = await conn.execute("SELECT COUNT(*) FROM notifications WHERE read = 0")
            row = await cursor.fetchone()
            return int(row[0]) if row else 0

    async def mark_read(self, notification_id: int) -> bool:
        return await self._write(
            "mark_read",
            "UPDATE notifications SET read = 1 WHERE id = ?",
            (notification_id,),
        ) > 0

    async def mark_all_read(self) -> int:
        return await self._write(
            "mark_all_read", "UPDATE notifications SET read = 1 WHERE read = 0", ()
        )

    async def delete(self, notification_id: int) -> bool:
        return await self._write(
            "delete_notification",
            "DELETE FROM notifications WHERE id = ?",
            (notification_id,),
        ) > 0

    async def delete_all_read(self) -> int:
        return await self._write(
            "delete_read_notifications", "DELETE FROM notifications WHERE read = 1", ()
        )

    async def _write(self, operation: str, sql: str, params: tuple) -> int:
        try:
            async with get_transaction() as conn:
                cursor = await conn.execute(sql, params)
                changed = cursor.rowcount
        except aiosqlite.Error as e:
            raise PersistenceError(operation, str(e)) from e
        logger.info("notifications_changed", operation=operation, rows=changed)
        return changed

    @staticmethod
    def _row_to_notification(row: aiosqlite.Row) -> Notification:
        return Notification(
            id=row["id"],
            type=NotificationType(row["type"]),
            title=row["title"],
            message=row["message"],
            item_id=row["item_id"],
            read=bool(row["read"]),
            created_at=parse_timestamp(row["created_at"], datetime.utcnow()),
        )
