"""SQLite implementation of the activity log read side."""

from datetime import datetime

import aiosqlite

from estoque.core.entities.activity import ActivityLog
from estoque.core.interfaces.activity_store import IActivityStore
from estoque.infrastructure.storage.sqlite.connection import get_connection
from estoque.infrastructure.storage.sqlite.rows import parse_timestamp


class SQLiteActivityStore(IActivityStore):
    async def list_recent(self, limit: int = 10) -> list[ActivityLog]:
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT * FROM activity_log ORDER BY created_at DESC, id DESC LIMIT ?",
                (limit,),
            )
            rows = await cursor.fetchall()
            return [self._row_to_activity(row) for row in rows]

    @staticmethod
    def _row_to_activity(row: aiosqlite.Row) -> ActivityLog:
        return ActivityLog(
            id=row["id"],
            item_id=row["item_id"],
            action=row["action"],
            quantity=float(row["quantity"]) if row["quantity"] is not None else None,
            description=row["description"],
            created_at=parse_timestamp(row["created_at"], datetime.utcnow()),
        )
