"""SQLite implementation of user preferences storage."""

from datetime import datetime

import aiosqlite

from estoque.config import get_logger
from estoque.core.entities.preferences import UserPreferences
from estoque.core.exceptions import PersistenceError
from estoque.core.interfaces.preferences_store import IPreferencesStore
from estoque.infrastructure.storage.sqlite.connection import get_connection, get_transaction
from estoque.infrastructure.storage.sqlite.rows import parse_timestamp

logger = get_logger(__name__)


class SQLitePreferencesStore(IPreferencesStore):
    async def get(self, user_id: str) -> UserPreferences | None:
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT * FROM user_preferences WHERE user_id = ?", (user_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_preferences(row)

    async def upsert(self, preferences: UserPreferences) -> UserPreferences:
        preferences.updated_at = datetime.utcnow()
        try:
            async with get_transaction() as conn:
                await conn.execute(
                    """
                    INSERT INTO user_preferences (
                        user_id, waste_safe_threshold, waste_critical_threshold,
                        created_at, updated_at
                    ) VALUES (?, ?, ?, ?, ?)
                    ON CONFLICT(user_id) DO UPDATE SET
                        waste_safe_threshold = excluded.waste_safe_threshold,
                        waste_critical_threshold = excluded.waste_critical_threshold,
                        updated_at = excluded.updated_at
                    """,
                    (
                        preferences.user_id,
                        preferences.waste_safe_threshold,
                        preferences.waste_critical_threshold,
                        preferences.created_at.isoformat(),
                        preferences.updated_at.isoformat(),
                    ),
                )
        except aiosqlite.Error as e:
            raise PersistenceError("upsert_preferences", str(e)) from e

        logger.info(
            "preferences_saved",
            user_id=preferences.user_id,
            safe=preferences.waste_safe_threshold,
            critical=preferences.waste_critical_threshold,
        )
        return preferences

    @staticmethod
    def _row_to_preferences(row: aiosqlite.Row) -> UserPreferences:
        now = datetime.utcnow()
        return UserPreferences(
            user_id=row["user_id"],
            waste_safe_threshold=float(row["waste_safe_threshold"]),
            waste_critical_threshold=float(row["waste_critical_threshold"]),
            created_at=parse_timestamp(row["created_at"], now),
            updated_at=parse_timestamp(row["updated_at"], now),
        )
