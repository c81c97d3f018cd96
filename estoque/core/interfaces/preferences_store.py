"""Abstract interface for per-user preferences."""

from abc import ABC, abstractmethod

from estoque.core.entities.preferences import UserPreferences


class IPreferencesStore(ABC):
    """Interface for user preferences persistence."""

    @abstractmethod
    async def get(self, user_id: str) -> UserPreferences | None:
        pass

    @abstractmethod
    async def upsert(self, preferences: UserPreferences) -> UserPreferences:
        """Insert or replace the preferences of ``preferences.user_id``."""
        pass
