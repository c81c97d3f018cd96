"""Abstract interface for the activity log."""

from abc import ABC, abstractmethod

from estoque.core.entities.activity import ActivityLog


class IActivityStore(ABC):
    """Read side of the append-only activity log.

    Entries are written by the inventory store together with the change
    they describe.
    """

    @abstractmethod
    async def list_recent(self, limit: int = 10) -> list[ActivityLog]:
        """Most recent entries first."""
        pass
