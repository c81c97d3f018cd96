"""Column conversions shared by the SQLite stores."""

from datetime import datetime


def to_iso(value: datetime | None) -> str | None:
    return value.isoformat() if value else None


def parse_timestamp(value: str | None, default: datetime | None = None) -> datetime | None:
    """Parse an ISO timestamp column, falling back to ``default``."""
    if value:
        try:
            return datetime.fromisoformat(value)
        except (ValueError, TypeError):
            pass
    return default


def escape_like(text: str) -> str:
    """Escape LIKE wildcards; use with ``ESCAPE '\\'``."""
    return text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
