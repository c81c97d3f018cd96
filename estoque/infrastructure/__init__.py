"""Infrastructure layer implementations."""

from estoque.infrastructure import storage

__all__ = ["storage"]
