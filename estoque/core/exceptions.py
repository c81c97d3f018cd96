"""
Domain exceptions for the inventory service.

Provides specific exception types for different error scenarios. The API
boundary maps each family to an HTTP status code.
"""

from typing import Any


class EstoqueError(Exception):
    """Base exception for all inventory service errors."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


# Lookup Exceptions
class NotFoundError(EstoqueError):
    """Referenced record does not exist."""

    pass


class ItemNotFoundError(NotFoundError):
    """Inventory item not found."""

    def __init__(self, item_id: int, message: str | None = None):
        super().__init__(
            message or f"Inventory item not found: {item_id}",
            code="ITEM_NOT_FOUND",
            details={"item_id": item_id},
        )


class NotificationNotFoundError(NotFoundError):
    """Notification not found."""

    def __init__(self, notification_id: int, message: str | None = None):
        super().__init__(
            message or f"Notification not found: {notification_id}",
            code="NOTIFICATION_NOT_FOUND",
            details={"notification_id": notification_id},
        )


# Storage Exceptions
class StorageError(EstoqueError):
    """Base exception for storage operations."""

    pass


class PersistenceError(StorageError):
    """The storage layer rejected a read or write."""

    def __init__(self, operation: str, error: str):
        super().__init__(
            f"Database error during {operation}: {error}",
            code="PERSISTENCE_ERROR",
            details={"operation": operation, "error": error},
        )


class DuplicateSubmissionError(StorageError):
    """A movement with the same idempotency key was already recorded."""

    def __init__(self, idempotency_key: str):
        super().__init__(
            f"Movement already recorded for key: {idempotency_key}",
            code="DUPLICATE_SUBMISSION",
            details={"idempotency_key": idempotency_key},
        )


# Validation Exceptions
class ValidationError(EstoqueError):
    """Input validation failed."""

    def __init__(self, field: str, message: str, value: Any = None):
        super().__init__(
            message,
            code="VALIDATION_ERROR",
            details={
                "field": field,
                "message": message,
                "value": str(value)[:100] if value is not None else None,
            },
        )
        self.field = field


class IssuesValidationError(ValidationError):
    """Validation failed on one or more fields.

    ``issues`` holds every violation; the first one drives ``message`` so a
    caller showing a single line still gets something useful.
    """

    default_code = "VALIDATION_ERROR"

    def __init__(self, issues: list[Any]):
        if not issues:
            raise ValueError("at least one validation issue is required")
        first = issues[0]
        super().__init__(field=first.field, message=first.message)
        self.code = self.default_code
        self.issues = list(issues)
        self.details["errors"] = [
            {"field": i.field, "message": i.message, "code": i.code} for i in self.issues
        ]


class MovementValidationError(IssuesValidationError):
    """A proposed stock movement breaks a business rule."""

    default_code = "MOVEMENT_INVALID"


class InsufficientStockError(MovementValidationError):
    """An outflow asks for more than the available quantity."""

    default_code = "INSUFFICIENT_STOCK"

    def __init__(self, issues: list[Any], available: float, unit: str):
        super().__init__(issues)
        self.available = available
        self.unit = unit
        self.details.update({"available": round(available, 2), "unit": unit})


class ItemValidationError(IssuesValidationError):
    """An inventory item payload breaks a business rule."""

    default_code = "ITEM_INVALID"


class DuplicateItemError(ValidationError):
    """Another item already uses this name (case-insensitive)."""

    def __init__(self, name: str, message: str | None = None):
        super().__init__(
            field="name",
            message=message or f"An item named '{name}' already exists",
            value=name,
        )
        self.code = "DUPLICATE_ITEM"


class IdempotencyConflictError(ValidationError):
    """An idempotency key was reused for a different movement."""

    def __init__(self, idempotency_key: str, message: str | None = None):
        super().__init__(
            field="idempotency_key",
            message=message or f"Key already used for another movement: {idempotency_key}",
            value=idempotency_key,
        )
        self.code = "IDEMPOTENCY_CONFLICT"


class PreferencesValidationError(ValidationError):
    """Waste thresholds are inconsistent."""

    def __init__(self, field: str, message: str, value: Any = None):
        super().__init__(field=field, message=message, value=value)
        self.code = "PREFERENCES_INVALID"


# Conflict Exceptions
class ConflictError(EstoqueError):
    """The record changed while the request was being served."""

    pass


class StockChangedError(ConflictError):
    """The item quantity moved between reading it and writing the movement."""

    def __init__(self, item_id: int, expected: float, actual: float, message: str | None = None):
        super().__init__(
            message or f"Stock of item {item_id} changed: expected {expected}, found {actual}",
            code="STOCK_CHANGED",
            details={"item_id": item_id, "expected": expected, "actual": actual},
        )


# Access Exceptions
class UnauthorizedError(EstoqueError):
    """The request carries no user identity from the auth provider."""

    def __init__(self, message: str = "User not authenticated"):
        super().__init__(message, code="UNAUTHORIZED")


class ConfigurationError(EstoqueError):
    """Configuration error."""

    pass
