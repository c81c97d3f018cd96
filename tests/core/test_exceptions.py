"""Unit tests for domain exceptions."""

import pytest

from estoque.core.exceptions import (
    ConfigurationError,
    ConflictError,
    DuplicateItemError,
    DuplicateSubmissionError,
    EstoqueError,
    IdempotencyConflictError,
    InsufficientStockError,
    IssuesValidationError,
    ItemNotFoundError,
    ItemValidationError,
    MovementValidationError,
    NotFoundError,
    NotificationNotFoundError,
    PersistenceError,
    PreferencesValidationError,
    StorageError,
    StockChangedError,
    UnauthorizedError,
    ValidationError,
)
from estoque.core.services.movement_validator import ValidationIssue


def _issue(field: str = "quantity", code: str = "quantity_must_be_positive") -> ValidationIssue:
    return ValidationIssue(field=field, message=f"{field} is wrong", code=code)


class TestEstoqueError:
    """Tests for base EstoqueError exception."""

    def test_basic_initialization(self):
        error = EstoqueError("Something went wrong")
        assert str(error) == "Something went wrong"
        assert error.message == "Something went wrong"
        assert error.code == "EstoqueError"
        assert error.details == {}

    def test_with_custom_code(self):
        error = EstoqueError("Error message", code="CUSTOM_ERROR")
        assert error.code == "CUSTOM_ERROR"

    def test_to_dict(self):
        error = EstoqueError("Test error", code="TEST_CODE", details={"extra": "info"})
        assert error.to_dict() == {
            "error": "TEST_CODE",
            "message": "Test error",
            "details": {"extra": "info"},
        }


class TestLookupErrors:
    def test_item_not_found(self):
        error = ItemNotFoundError(42)
        assert isinstance(error, NotFoundError)
        assert error.code == "ITEM_NOT_FOUND"
        assert error.details["item_id"] == 42
        assert "42" in error.message

    def test_item_not_found_custom_message(self):
        error = ItemNotFoundError(42, message="Item não encontrado")
        assert error.message == "Item não encontrado"

    def test_notification_not_found(self):
        error = NotificationNotFoundError(7)
        assert isinstance(error, NotFoundError)
        assert error.code == "NOTIFICATION_NOT_FOUND"


class TestValidationErrors:
    def test_validation_error_fields(self):
        error = ValidationError("name", "Nome é obrigatório", value="")
        assert error.field == "name"
        assert error.code == "VALIDATION_ERROR"
        assert error.details["field"] == "name"

    def test_value_is_truncated(self):
        error = ValidationError("name", "too long", value="x" * 500)
        assert len(error.details["value"]) == 100

    def test_issues_error_requires_issues(self):
        with pytest.raises(ValueError):
            IssuesValidationError([])

    def test_issues_error_keeps_every_issue(self):
        issues = [_issue("quantity"), _issue("reason", "reason_required")]
        error = MovementValidationError(issues)

        assert error.code == "MOVEMENT_INVALID"
        assert error.field == "quantity"
        assert error.message == "quantity is wrong"
        assert [e["field"] for e in error.details["errors"]] == ["quantity", "reason"]
        assert error.details["errors"][1]["code"] == "reason_required"

    def test_insufficient_stock_is_movement_error(self):
        error = InsufficientStockError([_issue(code="insufficient_stock")], available=10, unit="kg")
        assert isinstance(error, MovementValidationError)
        assert isinstance(error, ValidationError)
        assert error.code == "INSUFFICIENT_STOCK"
        assert error.available == 10
        assert error.details["unit"] == "kg"

    def test_item_validation_code(self):
        assert ItemValidationError([_issue("name", "name_required")]).code == "ITEM_INVALID"

    def test_duplicate_item(self):
        error = DuplicateItemError("Tomate")
        assert error.code == "DUPLICATE_ITEM"
        assert error.field == "name"
        assert "Tomate" in error.message

    def test_preferences_error(self):
        error = PreferencesValidationError("waste_safe_threshold", "bad order", 500)
        assert error.code == "PREFERENCES_INVALID"
        assert isinstance(error, ValidationError)


class TestStorageErrors:
    def test_persistence_error(self):
        error = PersistenceError("record_movement", "disk I/O error")
        assert isinstance(error, StorageError)
        assert error.code == "PERSISTENCE_ERROR"
        assert error.details == {"operation": "record_movement", "error": "disk I/O error"}

    def test_duplicate_submission(self):
        error = DuplicateSubmissionError("abc-123")
        assert isinstance(error, StorageError)
        assert error.details["idempotency_key"] == "abc-123"


class TestConflictErrors:
    def test_idempotency_conflict_is_a_field_error(self):
        error = IdempotencyConflictError("k1")
        assert isinstance(error, ValidationError)
        assert error.code == "IDEMPOTENCY_CONFLICT"
        assert error.field == "idempotency_key"

    def test_stock_changed(self):
        error = StockChangedError(1, 10.0, 2.0)
        assert isinstance(error, ConflictError)
        assert error.code == "STOCK_CHANGED"
        assert error.details == {"item_id": 1, "expected": 10.0, "actual": 2.0}


class TestOtherErrors:
    def test_unauthorized_default_message(self):
        error = UnauthorizedError()
        assert error.code == "UNAUTHORIZED"
        assert error.message == "User not authenticated"

    def test_configuration_error(self):
        assert ConfigurationError("bad").code == "ConfigurationError"
