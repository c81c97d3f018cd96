"""Pytest configuration and fixtures."""

from collections.abc import Callable
from datetime import datetime

import pytest

from estoque.config import reset_settings
from estoque.core.entities.inventory import Category, InventoryItem, Unit
from estoque.core.services.ledger import LedgerEngine


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Fresh settings per test, with data kept under the test's tmp dir."""
    monkeypatch.setenv("STORAGE_DATA_DIR", str(tmp_path / "data"))
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def make_item() -> Callable[..., InventoryItem]:
    """Factory for inventory items with sensible defaults."""

    def _make(**overrides) -> InventoryItem:
        now = datetime(2024, 6, 15, 12, 0, 0)
        values = {
            "id": 1,
            "name": "Tomate",
            "category": Category.VEGETAIS,
            "quantity": 10.0,
            "unit": Unit.KG,
            "min_stock": 20.0,
            "cost_per_unit": 5.0,
            "created_at": now,
            "updated_at": now,
        }
        values.update(overrides)
        return InventoryItem(**values)

    return _make


@pytest.fixture
def ledger() -> LedgerEngine:
    """Ledger with the default pt-BR messages."""
    return LedgerEngine()


@pytest.fixture
def sample_item_payload() -> dict:
    """Valid create-item request body."""
    return {
        "name": "Queijo Mussarela",
        "category": "laticinios",
        "quantity": 12,
        "unit": "kg",
        "min_stock": 5,
        "cost_per_unit": 32.5,
        "supplier": "Laticínios Serra",
    }
