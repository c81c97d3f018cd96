"""Pytest fixtures for SQLite storage tests."""

from collections.abc import AsyncGenerator
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from estoque.core.entities.activity import ActivityLog
from estoque.core.entities.inventory import Category, InventoryItem, Unit
from estoque.infrastructure.storage.sqlite import connection as conn_module
from estoque.infrastructure.storage.sqlite.inventory_store import SQLiteInventoryStore
from estoque.infrastructure.storage.sqlite.migrations.migrator import run_migrations


@pytest.fixture
def temp_db_path(tmp_path: Path) -> Path:
    """Create a temporary database path."""
    return tmp_path / "test.db"


@pytest.fixture
def mock_settings(temp_db_path: Path):
    """Mock settings with temp database path."""
    mock = MagicMock()
    mock.storage.db_path = temp_db_path
    mock.storage.pool_size = 2
    mock.storage.busy_timeout = 5000
    return mock


@pytest.fixture
async def initialized_db(temp_db_path: Path, mock_settings) -> AsyncGenerator[Path, None]:
    """Migrated temporary database behind the global connection pool."""
    await run_migrations(temp_db_path, create_backup_before=False)

    with patch.object(conn_module, "get_settings", return_value=mock_settings):
        conn_module._pool = None
        yield temp_db_path
        await conn_module.close_pool()


@pytest.fixture
def inventory_store(initialized_db) -> SQLiteInventoryStore:
    return SQLiteInventoryStore()


@pytest.fixture
def new_item():
    """Factory for unsaved items."""

    def _make(name: str = "Tomate", **overrides) -> InventoryItem:
        values = {
            "name": name,
            "category": Category.VEGETAIS,
            "quantity": 10.0,
            "unit": Unit.KG,
            "min_stock": 20.0,
            "cost_per_unit": 5.0,
        }
        values.update(overrides)
        return InventoryItem(**values)

    return _make


@pytest.fixture
async def saved_item(inventory_store, new_item) -> InventoryItem:
    return await inventory_store.create_item(
        new_item(), ActivityLog(action="add", description="Novo item adicionado: Tomate")
    )
