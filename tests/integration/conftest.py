"""Fixtures for end-to-end tests against a migrated temporary database."""

import pytest
from httpx import ASGITransport, AsyncClient

from estoque.api.main import app
from estoque.config import get_settings
from estoque.infrastructure.storage.sqlite import connection as conn_module
from estoque.infrastructure.storage.sqlite.migrations.migrator import run_migrations


@pytest.fixture
async def live_client():
    """API client backed by real stores; the database lives in the test's tmp dir."""
    await run_migrations(get_settings().storage.db_path, create_backup_before=False)
    conn_module._pool = None

    transport = ASGITransport(app=app)
    async with AsyncClient(
        transport=transport, base_url="http://test", headers={"X-User-Id": "chef-1"}
    ) as ac:
        yield ac

    await conn_module.close_pool()
