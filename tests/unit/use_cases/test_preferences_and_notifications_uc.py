"""Tests for the preferences and notifications use cases."""

from unittest.mock import AsyncMock

import pytest

from estoque.application.dto.requests import UpdatePreferencesRequest
from estoque.application.use_cases.manage_notifications import ManageNotificationsUseCase
from estoque.application.use_cases.manage_preferences import ManagePreferencesUseCase
from estoque.core.entities.preferences import UserPreferences
from estoque.core.exceptions import NotificationNotFoundError, PreferencesValidationError


@pytest.fixture
def mock_preferences_store():
    store = AsyncMock()
    store.get.return_value = None
    store.upsert.side_effect = lambda preferences: preferences
    return store


@pytest.fixture
def mock_notification_store():
    return AsyncMock()


class TestManagePreferencesUseCase:
    @pytest.fixture
    def use_case(self, mock_preferences_store):
        return ManagePreferencesUseCase(preferences_store=mock_preferences_store)

    async def test_defaults_stored_on_first_read(self, use_case, mock_preferences_store):
        preferences = await use_case.get("chef")

        assert preferences.waste_safe_threshold == 100
        assert preferences.waste_critical_threshold == 300
        mock_preferences_store.upsert.assert_awaited_once()

    async def test_existing_preferences_not_rewritten(self, use_case, mock_preferences_store):
        mock_preferences_store.get.return_value = UserPreferences(
            user_id="chef", waste_safe_threshold=50, waste_critical_threshold=80
        )

        preferences = await use_case.get("chef")

        assert preferences.thresholds.safe == 50
        mock_preferences_store.upsert.assert_not_called()

    async def test_partial_update(self, use_case, mock_preferences_store):
        updated = await use_case.update(
            "chef", UpdatePreferencesRequest(waste_critical_threshold=500)
        )

        assert updated.waste_safe_threshold == 100
        assert updated.waste_critical_threshold == 500

    @pytest.mark.parametrize(
        ("safe", "critical"),
        [(300, 300), (400, 300), (-1, 300), (100, -5)],
    )
    async def test_invalid_thresholds(self, use_case, mock_preferences_store, safe, critical):
        request = UpdatePreferencesRequest(
            waste_safe_threshold=safe, waste_critical_threshold=critical
        )
        with pytest.raises(PreferencesValidationError):
            await use_case.update("chef", request)

        # Only the defaults were written
        assert mock_preferences_store.upsert.await_count == 1

    async def test_response(self, use_case):
        response = use_case.to_response(await use_case.get("chef"))
        assert response.user_id == "chef"


class TestManageNotificationsUseCase:
    @pytest.fixture
    def use_case(self, mock_notification_store):
        return ManageNotificationsUseCase(notification_store=mock_notification_store)

    async def test_list_unread(self, use_case, mock_notification_store):
        mock_notification_store.list_notifications.return_value = []

        await use_case.list_notifications(unread_only=True, limit=5)

        mock_notification_store.list_notifications.assert_awaited_once_with(
            unread_only=True, limit=5
        )

    async def test_unread_count_carries_poll_interval(self, use_case, mock_notification_store):
        mock_notification_store.count_unread.return_value = 4

        response = await use_case.unread_count()

        assert response.count == 4
        assert response.poll_interval_seconds == 30

    async def test_mark_one(self, use_case, mock_notification_store):
        mock_notification_store.mark_read.return_value = True
        assert await use_case.mark_read(3) == 1
        mock_notification_store.mark_read.assert_awaited_once_with(3)

    async def test_mark_all(self, use_case, mock_notification_store):
        mock_notification_store.mark_all_read.return_value = 6
        assert await use_case.mark_read("all") == 6

    async def test_mark_missing(self, use_case, mock_notification_store):
        mock_notification_store.mark_read.return_value = False
        with pytest.raises(NotificationNotFoundError):
            await use_case.mark_read(99)

    async def test_delete_all_only_read(self, use_case, mock_notification_store):
        mock_notification_store.delete_all_read.return_value = 2
        assert await use_case.delete("all") == 2
        mock_notification_store.delete.assert_not_called()

    async def test_delete_missing(self, use_case, mock_notification_store):
        mock_notification_store.delete.return_value = False
        with pytest.raises(NotificationNotFoundError):
            await use_case.delete(12)
