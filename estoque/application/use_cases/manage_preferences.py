"""Preferences Use Case: per-user waste thresholds."""

from estoque.application.dto.requests import UpdatePreferencesRequest
from estoque.application.dto.responses import PreferencesResponse
from estoque.config import get_logger, get_settings
from estoque.core.entities.preferences import UserPreferences
from estoque.core.exceptions import PreferencesValidationError
from estoque.core.interfaces.preferences_store import IPreferencesStore
from estoque.core.messages import translate

logger = get_logger(__name__)


class ManagePreferencesUseCase:
    """Read and patch the waste thresholds of a user."""

    def __init__(self, preferences_store: IPreferencesStore | None = None):
        self._preferences_store = preferences_store
        self.settings = get_settings().inventory

    async def _get_preferences_store(self) -> IPreferencesStore:
        if self._preferences_store is None:
            from estoque.infrastructure.storage.sqlite import get_preferences_store

            self._preferences_store = await get_preferences_store()
        return self._preferences_store

    async def get(self, user_id: str) -> UserPreferences:
        """Preferences of ``user_id``; defaults are stored on first read."""
        store = await self._get_preferences_store()
        preferences = await store.get(user_id)
        if preferences is None:
            preferences = await store.upsert(
                UserPreferences(
                    user_id=user_id,
                    waste_safe_threshold=self.settings.default_waste_safe_threshold,
                    waste_critical_threshold=self.settings.default_waste_critical_threshold,
                )
            )
            logger.info("preferences_defaults_created", user_id=user_id)
        return preferences

    async def update(self, user_id: str, request: UpdatePreferencesRequest) -> UserPreferences:
        current = await self.get(user_id)
        safe = (
            request.waste_safe_threshold
            if request.waste_safe_threshold is not None
            else current.waste_safe_threshold
        )
        critical = (
            request.waste_critical_threshold
            if request.waste_critical_threshold is not None
            else current.waste_critical_threshold
        )

        locale = self.settings.locale
        if safe < 0:
            raise PreferencesValidationError(
                "waste_safe_threshold", translate("thresholds_negative", locale), safe
            )
        if critical < 0:
            raise PreferencesValidationError(
                "waste_critical_threshold", translate("thresholds_negative", locale), critical
            )
        if safe >= critical:
            raise PreferencesValidationError(
                "waste_safe_threshold", translate("thresholds_order", locale), safe
            )

        store = await self._get_preferences_store()
        return await store.upsert(
            current.model_copy(
                update={"waste_safe_threshold": safe, "waste_critical_threshold": critical}
            )
        )

    @staticmethod
    def to_response(preferences: UserPreferences) -> PreferencesResponse:
        return PreferencesResponse(
            user_id=preferences.user_id,
            waste_safe_threshold=preferences.waste_safe_threshold,
            waste_critical_threshold=preferences.waste_critical_threshold,
            updated_at=preferences.updated_at,
        )
