"""User settings endpoints."""

from fastapi import APIRouter, Depends

from estoque.api.dependencies import get_current_user, get_preferences_use_case
from estoque.application.dto.requests import UpdatePreferencesRequest
from estoque.application.dto.responses import ErrorResponse, PreferencesResponse
from estoque.application.use_cases import ManagePreferencesUseCase

router = APIRouter(prefix="/api/settings", tags=["settings"])


@router.get("", response_model=PreferencesResponse)
async def get_preferences(
    user_id: str = Depends(get_current_user),
    use_case: ManagePreferencesUseCase = Depends(get_preferences_use_case),
) -> PreferencesResponse:
    """Waste thresholds of the current user; defaults on first access."""
    preferences = await use_case.get(user_id)
    return use_case.to_response(preferences)


@router.patch(
    "",
    response_model=PreferencesResponse,
    responses={400: {"model": ErrorResponse}},
)
async def update_preferences(
    request: UpdatePreferencesRequest,
    user_id: str = Depends(get_current_user),
    use_case: ManagePreferencesUseCase = Depends(get_preferences_use_case),
) -> PreferencesResponse:
    preferences = await use_case.update(user_id, request)
    return use_case.to_response(preferences)
