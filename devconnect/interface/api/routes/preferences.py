"""Notification preference routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie
from pydantic import BaseModel

from devconnect.application.usecase.preference import (
    GetPreferencesRequest,
    GetPreferencesUseCase,
    PreferencesResponse,
    UpdatePreferencesRequest,
    UpdatePreferencesUseCase,
)
from devconnect.domain.service import JWTService
from devconnect.interface.api.auth import require_account_id

router = APIRouter(prefix="/preferences", tags=["preferences"], route_class=DishkaRoute)


class UpdatePreferencesAPIRequest(BaseModel):
    """API request for updating preferences; omitted flags are unchanged."""

    email_enabled: bool | None = None
    likes: bool | None = None
    comments: bool | None = None
    follows: bool | None = None
    mentions: bool | None = None


@router.get("", response_model=PreferencesResponse)
async def get_preferences(
    get_preferences_use_case: FromDishka[GetPreferencesUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> PreferencesResponse:
    """Get the caller's notification preferences."""
    account_id = require_account_id(jwt_service, auth_token, "read preferences")
    return await get_preferences_use_case.execute(
        GetPreferencesRequest(account_id=account_id)
    )


@router.put("", response_model=PreferencesResponse)
async def update_preferences(
    request: UpdatePreferencesAPIRequest,
    update_preferences_use_case: FromDishka[UpdatePreferencesUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> PreferencesResponse:
    """Update the caller's notification preferences."""
    account_id = require_account_id(jwt_service, auth_token, "change preferences")
    return await update_preferences_use_case.execute(
        UpdatePreferencesRequest(
            account_id=account_id,
            requester_id=account_id,
            **request.model_dump(),
        )
    )
