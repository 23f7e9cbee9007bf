"""Account and social graph routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, Response, status
from pydantic import BaseModel

from devconnect.application.usecase.account import (
    DeleteAccountRequest,
    DeleteAccountUseCase,
    SetPrivacyRequest,
    SetPrivacyResponse,
    SetPrivacyUseCase,
)
from devconnect.application.usecase.follow import (
    ConnectionDirection,
    GetProfileStatsRequest,
    GetProfileStatsResponse,
    GetProfileStatsUseCase,
    ListConnectionsRequest,
    ListConnectionsResponse,
    ListConnectionsUseCase,
    ToggleFollowRequest,
    ToggleFollowResponse,
    ToggleFollowUseCase,
)
from devconnect.domain.service import JWTService
from devconnect.interface.api.auth import require_account_id

router = APIRouter(prefix="/accounts", tags=["accounts"], route_class=DishkaRoute)


class SetPrivacyAPIRequest(BaseModel):
    """API request for changing the privacy flag."""

    is_private: bool


@router.put("/me/privacy", response_model=SetPrivacyResponse)
async def set_privacy(
    request: SetPrivacyAPIRequest,
    set_privacy_use_case: FromDishka[SetPrivacyUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> SetPrivacyResponse:
    """Make the caller's profile private or public.

    Requires authentication.
    """
    account_id = require_account_id(jwt_service, auth_token, "change privacy")
    return await set_privacy_use_case.execute(
        SetPrivacyRequest(
            account_id=account_id,
            requester_id=account_id,
            is_private=request.is_private,
        )
    )


@router.delete("/me", status_code=status.HTTP_204_NO_CONTENT)
async def delete_account(
    delete_account_use_case: FromDishka[DeleteAccountUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> Response:
    """Delete the caller's account along with every edge and mark it owns.

    Requires authentication.
    """
    account_id = require_account_id(jwt_service, auth_token, "delete an account")
    await delete_account_use_case.execute(
        DeleteAccountRequest(account_id=account_id, requester_id=account_id)
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{account_id}/follow", response_model=ToggleFollowResponse)
async def toggle_follow(
    account_id: str,
    toggle_follow_use_case: FromDishka[ToggleFollowUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ToggleFollowResponse:
    """Follow the account, or unfollow it when already followed.

    Requires authentication. The caller is always the follower.

    Args:
        account_id: Account to follow or unfollow
        toggle_follow_use_case: Toggle follow use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Whether the caller now follows the account, and its follower count
    """
    follower_id = require_account_id(jwt_service, auth_token, "follow accounts")
    return await toggle_follow_use_case.execute(
        ToggleFollowRequest(followee_id=account_id, follower_id=follower_id)
    )


@router.get("/{account_id}/followers", response_model=ListConnectionsResponse)
async def list_followers(
    account_id: str,
    list_connections_use_case: FromDishka[ListConnectionsUseCase],
    limit: int = Query(default=50, ge=1, le=200),
    offset: int = Query(default=0, ge=0),
) -> ListConnectionsResponse:
    """List accounts following the given account, oldest edge first."""
    return await list_connections_use_case.execute(
        ListConnectionsRequest(
            account_id=account_id,
            direction=ConnectionDirection.FOLLOWERS,
            limit=limit,
            offset=offset,
        )
    )


@router.get("/{account_id}/following", response_model=ListConnectionsResponse)
async def list_following(
    account_id: str,
    list_connections_use_case: FromDishka[ListConnectionsUseCase],
    limit: int = Query(default=50, ge=1, le=200),
    offset: int = Query(default=0, ge=0),
) -> ListConnectionsResponse:
    """List accounts the given account follows, oldest edge first."""
    return await list_connections_use_case.execute(
        ListConnectionsRequest(
            account_id=account_id,
            direction=ConnectionDirection.FOLLOWING,
            limit=limit,
            offset=offset,
        )
    )


@router.get("/{account_id}/stats", response_model=GetProfileStatsResponse)
async def get_profile_stats(
    account_id: str,
    get_profile_stats_use_case: FromDishka[GetProfileStatsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetProfileStatsResponse:
    """Get follower/following counts and rank.

    Authentication is optional; signed-in viewers also learn whether they
    follow the account.
    """
    viewer_id = jwt_service.get_account_id_from_token(auth_token)
    return await get_profile_stats_use_case.execute(
        GetProfileStatsRequest(account_id=account_id, viewer_id=viewer_id)
    )
