"""Like and bookmark routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie

from devconnect.application.usecase.mark import (
    ToggleMarkRequest,
    ToggleMarkResponse,
    ToggleMarkUseCase,
)
from devconnect.domain.service import JWTService
from devconnect.interface.api.auth import require_account_id

router = APIRouter(prefix="/marks", tags=["marks"], route_class=DishkaRoute)


@router.post(
    "/{mark_kind}/{target_kind}/{target_id}", response_model=ToggleMarkResponse
)
async def toggle_mark(
    mark_kind: str,
    target_kind: str,
    target_id: str,
    toggle_mark_use_case: FromDishka[ToggleMarkUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ToggleMarkResponse:
    """Like/unlike or bookmark/unbookmark a content item.

    Requires authentication.

    Args:
        mark_kind: ``like`` or ``bookmark``
        target_kind: ``post``, ``comment``, ``reel``, ``question`` or ``answer``
        target_id: Content item UUID
        toggle_mark_use_case: Toggle mark use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Whether the mark is now active and the recomputed count
    """
    actor_id = require_account_id(jwt_service, auth_token, "like or bookmark")
    return await toggle_mark_use_case.execute(
        ToggleMarkRequest(
            mark_kind=mark_kind,
            target_kind=target_kind,
            target_id=target_id,
            actor_id=actor_id,
        )
    )
