"""View tracking routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie
from pydantic import BaseModel

from devconnect.application.usecase.view import (
    RecordViewRequest,
    RecordViewResponse,
    RecordViewUseCase,
)
from devconnect.domain.service import JWTService
from devconnect.interface.api.auth import require_account_id

router = APIRouter(prefix="/views", tags=["views"], route_class=DishkaRoute)


class RecordViewAPIRequest(BaseModel):
    """Sent by the player once the watch threshold has elapsed."""

    session_id: str


@router.post("/{target_id}", response_model=RecordViewResponse)
async def record_view(
    target_id: str,
    request: RecordViewAPIRequest,
    record_view_use_case: FromDishka[RecordViewUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> RecordViewResponse:
    """Count one view of a content item for this playback session.

    Requires authentication. Owner views and repeats within a session are
    acknowledged with ``counted: false``.
    """
    viewer_id = require_account_id(jwt_service, auth_token, "record views")
    return await record_view_use_case.execute(
        RecordViewRequest(
            target_id=target_id,
            session_id=request.session_id,
            viewer_id=viewer_id,
        )
    )
