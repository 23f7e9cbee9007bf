"""Vote routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie
from pydantic import BaseModel

from devconnect.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
)
from devconnect.domain.service import JWTService
from devconnect.interface.api.auth import require_account_id

router = APIRouter(prefix="/votes", tags=["votes"], route_class=DishkaRoute)


class CastVoteAPIRequest(BaseModel):
    """API request for voting."""

    direction: int  # 1 or -1


@router.put("/{target_kind}/{target_id}", response_model=CastVoteResponse)
async def cast_vote(
    target_kind: str,
    target_id: str,
    request: CastVoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CastVoteResponse:
    """Vote on a question or answer, replacing any earlier vote.

    Requires authentication.
    """
    actor_id = require_account_id(jwt_service, auth_token, "vote")
    return await cast_vote_use_case.execute(
        CastVoteRequest(
            target_kind=target_kind,
            target_id=target_id,
            direction=request.direction,
            actor_id=actor_id,
        )
    )
