"""Cast vote use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from devconnect.domain.service import EngagementLedgerService
from devconnect.domain.value import AccountId, ContentId, TargetKind, VoteDirection


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    target_kind: TargetKind
    target_id: str  # UUID string
    direction: VoteDirection
    actor_id: str  # Authenticated caller


class CastVoteResponse(BaseModel):
    """Cast vote response."""

    vote_id: str
    target_id: str
    direction: VoteDirection
    score: int
    updated_at: datetime


class CastVoteUseCase:
    """Use case for up/down voting a question or answer."""

    def __init__(self, ledger_service: EngagementLedgerService) -> None:
        self.ledger_service = ledger_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Raises:
            NotFoundError: If the content item is unknown
            InvalidEdgeError: If the target cannot be voted on
        """
        target_id = ContentId(UUID(request.target_id))
        vote = await self.ledger_service.cast_vote(
            actor_id=AccountId(UUID(request.actor_id)),
            target_id=target_id,
            target_kind=request.target_kind,
            direction=request.direction,
        )
        score = await self.ledger_service.vote_score(target_id)

        return CastVoteResponse(
            vote_id=str(vote.id),
            target_id=request.target_id,
            direction=vote.direction,
            score=score,
            updated_at=vote.updated_at,
        )
