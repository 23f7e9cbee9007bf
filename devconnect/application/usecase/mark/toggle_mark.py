"""Toggle like/bookmark use case."""

from uuid import UUID

from pydantic import BaseModel

from devconnect.domain.service import EngagementLedgerService
from devconnect.domain.value import AccountId, ContentId, MarkKind, TargetKind


class ToggleMarkRequest(BaseModel):
    """Toggle mark request."""

    mark_kind: MarkKind
    target_kind: TargetKind
    target_id: str  # UUID string
    actor_id: str  # Authenticated caller


class ToggleMarkResponse(BaseModel):
    """Toggle mark response."""

    target_id: str
    mark_kind: MarkKind
    active: bool
    new_count: int


class ToggleMarkUseCase:
    """Use case for liking/unliking or bookmarking/unbookmarking content."""

    def __init__(self, ledger_service: EngagementLedgerService) -> None:
        """Initialize toggle mark use case.

        Args:
            ledger_service: Engagement ledger domain service
        """
        self.ledger_service = ledger_service

    async def execute(self, request: ToggleMarkRequest) -> ToggleMarkResponse:
        """Execute toggle mark flow.

        Raises:
            NotFoundError: If the content item is unknown
            InvalidEdgeError: If the target kind does not match the item
        """
        result = await self.ledger_service.toggle_mark(
            actor_id=AccountId(UUID(request.actor_id)),
            target_id=ContentId(UUID(request.target_id)),
            target_kind=request.target_kind,
            mark_kind=request.mark_kind,
        )
        return ToggleMarkResponse(
            target_id=request.target_id,
            mark_kind=request.mark_kind,
            active=result.active,
            new_count=result.new_count,
        )
