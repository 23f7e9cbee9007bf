"""Record comment use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from devconnect.domain.event import CommentEvent
from devconnect.domain.repository import TransactionManager
from devconnect.domain.service import ContentService, FanoutService
from devconnect.domain.value import AccountId, ContentId, TargetKind


class RecordCommentRequest(BaseModel):
    """Comment stored by the comment service."""

    actor_id: str  # Comment author
    target_id: str  # Parent content item
    target_kind: TargetKind = TargetKind.POST
    comment_id: Optional[str] = None  # Registers the comment itself as likeable


class RecordCommentResponse(BaseModel):
    """Record comment response."""

    notified: int


class RecordCommentUseCase:
    """Use case for fanning out a new comment to the parent's owner."""

    def __init__(
        self,
        content_service: ContentService,
        fanout_service: FanoutService,
        transaction_manager: TransactionManager,
    ) -> None:
        self.content_service = content_service
        self.fanout_service = fanout_service
        self.transaction_manager = transaction_manager

    async def execute(self, request: RecordCommentRequest) -> RecordCommentResponse:
        """Execute record comment flow.

        Registering the comment and notifying the parent's owner commit
        together; a failed fan-out leaves no comment behind.

        Raises:
            NotFoundError: If the parent content item is unknown
        """
        actor_id = AccountId(UUID(request.actor_id))

        async with self.transaction_manager.atomic():
            if request.comment_id:
                await self.content_service.register(
                    ContentId(UUID(request.comment_id)), TargetKind.COMMENT, actor_id
                )

            notifications = await self.fanout_service.publish(
                CommentEvent(
                    actor_id=actor_id,
                    target_id=ContentId(UUID(request.target_id)),
                    target_kind=request.target_kind,
                )
            )
        return RecordCommentResponse(notified=len(notifications))
