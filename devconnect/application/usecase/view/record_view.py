"""Record view use case."""

from uuid import UUID

from pydantic import BaseModel

from devconnect.domain.service import ViewService
from devconnect.domain.value import AccountId, ContentId, ViewSessionId


class RecordViewRequest(BaseModel):
    """Record view request, sent once the playback threshold is reached."""

    target_id: str
    session_id: str  # Playback session chosen by the client
    viewer_id: str  # Authenticated caller


class RecordViewResponse(BaseModel):
    """Record view response."""

    target_id: str
    counted: bool


class RecordViewUseCase:
    """Use case for counting a view."""

    def __init__(self, view_service: ViewService) -> None:
        self.view_service = view_service

    async def execute(self, request: RecordViewRequest) -> RecordViewResponse:
        """Execute record view flow.

        Raises:
            NotFoundError: If the content item is unknown
        """
        counted = await self.view_service.record_view_threshold_reached(
            viewer_id=AccountId(UUID(request.viewer_id)),
            target_id=ContentId(UUID(request.target_id)),
            session_id=ViewSessionId(UUID(request.session_id)),
        )
        return RecordViewResponse(target_id=request.target_id, counted=counted)
