"""Toggle follow use case."""

from uuid import UUID

from pydantic import BaseModel

from devconnect.domain.service import SocialGraphService
from devconnect.domain.value import AccountId


class ToggleFollowRequest(BaseModel):
    """Toggle follow request."""

    followee_id: str  # Account being followed
    follower_id: str  # Authenticated caller


class ToggleFollowResponse(BaseModel):
    """Toggle follow response."""

    followee_id: str
    following: bool
    follower_count: int


class ToggleFollowUseCase:
    """Use case for following or unfollowing an account."""

    def __init__(self, graph_service: SocialGraphService) -> None:
        """Initialize toggle follow use case.

        Args:
            graph_service: Social graph domain service
        """
        self.graph_service = graph_service

    async def execute(self, request: ToggleFollowRequest) -> ToggleFollowResponse:
        """Execute toggle follow flow.

        Raises:
            InvalidEdgeError: If the caller targets themselves
            NotFoundError: If either account does not exist
        """
        follower_id = AccountId(UUID(request.follower_id))
        followee_id = AccountId(UUID(request.followee_id))

        following = await self.graph_service.toggle_follow(follower_id, followee_id)
        follower_count = await self.graph_service.follower_count(followee_id)

        return ToggleFollowResponse(
            followee_id=request.followee_id,
            following=following,
            follower_count=follower_count,
        )
