"""Profile stats use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from devconnect.domain.service import AccountService, SocialGraphService
from devconnect.domain.value import AccountId, Rank


class GetProfileStatsRequest(BaseModel):
    """Profile stats request."""

    account_id: str
    viewer_id: Optional[str] = None  # Authenticated caller, if any


class GetProfileStatsResponse(BaseModel):
    """Profile stats response."""

    account_id: str
    handle: str
    follower_count: int
    following_count: int
    rank: Rank
    is_private: bool
    is_following: Optional[bool] = None  # None for anonymous viewers


class GetProfileStatsUseCase:
    """Use case for the counts shown on a profile header."""

    def __init__(
        self, account_service: AccountService, graph_service: SocialGraphService
    ) -> None:
        self.account_service = account_service
        self.graph_service = graph_service

    async def execute(self, request: GetProfileStatsRequest) -> GetProfileStatsResponse:
        """Execute profile stats flow.

        Raises:
            NotFoundError: If the account does not exist
        """
        account_id = AccountId(UUID(request.account_id))
        account = await self.account_service.get(account_id)
        stats = await self.account_service.profile_stats(account_id)

        is_following = None
        if request.viewer_id:
            viewer_id = AccountId(UUID(request.viewer_id))
            is_following = await self.graph_service.is_following(viewer_id, account_id)

        return GetProfileStatsResponse(
            account_id=request.account_id,
            handle=account.handle.root,
            follower_count=stats.follower_count,
            following_count=stats.following_count,
            rank=stats.rank,
            is_private=account.is_private,
            is_following=is_following,
        )
