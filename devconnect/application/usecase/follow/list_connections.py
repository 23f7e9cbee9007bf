"""List followers / following use case."""

from enum import Enum
from uuid import UUID

from pydantic import BaseModel, Field

from devconnect.domain.service import SocialGraphService
from devconnect.domain.value import AccountId, Rank


class ConnectionDirection(str, Enum):
    """Which side of the graph to list."""

    FOLLOWERS = "followers"
    FOLLOWING = "following"


class ListConnectionsRequest(BaseModel):
    """List connections request."""

    account_id: str
    direction: ConnectionDirection
    limit: int = Field(default=50, ge=1, le=200)
    offset: int = Field(default=0, ge=0)


class ConnectionItem(BaseModel):
    """One account in a follower/following list."""

    account_id: str
    handle: str
    display_name: str | None
    rank: Rank


class ListConnectionsResponse(BaseModel):
    """List connections response."""

    items: list[ConnectionItem]
    total: int
    has_more: bool


class ListConnectionsUseCase:
    """Use case for paging through followers or followed accounts."""

    def __init__(self, graph_service: SocialGraphService) -> None:
        self.graph_service = graph_service

    async def execute(self, request: ListConnectionsRequest) -> ListConnectionsResponse:
        """Execute list connections flow.

        Raises:
            NotFoundError: If the account does not exist
        """
        account_id = AccountId(UUID(request.account_id))

        if request.direction is ConnectionDirection.FOLLOWERS:
            page = await self.graph_service.list_followers(
                account_id, request.limit, request.offset
            )
            total = await self.graph_service.follower_count(account_id)
        else:
            page = await self.graph_service.list_following(
                account_id, request.limit, request.offset
            )
            total = await self.graph_service.following_count(account_id)

        return ListConnectionsResponse(
            items=[
                ConnectionItem(
                    account_id=str(summary.id),
                    handle=summary.handle.root,
                    display_name=summary.display_name,
                    rank=summary.rank,
                )
                for summary in page
            ],
            total=total,
            has_more=request.offset + len(page) < total,
        )
