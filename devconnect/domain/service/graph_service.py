"""Social graph service."""

from datetime import datetime
from typing import AsyncIterator
from uuid import uuid4

import logfire

from devconnect.domain.error import ConflictError, InvalidEdgeError, NotFoundError
from devconnect.domain.event import FollowEvent
from devconnect.domain.model import AccountSummary, FollowEdge
from devconnect.domain.repository import (
    AccountRepository,
    FollowRepository,
    TransactionManager,
)
from devconnect.domain.value import AccountId, FollowEdgeId

from .base import Service
from .fanout_service import FanoutService
from .rank_service import RankService


class SocialGraphService(Service):
    """Domain service for the directed follow graph.

    The follower on every write is the authenticated caller; there is no
    way to create or remove an edge on another account's behalf.
    """

    def __init__(
        self,
        account_repository: AccountRepository,
        follow_repository: FollowRepository,
        rank_service: RankService,
        fanout_service: FanoutService,
        transaction_manager: TransactionManager,
        batch_size: int = 100,
    ) -> None:
        """Initialize social graph service.

        Args:
            account_repository: Account repository
            follow_repository: Follow edge repository
            rank_service: Rank recomputation
            fanout_service: Notification fan-out
            transaction_manager: Unit of work shared with the repositories
            batch_size: Page size used when streaming follower lists
        """
        self.account_repository = account_repository
        self.follow_repository = follow_repository
        self.rank_service = rank_service
        self.fanout_service = fanout_service
        self.transaction_manager = transaction_manager
        self.batch_size = batch_size

    async def _require_account(self, account_id: AccountId) -> None:
        if not await self.account_repository.find_by_id(account_id):
            logfire.warn("Account not found", account_id=str(account_id))
            raise NotFoundError("Account", str(account_id))

    async def follow(self, follower_id: AccountId, followee_id: AccountId) -> bool:
        """Create the follower -> followee edge if it does not exist yet.

        A new edge notifies the followee and recomputes their rank in the
        same transaction. Following twice is a no-op.

        Args:
            follower_id: The authenticated caller
            followee_id: The account to follow

        Returns:
            True if a new edge was created, False if it already existed

        Raises:
            InvalidEdgeError: If follower and followee are the same account
            NotFoundError: If either account does not exist
        """
        with logfire.span(
            "graph_service.follow",
            follower_id=str(follower_id),
            followee_id=str(followee_id),
        ):
            if follower_id == followee_id:
                raise InvalidEdgeError("An account cannot follow itself")
            await self._require_account(follower_id)
            await self._require_account(followee_id)

            async with self.transaction_manager.atomic():
                if await self.follow_repository.find(follower_id, followee_id):
                    logfire.info("Already following", followee_id=str(followee_id))
                    return False

                edge = FollowEdge(
                    id=FollowEdgeId(uuid4()),
                    follower_id=follower_id,
                    followee_id=followee_id,
                    created_at=datetime.now(),
                )
                try:
                    async with self.transaction_manager.atomic():
                        await self.follow_repository.save(edge)
                except ConflictError:
                    # A concurrent request created the same edge
                    logfire.info("Follow edge created concurrently")
                    return False

                await self.fanout_service.publish(
                    FollowEvent(actor_id=follower_id, followee_id=followee_id)
                )
                await self.rank_service.recompute(followee_id)

            logfire.info("Follow edge created", edge_id=str(edge.id))
            return True

    async def unfollow(self, follower_id: AccountId, followee_id: AccountId) -> bool:
        """Remove the follower -> followee edge if present.

        Notifications created by the original follow are kept.

        Returns:
            True if an edge was removed, False if there was none
        """
        with logfire.span(
            "graph_service.unfollow",
            follower_id=str(follower_id),
            followee_id=str(followee_id),
        ):
            async with self.transaction_manager.atomic():
                deleted = await self.follow_repository.delete(follower_id, followee_id)
                if deleted:
                    await self.rank_service.recompute(followee_id)

            if deleted:
                logfire.info("Follow edge removed", followee_id=str(followee_id))
            return deleted

    async def toggle_follow(
        self, follower_id: AccountId, followee_id: AccountId
    ) -> bool:
        """Follow if not following, unfollow otherwise.

        Returns:
            Whether the caller follows the account afterwards
        """
        if follower_id == followee_id:
            raise InvalidEdgeError("An account cannot follow itself")

        async with self.transaction_manager.atomic():
            if await self.is_following(follower_id, followee_id):
                await self.unfollow(follower_id, followee_id)
                return False
            await self.follow(follower_id, followee_id)
            return True

    async def is_following(
        self, follower_id: AccountId, followee_id: AccountId
    ) -> bool:
        """Whether the follower -> followee edge exists."""
        return await self.follow_repository.find(follower_id, followee_id) is not None

    async def follower_count(self, account_id: AccountId) -> int:
        """Number of accounts following this one."""
        return await self.follow_repository.count_followers(account_id)

    async def following_count(self, account_id: AccountId) -> int:
        """Number of accounts this one follows."""
        return await self.follow_repository.count_following(account_id)

    async def list_followers(
        self, account_id: AccountId, limit: int = 50, offset: int = 0
    ) -> list[AccountSummary]:
        """One page of followers, oldest edge first.

        Raises:
            NotFoundError: If the account does not exist
        """
        await self._require_account(account_id)
        return await self.follow_repository.list_followers(account_id, limit, offset)

    async def list_following(
        self, account_id: AccountId, limit: int = 50, offset: int = 0
    ) -> list[AccountSummary]:
        """One page of followed accounts, oldest edge first.

        Raises:
            NotFoundError: If the account does not exist
        """
        await self._require_account(account_id)
        return await self.follow_repository.list_following(account_id, limit, offset)

    async def iter_followers(
        self, account_id: AccountId
    ) -> AsyncIterator[AccountSummary]:
        """Stream every follower in batches.

        Each call starts a fresh read, so an abandoned iteration can simply
        be started again.
        """
        offset = 0
        while True:
            page = await self.follow_repository.list_followers(
                account_id, self.batch_size, offset
            )
            for summary in page:
                yield summary
            if len(page) < self.batch_size:
                return
            offset += len(page)

    async def iter_following(
        self, account_id: AccountId
    ) -> AsyncIterator[AccountSummary]:
        """Stream every followed account in batches."""
        offset = 0
        while True:
            page = await self.follow_repository.list_following(
                account_id, self.batch_size, offset
            )
            for summary in page:
                yield summary
            if len(page) < self.batch_size:
                return
            offset += len(page)
