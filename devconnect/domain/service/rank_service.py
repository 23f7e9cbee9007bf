"""Rank computation service."""

import logfire

from devconnect.domain.error import NotFoundError
from devconnect.domain.repository import AccountRepository, FollowRepository
from devconnect.domain.value import AccountId, Rank

from .base import Service

# Highest threshold first
RANK_THRESHOLDS: list[tuple[int, Rank]] = [
    (1000, Rank.DIAMOND),
    (500, Rank.PLATINUM),
    (100, Rank.GOLD),
    (50, Rank.SILVER),
    (10, Rank.BRONZE),
]


class RankService(Service):
    """Derives an account's rank tier from its follower count.

    Rank is a pure function of the follower count at the time of the last
    graph change. Rank changes never produce notifications.
    """

    def __init__(
        self,
        account_repository: AccountRepository,
        follow_repository: FollowRepository,
    ) -> None:
        self.account_repository = account_repository
        self.follow_repository = follow_repository

    @staticmethod
    def rank_for(follower_count: int) -> Rank:
        """Map a follower count onto its rank tier.

        Args:
            follower_count: Number of followers (non-negative)

        Returns:
            The highest tier whose threshold the count reaches
        """
        for threshold, rank in RANK_THRESHOLDS:
            if follower_count >= threshold:
                return rank
        return Rank.ROOKIE

    async def recompute(self, account_id: AccountId) -> Rank:
        """Recount followers and store the resulting rank if it changed.

        Args:
            account_id: The account whose follower set changed

        Returns:
            The account's current rank

        Raises:
            NotFoundError: If the account does not exist
        """
        with logfire.span("rank_service.recompute", account_id=str(account_id)):
            account = await self.account_repository.find_by_id(account_id)
            if not account:
                raise NotFoundError("Account", str(account_id))

            follower_count = await self.follow_repository.count_followers(account_id)
            rank = self.rank_for(follower_count)
            if rank != account.rank:
                await self.account_repository.update_rank(account_id, rank)
                logfire.info(
                    "Rank changed",
                    account_id=str(account_id),
                    previous=account.rank.value,
                    rank=rank.value,
                    follower_count=follower_count,
                )
            return rank
