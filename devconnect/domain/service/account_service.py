"""Account domain service."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from devconnect.domain.error import ForbiddenError, NotFoundError
from devconnect.domain.model import Account
from devconnect.domain.model.common import DomainModel
from devconnect.domain.repository import (
    AccountRepository,
    FollowRepository,
    TransactionManager,
)
from devconnect.domain.value import AccountId, Handle, Rank

from .base import Service
from .rank_service import RankService


class ProfileStats(DomainModel):
    """Counts shown on a profile, computed on read."""

    account_id: AccountId
    follower_count: int
    following_count: int
    rank: Rank


class AccountService(Service):
    """Domain service for account operations."""

    def __init__(
        self,
        account_repository: AccountRepository,
        follow_repository: FollowRepository,
        rank_service: RankService,
        transaction_manager: TransactionManager,
    ) -> None:
        """Initialize account service.

        Args:
            account_repository: Account repository
            follow_repository: Follow edge repository
            rank_service: Rank recomputation
            transaction_manager: Unit of work shared with the repositories
        """
        self.account_repository = account_repository
        self.follow_repository = follow_repository
        self.rank_service = rank_service
        self.transaction_manager = transaction_manager

    async def get(self, account_id: AccountId) -> Account:
        """Get account by ID.

        Raises:
            NotFoundError: If account not found
        """
        with logfire.span("account_service.get", account_id=str(account_id)):
            account = await self.account_repository.find_by_id(account_id)
            if not account:
                logfire.warn("Account not found", account_id=str(account_id))
                raise NotFoundError("Account", str(account_id))
            return account

    async def get_by_handle(self, handle: str) -> Account:
        """Get account by handle.

        Raises:
            NotFoundError: If no account has this handle
        """
        with logfire.span("account_service.get_by_handle", handle=handle):
            account = await self.account_repository.find_by_handle(handle)
            if not account:
                logfire.warn("Account not found", handle=handle)
                raise NotFoundError("Account", handle)
            return account

    async def register(
        self,
        handle: str,
        display_name: Optional[str] = None,
        email: Optional[str] = None,
        account_id: Optional[AccountId] = None,
    ) -> Account:
        """Create an account published by the identity service.

        Args:
            handle: Unique public handle
            display_name: Optional display name
            email: Optional address for digest delivery
            account_id: Id assigned upstream, generated when omitted

        Returns:
            The new account, ranked Rookie

        Raises:
            ConflictError: If the handle is already taken
        """
        with logfire.span("account_service.register", handle=handle):
            now = datetime.now()
            account = Account(
                id=account_id or AccountId(uuid4()),
                handle=Handle(root=handle),
                display_name=display_name,
                email=email,
                rank=Rank.ROOKIE,
                is_private=False,
                created_at=now,
                updated_at=now,
            )
            saved = await self.account_repository.save(account)
            logfire.info("Account registered", account_id=str(saved.id), handle=handle)
            return saved

    async def set_privacy(
        self, account_id: AccountId, requester_id: AccountId, is_private: bool
    ) -> Account:
        """Change the account's privacy flag. Owner only.

        Raises:
            ForbiddenError: If the requester is not the owner
            NotFoundError: If the account does not exist
        """
        with logfire.span(
            "account_service.set_privacy",
            account_id=str(account_id),
            is_private=is_private,
        ):
            if requester_id != account_id:
                raise ForbiddenError("Account", str(account_id), str(requester_id))
            account = await self.get(account_id)
            updated = account.model_copy(
                update={"is_private": is_private, "updated_at": datetime.now()}
            )
            return await self.account_repository.update(updated)

    async def delete_account(
        self, account_id: AccountId, requester_id: AccountId
    ) -> None:
        """Delete an account and every edge touching it. Owner only.

        Accounts the deleted account used to follow lose a follower, so
        their ranks are recomputed in the same transaction.

        Raises:
            ForbiddenError: If the requester is not the owner
            NotFoundError: If the account does not exist
        """
        with logfire.span("account_service.delete_account", account_id=str(account_id)):
            if requester_id != account_id:
                raise ForbiddenError("Account", str(account_id), str(requester_id))
            await self.get(account_id)

            async with self.transaction_manager.atomic():
                followee_ids = await self.follow_repository.find_followee_ids(account_id)
                await self.account_repository.delete(account_id)
                for followee_id in followee_ids:
                    await self.rank_service.recompute(followee_id)

            logfire.info(
                "Account deleted",
                account_id=str(account_id),
                ranks_recomputed=len(followee_ids),
            )

    async def profile_stats(self, account_id: AccountId) -> ProfileStats:
        """Follower and following counts plus rank, computed on read.

        Raises:
            NotFoundError: If the account does not exist
        """
        account = await self.get(account_id)
        return ProfileStats(
            account_id=account_id,
            follower_count=await self.follow_repository.count_followers(account_id),
            following_count=await self.follow_repository.count_following(account_id),
            rank=account.rank,
        )
