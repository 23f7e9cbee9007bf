"""Engagement ledger service (likes, bookmarks, votes)."""

from datetime import datetime
from typing import Union
from uuid import uuid4

import logfire

from devconnect.domain.error import (
    ConflictError,
    InvalidEdgeError,
    NotFoundError,
    ValidationError,
)
from devconnect.domain.event import LikeEvent
from devconnect.domain.model import ContentRef, EngagementMark, MarkToggle, Vote
from devconnect.domain.repository import (
    ContentRepository,
    MarkRepository,
    TransactionManager,
    VoteRepository,
)
from devconnect.domain.value import (
    AccountId,
    ContentId,
    MarkId,
    MarkKind,
    TargetKind,
    VoteDirection,
    VoteId,
)

from .base import Service
from .fanout_service import FanoutService

# One retry covers a lost insert race; a second conflict is a real error
MAX_TOGGLE_ATTEMPTS = 2


def _parse_target_kind(value: Union[TargetKind, str]) -> TargetKind:
    try:
        return TargetKind(value)
    except ValueError:
        raise InvalidEdgeError(f"Unknown target kind: {value}")


def _parse_mark_kind(value: Union[MarkKind, str]) -> MarkKind:
    try:
        return MarkKind(value)
    except ValueError:
        raise InvalidEdgeError(f"Unknown mark kind: {value}")


class EngagementLedgerService(Service):
    """Records per-actor engagement marks and votes.

    Every count is derived from the stored rows: a toggle is a delete or an
    insert, never an increment, so concurrent toggles cannot drift a
    counter.
    """

    def __init__(
        self,
        content_repository: ContentRepository,
        mark_repository: MarkRepository,
        vote_repository: VoteRepository,
        fanout_service: FanoutService,
        transaction_manager: TransactionManager,
    ) -> None:
        """Initialize engagement ledger service.

        Args:
            content_repository: Content ownership lookups
            mark_repository: Like/bookmark rows
            vote_repository: Vote rows
            fanout_service: Notification fan-out
            transaction_manager: Unit of work shared with the repositories
        """
        self.content_repository = content_repository
        self.mark_repository = mark_repository
        self.vote_repository = vote_repository
        self.fanout_service = fanout_service
        self.transaction_manager = transaction_manager

    async def _get_target(
        self, target_id: ContentId, target_kind: TargetKind
    ) -> ContentRef:
        content = await self.content_repository.find_by_id(target_id)
        if not content:
            logfire.warn("Engagement on unknown content", target_id=str(target_id))
            raise NotFoundError("Content", str(target_id))
        if content.kind != target_kind:
            raise InvalidEdgeError(
                f"Content {target_id} is a {content.kind.value}, not a {target_kind.value}"
            )
        return content

    async def toggle_mark(
        self,
        actor_id: AccountId,
        target_id: ContentId,
        target_kind: Union[TargetKind, str],
        mark_kind: Union[MarkKind, str],
    ) -> MarkToggle:
        """Flip the actor's mark on a target.

        Removes the mark when present and inserts it otherwise. An insert
        that loses a race against a concurrent toggle is retried once so
        that N toggles always leave the mark present iff N is odd.

        Args:
            actor_id: The authenticated caller
            target_id: The content item
            target_kind: Kind of the content item
            mark_kind: LIKE or BOOKMARK

        Returns:
            Whether the mark is now active, and the recomputed count

        Raises:
            InvalidEdgeError: If a kind is malformed or does not match the item
            NotFoundError: If the content item is unknown
        """
        target_kind = _parse_target_kind(target_kind)
        mark_kind = _parse_mark_kind(mark_kind)

        with logfire.span(
            "ledger_service.toggle_mark",
            actor_id=str(actor_id),
            target_id=str(target_id),
            target_kind=target_kind.value,
            mark_kind=mark_kind.value,
        ):
            await self._get_target(target_id, target_kind)

            async with self.transaction_manager.atomic():
                active = await self._flip(actor_id, target_id, target_kind, mark_kind)
                count = await self.mark_repository.count(
                    target_kind, target_id, mark_kind
                )
                if active and mark_kind is MarkKind.LIKE:
                    await self.fanout_service.publish(
                        LikeEvent(
                            actor_id=actor_id,
                            target_id=target_id,
                            target_kind=target_kind,
                        )
                    )

            logfire.info(
                "Mark toggled",
                actor_id=str(actor_id),
                target_id=str(target_id),
                active=active,
                count=count,
            )
            return MarkToggle(active=active, new_count=count)

    async def _flip(
        self,
        actor_id: AccountId,
        target_id: ContentId,
        target_kind: TargetKind,
        mark_kind: MarkKind,
    ) -> bool:
        attempt = 1
        while True:
            try:
                async with self.transaction_manager.atomic():
                    removed = await self.mark_repository.delete_by_key(
                        actor_id, target_kind, target_id, mark_kind
                    )
                    if removed:
                        return False
                    await self.mark_repository.save(
                        EngagementMark(
                            id=MarkId(uuid4()),
                            actor_id=actor_id,
                            target_id=target_id,
                            target_kind=target_kind,
                            mark_kind=mark_kind,
                            created_at=datetime.now(),
                        )
                    )
                    return True
            except ConflictError:
                if attempt >= MAX_TOGGLE_ATTEMPTS:
                    raise
                attempt += 1
                logfire.warn(
                    "Mark insert lost a race, retrying",
                    actor_id=str(actor_id),
                    target_id=str(target_id),
                )

    async def has_mark(
        self,
        actor_id: AccountId,
        target_id: ContentId,
        target_kind: Union[TargetKind, str],
        mark_kind: Union[MarkKind, str],
    ) -> bool:
        """Whether the actor currently has this mark on the target."""
        mark = await self.mark_repository.find(
            actor_id,
            _parse_target_kind(target_kind),
            target_id,
            _parse_mark_kind(mark_kind),
        )
        return mark is not None

    async def count_marks(
        self,
        target_id: ContentId,
        target_kind: Union[TargetKind, str],
        mark_kind: Union[MarkKind, str],
    ) -> int:
        """Count marks of one kind on a target, from the stored rows."""
        return await self.mark_repository.count(
            _parse_target_kind(target_kind), target_id, _parse_mark_kind(mark_kind)
        )

    async def cast_vote(
        self,
        actor_id: AccountId,
        target_id: ContentId,
        target_kind: Union[TargetKind, str],
        direction: Union[VoteDirection, int],
    ) -> Vote:
        """Record the actor's vote on a question or answer.

        A repeat vote replaces the previous direction.

        Args:
            actor_id: The authenticated caller
            target_id: The question or answer
            target_kind: QUESTION or ANSWER
            direction: +1 or -1

        Returns:
            The stored vote

        Raises:
            InvalidEdgeError: If the target kind cannot be voted on
            NotFoundError: If the content item is unknown
            ValidationError: If the direction is not +1 or -1
        """
        target_kind = _parse_target_kind(target_kind)
        if not target_kind.votable:
            raise InvalidEdgeError(f"Votes do not apply to {target_kind.value}")
        try:
            direction = VoteDirection(direction)
        except ValueError:
            raise ValidationError(f"Vote direction must be 1 or -1, got {direction}")

        with logfire.span(
            "ledger_service.cast_vote",
            actor_id=str(actor_id),
            target_id=str(target_id),
            direction=direction.value,
        ):
            await self._get_target(target_id, target_kind)

            now = datetime.now()
            async with self.transaction_manager.atomic():
                vote = await self.vote_repository.upsert(
                    Vote(
                        id=VoteId(uuid4()),
                        actor_id=actor_id,
                        target_id=target_id,
                        target_kind=target_kind,
                        direction=direction,
                        created_at=now,
                        updated_at=now,
                    )
                )
            logfire.info("Vote recorded", vote_id=str(vote.id))
            return vote

    async def vote_score(self, target_id: ContentId) -> int:
        """Sum of vote directions on a target, from the stored rows."""
        return await self.vote_repository.score(target_id)
