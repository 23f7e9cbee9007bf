"""Shared in-memory store for the in-memory repositories.

All repositories of one request work on the same ``InMemoryDatabase`` so
that cascades, joins and transactions behave like the PostgreSQL schema.
"""

import asyncio
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

from devconnect.domain.model import (
    Account,
    ContentRef,
    EngagementMark,
    FollowEdge,
    Notification,
    NotificationPreference,
    ViewRecord,
    Vote,
)
from devconnect.domain.repository import TransactionManager
from devconnect.domain.value import (
    AccountId,
    ContentId,
    FollowEdgeId,
    MarkId,
    NotificationId,
    ViewSessionId,
    VoteId,
)


class InMemoryDatabase:
    """Tables as dicts of immutable rows."""

    TABLES = (
        "accounts",
        "follow_edges",
        "marks",
        "votes",
        "content",
        "views",
        "notifications",
        "preferences",
    )

    def __init__(self) -> None:
        self.accounts: dict[AccountId, Account] = {}
        self.follow_edges: dict[FollowEdgeId, FollowEdge] = {}
        self.marks: dict[MarkId, EngagementMark] = {}
        self.votes: dict[VoteId, Vote] = {}
        self.content: dict[ContentId, ContentRef] = {}
        self.views: dict[tuple[ViewSessionId, AccountId, ContentId], ViewRecord] = {}
        self.notifications: dict[NotificationId, Notification] = {}
        self.preferences: dict[AccountId, NotificationPreference] = {}
        # Serializes outermost transactions
        self.lock = asyncio.Lock()

    def snapshot(self) -> dict[str, dict[Any, Any]]:
        """Copy every table; rows are immutable so a shallow copy suffices."""
        return {name: dict(getattr(self, name)) for name in self.TABLES}

    def restore(self, snapshot: dict[str, dict[Any, Any]]) -> None:
        """Put every table back to a previous snapshot."""
        for name, rows in snapshot.items():
            setattr(self, name, dict(rows))


class InMemoryTransactionManager(TransactionManager):
    """Snapshot/restore transactions over an InMemoryDatabase."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self.database = database

    @asynccontextmanager
    async def _transaction(self) -> AsyncIterator[None]:
        async with self.database.lock:
            async with self._savepoint():
                yield

    @asynccontextmanager
    async def _savepoint(self) -> AsyncIterator[None]:
        snapshot = self.database.snapshot()
        try:
            yield
        except BaseException:
            self.database.restore(snapshot)
            raise
