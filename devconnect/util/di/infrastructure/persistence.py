"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from devconnect.config import Settings
from devconnect.domain.repository import (
    AccountRepository,
    ContentRepository,
    FollowRepository,
    MarkRepository,
    NotificationRepository,
    PreferenceRepository,
    TransactionManager,
    ViewRepository,
    VoteRepository,
)
from devconnect.persistence.database import create_engine, create_session_factory
from devconnect.persistence.repository import (
    PostgresAccountRepository,
    PostgresContentRepository,
    PostgresFollowRepository,
    PostgresMarkRepository,
    PostgresNotificationRepository,
    PostgresPreferenceRepository,
    PostgresTransactionManager,
    PostgresViewRepository,
    PostgresVoteRepository,
)
from devconnect.util.di.base import ProviderBase
from devconnect.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide database engine."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        Work done outside an explicit atomic block is committed at the end of
        the request if no exception occurred, or rolled back otherwise.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
                logfire.info("Session committed")
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_transaction_manager(self, session: AsyncSession) -> TransactionManager:
        """Provide transaction manager bound to the request session."""
        return PostgresTransactionManager(session)

    @provide(scope=Scope.REQUEST)
    def get_account_repository(self, session: AsyncSession) -> AccountRepository:
        """Provide Account repository."""
        return PostgresAccountRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_follow_repository(self, session: AsyncSession) -> FollowRepository:
        """Provide FollowEdge repository."""
        return PostgresFollowRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_content_repository(self, session: AsyncSession) -> ContentRepository:
        """Provide ContentRef repository."""
        return PostgresContentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_mark_repository(self, session: AsyncSession) -> MarkRepository:
        """Provide EngagementMark repository."""
        return PostgresMarkRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(self, session: AsyncSession) -> VoteRepository:
        """Provide Vote repository."""
        return PostgresVoteRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_view_repository(self, session: AsyncSession) -> ViewRepository:
        """Provide ViewRecord repository."""
        return PostgresViewRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_notification_repository(
        self, session: AsyncSession
    ) -> NotificationRepository:
        """Provide Notification repository."""
        return PostgresNotificationRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_preference_repository(
        self, session: AsyncSession
    ) -> PreferenceRepository:
        """Provide NotificationPreference repository."""
        return PostgresPreferenceRepository(session)
