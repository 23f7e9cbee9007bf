"""Mock persistence providers for testing."""

from dishka import Scope, provide

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
from devconnect.persistence.repository.inmemory import (
    InMemoryAccountRepository,
    InMemoryContentRepository,
    InMemoryDatabase,
    InMemoryFollowRepository,
    InMemoryMarkRepository,
    InMemoryNotificationRepository,
    InMemoryPreferenceRepository,
    InMemoryTransactionManager,
    InMemoryViewRepository,
    InMemoryVoteRepository,
)
from devconnect.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    The database lives for the container (one per test fixture) so that
    repositories from separate requests see the same rows; repositories
    themselves are REQUEST-scoped like their Postgres counterparts.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_database(self) -> InMemoryDatabase:
        """Provide the shared in-memory store."""
        return InMemoryDatabase()

    @provide(scope=Scope.REQUEST)
    def get_transaction_manager(self, database: InMemoryDatabase) -> TransactionManager:
        """Provide snapshot-based transaction manager."""
        return InMemoryTransactionManager(database)

    @provide(scope=Scope.REQUEST)
    def get_account_repository(self, database: InMemoryDatabase) -> AccountRepository:
        """Provide in-memory account repository."""
        return InMemoryAccountRepository(database)

    @provide(scope=Scope.REQUEST)
    def get_follow_repository(self, database: InMemoryDatabase) -> FollowRepository:
        """Provide in-memory follow edge repository."""
        return InMemoryFollowRepository(database)

    @provide(scope=Scope.REQUEST)
    def get_content_repository(self, database: InMemoryDatabase) -> ContentRepository:
        """Provide in-memory content repository."""
        return InMemoryContentRepository(database)

    @provide(scope=Scope.REQUEST)
    def get_mark_repository(self, database: InMemoryDatabase) -> MarkRepository:
        """Provide in-memory mark repository."""
        return InMemoryMarkRepository(database)

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(self, database: InMemoryDatabase) -> VoteRepository:
        """Provide in-memory vote repository."""
        return InMemoryVoteRepository(database)

    @provide(scope=Scope.REQUEST)
    def get_view_repository(self, database: InMemoryDatabase) -> ViewRepository:
        """Provide in-memory view repository."""
        return InMemoryViewRepository(database)

    @provide(scope=Scope.REQUEST)
    def get_notification_repository(
        self, database: InMemoryDatabase
    ) -> NotificationRepository:
        """Provide in-memory notification repository."""
        return InMemoryNotificationRepository(database)

    @provide(scope=Scope.REQUEST)
    def get_preference_repository(
        self, database: InMemoryDatabase
    ) -> PreferenceRepository:
        """Provide in-memory preference repository."""
        return InMemoryPreferenceRepository(database)
