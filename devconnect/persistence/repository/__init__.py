"""PostgreSQL repository implementations."""

from devconnect.persistence.repository.account import PostgresAccountRepository
from devconnect.persistence.repository.content import PostgresContentRepository
from devconnect.persistence.repository.follow import PostgresFollowRepository
from devconnect.persistence.repository.mark import PostgresMarkRepository
from devconnect.persistence.repository.notification import (
    PostgresNotificationRepository,
    PostgresPreferenceRepository,
)
from devconnect.persistence.repository.transaction import PostgresTransactionManager
from devconnect.persistence.repository.view import PostgresViewRepository
from devconnect.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresAccountRepository",
    "PostgresContentRepository",
    "PostgresFollowRepository",
    "PostgresMarkRepository",
    "PostgresNotificationRepository",
    "PostgresPreferenceRepository",
    "PostgresTransactionManager",
    "PostgresViewRepository",
    "PostgresVoteRepository",
]
