"""In-memory repository implementations for testing."""

from .account import InMemoryAccountRepository
from .content import InMemoryContentRepository
from .database import InMemoryDatabase, InMemoryTransactionManager
from .follow import InMemoryFollowRepository
from .mark import InMemoryMarkRepository
from .notification import InMemoryNotificationRepository, InMemoryPreferenceRepository
from .view import InMemoryViewRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryAccountRepository",
    "InMemoryContentRepository",
    "InMemoryDatabase",
    "InMemoryFollowRepository",
    "InMemoryMarkRepository",
    "InMemoryNotificationRepository",
    "InMemoryPreferenceRepository",
    "InMemoryTransactionManager",
    "InMemoryViewRepository",
    "InMemoryVoteRepository",
]
