"""Repository interfaces for the DevConnect domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from devconnect.domain.repository.account import AccountRepository
from devconnect.domain.repository.content import ContentRepository
from devconnect.domain.repository.follow import FollowRepository
from devconnect.domain.repository.mark import MarkRepository
from devconnect.domain.repository.notification import (
    NotificationRepository,
    PreferenceRepository,
)
from devconnect.domain.repository.transaction import TransactionManager
from devconnect.domain.repository.view import ViewRepository
from devconnect.domain.repository.vote import VoteRepository

__all__ = [
    "AccountRepository",
    "ContentRepository",
    "FollowRepository",
    "MarkRepository",
    "NotificationRepository",
    "PreferenceRepository",
    "TransactionManager",
    "ViewRepository",
    "VoteRepository",
]
