"""Domain services."""

from .account_service import AccountService, ProfileStats
from .base import Service
from .content_service import ContentService
from .digest_service import (
    DeliveryChannel,
    DeliveryPool,
    DigestDispatcher,
    DigestMessage,
)
from .fanout_service import FanoutService
from .graph_service import SocialGraphService
from .jwt_service import JWTService
from .ledger_service import EngagementLedgerService
from .notification_service import NotificationService
from .preference_service import PreferenceService
from .rank_service import RankService
from .view_service import ViewService, ViewSession

__all__ = [
    "AccountService",
    "ContentService",
    "DeliveryChannel",
    "DeliveryPool",
    "DigestDispatcher",
    "DigestMessage",
    "EngagementLedgerService",
    "FanoutService",
    "JWTService",
    "NotificationService",
    "PreferenceService",
    "ProfileStats",
    "RankService",
    "Service",
    "SocialGraphService",
    "ViewService",
    "ViewSession",
]
