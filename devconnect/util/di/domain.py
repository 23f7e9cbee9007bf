"""Domain layer DI providers."""

from dishka import Scope, provide

from devconnect.config import AuthSettings, DigestSettings, EngagementSettings
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
from devconnect.domain.service import (
    AccountService,
    ContentService,
    DeliveryChannel,
    DeliveryPool,
    DigestDispatcher,
    EngagementLedgerService,
    FanoutService,
    JWTService,
    NotificationService,
    PreferenceService,
    RankService,
    SocialGraphService,
    ViewService,
)
from devconnect.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    The delivery pool is APP-scoped so background deliveries outlive requests.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide(scope=Scope.APP)
    def get_delivery_pool(
        self, channel: DeliveryChannel, digest_settings: DigestSettings
    ) -> DeliveryPool:
        """Provide the background delivery runner."""
        return DeliveryPool(
            channel=channel, timeout_seconds=digest_settings.timeout_seconds
        )

    @provide
    def get_rank_service(
        self,
        account_repository: AccountRepository,
        follow_repository: FollowRepository,
    ) -> RankService:
        """Provide rank computation service."""
        return RankService(
            account_repository=account_repository,
            follow_repository=follow_repository,
        )

    @provide
    def get_preference_service(
        self, preference_repository: PreferenceRepository
    ) -> PreferenceService:
        """Provide preference service."""
        return PreferenceService(preference_repository=preference_repository)

    @provide
    def get_notification_service(
        self,
        notification_repository: NotificationRepository,
        engagement_settings: EngagementSettings,
    ) -> NotificationService:
        """Provide notification inbox service."""
        return NotificationService(
            notification_repository=notification_repository,
            batch_size=engagement_settings.listing_batch_size,
        )

    @provide
    def get_digest_dispatcher(
        self,
        preference_service: PreferenceService,
        account_repository: AccountRepository,
        delivery_pool: DeliveryPool,
        digest_settings: DigestSettings,
    ) -> DigestDispatcher:
        """Provide digest dispatcher."""
        return DigestDispatcher(
            preference_service=preference_service,
            account_repository=account_repository,
            delivery_pool=delivery_pool,
            digest_settings=digest_settings,
        )

    @provide
    def get_fanout_service(
        self,
        content_repository: ContentRepository,
        account_repository: AccountRepository,
        notification_service: NotificationService,
        digest_dispatcher: DigestDispatcher,
        transaction_manager: TransactionManager,
    ) -> FanoutService:
        """Provide notification fan-out service."""
        return FanoutService(
            content_repository=content_repository,
            account_repository=account_repository,
            notification_service=notification_service,
            digest_dispatcher=digest_dispatcher,
            transaction_manager=transaction_manager,
        )

    @provide
    def get_account_service(
        self,
        account_repository: AccountRepository,
        follow_repository: FollowRepository,
        rank_service: RankService,
        transaction_manager: TransactionManager,
    ) -> AccountService:
        """Provide account service."""
        return AccountService(
            account_repository=account_repository,
            follow_repository=follow_repository,
            rank_service=rank_service,
            transaction_manager=transaction_manager,
        )

    @provide
    def get_content_service(
        self,
        content_repository: ContentRepository,
        account_repository: AccountRepository,
    ) -> ContentService:
        """Provide content ownership service."""
        return ContentService(
            content_repository=content_repository,
            account_repository=account_repository,
        )

    @provide
    def get_graph_service(
        self,
        account_repository: AccountRepository,
        follow_repository: FollowRepository,
        rank_service: RankService,
        fanout_service: FanoutService,
        transaction_manager: TransactionManager,
        engagement_settings: EngagementSettings,
    ) -> SocialGraphService:
        """Provide social graph service."""
        return SocialGraphService(
            account_repository=account_repository,
            follow_repository=follow_repository,
            rank_service=rank_service,
            fanout_service=fanout_service,
            transaction_manager=transaction_manager,
            batch_size=engagement_settings.listing_batch_size,
        )

    @provide
    def get_ledger_service(
        self,
        content_repository: ContentRepository,
        mark_repository: MarkRepository,
        vote_repository: VoteRepository,
        fanout_service: FanoutService,
        transaction_manager: TransactionManager,
    ) -> EngagementLedgerService:
        """Provide engagement ledger service."""
        return EngagementLedgerService(
            content_repository=content_repository,
            mark_repository=mark_repository,
            vote_repository=vote_repository,
            fanout_service=fanout_service,
            transaction_manager=transaction_manager,
        )

    @provide
    def get_view_service(
        self,
        content_repository: ContentRepository,
        view_repository: ViewRepository,
        transaction_manager: TransactionManager,
        engagement_settings: EngagementSettings,
    ) -> ViewService:
        """Provide view tracking service."""
        return ViewService(
            content_repository=content_repository,
            view_repository=view_repository,
            transaction_manager=transaction_manager,
            threshold_seconds=engagement_settings.view_threshold_seconds,
        )
