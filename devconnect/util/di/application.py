"""Application layer DI providers."""

from dishka import Scope, provide

from devconnect.application.usecase.account import (
    DeleteAccountUseCase,
    SetPrivacyUseCase,
)
from devconnect.application.usecase.event import (
    RecordCommentUseCase,
    RecordMentionUseCase,
    RegisterAccountUseCase,
    RegisterContentUseCase,
)
from devconnect.application.usecase.follow import (
    GetProfileStatsUseCase,
    ListConnectionsUseCase,
    ToggleFollowUseCase,
)
from devconnect.application.usecase.mark import ToggleMarkUseCase
from devconnect.application.usecase.notification import (
    DeleteNotificationsUseCase,
    ListNotificationsUseCase,
    MarkReadUseCase,
)
from devconnect.application.usecase.preference import (
    GetPreferencesUseCase,
    UpdatePreferencesUseCase,
)
from devconnect.application.usecase.view import RecordViewUseCase
from devconnect.application.usecase.vote import CastVoteUseCase
from devconnect.domain.repository import TransactionManager
from devconnect.domain.service import (
    AccountService,
    ContentService,
    EngagementLedgerService,
    FanoutService,
    NotificationService,
    PreferenceService,
    SocialGraphService,
    ViewService,
)
from devconnect.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Social graph use cases
    @provide(scope=Scope.REQUEST)
    def get_toggle_follow_use_case(
        self, graph_service: SocialGraphService
    ) -> ToggleFollowUseCase:
        """Provide toggle follow use case."""
        return ToggleFollowUseCase(graph_service=graph_service)

    @provide(scope=Scope.REQUEST)
    def get_list_connections_use_case(
        self, graph_service: SocialGraphService
    ) -> ListConnectionsUseCase:
        """Provide follower/following listing use case."""
        return ListConnectionsUseCase(graph_service=graph_service)

    @provide(scope=Scope.REQUEST)
    def get_profile_stats_use_case(
        self, account_service: AccountService, graph_service: SocialGraphService
    ) -> GetProfileStatsUseCase:
        """Provide profile stats use case."""
        return GetProfileStatsUseCase(
            account_service=account_service, graph_service=graph_service
        )

    # Engagement ledger use cases
    @provide(scope=Scope.REQUEST)
    def get_toggle_mark_use_case(
        self, ledger_service: EngagementLedgerService
    ) -> ToggleMarkUseCase:
        """Provide like/bookmark toggle use case."""
        return ToggleMarkUseCase(ledger_service=ledger_service)

    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(
        self, ledger_service: EngagementLedgerService
    ) -> CastVoteUseCase:
        """Provide vote use case."""
        return CastVoteUseCase(ledger_service=ledger_service)

    @provide(scope=Scope.REQUEST)
    def get_record_view_use_case(self, view_service: ViewService) -> RecordViewUseCase:
        """Provide view recording use case."""
        return RecordViewUseCase(view_service=view_service)

    # Notification inbox use cases
    @provide(scope=Scope.REQUEST)
    def get_list_notifications_use_case(
        self, notification_service: NotificationService
    ) -> ListNotificationsUseCase:
        """Provide inbox listing use case."""
        return ListNotificationsUseCase(notification_service=notification_service)

    @provide(scope=Scope.REQUEST)
    def get_mark_read_use_case(
        self, notification_service: NotificationService
    ) -> MarkReadUseCase:
        """Provide mark read use case."""
        return MarkReadUseCase(notification_service=notification_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_notifications_use_case(
        self, notification_service: NotificationService
    ) -> DeleteNotificationsUseCase:
        """Provide notification deletion use case."""
        return DeleteNotificationsUseCase(notification_service=notification_service)

    @provide(scope=Scope.REQUEST)
    def get_preferences_use_case(
        self, preference_service: PreferenceService
    ) -> GetPreferencesUseCase:
        """Provide preference lookup use case."""
        return GetPreferencesUseCase(preference_service=preference_service)

    @provide(scope=Scope.REQUEST)
    def get_update_preferences_use_case(
        self, preference_service: PreferenceService
    ) -> UpdatePreferencesUseCase:
        """Provide preference update use case."""
        return UpdatePreferencesUseCase(preference_service=preference_service)

    # Account use cases
    @provide(scope=Scope.REQUEST)
    def get_set_privacy_use_case(
        self, account_service: AccountService
    ) -> SetPrivacyUseCase:
        """Provide privacy toggle use case."""
        return SetPrivacyUseCase(account_service=account_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_account_use_case(
        self, account_service: AccountService
    ) -> DeleteAccountUseCase:
        """Provide account deletion use case."""
        return DeleteAccountUseCase(account_service=account_service)

    # Upstream event use cases
    @provide(scope=Scope.REQUEST)
    def get_register_account_use_case(
        self, account_service: AccountService
    ) -> RegisterAccountUseCase:
        """Provide account registration use case."""
        return RegisterAccountUseCase(account_service=account_service)

    @provide(scope=Scope.REQUEST)
    def get_register_content_use_case(
        self, content_service: ContentService
    ) -> RegisterContentUseCase:
        """Provide content registration use case."""
        return RegisterContentUseCase(content_service=content_service)

    @provide(scope=Scope.REQUEST)
    def get_record_comment_use_case(
        self,
        content_service: ContentService,
        fanout_service: FanoutService,
        transaction_manager: TransactionManager,
    ) -> RecordCommentUseCase:
        """Provide comment event use case."""
        return RecordCommentUseCase(
            content_service=content_service,
            fanout_service=fanout_service,
            transaction_manager=transaction_manager,
        )

    @provide(scope=Scope.REQUEST)
    def get_record_mention_use_case(
        self, account_service: AccountService, fanout_service: FanoutService
    ) -> RecordMentionUseCase:
        """Provide mention event use case."""
        return RecordMentionUseCase(
            account_service=account_service, fanout_service=fanout_service
        )
