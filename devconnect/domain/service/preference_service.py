"""Notification preference service."""

from typing import Optional

import logfire

from devconnect.domain.error import ForbiddenError
from devconnect.domain.model import NotificationPreference
from devconnect.domain.repository import PreferenceRepository
from devconnect.domain.value import AccountId, NotificationKind

from .base import Service


class PreferenceService(Service):
    """Reads and updates per-account out-of-band delivery settings."""

    def __init__(self, preference_repository: PreferenceRepository) -> None:
        self.preference_repository = preference_repository

    async def get_preferences(self, account_id: AccountId) -> NotificationPreference:
        """Get an account's preferences, falling back to the defaults.

        Args:
            account_id: The account

        Returns:
            Stored preferences, or defaults when nothing was ever saved
        """
        stored = await self.preference_repository.find(account_id)
        return stored or NotificationPreference(account_id=account_id)

    async def set_preferences(
        self,
        account_id: AccountId,
        requester_id: AccountId,
        email_enabled: Optional[bool] = None,
        likes: Optional[bool] = None,
        comments: Optional[bool] = None,
        follows: Optional[bool] = None,
        mentions: Optional[bool] = None,
    ) -> NotificationPreference:
        """Update an account's preferences. Omitted flags keep their value.

        Args:
            account_id: The account whose preferences change
            requester_id: The authenticated caller

        Returns:
            The stored preferences

        Raises:
            ForbiddenError: If the caller is not the account owner
        """
        with logfire.span(
            "preference_service.set_preferences", account_id=str(account_id)
        ):
            if requester_id != account_id:
                logfire.warn(
                    "Preference update by non-owner",
                    account_id=str(account_id),
                    requester_id=str(requester_id),
                )
                raise ForbiddenError(
                    "NotificationPreference", str(account_id), str(requester_id)
                )

            current = await self.get_preferences(account_id)
            changes = {
                key: value
                for key, value in {
                    "email_enabled": email_enabled,
                    "likes": likes,
                    "comments": comments,
                    "follows": follows,
                    "mentions": mentions,
                }.items()
                if value is not None
            }
            updated = current.model_copy(update=changes)
            saved = await self.preference_repository.save(updated)
            logfire.info(
                "Preferences updated", account_id=str(account_id), **changes
            )
            return saved

    async def allows_email(self, account_id: AccountId, kind: NotificationKind) -> bool:
        """Whether an out-of-band copy of ``kind`` may go to the account."""
        preferences = await self.get_preferences(account_id)
        return preferences.allows(kind)
