"""Notification preference use cases."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from devconnect.domain.model import NotificationPreference
from devconnect.domain.service import PreferenceService
from devconnect.domain.value import AccountId


class PreferencesResponse(BaseModel):
    """Notification preferences of the caller."""

    email_enabled: bool
    likes: bool
    comments: bool
    follows: bool
    mentions: bool

    @classmethod
    def from_domain(cls, preference: NotificationPreference) -> "PreferencesResponse":
        """Build the API view of the preferences."""
        return cls(**preference.model_dump(exclude={"account_id"}))


class GetPreferencesRequest(BaseModel):
    """Get preferences request."""

    account_id: str  # Authenticated caller


class GetPreferencesUseCase:
    """Use case for reading the caller's preferences."""

    def __init__(self, preference_service: PreferenceService) -> None:
        self.preference_service = preference_service

    async def execute(self, request: GetPreferencesRequest) -> PreferencesResponse:
        """Execute get preferences flow."""
        preference = await self.preference_service.get_preferences(
            AccountId(UUID(request.account_id))
        )
        return PreferencesResponse.from_domain(preference)


class UpdatePreferencesRequest(BaseModel):
    """Update preferences request. Omitted flags are left unchanged."""

    account_id: str  # Account whose preferences change
    requester_id: str  # Authenticated caller
    email_enabled: Optional[bool] = None
    likes: Optional[bool] = None
    comments: Optional[bool] = None
    follows: Optional[bool] = None
    mentions: Optional[bool] = None


class UpdatePreferencesUseCase:
    """Use case for changing the caller's preferences."""

    def __init__(self, preference_service: PreferenceService) -> None:
        self.preference_service = preference_service

    async def execute(self, request: UpdatePreferencesRequest) -> PreferencesResponse:
        """Execute update preferences flow.

        Raises:
            ForbiddenError: If the caller is not the account owner
        """
        preference = await self.preference_service.set_preferences(
            account_id=AccountId(UUID(request.account_id)),
            requester_id=AccountId(UUID(request.requester_id)),
            email_enabled=request.email_enabled,
            likes=request.likes,
            comments=request.comments,
            follows=request.follows,
            mentions=request.mentions,
        )
        return PreferencesResponse.from_domain(preference)
