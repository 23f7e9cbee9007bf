"""Account settings use cases."""

from uuid import UUID

from pydantic import BaseModel

from devconnect.domain.service import AccountService
from devconnect.domain.value import AccountId


class SetPrivacyRequest(BaseModel):
    """Set privacy request."""

    account_id: str
    requester_id: str  # Authenticated caller
    is_private: bool


class SetPrivacyResponse(BaseModel):
    """Set privacy response."""

    account_id: str
    is_private: bool


class SetPrivacyUseCase:
    """Use case for toggling an account's privacy flag."""

    def __init__(self, account_service: AccountService) -> None:
        self.account_service = account_service

    async def execute(self, request: SetPrivacyRequest) -> SetPrivacyResponse:
        """Execute set privacy flow.

        Raises:
            ForbiddenError: If the caller is not the owner
        """
        account = await self.account_service.set_privacy(
            AccountId(UUID(request.account_id)),
            AccountId(UUID(request.requester_id)),
            request.is_private,
        )
        return SetPrivacyResponse(
            account_id=str(account.id), is_private=account.is_private
        )


class DeleteAccountRequest(BaseModel):
    """Delete account request."""

    account_id: str
    requester_id: str  # Authenticated caller


class DeleteAccountUseCase:
    """Use case for deleting the caller's account."""

    def __init__(self, account_service: AccountService) -> None:
        self.account_service = account_service

    async def execute(self, request: DeleteAccountRequest) -> None:
        """Execute delete account flow.

        Raises:
            ForbiddenError: If the caller is not the owner
            NotFoundError: If the account does not exist
        """
        await self.account_service.delete_account(
            AccountId(UUID(request.account_id)),
            AccountId(UUID(request.requester_id)),
        )
