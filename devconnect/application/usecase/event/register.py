"""Registration hooks for the identity and content services."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from devconnect.domain.service import AccountService, ContentService
from devconnect.domain.value import AccountId, ContentId, Rank, TargetKind


class RegisterAccountRequest(BaseModel):
    """Account published by the identity service."""

    account_id: str
    handle: str
    display_name: Optional[str] = None
    email: Optional[str] = None


class RegisterAccountResponse(BaseModel):
    """Register account response."""

    account_id: str
    handle: str
    rank: Rank


class RegisterAccountUseCase:
    """Use case for recording a new account."""

    def __init__(self, account_service: AccountService) -> None:
        self.account_service = account_service

    async def execute(self, request: RegisterAccountRequest) -> RegisterAccountResponse:
        """Execute register account flow.

        Raises:
            ConflictError: If the handle is already taken
        """
        account = await self.account_service.register(
            handle=request.handle,
            display_name=request.display_name,
            email=request.email,
            account_id=AccountId(UUID(request.account_id)),
        )
        return RegisterAccountResponse(
            account_id=str(account.id), handle=account.handle.root, rank=account.rank
        )


class RegisterContentRequest(BaseModel):
    """Content item published by a content service."""

    content_id: str
    kind: TargetKind
    owner_id: str


class RegisterContentResponse(BaseModel):
    """Register content response."""

    content_id: str
    kind: TargetKind
    owner_id: str
    view_count: int


class RegisterContentUseCase:
    """Use case for recording who owns a content item."""

    def __init__(self, content_service: ContentService) -> None:
        self.content_service = content_service

    async def execute(self, request: RegisterContentRequest) -> RegisterContentResponse:
        """Execute register content flow.

        Raises:
            NotFoundError: If the owner account does not exist
        """
        content = await self.content_service.register(
            ContentId(UUID(request.content_id)),
            request.kind,
            AccountId(UUID(request.owner_id)),
        )
        return RegisterContentResponse(
            content_id=str(content.id),
            kind=content.kind,
            owner_id=str(content.owner_id),
            view_count=content.view_count,
        )
