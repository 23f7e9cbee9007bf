"""Test configuration and helpers."""

from typing import Optional
from uuid import uuid4

from dishka import AsyncContainer

from devconnect.domain.model import Account, ContentRef
from devconnect.domain.repository import AccountRepository, ContentRepository
from devconnect.domain.value import AccountId, ContentId, Handle, TargetKind


async def make_account(
    env: AsyncContainer,
    handle: str,
    display_name: Optional[str] = None,
    email: Optional[str] = None,
) -> Account:
    """Store an account directly through the repository."""
    account_repository = await env.get(AccountRepository)
    return await account_repository.save(
        Account(
            id=AccountId(uuid4()),
            handle=Handle(root=handle),
            display_name=display_name,
            email=email or f"{handle}@example.com",
        )
    )


async def make_content(
    env: AsyncContainer, owner_id: AccountId, kind: TargetKind = TargetKind.POST
) -> ContentRef:
    """Store an ownership fact for a new content item."""
    content_repository = await env.get(ContentRepository)
    return await content_repository.save(
        ContentRef(id=ContentId(uuid4()), kind=kind, owner_id=owner_id)
    )
