"""Content ownership service."""

import logfire

from devconnect.domain.error import NotFoundError
from devconnect.domain.model import ContentRef
from devconnect.domain.repository import AccountRepository, ContentRepository
from devconnect.domain.value import AccountId, ContentId, TargetKind

from .base import Service


class ContentService(Service):
    """Keeps the ownership facts published by the content services."""

    def __init__(
        self,
        content_repository: ContentRepository,
        account_repository: AccountRepository,
    ) -> None:
        self.content_repository = content_repository
        self.account_repository = account_repository

    async def get(self, content_id: ContentId) -> ContentRef:
        """Get a content item.

        Raises:
            NotFoundError: If the item was never published
        """
        content = await self.content_repository.find_by_id(content_id)
        if not content:
            raise NotFoundError("Content", str(content_id))
        return content

    async def register(
        self, content_id: ContentId, kind: TargetKind, owner_id: AccountId
    ) -> ContentRef:
        """Record (or correct) who owns a content item.

        Args:
            content_id: Id assigned by the content service
            kind: Kind of the item
            owner_id: The author

        Returns:
            The stored reference, with its current view count

        Raises:
            NotFoundError: If the owner account does not exist
        """
        with logfire.span(
            "content_service.register", content_id=str(content_id), kind=kind.value
        ):
            if not await self.account_repository.find_by_id(owner_id):
                raise NotFoundError("Account", str(owner_id))
            content = await self.content_repository.save(
                ContentRef(id=content_id, kind=kind, owner_id=owner_id)
            )
            logfire.info(
                "Content registered", content_id=str(content_id), owner_id=str(owner_id)
            )
            return content
