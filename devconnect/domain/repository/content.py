"""Content ownership repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from devconnect.domain.model import ContentRef
from devconnect.domain.value import ContentId


class ContentRepository(ABC):
    """Repository for the content ownership projection.

    Rows are published by the content services; this service reads owners
    and maintains the running view counter.
    """

    @abstractmethod
    async def find_by_id(self, content_id: ContentId) -> Optional[ContentRef]:
        """Find a content item by ID.

        Args:
            content_id: The content item's identifier

        Returns:
            The content reference if known, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, content: ContentRef) -> ContentRef:
        """Register a content item or update its kind and owner.

        An existing row keeps its view counter.
        """
        pass

    @abstractmethod
    async def increment_view_count(self, content_id: ContentId) -> int:
        """Atomically add one to the view counter.

        Args:
            content_id: The content item's identifier

        Returns:
            The new counter value
        """
        pass
