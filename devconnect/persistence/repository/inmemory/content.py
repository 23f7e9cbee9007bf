"""In-memory content repository for testing."""

from typing import Optional

from devconnect.domain.error import NotFoundError
from devconnect.domain.model import ContentRef
from devconnect.domain.repository import ContentRepository
from devconnect.domain.value import ContentId

from .database import InMemoryDatabase


class InMemoryContentRepository(ContentRepository):
    """In-memory implementation of ContentRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self.db = database

    async def find_by_id(self, content_id: ContentId) -> Optional[ContentRef]:
        """Find a content item by ID."""
        return self.db.content.get(content_id)

    async def save(self, content: ContentRef) -> ContentRef:
        """Register a content item; an existing row keeps its view counter."""
        existing = self.db.content.get(content.id)
        if existing:
            content = content.model_copy(update={"view_count": existing.view_count})
        self.db.content[content.id] = content
        return content

    async def increment_view_count(self, content_id: ContentId) -> int:
        """Add one to the view counter."""
        content = self.db.content.get(content_id)
        if not content:
            raise NotFoundError("Content", str(content_id))
        updated = content.model_copy(update={"view_count": content.view_count + 1})
        self.db.content[content_id] = updated
        return updated.view_count
