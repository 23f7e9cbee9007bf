"""PostgreSQL implementation of Content repository."""

from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from devconnect.domain.error import NotFoundError
from devconnect.domain.model import ContentRef
from devconnect.domain.repository import ContentRepository
from devconnect.domain.value import ContentId
from devconnect.persistence.mappers import content_to_dict, row_to_content
from devconnect.persistence.tables import content_items_table


class PostgresContentRepository(ContentRepository):
    """PostgreSQL implementation of ContentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, content_id: ContentId) -> Optional[ContentRef]:
        """Find a content item by ID."""
        stmt = select(content_items_table).where(content_items_table.c.id == content_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_content(row._asdict()) if row else None

    async def save(self, content: ContentRef) -> ContentRef:
        """Register a content item or update its kind and owner."""
        stmt = insert(content_items_table).values(**content_to_dict(content))
        stmt = stmt.on_conflict_do_update(
            index_elements=[content_items_table.c.id],
            set_={"kind": stmt.excluded.kind, "owner_id": stmt.excluded.owner_id},
        ).returning(*content_items_table.c)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_content(row._asdict())

    async def increment_view_count(self, content_id: ContentId) -> int:
        """Atomically add one to the view counter."""
        stmt = (
            update(content_items_table)
            .where(content_items_table.c.id == content_id)
            .values(view_count=content_items_table.c.view_count + 1)
            .returning(content_items_table.c.view_count)
        )
        result = await self.session.execute(stmt)
        view_count = result.scalar_one_or_none()
        if view_count is None:
            raise NotFoundError("Content", str(content_id))
        await self.session.flush()
        return view_count
