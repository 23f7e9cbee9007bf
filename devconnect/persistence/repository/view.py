"""PostgreSQL implementation of View repository."""

from sqlalchemy import insert
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from devconnect.domain.error import ConflictError
from devconnect.domain.model import ViewRecord
from devconnect.domain.repository import ViewRepository
from devconnect.persistence.tables import view_records_table


class PostgresViewRepository(ViewRepository):
    """PostgreSQL implementation of ViewRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def save(self, record: ViewRecord) -> ViewRecord:
        """Store a counted view."""
        stmt = insert(view_records_table).values(**record.model_dump())
        try:
            await self.session.execute(stmt)
            await self.session.flush()
        except IntegrityError as e:
            raise ConflictError(
                "ViewRecord", f"{record.session_id}:{record.viewer_id}:{record.content_id}"
            ) from e
        return record
