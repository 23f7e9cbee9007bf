"""In-memory view repository for testing."""

from devconnect.domain.error import ConflictError
from devconnect.domain.model import ViewRecord
from devconnect.domain.repository import ViewRepository

from .database import InMemoryDatabase


class InMemoryViewRepository(ViewRepository):
    """In-memory implementation of ViewRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self.db = database

    async def save(self, record: ViewRecord) -> ViewRecord:
        """Store a counted view.

        Raises:
            ConflictError: If the triple was already counted
        """
        key = (record.session_id, record.viewer_id, record.content_id)
        if key in self.db.views:
            raise ConflictError("ViewRecord", str(key))
        self.db.views[key] = record
        return record
