"""View record repository interface."""

from abc import ABC, abstractmethod

from devconnect.domain.model import ViewRecord


class ViewRepository(ABC):
    """Repository for counted views."""

    @abstractmethod
    async def save(self, record: ViewRecord) -> ViewRecord:
        """Store a counted view.

        Args:
            record: The (session, viewer, content) fact

        Returns:
            The saved record

        Raises:
            ConflictError: If the triple was already counted
        """
        pass
