"""View record entity."""

from datetime import datetime

from pydantic import Field

from devconnect.domain.model.common import DomainModel
from devconnect.domain.value import AccountId, ContentId, ViewSessionId


class ViewRecord(DomainModel):
    """Fact that a viewer watched a content item past the threshold.

    Unique on (session_id, viewer_id, content_id): one increment per sitting.
    """

    session_id: ViewSessionId
    viewer_id: AccountId
    content_id: ContentId
    created_at: datetime = Field(default_factory=datetime.now)
