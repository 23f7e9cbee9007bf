"""Record mention use case."""

import re
from typing import Optional
from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from devconnect.domain.error import NotFoundError
from devconnect.domain.event import MentionEvent
from devconnect.domain.service import AccountService, FanoutService
from devconnect.domain.value import AccountId, ContentId, TargetKind

MENTION_PATTERN = re.compile(r"(?<![\w@])@([A-Za-z0-9_][A-Za-z0-9_.-]*)")


def extract_handles(text: str) -> list[str]:
    """Find ``@handle`` mentions in text, in order, without duplicates."""
    seen: dict[str, str] = {}
    for match in MENTION_PATTERN.finditer(text):
        handle = match.group(1).rstrip(".-")
        if handle:
            seen.setdefault(handle.lower(), handle)
    return list(seen.values())


class RecordMentionRequest(BaseModel):
    """Mentions found in a stored content item."""

    actor_id: str  # Content author
    target_id: str
    target_kind: TargetKind
    handles: list[str] = Field(default_factory=list)
    text: Optional[str] = None  # Scanned for @handles as well


class RecordMentionResponse(BaseModel):
    """Record mention response."""

    notified: int


class RecordMentionUseCase:
    """Use case for notifying accounts mentioned in content.

    Unknown handles and self-mentions are ignored.
    """

    def __init__(
        self, account_service: AccountService, fanout_service: FanoutService
    ) -> None:
        self.account_service = account_service
        self.fanout_service = fanout_service

    async def execute(self, request: RecordMentionRequest) -> RecordMentionResponse:
        """Execute record mention flow."""
        actor_id = AccountId(UUID(request.actor_id))
        target_id = ContentId(UUID(request.target_id))

        handles = list(request.handles)
        if request.text:
            handles.extend(extract_handles(request.text))

        notified = 0
        seen: set[AccountId] = set()
        for handle in handles:
            try:
                account = await self.account_service.get_by_handle(handle)
            except NotFoundError:
                logfire.info("Mention of unknown handle ignored", handle=handle)
                continue
            if account.id in seen or account.id == actor_id:
                continue
            seen.add(account.id)

            notifications = await self.fanout_service.publish(
                MentionEvent(
                    actor_id=actor_id,
                    mentioned_id=account.id,
                    target_id=target_id,
                    target_kind=request.target_kind,
                )
            )
            notified += len(notifications)

        return RecordMentionResponse(notified=notified)
