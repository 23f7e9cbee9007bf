"""Account aggregate root.

Accounts follow each other and own content. The rank tier is derived from
the follower count and is only ever written by rank computation.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from devconnect.domain.model.common import DomainModel
from devconnect.domain.value import AccountId, Handle, Rank


class Account(DomainModel):
    """Registered account."""

    id: AccountId
    handle: Handle
    display_name: Optional[str] = None
    email: Optional[str] = None  # Primary email for digest delivery
    rank: Rank = Rank.ROOKIE
    is_private: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    def matches(self, needle: str) -> bool:
        """Case-insensitive substring match on handle or display name."""
        needle = needle.lower()
        if needle in self.handle.root.lower():
            return True
        return bool(self.display_name and needle in self.display_name.lower())


class AccountSummary(DomainModel):
    """Lightweight account view used in follower/following listings."""

    id: AccountId
    handle: Handle
    display_name: Optional[str] = None
    rank: Rank = Rank.ROOKIE
