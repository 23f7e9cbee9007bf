"""In-memory account repository for testing."""

from typing import Optional, Sequence

from devconnect.domain.error import ConflictError
from devconnect.domain.model import Account
from devconnect.domain.repository import AccountRepository
from devconnect.domain.value import AccountId, Rank

from .database import InMemoryDatabase


class InMemoryAccountRepository(AccountRepository):
    """In-memory implementation of AccountRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self.db = database

    async def find_by_id(self, account_id: AccountId) -> Optional[Account]:
        """Find an account by ID."""
        return self.db.accounts.get(account_id)

    async def find_by_handle(self, handle: str) -> Optional[Account]:
        """Find an account by handle (case-insensitive)."""
        for account in self.db.accounts.values():
            if account.handle.root.lower() == handle.lower():
                return account
        return None

    async def find_by_ids(self, account_ids: Sequence[AccountId]) -> list[Account]:
        """Find several accounts at once."""
        return [self.db.accounts[i] for i in account_ids if i in self.db.accounts]

    async def save(self, account: Account) -> Account:
        """Create an account.

        Raises:
            ConflictError: If the id or handle is already taken
        """
        if account.id in self.db.accounts or await self.find_by_handle(
            account.handle.root
        ):
            raise ConflictError("Account", account.handle.root)
        self.db.accounts[account.id] = account
        return account

    async def update(self, account: Account) -> Account:
        """Persist profile fields of an existing account."""
        current = self.db.accounts.get(account.id)
        if current:
            self.db.accounts[account.id] = current.model_copy(
                update={
                    "display_name": account.display_name,
                    "email": account.email,
                    "is_private": account.is_private,
                    "updated_at": account.updated_at,
                }
            )
        return account

    async def update_rank(self, account_id: AccountId, rank: Rank) -> None:
        """Overwrite the stored rank tier."""
        current = self.db.accounts.get(account_id)
        if current:
            self.db.accounts[account_id] = current.model_copy(update={"rank": rank})

    async def delete(self, account_id: AccountId) -> bool:
        """Delete an account and cascade like the foreign keys do."""
        if self.db.accounts.pop(account_id, None) is None:
            return False

        self.db.follow_edges = {
            k: e
            for k, e in self.db.follow_edges.items()
            if account_id not in (e.follower_id, e.followee_id)
        }
        self.db.marks = {
            k: m for k, m in self.db.marks.items() if m.actor_id != account_id
        }
        self.db.votes = {
            k: v for k, v in self.db.votes.items() if v.actor_id != account_id
        }
        owned = {k for k, c in self.db.content.items() if c.owner_id == account_id}
        self.db.content = {k: c for k, c in self.db.content.items() if k not in owned}
        self.db.views = {
            k: v
            for k, v in self.db.views.items()
            if v.viewer_id != account_id and v.content_id not in owned
        }
        notifications = {}
        for key, notification in self.db.notifications.items():
            if notification.recipient_id == account_id:
                continue
            if notification.actor_id == account_id:
                notification = notification.model_copy(update={"actor_id": None})
            notifications[key] = notification
        self.db.notifications = notifications
        self.db.preferences.pop(account_id, None)
        return True
