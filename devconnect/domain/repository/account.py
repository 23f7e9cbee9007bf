"""Account repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from devconnect.domain.model import Account
from devconnect.domain.value import AccountId, Rank


class AccountRepository(ABC):
    """Repository for Account aggregate.

    Defines the contract for account persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, account_id: AccountId) -> Optional[Account]:
        """Find an account by ID.

        Args:
            account_id: The account's unique identifier

        Returns:
            The account if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_handle(self, handle: str) -> Optional[Account]:
        """Find an account by handle (case-insensitive).

        Args:
            handle: The account handle

        Returns:
            The account if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, account_ids: Sequence[AccountId]) -> list[Account]:
        """Find several accounts at once. Missing ids are skipped."""
        pass

    @abstractmethod
    async def save(self, account: Account) -> Account:
        """Create an account.

        Args:
            account: The account to save

        Returns:
            The saved account

        Raises:
            ConflictError: If the handle is already taken
        """
        pass

    @abstractmethod
    async def update(self, account: Account) -> Account:
        """Persist profile fields of an existing account.

        Args:
            account: The account with updated fields

        Returns:
            The updated account
        """
        pass

    @abstractmethod
    async def update_rank(self, account_id: AccountId, rank: Rank) -> None:
        """Overwrite the stored rank tier of an account."""
        pass

    @abstractmethod
    async def delete(self, account_id: AccountId) -> bool:
        """Delete an account.

        Every follow edge, mark, vote, notification and preference row
        referencing the account is removed with it.

        Args:
            account_id: The account to delete

        Returns:
            True if the account existed
        """
        pass
