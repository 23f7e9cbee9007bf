"""Unit-of-work interface.

Services group the writes of one operation in ``atomic()``. The outermost
block is a transaction; inner blocks are savepoints, so a failed inner
block can be retried without losing the outer work. Callbacks registered
with ``on_commit`` run once the outermost block has committed and are
dropped if it rolls back.

Open blocks are tracked per asyncio task, so concurrent tasks sharing a
manager each get their own outermost transaction.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import AsyncIterator, Awaitable, Callable, Optional

import logfire

CommitCallback = Callable[[], Awaitable[object]]


@dataclass
class _Block:
    manager: "TransactionManager"
    callbacks: list[CommitCallback] = field(default_factory=list)


_open_blocks: ContextVar[tuple[_Block, ...]] = ContextVar(
    "open_transaction_blocks", default=()
)


class TransactionManager(ABC):
    """Transaction boundary shared by the repositories of one request."""

    def _current_block(self) -> Optional[_Block]:
        for block in _open_blocks.get():
            if block.manager is self:
                return block
        return None

    @property
    def in_atomic(self) -> bool:
        """Whether the current task has an atomic block open."""
        return self._current_block() is not None

    @abstractmethod
    def _transaction(self) -> AbstractAsyncContextManager[None]:
        """Open the outermost transaction."""
        pass

    @abstractmethod
    def _savepoint(self) -> AbstractAsyncContextManager[None]:
        """Open a savepoint inside the current transaction."""
        pass

    @asynccontextmanager
    async def atomic(self) -> AsyncIterator[None]:
        """Open a transaction, or a savepoint when one is already open."""
        if self._current_block() is not None:
            async with self._savepoint():
                yield
            return

        block = _Block(manager=self)
        token = _open_blocks.set(_open_blocks.get() + (block,))
        try:
            async with self._transaction():
                yield
        finally:
            _open_blocks.reset(token)

        await self._run_callbacks(block.callbacks)

    def on_commit(self, callback: CommitCallback) -> None:
        """Run ``callback`` after the outermost block commits.

        Raises:
            RuntimeError: If no atomic block is open
        """
        block = self._current_block()
        if block is None:
            raise RuntimeError("on_commit requires an open atomic block")
        block.callbacks.append(callback)

    async def _run_callbacks(self, callbacks: list[CommitCallback]) -> None:
        for callback in callbacks:
            try:
                await callback()
            except Exception as e:
                # The transaction is already committed
                logfire.error("Post-commit callback failed", error=str(e))
