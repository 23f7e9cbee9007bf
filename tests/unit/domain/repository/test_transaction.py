"""Unit tests for the unit-of-work semantics (in-memory implementation)."""

from uuid import uuid4

import pytest

from devconnect.domain.repository import AccountRepository, TransactionManager
from devconnect.domain.value import AccountId
from devconnect.persistence.repository.inmemory import (
    InMemoryDatabase,
    InMemoryTransactionManager,
)
from tests.conftest import make_account
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class Boom(Exception):
    pass


@pytest.mark.asyncio
async def test_outer_rollback_discards_writes(unit_env):
    """Writes made inside a failed block are undone."""
    transaction_manager = await unit_env.get(TransactionManager)
    account_repo = await unit_env.get(AccountRepository)

    with pytest.raises(Boom):
        async with transaction_manager.atomic():
            await make_account(unit_env, "ghost")
            raise Boom()

    assert await account_repo.find_by_handle("ghost") is None


@pytest.mark.asyncio
async def test_failed_savepoint_keeps_outer_work(unit_env):
    """A failed inner block rolls back only its own writes."""
    transaction_manager = await unit_env.get(TransactionManager)
    account_repo = await unit_env.get(AccountRepository)

    async with transaction_manager.atomic():
        await make_account(unit_env, "kept")
        with pytest.raises(Boom):
            async with transaction_manager.atomic():
                await make_account(unit_env, "dropped")
                raise Boom()

    assert await account_repo.find_by_handle("kept") is not None
    assert await account_repo.find_by_handle("dropped") is None


@pytest.mark.asyncio
async def test_on_commit_runs_after_outermost_block(unit_env):
    """Callbacks wait for the outermost commit."""
    transaction_manager = await unit_env.get(TransactionManager)
    ran = []

    async def callback():
        ran.append("done")

    async with transaction_manager.atomic():
        async with transaction_manager.atomic():
            transaction_manager.on_commit(callback)
        assert ran == []
        assert transaction_manager.in_atomic

    assert ran == ["done"]
    assert not transaction_manager.in_atomic


@pytest.mark.asyncio
async def test_on_commit_dropped_on_rollback(unit_env):
    """Callbacks of a rolled-back transaction never run."""
    transaction_manager = await unit_env.get(TransactionManager)
    ran = []

    async def callback():
        ran.append("done")

    with pytest.raises(Boom):
        async with transaction_manager.atomic():
            transaction_manager.on_commit(callback)
            raise Boom()

    assert ran == []


@pytest.mark.asyncio
async def test_failing_callback_does_not_raise(unit_env):
    """A callback error is logged; later callbacks still run."""
    transaction_manager = await unit_env.get(TransactionManager)
    ran = []

    async def broken():
        raise RuntimeError("delivery exploded")

    async def fine():
        ran.append("fine")

    async with transaction_manager.atomic():
        transaction_manager.on_commit(broken)
        transaction_manager.on_commit(fine)

    assert ran == ["fine"]


def test_on_commit_requires_open_block():
    """Registering outside a block is a programming error."""
    transaction_manager = InMemoryTransactionManager(InMemoryDatabase())

    with pytest.raises(RuntimeError):
        transaction_manager.on_commit(lambda: None)


@pytest.mark.asyncio
async def test_delete_inside_transaction_is_atomic(unit_env):
    """A cascade delete rolled back restores every table."""
    transaction_manager = await unit_env.get(TransactionManager)
    account_repo = await unit_env.get(AccountRepository)
    alice = await make_account(unit_env, "alice")

    with pytest.raises(Boom):
        async with transaction_manager.atomic():
            assert await account_repo.delete(alice.id)
            raise Boom()

    assert await account_repo.find_by_id(alice.id) is not None
    assert not await account_repo.delete(AccountId(uuid4()))
