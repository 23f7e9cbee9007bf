"""Unit tests for PreferenceService."""

import pytest

from devconnect.domain.error import ForbiddenError
from devconnect.domain.service import PreferenceService
from devconnect.domain.value import NotificationKind
from tests.conftest import make_account
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


@pytest.mark.asyncio
async def test_defaults_when_nothing_stored(unit_env):
    """A fresh account gets every delivery switched on."""
    service = await unit_env.get(PreferenceService)
    alice = await make_account(unit_env, "alice")

    preferences = await service.get_preferences(alice.id)

    assert preferences.email_enabled is True
    assert all(
        [preferences.likes, preferences.comments, preferences.follows, preferences.mentions]
    )


@pytest.mark.asyncio
async def test_partial_update_keeps_other_flags(unit_env):
    """Omitted flags keep their previous value."""
    service = await unit_env.get(PreferenceService)
    alice = await make_account(unit_env, "alice")

    await service.set_preferences(alice.id, alice.id, likes=False)
    updated = await service.set_preferences(alice.id, alice.id, mentions=False)

    assert updated.likes is False
    assert updated.mentions is False
    assert updated.comments is True
    assert not await service.allows_email(alice.id, NotificationKind.LIKE)
    assert await service.allows_email(alice.id, NotificationKind.FOLLOW)


@pytest.mark.asyncio
async def test_update_by_other_account_is_forbidden(unit_env):
    """Only the owner may change preferences."""
    service = await unit_env.get(PreferenceService)
    alice = await make_account(unit_env, "alice")
    mallory = await make_account(unit_env, "mallory")

    with pytest.raises(ForbiddenError):
        await service.set_preferences(alice.id, mallory.id, email_enabled=False)

    assert (await service.get_preferences(alice.id)).email_enabled is True
