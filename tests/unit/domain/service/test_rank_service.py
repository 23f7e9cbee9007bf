"""Unit tests for RankService."""

from uuid import uuid4

import pytest

from devconnect.domain.error import NotFoundError
from devconnect.domain.repository import AccountRepository
from devconnect.domain.service import RankService
from devconnect.domain.value import AccountId, Rank
from tests.conftest import make_account
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


@pytest.mark.parametrize(
    "follower_count, expected",
    [
        (0, Rank.ROOKIE),
        (9, Rank.ROOKIE),
        (10, Rank.BRONZE),
        (49, Rank.BRONZE),
        (50, Rank.SILVER),
        (99, Rank.SILVER),
        (100, Rank.GOLD),
        (499, Rank.GOLD),
        (500, Rank.PLATINUM),
        (999, Rank.PLATINUM),
        (1000, Rank.DIAMOND),
        (250000, Rank.DIAMOND),
    ],
)
def test_rank_for_thresholds(follower_count, expected):
    """Tier boundaries are inclusive lower bounds."""
    assert RankService.rank_for(follower_count) == expected


@pytest.mark.asyncio
async def test_recompute_unknown_account_raises(unit_env):
    """Recomputing a missing account fails."""
    rank_service = await unit_env.get(RankService)

    with pytest.raises(NotFoundError):
        await rank_service.recompute(AccountId(uuid4()))


@pytest.mark.asyncio
async def test_recompute_corrects_stale_rank(unit_env):
    """A stored rank that disagrees with the follower count is overwritten."""
    rank_service = await unit_env.get(RankService)
    account_repo = await unit_env.get(AccountRepository)
    account = await make_account(unit_env, "stale")
    await account_repo.update_rank(account.id, Rank.GOLD)

    rank = await rank_service.recompute(account.id)

    assert rank == Rank.ROOKIE
    assert (await account_repo.find_by_id(account.id)).rank == Rank.ROOKIE
