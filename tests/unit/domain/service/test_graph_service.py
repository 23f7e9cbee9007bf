"""Unit tests for SocialGraphService."""

import asyncio
from uuid import uuid4

import pytest

from devconnect.domain.error import InvalidEdgeError, NotFoundError
from devconnect.domain.repository import (
    AccountRepository,
    FollowRepository,
    NotificationRepository,
)
from devconnect.domain.service import SocialGraphService
from devconnect.domain.value import AccountId, NotificationKind, Rank
from tests.conftest import make_account
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestFollow:
    """Tests for follow/unfollow."""

    @pytest.mark.asyncio
    async def test_follow_creates_edge_and_notifies_followee(self, unit_env):
        """A new follow stores one edge and one follow notification."""
        # Arrange
        graph_service = await unit_env.get(SocialGraphService)
        notification_repo = await unit_env.get(NotificationRepository)
        alice = await make_account(unit_env, "alice")
        bob = await make_account(unit_env, "bob")

        # Act
        created = await graph_service.follow(alice.id, bob.id)

        # Assert
        assert created is True
        assert await graph_service.is_following(alice.id, bob.id)
        assert await graph_service.follower_count(bob.id) == 1
        assert await graph_service.following_count(alice.id) == 1

        inbox = await notification_repo.list_for_recipient(bob.id)
        assert len(inbox) == 1
        assert inbox[0].kind == NotificationKind.FOLLOW
        assert inbox[0].actor_id == alice.id
        assert inbox[0].message == "started following you"

    @pytest.mark.asyncio
    async def test_follow_twice_is_idempotent(self, unit_env):
        """Following again leaves one edge and one notification."""
        graph_service = await unit_env.get(SocialGraphService)
        notification_repo = await unit_env.get(NotificationRepository)
        alice = await make_account(unit_env, "alice")
        bob = await make_account(unit_env, "bob")

        assert await graph_service.follow(alice.id, bob.id) is True
        assert await graph_service.follow(alice.id, bob.id) is False

        assert await graph_service.follower_count(bob.id) == 1
        assert len(await notification_repo.list_for_recipient(bob.id)) == 1

    @pytest.mark.asyncio
    async def test_concurrent_follows_create_one_edge(self, unit_env):
        """Racing follow calls store one edge and notify once."""
        graph_service = await unit_env.get(SocialGraphService)
        notification_repo = await unit_env.get(NotificationRepository)
        alice = await make_account(unit_env, "alice")
        bob = await make_account(unit_env, "bob")

        created = await asyncio.gather(
            *(graph_service.follow(alice.id, bob.id) for _ in range(5))
        )

        assert created.count(True) == 1
        assert await graph_service.follower_count(bob.id) == 1
        assert len(await notification_repo.list_for_recipient(bob.id)) == 1

    @pytest.mark.asyncio
    async def test_self_follow_is_rejected(self, unit_env):
        """An account cannot follow itself."""
        graph_service = await unit_env.get(SocialGraphService)
        alice = await make_account(unit_env, "alice")

        with pytest.raises(InvalidEdgeError):
            await graph_service.follow(alice.id, alice.id)

        assert await graph_service.follower_count(alice.id) == 0

    @pytest.mark.asyncio
    async def test_follow_unknown_account_raises_not_found(self, unit_env):
        """Following an account that does not exist fails."""
        graph_service = await unit_env.get(SocialGraphService)
        alice = await make_account(unit_env, "alice")

        with pytest.raises(NotFoundError):
            await graph_service.follow(alice.id, AccountId(uuid4()))

    @pytest.mark.asyncio
    async def test_unfollow_keeps_existing_notification(self, unit_env):
        """Unfollowing removes the edge but not the follow notification."""
        graph_service = await unit_env.get(SocialGraphService)
        notification_repo = await unit_env.get(NotificationRepository)
        alice = await make_account(unit_env, "alice")
        bob = await make_account(unit_env, "bob")
        await graph_service.follow(alice.id, bob.id)

        removed = await graph_service.unfollow(alice.id, bob.id)

        assert removed is True
        assert not await graph_service.is_following(alice.id, bob.id)
        assert len(await notification_repo.list_for_recipient(bob.id)) == 1

    @pytest.mark.asyncio
    async def test_unfollow_without_edge_returns_false(self, unit_env):
        """Unfollowing someone not followed is a no-op."""
        graph_service = await unit_env.get(SocialGraphService)
        alice = await make_account(unit_env, "alice")
        bob = await make_account(unit_env, "bob")

        assert await graph_service.unfollow(alice.id, bob.id) is False


class TestToggleFollow:
    """Tests for toggle_follow."""

    @pytest.mark.asyncio
    async def test_toggle_alternates_between_follow_and_unfollow(self, unit_env):
        """Each toggle flips the edge."""
        graph_service = await unit_env.get(SocialGraphService)
        alice = await make_account(unit_env, "alice")
        bob = await make_account(unit_env, "bob")

        assert await graph_service.toggle_follow(alice.id, bob.id) is True
        assert await graph_service.toggle_follow(alice.id, bob.id) is False
        assert await graph_service.toggle_follow(alice.id, bob.id) is True
        assert await graph_service.follower_count(bob.id) == 1

    @pytest.mark.asyncio
    async def test_toggle_self_is_rejected(self, unit_env):
        """Toggling a follow on oneself fails."""
        graph_service = await unit_env.get(SocialGraphService)
        alice = await make_account(unit_env, "alice")

        with pytest.raises(InvalidEdgeError):
            await graph_service.toggle_follow(alice.id, alice.id)


class TestRankRecompute:
    """Rank follows the follower count as edges change."""

    @pytest.mark.asyncio
    async def test_tenth_follower_promotes_to_bronze(self, unit_env):
        """Reaching 10 followers moves Rookie to Bronze, losing one moves back."""
        graph_service = await unit_env.get(SocialGraphService)
        account_repo = await unit_env.get(AccountRepository)
        star = await make_account(unit_env, "star")
        fans = [await make_account(unit_env, f"fan{i}") for i in range(10)]

        for fan in fans[:9]:
            await graph_service.follow(fan.id, star.id)
        assert (await account_repo.find_by_id(star.id)).rank == Rank.ROOKIE

        await graph_service.follow(fans[9].id, star.id)
        assert (await account_repo.find_by_id(star.id)).rank == Rank.BRONZE

        await graph_service.unfollow(fans[0].id, star.id)
        assert (await account_repo.find_by_id(star.id)).rank == Rank.ROOKIE


class TestListing:
    """Tests for follower/following listings."""

    @pytest.mark.asyncio
    async def test_iter_followers_streams_across_batches(self, unit_env):
        """Streaming returns every follower even when it spans several pages."""
        graph_service = await unit_env.get(SocialGraphService)
        graph_service.batch_size = 2
        star = await make_account(unit_env, "star")
        fans = [await make_account(unit_env, f"fan{i}") for i in range(5)]
        for fan in fans:
            await graph_service.follow(fan.id, star.id)

        streamed = [summary.id async for summary in graph_service.iter_followers(star.id)]

        assert sorted(streamed, key=str) == sorted((f.id for f in fans), key=str)

        # Restartable: a second pass sees the same set
        again = [summary.id async for summary in graph_service.iter_followers(star.id)]
        assert again == streamed

    @pytest.mark.asyncio
    async def test_iter_following_lists_followed_accounts(self, unit_env):
        """Streaming the other direction yields followed accounts."""
        graph_service = await unit_env.get(SocialGraphService)
        alice = await make_account(unit_env, "alice")
        bob = await make_account(unit_env, "bob", display_name="Bob")
        await graph_service.follow(alice.id, bob.id)

        following = [s async for s in graph_service.iter_following(alice.id)]

        assert len(following) == 1
        assert following[0].id == bob.id
        assert following[0].handle.root == "bob"
        assert following[0].display_name == "Bob"

    @pytest.mark.asyncio
    async def test_list_followers_pages(self, unit_env):
        """Limit and offset page through followers."""
        graph_service = await unit_env.get(SocialGraphService)
        star = await make_account(unit_env, "star")
        for i in range(3):
            fan = await make_account(unit_env, f"fan{i}")
            await graph_service.follow(fan.id, star.id)

        first = await graph_service.list_followers(star.id, limit=2, offset=0)
        second = await graph_service.list_followers(star.id, limit=2, offset=2)

        assert len(first) == 2
        assert len(second) == 1
        assert {s.id for s in first}.isdisjoint({s.id for s in second})

    @pytest.mark.asyncio
    async def test_list_followers_of_unknown_account_raises(self, unit_env):
        """Listing an unknown account's followers fails."""
        graph_service = await unit_env.get(SocialGraphService)

        with pytest.raises(NotFoundError):
            await graph_service.list_followers(AccountId(uuid4()))

    @pytest.mark.asyncio
    async def test_edges_disappear_with_deleted_account(self, unit_env):
        """Deleting an account removes edges in both directions."""
        graph_service = await unit_env.get(SocialGraphService)
        account_repo = await unit_env.get(AccountRepository)
        follow_repo = await unit_env.get(FollowRepository)
        alice = await make_account(unit_env, "alice")
        bob = await make_account(unit_env, "bob")
        await graph_service.follow(alice.id, bob.id)
        await graph_service.follow(bob.id, alice.id)

        await account_repo.delete(alice.id)

        assert await follow_repo.count_followers(bob.id) == 0
        assert await follow_repo.count_following(bob.id) == 0
