"""Unit tests for FanoutService."""

from uuid import uuid4

import pytest

from devconnect.domain.error import NotFoundError
from devconnect.domain.event import CommentEvent, FollowEvent, LikeEvent, MentionEvent
from devconnect.domain.repository import NotificationRepository, TransactionManager
from devconnect.domain.service import DeliveryChannel, DeliveryPool, FanoutService
from devconnect.domain.value import (
    AccountId,
    ContentId,
    NotificationKind,
    NotificationTargetType,
    TargetKind,
)
from tests.conftest import make_account, make_content
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestDerive:
    """The fan-out rules, without storage."""

    def test_like_notifies_owner(self):
        """A like on someone else's item notifies its owner."""
        actor, owner = AccountId(uuid4()), AccountId(uuid4())
        target = ContentId(uuid4())

        drafts = FanoutService.derive(
            LikeEvent(actor_id=actor, target_id=target, target_kind=TargetKind.REEL),
            owner_id=owner,
        )

        assert len(drafts) == 1
        assert drafts[0].recipient_id == owner
        assert drafts[0].actor_id == actor
        assert drafts[0].kind == NotificationKind.LIKE
        assert drafts[0].target_type == NotificationTargetType.REEL
        assert drafts[0].message == "liked your reel"

    def test_comment_notifies_owner(self):
        """A comment notifies the owner of the commented item."""
        actor, owner = AccountId(uuid4()), AccountId(uuid4())

        drafts = FanoutService.derive(
            CommentEvent(actor_id=actor, target_id=ContentId(uuid4())),
            owner_id=owner,
        )

        assert [d.kind for d in drafts] == [NotificationKind.COMMENT]
        assert drafts[0].message == "commented on your post"

    def test_follow_links_to_profile(self):
        """A follow notification points at the followee's profile."""
        actor, followee = AccountId(uuid4()), AccountId(uuid4())

        drafts = FanoutService.derive(FollowEvent(actor_id=actor, followee_id=followee))

        assert drafts[0].recipient_id == followee
        assert drafts[0].target_type == NotificationTargetType.PROFILE
        assert drafts[0].target_id == followee
        assert drafts[0].message == "started following you"

    def test_mention_notifies_mentioned_account(self):
        """A mention notifies the mentioned account, not the owner."""
        actor, mentioned = AccountId(uuid4()), AccountId(uuid4())

        drafts = FanoutService.derive(
            MentionEvent(
                actor_id=actor,
                mentioned_id=mentioned,
                target_id=ContentId(uuid4()),
                target_kind=TargetKind.COMMENT,
            )
        )

        assert drafts[0].recipient_id == mentioned
        assert drafts[0].kind == NotificationKind.MENTION
        assert drafts[0].message == "mentioned you in a comment"

    @pytest.mark.parametrize(
        "event_factory",
        [
            lambda me: LikeEvent(
                actor_id=me, target_id=ContentId(uuid4()), target_kind=TargetKind.POST
            ),
            lambda me: CommentEvent(actor_id=me, target_id=ContentId(uuid4())),
            lambda me: FollowEvent(actor_id=me, followee_id=me),
            lambda me: MentionEvent(
                actor_id=me,
                mentioned_id=me,
                target_id=ContentId(uuid4()),
                target_kind=TargetKind.POST,
            ),
        ],
    )
    def test_self_actions_are_suppressed(self, event_factory):
        """Nobody is notified about their own action."""
        me = AccountId(uuid4())

        assert FanoutService.derive(event_factory(me), owner_id=me) == []

    def test_unsupported_event_raises(self):
        """Unknown event types are a programming error."""
        with pytest.raises(TypeError):
            FanoutService.derive(object())


class TestPublish:
    """Storage and digest hand-off."""

    @pytest.mark.asyncio
    async def test_publish_stores_and_queues_digest(self, unit_env):
        """A published comment lands in the inbox and is handed to delivery."""
        # Arrange
        fanout = await unit_env.get(FanoutService)
        notification_repo = await unit_env.get(NotificationRepository)
        channel = await unit_env.get(DeliveryChannel)
        pool = await unit_env.get(DeliveryPool)
        owner = await make_account(unit_env, "owner")
        commenter = await make_account(unit_env, "commenter", display_name="Commenter")
        post = await make_content(unit_env, owner.id)

        # Act
        created = await fanout.publish(
            CommentEvent(actor_id=commenter.id, target_id=post.id)
        )
        await pool.drain()

        # Assert
        assert len(created) == 1
        assert await notification_repo.find_by_id(created[0].id) == created[0]
        assert len(channel.sent) == 1
        assert channel.sent[0].email == "owner@example.com"
        assert channel.sent[0].body.startswith("Commenter commented on your post")

    @pytest.mark.asyncio
    async def test_publish_for_unknown_content_raises(self, unit_env):
        """Owner resolution fails for unregistered content."""
        fanout = await unit_env.get(FanoutService)
        actor = await make_account(unit_env, "actor")

        with pytest.raises(NotFoundError):
            await fanout.publish(
                LikeEvent(
                    actor_id=actor.id,
                    target_id=ContentId(uuid4()),
                    target_kind=TargetKind.POST,
                )
            )

    @pytest.mark.asyncio
    async def test_rolled_back_publish_sends_nothing(self, unit_env):
        """Rows and digests are discarded when the surrounding write fails."""
        fanout = await unit_env.get(FanoutService)
        transaction_manager = await unit_env.get(TransactionManager)
        notification_repo = await unit_env.get(NotificationRepository)
        channel = await unit_env.get(DeliveryChannel)
        pool = await unit_env.get(DeliveryPool)
        owner = await make_account(unit_env, "owner")
        fan = await make_account(unit_env, "fan")
        post = await make_content(unit_env, owner.id)

        with pytest.raises(RuntimeError):
            async with transaction_manager.atomic():
                await fanout.publish(
                    LikeEvent(
                        actor_id=fan.id, target_id=post.id, target_kind=TargetKind.POST
                    )
                )
                raise RuntimeError("engagement write failed")
        await pool.drain()

        assert await notification_repo.list_for_recipient(owner.id) == []
        assert channel.sent == []
