"""Unit tests for NotificationService."""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from devconnect.domain.error import ForbiddenError, NotFoundError, ValidationError
from devconnect.domain.model import Notification, NotificationDraft
from devconnect.domain.repository import NotificationRepository
from devconnect.domain.service import NotificationService
from devconnect.domain.value import (
    AccountId,
    NotificationFilter,
    NotificationId,
    NotificationKind,
    NotificationOrigin,
)
from tests.conftest import make_account
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


async def seed_notification(
    env,
    recipient_id,
    actor_id=None,
    kind=NotificationKind.LIKE,
    message="liked your post",
    is_read=False,
    age_minutes=0,
) -> Notification:
    """Store a notification with a controlled timestamp."""
    repo = await env.get(NotificationRepository)
    return await repo.save(
        Notification(
            id=NotificationId(uuid4()),
            recipient_id=recipient_id,
            actor_id=actor_id,
            kind=kind,
            message=message,
            is_read=is_read,
            created_at=datetime.now() - timedelta(minutes=age_minutes),
        )
    )


class TestAuthorizeInsert:
    """The insertion guard."""

    def _draft(self, actor_id, kind=NotificationKind.FOLLOW):
        return NotificationDraft(
            recipient_id=AccountId(uuid4()),
            actor_id=actor_id,
            kind=kind,
            message="started following you",
        )

    def test_fanout_may_insert_anything(self):
        """The trusted fan-out path is never rejected."""
        draft = self._draft(AccountId(uuid4()), NotificationKind.MENTION)

        NotificationService.authorize_insert(NotificationOrigin.FANOUT, None, draft)

    def test_client_may_record_own_follow(self):
        """A caller may record the follow it just made."""
        me = AccountId(uuid4())

        NotificationService.authorize_insert(NotificationOrigin.CLIENT, me, self._draft(me))

    def test_client_cannot_impersonate_actor(self):
        """A caller cannot insert a notification attributed to someone else."""
        with pytest.raises(ForbiddenError):
            NotificationService.authorize_insert(
                NotificationOrigin.CLIENT,
                AccountId(uuid4()),
                self._draft(AccountId(uuid4())),
            )

    def test_client_cannot_insert_other_kinds(self):
        """Likes, comments and mentions only come from fan-out."""
        me = AccountId(uuid4())

        with pytest.raises(ForbiddenError):
            NotificationService.authorize_insert(
                NotificationOrigin.CLIENT, me, self._draft(me, NotificationKind.LIKE)
            )


class TestReadState:
    """Tests for mark_read and mark_all_read."""

    @pytest.mark.asyncio
    async def test_mark_read_flips_flag(self, unit_env):
        """The recipient can mark a notification read."""
        service = await unit_env.get(NotificationService)
        repo = await unit_env.get(NotificationRepository)
        alice = await make_account(unit_env, "alice")
        notification = await seed_notification(unit_env, alice.id)

        result = await service.mark_read(notification.id, alice.id)

        assert result.is_read is True
        assert (await repo.find_by_id(notification.id)).is_read is True
        assert await service.unread_count(alice.id) == 0

    @pytest.mark.asyncio
    async def test_mark_read_by_stranger_is_forbidden(self, unit_env):
        """Only the recipient may touch the read flag."""
        service = await unit_env.get(NotificationService)
        repo = await unit_env.get(NotificationRepository)
        alice = await make_account(unit_env, "alice")
        mallory = await make_account(unit_env, "mallory")
        notification = await seed_notification(unit_env, alice.id)

        with pytest.raises(ForbiddenError):
            await service.mark_read(notification.id, mallory.id)

        assert (await repo.find_by_id(notification.id)).is_read is False

    @pytest.mark.asyncio
    async def test_mark_read_unknown_raises_not_found(self, unit_env):
        """Unknown ids are reported as missing."""
        service = await unit_env.get(NotificationService)
        alice = await make_account(unit_env, "alice")

        with pytest.raises(NotFoundError):
            await service.mark_read(NotificationId(uuid4()), alice.id)

    @pytest.mark.asyncio
    async def test_mark_all_read_only_touches_own_inbox(self, unit_env):
        """Marking everything read counts only the caller's unread rows."""
        service = await unit_env.get(NotificationService)
        alice = await make_account(unit_env, "alice")
        bob = await make_account(unit_env, "bob")
        await seed_notification(unit_env, alice.id)
        await seed_notification(unit_env, alice.id)
        await seed_notification(unit_env, alice.id, is_read=True)
        await seed_notification(unit_env, bob.id)

        updated = await service.mark_all_read(alice.id)

        assert updated == 2
        assert await service.unread_count(alice.id) == 0
        assert await service.unread_count(bob.id) == 1


class TestDelete:
    """Tests for delete and delete_many."""

    @pytest.mark.asyncio
    async def test_delete_own_notification(self, unit_env):
        """The recipient can delete a notification."""
        service = await unit_env.get(NotificationService)
        repo = await unit_env.get(NotificationRepository)
        alice = await make_account(unit_env, "alice")
        notification = await seed_notification(unit_env, alice.id)

        await service.delete(notification.id, alice.id)

        assert await repo.find_by_id(notification.id) is None

    @pytest.mark.asyncio
    async def test_delete_foreign_notification_is_forbidden(self, unit_env):
        """Another account's notification cannot be deleted."""
        service = await unit_env.get(NotificationService)
        repo = await unit_env.get(NotificationRepository)
        alice = await make_account(unit_env, "alice")
        mallory = await make_account(unit_env, "mallory")
        notification = await seed_notification(unit_env, alice.id)

        with pytest.raises(ForbiddenError):
            await service.delete(notification.id, mallory.id)

        assert await repo.find_by_id(notification.id) is not None

    @pytest.mark.asyncio
    async def test_delete_many_removes_batch(self, unit_env):
        """Duplicated ids in a batch are deleted once."""
        service = await unit_env.get(NotificationService)
        alice = await make_account(unit_env, "alice")
        first = await seed_notification(unit_env, alice.id)
        second = await seed_notification(unit_env, alice.id)
        kept = await seed_notification(unit_env, alice.id)

        deleted = await service.delete_many([first.id, second.id, first.id], alice.id)

        assert deleted == 2
        remaining = await service.list_notifications(alice.id)
        assert [n.id for n in remaining] == [kept.id]

    @pytest.mark.asyncio
    async def test_delete_many_with_foreign_id_deletes_nothing(self, unit_env):
        """One foreign id rejects the whole batch."""
        service = await unit_env.get(NotificationService)
        alice = await make_account(unit_env, "alice")
        bob = await make_account(unit_env, "bob")
        mine = await seed_notification(unit_env, alice.id)
        theirs = await seed_notification(unit_env, bob.id)

        with pytest.raises(ForbiddenError):
            await service.delete_many([mine.id, theirs.id], alice.id)

        assert len(await service.list_notifications(alice.id)) == 1
        assert len(await service.list_notifications(bob.id)) == 1

    @pytest.mark.asyncio
    async def test_delete_many_with_unknown_id_raises(self, unit_env):
        """An unknown id rejects the batch."""
        service = await unit_env.get(NotificationService)
        alice = await make_account(unit_env, "alice")
        mine = await seed_notification(unit_env, alice.id)

        with pytest.raises(NotFoundError):
            await service.delete_many([mine.id, NotificationId(uuid4())], alice.id)

        assert len(await service.list_notifications(alice.id)) == 1

    @pytest.mark.asyncio
    async def test_delete_many_empty_batch(self, unit_env):
        """An empty batch is a no-op."""
        service = await unit_env.get(NotificationService)
        alice = await make_account(unit_env, "alice")

        assert await service.delete_many([], alice.id) == 0


class TestListing:
    """Tests for list_notifications and iter_notifications."""

    @pytest.mark.asyncio
    async def test_newest_first(self, unit_env):
        """The inbox is reverse-chronological."""
        service = await unit_env.get(NotificationService)
        alice = await make_account(unit_env, "alice")
        old = await seed_notification(unit_env, alice.id, age_minutes=30)
        new = await seed_notification(unit_env, alice.id, age_minutes=1)
        middle = await seed_notification(unit_env, alice.id, age_minutes=10)

        inbox = await service.list_notifications(alice.id)

        assert [n.id for n in inbox] == [new.id, middle.id, old.id]

    @pytest.mark.asyncio
    async def test_unread_filter(self, unit_env):
        """The unread filter hides read rows."""
        service = await unit_env.get(NotificationService)
        alice = await make_account(unit_env, "alice")
        unread = await seed_notification(unit_env, alice.id)
        await seed_notification(unit_env, alice.id, is_read=True)

        inbox = await service.list_notifications(alice.id, NotificationFilter.UNREAD)

        assert [n.id for n in inbox] == [unread.id]

    @pytest.mark.asyncio
    async def test_unread_filter_accepts_string_value(self, unit_env):
        """The filter given as "unread" behaves like the enum member."""
        service = await unit_env.get(NotificationService)
        alice = await make_account(unit_env, "alice")
        await seed_notification(unit_env, alice.id)
        await seed_notification(unit_env, alice.id, age_minutes=5)

        before = await service.list_notifications(alice.id, "unread")
        await service.mark_all_read(alice.id)
        after = await service.list_notifications(alice.id, "unread")
        everything = await service.list_notifications(alice.id, "all")

        assert len(before) == 2
        assert after == []
        assert len(everything) == 2

    @pytest.mark.asyncio
    async def test_unknown_filter_is_rejected(self, unit_env):
        """A filter outside all/unread is a validation error."""
        service = await unit_env.get(NotificationService)
        alice = await make_account(unit_env, "alice")

        with pytest.raises(ValidationError):
            await service.list_notifications(alice.id, "starred")

    @pytest.mark.asyncio
    async def test_search_matches_message_and_actor(self, unit_env):
        """Search covers the message and the actor's handle and name."""
        service = await unit_env.get(NotificationService)
        alice = await make_account(unit_env, "alice")
        grace = await make_account(unit_env, "ghopper", display_name="Grace Hopper")
        linus = await make_account(unit_env, "linus")
        by_grace = await seed_notification(unit_env, alice.id, actor_id=grace.id)
        mention = await seed_notification(
            unit_env,
            alice.id,
            actor_id=linus.id,
            kind=NotificationKind.MENTION,
            message="mentioned you in a comment",
        )

        by_name = await service.list_notifications(alice.id, search="  grace ")
        by_handle = await service.list_notifications(alice.id, search="GHOP")
        by_message = await service.list_notifications(alice.id, search="mentioned")

        assert [n.id for n in by_name] == [by_grace.id]
        assert [n.id for n in by_handle] == [by_grace.id]
        assert [n.id for n in by_message] == [mention.id]

    @pytest.mark.asyncio
    async def test_blank_search_lists_everything(self, unit_env):
        """A whitespace-only search is ignored."""
        service = await unit_env.get(NotificationService)
        alice = await make_account(unit_env, "alice")
        await seed_notification(unit_env, alice.id)
        await seed_notification(unit_env, alice.id)

        assert len(await service.list_notifications(alice.id, search="   ")) == 2

    @pytest.mark.asyncio
    async def test_iter_notifications_spans_batches(self, unit_env):
        """Streaming returns the whole inbox in order."""
        service = await unit_env.get(NotificationService)
        service.batch_size = 2
        alice = await make_account(unit_env, "alice")
        seeded = [
            await seed_notification(unit_env, alice.id, age_minutes=i) for i in range(5)
        ]

        streamed = [n.id async for n in service.iter_notifications(alice.id)]

        assert streamed == [n.id for n in seeded]
