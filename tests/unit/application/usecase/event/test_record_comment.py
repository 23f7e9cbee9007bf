"""Unit tests for RecordCommentUseCase."""

from uuid import uuid4

import pytest

from devconnect.application.usecase.event import (
    RecordCommentRequest,
    RecordCommentUseCase,
)
from devconnect.domain.error import NotFoundError
from devconnect.domain.repository import ContentRepository, NotificationRepository
from devconnect.domain.value import ContentId, NotificationKind, TargetKind
from tests.conftest import make_account, make_content
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestRecordCommentUseCase:
    """Tests for RecordCommentUseCase."""

    @pytest.mark.asyncio
    async def test_comment_notifies_parent_owner(self, unit_env):
        """The owner of the commented item is notified."""
        # Arrange
        use_case = await unit_env.get(RecordCommentUseCase)
        notification_repo = await unit_env.get(NotificationRepository)
        owner = await make_account(unit_env, "owner")
        commenter = await make_account(unit_env, "commenter")
        question = await make_content(unit_env, owner.id, TargetKind.QUESTION)

        # Act
        response = await use_case.execute(
            RecordCommentRequest(
                actor_id=str(commenter.id),
                target_id=str(question.id),
                target_kind=TargetKind.QUESTION,
            )
        )

        # Assert
        assert response.notified == 1
        inbox = await notification_repo.list_for_recipient(owner.id)
        assert inbox[0].kind == NotificationKind.COMMENT
        assert inbox[0].message == "commented on your question"

    @pytest.mark.asyncio
    async def test_comment_id_registers_comment(self, unit_env):
        """A comment id makes the comment itself a likeable item."""
        use_case = await unit_env.get(RecordCommentUseCase)
        content_repo = await unit_env.get(ContentRepository)
        owner = await make_account(unit_env, "owner")
        commenter = await make_account(unit_env, "commenter")
        post = await make_content(unit_env, owner.id)
        comment_id = ContentId(uuid4())

        await use_case.execute(
            RecordCommentRequest(
                actor_id=str(commenter.id),
                target_id=str(post.id),
                comment_id=str(comment_id),
            )
        )

        comment = await content_repo.find_by_id(comment_id)
        assert comment.kind == TargetKind.COMMENT
        assert comment.owner_id == commenter.id

    @pytest.mark.asyncio
    async def test_own_item_comment_is_silent(self, unit_env):
        """Commenting on your own item notifies nobody."""
        use_case = await unit_env.get(RecordCommentUseCase)
        owner = await make_account(unit_env, "owner")
        post = await make_content(unit_env, owner.id)

        response = await use_case.execute(
            RecordCommentRequest(actor_id=str(owner.id), target_id=str(post.id))
        )

        assert response.notified == 0

    @pytest.mark.asyncio
    async def test_unknown_parent_raises(self, unit_env):
        """Comments on unregistered items are rejected."""
        use_case = await unit_env.get(RecordCommentUseCase)
        commenter = await make_account(unit_env, "commenter")

        with pytest.raises(NotFoundError):
            await use_case.execute(
                RecordCommentRequest(
                    actor_id=str(commenter.id), target_id=str(uuid4())
                )
            )

    @pytest.mark.asyncio
    async def test_failed_fanout_discards_comment_registration(self, unit_env):
        """A comment is not registered when its fan-out fails."""
        use_case = await unit_env.get(RecordCommentUseCase)
        content_repo = await unit_env.get(ContentRepository)
        commenter = await make_account(unit_env, "commenter")
        comment_id = ContentId(uuid4())

        with pytest.raises(NotFoundError):
            await use_case.execute(
                RecordCommentRequest(
                    actor_id=str(commenter.id),
                    target_id=str(uuid4()),
                    comment_id=str(comment_id),
                )
            )

        assert await content_repo.find_by_id(comment_id) is None
