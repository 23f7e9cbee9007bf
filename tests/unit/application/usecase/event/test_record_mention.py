"""Unit tests for RecordMentionUseCase."""

import pytest

from devconnect.application.usecase.event import (
    RecordMentionRequest,
    RecordMentionUseCase,
    extract_handles,
)
from devconnect.domain.repository import NotificationRepository
from devconnect.domain.value import NotificationKind, TargetKind
from tests.conftest import make_account, make_content
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestExtractHandles:
    """Tests for extract_handles."""

    def test_finds_handles_in_order(self):
        """Mentions come back in order of appearance."""
        assert extract_handles("thanks @ada and @grace.hopper!") == [
            "ada",
            "grace.hopper",
        ]

    def test_deduplicates_case_insensitively(self):
        """The same handle mentioned twice is reported once."""
        assert extract_handles("@Ada meet @ada") == ["Ada"]

    def test_ignores_email_addresses(self):
        """An @ inside a word is not a mention."""
        assert extract_handles("mail me at ada@example.com") == []

    def test_trailing_punctuation_is_stripped(self):
        """Sentence punctuation is not part of the handle."""
        assert extract_handles("ping @linus.") == ["linus"]


class TestRecordMentionUseCase:
    """Tests for RecordMentionUseCase."""

    @pytest.mark.asyncio
    async def test_notifies_each_mentioned_account_once(self, unit_env):
        """Handles listed and found in text are merged."""
        # Arrange
        use_case = await unit_env.get(RecordMentionUseCase)
        notification_repo = await unit_env.get(NotificationRepository)
        author = await make_account(unit_env, "author")
        ada = await make_account(unit_env, "ada")
        grace = await make_account(unit_env, "grace")
        post = await make_content(unit_env, author.id)

        # Act
        response = await use_case.execute(
            RecordMentionRequest(
                actor_id=str(author.id),
                target_id=str(post.id),
                target_kind=TargetKind.POST,
                handles=["ada"],
                text="great work @ADA and @grace",
            )
        )

        # Assert
        assert response.notified == 2
        for account in (ada, grace):
            inbox = await notification_repo.list_for_recipient(account.id)
            assert [n.kind for n in inbox] == [NotificationKind.MENTION]
            assert inbox[0].message == "mentioned you in a post"

    @pytest.mark.asyncio
    async def test_unknown_and_self_mentions_are_ignored(self, unit_env):
        """Mentioning yourself or a missing handle notifies nobody."""
        use_case = await unit_env.get(RecordMentionUseCase)
        notification_repo = await unit_env.get(NotificationRepository)
        author = await make_account(unit_env, "author")
        post = await make_content(unit_env, author.id)

        response = await use_case.execute(
            RecordMentionRequest(
                actor_id=str(author.id),
                target_id=str(post.id),
                target_kind=TargetKind.POST,
                text="note to @author and @nobody",
            )
        )

        assert response.notified == 0
        assert await notification_repo.list_for_recipient(author.id) == []
