"""Unit tests for view tracking (ViewSession and ViewService)."""

import asyncio
from uuid import uuid4

import pytest

from devconnect.domain.error import NotFoundError
from devconnect.domain.repository import ContentRepository
from devconnect.domain.service import ViewService, ViewSession
from devconnect.domain.value import ContentId, TargetKind, ViewSessionId, ViewState
from tests.conftest import make_account, make_content
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()

THRESHOLD = 0.05


class FakeClock:
    """Monotonic clock advanced by hand."""

    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


class RecordingRecorder:
    """Recorder that counts how often it was called."""

    def __init__(self, result: bool = True) -> None:
        self.calls = 0
        self.result = result

    async def __call__(self) -> bool:
        self.calls += 1
        return self.result


class TestViewSession:
    """The playback state machine."""

    @pytest.mark.asyncio
    async def test_uninterrupted_playback_counts_once(self):
        """Playing through the threshold reports exactly one view."""
        recorder = RecordingRecorder()
        session = ViewSession(recorder, threshold_seconds=THRESHOLD)

        session.play()
        assert session.state == ViewState.PENDING
        await session.wait()

        assert session.state == ViewState.COUNTED
        assert session.counted is True
        assert recorder.calls == 1

        # Replaying a counted session does nothing
        session.play()
        await session.wait()
        assert recorder.calls == 1

    @pytest.mark.asyncio
    async def test_pause_play_cycles_after_count_do_not_recount(self):
        """Toggling playback after the view counted reports nothing new."""
        recorder = RecordingRecorder()
        session = ViewSession(recorder, threshold_seconds=THRESHOLD)
        session.play()
        await session.wait()

        for _ in range(3):
            session.pause()
            session.play()
            await session.wait()
            await asyncio.sleep(THRESHOLD * 1.5)

        assert session.state == ViewState.COUNTED
        assert recorder.calls == 1

    @pytest.mark.asyncio
    async def test_repeated_play_starts_one_timer(self):
        """Play while pending is idempotent."""
        recorder = RecordingRecorder()
        session = ViewSession(recorder, threshold_seconds=THRESHOLD)

        session.play()
        first_timer = session._timer
        session.play()
        session.play()

        assert session._timer is first_timer
        await session.wait()
        assert recorder.calls == 1

    @pytest.mark.asyncio
    async def test_pause_before_threshold_discards_timer(self):
        """Pausing early resets the session without a report."""
        recorder = RecordingRecorder()
        session = ViewSession(recorder, threshold_seconds=THRESHOLD)

        session.play()
        await asyncio.sleep(THRESHOLD / 5)
        session.pause()
        await asyncio.sleep(THRESHOLD * 2)

        assert session.state == ViewState.IDLE
        assert recorder.calls == 0

    @pytest.mark.asyncio
    async def test_resume_after_pause_restarts_from_zero(self):
        """Resumed playback needs the full threshold again."""
        recorder = RecordingRecorder()
        session = ViewSession(recorder, threshold_seconds=THRESHOLD)

        session.play()
        await asyncio.sleep(THRESHOLD * 0.8)
        session.pause()
        session.play()
        await asyncio.sleep(THRESHOLD * 0.5)
        assert recorder.calls == 0

        await session.wait()
        assert recorder.calls == 1

    @pytest.mark.asyncio
    async def test_stop_ends_session(self):
        """A stopped session ignores later play calls."""
        recorder = RecordingRecorder()
        session = ViewSession(recorder, threshold_seconds=THRESHOLD)

        session.play()
        session.stop()
        session.play()
        await asyncio.sleep(THRESHOLD * 2)

        assert session.state == ViewState.IDLE
        assert recorder.calls == 0

    @pytest.mark.asyncio
    async def test_early_timer_is_not_counted(self):
        """A timer that fires before the clock shows the threshold is ignored."""
        recorder = RecordingRecorder()
        clock = FakeClock()
        session = ViewSession(recorder, threshold_seconds=THRESHOLD, clock=clock)

        session.play()
        await session.wait()

        assert session.state == ViewState.IDLE
        assert recorder.calls == 0

    @pytest.mark.asyncio
    async def test_failed_report_is_not_counted(self):
        """A recorder error leaves the session uncounted without raising."""

        async def failing_recorder() -> bool:
            raise RuntimeError("network down")

        session = ViewSession(failing_recorder, threshold_seconds=THRESHOLD)

        session.play()
        await session.wait()

        assert session.state == ViewState.COUNTED
        assert session.counted is False


class TestRecordView:
    """Tests for ViewService.record_view_threshold_reached."""

    @pytest.mark.asyncio
    async def test_view_increments_counter(self, unit_env):
        """A new session's view is counted."""
        view_service = await unit_env.get(ViewService)
        content_repo = await unit_env.get(ContentRepository)
        owner = await make_account(unit_env, "owner")
        viewer = await make_account(unit_env, "viewer")
        reel = await make_content(unit_env, owner.id, TargetKind.REEL)

        counted = await view_service.record_view_threshold_reached(
            viewer.id, reel.id, ViewSessionId(uuid4())
        )

        assert counted is True
        assert (await content_repo.find_by_id(reel.id)).view_count == 1

    @pytest.mark.asyncio
    async def test_same_session_counts_once(self, unit_env):
        """A second report from the same session is ignored."""
        view_service = await unit_env.get(ViewService)
        content_repo = await unit_env.get(ContentRepository)
        owner = await make_account(unit_env, "owner")
        viewer = await make_account(unit_env, "viewer")
        reel = await make_content(unit_env, owner.id, TargetKind.REEL)
        session_id = ViewSessionId(uuid4())

        assert await view_service.record_view_threshold_reached(
            viewer.id, reel.id, session_id
        )
        assert not await view_service.record_view_threshold_reached(
            viewer.id, reel.id, session_id
        )

        assert (await content_repo.find_by_id(reel.id)).view_count == 1

    @pytest.mark.asyncio
    async def test_new_session_counts_again(self, unit_env):
        """Watching again in a later sitting is another view."""
        view_service = await unit_env.get(ViewService)
        content_repo = await unit_env.get(ContentRepository)
        owner = await make_account(unit_env, "owner")
        viewer = await make_account(unit_env, "viewer")
        reel = await make_content(unit_env, owner.id, TargetKind.REEL)

        for _ in range(2):
            await view_service.record_view_threshold_reached(
                viewer.id, reel.id, ViewSessionId(uuid4())
            )

        assert (await content_repo.find_by_id(reel.id)).view_count == 2

    @pytest.mark.asyncio
    async def test_owner_views_are_not_counted(self, unit_env):
        """Watching your own item does not count."""
        view_service = await unit_env.get(ViewService)
        content_repo = await unit_env.get(ContentRepository)
        owner = await make_account(unit_env, "owner")
        reel = await make_content(unit_env, owner.id, TargetKind.REEL)

        counted = await view_service.record_view_threshold_reached(
            owner.id, reel.id, ViewSessionId(uuid4())
        )

        assert counted is False
        assert (await content_repo.find_by_id(reel.id)).view_count == 0

    @pytest.mark.asyncio
    async def test_unknown_content_raises(self, unit_env):
        """Views on unregistered items are rejected."""
        view_service = await unit_env.get(ViewService)
        viewer = await make_account(unit_env, "viewer")

        with pytest.raises(NotFoundError):
            await view_service.record_view_threshold_reached(
                viewer.id, ContentId(uuid4()), ViewSessionId(uuid4())
            )

    @pytest.mark.asyncio
    async def test_open_session_reports_through_service(self, unit_env):
        """A session opened by the service records into the counter."""
        view_service = await unit_env.get(ViewService)
        view_service.threshold_seconds = THRESHOLD
        content_repo = await unit_env.get(ContentRepository)
        owner = await make_account(unit_env, "owner")
        viewer = await make_account(unit_env, "viewer")
        reel = await make_content(unit_env, owner.id, TargetKind.REEL)

        session = view_service.open_session(viewer.id, reel.id)
        session.play()
        await session.wait()

        assert session.counted is True
        assert (await content_repo.find_by_id(reel.id)).view_count == 1
