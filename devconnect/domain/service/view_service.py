"""View tracking.

A view counts when one viewer watches one item for an uninterrupted
threshold (3 seconds by default) within a playback session. ``ViewSession``
runs the timer on the playing side; ``ViewService`` records the view once
the threshold is reached and enforces one count per session.
"""

import asyncio
import time
from datetime import datetime
from functools import partial
from typing import Awaitable, Callable, Optional
from uuid import uuid4

import logfire

from devconnect.domain.error import ConflictError, NotFoundError
from devconnect.domain.model import ViewRecord
from devconnect.domain.repository import (
    ContentRepository,
    TransactionManager,
    ViewRepository,
)
from devconnect.domain.value import AccountId, ContentId, ViewSessionId, ViewState

from .base import Service

ViewRecorder = Callable[[], Awaitable[bool]]


class ViewSession:
    """Playback state machine for one viewer on one item.

    ``play`` starts the pending timer; ``pause`` and ``stop`` cancel it.
    Repeated ``play`` calls while pending never start a second timer. Once
    the threshold is reached the view is reported exactly once and the
    session is done, whether or not the report succeeded.

    State Flow:
        IDLE -> PENDING (play) -> COUNTED (threshold reached)
        PENDING -> IDLE (pause)
    """

    def __init__(
        self,
        recorder: ViewRecorder,
        threshold_seconds: float = 3.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize a playback session.

        Args:
            recorder: Reports the view; returns whether it was counted
            threshold_seconds: Uninterrupted playback needed for a view
            clock: Monotonic clock used to verify the elapsed time
        """
        self.recorder = recorder
        self.threshold_seconds = threshold_seconds
        self.clock = clock
        self.state = ViewState.IDLE
        self.counted = False
        self._stopped = False
        self._timer: Optional[asyncio.Task] = None
        self._started_at: Optional[float] = None

    def play(self) -> None:
        """Start (or resume) playback."""
        if self._stopped or self.state is not ViewState.IDLE:
            return
        self.state = ViewState.PENDING
        self._started_at = self.clock()
        self._timer = asyncio.get_running_loop().create_task(self._run_timer())

    def pause(self) -> None:
        """Pause playback; an unfinished timer is discarded."""
        self._cancel_timer()

    def stop(self) -> None:
        """End playback for good (item unmounted or finished)."""
        self._cancel_timer()
        self._stopped = True

    def _cancel_timer(self) -> None:
        if self.state is not ViewState.PENDING:
            return
        if self._timer:
            self._timer.cancel()
        self._timer = None
        self._started_at = None
        self.state = ViewState.IDLE

    async def _run_timer(self) -> None:
        await asyncio.sleep(self.threshold_seconds)

        elapsed = self.clock() - (self._started_at or 0.0)
        if elapsed < self.threshold_seconds:
            logfire.warn(
                "View timer fired early, not counted",
                elapsed=elapsed,
                threshold_seconds=self.threshold_seconds,
            )
            self.state = ViewState.IDLE
            self._timer = None
            return

        # Past the threshold: pause/stop no longer cancel the report
        self.state = ViewState.COUNTED
        try:
            self.counted = await self.recorder()
        except Exception as e:
            logfire.error("Failed to record view", error=str(e))
            self.counted = False

    async def wait(self) -> None:
        """Wait for a running timer (and its report) to finish."""
        timer = self._timer
        if timer is None:
            return
        try:
            await timer
        except asyncio.CancelledError:
            if not timer.cancelled():
                raise


class ViewService(Service):
    """Counts views on content items."""

    def __init__(
        self,
        content_repository: ContentRepository,
        view_repository: ViewRepository,
        transaction_manager: TransactionManager,
        threshold_seconds: float = 3.0,
    ) -> None:
        """Initialize view service.

        Args:
            content_repository: Content ownership and view counters
            view_repository: Counted (session, viewer, content) triples
            transaction_manager: Unit of work shared with the repositories
            threshold_seconds: Playback threshold handed to new sessions
        """
        self.content_repository = content_repository
        self.view_repository = view_repository
        self.transaction_manager = transaction_manager
        self.threshold_seconds = threshold_seconds

    async def record_view_threshold_reached(
        self,
        viewer_id: AccountId,
        target_id: ContentId,
        session_id: ViewSessionId,
    ) -> bool:
        """Count a view whose playback threshold was reached.

        Args:
            viewer_id: The authenticated viewer
            target_id: The content item
            session_id: The playback session reporting the view

        Returns:
            True if the view counter was incremented

        Raises:
            NotFoundError: If the content item is unknown
        """
        with logfire.span(
            "view_service.record_view",
            viewer_id=str(viewer_id),
            target_id=str(target_id),
            session_id=str(session_id),
        ):
            content = await self.content_repository.find_by_id(target_id)
            if not content:
                raise NotFoundError("Content", str(target_id))

            if content.owner_id == viewer_id:
                logfire.info("Owner view not counted", target_id=str(target_id))
                return False

            try:
                async with self.transaction_manager.atomic():
                    await self.view_repository.save(
                        ViewRecord(
                            session_id=session_id,
                            viewer_id=viewer_id,
                            content_id=target_id,
                            created_at=datetime.now(),
                        )
                    )
                    view_count = await self.content_repository.increment_view_count(
                        target_id
                    )
            except ConflictError:
                logfire.info(
                    "View already counted for session", session_id=str(session_id)
                )
                return False

            logfire.info(
                "View counted", target_id=str(target_id), view_count=view_count
            )
            return True

    def open_session(
        self,
        viewer_id: AccountId,
        target_id: ContentId,
        session_id: Optional[ViewSessionId] = None,
    ) -> ViewSession:
        """Create a playback session that reports through this service."""
        session_id = session_id or ViewSessionId(uuid4())
        recorder = partial(
            self.record_view_threshold_reached, viewer_id, target_id, session_id
        )
        return ViewSession(recorder, threshold_seconds=self.threshold_seconds)
