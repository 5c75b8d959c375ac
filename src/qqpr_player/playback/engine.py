"""
Playback Engine
===============

Timed, cancellable, loop-bounded rendering of a FrameSequence.

State Machine:
    INITIALIZING: hide cursor, draw frame 0
    RENDERING:    every tick draw the next frame; wrapping to frame 0
                  completes a loop
    TERMINATING:  clear screen, show cursor (exactly once)

Timing:
    Ticks are scheduled on an absolute timeline (start + n * interval),
    so render cost does not accumulate as drift. The only suspension
    point is the inter-tick wait on the cancellation event.

Cancellation:
    cancel() sets an asyncio.Event. It is checked before every write and
    wakes the inter-tick wait immediately. Cleanup is guarded by a lock
    and flag, so racing cancellation and natural completion (or repeated
    signals) still restore the terminal exactly once.
"""

import asyncio
import logging
import math
import threading
from typing import Optional

from qqpr_player.models.frame import FrameSequence
from qqpr_player.models.playback import PlaybackOutcome, PlaybackResult, PlaybackState
from qqpr_player.playback.signals import SignalCancellation
from qqpr_player.playback.terminal import TerminalWriter


logger = logging.getLogger(__name__)


class InvalidParameterError(ValueError):
    """Raised when playback parameters are rejected before playback starts."""
    pass


def validate_parameters(fps: float, loop_limit: int) -> None:
    """
    Check playback parameters.

    Raises:
        InvalidParameterError: If fps is not a finite number > 0 or
            loop_limit is not an integer >= 0
    """
    if isinstance(fps, bool) or not isinstance(fps, (int, float)):
        raise InvalidParameterError(f"fps must be a number, got {fps!r}")
    if not math.isfinite(fps) or fps <= 0:
        raise InvalidParameterError(f"fps must be > 0, got {fps}")
    if isinstance(loop_limit, bool) or not isinstance(loop_limit, int):
        raise InvalidParameterError(f"loop limit must be an integer, got {loop_limit!r}")
    if loop_limit < 0:
        raise InvalidParameterError(f"loop limit must be >= 0, got {loop_limit}")


class PlaybackEngine:
    """
    Single-use player for one FrameSequence.

    Attributes:
        frames: Frames to play
        fps: Frames per second
        loop_limit: Loops before stopping (0 = until cancelled)
        terminal: Output device

    Example:
        engine = PlaybackEngine(frames, fps=12, loop_limit=3)
        result = asyncio.run(engine.play())
        print(result.outcome, result.loops_completed)
    """

    def __init__(
        self,
        frames: FrameSequence,
        fps: float = 10.0,
        loop_limit: int = 0,
        terminal: Optional[TerminalWriter] = None,
    ) -> None:
        """
        Initialize playback engine.

        Args:
            frames: Validated frame sequence (>= 2 frames)
            fps: Frames per second, must be > 0
            loop_limit: Loops to play, 0 for unbounded
            terminal: Output writer. Defaults to stdout.

        Raises:
            InvalidParameterError: On bad fps or loop_limit
        """
        validate_parameters(fps, loop_limit)

        self.frames = frames
        self.fps = fps
        self.loop_limit = loop_limit
        self.terminal = terminal if terminal is not None else TerminalWriter()

        # Session state
        self._state = PlaybackState.INITIALIZING
        self._frame_index: int = 0
        self._loops_completed: int = 0
        self._frames_rendered: int = 0
        self._started: bool = False
        self._outcome: Optional[PlaybackOutcome] = None

        # Cancellation / cleanup guards
        self._cancel_event: asyncio.Event = asyncio.Event()
        self._cleanup_lock = threading.Lock()
        self._cleaned_up: bool = False

    @property
    def interval(self) -> float:
        """Seconds between ticks."""
        return 1.0 / self.fps

    @property
    def interval_ms(self) -> float:
        """Milliseconds between ticks."""
        return 1000.0 / self.fps

    @property
    def state(self) -> PlaybackState:
        return self._state

    @property
    def frame_index(self) -> int:
        """Position of the next frame to draw."""
        return self._frame_index

    @property
    def loops_completed(self) -> int:
        return self._loops_completed

    @property
    def frames_rendered(self) -> int:
        return self._frames_rendered

    @property
    def cancel_requested(self) -> bool:
        return self._cancel_event.is_set()

    def cancel(self) -> None:
        """
        Request cancellation.

        Idempotent. Must be called from the event loop thread (signal
        handlers are routed there by SignalCancellation).
        """
        if self._cancel_event.is_set():
            return
        logger.info("Playback cancellation requested")
        self._cancel_event.set()

    async def play(self) -> PlaybackResult:
        """
        Run the session until the loop limit is reached or cancel() is called.

        Returns:
            PlaybackResult describing how playback ended

        Raises:
            RuntimeError: If this engine has already been used
        """
        if self._started:
            raise RuntimeError("PlaybackEngine is single-use")
        self._started = True

        loop = asyncio.get_running_loop()
        logger.info(
            f"Playback starting: frames={len(self.frames)}, fps={self.fps:g}, "
            f"loop_limit={self.loop_limit or 'unbounded'}"
        )

        try:
            # INITIALIZING
            self.terminal.hide_cursor()
            if self._cancel_event.is_set():
                self._outcome = PlaybackOutcome.CANCELLED
                return self._result()
            self._render_next()
            self._state = PlaybackState.RENDERING

            # RENDERING
            next_tick = loop.time()
            while True:
                next_tick += self.interval
                now = loop.time()
                if next_tick < now - self.interval:
                    # Fell more than a tick behind, restart the timeline
                    next_tick = now

                if await self._wait_until(loop, next_tick):
                    self._outcome = PlaybackOutcome.CANCELLED
                    break

                # The final frame has been held for one interval
                if self._limit_reached():
                    self._outcome = PlaybackOutcome.COMPLETED
                    break

                self._render_next()

        except asyncio.CancelledError:
            self._outcome = PlaybackOutcome.CANCELLED
            raise
        finally:
            self._terminate()

        return self._result()

    async def _wait_until(self, loop: asyncio.AbstractEventLoop, deadline: float) -> bool:
        """Wait until deadline. Returns True if cancelled meanwhile."""
        if self._cancel_event.is_set():
            return True
        timeout = max(0.0, deadline - loop.time())
        try:
            await asyncio.wait_for(self._cancel_event.wait(), timeout=timeout)
            return True
        except asyncio.TimeoutError:
            return self._cancel_event.is_set()

    def _render_next(self) -> None:
        """Draw the current frame and advance, counting completed loops."""
        self.terminal.render(self.frames[self._frame_index].content)
        self._frames_rendered += 1

        self._frame_index = (self._frame_index + 1) % len(self.frames)
        if self._frame_index == 0:
            self._loops_completed += 1
            logger.debug(f"Loop {self._loops_completed} completed")

    def _limit_reached(self) -> bool:
        return self.loop_limit > 0 and self._loops_completed >= self.loop_limit

    def _terminate(self) -> bool:
        """
        Restore the terminal. Runs at most once per engine.

        Returns:
            True if this call performed the cleanup
        """
        with self._cleanup_lock:
            if self._cleaned_up:
                return False
            self._cleaned_up = True

        self._state = PlaybackState.TERMINATING
        try:
            self.terminal.clear_screen()
            self.terminal.show_cursor()
        finally:
            self._state = PlaybackState.FINISHED
            logger.info(
                f"Playback finished: outcome={self._outcome.value if self._outcome else 'ERROR'}, "
                f"loops={self._loops_completed}, frames={self._frames_rendered}"
            )
        return True

    def _result(self) -> PlaybackResult:
        return PlaybackResult(
            outcome=self._outcome or PlaybackOutcome.CANCELLED,
            loops_completed=self._loops_completed,
            frames_rendered=self._frames_rendered,
        )


def run_playback(
    frames: FrameSequence,
    fps: float = 10.0,
    loop_limit: int = 0,
    terminal: Optional[TerminalWriter] = None,
    handle_signals: bool = True,
) -> PlaybackResult:
    """
    Play frames synchronously with SIGINT/SIGTERM wired to cancellation.

    Parameters are validated before the event loop starts.

    Args:
        frames: Frame sequence to play
        fps: Frames per second
        loop_limit: Loops to play, 0 for unbounded
        terminal: Output writer. Defaults to stdout.
        handle_signals: Install signal handlers for the session

    Returns:
        PlaybackResult

    Raises:
        InvalidParameterError: On bad fps or loop_limit
    """
    engine = PlaybackEngine(frames, fps=fps, loop_limit=loop_limit, terminal=terminal)

    async def _session() -> PlaybackResult:
        handlers = SignalCancellation(engine.cancel)
        if handle_signals:
            handlers.install(asyncio.get_running_loop())
        try:
            return await engine.play()
        finally:
            handlers.restore()

    return asyncio.run(_session())
