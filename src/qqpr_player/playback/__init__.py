"""
Playback Module
===============

Terminal rendering of frame sequences.

Components:
    - TerminalWriter: ANSI screen/cursor control over any text stream
    - PlaybackEngine: Async tick loop with loop limit and cancellation
    - SignalCancellation: SIGINT/SIGTERM -> engine.cancel()
    - run_playback: Synchronous entry point used by the CLI

Example:
    from qqpr_player.playback import run_playback

    result = run_playback(frames, fps=12, loop_limit=3)
"""

from qqpr_player.playback.terminal import TerminalWriter
from qqpr_player.playback.signals import SignalCancellation
from qqpr_player.playback.engine import (
    InvalidParameterError,
    PlaybackEngine,
    run_playback,
    validate_parameters,
)


__all__ = [
    "TerminalWriter",
    "SignalCancellation",
    "InvalidParameterError",
    "PlaybackEngine",
    "run_playback",
    "validate_parameters",
]
