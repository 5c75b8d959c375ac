"""
Data Models
===========

Data models for play-qqpr.

This module re-exports all data models for convenient access.

Models:
    Frames:
        - Frame: One immutable screen of text
        - FrameSequence: Ordered, validated animation (>= 2 frames)

    Playback:
        - PlaybackState: Engine lifecycle states
        - PlaybackOutcome: COMPLETED or CANCELLED
        - PlaybackResult: Summary returned by the engine

    Info:
        - AnimationInfo: Report for ``--info``
"""

from qqpr_player.models.frame import Frame, FrameSequence, MIN_FRAMES
from qqpr_player.models.playback import PlaybackOutcome, PlaybackResult, PlaybackState
from qqpr_player.models.info import AnimationInfo

__all__ = [
    # Frames
    "Frame",
    "FrameSequence",
    "MIN_FRAMES",
    # Playback
    "PlaybackState",
    "PlaybackOutcome",
    "PlaybackResult",
    # Info
    "AnimationInfo",
]
