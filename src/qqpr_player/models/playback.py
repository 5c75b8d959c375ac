"""
Playback Models
===============

State and result types for the playback engine.

State Machine:
    INITIALIZING -> RENDERING -> TERMINATING -> FINISHED

    INITIALIZING: cursor hidden, screen cleared, first frame written
    RENDERING:    one frame written per tick
    TERMINATING:  cleanup in progress (screen cleared, cursor restored)
    FINISHED:     cleanup done, session over
"""

from enum import Enum

from pydantic import BaseModel, Field


class PlaybackState(str, Enum):
    """Lifecycle states of a playback session."""

    INITIALIZING = "INITIALIZING"
    RENDERING = "RENDERING"
    TERMINATING = "TERMINATING"
    FINISHED = "FINISHED"


class PlaybackOutcome(str, Enum):
    """
    How a playback session ended.

    Attributes:
        COMPLETED: The configured loop limit was reached
        CANCELLED: An external cancellation (e.g. SIGINT) ended playback
    """

    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class PlaybackResult(BaseModel):
    """Summary returned when a playback session ends."""

    outcome: PlaybackOutcome = Field(..., description="Why playback ended")
    loops_completed: int = Field(
        ...,
        ge=0,
        description="Full traversals of the frame sequence",
    )
    frames_rendered: int = Field(
        ...,
        ge=0,
        description="Frame writes performed, including the initial frame",
    )

    @property
    def cancelled(self) -> bool:
        return self.outcome == PlaybackOutcome.CANCELLED
