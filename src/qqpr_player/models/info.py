"""
Animation Info
==============

Summary of a cached animation, printed by ``play-qqpr --info``.
"""

from pydantic import BaseModel, Field


class AnimationInfo(BaseModel):
    """
    Metadata about one cached animation.

    Attributes:
        animation_id: Numeric animation identifier
        frame_count: Number of extracted frames
        fps: Frame rate the duration was computed at
        loop_duration_seconds: Length of one loop, rounded to 0.1 s
        cache_file: Path of the cached script
    """

    animation_id: str = Field(..., pattern=r"^\d+$")
    frame_count: int = Field(..., ge=2)
    fps: float = Field(..., gt=0)
    loop_duration_seconds: float = Field(..., ge=0)
    cache_file: str

    def to_lines(self) -> list:
        """Human-readable report lines."""
        return [
            f"Animation ID: {self.animation_id}",
            f"Frames: {self.frame_count}",
            f"Duration at {self.fps:g} fps: {self.loop_duration_seconds:.1f}s per loop",
            f"Cache file: {self.cache_file}",
        ]
