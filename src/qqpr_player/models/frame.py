"""
Frame Data Model
=================

Internal frame representation shared by the extractor and the player.

Design Rules:
    - Frames are created once, during extraction, and never mutated
    - A FrameSequence is the ONLY format handed to the playback engine
    - A FrameSequence always holds at least two frames
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Tuple


MIN_FRAMES = 2


@dataclass(frozen=True, slots=True)
class Frame:
    """
    One screen of an ASCII animation.

    Attributes:
        index: Assignment index from the source script (defines order)
        content: Plain text, possibly multi-line, ready to write to a terminal
    """

    index: int
    content: str

    def __post_init__(self) -> None:
        if self.index < 0:
            raise ValueError(f"Frame index must be >= 0, got {self.index}")

    @property
    def line_count(self) -> int:
        """Number of text lines in the frame."""
        return len(self.content.splitlines())

    def __repr__(self) -> str:
        """Compact repr that doesn't dump the full frame."""
        return f"Frame(index={self.index}, lines={self.line_count})"


class FrameSequence:
    """
    Ordered, immutable collection of frames forming one playable animation.

    Frames are kept in insertion order, which is playback order. Indices
    must be strictly increasing.

    Example:
        frames = FrameSequence([Frame(0, "a\\n"), Frame(1, "b\\n")])
        len(frames)        # 2
        frames[1].content  # "b\\n"
    """

    __slots__ = ("_frames",)

    def __init__(self, frames: Iterable[Frame]) -> None:
        """
        Initialize sequence.

        Args:
            frames: Frames in playback order

        Raises:
            ValueError: If fewer than two frames are given or
                indices are not strictly increasing
        """
        self._frames: Tuple[Frame, ...] = tuple(frames)

        if len(self._frames) < MIN_FRAMES:
            raise ValueError(
                f"A frame sequence needs at least {MIN_FRAMES} frames, "
                f"got {len(self._frames)}"
            )

        for previous, current in zip(self._frames, self._frames[1:]):
            if current.index <= previous.index:
                raise ValueError(
                    f"Frame indices must be strictly increasing: "
                    f"{previous.index} then {current.index}"
                )

    def __len__(self) -> int:
        return len(self._frames)

    def __getitem__(self, position: int) -> Frame:
        return self._frames[position]

    def __iter__(self) -> Iterator[Frame]:
        return iter(self._frames)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FrameSequence):
            return NotImplemented
        return self._frames == other._frames

    def __repr__(self) -> str:
        return f"FrameSequence(frames={len(self._frames)})"

    @property
    def indices(self) -> List[int]:
        """Source assignment indices in playback order."""
        return [frame.index for frame in self._frames]

    def contents(self) -> List[str]:
        """Frame texts in playback order."""
        return [frame.content for frame in self._frames]

    def duration(self, fps: float) -> float:
        """Seconds needed to play one loop at the given frame rate."""
        if fps <= 0:
            raise ValueError(f"fps must be > 0, got {fps}")
        return len(self._frames) / fps
