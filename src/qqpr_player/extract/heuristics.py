"""
Frame Heuristics
================

Second stage of frame extraction: decide whether a matched assignment
is an animation frame or incidental script data.

The upstream script format is undocumented, so these rules are a
false-positive filter rather than a grammar. Frames are "big" and
contain line breaks; lookup tables, labels and URLs usually are not.

Rules (defaults):
    - Decoded payload must be at least 50 characters long
    - Payload must contain a \\n escape or a <br> / <br/> tag
"""

import logging
import re
from dataclasses import dataclass
from typing import Protocol

from qqpr_player.extract.literals import Assignment


logger = logging.getLogger(__name__)


BREAK_TAG_PATTERN = re.compile(r"<br\s*/?>", re.IGNORECASE)

LINE_BREAK_ESCAPE = "\\n"


class FramePredicate(Protocol):
    """
    Protocol for frame-worthiness checks.

    Any object with an `accepts(assignment) -> bool` method can be
    plugged into FrameExtractor.
    """

    def accepts(self, assignment: Assignment) -> bool:
        ...


def has_line_break(raw: str) -> bool:
    """True if the raw payload holds a \\n escape or a <br> tag."""
    return LINE_BREAK_ESCAPE in raw or BREAK_TAG_PATTERN.search(raw) is not None


@dataclass
class FrameHeuristic:
    """
    Default size/shape predicate for frame payloads.

    Attributes:
        min_length: Minimum decoded payload length
        require_line_break: Reject payloads without any line break marker
    """

    min_length: int = 50
    require_line_break: bool = True

    def accepts(self, assignment: Assignment) -> bool:
        """
        Check whether an assignment looks like an animation frame.

        Args:
            assignment: Candidate from the matching stage

        Returns:
            True if the payload passes every rule
        """
        decoded_length = len(assignment.decoded)
        if decoded_length < self.min_length:
            logger.debug(
                f"Rejected {assignment.name}[{assignment.index}]: "
                f"{decoded_length} chars < {self.min_length}"
            )
            return False

        if self.require_line_break and not has_line_break(assignment.raw):
            logger.debug(
                f"Rejected {assignment.name}[{assignment.index}]: no line break"
            )
            return False

        return True
