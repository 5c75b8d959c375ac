"""
Frame Extractor
===============

Turns raw animation script text into a validated FrameSequence.

Pipeline:
    1. find_assignments   - match `name[i] = "..."` candidates
    2. predicate.accepts  - keep only frame-like payloads
    3. markup_to_text     - <br>, &nbsp;, entities -> plain text
    4. last write wins per index, then sort by index
    5. normalize_frame    - trim trailing whitespace / blank lines
    6. require >= 2 frames

Design Rules:
    - Pure: no I/O, no mutation of the input
    - Either a complete FrameSequence or ExtractionError, never a partial result
"""

import logging
from typing import Dict, Optional

from qqpr_player.extract.heuristics import FrameHeuristic, FramePredicate
from qqpr_player.extract.literals import find_assignments
from qqpr_player.extract.markup import markup_to_text, normalize_frame
from qqpr_player.models.frame import Frame, FrameSequence, MIN_FRAMES


logger = logging.getLogger(__name__)


class ExtractionError(Exception):
    """Raised when source text does not contain a playable animation."""

    def __init__(self, message: str = "could not extract frames", frames_found: int = 0) -> None:
        super().__init__(message)
        self.frames_found = frames_found


class FrameExtractor:
    """
    Two-stage frame extractor with a pluggable frame predicate.

    Example:
        extractor = FrameExtractor(FrameHeuristic(min_length=30))
        frames = extractor.extract(script_text)
    """

    def __init__(self, predicate: Optional[FramePredicate] = None) -> None:
        """
        Initialize extractor.

        Args:
            predicate: Frame-worthiness check. Defaults to FrameHeuristic().
        """
        self.predicate = predicate if predicate is not None else FrameHeuristic()

    def extract(self, source_text: str) -> FrameSequence:
        """
        Extract an ordered frame sequence from script text.

        Args:
            source_text: Decoded contents of an animation script

        Returns:
            FrameSequence ordered by assignment index

        Raises:
            ExtractionError: If fewer than two frames survive filtering
        """
        by_index: Dict[int, str] = {}
        candidates = 0

        for assignment in find_assignments(source_text):
            candidates += 1
            if not self.predicate.accepts(assignment):
                continue
            if assignment.index in by_index:
                logger.debug(f"Index {assignment.index} reassigned, keeping later value")
            by_index[assignment.index] = markup_to_text(assignment.decoded)

        logger.debug(
            f"Extraction scanned {candidates} assignments, "
            f"accepted {len(by_index)} distinct frames"
        )

        if len(by_index) < MIN_FRAMES:
            raise ExtractionError(
                f"could not extract frames: found {len(by_index)}, need {MIN_FRAMES}",
                frames_found=len(by_index),
            )

        return FrameSequence(
            Frame(index=index, content=normalize_frame(by_index[index]))
            for index in sorted(by_index)
        )


def extract_frames(
    source_text: str,
    predicate: Optional[FramePredicate] = None,
) -> FrameSequence:
    """Extract frames with the given (or default) predicate."""
    return FrameExtractor(predicate).extract(source_text)
