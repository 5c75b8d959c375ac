"""
Extraction Module
=================

Parses animation scripts into frame sequences.

Components:
    - find_assignments / decode_literal: candidate matching stage
    - FrameHeuristic: default frame-worthiness predicate (tunable)
    - markup_to_text / normalize_frame: payload to terminal text
    - FrameExtractor / extract_frames: the full pipeline

Example:
    from qqpr_player.extract import extract_frames, ExtractionError

    try:
        frames = extract_frames(script_text)
    except ExtractionError:
        print("could not extract frames")
"""

from qqpr_player.extract.literals import Assignment, decode_literal, find_assignments
from qqpr_player.extract.heuristics import FrameHeuristic, FramePredicate, has_line_break
from qqpr_player.extract.markup import markup_to_text, normalize_frame
from qqpr_player.extract.extractor import ExtractionError, FrameExtractor, extract_frames


__all__ = [
    "Assignment",
    "decode_literal",
    "find_assignments",
    "FrameHeuristic",
    "FramePredicate",
    "has_line_break",
    "markup_to_text",
    "normalize_frame",
    "ExtractionError",
    "FrameExtractor",
    "extract_frames",
]
