"""
Assignment Matching
===================

First stage of frame extraction: find candidate frame assignments.

Animation scripts store frames as indexed string assignments:

    a[0] = "  ,--.  <br> ( oo ) <br>...";
    frames[1] = '...';

This stage only recognises the *shape* of an assignment. Whether the
payload is really a frame is decided by the heuristic stage.

Design Rules:
    - Quoted literals may contain escaped copies of their own quote
    - Literals may span several source lines
    - Escape decoding is a single pass (no double-decoding)
"""

import re
from dataclasses import dataclass
from typing import Iterator


# <identifier>[<integer>] = "<literal>" | '<literal>'
ASSIGNMENT_PATTERN = re.compile(
    r"""
    (?P<name>[A-Za-z_$][\w$]*)        # array identifier
    \s*\[\s*(?P<index>\d+)\s*\]       # [integer index]
    \s*=\s*
    (?P<quote>["'])                   # opening quote
    (?P<raw>(?:\\.|(?!(?P=quote))[^\\])*)
    (?P=quote)                        # matching closing quote
    """,
    re.VERBOSE | re.DOTALL,
)

_ESCAPE_PATTERN = re.compile(r"\\(.)", re.DOTALL)

ESCAPES = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "\\": "\\",
    '"': '"',
    "'": "'",
}


@dataclass(frozen=True, slots=True)
class Assignment:
    """
    A candidate `name[index] = "literal"` found in source text.

    Attributes:
        name: Array identifier the literal was assigned to
        index: Integer index inside the brackets
        quote: Quote character that delimited the literal
        raw: Literal body exactly as written (escapes not decoded)
    """

    name: str
    index: int
    quote: str
    raw: str

    @property
    def decoded(self) -> str:
        """Literal body with escape sequences decoded."""
        return decode_literal(self.raw)


def decode_literal(raw: str) -> str:
    """
    Decode string-literal escapes.

    Handles \\n, \\r, \\t, \\\\, \\" and \\'. Any other escape is left
    as written, backslash included.

    Args:
        raw: Literal body as it appears between the quotes

    Returns:
        Decoded text
    """
    return _ESCAPE_PATTERN.sub(
        lambda m: ESCAPES.get(m.group(1), m.group(0)),
        raw,
    )


def find_assignments(text: str) -> Iterator[Assignment]:
    """
    Yield every indexed string assignment in source order.

    Args:
        text: Arbitrary script text (may be malformed)

    Yields:
        Assignment for each match
    """
    for match in ASSIGNMENT_PATTERN.finditer(text):
        yield Assignment(
            name=match.group("name"),
            index=int(match.group("index")),
            quote=match.group("quote"),
            raw=match.group("raw"),
        )
