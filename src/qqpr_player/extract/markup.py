"""
Markup Conversion
=================

Turns HTML-flavoured frame payloads into plain terminal text.
"""

import re


_BREAK_TAG = re.compile(r"<br\s*/?>", re.IGNORECASE)
_NBSP = re.compile(r"&nbsp;|&#160;", re.IGNORECASE)
_TRAILING_SPACE = re.compile(r"[ \t]+\n")
_TRAILING_NEWLINES = re.compile(r"\n+\Z")


def markup_to_text(payload: str) -> str:
    """
    Convert a decoded payload from markup to plain text.

    <br> variants become newlines, non-breaking spaces become spaces,
    &lt; &gt; &amp; are unescaped and carriage returns are dropped.
    &amp; goes last so "&amp;lt;" stays "&lt;".
    """
    text = payload.replace("\r", "")
    text = _BREAK_TAG.sub("\n", text)
    text = _NBSP.sub(" ", text)
    text = text.replace("&lt;", "<").replace("&gt;", ">")
    return text.replace("&amp;", "&")


def normalize_frame(text: str) -> str:
    """
    Strip trailing spaces/tabs before each line break and collapse
    trailing blank lines to a single newline.
    """
    text = _TRAILING_SPACE.sub("\n", text)
    return _TRAILING_NEWLINES.sub("\n", text)
