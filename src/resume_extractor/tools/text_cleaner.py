"""Whitespace normalization for text coming out of document libraries."""

from __future__ import annotations

import re

_HORIZONTAL_WS = re.compile(r"[ \t]+")
_EXCESS_NEWLINES = re.compile(r"\n{3,}")


def normalize_text(text: str) -> str:
    """Normalize line breaks and collapse runs of blanks.

    PDF and Word extractors emit CRLF, bare CR, form feeds between pages
    and ragged spacing. Only whitespace changes; the set of non-empty
    lines stays the same.
    """
    if not text:
        return ""
    t = text.replace("\r\n", "\n").replace("\r", "\n").replace("\f", "\n")
    t = _HORIZONTAL_WS.sub(" ", t)
    t = _EXCESS_NEWLINES.sub("\n\n", t)
    return t.strip()
