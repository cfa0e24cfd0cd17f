"""Plain-text resume reader."""

from __future__ import annotations

import asyncio
from pathlib import Path

from resume_core.constants import PLAIN_TEXT_SUFFIXES
from resume_core.exceptions import InvalidFileError


class PlainTextReader:
    """Read pasted or exported plain-text resumes as UTF-8."""

    async def extract_text(self, path: Path) -> str:
        """Return the file contents; undecodable bytes become U+FFFD."""
        if not path.exists():
            msg = f"File not found: {path}"
            raise InvalidFileError(msg)
        if path.suffix.lower() not in PLAIN_TEXT_SUFFIXES:
            msg = f"Expected plain text file, got: {path.suffix}"
            raise InvalidFileError(msg)
        return await asyncio.to_thread(path.read_text, encoding="utf-8", errors="replace")
