"""Abstract document-to-text interface."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathlib import Path


@runtime_checkable
class TextExtractor(Protocol):
    """Abstract interface for turning a document into plain text."""

    async def extract_text(self, path: Path) -> str:
        """Return the text content of the document at ``path``."""
        ...
