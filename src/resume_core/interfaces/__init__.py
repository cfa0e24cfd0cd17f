"""Public interface re-exports for resume_core."""

from resume_core.interfaces.text_extractor import TextExtractor

__all__ = [
    "TextExtractor",
]
