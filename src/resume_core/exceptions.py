"""Custom exception hierarchy for resume-extractor."""

from __future__ import annotations


class ResumeExtractorError(Exception):
    """Base exception for all resume-extractor errors."""


class InvalidFileError(ResumeExtractorError):
    """Raised when the input file is missing or has the wrong type for its reader."""


class UnsupportedFileTypeError(ResumeExtractorError):
    """Raised when no text extractor handles the file's suffix."""


class ScannedPDFError(ResumeExtractorError):
    """Raised when a PDF has no text layer (scanned/image-only)."""


class EncryptedPDFError(ResumeExtractorError):
    """Raised when a PDF is password-protected."""


class DocumentExtractionError(ResumeExtractorError):
    """Raised when a document library fails to read an otherwise valid file."""
