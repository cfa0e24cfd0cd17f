"""Word (.docx) text extraction using python-docx."""

from __future__ import annotations

import asyncio
from pathlib import Path

import structlog

from resume_core.constants import DOCX_SUFFIXES, LEGACY_WORD_SUFFIXES
from resume_core.exceptions import (
    DocumentExtractionError,
    InvalidFileError,
    UnsupportedFileTypeError,
)

logger = structlog.get_logger()


class DocxParser:
    """Extract paragraph and table text from .docx files.

    Images, icons and text boxes are skipped; resumes built from
    two-column tables keep their cell text, one cell per line.
    """

    async def extract_text(self, path: Path) -> str:
        """Extract text from a .docx file.

        Raises:
            InvalidFileError: If the file is missing or not a .docx.
            UnsupportedFileTypeError: For legacy binary .doc files.
            DocumentExtractionError: If python-docx cannot open the file.
        """
        self._validate_file(path)

        from docx import Document

        def _extract() -> str:
            document = Document(str(path))
            parts = [p.text for p in document.paragraphs if p.text.strip()]
            for table in document.tables:
                for row in table.rows:
                    for cell in row.cells:
                        if cell.text.strip():
                            parts.append(cell.text)
            return "\n".join(parts)

        try:
            text = await asyncio.to_thread(_extract)
        except Exception as e:
            msg = f"Could not read Word document {path}: {e}"
            raise DocumentExtractionError(msg) from e

        logger.debug("docx_extracted", path=str(path), chars=len(text))
        return text

    def _validate_file(self, path: Path) -> None:
        """Validate that the file exists and is a .docx."""
        if not path.exists():
            msg = f"File not found: {path}"
            raise InvalidFileError(msg)
        suffix = path.suffix.lower()
        if suffix in LEGACY_WORD_SUFFIXES:
            msg = f"Legacy .doc files are not supported, save as .docx: {path}"
            raise UnsupportedFileTypeError(msg)
        if suffix not in DOCX_SUFFIXES:
            msg = f"Expected .docx file, got: {path.suffix}"
            raise InvalidFileError(msg)
