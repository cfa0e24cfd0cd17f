"""Suffix-based dispatch to the right text extractor."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from resume_core.constants import (
    DOCX_SUFFIXES,
    LEGACY_WORD_SUFFIXES,
    PDF_SUFFIXES,
    PLAIN_TEXT_SUFFIXES,
)
from resume_core.exceptions import UnsupportedFileTypeError
from resume_extractor.tools.docx_parser import DocxParser
from resume_extractor.tools.pdf_parser import PDFParser
from resume_extractor.tools.plain_text import PlainTextReader
from resume_extractor.tools.text_cleaner import normalize_text

if TYPE_CHECKING:
    from pathlib import Path

    from resume_core.config.settings import Settings
    from resume_core.interfaces import TextExtractor

logger = structlog.get_logger()


class DocumentReader:
    """Read PDF, DOCX or plain-text documents into normalized text."""

    def __init__(self, settings: Settings | None = None) -> None:
        """Build per-format extractors, using settings thresholds when given."""
        if settings is not None:
            pdf = PDFParser(
                max_size_mb=settings.max_file_size_mb,
                min_text_chars=settings.min_pdf_text_chars,
            )
        else:
            pdf = PDFParser()
        docx = DocxParser()
        text = PlainTextReader()

        self._extractors: dict[str, TextExtractor] = {}
        for suffixes, extractor in (
            (PDF_SUFFIXES, pdf),
            # .doc is routed to DocxParser so it can raise a specific error
            (DOCX_SUFFIXES | LEGACY_WORD_SUFFIXES, docx),
            (PLAIN_TEXT_SUFFIXES, text),
        ):
            for suffix in suffixes:
                self._extractors[suffix] = extractor

    @property
    def supported_suffixes(self) -> list[str]:
        """Suffixes this reader will attempt, sorted."""
        return sorted(self._extractors)

    def extractor_for(self, path: Path) -> TextExtractor:
        """Return the extractor that handles ``path``.

        Raises:
            UnsupportedFileTypeError: If the suffix is not recognized.
        """
        suffix = path.suffix.lower()
        extractor = self._extractors.get(suffix)
        if extractor is None:
            msg = (
                f"Unsupported document type '{path.suffix or '<none>'}' for {path}; "
                f"expected one of {', '.join(self.supported_suffixes)}"
            )
            raise UnsupportedFileTypeError(msg)
        return extractor

    async def extract_text(self, path: Path) -> str:
        """Extract and normalize the text of ``path``."""
        extractor = self.extractor_for(path)
        logger.debug("document_read_start", path=str(path), extractor=type(extractor).__name__)
        raw = await extractor.extract_text(path)
        return normalize_text(raw)
