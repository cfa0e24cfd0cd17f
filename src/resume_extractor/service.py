"""Resume parsing service: document -> text -> ParsedResume."""

from __future__ import annotations

import hashlib
import time
from typing import TYPE_CHECKING

import structlog

from resume_core.models.resume import ResumeParseResult
from resume_extractor.extractor import extract
from resume_extractor.observability.logging import bind_document_context, clear_document_context
from resume_extractor.tools.document_reader import DocumentReader
from resume_extractor.tools.text_cleaner import normalize_text

if TYPE_CHECKING:
    from pathlib import Path

    from resume_core.config.settings import Settings
    from resume_core.interfaces import TextExtractor

logger = structlog.get_logger()


class ResumeParsingService:
    """Turn resume documents or pasted text into structured records."""

    def __init__(
        self,
        settings: Settings | None = None,
        text_extractor: TextExtractor | None = None,
    ) -> None:
        """Initialize with optional settings and an injected text extractor."""
        self.settings = settings
        self.text_extractor = text_extractor or DocumentReader(settings)

    def parse_text(self, text: str, *, source: str | None = None) -> ResumeParseResult:
        """Normalize ``text`` and extract resume fields from it."""
        start = time.monotonic()
        raw_text = normalize_text(text)
        content_hash = hashlib.sha256(raw_text.encode()).hexdigest()
        resume = extract(raw_text)

        logger.info(
            "resume_parsed",
            source=source,
            duration_ms=round((time.monotonic() - start) * 1000, 2),
            has_name=resume.first_name is not None,
            has_email=resume.email is not None,
            skills_count=len(resume.skills),
            experience_count=len(resume.experience),
            education_count=len(resume.education),
            certifications_count=len(resume.certifications),
        )
        if resume.first_name is None and not resume.skills:
            logger.warning("resume_low_confidence", source=source, chars=len(raw_text))

        return ResumeParseResult(
            resume=resume,
            source=source,
            raw_text=raw_text,
            content_hash=content_hash,
        )

    async def parse_file(self, path: Path) -> ResumeParseResult:
        """Read the document at ``path`` and parse it.

        Document errors (missing file, unsupported type, scanned or
        encrypted PDF) propagate as ``ResumeExtractorError`` subclasses.
        """
        bind_document_context(str(path))
        try:
            text = await self.text_extractor.extract_text(path)
            return self.parse_text(text, source=str(path))
        finally:
            clear_document_context()
