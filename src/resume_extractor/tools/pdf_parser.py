"""PDF text extraction with fallback chain: pdfplumber -> pypdf."""

from __future__ import annotations

import asyncio
from pathlib import Path

import structlog

from resume_core.constants import PDF_SUFFIXES
from resume_core.exceptions import EncryptedPDFError, InvalidFileError, ScannedPDFError

logger = structlog.get_logger()

MAX_PDF_SIZE_MB = 10
MIN_TEXT_CHARS = 50


class PDFParser:
    """Extract text from PDF files with multiple fallback strategies."""

    def __init__(
        self,
        max_size_mb: int = MAX_PDF_SIZE_MB,
        min_text_chars: int = MIN_TEXT_CHARS,
    ) -> None:
        self.max_size_mb = max_size_mb
        self.min_text_chars = min_text_chars

    async def extract_text(self, path: Path) -> str:
        """Extract text from a PDF file.

        Tries pdfplumber first, then pypdf.

        Raises:
            InvalidFileError: If the file is missing or not a PDF.
            EncryptedPDFError: If the PDF is password-protected.
            ScannedPDFError: If the PDF has no text layer.
        """
        self._validate_file(path)
        self._check_size(path)

        text = await self._try_pdfplumber(path)
        if text and len(text.strip()) > self.min_text_chars:
            return text

        text = await self._try_pypdf(path)
        if text and len(text.strip()) > self.min_text_chars:
            return text

        msg = f"PDF appears to be scanned/image-only with no extractable text: {path}"
        raise ScannedPDFError(msg)

    def _validate_file(self, path: Path) -> None:
        """Validate that the file exists and is a PDF."""
        if not path.exists():
            msg = f"File not found: {path}"
            raise InvalidFileError(msg)
        if path.suffix.lower() not in PDF_SUFFIXES:
            msg = f"Expected PDF file, got: {path.suffix}"
            raise InvalidFileError(msg)

    def _check_size(self, path: Path) -> None:
        """Warn if the PDF is larger than max_size_mb."""
        size_mb = path.stat().st_size / (1024 * 1024)
        if size_mb > self.max_size_mb:
            logger.warning("large_document", path=str(path), size_mb=round(size_mb, 1))

    async def _try_pdfplumber(self, path: Path) -> str | None:
        """Try extracting text with pdfplumber."""
        try:
            import pdfplumber

            def _extract() -> str:
                pages_text: list[str] = []
                with pdfplumber.open(str(path)) as pdf:
                    for page in pdf.pages:
                        text = page.extract_text()
                        if text:
                            pages_text.append(text)
                return "\n\n".join(pages_text)

            return await asyncio.to_thread(_extract)
        except Exception as e:
            if "password" in str(e).lower() or "encrypted" in str(e).lower():
                msg = f"PDF is password-protected: {path}"
                raise EncryptedPDFError(msg) from e
            logger.debug("pdfplumber_fallback", error=str(e))
            return None

    async def _try_pypdf(self, path: Path) -> str | None:
        """Try extracting text with pypdf (lightweight fallback)."""
        try:
            from pypdf import PdfReader

            def _extract() -> str:
                reader = PdfReader(str(path))
                if reader.is_encrypted:
                    msg = f"PDF is password-protected: {path}"
                    raise EncryptedPDFError(msg)
                pages_text: list[str] = []
                for page in reader.pages:
                    text = page.extract_text()
                    if text:
                        pages_text.append(text)
                return "\n\n".join(pages_text)

            return await asyncio.to_thread(_extract)
        except EncryptedPDFError:
            raise
        except Exception as e:
            logger.debug("pypdf_fallback", error=str(e))
            return None
