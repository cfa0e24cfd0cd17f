"""Tests for the Word document parser."""

from __future__ import annotations

from pathlib import Path

import pytest
from docx import Document

from resume_core.exceptions import (
    DocumentExtractionError,
    InvalidFileError,
    UnsupportedFileTypeError,
)
from resume_extractor.tools.docx_parser import DocxParser


def _write_docx(path: Path, paragraphs: list[str], cells: list[list[str]] | None = None) -> Path:
    """Write a .docx with the given paragraphs and an optional table."""
    document = Document()
    for text in paragraphs:
        document.add_paragraph(text)
    if cells:
        table = document.add_table(rows=len(cells), cols=len(cells[0]))
        for r, row in enumerate(cells):
            for c, value in enumerate(row):
                table.cell(r, c).text = value
    document.save(str(path))
    return path


@pytest.mark.unit
class TestDocxParser:
    """Test DocxParser."""

    @pytest.mark.asyncio
    async def test_extracts_paragraphs(self, tmp_path: Path) -> None:
        """Non-empty paragraphs come back one per line."""
        path = _write_docx(tmp_path / "cv.docx", ["Jane Doe", "", "SKILLS", "ICU, Triage"])
        text = await DocxParser().extract_text(path)
        assert text == "Jane Doe\nSKILLS\nICU, Triage"

    @pytest.mark.asyncio
    async def test_extracts_table_cells(self, tmp_path: Path) -> None:
        """Cell text from layout tables follows the paragraphs."""
        path = _write_docx(
            tmp_path / "cv.docx",
            ["Jane Doe"],
            cells=[["jane@example.com", "(555) 111-2222"]],
        )
        text = await DocxParser().extract_text(path)
        assert text.splitlines() == ["Jane Doe", "jane@example.com", "(555) 111-2222"]

    @pytest.mark.asyncio
    async def test_missing_file_raises(self, tmp_path: Path) -> None:
        """Missing file raises InvalidFileError."""
        with pytest.raises(InvalidFileError, match="File not found"):
            await DocxParser().extract_text(tmp_path / "missing.docx")

    @pytest.mark.asyncio
    async def test_legacy_doc_rejected(self, tmp_path: Path) -> None:
        """Binary .doc files raise UnsupportedFileTypeError."""
        path = tmp_path / "cv.doc"
        path.write_bytes(b"\xd0\xcf\x11\xe0")
        with pytest.raises(UnsupportedFileTypeError, match="Legacy .doc"):
            await DocxParser().extract_text(path)

    @pytest.mark.asyncio
    async def test_wrong_suffix_raises(self, tmp_path: Path) -> None:
        """Non-Word suffix raises InvalidFileError."""
        path = tmp_path / "cv.pdf"
        path.write_bytes(b"%PDF")
        with pytest.raises(InvalidFileError, match="Expected .docx"):
            await DocxParser().extract_text(path)

    @pytest.mark.asyncio
    async def test_corrupt_file_raises(self, tmp_path: Path) -> None:
        """Files python-docx cannot open raise DocumentExtractionError."""
        path = tmp_path / "cv.docx"
        path.write_bytes(b"not a zip archive")
        with pytest.raises(DocumentExtractionError, match="Could not read Word document"):
            await DocxParser().extract_text(path)
