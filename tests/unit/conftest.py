"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from resume_core.models.resume import ParsedResume
from tests.mocks.mock_factories import SAMPLE_RESUME_TEXT, make_parsed_resume
from tests.mocks.mock_settings import make_settings


@pytest.fixture
def mock_settings() -> MagicMock:
    """Return a MagicMock Settings with sensible defaults."""
    return make_settings()


@pytest.fixture
def sample_text() -> str:
    """Return the reference resume text."""
    return SAMPLE_RESUME_TEXT


@pytest.fixture
def sample_resume() -> ParsedResume:
    """Return the record expected from the reference resume text."""
    return make_parsed_resume()


@pytest.fixture
def sample_text_file(tmp_path: Path, sample_text: str) -> Path:
    """Write the reference resume to a .txt file."""
    path = tmp_path / "jane_doe.txt"
    path.write_text(sample_text, encoding="utf-8")
    return path
