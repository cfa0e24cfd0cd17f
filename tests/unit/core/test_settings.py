"""Tests for Settings configuration."""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from tests.mocks.mock_settings import make_real_settings


@pytest.mark.unit
class TestSettings:
    """Test Settings validation and defaults."""

    def test_default_settings(self) -> None:
        """Settings loads with correct defaults."""
        with patch.dict(os.environ, {}, clear=True):
            s = make_real_settings()
        assert s.log_level == "INFO"
        assert s.log_format == "console"
        assert s.max_file_size_mb == 10
        assert s.min_pdf_text_chars == 50
        assert s.json_indent == 2

    def test_env_prefix(self) -> None:
        """RESUME_-prefixed variables override defaults."""
        env = {"RESUME_LOG_FORMAT": "json", "RESUME_MAX_FILE_SIZE_MB": "25"}
        with patch.dict(os.environ, env, clear=True):
            s = make_real_settings()
        assert s.log_format == "json"
        assert s.max_file_size_mb == 25

    def test_invalid_log_format_raises(self) -> None:
        """Unknown log formats are rejected."""
        with pytest.raises(ValidationError):
            make_real_settings(log_format="xml")

    def test_non_positive_size_raises(self) -> None:
        """max_file_size_mb must be positive."""
        with pytest.raises(ValidationError, match="max_file_size_mb must be positive"):
            make_real_settings(max_file_size_mb=0)

    def test_non_positive_min_chars_raises(self) -> None:
        """min_pdf_text_chars must be positive."""
        with pytest.raises(ValidationError, match="min_pdf_text_chars must be positive"):
            make_real_settings(min_pdf_text_chars=-1)
