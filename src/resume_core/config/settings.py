"""Application settings using pydantic-settings."""

from __future__ import annotations

from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Central configuration for resume-extractor."""

    model_config = SettingsConfigDict(env_prefix="RESUME_", env_file=".env")

    # --- Logging ---
    log_level: str = Field(
        default="INFO",
        description="Root log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_format: Literal["json", "console"] = Field(
        default="console",
        description="Log renderer: 'json' for machines, 'console' for humans",
    )

    # --- Documents ---
    max_file_size_mb: int = Field(
        default=10,
        description="Log a warning for documents larger than this (MB)",
    )
    min_pdf_text_chars: int = Field(
        default=50,
        description="Minimum extracted characters for a PDF backend result to be accepted",
    )

    # --- Output ---
    json_indent: int = Field(
        default=2,
        description="Indentation used when the CLI prints JSON",
    )

    @model_validator(mode="after")
    def validate_document_limits(self) -> Settings:
        """Ensure document thresholds are positive."""
        if self.max_file_size_mb <= 0:
            msg = f"max_file_size_mb must be positive, got {self.max_file_size_mb}"
            raise ValueError(msg)
        if self.min_pdf_text_chars <= 0:
            msg = f"min_pdf_text_chars must be positive, got {self.min_pdf_text_chars}"
            raise ValueError(msg)
        return self
