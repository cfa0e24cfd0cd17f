"""Observability: structured logging."""

from resume_extractor.observability.logging import (
    bind_document_context,
    clear_document_context,
    configure_logging,
)

__all__ = [
    "bind_document_context",
    "clear_document_context",
    "configure_logging",
]
