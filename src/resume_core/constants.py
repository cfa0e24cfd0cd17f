"""Shared constants for resume-extractor."""

from __future__ import annotations

# Section header keywords, matched as substrings of the uppercased line.
# Order matters: the first keyword found selects the section.
SECTION_KEYWORDS: dict[str, str] = {
    "SKILLS": "skills",
    "EXPERIENCE": "experience",
    "EDUCATION": "education",
    "CERTIFICATIONS": "certifications",
}

UNKNOWN_POSITION = "Unknown Position"
UNKNOWN_COMPANY = "Unknown Company"
UNKNOWN_DURATION = "Unknown Duration"
UNKNOWN_INSTITUTION = "Unknown Institution"

# Address lines must contain both of these
ADDRESS_SEPARATOR = ","
ADDRESS_KEYWORD = "Street"

# Suffixes per document kind
PDF_SUFFIXES = frozenset({".pdf"})
DOCX_SUFFIXES = frozenset({".docx"})
LEGACY_WORD_SUFFIXES = frozenset({".doc"})
PLAIN_TEXT_SUFFIXES = frozenset({".txt", ".text", ".md"})
