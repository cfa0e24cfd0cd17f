"""Domain models for resume-extractor."""

from resume_core.models.resume import (
    EducationEntry,
    ExperienceEntry,
    ParsedResume,
    ResumeParseResult,
)

__all__ = [
    "EducationEntry",
    "ExperienceEntry",
    "ParsedResume",
    "ResumeParseResult",
]
