"""Parsed resume record and the parse result that wraps it."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

_RECORD_CONFIG = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class ExperienceEntry(BaseModel):
    """A single work history line."""

    model_config = _RECORD_CONFIG

    title: str = Field(description="Job title")
    company: str = Field(description="Employer name")
    duration: str = Field(description="Free-form duration, e.g. '2019-2022'")
    description: str = Field(default="", description="Role description")


class EducationEntry(BaseModel):
    """A single education line."""

    model_config = _RECORD_CONFIG

    degree: str = Field(description="Degree or qualification")
    institution: str = Field(description="School, college or university")
    year: str = Field(description="Completion year or range")


class ParsedResume(BaseModel):
    """Structured candidate fields extracted from resume text.

    Scalar fields stay ``None`` when nothing in the text matched. Sequence
    fields are always lists, possibly empty. JSON output uses camelCase
    keys (``firstName``) to match the web application's stored records.
    """

    model_config = _RECORD_CONFIG

    first_name: str | None = Field(default=None, description="Given name")
    last_name: str | None = Field(default=None, description="Family name(s)")
    email: str | None = Field(default=None, description="Email line, verbatim")
    phone: str | None = Field(default=None, description="Phone line, verbatim")
    address: str | None = Field(default=None, description="Address line, verbatim")
    skills: list[str] = Field(default_factory=list, description="Skills in encounter order")
    experience: list[ExperienceEntry] = Field(
        default_factory=list, description="Work history entries"
    )
    education: list[EducationEntry] = Field(
        default_factory=list, description="Education entries"
    )
    certifications: list[str] = Field(
        default_factory=list, description="Certification names"
    )

    @property
    def is_empty(self) -> bool:
        """True when no field was populated."""
        return not any(
            (
                self.first_name,
                self.last_name,
                self.email,
                self.phone,
                self.address,
                self.skills,
                self.experience,
                self.education,
                self.certifications,
            )
        )

    def to_json_dict(self) -> dict[str, object]:
        """Dump with camelCase keys, the shape the web application stores."""
        return self.model_dump(mode="json", by_alias=True)


class ResumeParseResult(BaseModel):
    """A parsed resume together with where it came from."""

    model_config = ConfigDict(frozen=True)

    resume: ParsedResume = Field(description="Extracted fields")
    source: str | None = Field(default=None, description="Document path, None for raw text")
    raw_text: str = Field(description="Normalized text the extractor consumed")
    content_hash: str = Field(description="SHA-256 hash of raw_text")
    parsed_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), description="When the text was parsed"
    )
