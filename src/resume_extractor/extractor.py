"""Line-oriented heuristic extraction of resume fields from plain text.

The extractor walks the non-empty lines once, tracking which section
header (SKILLS, EXPERIENCE, EDUCATION, CERTIFICATIONS) was seen last.
Contact fields are picked up from anywhere in the document on a
first-match-wins basis; section lines are split on commas or dashes.
The matching rules are deliberately literal substring checks.
"""

from __future__ import annotations

from resume_core.constants import (
    ADDRESS_KEYWORD,
    ADDRESS_SEPARATOR,
    SECTION_KEYWORDS,
    UNKNOWN_COMPANY,
    UNKNOWN_DURATION,
    UNKNOWN_INSTITUTION,
    UNKNOWN_POSITION,
)
from resume_core.models.resume import EducationEntry, ExperienceEntry, ParsedResume


def split_lines(text: str) -> list[str]:
    """Split text into trimmed, non-empty lines, preserving order."""
    return [stripped for line in text.split("\n") if (stripped := line.strip())]


def detect_section(line: str) -> str | None:
    """Return the section a header line opens, or None for content lines."""
    upper = line.upper()
    for keyword, section in SECTION_KEYWORDS.items():
        if keyword in upper:
            return section
    return None


class ResumeFieldExtractor:
    """Single-use accumulator for one extraction run.

    Use :func:`extract` rather than instantiating this directly.
    """

    def __init__(self) -> None:
        self.first_name: str | None = None
        self.last_name: str | None = None
        self.email: str | None = None
        self.phone: str | None = None
        self.address: str | None = None
        self.skills: list[str] = []
        self.experience: list[ExperienceEntry] = []
        self.education: list[EducationEntry] = []
        self.certifications: list[str] = []
        self.current_section: str | None = None

    def run(self, text: str) -> ParsedResume:
        """Process every line and build the record."""
        for index, line in enumerate(split_lines(text)):
            self._process_line(index, line)
        return ParsedResume(
            first_name=self.first_name,
            last_name=self.last_name,
            email=self.email,
            phone=self.phone,
            address=self.address,
            skills=self.skills,
            experience=self.experience,
            education=self.education,
            certifications=self.certifications,
        )

    def _process_line(self, index: int, line: str) -> None:
        if index == 0 and self.first_name is None:
            self._extract_name(line)
        self._extract_contact(line)

        section = detect_section(line)
        if section is not None:
            self.current_section = section
            return

        if self.current_section == "skills":
            self._add_skills(line)
        elif self.current_section == "experience":
            self._add_experience(line)
        elif self.current_section == "education":
            self._add_education(line)
        elif self.current_section == "certifications":
            self._add_certification(line)

    def _extract_name(self, line: str) -> None:
        tokens = line.split()
        if len(tokens) >= 2:
            self.first_name = tokens[0]
            self.last_name = " ".join(tokens[1:])

    def _extract_contact(self, line: str) -> None:
        if self.email is None and "@" in line:
            self.email = line
        if self.phone is None and "(" in line and ")" in line:
            self.phone = line
        if self.address is None and ADDRESS_SEPARATOR in line and ADDRESS_KEYWORD in line:
            self.address = line

    def _add_skills(self, line: str) -> None:
        self.skills.extend(token for part in line.split(",") if (token := part.strip()))

    def _add_experience(self, line: str) -> None:
        if "-" not in line:
            return
        left, right = line.split("-", 1)
        words = left.split()
        self.experience.append(
            ExperienceEntry(
                title=" ".join(words[:2]) or UNKNOWN_POSITION,
                company=" ".join(words[2:]) or UNKNOWN_COMPANY,
                duration=right.strip() or UNKNOWN_DURATION,
                description="",
            )
        )

    def _add_education(self, line: str) -> None:
        if "-" not in line:
            return
        left, right = line.split("-", 1)
        self.education.append(
            EducationEntry(
                degree=left.strip(),
                institution=UNKNOWN_INSTITUTION,
                year=right.strip(),
            )
        )

    def _add_certification(self, line: str) -> None:
        if "-" not in line:
            return
        self.certifications.append(line.split("-", 1)[0].strip())


def extract(text: str) -> ParsedResume:
    """Map unstructured resume text to a :class:`ParsedResume`.

    Never raises for string input; fields the heuristics cannot find are
    left at their defaults.
    """
    return ResumeFieldExtractor().run(text)
