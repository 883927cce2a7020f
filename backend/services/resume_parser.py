"""Resume text -> ParsedResume.

Runs every field extractor in its own guard: a failing extractor is logged,
reported as a PartialExtractionFailure, and its field stays empty. Only an
empty document is fatal.
"""

import logging
from collections.abc import Callable, Sequence
from enum import Enum
from typing import Any

from config import settings
from models.schemas.parsed_resume import (
    EducationEntry,
    ExperienceEntry,
    ParsedResume,
    PersonalInfo,
    ProjectEntry,
)
from services.entry_extractors import (
    extract_certifications,
    extract_education,
    extract_experience,
    extract_languages,
    extract_projects,
)
from services.errors import EmptyInputError, PartialExtractionFailure
from services.pdf_parser import extract_bullets
from services.section_parser import extract_personal_info, split_lines
from services.skill_extractor import extract_skills

logger = logging.getLogger(__name__)

# Documents with at least this many bullet lines use the strict extractors
STRICT_BULLET_THRESHOLD = 3


class ExtractionMode(str, Enum):
    SIMPLE = "simple"
    STRICT = "strict"
    AUTO = "auto"


def resolve_mode(text: str, mode: ExtractionMode | str | None = None) -> ExtractionMode:
    """Turn ``auto`` (or an unset mode) into simple/strict for this document."""
    resolved = ExtractionMode(mode or settings.extraction_mode)
    if resolved is ExtractionMode.AUTO:
        bullets = extract_bullets(text)
        resolved = ExtractionMode.STRICT if len(bullets) >= STRICT_BULLET_THRESHOLD else ExtractionMode.SIMPLE
    return resolved


def parse_resume_with_report(
    text: str, mode: ExtractionMode | str | None = None
) -> tuple[ParsedResume, list[PartialExtractionFailure]]:
    """Parse resume text, returning the result and any per-field failures."""
    if not text or not text.strip():
        raise EmptyInputError()

    lines = split_lines(text)
    strict = resolve_mode(text, mode) is ExtractionMode.STRICT
    logger.info("Parsing resume: %d lines, %s extraction", len(lines), "strict" if strict else "simple")

    extractors: list[tuple[str, Callable[[], Any]]] = [
        ("personal_info", lambda: extract_personal_info(lines)),
        ("skills", lambda: extract_skills(text, lines)),
        ("experience", lambda: extract_experience(lines, strict=strict)),
        ("projects", lambda: extract_projects(lines, strict=strict)),
        ("education", lambda: extract_education(lines, strict=strict)),
        ("certifications", lambda: extract_certifications(lines, strict=strict)),
        ("languages", lambda: extract_languages(lines)),
    ]

    fields: dict[str, Any] = {}
    failures: list[PartialExtractionFailure] = []
    for field, extractor in extractors:
        try:
            fields[field] = extractor()
        except Exception as e:
            failure = PartialExtractionFailure(field, e)
            logger.warning("Resume %s extraction failed, leaving it empty: %s", field, e)
            failures.append(failure)

    resume = ParsedResume(**fields)
    logger.info(
        "Resume parsed: %d skills, %d experience, %d projects, %d education",
        len(resume.skills), len(resume.experience), len(resume.projects), len(resume.education),
    )
    return resume, failures


def parse_resume_content(text: str, mode: ExtractionMode | str | None = None) -> ParsedResume:
    """Parse resume text into a ParsedResume. Raises EmptyInputError on empty text."""
    resume, _ = parse_resume_with_report(text, mode)
    return resume


def build_manual_resume(
    personal_info: PersonalInfo | dict | None = None,
    skills: Sequence[str] | None = None,
    experience: Sequence[ExperienceEntry | dict] | None = None,
    projects: Sequence[ProjectEntry | dict] | None = None,
    education: Sequence[EducationEntry | dict] | None = None,
) -> ParsedResume:
    """Resume entered by hand; certifications and languages stay empty."""
    return ParsedResume(
        personal_info=personal_info or PersonalInfo(),
        skills=list(skills or []),
        experience=list(experience or []),
        projects=list(projects or []),
        education=list(education or []),
    )
