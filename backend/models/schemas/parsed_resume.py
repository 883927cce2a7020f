"""Structured entities extracted from a resume."""

from pydantic import ConfigDict

from models.base import CamelModel

_FROZEN = ConfigDict(frozen=True)


class PersonalInfo(CamelModel):
    model_config = _FROZEN

    name: str | None = None
    email: str | None = None
    phone: str | None = None
    location: str | None = None


class ExperienceEntry(CamelModel):
    """A single job. Any field may be missing."""
    model_config = _FROZEN

    title: str | None = None
    company: str | None = None
    duration: str | None = None
    description: str | None = None


class ProjectEntry(CamelModel):
    model_config = _FROZEN

    name: str | None = None
    description: str | None = None
    technologies: list[str] = []


class EducationEntry(CamelModel):
    model_config = _FROZEN

    degree: str | None = None
    institution: str | None = None
    year: str | None = None


class ParsedResume(CamelModel):
    """Aggregate result of one parse call.

    Every top-level field is always present (possibly empty), so consumers
    only need to null-check leaf fields such as ``experience[0].title``.
    """
    model_config = _FROZEN

    personal_info: PersonalInfo = PersonalInfo()
    skills: list[str] = []
    experience: list[ExperienceEntry] = []
    projects: list[ProjectEntry] = []
    education: list[EducationEntry] = []
    certifications: list[str] = []
    languages: list[str] = []
