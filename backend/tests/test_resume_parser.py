import pytest
from pydantic import ValidationError

from services import resume_parser
from services.errors import EmptyInputError
from services.resume_parser import (
    ExtractionMode,
    build_manual_resume,
    parse_resume_content,
    parse_resume_with_report,
    resolve_mode,
)

JOHN_DOE = "\n".join([
    "John Doe",
    "john@x.com",
    "+1 555-123-4567",
    "Skills",
    "Python, React, AWS",
    "Experience",
    "Software Engineer at Acme - Built internal tools",
])

BULLETED_RESUME = """Jane Smith
jane@example.com
Experience
Senior Software Engineer
Initech Solutions Inc
Austin, TX
Jan 2021 - Present
• Led migration of payment services to Kubernetes
• Cut deployment time by 40%
• Mentored four junior engineers
Education
Stanford University
Bachelor of Science in Computer Science
2016
"""


def test_john_doe_resume():
    resume = parse_resume_content(JOHN_DOE)
    assert resume.personal_info.name == "John Doe"
    assert resume.personal_info.email == "john@x.com"
    assert "555-123-4567" in resume.personal_info.phone
    assert {"Python", "React", "AWS"} <= set(resume.skills)
    assert resume.experience[0].title == "Software Engineer"
    assert resume.experience[0].company == "Acme"


def test_all_fields_present_in_camel_case():
    data = parse_resume_content("Just one line of text").model_dump(by_alias=True)
    assert set(data) == {
        "personalInfo", "skills", "experience", "projects",
        "education", "certifications", "languages",
    }
    assert data["experience"] == []
    assert data["certifications"] == []


@pytest.mark.parametrize("text", ["", "   ", "\n\n\t"])
def test_empty_text_rejected(text):
    with pytest.raises(EmptyInputError):
        parse_resume_content(text)


def test_failing_extractor_leaves_field_empty(monkeypatch):
    def boom(lines, strict=False):
        raise RuntimeError("extractor exploded")

    monkeypatch.setattr(resume_parser, "extract_experience", boom)
    resume, failures = parse_resume_with_report(JOHN_DOE)

    assert resume.experience == []
    assert resume.personal_info.name == "John Doe"
    assert [f.field for f in failures] == ["experience"]
    assert isinstance(failures[0].cause, RuntimeError)


def test_no_failures_reported_for_clean_parse():
    _, failures = parse_resume_with_report(JOHN_DOE)
    assert failures == []


def test_resolve_mode():
    assert resolve_mode(JOHN_DOE, "auto") is ExtractionMode.SIMPLE
    assert resolve_mode(BULLETED_RESUME, "auto") is ExtractionMode.STRICT
    assert resolve_mode(BULLETED_RESUME, ExtractionMode.SIMPLE) is ExtractionMode.SIMPLE
    assert resolve_mode(JOHN_DOE, "strict") is ExtractionMode.STRICT


def test_resolve_mode_rejects_unknown():
    with pytest.raises(ValueError):
        resolve_mode(JOHN_DOE, "fuzzy")


def test_bulleted_resume_uses_strict_extractors():
    resume = parse_resume_content(BULLETED_RESUME)
    assert len(resume.experience) == 1
    job = resume.experience[0]
    assert job.title == "Senior Software Engineer"
    assert job.company == "Initech Solutions Inc"
    assert job.duration == "Jan 2021 - Present"
    assert "Kubernetes" in job.description
    assert resume.education[0].institution == "Stanford University"


def test_manual_resume():
    resume = build_manual_resume(
        personal_info={"name": "Ada Lovelace", "email": "ada@example.com"},
        skills=["Python", "SQL"],
        experience=[{"title": "Analyst", "company": "Engines Ltd"}],
    )
    assert resume.personal_info.name == "Ada Lovelace"
    assert resume.skills == ["Python", "SQL"]
    assert resume.experience[0].company == "Engines Ltd"
    assert resume.projects == []
    assert resume.certifications == []
    assert resume.languages == []


def test_manual_resume_defaults():
    resume = build_manual_resume()
    assert resume.personal_info.name is None
    assert resume.skills == []


def test_parsed_resume_is_immutable():
    resume = parse_resume_content(JOHN_DOE)
    with pytest.raises(ValidationError):
        resume.skills = []
    with pytest.raises(ValidationError):
        resume.personal_info.name = "Someone Else"
