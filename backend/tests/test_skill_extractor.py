from services.section_parser import split_lines
from services.skill_extractor import (
    dedupe_casefold,
    extract_skills,
    extract_skills_from_line,
    find_vocabulary_skills,
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


def test_extract_skills_from_line_keeps_casing():
    assert extract_skills_from_line("Python, React | AWS • Docker") == ["Python", "React", "AWS", "Docker"]


def test_extract_skills_from_line_ignores_unknown_tokens():
    assert extract_skills_from_line("Communication, Python, Leadership") == ["Python"]


def test_section_skills_keep_written_case():
    skills = extract_skills(JOHN_DOE, split_lines(JOHN_DOE))
    assert {"Python", "React", "AWS"} <= set(skills)


def test_section_and_body_mentions_are_deduplicated():
    text = "Skills\nPython, Docker\nExperience\nWrote python services running in docker"
    skills = extract_skills(text, split_lines(text))
    assert [s for s in skills if s.lower() == "python"] == ["Python"]
    assert [s for s in skills if s.lower() == "docker"] == ["Docker"]


def test_body_only_skills_use_vocabulary_form():
    text = "Built services in Django and Docker"
    skills = extract_skills(text, split_lines(text))
    assert "django" in skills
    assert "docker" in skills


def test_extract_skills_is_idempotent():
    first = extract_skills(JOHN_DOE, split_lines(JOHN_DOE))
    second = extract_skills(JOHN_DOE, split_lines(JOHN_DOE))
    assert first == second
    assert len(first) == len({s.lower() for s in first})


def test_find_vocabulary_skills():
    assert find_vocabulary_skills("Used Kubernetes and Terraform") == ["kubernetes", "terraform"]
    assert find_vocabulary_skills("") == []


def test_dedupe_casefold_keeps_first_spelling():
    assert dedupe_casefold(["Python", "python", "PYTHON", "Go"]) == ["Python", "Go"]
