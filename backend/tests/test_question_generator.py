import pytest

from models.schemas.interview import JobDetails
from models.schemas.parsed_resume import (
    EducationEntry,
    ExperienceEntry,
    ParsedResume,
    ProjectEntry,
)
from services.question_generator import (
    basic_questions,
    categorize_question,
    generate_smart_questions,
)

RESUME = ParsedResume(
    skills=["Python", "React", "Docker", "AWS"],
    experience=[ExperienceEntry(title="Team Lead", company="Acme")],
    projects=[ProjectEntry(name="Inventory Tracker", description="Data analysis of stock levels")],
    education=[EducationEntry(degree="B.S. Computer Science", institution="State University")],
)


def test_inventory_tracker_question():
    questions = generate_smart_questions(JobDetails(title="Software Engineer"), RESUME)
    assert len(questions) == 5
    assert any("Inventory Tracker" in q.text for q in questions)


def test_questions_reference_resume():
    questions = generate_smart_questions(JobDetails(title="Software Engineer", company="Globex"), RESUME)
    texts = [q.text for q in questions]
    assert "Python, React, Docker" in texts[0]
    assert "from Acme to Globex" in texts[2]
    assert "In your role as Team Lead" in texts[3]
    assert "B.S. Computer Science" in texts[4]
    assert [q.id for q in questions] == [1, 2, 3, 4, 5]


def test_questions_without_resume():
    questions = generate_smart_questions(JobDetails())
    assert len(questions) == 5
    assert questions[0].text.endswith("required for this role?")
    assert "our company" in questions[2].text


def test_role_specific_questions_follow_base_questions():
    job = JobDetails(title="Lead Data Software Developer")
    questions = generate_smart_questions(job, RESUME, limit=20)
    assert [q.id for q in questions] == list(range(1, 12))
    assert "You mention experience with Python and React" in questions[6].text
    assert "Tell me about Inventory Tracker and the insights" in questions[7].text
    assert questions[9].text.startswith("In your role as Team Lead")
    assert questions[10].category == "Leadership"


def test_limit_truncates():
    questions = generate_smart_questions(JobDetails(title="Data Analyst"), None, limit=7)
    assert len(questions) == 7
    assert questions[5].text.startswith("Describe a data analysis project")


def test_basic_questions():
    questions = basic_questions()
    assert len(questions) == 5
    assert len({q.id for q in questions}) == 5


@pytest.mark.parametrize(
    "text, category",
    [
        ("What programming languages do you prefer?", "Technical"),
        ("Describe a conflict with a coworker", "Behavioral"),
        ("Why do you want this job?", "Motivation"),
        ("How do you work with designers?", "Teamwork"),
        ("Where do you live?", "General"),
    ],
)
def test_categorize_question(text, category):
    assert categorize_question(text) == category
