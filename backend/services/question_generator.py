"""Template-based interview questions built from job details and a parsed resume.

Used when no generative backend produced questions. Five base questions
always come first; role-specific ones are appended and cut off at ``limit``.
"""

from models.schemas.interview import JobDetails, Question
from models.schemas.parsed_resume import ParsedResume

DEFAULT_QUESTION_LIMIT = 5

# Skills that trigger the "staying up to date" question for software roles
CORE_PROGRAMMING_SKILLS = frozenset({"javascript", "python", "java", "react", "node.js", "typescript"})

SOFTWARE_TRIGGERS = ("software", "developer", "programmer")
DATA_TRIGGERS = ("data", "analyst", "scientist")
LEADERSHIP_TRIGGERS = ("manager", "lead", "director")

_CATEGORY_RULES = (
    ("Technical", ("technical", "technology", "coding", "programming")),
    ("Behavioral", ("behavior", "situation", "challenge", "conflict")),
    ("Motivation", ("motivation", "interest", "why")),
    ("Teamwork", ("team", "collaboration", "work with")),
)


def categorize_question(text: str) -> str:
    """Guess a category for a question that came without one."""
    lower = text.lower()
    for category, keywords in _CATEGORY_RULES:
        if any(k in lower for k in keywords):
            return category
    return "General"


def basic_questions() -> list[Question]:
    """Fixed general questions, independent of job and resume."""
    return [
        Question(id=1, text="Tell me about yourself and your professional background.", category="General"),
        Question(id=2, text="What are your greatest strengths and how do they apply to this role?", category="Behavioral"),
        Question(id=3, text="Describe a challenging situation you faced at work and how you handled it.", category="Behavioral"),
        Question(id=4, text="Why are you interested in this position and our company?", category="Motivation"),
        Question(id=5, text="Where do you see yourself in 5 years?", category="Career"),
    ]


def _base_questions(job: JobDetails, resume: ParsedResume | None) -> list[Question]:
    role = f"the {job.title} role" if job.title else "this role"
    company = job.company or "our company"

    if resume and resume.skills:
        technical = (
            f"I see you have experience with {', '.join(resume.skills[:3])}. "
            "Can you elaborate on how you've used these skills in your previous work?"
        )
    else:
        technical = (
            "Can you tell me about your experience with the technologies and skills "
            f"required for {role}?"
        )

    if resume and resume.projects:
        project = resume.projects[0].name or "one of your projects"
        challenge = f"Tell me about {project}. What challenges did you face and how did you overcome them?"
    else:
        challenge = "What challenges have you faced in your previous projects and how did you overcome them?"

    previous_company = resume.experience[0].company if resume and resume.experience else None
    if previous_company:
        motivation = (
            f"What draws you from {previous_company} to {company}, "
            f"and what excites you about {role}?"
        )
    else:
        motivation = f"Why are you interested in joining {company} and what excites you about {role}?"

    if resume and resume.experience:
        previous_role = resume.experience[0].title or "your previous position"
        conflict = (
            f"In your role as {previous_role}, describe a situation where you had to work with "
            "a difficult team member or resolve a conflict."
        )
    else:
        conflict = "Describe a situation where you had to work with a difficult team member or resolve a conflict."

    degree = resume.education[0].degree if resume and resume.education else None
    if degree:
        career = (
            f"With your background in {degree}, what are your career goals for the next "
            "3-5 years and how does this position align with them?"
        )
    else:
        career = "What are your career goals for the next 3-5 years and how does this position align with them?"

    return [
        Question(id=1, text=technical, category="Technical"),
        Question(id=2, text=challenge, category="Behavioral"),
        Question(id=3, text=motivation, category="Motivation"),
        Question(id=4, text=conflict, category="Behavioral"),
        Question(id=5, text=career, category="Career"),
    ]


def _mentions_data(text: str | None) -> bool:
    lower = (text or "").lower()
    return "data" in lower or "analysis" in lower


def _role_specific_questions(job: JobDetails, resume: ParsedResume | None) -> list[Question]:
    title = job.title.lower()
    questions: list[Question] = []

    if any(t in title for t in SOFTWARE_TRIGGERS):
        if resume and resume.projects:
            project = resume.projects[0].name or "a software project"
            text = (
                f"I noticed you worked on {project}. Can you walk me through the technical "
                "challenges you faced and how you solved them?"
            )
        else:
            text = "Can you walk me through a complex coding problem you solved recently?"
        questions.append(Question(id=6, text=text, category="Technical"))

        core = [s for s in (resume.skills if resume else []) if s.lower() in CORE_PROGRAMMING_SKILLS]
        if core:
            text = (
                f"You mention experience with {' and '.join(core[:2])}. How do you stay updated "
                "with these technologies and what recent changes have excited you?"
            )
        else:
            text = "How do you stay updated with the latest technologies and programming languages?"
        questions.append(Question(id=7, text=text, category="Technical"))

    if any(t in title for t in DATA_TRIGGERS):
        data_project = next(
            (p for p in (resume.projects if resume else []) if _mentions_data(p.description)), None
        )
        if data_project:
            text = (
                f"Tell me about {data_project.name or 'your data project'} and the insights "
                "you discovered during your analysis."
            )
        else:
            text = "Describe a data analysis project you worked on and the insights you discovered."
        questions.append(Question(id=8, text=text, category="Technical"))
        questions.append(Question(id=9, text="How do you handle large datasets and ensure data quality?", category="Technical"))

    if any(t in title for t in LEADERSHIP_TRIGGERS):
        leadership_role = next(
            (
                e for e in (resume.experience if resume else [])
                if e.title and ("lead" in e.title.lower() or "manager" in e.title.lower())
            ),
            None,
        )
        if leadership_role:
            text = (
                f"In your role as {leadership_role.title}, tell me about a time when you had "
                "to lead your team through a difficult project."
            )
        else:
            text = "Tell me about a time when you had to lead a team through a difficult project."
        questions.append(Question(id=10, text=text, category="Leadership"))
        questions.append(
            Question(id=11, text="How do you motivate team members and handle underperforming employees?", category="Leadership")
        )

    return questions


def generate_smart_questions(
    job: JobDetails, resume: ParsedResume | None = None, limit: int = DEFAULT_QUESTION_LIMIT
) -> list[Question]:
    """Base questions followed by role-specific ones, truncated to ``limit``."""
    questions = _base_questions(job, resume) + _role_specific_questions(job, resume)
    return questions[:limit]
