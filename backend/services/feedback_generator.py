"""Rule-based interview feedback: summary lists and per-question comments."""

from collections.abc import Sequence

from models.schemas.answer_analysis import AnswerAnalysis
from models.schemas.interview import Answer, JobDetails, Question
from services.skill_extractor import find_vocabulary_skills

NO_ANSWER_FEEDBACK = "No answer provided. Consider preparing responses for common interview questions."
DEFAULT_QUESTION_FEEDBACK = "Good response. Consider adding more specific examples to strengthen your answer."

DEFAULT_STRENGTHS = (
    "Good communication skills",
    "Demonstrated relevant experience",
    "Provided specific examples",
)
DEFAULT_WEAKNESSES = (
    "Could provide more detailed technical explanations",
    "Consider using more specific metrics in answers",
    "Practice STAR method for behavioral questions",
)
BASELINE_SUGGESTIONS = (
    "Practice common interview questions regularly",
    "Prepare specific examples for your experience",
    "Use the STAR method (Situation, Task, Action, Result)",
    "Research the company and role thoroughly",
    "Practice speaking clearly and confidently",
)

# Below this mean word count answers are flagged as too brief
DETAILED_ANSWER_WORDS = 50


def generate_feedback(
    analysis: AnswerAnalysis, job_title: str = ""
) -> tuple[list[str], list[str], list[str]]:
    """Return (strengths, weaknesses, suggestions). No list is ever empty."""
    strengths: list[str] = []
    if analysis.experience_mentions > 0:
        strengths.append("Demonstrated relevant experience and background")
    if analysis.problem_solving > 0:
        strengths.append("Showed problem-solving abilities and critical thinking")
    if analysis.specific_examples > 0:
        strengths.append("Provided specific examples and concrete situations")
    if analysis.communication_quality > 0:
        strengths.append("Good communication skills and clarity in responses")
    if analysis.technical_terms > 0:
        strengths.append("Demonstrated technical knowledge and expertise")
    if not strengths:
        strengths = list(DEFAULT_STRENGTHS)

    brief = analysis.average_word_length < DETAILED_ANSWER_WORDS
    weaknesses: list[str] = []
    if brief:
        weaknesses.append("Could provide more detailed and comprehensive answers")
    if analysis.specific_examples == 0:
        weaknesses.append("Consider using more specific examples and concrete situations")
    if analysis.problem_solving == 0:
        weaknesses.append("Could demonstrate more problem-solving scenarios")
    if analysis.technical_terms == 0 and "technical" in job_title.lower():
        weaknesses.append("Could elaborate more on technical skills and knowledge")
    if not weaknesses:
        weaknesses = list(DEFAULT_WEAKNESSES)

    suggestions = list(BASELINE_SUGGESTIONS)
    if brief:
        suggestions.append("Practice giving more detailed responses")
    if analysis.specific_examples == 0:
        suggestions.append("Prepare specific examples for common interview questions")

    return strengths, weaknesses, suggestions


def _is_relevant(answer_text: str, job: JobDetails) -> bool:
    for value in (job.title, job.company):
        if value.strip() and value.strip().lower() in answer_text:
            return True
    if "relevant" in answer_text or "applicable" in answer_text:
        return True
    required = set(find_vocabulary_skills(job.requirements))
    return any(skill in required for skill in find_vocabulary_skills(answer_text))


def _question_feedback(question: Question, answer: str, job: JobDetails) -> str:
    text = answer.lower()
    words = len(answer.split())
    category = question.category.lower()
    parts: list[str] = []

    if "technical" in category:
        if any(w in text for w in ("experience", "worked", "developed")):
            parts.append("Good use of specific experience and examples.")
        else:
            parts.append("Consider providing more specific technical examples from your experience.")
        if words < 30:
            parts.append("Could elaborate more on technical details and implementation.")
    elif "behavioral" in category:
        if any(w in text for w in ("situation", "task", "action", "result")):
            parts.append("Excellent use of STAR method for behavioral questions.")
        else:
            parts.append("Consider using the STAR method (Situation, Task, Action, Result) for better structure.")
        if words < 40:
            parts.append("Could provide more detailed examples and context.")
    elif words < 20:
        parts.append("Consider providing more comprehensive answers with specific examples.")
    elif words > 100:
        parts.append("Good detailed response, but ensure you stay focused on the key points.")
    else:
        parts.append("Well-structured response with good detail.")

    if 30 <= words <= 80:
        parts.append("Good communication skills demonstrated.")
    elif words < 30:
        parts.append("Consider expanding your answer for better clarity.")

    if _is_relevant(text, job):
        parts.append("Good relevance to the position and company.")

    return " ".join(parts) or DEFAULT_QUESTION_FEEDBACK


def generate_detailed_feedback(
    questions: Sequence[Question], answers: Sequence[Answer], job: JobDetails
) -> dict[str, str]:
    """Feedback per question, keyed ``question<N>`` (1-based)."""
    by_index = {}
    for answer in answers:
        by_index.setdefault(answer.question_index, answer)

    feedback: dict[str, str] = {}
    for index, question in enumerate(questions):
        key = f"question{index + 1}"
        answer = by_index.get(index)
        if answer is None:
            feedback[key] = NO_ANSWER_FEEDBACK
        else:
            feedback[key] = _question_feedback(question, answer.answer, job)
    return feedback
