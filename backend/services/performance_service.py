"""Interview performance analysis: backends first, rule-based scoring as fallback."""

import logging
from collections.abc import Sequence

from models.responses import PerformanceReport
from models.schemas.interview import Answer, JobDetails, Question
from services.answer_analyzer import analyze_answers
from services.fallback import generate_with_fallback
from services.feedback_generator import generate_detailed_feedback, generate_feedback
from services.llm_output import parse_performance
from services.prompt_builder import build_performance_prompt
from services.score_calculator import calculate_scores

logger = logging.getLogger(__name__)

SMART_SOURCE = "smart"


def generate_smart_analysis(
    questions: Sequence[Question], answers: Sequence[Answer], job: JobDetails
) -> PerformanceReport:
    """Deterministic report: lexical analysis, score regimes, rule-based feedback."""
    analysis = analyze_answers([a.answer for a in answers])
    scores = calculate_scores(analysis).rounded()
    strengths, weaknesses, suggestions = generate_feedback(analysis, job.title)
    logger.debug(
        "Smart analysis: %d answers, %d nonsensical, %d poor, overall %d",
        analysis.answer_count, analysis.nonsensical_answers, analysis.poor_quality_answers, scores.overall,
    )
    return PerformanceReport(
        overall_score=scores.overall,
        technical_score=scores.technical,
        behavioral_score=scores.behavioral,
        communication_score=scores.communication,
        strengths=strengths,
        weaknesses=weaknesses,
        suggestions=suggestions,
        detailed_feedback=generate_detailed_feedback(questions, answers, job),
        source=SMART_SOURCE,
    )


async def analyze_performance(
    questions: Sequence[Question], answers: Sequence[Answer], job: JobDetails
) -> PerformanceReport:
    logger.info("Performance analysis: %d/%d questions answered", len(answers), len(questions))
    prompt = build_performance_prompt(questions, answers, job)

    result = await generate_with_fallback(
        prompt,
        parse=parse_performance,
        fallback=lambda: generate_smart_analysis(questions, answers, job),
        fallback_source=SMART_SOURCE,
    )
    return result.value.model_copy(update={"source": result.source})
