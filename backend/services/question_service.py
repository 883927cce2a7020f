"""Interview question generation: backends first, templates as fallback."""

import logging

from config import settings
from models.responses import QuestionsResponse
from models.schemas.interview import JobDetails
from models.schemas.parsed_resume import ParsedResume
from services.fallback import generate_with_fallback
from services.llm_output import parse_questions
from services.prompt_builder import build_question_prompt
from services.question_generator import generate_smart_questions

logger = logging.getLogger(__name__)

SMART_SOURCE = "smart"


async def generate_questions(job: JobDetails, resume: ParsedResume | None = None) -> QuestionsResponse:
    count = settings.question_count
    logger.info(
        "Question generation for %r at %r, resume %s",
        job.title, job.company, "present" if resume else "not provided",
    )
    prompt = build_question_prompt(job, resume, count=count)

    result = await generate_with_fallback(
        prompt,
        parse=parse_questions,
        fallback=lambda: generate_smart_questions(job, resume, limit=count),
        fallback_source=SMART_SOURCE,
    )
    questions = result.value
    return QuestionsResponse(questions=questions, total_questions=len(questions), source=result.source)
