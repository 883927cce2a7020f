"""Reconcile free-form generative output into typed results.

Every parser returns ``None`` when nothing usable was found; callers treat
that as malformed output and move on to the next backend.
"""

import json
import logging
import re
from typing import Any

from models.responses import PerformanceReport
from models.schemas.interview import Question
from services.question_generator import categorize_question

logger = logging.getLogger(__name__)

MAX_PARSED_QUESTIONS = 5
SCORE_FIELDS = ("overallScore", "technicalScore", "behavioralScore", "communicationScore")

DEFAULT_STRENGTHS = ["Good communication skills"]
DEFAULT_WEAKNESSES = ["Could provide more detailed responses"]
DEFAULT_SUGGESTIONS = ["Practice more interview questions"]

_OBJECT_RE = re.compile(r"\{[^}]+\}")
_NUMBERED_QUESTION_RE = re.compile(r"\d+\.\s*([^?]+\?)")
_TRAILING_COMMA_RE = re.compile(r",(\s*[}\]])")


def strip_code_fences(text: str) -> str:
    text = text.strip()
    if text.startswith("```"):
        text = text.split("\n", 1)[1] if "\n" in text else text[3:]
        if text.endswith("```"):
            text = text[:-3]
        text = text.strip()
    return text


def _largest_span(text: str, open_char: str, close_char: str) -> str | None:
    start, end = text.find(open_char), text.rfind(close_char)
    if start == -1 or end <= start:
        return None
    return text[start:end + 1]


def _coerce_id(value: Any, fallback: int) -> int:
    try:
        return int(value) or fallback
    except (TypeError, ValueError, OverflowError):
        return fallback


def _question_from_item(item: Any, index: int) -> Question | None:
    if isinstance(item, str):
        text, category, qid = item, "", index + 1
    elif isinstance(item, dict):
        text = str(item.get("text") or item.get("question") or "")
        category = str(item.get("category") or item.get("type") or "")
        qid = _coerce_id(item.get("id"), index + 1)
    else:
        return None
    text = text.strip()
    if not text:
        return None
    return Question(id=qid, text=text, category=category or categorize_question(text))


# ---------------------------------------------------------------------------
# Questions
# ---------------------------------------------------------------------------

def _questions_from_array(text: str) -> list[Question]:
    span = _largest_span(text, "[", "]")
    if span is None:
        return []
    try:
        items = json.loads(span)
    except json.JSONDecodeError:
        return []
    if not isinstance(items, list):
        return []
    questions = (_question_from_item(item, i) for i, item in enumerate(items))
    return [q for q in questions if q is not None]


def _questions_from_objects(text: str) -> list[Question]:
    questions = []
    for index, raw in enumerate(_OBJECT_RE.findall(text)[:MAX_PARSED_QUESTIONS]):
        try:
            question = _question_from_item(json.loads(raw), index)
        except json.JSONDecodeError:
            # keep the raw object text as the question
            question = Question(id=index + 1, text=raw, category=categorize_question(raw))
        if question is not None and len(question.text) > 10:
            questions.append(question)
    return questions


def _questions_from_numbered_list(text: str) -> list[Question]:
    matches = _NUMBERED_QUESTION_RE.findall(text)[:MAX_PARSED_QUESTIONS]
    return [
        Question(id=i + 1, text=m.strip(), category=categorize_question(m))
        for i, m in enumerate(matches)
    ]


def parse_questions(text: str) -> list[Question] | None:
    """JSON array, then individual objects, then a numbered list."""
    if not text or not text.strip():
        return None
    cleaned = strip_code_fences(text)
    for strategy in (_questions_from_array, _questions_from_objects, _questions_from_numbered_list):
        questions = strategy(cleaned)
        if questions:
            logger.debug("Parsed %d questions via %s", len(questions), strategy.__name__)
            return questions
    logger.info("No questions could be parsed from generated text")
    return None


# ---------------------------------------------------------------------------
# Performance analysis
# ---------------------------------------------------------------------------

def _load_object(candidate: str) -> dict | None:
    try:
        value = json.loads(candidate)
    except json.JSONDecodeError:
        return None
    return value if isinstance(value, dict) else None


def _split_list_text(raw: str) -> list[str]:
    items = (re.sub(r'["\[\]]', "", part).strip() for part in re.split(r"[,\n]", raw))
    return [item for item in items if item]


def extract_analysis_manually(text: str) -> dict:
    """Regex extraction of scores, lists, and per-question feedback."""
    analysis: dict[str, Any] = {}
    for field in SCORE_FIELDS:
        short = field.removesuffix("Score")
        match = (
            re.search(rf'{field}["\s]*:\s*(\d+)', text, re.IGNORECASE)
            or re.search(rf'{short}["\s]*:\s*(\d+)', text, re.IGNORECASE)
        )
        if match:
            analysis[field] = int(match.group(1))

    for field in ("strengths", "weaknesses", "suggestions"):
        match = (
            re.search(rf'{field}["\s]*:\s*\[(.*?)\]', text, re.IGNORECASE | re.DOTALL)
            or re.search(rf'{field}["\s]*:\s*"(.*?)"', text, re.IGNORECASE | re.DOTALL)
        )
        if match:
            analysis[field] = _split_list_text(match.group(1))

    feedback_match = re.search(r'detailedFeedback["\s]*:\s*\{(.*?)\}', text, re.IGNORECASE | re.DOTALL)
    if feedback_match:
        analysis["detailedFeedback"] = {
            f"question{n}": comment
            for n, comment in re.findall(r'"question(\d+)"["\s]*:\s*"(.*?)"', feedback_match.group(1))
        }
    return analysis


def _score(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    return int(max(0.0, min(100.0, number)) + 0.5)


def _string_list(value: Any, default: list[str]) -> list[str]:
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, list):
        return list(default)
    items = [str(v).strip() for v in value if str(v).strip()]
    return items or list(default)


def _to_report(analysis: dict, source: str) -> PerformanceReport | None:
    scores = {field: _score(analysis.get(field)) for field in SCORE_FIELDS}
    if any(value is None for value in scores.values()):
        return None

    feedback = analysis.get("detailedFeedback")
    if not isinstance(feedback, dict):
        feedback = {}
    return PerformanceReport(
        overall_score=scores["overallScore"],
        technical_score=scores["technicalScore"],
        behavioral_score=scores["behavioralScore"],
        communication_score=scores["communicationScore"],
        strengths=_string_list(analysis.get("strengths"), DEFAULT_STRENGTHS),
        weaknesses=_string_list(analysis.get("weaknesses"), DEFAULT_WEAKNESSES),
        suggestions=_string_list(analysis.get("suggestions"), DEFAULT_SUGGESTIONS),
        detailed_feedback={str(k): str(v) for k, v in feedback.items()},
        source=source,
    )


def parse_performance(text: str, source: str = "") -> PerformanceReport | None:
    """Largest JSON object, then with trailing commas removed, then regexes.

    Valid only when all four scores are present. Scores are clamped to 0-100.
    """
    if not text or not text.strip():
        return None
    cleaned = strip_code_fences(text)

    span = _largest_span(cleaned, "{", "}")
    analysis = None
    if span is not None:
        analysis = _load_object(span) or _load_object(_TRAILING_COMMA_RE.sub(r"\1", span))
    report = _to_report(analysis, source) if analysis is not None else None
    if report is None:
        logger.info("Generated analysis is not usable JSON, trying manual extraction")
        report = _to_report(extract_analysis_manually(cleaned), source)
    if report is None:
        logger.info("Generated analysis is missing one or more scores")
    return report
