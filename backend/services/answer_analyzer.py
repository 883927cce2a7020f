"""Deterministic lexical analysis of interview answers.

Each answer is classified into one quality tier (first match wins) and, unless
nonsensical, scanned for signal vocabularies. A signal counts at most once per
answer. Batch results are the sum of per-answer counters.
"""

import re
from collections.abc import Sequence
from enum import Enum

from models.schemas.answer_analysis import AnswerAnalysis


class AnswerQuality(str, Enum):
    NONSENSICAL = "nonsensical"
    POOR = "poor"
    MEANINGFUL = "meaningful"


# Patterns for very short answers (<= 4 words) such as "yup", "tyu", "???", "aaa"
_NONSENSICAL_PATTERNS = (
    re.compile(r"^[a-z]{1,4}$"),                   # a short letters-only token
    re.compile(r"^[^a-z0-9]+$"),                   # no alphanumerics at all
    re.compile(r"^[0-9\s]*$"),                     # digits only
    re.compile(r"(.)\1{2,}"),                      # "aaa", "!!!", runs of spaces
    re.compile(r"^[bcdfghjklmnpqrstvwxyz]{1,4}$"),  # consonants only
)

MEANINGFUL_WORDS = (
    "worked", "developed", "created", "built", "implemented", "designed",
    "managed", "led", "collaborated", "solved", "challenge", "problem",
    "experience", "project", "team", "result", "outcome", "success",
    "learned", "improved", "optimized", "enhanced", "achieved",
)

TECHNICAL_TERMS = (
    "technology", "software", "system", "development", "coding", "programming",
    "api", "database", "framework", "react", "node", "javascript",
)
EXPERIENCE_TERMS = (
    "experience", "worked", "project", "developed", "implemented", "built",
    "created", "managed", "led",
)
PROBLEM_SOLVING_TERMS = (
    "challenge", "problem", "solved", "overcame", "difficult", "troubleshoot",
    "debug", "fix", "issue",
)
SPECIFIC_EXAMPLE_TERMS = (
    "example", "specific", "instance", "case", "situation", "time when",
    "once", "when i",
)

_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")


def _normalize(text: str) -> str:
    return text.lower().strip()


def word_count(text: str) -> int:
    return len(text.split())


def is_nonsensical(text: str, words: int) -> bool:
    """Single words, or very short answers matching a gibberish pattern."""
    if words <= 1:
        return True
    if words <= 4:
        return any(p.search(text) for p in _NONSENSICAL_PATTERNS)
    return False


def is_poor_quality(text: str, words: int) -> bool:
    if words < 10:
        return True
    if words < 20:
        return not any(w in text for w in MEANINGFUL_WORDS)
    return False


def classify_answer(answer: str) -> AnswerQuality:
    text = _normalize(answer)
    words = word_count(text)
    if is_nonsensical(text, words):
        return AnswerQuality.NONSENSICAL
    if is_poor_quality(text, words):
        return AnswerQuality.POOR
    return AnswerQuality.MEANINGFUL


def _mentions(text: str, vocabulary: Sequence[str]) -> int:
    return int(any(term in text for term in vocabulary))


def analyze_answer(answer: str) -> AnswerAnalysis:
    """Counters for a single answer."""
    text = _normalize(answer)
    words = word_count(text)
    quality = classify_answer(answer)

    if quality is AnswerQuality.NONSENSICAL:
        return AnswerAnalysis(nonsensical_answers=1, answer_count=1, total_words=words)

    # One terminated sentence already yields two segments ("...end." -> ["...end", ""])
    multi_sentence = len(_SENTENCE_SPLIT_RE.split(text)) > 1
    return AnswerAnalysis(
        technical_terms=_mentions(text, TECHNICAL_TERMS),
        experience_mentions=_mentions(text, EXPERIENCE_TERMS),
        problem_solving=_mentions(text, PROBLEM_SOLVING_TERMS),
        specific_examples=_mentions(text, SPECIFIC_EXAMPLE_TERMS),
        communication_quality=int(20 <= words <= 200 and multi_sentence),
        poor_quality_answers=int(quality is AnswerQuality.POOR),
        meaningful_answers=int(quality is AnswerQuality.MEANINGFUL),
        answer_count=1,
        total_words=words,
    )


_COUNTERS = (
    "technical_terms", "experience_mentions", "problem_solving", "specific_examples",
    "communication_quality", "nonsensical_answers", "poor_quality_answers",
    "meaningful_answers", "answer_count", "total_words",
)


def analyze_answers(answers: Sequence[str]) -> AnswerAnalysis:
    """Aggregate analysis for a batch of answer texts."""
    totals = dict.fromkeys(_COUNTERS, 0)
    for answer in answers:
        single = analyze_answer(answer)
        for name in _COUNTERS:
            totals[name] += getattr(single, name)

    count = totals["answer_count"]
    average = totals["total_words"] / count if count else 0.0
    return AnswerAnalysis(**totals, average_word_length=average)
