"""Lexical signals extracted from interview answers, and the scores built on them."""

import math

from pydantic import BaseModel

from models.base import CamelModel


class AnswerAnalysis(CamelModel):
    """Summed per-answer counters for one scoring call."""
    technical_terms: int = 0
    experience_mentions: int = 0
    problem_solving: int = 0
    specific_examples: int = 0
    communication_quality: int = 0
    nonsensical_answers: int = 0
    poor_quality_answers: int = 0
    meaningful_answers: int = 0
    answer_count: int = 0
    total_words: int = 0
    average_word_length: float = 0.0  # mean words per answer


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


class RoundedScores(BaseModel):
    overall: int = 0
    technical: int = 0
    behavioral: int = 0
    communication: int = 0


class ScoreSet(BaseModel):
    """Scores in [0, 100]. Kept fractional until ``rounded()``."""
    overall: float = 0.0
    technical: float = 0.0
    behavioral: float = 0.0
    communication: float = 0.0

    def rounded(self) -> RoundedScores:
        return RoundedScores(
            overall=_round_half_up(self.overall),
            technical=_round_half_up(self.technical),
            behavioral=_round_half_up(self.behavioral),
            communication=_round_half_up(self.communication),
        )
