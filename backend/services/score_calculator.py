"""Score regimes for an aggregated AnswerAnalysis.

Regimes, harshest first:
    nonsensical present -> small capped scores, nothing else consulted
    poor quality present -> low weights minus a per-answer penalty
    otherwise            -> standard weights

Batches shorter than the standard five-question slate are projected onto it
(counts and penalty scaled by QUESTION_SLATE_SIZE / answer_count).
"""

from models.schemas.answer_analysis import AnswerAnalysis, ScoreSet

QUESTION_SLATE_SIZE = 5

# (technical, behavioral, communication) points per signal
POOR_QUALITY_WEIGHTS = (15, 12, 20)
MEANINGFUL_WEIGHTS = (20, 15, 25)
POOR_QUALITY_PENALTY = 20


def _clamp(value: float) -> float:
    return max(0.0, min(100.0, value))


def slate_factor(answer_count: int) -> float:
    """Scale for batches under five answers. Applies to the poor-quality penalty too."""
    if answer_count <= 0 or answer_count >= QUESTION_SLATE_SIZE:
        return 1.0
    return QUESTION_SLATE_SIZE / answer_count


def _nonsensical_scores(count: int) -> ScoreSet:
    return ScoreSet(
        overall=min(15, count * 5),
        technical=min(10, count * 3),
        behavioral=min(10, count * 3),
        communication=min(15, count * 4),
    )


def calculate_scores(analysis: AnswerAnalysis) -> ScoreSet:
    if analysis.nonsensical_answers > 0:
        return _nonsensical_scores(analysis.nonsensical_answers)

    factor = slate_factor(analysis.answer_count)
    technical_hits = analysis.technical_terms * factor
    behavioral_hits = (analysis.problem_solving + analysis.specific_examples) * factor
    communication_hits = analysis.communication_quality * factor

    if analysis.poor_quality_answers > 0:
        tech_w, behav_w, comm_w = POOR_QUALITY_WEIGHTS
        penalty = analysis.poor_quality_answers * factor * POOR_QUALITY_PENALTY
    elif analysis.meaningful_answers > 0:
        tech_w, behav_w, comm_w = MEANINGFUL_WEIGHTS
        penalty = 0.0
    else:
        return ScoreSet()

    technical = _clamp(_clamp(technical_hits * tech_w) - penalty)
    behavioral = _clamp(_clamp(behavioral_hits * behav_w) - penalty)
    communication = _clamp(_clamp(communication_hits * comm_w) - penalty)
    overall = _clamp((technical + behavioral + communication) / 3)
    return ScoreSet(
        overall=overall,
        technical=technical,
        behavioral=behavioral,
        communication=communication,
    )
