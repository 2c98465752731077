"""Interpretation of the user's self-reported confidence (1-10)."""

from typing import List, Tuple

from ..models import ConfidenceAssessment

# (min, max, label), inclusive
CONFIDENCE_LEVELS: List[Tuple[int, int, str]] = [
    (1, 3, 'Uncertain'),
    (4, 6, 'Moderate'),
    (7, 8, 'Confident'),
    (9, 10, 'Very Confident'),
]

DEFAULT_CONFIDENCE = 7


def confidence_level(score: int) -> str:
    """Level label for a score; out-of-range scores read as the lowest level."""
    for low, high, label in CONFIDENCE_LEVELS:
        if low <= score <= high:
            return label
    return CONFIDENCE_LEVELS[0][2]


def confidence_insight(score: int) -> str:
    """Advice matching how sure the user says they are."""
    if score < 5:
        return 'You seem uncertain. Consider reviewing your priorities or taking more time.'
    elif score <= 7:
        return 'Moderate confidence. Trust your analysis but stay open to new information.'
    return 'You feel confident in this direction. Trust your decision.'


def assess_confidence(score: int = DEFAULT_CONFIDENCE) -> ConfidenceAssessment:
    """Assess a self-reported confidence score.

    Args:
        score: Confidence on a 1-10 scale

    Returns:
        ConfidenceAssessment with level and insight
    """
    return ConfidenceAssessment(score=score, level=confidence_level(score), insight=confidence_insight(score))
