"""Scoring module."""

from .weighted import WeightedScorer, score, max_possible_score
from .confidence import assess_confidence, confidence_level

__all__ = ["WeightedScorer", "score", "max_possible_score", "assess_confidence", "confidence_level"]
