"""Cognitive-bias heuristics over emotion vectors and the ranking winner."""

import logging
from typing import List, Optional, Sequence

from ..models import CognitivePattern, EmotionalAnalysis, EmotionType, Option
from .emotions import require_every_emotion

logger = logging.getLogger('decision_intel')

# Thresholds are strict (intensity must exceed them)
STRONG_EMOTION = 0.5
NOTABLE_EMOTION = 0.3

FEAR_AVOIDANCE = 'fear-avoidance'
EXCITEMENT_BIAS = 'excitement-bias'
COMFORT_BIAS = 'comfort-bias'
GUILT_DRIVEN = 'guilt-driven'

PATTERN_CATALOG = {
    FEAR_AVOIDANCE: (
        'Fear-Based Avoidance',
        'You may be steering away from options that feel scary, even if they could be valuable.'
    ),
    EXCITEMENT_BIAS: (
        'Excitement Without Planning',
        'The thrill of this option is compelling, but consider the practical details too.'
    ),
    COMFORT_BIAS: (
        'Comfort-Seeking',
        'The appeal of relief is strong, so make sure it aligns with your long-term goals.'
    ),
    GUILT_DRIVEN: (
        'Guilt Influence',
        'Guilt is playing a role in how you view these options. Consider what you truly want.'
    ),
}

WINNER_INSIGHTS = require_every_emotion({
    EmotionType.EXCITEMENT: 'You feel genuine excitement about "{name}." That enthusiasm is worth honoring.',
    EmotionType.RELIEF: 'Choosing "{name}" brings you a sense of relief and peace.',
    EmotionType.FEAR: 'You have some concerns about "{name}," but you\'re facing them courageously.',
    EmotionType.UNCERTAINTY: 'You\'re still working through mixed feelings about "{name}." '
                             'That\'s okay, clarity often comes with time.',
    EmotionType.GUILT: 'There\'s some guilt tied to "{name}." Be gentle with yourself as you process this.',
}, 'WINNER_INSIGHTS')


def _pattern(pattern_id: str, detected: bool) -> CognitivePattern:
    label, description = PATTERN_CATALOG[pattern_id]
    return CognitivePattern(id=pattern_id, label=label, description=description, detected=detected)


class CognitivePatternDetector:
    """Derives bias warnings from emotional analyses and the winning option."""

    def detect(self,
               options: Sequence[Option],
               emotional_analyses: Sequence[EmotionalAnalysis],
               winner_option_id: str) -> List[CognitivePattern]:
        """Evaluate every pattern in the catalog.

        Args:
            options: Options under consideration
            emotional_analyses: One analysis per option
            winner_option_id: Id of the top-ranked option

        Returns:
            All four patterns in catalog order, each with its detected flag.
            Filtering to detected ones is left to the caller.
        """
        winner = next((a for a in emotional_analyses if a.option_id == winner_option_id), None)
        others = [a for a in emotional_analyses if a.option_id != winner_option_id]

        fear_in_others = any(a.has_emotion(EmotionType.FEAR, STRONG_EMOTION) for a in others)
        fear_in_winner = winner is not None and winner.has_emotion(EmotionType.FEAR, NOTABLE_EMOTION)
        excitement_in_winner = winner is not None and winner.has_emotion(EmotionType.EXCITEMENT, STRONG_EMOTION)
        relief_in_winner = winner is not None and winner.has_emotion(EmotionType.RELIEF, NOTABLE_EMOTION)
        guilt_anywhere = any(a.has_emotion(EmotionType.GUILT, NOTABLE_EMOTION) for a in emotional_analyses)

        patterns = [
            _pattern(FEAR_AVOIDANCE, fear_in_others and not fear_in_winner),
            _pattern(EXCITEMENT_BIAS, excitement_in_winner),
            _pattern(COMFORT_BIAS, relief_in_winner and fear_in_others),
            _pattern(GUILT_DRIVEN, guilt_anywhere),
        ]

        logger.debug(f"Detected patterns: {[p.id for p in patterns if p.detected]}")
        return patterns


def detect_cognitive_patterns(options: Sequence[Option],
                              emotional_analyses: Sequence[EmotionalAnalysis],
                              winner_option_id: str) -> List[CognitivePattern]:
    """Evaluate the four cognitive patterns for a ranked decision."""
    return CognitivePatternDetector().detect(options, emotional_analyses, winner_option_id)


def detected_patterns(patterns: Sequence[CognitivePattern]) -> List[CognitivePattern]:
    """Only the patterns that fired, order kept."""
    return [p for p in patterns if p.detected]


def get_emotional_insight(winner_analysis: Optional[EmotionalAnalysis],
                          patterns: Sequence[CognitivePattern]) -> str:
    """Short reflection on the winner's dominant emotion and the first detected bias.

    Args:
        winner_analysis: Emotional analysis of the top-ranked option, if any
        patterns: Output of detect_cognitive_patterns

    Returns:
        Space-joined insight sentences, empty when there is nothing to say
    """
    insights = []

    if winner_analysis is not None and winner_analysis.dominant_emotion is not None:
        template = WINNER_INSIGHTS[winner_analysis.dominant_emotion.type]
        insights.append(template.format(name=winner_analysis.option_name))

    fired = detected_patterns(patterns)
    if fired:
        insights.append(fired[0].description)

    return ' '.join(insights)
