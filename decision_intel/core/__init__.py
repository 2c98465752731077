"""Rule-based emotional signal: lexicon matching, emotions, cognitive patterns."""

from .lexicon import Lexicon, contains_any, count_matches
from .emotions import EMOTION_LEXICON, EmotionDetector, detect_emotions, analyze_option_emotions
from .patterns import (
    CognitivePatternDetector,
    detect_cognitive_patterns,
    detected_patterns,
    get_emotional_insight,
)

__all__ = [
    "Lexicon", "contains_any", "count_matches",
    "EMOTION_LEXICON", "EmotionDetector", "detect_emotions", "analyze_option_emotions",
    "CognitivePatternDetector", "detect_cognitive_patterns", "detected_patterns",
    "get_emotional_insight",
]
