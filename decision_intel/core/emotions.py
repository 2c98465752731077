"""Keyword-driven emotion detection for option reflections."""

import logging
from typing import Dict, List, Optional, Sequence

from ..models import DetectedEmotion, EmotionalAnalysis, EmotionType, Option
from .lexicon import Lexicon, normalize

logger = logging.getLogger('decision_intel')

# Matches needed for full intensity
MATCHES_FOR_FULL_INTENSITY = 3

EMOTION_LABELS: Dict[EmotionType, str] = {
    EmotionType.FEAR: 'Fear',
    EmotionType.EXCITEMENT: 'Excitement',
    EmotionType.GUILT: 'Guilt',
    EmotionType.RELIEF: 'Relief',
    EmotionType.UNCERTAINTY: 'Uncertainty',
}

# Editable table; order sets the tie order of equally intense emotions.
EMOTION_LEXICON = Lexicon({
    EmotionType.FEAR.value: [
        'scared', 'afraid', 'worried', 'anxious', 'nervous', 'terrified',
        'panic', 'dread', 'frightened', 'uneasy', 'tense', 'stress',
        'what if', 'might fail', 'risky', 'dangerous', 'uncertain', 'doubt'
    ],
    EmotionType.EXCITEMENT.value: [
        'excited', 'thrilled', 'eager', 'enthusiastic', 'pumped', 'energized',
        "can't wait", 'amazing', 'awesome', 'love', 'passionate', 'inspired',
        'hopeful', 'optimistic', 'dream', 'opportunity', 'adventure', 'new'
    ],
    EmotionType.GUILT.value: [
        'guilty', 'selfish', 'wrong', 'should', "shouldn't", 'bad',
        'letting down', 'disappointing', 'responsible', 'obligation', 'owe',
        'feel terrible', 'regret', 'blame', 'fault', 'burden'
    ],
    EmotionType.RELIEF.value: [
        'relief', 'relieved', 'free', 'freedom', 'peaceful', 'calm',
        'weight off', 'finally', 'escape', 'release', 'breathe', 'easy',
        'comfortable', 'safe', 'secure', 'settled', 'done with'
    ],
    EmotionType.UNCERTAINTY.value: [
        'unsure', 'confused', 'torn', 'conflicted', 'mixed', 'ambivalent',
        "don't know", 'not sure', 'maybe', 'unclear', 'complicated', 'complex',
        'both', 'either way', 'depends', 'hard to say', 'undecided'
    ],
})


def require_every_emotion(table: Dict[EmotionType, str], name: str) -> Dict[EmotionType, str]:
    """Fail at import time if a per-emotion message table misses a category.

    Args:
        table: Emotion type -> message
        name: Table name for the error message

    Returns:
        The table, unchanged

    Raises:
        ValueError: If any EmotionType has no entry
    """
    missing = [e.value for e in EmotionType if e not in table]
    if missing:
        raise ValueError(f"{name} has no text for emotion(s): {', '.join(missing)}")
    return table


require_every_emotion(EMOTION_LABELS, 'EMOTION_LABELS')


class EmotionDetector:
    """Maps free text to weighted emotion tags."""

    def __init__(self, lexicon: Optional[Lexicon] = None):
        """Initialize detector.

        Args:
            lexicon: Category -> phrases table keyed by emotion type value
        """
        self.lexicon = lexicon or EMOTION_LEXICON

    def detect(self, text: Optional[str]) -> List[DetectedEmotion]:
        """Detect emotions in text.

        Args:
            text: Reflection text, may be empty

        Returns:
            Detected emotions, strongest first; ties keep lexicon order
        """
        if not (text or '').strip():
            return []

        emotions = []
        for category, count in self.lexicon.counts(normalize(text)).items():
            if count == 0:
                continue
            emotion_type = EmotionType(category)
            emotions.append(DetectedEmotion(
                type=emotion_type,
                label=EMOTION_LABELS[emotion_type],
                intensity=min(count / MATCHES_FOR_FULL_INTENSITY, 1.0)
            ))

        # sorted() is stable, so equal intensities stay in lexicon order
        return sorted(emotions, key=lambda e: e.intensity, reverse=True)

    def analyze_options(self, options: Sequence[Option]) -> List[EmotionalAnalysis]:
        """Detect emotions for every option, preserving option order."""
        analyses = []
        for option in options:
            emotions = self.detect(option.emotional_text)
            analyses.append(EmotionalAnalysis(
                option_id=option.id,
                option_name=option.name,
                emotions=emotions,
                dominant_emotion=emotions[0] if emotions else None
            ))
            logger.debug(
                f"Emotions for '{option.name}': "
                f"{[(e.type.value, round(e.intensity, 2)) for e in emotions]}"
            )
        return analyses


_default_detector = EmotionDetector()


def detect_emotions(text: Optional[str]) -> List[DetectedEmotion]:
    """Detect emotions in text with the built-in lexicon."""
    return _default_detector.detect(text)


def analyze_option_emotions(options: Sequence[Option]) -> List[EmotionalAnalysis]:
    """Build one emotional analysis per option with the built-in lexicon."""
    return _default_detector.analyze_options(options)


def dominant_emotion(text: Optional[str]) -> Optional[DetectedEmotion]:
    """Strongest emotion in text, or None."""
    emotions = detect_emotions(text)
    return emotions[0] if emotions else None
