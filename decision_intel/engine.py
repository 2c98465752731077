"""Decision engine orchestrator.

Coordinates all stages: scoring -> emotion analysis -> cognitive patterns
-> challenge questions -> report synthesis. Every stage is a pure function
of its inputs; the engine only wires them together.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

from .core.emotions import EmotionDetector
from .core.patterns import CognitivePatternDetector, detected_patterns, get_emotional_insight
from .generation.priorities import PriorityRecommender
from .generation.questions import generate_devils_advocate_questions
from .generation.synthesis import DecisionIntelligenceSynthesizer
from .models import (
    CognitivePattern,
    DecisionIntelligenceAnalysis,
    DetectedEmotion,
    DevilsAdvocateQuestion,
    EmotionalAnalysis,
    Option,
    Priority,
    ScoringResult,
    SmartPrioritySuggestion,
)
from .scoring.weighted import WeightedScorer
from .utils import load_config

logger = logging.getLogger('decision_intel')


@dataclass
class DecisionEvaluation:
    """Everything the results view shows for one decision."""
    decision: str
    scoring: ScoringResult
    recommendation: Optional[str]
    emotional_analyses: List[EmotionalAnalysis]
    patterns: List[CognitivePattern]
    emotional_insight: str
    questions: List[DevilsAdvocateQuestion]
    analysis: DecisionIntelligenceAnalysis
    priorities: List[Priority] = field(default_factory=list)

    @property
    def winner(self) -> Option:
        return self.scoring.scored_options[0].option

    def to_dict(self) -> Dict:
        """Convert to dictionary for serialization."""
        return {
            'decision': self.decision,
            'winnerId': self.winner.id,
            'scoring': self.scoring.to_dict(),
            'recommendation': self.recommendation,
            'emotionalAnalyses': [a.to_dict() for a in self.emotional_analyses],
            'patterns': [p.to_dict() for p in self.patterns],
            'detectedPatterns': [p.id for p in detected_patterns(self.patterns)],
            'emotionalInsight': self.emotional_insight,
            'questions': [q.to_dict() for q in self.questions],
            'analysis': self.analysis.to_dict(),
            'priorities': [p.to_dict() for p in self.priorities],
        }


class DecisionEngine:
    """Function-call surface of the scoring and intelligence engine."""

    def __init__(self, config: Optional[Dict] = None):
        """Initialize decision engine.

        Args:
            config: Full configuration dictionary (see config.yaml)
        """
        self.config = config or {}
        self.scorer = WeightedScorer(self.config.get('scoring', {}))
        self.detector = EmotionDetector()
        self.pattern_detector = CognitivePatternDetector()
        self.recommender = PriorityRecommender()
        self.synthesizer = DecisionIntelligenceSynthesizer()

    @classmethod
    def from_config(cls, config_path: Union[str, Path] = "config.yaml") -> 'DecisionEngine':
        """Build an engine from a YAML configuration file."""
        return cls(load_config(config_path))

    def score(self, options: Sequence[Option], priorities: Sequence[Priority]) -> ScoringResult:
        return self.scorer.score(options, priorities)

    def detect_emotions(self, text: str) -> List[DetectedEmotion]:
        return self.detector.detect(text)

    def analyze_option_emotions(self, options: Sequence[Option]) -> List[EmotionalAnalysis]:
        return self.detector.analyze_options(options)

    def detect_cognitive_patterns(self,
                                  options: Sequence[Option],
                                  analyses: Sequence[EmotionalAnalysis],
                                  winner_id: str) -> List[CognitivePattern]:
        return self.pattern_detector.detect(options, analyses, winner_id)

    def recommend_priorities(self, decision_text: str) -> SmartPrioritySuggestion:
        return self.recommender.suggest(decision_text)

    def generate_challenge_questions(self,
                                     decision: str,
                                     options: Sequence[Option],
                                     winner: Option) -> List[DevilsAdvocateQuestion]:
        return generate_devils_advocate_questions(decision, options, winner)

    def synthesize_analysis(self,
                            decision: str,
                            options: Sequence[Option],
                            priorities: Sequence[Priority],
                            winner: Option) -> DecisionIntelligenceAnalysis:
        return self.synthesizer.synthesize(decision, options, priorities, winner)

    def evaluate(self,
                 decision: str,
                 options: Sequence[Option],
                 priorities: Sequence[Priority]) -> DecisionEvaluation:
        """Run every stage for a fully rated decision.

        Args:
            decision: Decision text
            options: Rated options
            priorities: Weighted priorities

        Returns:
            DecisionEvaluation

        Raises:
            ValueError: If there are no options to choose from
        """
        if not options:
            raise ValueError("Cannot evaluate a decision without options")

        logger.info(f"Evaluating decision with {len(options)} options and {len(priorities)} priorities")

        scoring = self.score(options, priorities)
        winner = scoring.scored_options[0].option
        analyses = self.analyze_option_emotions(options)
        patterns = self.detect_cognitive_patterns(options, analyses, winner.id)
        winner_analysis = next(a for a in analyses if a.option_id == winner.id)

        return DecisionEvaluation(
            decision=decision,
            scoring=scoring,
            recommendation=self.scorer.recommendation_text(scoring),
            emotional_analyses=analyses,
            patterns=patterns,
            emotional_insight=get_emotional_insight(winner_analysis, patterns),
            questions=self.generate_challenge_questions(decision, options, winner),
            analysis=self.synthesize_analysis(decision, options, priorities, winner),
            priorities=list(priorities),
        )
