"""Data models for decisions, emotional signal and analysis reports."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from .utils import to_percent


@dataclass
class Priority:
    """A named decision factor with an importance weight (1-5)."""
    id: str
    label: str
    description: str
    value: int

    def to_dict(self) -> Dict:
        """Convert to dictionary for serialization."""
        return {
            'id': self.id,
            'label': self.label,
            'description': self.description,
            'value': self.value
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Priority':
        """Build a priority from a plain mapping."""
        return cls(
            id=data['id'],
            label=data.get('label', data['id']),
            description=data.get('description', ''),
            value=int(data.get('value', 3))
        )


def default_priorities() -> List[Priority]:
    """Priorities offered before the user picks or tunes their own."""
    return [
        Priority('money', 'Money', 'Financial impact', 3),
        Priority('happiness', 'Happiness', 'Joy and fulfillment', 3),
        Priority('growth', 'Growth', 'Personal development', 3),
        Priority('stability', 'Stability', 'Security and predictability', 3),
        Priority('risk', 'Risk Tolerance', 'Openness to uncertainty', 3),
    ]


@dataclass
class Option:
    """A candidate choice being evaluated, rated per priority."""
    id: str
    name: str
    emotional_text: str = ''
    image_url: Optional[str] = None
    pros: List[str] = field(default_factory=list)
    cons: List[str] = field(default_factory=list)
    scores: Dict[str, int] = field(default_factory=dict)  # priority id -> 1..5

    def score_for(self, priority_id: str) -> int:
        """Rating for a priority, 0 when not rated yet."""
        return self.scores.get(priority_id) or 0

    def to_dict(self) -> Dict:
        """Convert to dictionary for serialization."""
        return {
            'id': self.id,
            'name': self.name,
            'emotionalText': self.emotional_text,
            'imageUrl': self.image_url,
            'pros': list(self.pros),
            'cons': list(self.cons),
            'scores': dict(self.scores)
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Option':
        """Build an option from a plain mapping (camelCase or snake_case keys)."""
        emotional_text = data.get('emotionalText', data.get('emotional_text')) or ''
        return cls(
            id=data['id'],
            name=data.get('name', data['id']),
            emotional_text=emotional_text,
            image_url=data.get('imageUrl', data.get('image_url')),
            pros=list(data.get('pros') or []),
            cons=list(data.get('cons') or []),
            scores={k: int(v) for k, v in (data.get('scores') or {}).items()}
        )


class EmotionType(Enum):
    """Emotion categories, in lexicon iteration order."""
    FEAR = "fear"
    EXCITEMENT = "excitement"
    GUILT = "guilt"
    RELIEF = "relief"
    UNCERTAINTY = "uncertainty"


@dataclass
class DetectedEmotion:
    """An emotion category found in free text."""
    type: EmotionType
    label: str
    intensity: float  # [0, 1]

    def to_dict(self) -> Dict:
        """Convert to dictionary for serialization."""
        return {
            'type': self.type.value,
            'label': self.label,
            'intensity': self.intensity
        }


@dataclass
class EmotionalAnalysis:
    """Emotions detected in one option's reflection text."""
    option_id: str
    option_name: str
    emotions: List[DetectedEmotion] = field(default_factory=list)
    dominant_emotion: Optional[DetectedEmotion] = None

    def has_emotion(self, emotion_type: EmotionType, above: float) -> bool:
        """Whether an emotion of this type is strictly stronger than a threshold."""
        return any(e.type is emotion_type and e.intensity > above for e in self.emotions)

    def to_dict(self) -> Dict:
        """Convert to dictionary for serialization."""
        return {
            'optionId': self.option_id,
            'optionName': self.option_name,
            'emotions': [e.to_dict() for e in self.emotions],
            'dominantEmotion': self.dominant_emotion.to_dict() if self.dominant_emotion else None
        }


@dataclass
class CognitivePattern:
    """A heuristic bias flag evaluated for one analysis run."""
    id: str
    label: str
    description: str
    detected: bool

    def to_dict(self) -> Dict:
        """Convert to dictionary for serialization."""
        return {
            'id': self.id,
            'label': self.label,
            'description': self.description,
            'detected': self.detected
        }


@dataclass
class ScoreContribution:
    """Weighted contribution of one priority to an option's total."""
    priority: Priority
    weighted: int


@dataclass
class ScoredOption:
    """An option with its weighted total and per-priority breakdown."""
    option: Option
    total_score: int
    breakdown: List[ScoreContribution] = field(default_factory=list)

    def top_contributions(self, n: int = 3) -> List[ScoreContribution]:
        """Largest weighted contributions, ties kept in priority order."""
        return sorted(self.breakdown, key=lambda c: c.weighted, reverse=True)[:n]

    def to_dict(self) -> Dict:
        """Convert to dictionary for serialization."""
        return {
            'option': self.option.to_dict(),
            'totalScore': self.total_score,
            'breakdown': [
                {'priority': c.priority.to_dict(), 'weighted': c.weighted}
                for c in self.breakdown
            ]
        }


@dataclass
class ScoringResult:
    """Ranked scored options plus the best achievable total."""
    scored_options: List[ScoredOption]
    max_possible: int

    @property
    def winner(self) -> Optional[ScoredOption]:
        """Highest-ranked option, or None when there are no options."""
        return self.scored_options[0] if self.scored_options else None

    def percentage(self, scored: ScoredOption) -> int:
        """Share of the best achievable total, as a whole percentage."""
        return to_percent(scored.total_score, self.max_possible)

    def to_dict(self) -> Dict:
        """Convert to dictionary for serialization."""
        return {
            'scoredOptions': [
                dict(s.to_dict(), percentage=self.percentage(s))
                for s in self.scored_options
            ],
            'maxPossible': self.max_possible
        }


class QuestionCategory(Enum):
    """Angle a challenge question pushes on."""
    ASSUMPTIONS = "assumptions"
    RISKS = "risks"
    ALTERNATIVES = "alternatives"
    LONG_TERM = "long-term"


@dataclass
class DevilsAdvocateQuestion:
    """A prompt that challenges the leading option."""
    question: str
    category: QuestionCategory
    icon: str

    def to_dict(self) -> Dict:
        """Convert to dictionary for serialization."""
        return {
            'question': self.question,
            'category': self.category.value,
            'icon': self.icon
        }


@dataclass
class SmartPrioritySuggestion:
    """Suggested priorities for a decision, with the reasoning behind them."""
    suggested_priorities: List[Priority]
    rationale: str
    group: str = 'general'

    def to_dict(self) -> Dict:
        """Convert to dictionary for serialization."""
        return {
            'suggestedPriorities': [p.to_dict() for p in self.suggested_priorities],
            'rationale': self.rationale,
            'group': self.group
        }


@dataclass
class EmotionInsight:
    """Emotional read-out for a single option."""
    emotions: List[DetectedEmotion]
    dominant_emotion: Optional[DetectedEmotion]
    insight: str

    def to_dict(self) -> Dict:
        """Convert to dictionary for serialization."""
        return {
            'emotions': [e.to_dict() for e in self.emotions],
            'dominantEmotion': self.dominant_emotion.to_dict() if self.dominant_emotion else None,
            'insight': self.insight
        }


@dataclass
class ConfidenceAssessment:
    """Interpretation of a self-reported confidence score (1-10)."""
    score: int
    level: str
    insight: str

    def to_dict(self) -> Dict:
        """Convert to dictionary for serialization."""
        return {'score': self.score, 'level': self.level, 'insight': self.insight}


@dataclass
class OptionAnalysis:
    """Pros, cons and likely outcome for one option."""
    option: str
    pros: List[str]
    cons: List[str]
    likely_outcome: str

    def to_dict(self) -> Dict:
        """Convert to dictionary for serialization."""
        return {
            'option': self.option,
            'pros': list(self.pros),
            'cons': list(self.cons),
            'likelyOutcome': self.likely_outcome
        }


@dataclass
class RecommendedChoice:
    """An option name with the reasoning for it."""
    option: str
    reasoning: str

    def to_dict(self) -> Dict:
        """Convert to dictionary for serialization."""
        return {'option': self.option, 'reasoning': self.reasoning}


@dataclass
class DecisionIntelligenceAnalysis:
    """Eight-section narrative report for a decision."""
    situation_summary: str
    emotional_insight: str
    key_factors_and_constraints: List[str]
    options_analysis: List[OptionAnalysis]
    risks_and_tradeoffs: List[str]
    recommended_decision: RecommendedChoice
    backup_plan: RecommendedChoice
    immediate_next_steps: List[str]

    def to_dict(self) -> Dict:
        """Convert to dictionary for serialization."""
        return {
            'situationSummary': self.situation_summary,
            'emotionalInsight': self.emotional_insight,
            'keyFactorsAndConstraints': list(self.key_factors_and_constraints),
            'optionsAnalysis': [a.to_dict() for a in self.options_analysis],
            'risksAndTradeoffs': list(self.risks_and_tradeoffs),
            'recommendedDecision': self.recommended_decision.to_dict(),
            'backupPlan': self.backup_plan.to_dict(),
            'immediateNextSteps': list(self.immediate_next_steps)
        }
