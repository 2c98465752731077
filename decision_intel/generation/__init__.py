"""Template-driven generators: priorities, challenge questions, reports."""

from .priorities import PriorityRecommender, generate_smart_priorities
from .questions import generate_devils_advocate_questions
from .synthesis import (
    DecisionIntelligenceSynthesizer,
    analyze_option_emotion_insight,
    generate_decision_intelligence_analysis,
)

__all__ = [
    "PriorityRecommender", "generate_smart_priorities",
    "generate_devils_advocate_questions",
    "DecisionIntelligenceSynthesizer", "analyze_option_emotion_insight",
    "generate_decision_intelligence_analysis",
]
