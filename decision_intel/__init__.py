"""Decision Intel - weighted decision scoring with rule-based emotional insight."""

__version__ = "1.0.0"

from .engine import DecisionEngine, DecisionEvaluation
from .models import Option, Priority, default_priorities
from .core.emotions import detect_emotions, analyze_option_emotions
from .core.patterns import detect_cognitive_patterns
from .scoring.weighted import score
from .generation.priorities import generate_smart_priorities
from .generation.questions import generate_devils_advocate_questions
from .generation.synthesis import generate_decision_intelligence_analysis
from .utils import load_config, setup_logging

# Names used by host applications
recommend_priorities = generate_smart_priorities
generate_challenge_questions = generate_devils_advocate_questions
synthesize_analysis = generate_decision_intelligence_analysis

__all__ = [
    "DecisionEngine", "DecisionEvaluation", "Option", "Priority", "default_priorities",
    "score", "detect_emotions", "analyze_option_emotions", "detect_cognitive_patterns",
    "generate_smart_priorities", "recommend_priorities",
    "generate_devils_advocate_questions", "generate_challenge_questions",
    "generate_decision_intelligence_analysis", "synthesize_analysis",
    "load_config", "setup_logging",
]
