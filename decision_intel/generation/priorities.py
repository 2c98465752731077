"""Priority suggestions routed by keywords in the decision text."""

import logging
from typing import Dict, List, Optional, Tuple

from ..core.lexicon import Lexicon
from ..models import Priority, SmartPrioritySuggestion

logger = logging.getLogger('decision_intel')

PriorityTemplate = Tuple[str, str, str, int]  # (id, label, description, default value)

# Checked in this order; the first group with any keyword in the text wins.
PRIORITY_PATTERNS: Dict[str, Dict] = {
    'career': {
        'keywords': ['job', 'career', 'work', 'promotion', 'salary', 'raise', 'company', 'boss',
                     'team', 'office', 'remote', 'startup', 'freelance', 'entrepreneur'],
        'priorities': [
            ('salary', 'Compensation', 'Income and financial rewards', 4),
            ('growth', 'Career Growth', 'Learning, skills, and advancement opportunities', 4),
            ('work-life', 'Work-Life Balance', 'Time for personal life and wellbeing', 4),
            ('stability', 'Job Security', 'Stability and security of employment', 3),
            ('culture', 'Company Culture', 'Values, environment, and team dynamics', 3),
        ],
        'rationale': 'For career decisions, consider both immediate rewards and long-term growth potential.',
    },
    'financial': {
        'keywords': ['invest', 'money', 'save', 'spend', 'budget', 'debt', 'loan', 'mortgage',
                     'retirement', 'stock', 'crypto', 'buy', 'sell'],
        'priorities': [
            ('return', 'Financial Return', 'Potential gain or loss', 5),
            ('risk', 'Risk Level', 'How much you could lose', 4),
            ('liquidity', 'Liquidity', 'How quickly you can access your money', 3),
            ('time', 'Time Horizon', 'Short-term vs long-term considerations', 3),
            ('effort', 'Management Effort', 'Time and attention required', 2),
        ],
        'rationale': 'Financial decisions should balance potential returns against acceptable risk levels.',
    },
    'relationship': {
        'keywords': ['relationship', 'partner', 'friend', 'dating', 'marriage', 'breakup', 'family',
                     'parent', 'child', 'romantic', 'love'],
        'priorities': [
            ('happiness', 'Emotional Fulfillment', 'Joy and emotional connection', 5),
            ('growth', 'Personal Growth', 'How you grow together', 4),
            ('values', 'Value Alignment', 'Shared values and life goals', 4),
            ('independence', 'Independence', 'Maintaining your own identity', 3),
            ('stability', 'Stability', 'Predictability and security', 3),
        ],
        'rationale': 'Relationship decisions involve balancing emotional needs with practical compatibility.',
    },
    'health': {
        'keywords': ['health', 'exercise', 'diet', 'doctor', 'treatment', 'surgery', 'medication',
                     'fitness', 'wellness', 'mental health'],
        'priorities': [
            ('effectiveness', 'Effectiveness', 'How well it works', 5),
            ('risk', 'Side Effects/Risk', 'Potential negative impacts', 4),
            ('time', 'Time Commitment', 'How long it will take', 3),
            ('cost', 'Cost', 'Financial implications', 3),
            ('sustainability', 'Sustainability', 'Can you maintain this long-term', 3),
        ],
        'rationale': 'Health decisions should prioritize effectiveness while considering lifestyle impact '
                     'and sustainability.',
    },
    'location': {
        'keywords': ['move', 'relocate', 'city', 'town', 'country', 'apartment', 'house', 'rent',
                     'neighborhood', 'area'],
        'priorities': [
            ('cost', 'Cost of Living', 'Housing, food, transportation expenses', 4),
            ('quality', 'Quality of Life', 'Safety, amenities, community', 4),
            ('opportunities', 'Career Opportunities', 'Job market and professional growth', 4),
            ('weather', 'Climate/Weather', 'Living conditions and comfort', 3),
            ('social', 'Social Network', 'Proximity to family and friends', 3),
        ],
        'rationale': 'Location decisions involve balancing costs with lifestyle benefits and opportunities.',
    },
}

GENERAL_GROUP = 'general'

GENERAL_PRIORITIES: List[PriorityTemplate] = [
    ('time', 'Time Investment', 'How much time this will require', 3),
    ('effort', 'Effort Required', 'Physical or mental energy needed', 3),
    ('cost', 'Financial Cost', 'Money required for this decision', 3),
    ('impact', 'Long-term Impact', 'How this affects your future', 4),
    ('alignment', 'Value Alignment', 'Match with your core values', 4),
]

GENERAL_RATIONALE = ('Based on your decision, these general priorities will help you evaluate '
                     'your options objectively.')


def _build(templates: List[PriorityTemplate]) -> List[Priority]:
    # Fresh objects every call; callers tune the values in place
    return [Priority(id=i, label=label, description=desc, value=value)
            for i, label, desc, value in templates]


class PriorityRecommender:
    """Suggests five priorities from a template matched to the decision text."""

    def __init__(self, patterns: Optional[Dict[str, Dict]] = None):
        """Initialize recommender.

        Args:
            patterns: Ordered pattern groups (keywords, priorities, rationale)
        """
        self.patterns = patterns or PRIORITY_PATTERNS
        self.router = Lexicon({name: group['keywords'] for name, group in self.patterns.items()})

    def suggest(self, decision_text: str) -> SmartPrioritySuggestion:
        """Suggest priorities for a decision.

        The first group (in table order) with a keyword contained in the text
        wins, even if a later group matches more keywords.

        Args:
            decision_text: What the user is deciding

        Returns:
            SmartPrioritySuggestion with exactly five priorities
        """
        group = self.router.first_match(decision_text)

        if group is None:
            logger.debug("No priority pattern matched, using general priorities")
            return SmartPrioritySuggestion(
                suggested_priorities=_build(GENERAL_PRIORITIES),
                rationale=GENERAL_RATIONALE,
                group=GENERAL_GROUP
            )

        logger.debug(f"Priority pattern matched: {group}")
        pattern = self.patterns[group]
        return SmartPrioritySuggestion(
            suggested_priorities=_build(pattern['priorities']),
            rationale=pattern['rationale'],
            group=group
        )


def generate_smart_priorities(decision_text: str) -> SmartPrioritySuggestion:
    """Suggest priorities for a decision using the built-in templates."""
    return PriorityRecommender().suggest(decision_text)
