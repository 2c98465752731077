"""Template-driven synthesis of the eight-section decision report.

Sections:
    situation summary, emotional insight, key factors and constraints,
    per-option analysis, risks and trade-offs, recommended decision,
    backup plan, immediate next steps.

Every keyword cue below goes through the shared lexicon primitive, so a cue
like 'excit' matches 'excited' and 'exciting' alike.
"""

import logging
from typing import Dict, List, Optional, Sequence

from ..core.emotions import detect_emotions, require_every_emotion
from ..core.lexicon import contains_any
from ..models import (
    DecisionIntelligenceAnalysis,
    DetectedEmotion,
    EmotionInsight,
    EmotionType,
    Option,
    OptionAnalysis,
    Priority,
    RecommendedChoice,
)
from ..utils import round_half_up

logger = logging.getLogger('decision_intel')

STRONG_SCORE = 4
WEAK_SCORE = 2

NO_BACKUP_OPTION = 'Other options'
DEFAULT_PRO = 'Some positive aspects to consider'
DEFAULT_CON = 'Some trade-offs to be aware of'

# (cue words, statement) evaluated in order against an option's reflection
PRO_CUES = [
    (['good', 'great', 'love', 'excit'], 'Strong positive emotional connection'),
    (['opportunity', 'grow', 'learn'], 'Growth potential'),
    (['safe', 'secure', 'stable'], 'Provides stability and security'),
]
CON_CUES = [
    (['worr', 'afraid', 'risk', 'scared'], 'Potential risks or concerns'),
    (['expensive', 'cost', 'money'], 'Financial implications to consider'),
    (['hard', 'difficult', 'challenge'], 'Requires significant effort'),
]

# Decision-text cues
TIME_CUES = ['time', 'when', 'deadline']
BUDGET_CUES = ['money', 'cost', 'budget', 'afford']
RELATIONSHIP_CUES = ['family', 'partner', 'relationship']
CAREER_CUES = ['career', 'job', 'work']
FINANCE_CUES = ['money', 'invest', 'financial']

LIKELY_OUTCOMES = require_every_emotion({
    EmotionType.EXCITEMENT: 'Likely to bring energy and enthusiasm, but ensure practical details are addressed.',
    EmotionType.FEAR: 'May involve some anxiety initially, but could lead to growth if fears are managed well.',
    EmotionType.RELIEF: 'Expected to provide comfort and peace of mind, which is valuable for wellbeing.',
    EmotionType.GUILT: 'May involve complex emotions, so ensure the decision aligns with your true values.',
    EmotionType.UNCERTAINTY: 'Outcomes may vary based on how well you prepare and adapt as you go.',
}, 'LIKELY_OUTCOMES')
DEFAULT_OUTCOME = 'This option appears to have a reasonable chance of success based on available information.'

INSIGHT_TAILS = require_every_emotion({
    EmotionType.EXCITEMENT: 'This positive energy is encouraging, but ensure it doesn\'t cloud your judgment.',
    EmotionType.FEAR: 'These concerns are valid and should be addressed before proceeding.',
    EmotionType.GUILT: 'This emotional response provides valuable insight into your true feelings.',
    EmotionType.RELIEF: 'This emotional response provides valuable insight into your true feelings.',
    EmotionType.UNCERTAINTY: 'This emotional response provides valuable insight into your true feelings.',
}, 'INSIGHT_TAILS')

OPTION_INSIGHTS = require_every_emotion({
    EmotionType.FEAR: 'There are some concerns and worries about "{name}." Consider if these fears are '
                      'realistic or if they might be holding you back.',
    EmotionType.EXCITEMENT: 'You feel genuine excitement about "{name}." This positive energy is worth noting, '
                            'but ensure you\'re also considering practical aspects.',
    EmotionType.GUILT: 'There\'s some guilt tied to "{name}." Consider what truly matters to you versus what '
                       'others expect.',
    EmotionType.RELIEF: '"{name}" brings a sense of relief and peace, which can be valuable for mental well-being.',
    EmotionType.UNCERTAINTY: 'You have mixed feelings about "{name}." That\'s normal for important decisions, '
                             'clarity often comes with more information.',
}, 'OPTION_INSIGHTS')
CALM_OPTION_INSIGHT = 'You seem to have a clear-headed perspective on "{name}." Proceed with rational consideration.'


def _dominant(emotions: List[DetectedEmotion]) -> Optional[DetectedEmotion]:
    return emotions[0] if emotions else None


def analyze_option_emotion_insight(option: Option) -> EmotionInsight:
    """Emotional read-out for a single option.

    Args:
        option: Option whose reflection is analysed

    Returns:
        EmotionInsight with detected emotions and a one-sentence insight
    """
    emotions = detect_emotions(option.emotional_text)
    dominant = _dominant(emotions)
    template = OPTION_INSIGHTS[dominant.type] if dominant else CALM_OPTION_INSIGHT
    return EmotionInsight(emotions=emotions, dominant_emotion=dominant, insight=template.format(name=option.name))


class DecisionIntelligenceSynthesizer:
    """Composes scoring, emotional signal and decision text into a report."""

    def synthesize(self,
                   decision: str,
                   options: Sequence[Option],
                   priorities: Sequence[Priority],
                   winner: Option) -> DecisionIntelligenceAnalysis:
        """Generate the full report.

        Args:
            decision: Decision text
            options: All options, in input order
            priorities: Priorities used for scoring
            winner: Top-ranked option

        Returns:
            DecisionIntelligenceAnalysis
        """
        labels = {p.id: p.label for p in priorities}
        others = [o for o in options if o.id != winner.id]
        backup = others[0].name if others else NO_BACKUP_OPTION

        analysis = DecisionIntelligenceAnalysis(
            situation_summary=(
                f'You\'re deciding: "{decision}". After evaluating your options against your priorities, '
                f'"{winner.name}" has emerged as the best fit.'
            ),
            emotional_insight=self.emotional_insight(winner),
            key_factors_and_constraints=self.key_factors(decision, priorities),
            options_analysis=[self.analyze_option(o, labels) for o in options],
            risks_and_tradeoffs=self.risks_and_tradeoffs(decision, options, winner),
            recommended_decision=RecommendedChoice(
                option=winner.name,
                reasoning=(
                    f'Based on your scoring across {len(priorities)} priorities and your emotional '
                    f'reflections, "{winner.name}" best aligns with what matters to you.'
                )
            ),
            backup_plan=RecommendedChoice(
                option=backup,
                reasoning='Keep other options in mind as circumstances may change or new information may emerge.'
            ),
            immediate_next_steps=self.next_steps(decision, winner),
        )

        logger.debug(f"Synthesized analysis for '{decision}' (winner '{winner.name}', backup '{backup}')")
        return analysis

    def analyze_option(self, option: Option, labels: Dict[str, str]) -> OptionAnalysis:
        """Pros, cons and likely outcome for one option.

        Args:
            option: Option to describe
            labels: Priority id -> label

        Returns:
            OptionAnalysis; empty pro/con lists get a generic placeholder
        """
        pros: List[str] = []
        cons: List[str] = []

        if option.emotional_text:
            pros.extend(statement for cues, statement in PRO_CUES
                        if contains_any(option.emotional_text, cues))
            cons.extend(statement for cues, statement in CON_CUES
                        if contains_any(option.emotional_text, cues))

        # Ratings in the order they were given
        pros.extend(f'Strong in {labels.get(pid, pid)}'
                    for pid, rating in option.scores.items() if rating >= STRONG_SCORE)
        cons.extend(f'Weak in {labels.get(pid, pid)}'
                    for pid, rating in option.scores.items() if rating <= WEAK_SCORE)

        dominant = _dominant(detect_emotions(option.emotional_text))
        return OptionAnalysis(
            option=option.name,
            pros=pros or [DEFAULT_PRO],
            cons=cons or [DEFAULT_CON],
            likely_outcome=LIKELY_OUTCOMES[dominant.type] if dominant else DEFAULT_OUTCOME
        )

    def emotional_insight(self, winner: Option) -> str:
        """Sentence on the winner's dominant emotion and its intensity."""
        dominant = _dominant(detect_emotions(winner.emotional_text))
        if dominant is None:
            return (f'You appear to have a relatively calm and rational perspective on "{winner.name}." '
                    f'This balanced emotional state is helpful for clear decision-making.')

        percent = round_half_up(dominant.intensity * 100)
        return (f'Your feelings about "{winner.name}" show {dominant.label.lower()} with {percent}% intensity. '
                f'{INSIGHT_TAILS[dominant.type]}')

    def key_factors(self, decision: str, priorities: Sequence[Priority]) -> List[str]:
        """Constraints suggested by the decision text plus standing factors."""
        factors = []
        if contains_any(decision, TIME_CUES):
            factors.append('Time constraints and deadlines')
        if contains_any(decision, BUDGET_CUES):
            factors.append('Financial resources and budget')
        if contains_any(decision, RELATIONSHIP_CUES):
            factors.append('Impact on relationships and family')

        factors.append(f'Your {len(priorities)} key priorities')
        factors.append('Current personal circumstances')
        factors.append('Long-term goals and values')
        return factors

    def risks_and_tradeoffs(self, decision: str, options: Sequence[Option], winner: Option) -> List[str]:
        """Opportunity cost, domain risks and standing caveats."""
        others = ' or '.join(o.name for o in options if o.id != winner.id) or NO_BACKUP_OPTION.lower()
        risks = [f'Choosing "{winner.name}" means not pursuing {others}']

        if contains_any(decision, CAREER_CUES):
            risks.append('Career decisions have long-term impact and are not easily reversible')
            risks.append('Opportunity cost - time spent on this cannot be spent elsewhere')
        if contains_any(decision, FINANCE_CUES):
            risks.append('Financial investments carry risk of loss')
            risks.append('Market conditions may change unpredictably')

        risks.append('Plans may need adjustment based on new information')
        risks.append('External factors outside your control may affect outcomes')
        return risks

    def next_steps(self, decision: str, winner: Option) -> List[str]:
        """Concrete follow-ups for acting on the recommendation."""
        steps = [
            f'Create a detailed plan for implementing "{winner.name}"',
            'Set specific goals and timeline',
            'Identify any additional resources or support needed',
        ]

        if contains_any(decision, CAREER_CUES):
            steps.append('Update your resume or portfolio if applicable')
            steps.append('Reach out to mentors or trusted advisors for feedback')
        if contains_any(decision, FINANCE_CUES):
            steps.append('Review your budget and financial situation')
            steps.append('Consult with a financial advisor if needed')

        steps.append('Set a review date to evaluate progress')
        steps.append('Be prepared to adjust your approach as needed')
        return steps


def generate_decision_intelligence_analysis(decision: str,
                                            options: Sequence[Option],
                                            priorities: Sequence[Priority],
                                            winner: Option) -> DecisionIntelligenceAnalysis:
    """Generate the eight-section report for a scored decision."""
    return DecisionIntelligenceSynthesizer().synthesize(decision, options, priorities, winner)
