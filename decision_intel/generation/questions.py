"""Devil's-advocate questions that challenge the leading option."""

import logging
from typing import List, Sequence

from ..core.lexicon import contains_any
from ..models import DevilsAdvocateQuestion, Option, QuestionCategory

logger = logging.getLogger('decision_intel')

MAX_QUESTIONS = 6

FINANCE_CUES = ['money', 'financial', 'salary']


def generate_devils_advocate_questions(decision: str,
                                       options: Sequence[Option],
                                       winner: Option) -> List[DevilsAdvocateQuestion]:
    """Build challenge questions for the winning option.

    Args:
        decision: Decision text
        options: All options, winner included
        winner: Top-ranked option

    Returns:
        At most MAX_QUESTIONS questions in construction order
    """
    name = winner.name
    questions = [
        DevilsAdvocateQuestion(
            f'What evidence do you have that "{name}" will actually work out as planned?',
            QuestionCategory.ASSUMPTIONS, 'lightbulb'),
    ]

    if contains_any(decision, FINANCE_CUES):
        questions.append(DevilsAdvocateQuestion(
            'Are you assuming the financial situation will stay the same? '
            'What if costs are higher than expected?',
            QuestionCategory.ASSUMPTIONS, 'alert-triangle'))

    questions.append(DevilsAdvocateQuestion(
        f'What\'s the worst-case scenario with "{name}" and could you handle it?',
        QuestionCategory.RISKS, 'shield'))
    questions.append(DevilsAdvocateQuestion(
        f'What risks are you not seeing because you\'re excited about "{name}"?',
        QuestionCategory.RISKS, 'eye-off'))

    others = [o for o in options if o.id != winner.id]
    if others:
        other_names = ', '.join(o.name for o in others)
        questions.append(DevilsAdvocateQuestion(
            f'What would need to be true for {other_names} to actually be better than "{name}"?',
            QuestionCategory.ALTERNATIVES, 'git-branch'))

    questions.append(DevilsAdvocateQuestion(
        'Is there a third option you haven\'t considered yet that combines the best of both?',
        QuestionCategory.ALTERNATIVES, 'plus-circle'))

    questions.append(DevilsAdvocateQuestion(
        f'Will you still be happy with "{name}" 5 years from now?',
        QuestionCategory.LONG_TERM, 'clock'))
    questions.append(DevilsAdvocateQuestion(
        f'How does choosing "{name}" limit or enable future opportunities?',
        QuestionCategory.LONG_TERM, 'trending-up'))

    if len(questions) > MAX_QUESTIONS:
        logger.debug(f"Dropping {len(questions) - MAX_QUESTIONS} question(s) over the cap")
    return questions[:MAX_QUESTIONS]
