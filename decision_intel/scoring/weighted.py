"""Weighted multi-criteria scoring of options against priorities."""

import logging
from typing import Dict, Optional, Sequence

from ..models import Option, Priority, ScoreContribution, ScoredOption, ScoringResult

logger = logging.getLogger('decision_intel')

MAX_RATING = 5


def max_possible_score(priorities: Sequence[Priority]) -> int:
    """Best achievable total: every priority rated 5."""
    return sum(p.value * MAX_RATING for p in priorities)


class WeightedScorer:
    """Ranks options by the sum of rating x priority weight."""

    def __init__(self, config: Optional[Dict] = None):
        """Initialize weighted scorer.

        Args:
            config: Scoring configuration (margins are in percentage points)
        """
        self.config = config or {}
        self.clear_margin = self.config.get('clear_margin', 15)
        self.edge_margin = self.config.get('edge_margin', 5)

    def score_option(self, option: Option, priorities: Sequence[Priority]) -> ScoredOption:
        """Score a single option.

        Unrated priorities contribute 0.

        Args:
            option: Option with (possibly partial) ratings
            priorities: Weighted priorities

        Returns:
            ScoredOption with one contribution per priority, in priority order
        """
        breakdown = [
            ScoreContribution(priority=p, weighted=option.score_for(p.id) * p.value)
            for p in priorities
        ]
        return ScoredOption(
            option=option,
            total_score=sum(c.weighted for c in breakdown),
            breakdown=breakdown
        )

    def score(self, options: Sequence[Option], priorities: Sequence[Priority]) -> ScoringResult:
        """Score and rank options.

        Args:
            options: Options to rank
            priorities: Weighted priorities

        Returns:
            ScoringResult sorted by total descending; exact ties keep input order
        """
        scored = [self.score_option(o, priorities) for o in options]
        ranked = sorted(scored, key=lambda s: s.total_score, reverse=True)
        result = ScoringResult(scored_options=ranked, max_possible=max_possible_score(priorities))

        if result.winner is not None:
            logger.debug(
                f"Winner '{result.winner.option.name}' with {result.winner.total_score}"
                f"/{result.max_possible}"
            )
        return result

    def recommendation_text(self, result: ScoringResult) -> Optional[str]:
        """Describe how decisively the winner leads.

        Args:
            result: Output of score()

        Returns:
            Sentence about the lead, or None when there are no options
        """
        ranked = result.scored_options
        if not ranked:
            return None

        winner = ranked[0]
        if len(ranked) == 1:
            return f'"{winner.option.name}" is the only option on the table.'

        runner_up = ranked[1]
        margin = winner.total_score - runner_up.total_score
        percent_margin = (margin / result.max_possible * 100) if result.max_possible else 0.0

        if percent_margin > self.clear_margin:
            return f'"{winner.option.name}" stands out clearly as your best choice based on your priorities.'
        elif percent_margin > self.edge_margin:
            return (f'"{winner.option.name}" edges ahead, though "{runner_up.option.name}" '
                    f'is also a strong option.')
        return (f'It\'s a close call between "{winner.option.name}" and '
                f'"{runner_up.option.name}". Trust your intuition.')


def score(options: Sequence[Option], priorities: Sequence[Priority]) -> ScoringResult:
    """Rank options by weighted score with default settings."""
    return WeightedScorer().score(options, priorities)
