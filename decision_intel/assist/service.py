"""Optional remote assistant with rule-based fallback.

A host application may plug in a remote model (any object implementing
RemoteAssistant). Results are cached and calls are rate limited; whenever the
remote path is unavailable, over budget or returns something unusable, the
deterministic rule-based engine answers instead.
"""

import logging
import time
from typing import Any, Callable, Dict, List, Optional, Protocol, Sequence

from ..generation.priorities import generate_smart_priorities
from ..generation.questions import MAX_QUESTIONS, generate_devils_advocate_questions
from ..generation.synthesis import analyze_option_emotion_insight
from ..models import (
    DetectedEmotion,
    DevilsAdvocateQuestion,
    EmotionInsight,
    EmotionType,
    Option,
    Priority,
    QuestionCategory,
    SmartPrioritySuggestion,
)
from .limits import (
    DEFAULT_CACHE_PREFIX,
    DEFAULT_CACHE_TTL_SECONDS,
    DEFAULT_RATE_LIMIT_PER_DAY,
    Clock,
    InMemoryStore,
    KeyValueStore,
    RateLimiter,
    ResultCache,
    generate_cache_key,
)

logger = logging.getLogger('decision_intel')


class AssistantError(Exception):
    """Remote assistant failed or returned an unusable result."""


class RateLimitExceeded(AssistantError):
    """Daily remote call budget is spent."""


class RemoteAssistant(Protocol):
    """Remote model returning the same plain shapes as the models' to_dict()."""

    def analyze_emotions(self, decision: str, option: Dict[str, Any]) -> Dict[str, Any]: ...

    def suggest_priorities(self, decision: str) -> Dict[str, Any]: ...

    def challenge_questions(self,
                            decision: str,
                            options: List[Dict[str, Any]],
                            winner: Dict[str, Any]) -> List[Dict[str, Any]]: ...


def _emotion_from_dict(data: Dict[str, Any]) -> DetectedEmotion:
    intensity = float(data['intensity'])
    return DetectedEmotion(
        type=EmotionType(data['type']),
        label=data.get('label') or EmotionType(data['type']).value.title(),
        intensity=max(0.0, min(1.0, intensity))
    )


def parse_emotion_insight(data: Dict[str, Any]) -> EmotionInsight:
    """Validate a remote emotion result.

    Raises:
        AssistantError: If required keys are missing or values are invalid
    """
    if not isinstance(data, dict):
        raise AssistantError(f"Malformed emotion analysis: expected an object, got {type(data).__name__}")

    try:
        emotions = sorted((_emotion_from_dict(e) for e in data.get('emotions') or []),
                          key=lambda e: e.intensity, reverse=True)
        return EmotionInsight(
            emotions=emotions,
            dominant_emotion=emotions[0] if emotions else None,
            insight=str(data['insight'])
        )
    except (KeyError, ValueError, TypeError) as e:
        raise AssistantError(f"Malformed emotion analysis: {e}") from e


def parse_priority_suggestion(data: Dict[str, Any]) -> SmartPrioritySuggestion:
    """Validate a remote priority suggestion.

    Raises:
        AssistantError: If the shape is wrong or a value is outside 1-5
    """
    try:
        priorities = [Priority.from_dict(p) for p in data['suggestedPriorities']]
        rationale = str(data['rationale'])
    except (KeyError, ValueError, TypeError) as e:
        raise AssistantError(f"Malformed priority suggestion: {e}") from e

    if not priorities or any(not 1 <= p.value <= 5 for p in priorities):
        raise AssistantError("Priority suggestion needs priorities valued 1-5")
    return SmartPrioritySuggestion(suggested_priorities=priorities, rationale=rationale, group='remote')


def parse_questions(data: List[Dict[str, Any]]) -> List[DevilsAdvocateQuestion]:
    """Validate remote challenge questions, capped like the local ones.

    Raises:
        AssistantError: If a question or its category is invalid
    """
    try:
        questions = [
            DevilsAdvocateQuestion(
                question=str(q['question']),
                category=QuestionCategory(q['category']),
                icon=str(q.get('icon') or 'help-circle')
            )
            for q in data
        ]
    except (KeyError, ValueError, TypeError) as e:
        raise AssistantError(f"Malformed questions: {e}") from e

    if not questions:
        raise AssistantError("Remote assistant returned no questions")
    return questions[:MAX_QUESTIONS]


class DecisionAssistant:
    """Serves emotion insights, priority suggestions and challenge questions.

    Resolution order per request: cache, remote assistant (if configured and
    within the daily budget), rule-based engine.
    """

    def __init__(self,
                 remote: Optional[RemoteAssistant] = None,
                 store: Optional[KeyValueStore] = None,
                 clock: Clock = time.time,
                 config: Optional[Dict] = None):
        """Initialize assistant.

        Args:
            remote: Remote model collaborator; None means rule-based only
            store: Storage for the rate-limit counter and cached results
            clock: Returns the current time in epoch seconds
            config: Assist configuration (rate_limit_per_day, cache_ttl_seconds, cache_prefix)
        """
        config = config or {}
        store = store if store is not None else InMemoryStore()
        self.remote = remote
        self.rate_limiter = RateLimiter(
            store, clock,
            limit_per_day=config.get('rate_limit_per_day', DEFAULT_RATE_LIMIT_PER_DAY),
            enabled=remote is not None
        )
        self.cache = ResultCache(
            store, clock,
            ttl_seconds=config.get('cache_ttl_seconds', DEFAULT_CACHE_TTL_SECONDS),
            prefix=config.get('cache_prefix', DEFAULT_CACHE_PREFIX)
        )

    def _call_remote(self, cache_key: str, request: Callable[[], Any], parse: Callable[[Any], Any]) -> Any:
        cached = self.cache.get(cache_key)
        if cached is not None:
            try:
                return parse(cached)
            except AssistantError as e:
                logger.warning(f"Ignoring unusable cached result: {e}")

        if self.remote is None:
            raise AssistantError("No remote assistant configured")
        if not self.rate_limiter.status().can_make_call:
            raise RateLimitExceeded("Rate limit exceeded")

        try:
            raw = request()
        except AssistantError:
            raise
        except Exception as e:
            raise AssistantError(f"Remote assistant call failed: {e}") from e

        result = parse(raw)
        self.rate_limiter.increment()
        self.cache.set(cache_key, raw)
        return result

    def analyze_emotions(self, decision: str, option: Option) -> EmotionInsight:
        """Emotional read-out for one option."""
        key = generate_cache_key('emotion', {
            'decision': decision, 'optionName': option.name, 'text': option.emotional_text
        })
        try:
            return self._call_remote(
                key,
                lambda: self.remote.analyze_emotions(decision, option.to_dict()),
                parse_emotion_insight
            )
        except AssistantError as e:
            self._log_fallback('emotion analysis', e)
            return analyze_option_emotion_insight(option)

    def suggest_priorities(self, decision: str) -> SmartPrioritySuggestion:
        """Priorities suited to the decision."""
        key = generate_cache_key('priorities', {'decision': decision})
        try:
            return self._call_remote(
                key,
                lambda: self.remote.suggest_priorities(decision),
                parse_priority_suggestion
            )
        except AssistantError as e:
            self._log_fallback('priority suggestions', e)
            return generate_smart_priorities(decision)

    def challenge_questions(self,
                            decision: str,
                            options: Sequence[Option],
                            winner: Option) -> List[DevilsAdvocateQuestion]:
        """Devil's-advocate questions for the winner."""
        key = generate_cache_key('questions', {
            'decision': decision,
            'options': [o.name for o in options],
            'winner': winner.name
        })
        try:
            return self._call_remote(
                key,
                lambda: self.remote.challenge_questions(
                    decision, [o.to_dict() for o in options], winner.to_dict()),
                parse_questions
            )
        except AssistantError as e:
            self._log_fallback('challenge questions', e)
            return generate_devils_advocate_questions(decision, options, winner)

    def _log_fallback(self, what: str, error: AssistantError) -> None:
        if self.remote is None:
            logger.debug(f"Using rule-based {what}")
        else:
            logger.warning(f"Falling back to rule-based {what}: {error}")
