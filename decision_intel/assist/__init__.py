"""Optional remote assistant gate: rate limiting, caching, rule-based fallback."""

from .limits import InMemoryStore, KeyValueStore, RateLimiter, RateLimitStatus, ResultCache, generate_cache_key
from .service import AssistantError, DecisionAssistant, RateLimitExceeded, RemoteAssistant

__all__ = [
    "InMemoryStore", "KeyValueStore", "RateLimiter", "RateLimitStatus", "ResultCache",
    "generate_cache_key", "AssistantError", "DecisionAssistant", "RateLimitExceeded",
    "RemoteAssistant",
]
