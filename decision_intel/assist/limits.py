"""Daily rate limiting and TTL caching for remote assistant calls.

Both take their storage and clock as collaborators, so nothing here holds
process-wide state and tests can drive time explicitly.
"""

import base64
import json
import logging
import time
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Dict, Iterable, Optional, Protocol

logger = logging.getLogger('decision_intel')

Clock = Callable[[], float]  # seconds since the epoch

RATE_LIMIT_KEY = 'ai_rate_limit'
DEFAULT_RATE_LIMIT_PER_DAY = 10
DEFAULT_CACHE_PREFIX = 'ai_cache_'
DEFAULT_CACHE_TTL_SECONDS = 24 * 60 * 60


class KeyValueStore(Protocol):
    """String key-value storage (browser local storage, redis, a dict...)."""

    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> None: ...

    def keys(self) -> Iterable[str]: ...


class InMemoryStore:
    """Dictionary-backed KeyValueStore."""

    def __init__(self, data: Optional[Dict[str, str]] = None):
        self.data: Dict[str, str] = dict(data or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value

    def delete(self, key: str) -> None:
        self.data.pop(key, None)

    def keys(self) -> Iterable[str]:
        return list(self.data.keys())


def _read(store: KeyValueStore, key: str) -> Optional[str]:
    try:
        return store.get(key)
    except Exception as e:
        logger.warning(f"Failed to read {key} from store: {e}")
        return None


def _write(store: KeyValueStore, key: str, value: str) -> None:
    try:
        store.set(key, value)
    except Exception as e:
        logger.warning(f"Failed to write {key} to store: {e}")


def _delete(store: KeyValueStore, key: str) -> None:
    try:
        store.delete(key)
    except Exception as e:
        logger.warning(f"Failed to delete {key} from store: {e}")


@dataclass
class RateLimitStatus:
    """Remaining remote calls for the current day."""
    remaining: int
    can_make_call: bool


class RateLimiter:
    """Counts remote calls per calendar day (local time of the clock)."""

    def __init__(self,
                 store: KeyValueStore,
                 clock: Clock = time.time,
                 limit_per_day: int = DEFAULT_RATE_LIMIT_PER_DAY,
                 enabled: bool = True):
        """Initialize rate limiter.

        Args:
            store: Where the counter is persisted
            clock: Returns the current time in epoch seconds
            limit_per_day: Calls allowed per day
            enabled: False when no remote assistant is configured
        """
        self.store = store
        self.clock = clock
        self.limit_per_day = limit_per_day
        self.enabled = enabled

    def _today(self) -> str:
        return datetime.fromtimestamp(self.clock()).date().isoformat()

    def _load(self) -> Dict[str, Any]:
        raw = _read(self.store, RATE_LIMIT_KEY)
        if raw:
            try:
                return json.loads(raw)
            except ValueError as e:
                logger.warning(f"Failed to parse rate limit data: {e}")
        return {'calls_today': 0, 'last_call_date': ''}

    def _save(self, data: Dict[str, Any]) -> None:
        _write(self.store, RATE_LIMIT_KEY, json.dumps(data))

    def _current(self) -> Dict[str, Any]:
        data = self._load()
        today = self._today()
        # New day, fresh budget
        if data.get('last_call_date') != today:
            data = {'calls_today': 0, 'last_call_date': today}
        return data

    def status(self) -> RateLimitStatus:
        """Remaining calls today."""
        if not self.enabled:
            return RateLimitStatus(remaining=0, can_make_call=False)

        data = self._current()
        self._save(data)
        remaining = max(0, self.limit_per_day - data.get('calls_today', 0))
        return RateLimitStatus(remaining=remaining, can_make_call=remaining > 0)

    def increment(self) -> None:
        """Record one remote call."""
        data = self._current()
        data['calls_today'] = data.get('calls_today', 0) + 1
        self._save(data)


def generate_cache_key(prefix: str, inputs: Dict[str, Any]) -> str:
    """Deterministic cache key for a set of inputs.

    Args:
        prefix: Kind of result (emotion, priorities, questions)
        inputs: JSON-serializable inputs

    Returns:
        prefix + '_' + base64 of the inputs' JSON
    """
    encoded = base64.b64encode(json.dumps(inputs, sort_keys=True).encode('utf-8')).decode('ascii')
    return f"{prefix}_{encoded}"


class ResultCache:
    """Timestamped JSON results with a time-to-live."""

    def __init__(self,
                 store: KeyValueStore,
                 clock: Clock = time.time,
                 ttl_seconds: float = DEFAULT_CACHE_TTL_SECONDS,
                 prefix: str = DEFAULT_CACHE_PREFIX):
        """Initialize result cache.

        Args:
            store: Backing storage
            clock: Returns the current time in epoch seconds
            ttl_seconds: Entry lifetime
            prefix: Namespace for this cache's keys in the store
        """
        self.store = store
        self.clock = clock
        self.ttl_seconds = ttl_seconds
        self.prefix = prefix

    def set(self, key: str, result: Any) -> None:
        """Cache a JSON-serializable result."""
        try:
            payload = json.dumps({'result': result, 'timestamp': self.clock()})
        except (TypeError, ValueError) as e:
            logger.warning(f"Failed to cache result: {e}")
            return
        _write(self.store, f"{self.prefix}{key}", payload)

    def get(self, key: str) -> Optional[Any]:
        """Cached result, or None when missing, expired or unreadable."""
        cache_key = f"{self.prefix}{key}"
        raw = _read(self.store, cache_key)
        if not raw:
            return None

        try:
            data = json.loads(raw)
            age = self.clock() - data['timestamp']
        except (ValueError, KeyError, TypeError) as e:
            logger.warning(f"Failed to retrieve cached result: {e}")
            return None

        if age > self.ttl_seconds:
            _delete(self.store, cache_key)
            return None

        return data.get('result')

    def clear(self) -> None:
        """Drop every entry of this cache, leaving other keys alone."""
        try:
            keys = list(self.store.keys())
        except Exception as e:
            logger.warning(f"Failed to list cache keys: {e}")
            return

        for key in keys:
            if key.startswith(self.prefix):
                _delete(self.store, key)
