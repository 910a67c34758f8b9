"""AI Usage Cache - Daily per-user counters for the resume AI assistant."""

import logging
import threading
from typing import Optional, Dict, Tuple
from datetime import date
from urllib.parse import urlparse

from redis import Redis, RedisError

from core.exceptions import UsageLimitExceeded, InvalidInputError

logger = logging.getLogger(__name__)

# Counters only need to survive the day they were written
USAGE_TTL_SECONDS = 2 * 24 * 60 * 60

FREE_DAILY_LIMIT = 5
PREMIUM_DAILY_LIMIT = 20


def _sanitize_url(url: str) -> str:
    """Remove credentials from URL for safe logging."""
    try:
        parsed = urlparse(url)
        if parsed.password:
            sanitized = parsed._replace(
                netloc=f"{parsed.username or ''}:*@{parsed.hostname}:{parsed.port or 6379}"
            )
            return sanitized.geturl()
        return url
    except ValueError:
        return url


class InMemoryUsageStore:
    """Process-local usage store. Counters are lost on restart."""

    def __init__(self):
        # user_id -> (day, count); only the latest day is kept
        self._data: Dict[str, Tuple[str, int]] = {}
        self._lock = threading.Lock()

    def get_count(self, user_id: str, day: str) -> int:
        with self._lock:
            stored_day, count = self._data.get(user_id, (day, 0))
            return count if stored_day == day else 0

    def increment(self, user_id: str, day: str, limit: int) -> Optional[int]:
        """Add one use unless the limit is reached. Returns the new count or None."""
        with self._lock:
            stored_day, count = self._data.get(user_id, (day, 0))
            if stored_day != day:
                count = 0
            if count >= limit:
                return None
            self._data[user_id] = (day, count + 1)
            return count + 1


class RedisUsageStore:
    """
    Redis-backed usage store.

    Each user has one integer counter per day under ai_usage:{user_id}:{day}.
    Increments go through INCR so concurrent requests cannot overspend.
    """

    def __init__(
        self,
        redis_url: str = "redis://localhost:6379/0",
        ttl_seconds: int = USAGE_TTL_SECONDS,
        client: Optional[Redis] = None
    ):
        self.redis_url = redis_url
        self.ttl_seconds = ttl_seconds
        self._redis = client or Redis.from_url(
            redis_url,
            decode_responses=True,
            socket_connect_timeout=5,
            socket_timeout=5
        )
        logger.info(f"AI usage store using Redis at {_sanitize_url(redis_url)}")

    def _make_key(self, user_id: str, day: str) -> str:
        return f"ai_usage:{user_id}:{day}"

    def get_count(self, user_id: str, day: str) -> int:
        try:
            data = self._redis.get(self._make_key(user_id, day))
        except RedisError as e:
            logger.warning(f"Error reading AI usage for {user_id}: {e}")
            return 0
        if not data:
            return 0
        try:
            return int(data)
        except ValueError:
            logger.warning(f"Discarding corrupt usage entry for {user_id}")
            return 0

    def increment(self, user_id: str, day: str, limit: int) -> Optional[int]:
        """
        Add one use unless the limit is reached. Returns the new count or None.

        The counter is incremented first and rolled back when it passes the
        limit. Redis errors refuse the use.
        """
        key = self._make_key(user_id, day)
        try:
            pipe = self._redis.pipeline()
            pipe.incr(key)
            pipe.expire(key, self.ttl_seconds)
            count, _ = pipe.execute()
            if count > limit:
                self._redis.decr(key)
                return None
            return count
        except RedisError as e:
            logger.warning(f"Error recording AI usage for {user_id}: {e}")
            return None


class AIUsageTracker:
    """
    Tracks how many AI assistant uses a user has spent today.

    Free accounts are limited to free_limit uses per day. Premium accounts
    are never blocked; premium_limit is only reported as their allowance.
    Counters are kept per day, so a new day starts from zero.
    """

    def __init__(
        self,
        store=None,
        free_limit: int = FREE_DAILY_LIMIT,
        premium_limit: int = PREMIUM_DAILY_LIMIT
    ):
        self.store = store if store is not None else InMemoryUsageStore()
        self.free_limit = free_limit
        self.premium_limit = premium_limit

    def limit_for(self, account_type: str) -> int:
        return self.premium_limit if account_type == "premium" else self.free_limit

    def _day(self, user_id: str, today: Optional[date]) -> str:
        if not user_id:
            raise InvalidInputError("user_id is required")
        return (today or date.today()).isoformat()

    def get_count(self, user_id: str, today: Optional[date] = None) -> int:
        return self.store.get_count(user_id, self._day(user_id, today))

    def remaining(self, user_id: str, account_type: str = "free", today: Optional[date] = None) -> int:
        return max(0, self.limit_for(account_type) - self.get_count(user_id, today))

    def try_consume(self, user_id: str, account_type: str = "free", today: Optional[date] = None) -> bool:
        """Record one use if the user has any left. Returns False when blocked."""
        if account_type == "premium":
            return True

        count = self.store.increment(user_id, self._day(user_id, today), self.free_limit)
        if count is None:
            logger.info(f"AI usage refused for {user_id} (limit {self.free_limit})")
            return False
        return True

    def consume(self, user_id: str, account_type: str = "free", today: Optional[date] = None) -> int:
        """Record one use or raise UsageLimitExceeded. Returns uses remaining."""
        if not self.try_consume(user_id, account_type, today):
            raise UsageLimitExceeded(user_id, self.limit_for(account_type))
        return self.remaining(user_id, account_type, today)
