"""Cache Module - Per-user counters that outlive a single request."""
from core.cache.usage_cache import (
    AIUsageTracker,
    InMemoryUsageStore,
    RedisUsageStore,
    USAGE_TTL_SECONDS
)

__all__ = [
    'AIUsageTracker',
    'InMemoryUsageStore',
    'RedisUsageStore',
    'USAGE_TTL_SECONDS'
]
