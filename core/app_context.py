import logging
from dataclasses import dataclass

from core.config_loader import AppConfig, LoggingConfig, UsageConfig, load_config
from core.cache.usage_cache import AIUsageTracker, InMemoryUsageStore, RedisUsageStore
from core.scorer.service import ScoringService


@dataclass
class AppContext:
    """Application context container that holds all wired dependencies.

    Request handlers in the application shell receive this object instead
    of reaching for module-level singletons. Session-scoped counters (daily
    AI usage) live in the usage tracker's store, not in process globals.
    """
    config: AppConfig
    scoring_service: ScoringService
    usage_tracker: AIUsageTracker

    @classmethod
    def build(cls, config: AppConfig) -> "AppContext":
        """Build an AppContext from config.

        Args:
            config: Loaded application configuration

        Returns:
            Fully wired AppContext instance
        """
        cls._configure_logging(config.logging)

        return cls(
            config=config,
            scoring_service=ScoringService(config),
            usage_tracker=cls._build_usage_tracker(config.usage),
        )

    @classmethod
    def from_file(cls, config_path: str = "config.yaml") -> "AppContext":
        return cls.build(load_config(config_path))

    @staticmethod
    def _configure_logging(logging_config: LoggingConfig) -> None:
        logging.basicConfig(
            level=getattr(logging, logging_config.level.upper(), logging.INFO),
            format=logging_config.format
        )

    @staticmethod
    def _build_usage_tracker(usage_config: UsageConfig) -> AIUsageTracker:
        """Redis-backed when a URL is configured, in-memory otherwise."""
        if usage_config.redis_url:
            store = RedisUsageStore(
                redis_url=usage_config.redis_url,
                ttl_seconds=usage_config.ttl_seconds
            )
        else:
            store = InMemoryUsageStore()

        return AIUsageTracker(
            store=store,
            free_limit=usage_config.free_daily_limit,
            premium_limit=usage_config.premium_daily_limit
        )
