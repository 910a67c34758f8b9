import yaml
import os
import logging
from typing import List, Optional
from pydantic import BaseModel, Field

from core.cache.usage_cache import FREE_DAILY_LIMIT, PREMIUM_DAILY_LIMIT, USAGE_TTL_SECONDS

logger = logging.getLogger(__name__)


class ScoringConfig(BaseModel):
    """
    Configuration for the scorers.

    xp_band is the width of one level in XP: level L spans
    [(L-1) * xp_band, L * xp_band).
    """
    xp_band: int = Field(default=100, gt=0)

    # Match badge tiers shown next to recommended jobs
    match_strong_threshold: int = Field(default=80, ge=0, le=100)
    match_good_threshold: int = Field(default=50, ge=0, le=100)


class RecommendationConfig(BaseModel):
    top_n: int = Field(default=3, ge=0)


class QuestConfig(BaseModel):
    """Job Quest onboarding tasks."""
    skills_target: int = Field(default=3, gt=0)
    # Order in which incomplete tasks are promoted to the priority slot
    priority_order: List[str] = Field(
        default_factory=lambda: ["create-resume", "add-skills", "apply-job"]
    )


class UsageConfig(BaseModel):
    """Daily AI assistant usage limits."""
    free_daily_limit: int = Field(default=FREE_DAILY_LIMIT, ge=0)
    premium_daily_limit: int = Field(default=PREMIUM_DAILY_LIMIT, ge=0)
    redis_url: Optional[str] = None  # None = in-memory counters
    ttl_seconds: int = USAGE_TTL_SECONDS


class LoggingConfig(BaseModel):
    level: str = "INFO"
    format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class AppConfig(BaseModel):
    scoring: ScoringConfig = Field(default_factory=ScoringConfig)
    recommendations: RecommendationConfig = Field(default_factory=RecommendationConfig)
    quest: QuestConfig = Field(default_factory=QuestConfig)
    usage: UsageConfig = Field(default_factory=UsageConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_config(config_path: str = "config.yaml") -> AppConfig:
    # If not found at relative path (e.g. running from tests/), try the repo root
    if not os.path.exists(config_path):
        base_dir = os.path.dirname(os.path.abspath(__file__))
        config_path = os.path.join(base_dir, "..", "config.yaml")

    data = {}
    if os.path.exists(config_path):
        with open(config_path, "r") as f:
            data = yaml.safe_load(f) or {}
    else:
        logger.info("No config.yaml found, using defaults")

    # Allow env var override for Redis URL
    env_redis_url = os.environ.get("REDIS_URL")
    if env_redis_url:
        if data.get('usage') is None:
            data['usage'] = {}
        data['usage']['redis_url'] = env_redis_url

    # Allow env var override for log level
    env_log_level = os.environ.get("LOG_LEVEL")
    if env_log_level:
        if data.get('logging') is None:
            data['logging'] = {}
        data['logging']['level'] = env_log_level.upper()

    return AppConfig(**data)
