import unittest
from unittest.mock import patch, MagicMock

from core.app_context import AppContext
from core.cache.usage_cache import InMemoryUsageStore
from core.config_loader import AppConfig, UsageConfig
from core.scorer.service import ScoringService


class TestAppContext(unittest.TestCase):

    def test_build_in_memory(self):
        config = AppConfig(usage=UsageConfig(free_daily_limit=2))
        with patch("core.app_context.logging.basicConfig") as basic_config:
            context = AppContext.build(config)

        basic_config.assert_called_once()
        self.assertIsInstance(context.scoring_service, ScoringService)
        self.assertIs(context.scoring_service.config, config)
        self.assertIsInstance(context.usage_tracker.store, InMemoryUsageStore)
        self.assertEqual(context.usage_tracker.free_limit, 2)

    def test_build_with_redis(self):
        config = AppConfig(usage=UsageConfig(redis_url="redis://localhost:6379/0"))
        with patch("core.cache.usage_cache.Redis") as mock_redis_class:
            mock_redis_class.from_url.return_value = MagicMock()
            with patch("core.app_context.logging.basicConfig"):
                context = AppContext.build(config)

        self.assertEqual(context.usage_tracker.store.redis_url, "redis://localhost:6379/0")
        mock_redis_class.from_url.assert_called_once()


if __name__ == '__main__':
    unittest.main()
