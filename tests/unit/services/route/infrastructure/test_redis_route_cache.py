import json
from unittest.mock import MagicMock

import redis

from services.route.domain.value_object import RouteEstimate
from services.route.infrastructure.redis_route_cache import (
    NullRouteCache,
    RedisRouteCache,
    route_cache_from_env,
)


class TestRedisRouteCache:
    def test_get_returns_estimate(self):
        client = MagicMock()
        client.get.return_value = json.dumps(
            {
                "distance_km": 12.3,
                "duration_min": 20,
                "duration_in_traffic_min": 25,
                "is_fallback": False,
            }
        )
        cache = RedisRouteCache(client)

        assert cache.get("key") == RouteEstimate(
            distance_km=12.3, duration_min=20, duration_in_traffic_min=25
        )

    def test_get_miss(self):
        client = MagicMock()
        client.get.return_value = None
        assert RedisRouteCache(client).get("key") is None

    def test_connection_error_is_a_miss(self):
        client = MagicMock()
        client.get.side_effect = redis.ConnectionError("refused")
        assert RedisRouteCache(client).get("key") is None

    def test_malformed_entry_is_a_miss(self):
        client = MagicMock()
        client.get.return_value = "{not json"
        assert RedisRouteCache(client).get("key") is None

    def test_set_writes_with_ttl(self):
        client = MagicMock()
        estimate = RouteEstimate(distance_km=1.0, duration_min=1, duration_in_traffic_min=1)

        RedisRouteCache(client).set("key", estimate, 60)

        client.setex.assert_called_once_with("key", 60, json.dumps(estimate.to_dict()))

    def test_set_timeout_is_ignored(self):
        client = MagicMock()
        client.setex.side_effect = redis.TimeoutError("slow")
        estimate = RouteEstimate(distance_km=1.0, duration_min=1, duration_in_traffic_min=1)

        RedisRouteCache(client).set("key", estimate, 60)


class TestRouteCacheFromEnv:
    def test_without_redis_url_returns_null_cache(self, monkeypatch):
        monkeypatch.delenv("REDIS_URL", raising=False)
        cache = route_cache_from_env()
        assert isinstance(cache, NullRouteCache)
        assert cache.get("key") is None

    def test_with_redis_url_returns_redis_cache(self, monkeypatch):
        monkeypatch.setenv("REDIS_URL", "redis://localhost:6379/0")
        assert isinstance(route_cache_from_env(), RedisRouteCache)
