import json
import os

import redis

from services.route.domain.port import RouteCache
from services.route.domain.value_object import RouteEstimate
from services.shared.utils import get_logger

logger = get_logger("route-service")

REDIS_SOCKET_TIMEOUT_SECONDS = 0.5
REDIS_CONNECT_TIMEOUT_SECONDS = 0.5


class RedisRouteCache(RouteCache):
    """Redis を使用した RouteCache の具象実装

    Redis に接続できない・タイムアウトした場合は、get はミス、set は何もしない。
    """

    def __init__(self, client: redis.Redis) -> None:
        self._client = client

    @classmethod
    def from_url(cls, url: str) -> "RedisRouteCache":
        client = redis.Redis.from_url(
            url,
            decode_responses=True,
            socket_timeout=REDIS_SOCKET_TIMEOUT_SECONDS,
            socket_connect_timeout=REDIS_CONNECT_TIMEOUT_SECONDS,
        )
        return cls(client)

    def get(self, key: str) -> RouteEstimate | None:
        try:
            raw = self._client.get(key)
        except redis.RedisError as e:
            logger.warning("Route cache read failed", extra={"error": str(e)})
            return None
        if not raw:
            return None

        try:
            return RouteEstimate.from_dict(json.loads(raw))
        except (ValueError, KeyError, TypeError):
            logger.warning("Discarding malformed route cache entry", extra={"key": key})
            return None

    def set(self, key: str, estimate: RouteEstimate, ttl_seconds: int) -> None:
        try:
            self._client.setex(key, ttl_seconds, json.dumps(estimate.to_dict()))
        except redis.RedisError as e:
            logger.warning("Route cache write failed", extra={"error": str(e)})


class NullRouteCache(RouteCache):
    """キャッシュ未設定時の実装（常にミス）"""

    def get(self, key: str) -> RouteEstimate | None:
        return None

    def set(self, key: str, estimate: RouteEstimate, ttl_seconds: int) -> None:
        return None


def route_cache_from_env() -> RouteCache:
    """REDIS_URL があれば Redis、なければ NullRouteCache を返す"""
    url = os.getenv("REDIS_URL")
    if not url:
        return NullRouteCache()
    return RedisRouteCache.from_url(url)
