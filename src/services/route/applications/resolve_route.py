from services.route.domain.port import (
    RouteCache,
    RoutingProvider,
    RoutingProviderException,
)
from services.route.domain.service import estimate_route
from services.route.domain.value_object import (
    Coordinate,
    DistanceMatrixResult,
    RouteEstimate,
)
from services.shared.utils import get_logger

logger = get_logger("route-service")

PROVIDER_TTL_SECONDS = 30 * 24 * 60 * 60
FALLBACK_TTL_SECONDS = 24 * 60 * 60


class RouteDistanceResolver:
    """2地点間の距離・所要時間を解決するユースケース

    1. キャッシュを参照（キャッシュ障害はミス扱い）
    2. ミスなら経路検索プロバイダを呼ぶ
    3. 成功なら長い TTL でキャッシュして返す
    4. 失敗・レート制限・認証情報なしなら大圏距離で推定し、短い TTL でキャッシュして返す

    プロバイダが使えなくても例外は送出しない。
    """

    def __init__(
        self,
        cache: RouteCache,
        provider: RoutingProvider | None = None,
    ) -> None:
        self._cache = cache
        self._provider = provider

    def resolve(self, origin: Coordinate, destination: Coordinate) -> RouteEstimate:
        """経路を解決する"""
        cache_key = self.cache_key(origin, destination)

        cached = self._cache.get(cache_key)
        if cached is not None:
            logger.debug("Route cache hit", extra={"cache_key": cache_key})
            return cached

        estimate = self._from_provider(origin, destination)
        if estimate is not None:
            self._cache.set(cache_key, estimate, PROVIDER_TTL_SECONDS)
            return estimate

        estimate = estimate_route(origin, destination)
        self._cache.set(cache_key, estimate, FALLBACK_TTL_SECONDS)
        return estimate

    @staticmethod
    def cache_key(origin: Coordinate, destination: Coordinate) -> str:
        return f"maps:route:{origin}|{destination}"

    def _from_provider(
        self, origin: Coordinate, destination: Coordinate
    ) -> RouteEstimate | None:
        if self._provider is None:
            logger.warning("Routing provider not configured, using great-circle fallback")
            return None

        try:
            result = self._provider.distance_matrix(origin, destination)
        except RoutingProviderException as e:
            logger.warning(
                "Routing provider request failed, using fallback",
                extra={"error": str(e)},
            )
            return None
        except Exception:
            logger.exception("Unexpected routing provider error, using fallback")
            return None

        if result.is_rate_limited:
            logger.warning(
                "Routing provider rate limited, using fallback",
                extra={"status": result.status},
            )
            return None
        if not result.is_usable:
            logger.warning(
                "Routing provider returned unusable status, using fallback",
                extra={"status": result.status},
            )
            return None

        try:
            return self._to_estimate(result)
        except (ArithmeticError, TypeError, ValueError):
            logger.exception(
                "Routing provider returned unusable values, using fallback",
                extra={"status": result.status},
            )
            return None

    @staticmethod
    def _to_estimate(result: DistanceMatrixResult) -> RouteEstimate:
        """メートル→km（小数第1位）、秒→分（整数）に変換する"""
        duration_min = round(result.duration_seconds / 60)
        if result.duration_in_traffic_seconds is not None:
            duration_in_traffic_min = round(result.duration_in_traffic_seconds / 60)
        else:
            duration_in_traffic_min = duration_min

        return RouteEstimate(
            distance_km=round(result.distance_meters / 1000, 1),
            duration_min=duration_min,
            duration_in_traffic_min=duration_in_traffic_min,
        )
