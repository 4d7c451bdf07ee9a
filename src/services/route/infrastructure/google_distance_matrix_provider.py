import os

import httpx

from services.route.domain.port import RoutingProvider, RoutingProviderException
from services.route.domain.value_object import Coordinate, DistanceMatrixResult

DISTANCE_MATRIX_URL = "https://maps.googleapis.com/maps/api/distancematrix/json"
REQUEST_TIMEOUT_SECONDS = 5.0


class GoogleDistanceMatrixProvider(RoutingProvider):
    """Google Distance Matrix API を使用した RoutingProvider の具象実装"""

    def __init__(
        self,
        api_key: str,
        client: httpx.Client | None = None,
        timeout: float = REQUEST_TIMEOUT_SECONDS,
    ) -> None:
        self._api_key = api_key
        self._client = client or httpx.Client(timeout=timeout)

    def distance_matrix(
        self, origin: Coordinate, destination: Coordinate
    ) -> DistanceMatrixResult:
        params = {
            "origins": str(origin),
            "destinations": str(destination),
            "key": self._api_key,
            "departure_time": "now",
            "traffic_model": "best_guess",
        }
        try:
            response = self._client.get(DISTANCE_MATRIX_URL, params=params)
            response.raise_for_status()
            body = response.json()
        except httpx.HTTPError as e:
            raise RoutingProviderException(f"Distance Matrix request failed: {e}") from e
        except ValueError as e:
            raise RoutingProviderException("Distance Matrix returned invalid JSON") from e

        return self._parse(body)

    @staticmethod
    def _parse(body: object) -> DistanceMatrixResult:
        """レスポンスの先頭要素を取り出す

        トップレベルの status が OK でない場合（REQUEST_DENIED など）はそれを採用する。
        想定外の形のレスポンスは RoutingProviderException にする。
        """
        if not isinstance(body, dict):
            raise RoutingProviderException("Distance Matrix returned a non-object body")

        top_status = body.get("status", "UNKNOWN_ERROR")
        if top_status != "OK":
            return DistanceMatrixResult(status=str(top_status))

        try:
            element = body["rows"][0]["elements"][0]
        except (KeyError, IndexError, TypeError):
            return DistanceMatrixResult(status="ZERO_RESULTS")
        if not isinstance(element, dict):
            raise RoutingProviderException("Distance Matrix returned a malformed element")

        return DistanceMatrixResult(
            status=str(element.get("status", "UNKNOWN_ERROR")),
            distance_meters=_numeric_value(element.get("distance")),
            duration_seconds=_numeric_value(element.get("duration")),
            duration_in_traffic_seconds=_numeric_value(
                element.get("duration_in_traffic")
            ),
        )


def _numeric_value(field: object) -> int | float | None:
    """{"value": <数値>} 形式のフィールドから数値を取り出す"""
    if not isinstance(field, dict):
        return None
    value = field.get("value")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value


def routing_provider_from_env() -> RoutingProvider | None:
    """GOOGLE_MAPS_API_KEY が未設定なら None（常にフォールバック）"""
    api_key = os.getenv("GOOGLE_MAPS_API_KEY")
    if not api_key:
        return None
    return GoogleDistanceMatrixProvider(api_key=api_key)
