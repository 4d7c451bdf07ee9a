import httpx
import pytest

from services.route.domain.port import RoutingProviderException
from services.route.domain.value_object import Coordinate
from services.route.infrastructure.google_distance_matrix_provider import (
    GoogleDistanceMatrixProvider,
    routing_provider_from_env,
)

ORIGIN = Coordinate(lat=41.2606, lng=28.7425)
DESTINATION = Coordinate(lat=41.0369, lng=28.985)


def _provider(handler) -> GoogleDistanceMatrixProvider:
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return GoogleDistanceMatrixProvider(api_key="test-key", client=client)


class TestGoogleDistanceMatrixProvider:
    def test_parses_first_element(self):
        captured = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["params"] = dict(request.url.params)
            return httpx.Response(
                200,
                json={
                    "status": "OK",
                    "rows": [
                        {
                            "elements": [
                                {
                                    "status": "OK",
                                    "distance": {"value": 40249},
                                    "duration": {"value": 2710},
                                    "duration_in_traffic": {"value": 3290},
                                }
                            ]
                        }
                    ],
                },
            )

        result = _provider(handler).distance_matrix(ORIGIN, DESTINATION)

        assert result.is_usable
        assert result.distance_meters == 40249
        assert result.duration_seconds == 2710
        assert result.duration_in_traffic_seconds == 3290
        assert captured["params"]["origins"] == "41.2606,28.7425"
        assert captured["params"]["destinations"] == "41.0369,28.985"
        assert captured["params"]["key"] == "test-key"

    def test_top_level_error_status(self):
        def handler(request):
            return httpx.Response(200, json={"status": "OVER_QUERY_LIMIT", "rows": []})

        result = _provider(handler).distance_matrix(ORIGIN, DESTINATION)
        assert result.status == "OVER_QUERY_LIMIT"
        assert result.is_rate_limited

    def test_missing_element_is_zero_results(self):
        def handler(request):
            return httpx.Response(200, json={"status": "OK", "rows": []})

        result = _provider(handler).distance_matrix(ORIGIN, DESTINATION)
        assert result.status == "ZERO_RESULTS"
        assert not result.is_usable

    @pytest.mark.parametrize(
        "body",
        [
            [],
            "OK",
            {"status": "OK", "rows": [{"elements": ["oops"]}]},
        ],
    )
    def test_malformed_body_raises_provider_exception(self, body):
        def handler(request):
            return httpx.Response(200, json=body)

        with pytest.raises(RoutingProviderException):
            _provider(handler).distance_matrix(ORIGIN, DESTINATION)

    def test_non_numeric_values_are_not_usable(self):
        def handler(request):
            return httpx.Response(
                200,
                json={
                    "status": "OK",
                    "rows": [
                        {
                            "elements": [
                                {
                                    "status": "OK",
                                    "distance": "40 km",
                                    "duration": {"value": "45 mins"},
                                    "duration_in_traffic": [],
                                }
                            ]
                        }
                    ],
                },
            )

        result = _provider(handler).distance_matrix(ORIGIN, DESTINATION)

        assert result.distance_meters is None
        assert result.duration_seconds is None
        assert result.duration_in_traffic_seconds is None
        assert not result.is_usable

    def test_http_error_raises_provider_exception(self):
        def handler(request):
            return httpx.Response(503)

        with pytest.raises(RoutingProviderException):
            _provider(handler).distance_matrix(ORIGIN, DESTINATION)

    def test_timeout_raises_provider_exception(self):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(RoutingProviderException):
            _provider(handler).distance_matrix(ORIGIN, DESTINATION)

    def test_invalid_json_raises_provider_exception(self):
        def handler(request):
            return httpx.Response(200, content=b"<html>")

        with pytest.raises(RoutingProviderException, match="invalid JSON"):
            _provider(handler).distance_matrix(ORIGIN, DESTINATION)


class TestRoutingProviderFromEnv:
    def test_without_api_key_returns_none(self, monkeypatch):
        monkeypatch.delenv("GOOGLE_MAPS_API_KEY", raising=False)
        assert routing_provider_from_env() is None

    def test_with_api_key_returns_provider(self, monkeypatch):
        monkeypatch.setenv("GOOGLE_MAPS_API_KEY", "key")
        assert isinstance(routing_provider_from_env(), GoogleDistanceMatrixProvider)
