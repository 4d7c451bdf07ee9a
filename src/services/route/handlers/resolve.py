from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from services.route.applications.resolve_route import RouteDistanceResolver
from services.route.handlers.request_models import ResolveRouteRequest
from services.route.infrastructure.google_distance_matrix_provider import (
    routing_provider_from_env,
)
from services.route.infrastructure.redis_route_cache import route_cache_from_env
from services.shared.utils import api_response, error_response

logger = Logger()

resolver = RouteDistanceResolver(
    cache=route_cache_from_env(),
    provider=routing_provider_from_env(),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """経路距離・所要時間取得 Lambda Handler"""
    params = event.query_string_parameters or {}

    try:
        request = ResolveRouteRequest.model_validate(params)
    except ValidationError as e:
        return error_response(
            400,
            "Missing or invalid coordinates: fromLat, fromLng, toLat, toLng",
            details=e.errors(include_url=False),
        )

    estimate = resolver.resolve(request.origin(), request.destination())
    return api_response(
        200,
        {
            "distanceKm": estimate.distance_km,
            "durationMin": estimate.duration_min,
            "durationInTrafficMin": estimate.duration_in_traffic_min,
            "isFallback": estimate.is_fallback,
        },
    )
