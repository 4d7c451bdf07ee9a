from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from services.catalog.infrastructure.dynamodb_catalog_repository import (
    DynamoDBCatalogRepository,
)
from services.pricing.applications.quote_price import QuotePriceService
from services.reservation.applications.create_reservation import ReservationService
from services.reservation.domain.factory import ReservationFactory
from services.reservation.handlers.request_models import CreateReservationRequest
from services.reservation.handlers.response_models import to_response
from services.reservation.infrastructure.dynamodb_reservation_repository import (
    DynamoDBReservationRepository,
)
from services.route.applications.resolve_route import RouteDistanceResolver
from services.route.infrastructure.google_distance_matrix_provider import (
    routing_provider_from_env,
)
from services.route.infrastructure.redis_route_cache import route_cache_from_env
from services.shared.domain import ResourceNotFoundException, ValidationException
from services.shared.utils import api_response, error_response

logger = Logger()

catalog = DynamoDBCatalogRepository()
quote_service = QuotePriceService(
    catalog=catalog,
    route_resolver=RouteDistanceResolver(
        cache=route_cache_from_env(),
        provider=routing_provider_from_env(),
    ),
)
service = ReservationService(
    repository=DynamoDBReservationRepository(),
    factory=ReservationFactory(),
    catalog=catalog,
    quote_service=quote_service,
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """予約作成 Lambda Handler"""
    logger.info("Received create reservation request")

    try:
        request = CreateReservationRequest.model_validate_json(event.body or "{}")
    except ValidationError as e:
        return error_response(400, "Invalid request body", details=e.errors(include_url=False))

    try:
        reservation = service.create(request.to_details())
    except ValidationException as e:
        return error_response(400, str(e))
    except ResourceNotFoundException as e:
        return error_response(404, str(e))
    except Exception:
        logger.exception("Failed to create reservation")
        return error_response(500, "Failed to create reservation")

    return api_response(201, to_response(reservation))
