from typing import Callable

from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import BaseModel, ValidationError

from services.catalog.infrastructure.dynamodb_catalog_repository import (
    DynamoDBCatalogRepository,
)
from services.pricing.applications.quote_price import QuotePriceService
from services.pricing.domain.value_object import PriceQuote
from services.pricing.handlers.request_models import (
    ChauffeurQuoteRequest,
    TourQuoteRequest,
    TransferQuoteRequest,
)
from services.pricing.handlers.response_models import to_response
from services.route.applications.resolve_route import RouteDistanceResolver
from services.route.domain.value_object import Coordinate
from services.route.infrastructure.google_distance_matrix_provider import (
    routing_provider_from_env,
)
from services.route.infrastructure.redis_route_cache import route_cache_from_env
from services.shared.domain import ResourceNotFoundException, ValidationException
from services.shared.utils import api_response, error_response

logger = Logger()

catalog = DynamoDBCatalogRepository()
resolver = RouteDistanceResolver(
    cache=route_cache_from_env(),
    provider=routing_provider_from_env(),
)
service = QuotePriceService(catalog=catalog, route_resolver=resolver)


def _quote(
    event: APIGatewayProxyEventV2,
    model: type[BaseModel],
    compute: Callable[[BaseModel], PriceQuote],
) -> dict:
    """リクエストの検証・見積もり・エラー変換の共通処理"""
    try:
        request = model.model_validate_json(event.body or "{}")
    except ValidationError as e:
        return error_response(400, "Invalid request body", details=e.errors(include_url=False))

    try:
        quote = compute(request)
    except ValidationException as e:
        return error_response(400, str(e))
    except ResourceNotFoundException as e:
        return error_response(404, str(e))
    except Exception:
        logger.exception("Failed to calculate price")
        return error_response(500, "Failed to calculate price")

    logger.info(
        "Price quoted",
        extra={"service": quote.service.value, "amount": str(quote.amount)},
    )
    return api_response(200, to_response(quote))


def _coordinate(request) -> Coordinate | None:
    if request is None:
        return None
    return Coordinate(lat=request.lat, lng=request.lng)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def transfer_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """送迎見積もり Lambda Handler"""
    return _quote(
        event,
        TransferQuoteRequest,
        lambda r: service.quote_transfer(
            vehicle_id=r.vehicle_id,
            distance_km=r.distance_km,
            round_trip=r.round_trip,
            origin=_coordinate(r.origin),
            destination=_coordinate(r.destination),
        ),
    )


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def chauffeur_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """貸切見積もり Lambda Handler"""
    return _quote(
        event,
        ChauffeurQuoteRequest,
        lambda r: service.quote_chauffeur(
            vehicle_id=r.vehicle_id, duration_hours=r.duration_hours
        ),
    )


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def tour_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """ツアー見積もり Lambda Handler"""
    return _quote(
        event,
        TourQuoteRequest,
        lambda r: service.quote_tour(
            tour_id=r.tour_id, number_of_persons=r.number_of_persons
        ),
    )
