from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.reservation.applications.list_reservations import (
    DEFAULT_LIMIT,
    ListReservationsService,
)
from services.reservation.handlers.response_models import to_list_response
from services.reservation.infrastructure.dynamodb_reservation_repository import (
    DynamoDBReservationRepository,
)
from services.shared.domain import ValidationException
from services.shared.utils import api_response, error_response

logger = Logger()

service = ListReservationsService(repository=DynamoDBReservationRepository())


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """予約一覧 Lambda Handler（クエリ limit は任意）"""
    raw_limit = (event.query_string_parameters or {}).get("limit")

    try:
        limit = int(raw_limit) if raw_limit is not None else DEFAULT_LIMIT
    except ValueError:
        return error_response(400, f"Limit must be an integer: {raw_limit}")

    try:
        reservations = service.list(limit)
    except ValidationException as e:
        return error_response(400, str(e))
    except Exception:
        logger.exception("Failed to list reservations")
        return error_response(500, "Failed to list reservations")

    return api_response(200, to_list_response(reservations))
