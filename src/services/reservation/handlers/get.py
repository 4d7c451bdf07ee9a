from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.reservation.applications.get_reservation import GetReservationService
from services.reservation.handlers.response_models import to_response
from services.reservation.infrastructure.dynamodb_reservation_repository import (
    DynamoDBReservationRepository,
)
from services.shared.domain import ResourceNotFoundException, ValidationException
from services.shared.utils import api_response, error_response

logger = Logger()

service = GetReservationService(repository=DynamoDBReservationRepository())


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """予約取得 Lambda Handler（パスパラメータ reservation_id）"""
    reservation_id = (event.path_parameters or {}).get("reservation_id", "")

    try:
        reservation = service.get(reservation_id)
    except ValidationException as e:
        return error_response(400, str(e))
    except ResourceNotFoundException as e:
        return error_response(404, str(e))
    except Exception:
        logger.exception("Failed to get reservation")
        return error_response(500, "Failed to get reservation")

    return api_response(200, to_response(reservation))
