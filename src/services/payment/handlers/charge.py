import os

from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from services.notification.applications.send_confirmation import (
    BookingConfirmationNotifier,
)
from services.notification.domain.port import NotificationDispatcher
from services.notification.infrastructure.background_dispatcher import (
    BackgroundNotificationDispatcher,
)
from services.notification.infrastructure.ses_mailer import SesMailer
from services.notification.infrastructure.sqs_dispatcher import (
    SqsNotificationDispatcher,
)
from services.payment.applications.charge_reservation import ChargeReservationService
from services.payment.handlers.request_models import ChargeReservationRequest
from services.payment.handlers.response_models import to_response
from services.payment.infrastructure.iyzico_payment_gateway import (
    iyzico_gateway_from_env,
)
from services.reservation.infrastructure.dynamodb_reservation_repository import (
    DynamoDBReservationRepository,
)
from services.shared.domain import ResourceNotFoundException, ValidationException
from services.shared.utils import api_response, error_response

logger = Logger()


def _dispatcher_from_env() -> NotificationDispatcher:
    """NOTIFICATION_QUEUE_URL があれば SQS、なければスレッドプールで通知する"""
    if os.getenv("NOTIFICATION_QUEUE_URL"):
        return SqsNotificationDispatcher()
    return BackgroundNotificationDispatcher(
        notifier=BookingConfirmationNotifier(mailer=SesMailer())
    )


service = ChargeReservationService(
    repository=DynamoDBReservationRepository(),
    gateway=iyzico_gateway_from_env(),
    dispatcher=_dispatcher_from_env(),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """予約決済 Lambda Handler

    請求が拒否された場合も 200 で success=false を返す。
    """
    logger.info("Received charge request")

    try:
        request = ChargeReservationRequest.model_validate_json(event.body or "{}")
        details = request.to_payment_details(
            source_ip=event.request_context.http.source_ip
        )
    except ValidationError as e:
        return error_response(
            400,
            "Invalid request body",
            details=e.errors(include_url=False, include_input=False),
        )
    except ValueError as e:
        return error_response(400, str(e))

    try:
        result = service.charge(request.reservation_id, details)
    except ValidationException as e:
        return error_response(400, str(e))
    except ResourceNotFoundException as e:
        return error_response(404, str(e))
    except Exception:
        logger.exception("Failed to process payment")
        return error_response(500, "Failed to process payment")

    return api_response(200, to_response(result))
