import json

from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import SQSEvent, event_source
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.notification.applications.send_confirmation import (
    BookingConfirmationNotifier,
)
from services.notification.infrastructure.ses_mailer import SesMailer
from services.reservation.domain.value_object import ReservationId
from services.reservation.infrastructure.dynamodb_reservation_repository import (
    DynamoDBReservationRepository,
)

logger = Logger()

repository = DynamoDBReservationRepository()
notifier = BookingConfirmationNotifier(mailer=SesMailer())


@logger.inject_lambda_context
@event_source(data_class=SQSEvent)
def lambda_handler(event: SQSEvent, context: LambdaContext) -> dict:
    """予約確認メール送信 Lambda Handler（SQS コンシューマ）

    失敗はログに残して握りつぶす。通知の再送で決済結果が変わることはない。
    """
    sent = 0
    failed = 0
    for record in event.records:
        try:
            reservation_id = json.loads(record.body)["reservation_id"]
            reservation = repository.find_by_id(ReservationId(value=reservation_id))
            if reservation is None:
                logger.warning(
                    "Reservation not found for confirmation",
                    extra={"reservation_id": reservation_id},
                )
                failed += 1
                continue
            notifier.notify(reservation)
            sent += 1
        except Exception:
            logger.exception(
                "Failed to send booking confirmation",
                extra={"message_id": record.message_id},
            )
            failed += 1

    return {"sent": sent, "failed": failed}
