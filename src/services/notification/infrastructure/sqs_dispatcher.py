import json
import os

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from services.notification.domain.port import NotificationDispatcher
from services.reservation.domain.entity import Reservation
from services.shared.utils import get_logger

logger = get_logger("notification-service")


class SqsNotificationDispatcher(NotificationDispatcher):
    """SQS キューに通知ジョブを積むディスパッチャ

    メッセージは予約IDのみ。送信はキューのコンシューマ（send_confirmation ハンドラ）が行う。
    """

    def __init__(self, queue_url: str | None = None, client=None) -> None:
        self.queue_url = queue_url or os.getenv("NOTIFICATION_QUEUE_URL")
        self.client = client or boto3.client("sqs")

    def dispatch(self, reservation: Reservation) -> None:
        try:
            self.client.send_message(
                QueueUrl=self.queue_url,
                MessageBody=json.dumps({"reservation_id": str(reservation.id)}),
            )
        except (ClientError, BotoCoreError):
            logger.exception(
                "Failed to enqueue booking confirmation",
                extra={"reservation_id": str(reservation.id)},
            )
            return
        logger.info(
            "Booking confirmation enqueued",
            extra={"reservation_id": str(reservation.id)},
        )
