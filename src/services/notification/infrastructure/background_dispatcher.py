from concurrent.futures import ThreadPoolExecutor

from services.notification.applications.send_confirmation import (
    BookingConfirmationNotifier,
)
from services.notification.domain.port import NotificationDispatcher
from services.reservation.domain.entity import Reservation
from services.shared.utils import get_logger

logger = get_logger("notification-service")


class BackgroundNotificationDispatcher(NotificationDispatcher):
    """スレッドプールで通知を送るディスパッチャ

    呼び出し元のレスポンスを待たせない。Lambda ではハンドラ終了後に
    実行環境が凍結されうるため、本番では SqsNotificationDispatcher を使う。
    """

    def __init__(
        self,
        notifier: BookingConfirmationNotifier,
        executor: ThreadPoolExecutor | None = None,
    ) -> None:
        self._notifier = notifier
        self._executor = executor or ThreadPoolExecutor(
            max_workers=2, thread_name_prefix="notification"
        )

    def dispatch(self, reservation: Reservation) -> None:
        self._executor.submit(self._run, reservation)

    def shutdown(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)

    def _run(self, reservation: Reservation) -> None:
        try:
            self._notifier.notify(reservation)
        except Exception:
            logger.exception(
                "Failed to send booking confirmation",
                extra={"reservation_id": str(reservation.id)},
            )
