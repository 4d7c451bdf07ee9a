from abc import ABC, abstractmethod

from services.reservation.domain.entity import Reservation


class NotificationDispatcher(ABC):
    """予約確認通知の非同期ディスパッチャ

    dispatch は呼び出し元をブロックせず、例外も送出しない。
    送信の失敗はログでのみ観測できる。
    """

    @abstractmethod
    def dispatch(self, reservation: Reservation) -> None:
        raise NotImplementedError
