from abc import abstractmethod

from services.reservation.domain.entity import Reservation
from services.reservation.domain.enum import PaymentStatus
from services.reservation.domain.value_object import ReservationId
from services.shared.domain import Repository


class ReservationRepository(Repository[Reservation, ReservationId]):
    """予約レポジトリのインターフェース"""

    @abstractmethod
    def save(self, reservation: Reservation) -> None:
        """予約を同乗者・追加サービスごと保存する（新規作成のみ）"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, reservation_id: ReservationId) -> Reservation | None:
        """予約IDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def update_payment_status(
        self,
        reservation: Reservation,
        expected_status: PaymentStatus | None = None,
    ) -> None:
        """決済ステータスを更新する

        expected_status を指定した場合、保存済みのステータスが一致しなければ
        OptimisticLockException とする。
        """
        raise NotImplementedError

    @abstractmethod
    def find_all(self, limit: int = 50) -> list[Reservation]:
        """予約を新しい順に取得する"""
        raise NotImplementedError
