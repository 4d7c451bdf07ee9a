from services.reservation.domain.entity import Reservation
from services.reservation.domain.repository import ReservationRepository
from services.reservation.domain.value_object import ReservationId
from services.shared.domain import ResourceNotFoundException, ValidationException


class GetReservationService:
    """予約取得のユースケース"""

    def __init__(self, repository: ReservationRepository) -> None:
        self._repository = repository

    def get(self, reservation_id: str) -> Reservation:
        """予約を取得する（存在しなければ ResourceNotFoundException）"""
        try:
            id_ = ReservationId(value=reservation_id)
        except ValueError as e:
            raise ValidationException("Reservation id is required") from e

        reservation = self._repository.find_by_id(id_)
        if reservation is None:
            raise ResourceNotFoundException(f"Reservation not found: {reservation_id}")
        return reservation
