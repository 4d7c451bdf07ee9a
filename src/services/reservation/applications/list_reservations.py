from services.reservation.domain.entity import Reservation
from services.reservation.domain.repository import ReservationRepository
from services.shared.domain import ValidationException

DEFAULT_LIMIT = 50
MAX_LIMIT = 100


class ListReservationsService:
    """予約一覧（管理者向け、新しい順）"""

    def __init__(self, repository: ReservationRepository) -> None:
        self._repository = repository

    def list(self, limit: int = DEFAULT_LIMIT) -> list[Reservation]:
        if isinstance(limit, bool) or not isinstance(limit, int) or not (
            1 <= limit <= MAX_LIMIT
        ):
            raise ValidationException(
                f"Limit must be an integer between 1 and {MAX_LIMIT}: {limit!r}"
            )
        return self._repository.find_all(limit=limit)
