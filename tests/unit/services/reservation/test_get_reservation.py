import pytest

from services.reservation.applications.get_reservation import GetReservationService
from services.reservation.applications.list_reservations import (
    ListReservationsService,
)
from services.reservation.domain.value_object import ReservationId
from services.shared.domain import ResourceNotFoundException, ValidationException


class TestGetReservationService:
    def test_get_returns_reservation(self, mock_repository, create_reservation):
        reservation = create_reservation()
        mock_repository.find_by_id.return_value = reservation

        result = GetReservationService(mock_repository).get("res-123")

        assert result is reservation
        mock_repository.find_by_id.assert_called_once_with(ReservationId(value="res-123"))

    def test_get_unknown_raises_not_found(self, mock_repository):
        mock_repository.find_by_id.return_value = None
        with pytest.raises(ResourceNotFoundException, match="Reservation not found"):
            GetReservationService(mock_repository).get("missing")

    def test_get_blank_id_raises_validation_error(self, mock_repository):
        with pytest.raises(ValidationException):
            GetReservationService(mock_repository).get("")


class TestListReservationsService:
    def test_list_delegates_to_repository(self, mock_repository, create_reservation):
        reservations = [create_reservation(reservation_id="b"), create_reservation()]
        mock_repository.find_all.return_value = reservations

        assert ListReservationsService(mock_repository).list(10) == reservations
        mock_repository.find_all.assert_called_once_with(limit=10)

    @pytest.mark.parametrize("limit", [0, 101, -1])
    def test_list_rejects_out_of_range_limit(self, mock_repository, limit):
        with pytest.raises(ValidationException, match="Limit"):
            ListReservationsService(mock_repository).list(limit)
