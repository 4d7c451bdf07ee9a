from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from services.catalog.domain.value_object import AddOnPrice
from services.pricing.applications.quote_price import QuotePriceService
from services.reservation.applications.create_reservation import ReservationService
from services.reservation.domain.enum import PaymentStatus, ReservationType
from services.reservation.domain.factory import ReservationFactory
from services.route.domain.value_object import Coordinate, RouteEstimate
from services.shared.domain import (
    Money,
    ResourceNotFoundException,
    ValidationException,
)


class TestReservationService:
    @pytest.fixture
    def service(self, mock_repository, mock_catalog):
        return ReservationService(
            repository=mock_repository,
            factory=ReservationFactory(),
            catalog=mock_catalog,
            quote_service=QuotePriceService(catalog=mock_catalog),
        )

    @pytest.fixture
    def details(self):
        """40km の片道送迎（1名）の予約リクエスト"""
        return {
            "full_name": "Jane Doe",
            "email": "jane@example.com",
            "phone": "+905551112233",
            "passengers": 1,
            "vehicle_id": "vehicle-1",
            "reservation_type": "transfer",
            "distance_km": Decimal("40"),
            "pickup_location": "Istanbul Airport",
            "dropoff_location": "Taksim",
            "pickup_date": "2024-06-01",
            "pickup_time": "14:30",
        }

    def test_create_transfer_reservation(self, service, details, mock_repository):
        reservation = service.create(details)

        assert reservation.payment_status == PaymentStatus.PENDING
        assert reservation.total_price == Money.eur("100.00")
        assert reservation.vehicle_id == "vehicle-1"
        assert reservation.tour_id is None
        assert reservation.reservation_type == ReservationType.TRANSFER
        assert str(reservation.pickup_datetime) == "2024-06-01T14:30:00"
        mock_repository.save.assert_called_once_with(reservation)

    def test_pickup_time_defaults_to_midnight(self, service, details):
        del details["pickup_time"]
        reservation = service.create(details)
        assert str(reservation.pickup_datetime) == "2024-06-01T00:00:00"

    def test_iso_pickup_datetime_takes_precedence(self, service, details):
        details["pickup_datetime"] = "2024-07-01T08:00:00Z"
        reservation = service.create(details)
        assert str(reservation.pickup_datetime) == "2024-07-01T08:00:00+00:00"

    def test_invalid_pickup_datetime(self, service, details):
        details["pickup_date"] = "01/06/2024"
        with pytest.raises(ValidationException, match="Invalid pickup date/time"):
            service.create(details)

    def test_round_trip_transfer(self, service, details):
        details["round_trip"] = True
        assert service.create(details).total_price == Money.eur("200.00")

    def test_chauffeur_reservation(self, service, details):
        details.update(reservation_type="chauffeur", duration_hours=Decimal("6"))
        assert service.create(details).total_price == Money.eur("300.00")

    def test_chauffeur_inferred_from_duration(self, service, details):
        details.pop("reservation_type")
        details["duration_hours"] = 6
        assert service.create(details).total_price == Money.eur("300.00")

    def test_tour_reservation_prices_by_passengers(self, service, details):
        details.pop("vehicle_id")
        details.update(
            reservation_type="tour",
            tour_id="tour-1",
            passengers=3,
            additional_passengers=[
                {"first_name": "Ali", "last_name": "Yilmaz"},
                {"first_name": "Ayse", "last_name": "Kaya"},
            ],
        )
        reservation = service.create(details)
        assert reservation.total_price == Money.eur("225.00")
        assert len(reservation.additional_passengers) == 2

    def test_featured_transfer_is_priced_per_km(self, service, details):
        details["reservation_type"] = "featured-transfer"
        reservation = service.create(details)
        assert reservation.reservation_type == ReservationType.FEATURED_TRANSFER
        assert reservation.total_price == Money.eur("100.00")

    def test_add_ons_are_added_to_total(self, service, details):
        details["add_ons"] = [{"add_on_id": "addon-1", "quantity": 2}]

        reservation = service.create(details)

        assert reservation.total_price == Money.eur("120.00")
        assert len(reservation.add_ons) == 1
        assert reservation.add_ons[0].line_total == Money.eur("20.00")

    def test_add_ons_are_normalized(self, service, details):
        details["add_ons"] = [
            {"add_on_id": "addon-1", "quantity": 1},
            {"add_on_id": "addon-1", "quantity": 0},
            {"add_on_id": "addon-1", "quantity": -2},
            {"add_on_id": "unknown", "quantity": 1},
        ]

        reservation = service.create(details)

        assert [a.quantity for a in reservation.add_ons] == [1]
        assert reservation.total_price == Money.eur("110.00")

    def test_inactive_add_on_is_discarded(
        self, mock_repository, details, vehicle_rate
    ):
        catalog = MagicMock()
        catalog.get_vehicle_rate.return_value = vehicle_rate
        catalog.get_add_on.return_value = AddOnPrice(
            add_on_id="addon-2", name="Old", unit_price=Money.eur("5"), is_active=False
        )
        service = ReservationService(
            repository=mock_repository,
            factory=ReservationFactory(),
            catalog=catalog,
            quote_service=QuotePriceService(catalog=catalog),
        )
        details["add_ons"] = [{"add_on_id": "addon-2", "quantity": 1}]

        assert service.create(details).add_ons == ()

    def test_distance_resolved_from_coordinates(self, mock_repository, mock_catalog, details):
        resolver = MagicMock()
        resolver.resolve.return_value = RouteEstimate(
            distance_km=20.0, duration_min=30, duration_in_traffic_min=35
        )
        service = ReservationService(
            repository=mock_repository,
            factory=ReservationFactory(),
            catalog=mock_catalog,
            quote_service=QuotePriceService(catalog=mock_catalog, route_resolver=resolver),
        )
        details.update(
            origin=Coordinate(lat=41.26, lng=28.74),
            destination=Coordinate(lat=41.03, lng=28.98),
        )

        assert service.create(details).total_price == Money.eur("50.00")

    def test_matching_submitted_price_is_accepted(self, service, details):
        details["total_price"] = "100.00"
        assert service.create(details).total_price == Money.eur("100.00")

    def test_mismatching_submitted_price_is_rejected(self, service, details, mock_repository):
        details["total_price"] = Decimal("1.00")
        with pytest.raises(ValidationException, match="does not match"):
            service.create(details)
        mock_repository.save.assert_not_called()

    @pytest.mark.parametrize("price", ["-1", "NaN", "Infinity", "abc"])
    def test_invalid_submitted_price(self, service, details, price):
        details["total_price"] = price
        with pytest.raises(ValidationException, match="Total price"):
            service.create(details)

    @pytest.mark.parametrize("email", ["", "not-an-email", None])
    def test_email_is_required(self, service, details, email):
        details["email"] = email
        with pytest.raises(ValidationException, match="email"):
            service.create(details)

    def test_full_name_is_required(self, service, details):
        details["full_name"] = "  "
        with pytest.raises(ValidationException, match="Full name is required"):
            service.create(details)

    @pytest.mark.parametrize("passengers", [0, -1, 1.5, "2", True, None])
    def test_passengers_must_be_positive_integer(self, service, details, passengers):
        details["passengers"] = passengers
        with pytest.raises(ValidationException, match="Passengers"):
            service.create(details)

    def test_missing_passenger_details(self, service, details):
        details["passengers"] = 3
        details["additional_passengers"] = [{"first_name": "Ali", "last_name": "Yilmaz"}]
        with pytest.raises(ValidationException, match="passenger details required"):
            service.create(details)

    def test_blank_passenger_name(self, service, details):
        details["passengers"] = 2
        details["additional_passengers"] = [{"first_name": "Ali", "last_name": " "}]
        with pytest.raises(ValidationException, match="passenger details required"):
            service.create(details)

    def test_passenger_details_ignored_for_single_passenger(self, service, details):
        details["additional_passengers"] = [{"first_name": "Ali", "last_name": "Yilmaz"}]
        assert service.create(details).additional_passengers == ()

    def test_email_is_validated_before_passengers(self, service, details):
        details.update(email="bad", passengers=0)
        with pytest.raises(ValidationException, match="email"):
            service.create(details)

    def test_vehicle_and_tour_together_are_rejected(self, service, details):
        details["tour_id"] = "tour-1"
        with pytest.raises(ValidationException, match="not both"):
            service.create(details)

    def test_tour_type_requires_tour_id(self, service, details):
        details["reservation_type"] = "tour"
        details.pop("vehicle_id")
        with pytest.raises(ValidationException, match="Tour id is required"):
            service.create(details)

    def test_transfer_type_requires_vehicle_id(self, service, details):
        details.pop("vehicle_id")
        with pytest.raises(ValidationException, match="Vehicle id is required"):
            service.create(details)

    def test_service_reference_is_required(self, service, details):
        details.pop("vehicle_id")
        details.pop("reservation_type")
        with pytest.raises(ValidationException, match="vehicle or tour must be specified"):
            service.create(details)

    def test_unknown_reservation_type(self, service, details):
        details["reservation_type"] = "helicopter"
        with pytest.raises(ValidationException, match="Unknown reservation type"):
            service.create(details)

    def test_unknown_vehicle_raises_not_found(self, service, details):
        details["vehicle_id"] = "missing"
        with pytest.raises(ResourceNotFoundException):
            service.create(details)

    def test_transfer_requires_distance(self, service, details):
        details.pop("distance_km")
        with pytest.raises(ValidationException, match="Distance"):
            service.create(details)
