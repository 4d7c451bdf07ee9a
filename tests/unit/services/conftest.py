from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from services.catalog.domain.value_object import AddOnPrice, TourRate, VehicleRate
from services.reservation.domain.entity import Reservation
from services.reservation.domain.enum import PaymentStatus, ReservationType
from services.reservation.domain.value_object import (
    AdditionalPassenger,
    CustomerContact,
    EmailAddress,
    ReservationAddOn,
    ReservationId,
)
from services.shared.domain import Currency, IsoDateTime, Money


@pytest.fixture
def mock_repository():
    """リポジトリのモックフィクスチャ"""
    return MagicMock()


@pytest.fixture
def vehicle_rate():
    """km 単価 2.50 EUR / 時間単価 50 EUR の車両"""
    return VehicleRate(
        vehicle_id="vehicle-1",
        per_km=Money.eur("2.50"),
        hourly=Money.eur("50"),
    )


@pytest.fixture
def tour_rate():
    """1人あたり 75 EUR のツアー"""
    return TourRate(tour_id="tour-1", per_person=Money.eur("75"))


@pytest.fixture
def child_seat():
    return AddOnPrice(add_on_id="addon-1", name="Child seat", unit_price=Money.eur("10"))


@pytest.fixture
def mock_catalog(vehicle_rate, tour_rate, child_seat):
    """カタログのモック（vehicle-1 / tour-1 / addon-1 のみ存在）"""
    catalog = MagicMock()
    catalog.get_vehicle_rate.side_effect = lambda id_: (
        vehicle_rate if id_ == "vehicle-1" else None
    )
    catalog.get_tour_rate.side_effect = lambda id_: (
        tour_rate if id_ == "tour-1" else None
    )
    catalog.get_add_on.side_effect = lambda id_: (
        child_seat if id_ == "addon-1" else None
    )
    return catalog


@pytest.fixture
def create_reservation(child_seat):
    """Reservation を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        status: PaymentStatus = PaymentStatus.PENDING,
        reservation_id: str = "res-123",
        total: Decimal = Decimal("120.00"),
        with_add_on: bool = True,
        passengers: int = 2,
        reservation_type: ReservationType | None = ReservationType.TRANSFER,
        vehicle_id: str | None = "vehicle-1",
        tour_id: str | None = None,
    ) -> Reservation:
        add_ons = (ReservationAddOn.of(child_seat, 2),) if with_add_on else ()
        additional = tuple(
            AdditionalPassenger(first_name=f"Guest{i}", last_name="Doe")
            for i in range(passengers - 1)
        )
        return Reservation(
            id=ReservationId(value=reservation_id),
            contact=CustomerContact(
                full_name="Jane Doe",
                email=EmailAddress(value="jane@example.com"),
                phone="+905551112233",
            ),
            total_price=Money(amount=total, currency=Currency.eur()),
            passengers=passengers,
            created_at=IsoDateTime.from_string("2024-05-01T09:00:00+00:00"),
            vehicle_id=vehicle_id,
            tour_id=tour_id,
            reservation_type=reservation_type,
            pickup_location="Istanbul Airport",
            dropoff_location="Taksim",
            pickup_datetime=IsoDateTime.from_string("2024-06-01T14:30:00"),
            additional_passengers=additional,
            add_ons=add_ons,
            payment_status=status,
        )

    return _factory
