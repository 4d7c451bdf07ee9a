from typing import TypedDict

from services.reservation.domain.entity import Reservation
from services.reservation.domain.enum import PaymentStatus, ReservationType
from services.reservation.domain.value_object import (
    AdditionalPassenger,
    CustomerContact,
    ReservationAddOn,
    ReservationId,
)
from services.shared.domain import IsoDateTime, Money


class ReservationDraft(TypedDict):
    """検証・料金計算済みの予約内容（TypedDict）"""

    contact: CustomerContact
    total_price: Money
    passengers: int
    vehicle_id: str | None
    tour_id: str | None
    reservation_type: ReservationType | None
    pickup_location: str | None
    dropoff_location: str | None
    pickup_datetime: IsoDateTime | None
    additional_passengers: tuple[AdditionalPassenger, ...]
    add_ons: tuple[ReservationAddOn, ...]


class ReservationFactory:
    """予約ファクトリ"""

    def create(self, draft: ReservationDraft) -> Reservation:
        """新規予約を PENDING で生成する（ID・作成日時はサーバ側で採番）"""
        return Reservation(
            id=ReservationId.generate(),
            contact=draft["contact"],
            total_price=draft["total_price"],
            passengers=draft["passengers"],
            created_at=IsoDateTime.now(),
            vehicle_id=draft["vehicle_id"],
            tour_id=draft["tour_id"],
            reservation_type=draft["reservation_type"],
            pickup_location=draft["pickup_location"],
            dropoff_location=draft["dropoff_location"],
            pickup_datetime=draft["pickup_datetime"],
            additional_passengers=draft["additional_passengers"],
            add_ons=draft["add_ons"],
            payment_status=PaymentStatus.PENDING,
        )
