from __future__ import annotations

from pydantic import BaseModel

from services.reservation.domain.entity import Reservation


class PassengerData(BaseModel):
    first_name: str
    last_name: str


class AddOnData(BaseModel):
    add_on_id: str
    name: str
    quantity: int
    unit_price: str
    line_total: str


class ReservationData(BaseModel):
    """予約データのレスポンスモデル"""

    reservation_id: str
    full_name: str
    email: str
    phone: str | None = None
    reservation_type: str | None = None
    vehicle_id: str | None = None
    tour_id: str | None = None
    pickup_location: str | None = None
    dropoff_location: str | None = None
    pickup_datetime: str | None = None
    passengers: int
    additional_passengers: list[PassengerData]
    add_ons: list[AddOnData]
    total_price: str
    currency: str
    payment_status: str
    created_at: str


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: ReservationData


class ListResponse(BaseModel):
    """一覧レスポンスモデル"""

    status: str = "success"
    data: list[ReservationData]


def to_data(reservation: Reservation) -> ReservationData:
    """Reservation エンティティをレスポンスモデルに変換する"""
    return ReservationData(
        reservation_id=str(reservation.id),
        full_name=reservation.contact.full_name,
        email=str(reservation.contact.email),
        phone=reservation.contact.phone,
        reservation_type=(
            reservation.reservation_type.value if reservation.reservation_type else None
        ),
        vehicle_id=reservation.vehicle_id,
        tour_id=reservation.tour_id,
        pickup_location=reservation.pickup_location,
        dropoff_location=reservation.dropoff_location,
        pickup_datetime=(
            str(reservation.pickup_datetime) if reservation.pickup_datetime else None
        ),
        passengers=reservation.passengers,
        additional_passengers=[
            PassengerData(first_name=p.first_name, last_name=p.last_name)
            for p in reservation.additional_passengers
        ],
        add_ons=[
            AddOnData(
                add_on_id=a.add_on_id,
                name=a.name,
                quantity=a.quantity,
                unit_price=str(a.unit_price.amount),
                line_total=str(a.line_total.amount),
            )
            for a in reservation.add_ons
        ],
        total_price=str(reservation.total_price.amount),
        currency=str(reservation.total_price.currency),
        payment_status=reservation.payment_status.value,
        created_at=str(reservation.created_at),
    )


def to_response(reservation: Reservation) -> dict:
    """Reservation エンティティをレスポンス辞書に変換する"""
    return SuccessResponse(data=to_data(reservation)).model_dump()


def to_list_response(reservations: list[Reservation]) -> dict:
    return ListResponse(data=[to_data(r) for r in reservations]).model_dump()
