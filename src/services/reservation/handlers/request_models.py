from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from services.pricing.handlers.request_models import CoordinateRequest
from services.reservation.applications.create_reservation import ReservationDetails
from services.route.domain.value_object import Coordinate
from services.shared.utils import to_decimal


class PassengerRequest(BaseModel):
    """同乗者の入力スキーマ（空文字の検証はユースケース側で行う）"""

    model_config = ConfigDict(populate_by_name=True)

    first_name: str = Field(default="", alias="firstName")
    last_name: str = Field(default="", alias="lastName")


class AddOnRequest(BaseModel):
    """追加サービスの入力スキーマ"""

    model_config = ConfigDict(populate_by_name=True)

    add_on_id: str = Field(..., alias="addOnId")
    quantity: int = 1


class CreateReservationRequest(BaseModel):
    """予約作成リクエストモデル"""

    model_config = ConfigDict(populate_by_name=True)

    full_name: str = Field(default="", alias="fullName")
    email: str = ""
    phone: str | None = None
    passengers: int = 1
    additional_passengers: list[PassengerRequest] = Field(
        default_factory=list, alias="additionalPassengers"
    )
    add_ons: list[AddOnRequest] = Field(default_factory=list, alias="addOns")
    total_price: Decimal | None = Field(
        default=None,
        alias="totalPrice",
        description="クライアント側の見積もり額（追加サービス抜き）。サーバの見積もりと照合する",
    )
    reservation_type: str | None = Field(default=None, alias="reservationType")
    vehicle_id: str | None = Field(default=None, alias="vehicleId")
    tour_id: str | None = Field(default=None, alias="tourId")
    pickup_location: str | None = Field(default=None, alias="pickupLocation")
    dropoff_location: str | None = Field(default=None, alias="dropoffLocation")
    pickup_datetime: str | None = Field(default=None, alias="pickupDatetime")
    pickup_date: str | None = Field(default=None, alias="pickupDate")
    pickup_time: str | None = Field(default=None, alias="pickupTime")
    distance_km: Decimal | None = Field(default=None, alias="distanceKm")
    round_trip: bool = Field(default=False, alias="roundTrip")
    duration_hours: Decimal | None = Field(default=None, alias="durationHours")
    origin: CoordinateRequest | None = None
    destination: CoordinateRequest | None = None

    @field_validator("total_price", "distance_km", "duration_hours", mode="before")
    @classmethod
    def convert_to_decimal(cls, v):
        if v is None:
            return v
        return to_decimal(v)

    def to_details(self) -> ReservationDetails:
        """ユースケースの入力形式に変換する"""
        details: ReservationDetails = {
            "full_name": self.full_name,
            "email": self.email,
            "phone": self.phone,
            "passengers": self.passengers,
            "additional_passengers": [
                {"first_name": p.first_name, "last_name": p.last_name}
                for p in self.additional_passengers
            ],
            "add_ons": [
                {"add_on_id": a.add_on_id, "quantity": a.quantity}
                for a in self.add_ons
            ],
            "total_price": self.total_price,
            "reservation_type": self.reservation_type,
            "vehicle_id": self.vehicle_id,
            "tour_id": self.tour_id,
            "pickup_location": self.pickup_location,
            "dropoff_location": self.dropoff_location,
            "pickup_datetime": self.pickup_datetime,
            "pickup_date": self.pickup_date,
            "pickup_time": self.pickup_time,
            "distance_km": self.distance_km,
            "round_trip": self.round_trip,
            "duration_hours": self.duration_hours,
            "origin": _coordinate(self.origin),
            "destination": _coordinate(self.destination),
        }
        return details


def _coordinate(request: CoordinateRequest | None) -> Coordinate | None:
    if request is None:
        return None
    return Coordinate(lat=request.lat, lng=request.lng)
