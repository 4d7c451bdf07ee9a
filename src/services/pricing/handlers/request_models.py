from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from services.shared.utils import to_decimal


class CoordinateRequest(BaseModel):
    """座標の入力スキーマ"""

    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)


class TransferQuoteRequest(BaseModel):
    """送迎見積もりリクエストモデル"""

    model_config = ConfigDict(populate_by_name=True)

    vehicle_id: str = Field(..., alias="vehicleId", min_length=1)
    distance_km: Decimal | None = Field(
        default=None,
        alias="distanceKm",
        description="距離（km）。座標が指定された場合はサーバ側で解決した距離を優先する",
    )
    round_trip: bool = Field(default=False, alias="roundTrip")
    origin: CoordinateRequest | None = None
    destination: CoordinateRequest | None = None

    @field_validator("distance_km", mode="before")
    @classmethod
    def convert_distance_to_decimal(cls, v):
        if v is None:
            return v
        return to_decimal(v)


class ChauffeurQuoteRequest(BaseModel):
    """貸切見積もりリクエストモデル"""

    model_config = ConfigDict(populate_by_name=True)

    vehicle_id: str = Field(..., alias="vehicleId", min_length=1)
    duration_hours: Decimal = Field(..., alias="durationHours")

    @field_validator("duration_hours", mode="before")
    @classmethod
    def convert_duration_to_decimal(cls, v):
        return to_decimal(v)


class TourQuoteRequest(BaseModel):
    """ツアー見積もりリクエストモデル"""

    model_config = ConfigDict(populate_by_name=True)

    tour_id: str = Field(..., alias="tourId", min_length=1)
    number_of_persons: int = Field(..., alias="numberOfPersons", ge=1)
