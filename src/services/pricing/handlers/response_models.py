from __future__ import annotations

from pydantic import BaseModel

from services.pricing.domain.value_object import PriceQuote


class PriceQuoteData(BaseModel):
    """見積もりデータのレスポンスモデル"""

    service: str
    price: str
    currency: str
    unit_rate: str
    vehicle_id: str | None = None
    tour_id: str | None = None
    distance_km: str | None = None
    round_trip: bool = False
    duration_hours: str | None = None
    number_of_persons: int | None = None


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: PriceQuoteData


def _str_or_none(value: object) -> str | None:
    return None if value is None else str(value)


def to_response(quote: PriceQuote) -> dict:
    """PriceQuote をレスポンス辞書に変換する"""
    return SuccessResponse(
        data=PriceQuoteData(
            service=quote.service.value,
            price=str(quote.amount.amount),
            currency=quote.currency,
            unit_rate=str(quote.unit_rate.amount),
            vehicle_id=quote.vehicle_id,
            tour_id=quote.tour_id,
            distance_km=_str_or_none(quote.distance_km),
            round_trip=quote.round_trip,
            duration_hours=_str_or_none(quote.duration_hours),
            number_of_persons=quote.number_of_persons,
        )
    ).model_dump()
