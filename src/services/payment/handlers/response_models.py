from __future__ import annotations

from pydantic import BaseModel

from services.payment.domain.value_object import ChargeResult


class ChargeData(BaseModel):
    """決済結果のレスポンスモデル"""

    success: bool
    reservation_id: str
    payment_status: str
    gateway_reference: str | None = None
    message: str | None = None
    already_processed: bool = False


def to_response(result: ChargeResult) -> dict:
    """ChargeResult をレスポンス辞書に変換する"""
    return ChargeData(
        success=result.success,
        reservation_id=result.reservation_id,
        payment_status=result.payment_status.value,
        gateway_reference=result.gateway_reference,
        message=result.message,
        already_processed=result.already_processed,
    ).model_dump()
