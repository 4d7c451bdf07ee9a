from dataclasses import dataclass

from services.reservation.domain.enum import PaymentStatus


@dataclass(frozen=True)
class ChargeResult:
    """決済結果"""

    reservation_id: str
    success: bool
    payment_status: PaymentStatus
    gateway_reference: str | None = None
    message: str | None = None
    already_processed: bool = False
