from dataclasses import dataclass, field

from services.shared.domain import IsoDateTime, Money


@dataclass(frozen=True)
class PaymentAttempt:
    """ゲートウェイ呼び出し 1 回分の監査記録（永続化せずログに出す）"""

    reservation_id: str
    conversation_id: str
    amount: Money
    success: bool
    gateway_reference: str | None = None
    error: str | None = None
    attempted_at: IsoDateTime = field(default_factory=IsoDateTime.now)

    def to_log(self) -> dict:
        return {
            "reservation_id": self.reservation_id,
            "conversation_id": self.conversation_id,
            "amount": str(self.amount.amount),
            "currency": str(self.amount.currency),
            "success": self.success,
            "gateway_reference": self.gateway_reference,
            "error": self.error,
            "attempted_at": str(self.attempted_at),
        }
