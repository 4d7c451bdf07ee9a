from dataclasses import dataclass, field

from services.shared.domain import IsoDateTime, Money


@dataclass(frozen=True)
class ReservationPaid:
    """予約の決済完了イベント（PENDING → PAID で発行）"""

    reservation_id: str
    amount: Money
    gateway_reference: str | None = None
    occurred_at: IsoDateTime = field(default_factory=IsoDateTime.now)
