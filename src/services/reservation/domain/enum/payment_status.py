from enum import Enum


class PaymentStatus(str, Enum):
    """予約の決済ステータス

    PENDING → PAID / FAILED の一方向のみ。PAID と FAILED は終端状態。
    """

    PENDING = "PENDING"
    PAID = "PAID"
    FAILED = "FAILED"

    @property
    def is_terminal(self) -> bool:
        return self is not PaymentStatus.PENDING
