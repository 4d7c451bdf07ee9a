from __future__ import annotations

from dataclasses import dataclass

from services.catalog.domain.value_object import AddOnPrice
from services.shared.domain import Money


@dataclass(frozen=True)
class ReservationAddOn:
    """予約に紐づく追加サービス

    単価・小計は予約時点のカタログ価格のスナップショット。
    カタログ側の価格が後で変わっても予約の金額は変わらない。
    """

    add_on_id: str
    name: str
    quantity: int
    unit_price: Money
    line_total: Money

    def __post_init__(self) -> None:
        if isinstance(self.quantity, bool) or self.quantity < 1:
            raise ValueError(f"Add-on quantity must be at least 1: {self.quantity!r}")
        if self.unit_price.currency != self.line_total.currency:
            raise ValueError("Add-on unit price and line total currencies differ")

    @classmethod
    def of(cls, add_on: AddOnPrice, quantity: int) -> ReservationAddOn:
        """カタログ単価と数量から明細を作る（小計 = 単価 × 数量）"""
        return cls(
            add_on_id=add_on.add_on_id,
            name=add_on.name,
            quantity=quantity,
            unit_price=add_on.unit_price,
            line_total=add_on.unit_price.multiply(quantity).rounded(),
        )
