from dataclasses import dataclass

from services.shared.domain import Money


@dataclass(frozen=True)
class BasketItem:
    """決済明細の 1 行（明細の合計 = 請求額）"""

    id: str
    name: str
    category: str
    price: Money
    item_type: str = "VIRTUAL"

    def __post_init__(self) -> None:
        if self.price.is_zero():
            raise ValueError(f"Basket item price must be positive: {self.id}")
