from dataclasses import dataclass

from services.shared.domain import Money

from .address import Address
from .basket_item import BasketItem
from .buyer_info import BuyerInfo
from .card_details import CardDetails


@dataclass(frozen=True)
class ChargeRequest:
    """ゲートウェイへの 1 回分の請求内容"""

    reservation_id: str
    conversation_id: str
    amount: Money
    card: CardDetails
    buyer: BuyerInfo
    billing_address: Address
    shipping_address: Address
    basket_items: tuple[BasketItem, ...]

    def __post_init__(self) -> None:
        if self.amount.is_zero():
            raise ValueError("Charge amount must be positive")
        if not self.basket_items:
            raise ValueError("Charge request requires at least one basket item")
        basket_total = Money.zero(self.amount.currency)
        for item in self.basket_items:
            basket_total = basket_total.add(item.price)
        if basket_total.amount != self.amount.amount:
            raise ValueError(
                f"Basket total {basket_total} does not match charge amount {self.amount}"
            )
