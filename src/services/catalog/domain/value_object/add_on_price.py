from dataclasses import dataclass

from services.shared.domain import Money


@dataclass(frozen=True)
class AddOnPrice:
    """追加サービスの単価（予約時点でスナップショットされる）"""

    add_on_id: str
    name: str
    unit_price: Money
    is_active: bool = True
