from dataclasses import dataclass
from decimal import Decimal

from services.pricing.domain.enum import ServiceKind
from services.shared.domain import Money


@dataclass(frozen=True)
class PriceQuote:
    """見積もり結果（永続化しない）

    金額と、その金額を導いた入力（車両/ツアー、距離・時間・人数、単価）を保持する。
    予約作成時に即座に消費され、効果は Reservation.total_price にのみ残る。
    """

    service: ServiceKind
    amount: Money
    unit_rate: Money
    vehicle_id: str | None = None
    tour_id: str | None = None
    distance_km: Decimal | None = None
    round_trip: bool = False
    duration_hours: Decimal | None = None
    number_of_persons: int | None = None

    @property
    def currency(self) -> str:
        return str(self.amount.currency)
