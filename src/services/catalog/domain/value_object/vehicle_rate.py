from dataclasses import dataclass

from services.shared.domain import Money


@dataclass(frozen=True)
class VehicleRate:
    """車両の料金表

    - per_km: 送迎（transfer）の km 単価
    - hourly: 貸切（chauffeur）の時間単価

    基本料金（base price）は送迎料金には使わないため保持しない。
    """

    vehicle_id: str
    per_km: Money
    hourly: Money

    def __post_init__(self) -> None:
        if not self.vehicle_id:
            raise ValueError("Vehicle id cannot be empty")
