from enum import Enum


class ReservationType(str, Enum):
    """予約種別（集計用のタグ。料金計算には使わない）"""

    TRANSFER = "transfer"
    CHAUFFEUR = "chauffeur"
    TOUR = "tour"
    FEATURED_TRANSFER = "featured-transfer"

    @property
    def uses_vehicle(self) -> bool:
        return self is not ReservationType.TOUR
