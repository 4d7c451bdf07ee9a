from dataclasses import dataclass

from services.shared.domain import Money


@dataclass(frozen=True)
class TourRate:
    """ツアーの1人あたり料金"""

    tour_id: str
    per_person: Money

    def __post_init__(self) -> None:
        if not self.tour_id:
            raise ValueError("Tour id cannot be empty")
