from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class RouteEstimate:
    """2地点間の距離と所要時間

    is_fallback=True は経路検索を使わず大圏距離から推定した値。
    """

    distance_km: float
    duration_min: int
    duration_in_traffic_min: int
    is_fallback: bool = False

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> RouteEstimate:
        return cls(
            distance_km=float(data["distance_km"]),
            duration_min=int(data["duration_min"]),
            duration_in_traffic_min=int(data["duration_in_traffic_min"]),
            is_fallback=bool(data.get("is_fallback", False)),
        )
