import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Coordinate:
    """緯度経度（WGS84）"""

    lat: float
    lng: float

    def __post_init__(self) -> None:
        if not (math.isfinite(self.lat) and math.isfinite(self.lng)):
            raise ValueError(f"Invalid coordinates: {self.lat}, {self.lng}")
        if not -90 <= self.lat <= 90:
            raise ValueError(f"Latitude out of range: {self.lat}")
        if not -180 <= self.lng <= 180:
            raise ValueError(f"Longitude out of range: {self.lng}")

    def __str__(self) -> str:
        return f"{self.lat},{self.lng}"
