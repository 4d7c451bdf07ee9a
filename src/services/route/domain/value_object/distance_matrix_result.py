from dataclasses import dataclass

OK_STATUS = "OK"
RATE_LIMITED_STATUSES = frozenset({"OVER_QUERY_LIMIT", "OVER_DAILY_LIMIT"})


@dataclass(frozen=True)
class DistanceMatrixResult:
    """経路検索プロバイダの応答（1 origin × 1 destination）"""

    status: str
    distance_meters: int | None = None
    duration_seconds: int | None = None
    duration_in_traffic_seconds: int | None = None

    @property
    def is_usable(self) -> bool:
        return (
            self.status == OK_STATUS
            and self.distance_meters is not None
            and self.duration_seconds is not None
        )

    @property
    def is_rate_limited(self) -> bool:
        return self.status in RATE_LIMITED_STATUSES
