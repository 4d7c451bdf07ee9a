from dataclasses import dataclass


@dataclass(frozen=True)
class AdditionalPassenger:
    """同乗者（予約者本人以外）"""

    first_name: str
    last_name: str

    def __post_init__(self) -> None:
        if not self.first_name or not self.first_name.strip():
            raise ValueError("Passenger first name cannot be empty")
        if not self.last_name or not self.last_name.strip():
            raise ValueError("Passenger last name cannot be empty")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
