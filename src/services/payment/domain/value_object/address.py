from dataclasses import dataclass


@dataclass(frozen=True)
class Address:
    """請求先・配送先住所"""

    contact_name: str
    city: str
    country: str
    address: str
    zip_code: str | None = None

    def __post_init__(self) -> None:
        for name in ("contact_name", "city", "country", "address"):
            value = getattr(self, name)
            if not value or not value.strip():
                raise ValueError(f"Address {name} cannot be empty")
