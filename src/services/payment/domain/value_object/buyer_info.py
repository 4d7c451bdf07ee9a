from dataclasses import dataclass


@dataclass(frozen=True)
class BuyerInfo:
    """購入者情報（決済ゲートウェイの本人確認項目）"""

    id: str
    name: str
    surname: str
    email: str
    identity_number: str
    registration_address: str
    city: str
    country: str
    ip: str
    gsm_number: str | None = None
    zip_code: str | None = None

    def __post_init__(self) -> None:
        for name in (
            "id",
            "name",
            "surname",
            "email",
            "identity_number",
            "registration_address",
            "city",
            "country",
            "ip",
        ):
            value = getattr(self, name)
            if not value or not value.strip():
                raise ValueError(f"Buyer {name} cannot be empty")
