from dataclasses import dataclass

from .email_address import EmailAddress


@dataclass(frozen=True)
class CustomerContact:
    """予約者の連絡先（電話番号は任意）"""

    full_name: str
    email: EmailAddress
    phone: str | None = None

    def __post_init__(self) -> None:
        if not self.full_name or not self.full_name.strip():
            raise ValueError("Full name cannot be empty")
