import re
from dataclasses import dataclass, field

CARD_NUMBER_PATTERN = re.compile(r"^\d{12,19}$")
CVC_PATTERN = re.compile(r"^\d{3,4}$")


@dataclass(frozen=True)
class CardDetails:
    """カード情報

    カード番号と CVC は repr に含めない（ログに出さない）。
    """

    holder_name: str
    number: str = field(repr=False)
    expire_month: str
    expire_year: str
    cvc: str = field(repr=False)

    def __post_init__(self) -> None:
        if not self.holder_name or not self.holder_name.strip():
            raise ValueError("Card holder name cannot be empty")
        number = self.number.replace(" ", "")
        if not CARD_NUMBER_PATTERN.match(number):
            raise ValueError("Card number is invalid")
        object.__setattr__(self, "number", number)
        if not self.expire_month.isdigit() or not 1 <= int(self.expire_month) <= 12:
            raise ValueError("Card expiry month is invalid")
        if not self.expire_year.isdigit() or len(self.expire_year) not in (2, 4):
            raise ValueError("Card expiry year is invalid")
        if not CVC_PATTERN.match(self.cvc):
            raise ValueError("Card CVC is invalid")

    @property
    def masked_number(self) -> str:
        return f"{'*' * (len(self.number) - 4)}{self.number[-4:]}"
