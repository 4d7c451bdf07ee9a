from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from services.payment.applications.charge_reservation import PaymentDetails
from services.payment.domain.value_object import Address, BuyerInfo, CardDetails
from services.shared.utils import to_decimal


class AddressRequest(BaseModel):
    """住所の入力スキーマ"""

    model_config = ConfigDict(populate_by_name=True)

    contact_name: str = Field(..., alias="contactName", min_length=1)
    city: str = Field(..., min_length=1)
    country: str = Field(..., min_length=1)
    address: str = Field(..., min_length=1)
    zip_code: str | None = Field(default=None, alias="zipCode")

    def to_domain(self) -> Address:
        return Address(
            contact_name=self.contact_name,
            city=self.city,
            country=self.country,
            address=self.address,
            zip_code=self.zip_code,
        )


class BuyerRequest(BaseModel):
    """購入者の入力スキーマ"""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    surname: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3)
    identity_number: str = Field(..., alias="identityNumber", min_length=1)
    registration_address: str = Field(..., alias="registrationAddress", min_length=1)
    city: str = Field(..., min_length=1)
    country: str = Field(..., min_length=1)
    ip: str | None = None
    gsm_number: str | None = Field(default=None, alias="gsmNumber")
    zip_code: str | None = Field(default=None, alias="zipCode")

    def to_domain(self, fallback_ip: str) -> BuyerInfo:
        return BuyerInfo(
            id=self.id,
            name=self.name,
            surname=self.surname,
            email=self.email,
            identity_number=self.identity_number,
            registration_address=self.registration_address,
            city=self.city,
            country=self.country,
            ip=self.ip or fallback_ip,
            gsm_number=self.gsm_number,
            zip_code=self.zip_code,
        )


class ChargeReservationRequest(BaseModel):
    """決済リクエストモデル

    amount は任意。指定された場合は予約の合計金額との照合にのみ使う。
    """

    model_config = ConfigDict(populate_by_name=True)

    reservation_id: str = Field(..., alias="reservationId", min_length=1)
    card_holder_name: str = Field(..., alias="cardHolderName", min_length=1)
    card_number: str = Field(..., alias="cardNumber", repr=False)
    expire_month: str = Field(..., alias="expireMonth")
    expire_year: str = Field(..., alias="expireYear")
    cvc: str = Field(..., repr=False)
    buyer: BuyerRequest
    billing_address: AddressRequest = Field(..., alias="billingAddress")
    shipping_address: AddressRequest | None = Field(
        default=None, alias="shippingAddress"
    )
    amount: Decimal | None = None
    currency: str | None = Field(default=None, pattern="^[A-Z]{3}$")

    @field_validator("amount", mode="before")
    @classmethod
    def convert_amount_to_decimal(cls, v):
        if v is None:
            return v
        return to_decimal(v)

    def to_payment_details(self, source_ip: str) -> PaymentDetails:
        """ユースケースの入力形式に変換する（カード形式が不正なら ValueError）"""
        details: PaymentDetails = {
            "card": CardDetails(
                holder_name=self.card_holder_name,
                number=self.card_number,
                expire_month=self.expire_month,
                expire_year=self.expire_year,
                cvc=self.cvc,
            ),
            "buyer": self.buyer.to_domain(fallback_ip=source_ip),
            "billing_address": self.billing_address.to_domain(),
            "amount": self.amount,
            "currency": self.currency,
        }
        if self.shipping_address is not None:
            details["shipping_address"] = self.shipping_address.to_domain()
        return details
