import http.client
import json
import os

import iyzipay

from services.payment.domain.port import PaymentGateway, PaymentGatewayException
from services.payment.domain.value_object import (
    Address,
    ChargeRequest,
    GatewayResponse,
)

DEFAULT_BASE_URL = "sandbox-api.iyzipay.com"
SUCCESS_STATUS = "success"


class IyzicoPaymentGateway(PaymentGateway):
    """iyzipay を使用した PaymentGateway の具象実装

    応答の status が "success" の場合のみ成功とし、paymentId を参照番号とする。
    """

    def __init__(
        self,
        api_key: str,
        secret_key: str,
        base_url: str = DEFAULT_BASE_URL,
        payment_client=None,
        locale: str = "tr",
    ) -> None:
        self._options = {
            "api_key": api_key,
            "secret_key": secret_key,
            "base_url": base_url.removeprefix("https://").rstrip("/"),
        }
        self._payment = payment_client or iyzipay.Payment()
        self._locale = locale

    def submit(self, request: ChargeRequest) -> GatewayResponse:
        """請求を送信する"""
        payload = self._to_payload(request)
        try:
            response = self._payment.create(payload, self._options)
            body = json.loads(response.read().decode("utf-8"))
        except (OSError, http.client.HTTPException, ValueError) as e:
            raise PaymentGatewayException(f"Payment gateway request failed: {e}") from e

        if not isinstance(body, dict):
            raise PaymentGatewayException("Payment gateway returned an unexpected body")

        return GatewayResponse(
            success=body.get("status") == SUCCESS_STATUS,
            reference=body.get("paymentId"),
            error_code=body.get("errorCode"),
            error_message=body.get("errorMessage"),
            raw=body,
        )

    def _to_payload(self, request: ChargeRequest) -> dict:
        amount = str(request.amount.amount)
        card = request.card
        buyer = request.buyer
        buyer_payload = {
            "id": buyer.id,
            "name": buyer.name,
            "surname": buyer.surname,
            "email": buyer.email,
            "identityNumber": buyer.identity_number,
            "registrationAddress": buyer.registration_address,
            "city": buyer.city,
            "country": buyer.country,
            "ip": buyer.ip,
        }
        if buyer.gsm_number:
            buyer_payload["gsmNumber"] = buyer.gsm_number
        if buyer.zip_code:
            buyer_payload["zipCode"] = buyer.zip_code

        return {
            "locale": self._locale,
            "conversationId": request.conversation_id,
            "price": amount,
            "paidPrice": amount,
            "currency": str(request.amount.currency),
            "installment": "1",
            "basketId": request.reservation_id,
            "paymentChannel": "WEB",
            "paymentGroup": "PRODUCT",
            "paymentCard": {
                "cardHolderName": card.holder_name,
                "cardNumber": card.number,
                "expireMonth": card.expire_month,
                "expireYear": card.expire_year,
                "cvc": card.cvc,
                "registerCard": "0",
            },
            "buyer": buyer_payload,
            "billingAddress": _address(request.billing_address),
            "shippingAddress": _address(request.shipping_address),
            "basketItems": [
                {
                    "id": item.id,
                    "name": item.name,
                    "category1": item.category,
                    "itemType": item.item_type,
                    "price": str(item.price.amount),
                }
                for item in request.basket_items
            ],
        }


def _address(address: Address) -> dict:
    payload = {
        "contactName": address.contact_name,
        "city": address.city,
        "country": address.country,
        "address": address.address,
    }
    if address.zip_code:
        payload["zipCode"] = address.zip_code
    return payload


def iyzico_gateway_from_env() -> IyzicoPaymentGateway:
    """環境変数 IYZICO_API_KEY / IYZICO_SECRET_KEY / IYZICO_BASE_URL から生成する"""
    return IyzicoPaymentGateway(
        api_key=os.getenv("IYZICO_API_KEY", ""),
        secret_key=os.getenv("IYZICO_SECRET_KEY", ""),
        base_url=os.getenv("IYZICO_BASE_URL") or DEFAULT_BASE_URL,
    )
