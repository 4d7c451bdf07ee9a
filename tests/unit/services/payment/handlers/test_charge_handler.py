import json
from unittest.mock import patch

import pytest

from services.payment.domain.value_object import ChargeResult
from services.payment.handlers import charge
from services.reservation.domain.enum import PaymentStatus
from services.shared.domain import ResourceNotFoundException


@pytest.fixture
def body():
    return {
        "reservationId": "res-123",
        "cardHolderName": "Jane Doe",
        "cardNumber": "5528790000000008",
        "expireMonth": "12",
        "expireYear": "2030",
        "cvc": "123",
        "buyer": {
            "id": "BY789",
            "name": "Jane",
            "surname": "Doe",
            "email": "jane@example.com",
            "identityNumber": "74300864791",
            "registrationAddress": "Nidakule Goztepe",
            "city": "Istanbul",
            "country": "Turkey",
        },
        "billingAddress": {
            "contactName": "Jane Doe",
            "city": "Istanbul",
            "country": "Turkey",
            "address": "Nidakule Goztepe",
        },
        "amount": "120.00",
        "currency": "EUR",
    }


class TestChargeHandler:
    @pytest.fixture
    def service(self):
        with patch.object(charge, "service") as service:
            yield service

    def test_success(self, service, body, make_http_event, lambda_context):
        service.charge.return_value = ChargeResult(
            reservation_id="res-123",
            success=True,
            payment_status=PaymentStatus.PAID,
            gateway_reference="pay-1",
        )

        response = charge.lambda_handler(
            make_http_event(body=json.dumps(body)), lambda_context
        )

        assert response["statusCode"] == 200
        data = json.loads(response["body"])
        assert data["success"] is True
        assert data["payment_status"] == "PAID"
        reservation_id, details = service.charge.call_args[0]
        assert reservation_id == "res-123"
        assert details["buyer"].ip == "203.0.113.10"
        assert str(details["amount"]) == "120.00"

    def test_declined_returns_success_false(
        self, service, body, make_http_event, lambda_context
    ):
        service.charge.return_value = ChargeResult(
            reservation_id="res-123",
            success=False,
            payment_status=PaymentStatus.FAILED,
            message="Payment could not be processed",
        )
        response = charge.lambda_handler(
            make_http_event(body=json.dumps(body)), lambda_context
        )
        assert response["statusCode"] == 200
        assert json.loads(response["body"])["success"] is False

    def test_invalid_card_returns_400(self, service, body, make_http_event, lambda_context):
        body["cardNumber"] = "1234"
        response = charge.lambda_handler(
            make_http_event(body=json.dumps(body)), lambda_context
        )
        assert response["statusCode"] == 400
        assert "1234" not in response["body"]
        service.charge.assert_not_called()

    def test_missing_fields_returns_400(self, service, make_http_event, lambda_context):
        response = charge.lambda_handler(
            make_http_event(body=json.dumps({"reservationId": "res-123"})), lambda_context
        )
        assert response["statusCode"] == 400

    def test_unknown_reservation_returns_404(
        self, service, body, make_http_event, lambda_context
    ):
        service.charge.side_effect = ResourceNotFoundException("Reservation not found")
        response = charge.lambda_handler(
            make_http_event(body=json.dumps(body)), lambda_context
        )
        assert response["statusCode"] == 404
