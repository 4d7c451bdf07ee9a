import pytest

from services.payment.domain.value_object import Address, BuyerInfo, CardDetails


@pytest.fixture
def card():
    return CardDetails(
        holder_name="Jane Doe",
        number="5528790000000008",
        expire_month="12",
        expire_year="2030",
        cvc="123",
    )


@pytest.fixture
def buyer():
    return BuyerInfo(
        id="BY789",
        name="Jane",
        surname="Doe",
        email="jane@example.com",
        identity_number="74300864791",
        registration_address="Nidakule Goztepe, Merdivenkoy Mah.",
        city="Istanbul",
        country="Turkey",
        ip="85.34.78.112",
    )


@pytest.fixture
def address():
    return Address(
        contact_name="Jane Doe",
        city="Istanbul",
        country="Turkey",
        address="Nidakule Goztepe, Merdivenkoy Mah.",
        zip_code="34742",
    )


@pytest.fixture
def payment_details(card, buyer, address):
    """決済入力（金額・通貨の指定なし）"""
    return {"card": card, "buyer": buyer, "billing_address": address}
