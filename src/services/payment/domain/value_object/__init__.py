from .address import Address as Address
from .basket_item import BasketItem as BasketItem
from .buyer_info import BuyerInfo as BuyerInfo
from .card_details import CardDetails as CardDetails
from .charge_request import ChargeRequest as ChargeRequest
from .charge_result import ChargeResult as ChargeResult
from .gateway_response import GatewayResponse as GatewayResponse
from .payment_attempt import PaymentAttempt as PaymentAttempt
