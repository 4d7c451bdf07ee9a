from .port import PaymentGateway as PaymentGateway
from .port import PaymentGatewayException as PaymentGatewayException
from .value_object import Address as Address
from .value_object import BasketItem as BasketItem
from .value_object import BuyerInfo as BuyerInfo
from .value_object import CardDetails as CardDetails
from .value_object import ChargeRequest as ChargeRequest
from .value_object import ChargeResult as ChargeResult
from .value_object import GatewayResponse as GatewayResponse
from .value_object import PaymentAttempt as PaymentAttempt
