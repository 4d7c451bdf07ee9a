from .payment_gateway import PaymentGateway as PaymentGateway
from .payment_gateway import PaymentGatewayException as PaymentGatewayException
