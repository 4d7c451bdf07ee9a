from .payment_status import PaymentStatus as PaymentStatus
from .reservation_type import ReservationType as ReservationType
