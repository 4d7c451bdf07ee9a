from .entity import Reservation as Reservation
from .enum import PaymentStatus as PaymentStatus
from .enum import ReservationType as ReservationType
from .event import ReservationPaid as ReservationPaid
from .factory import ReservationDraft as ReservationDraft
from .factory import ReservationFactory as ReservationFactory
from .repository import ReservationRepository as ReservationRepository
from .value_object import AdditionalPassenger as AdditionalPassenger
from .value_object import CustomerContact as CustomerContact
from .value_object import EmailAddress as EmailAddress
from .value_object import ReservationAddOn as ReservationAddOn
from .value_object import ReservationId as ReservationId
