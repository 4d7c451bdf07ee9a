from .reservation_factory import ReservationDraft as ReservationDraft
from .reservation_factory import ReservationFactory as ReservationFactory
