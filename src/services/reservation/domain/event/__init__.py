from .reservation_paid import ReservationPaid as ReservationPaid
