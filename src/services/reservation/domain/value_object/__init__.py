from .additional_passenger import AdditionalPassenger as AdditionalPassenger
from .customer_contact import CustomerContact as CustomerContact
from .email_address import EmailAddress as EmailAddress
from .reservation_add_on import ReservationAddOn as ReservationAddOn
from .reservation_id import ReservationId as ReservationId
