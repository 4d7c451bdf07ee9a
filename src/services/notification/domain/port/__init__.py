from .mailer import Mailer as Mailer
from .notification_dispatcher import NotificationDispatcher as NotificationDispatcher
