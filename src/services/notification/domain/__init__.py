from .port import Mailer as Mailer
from .port import NotificationDispatcher as NotificationDispatcher
