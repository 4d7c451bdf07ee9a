from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from services.notification.domain.port import Mailer
from services.reservation.domain.entity import Reservation
from services.reservation.domain.enum import ReservationType
from services.shared.domain import Money
from services.shared.utils import get_logger

logger = get_logger("notification-service")

TEMPLATE_DIR = Path(__file__).resolve().parents[1] / "templates"
TEMPLATE_NAME = "booking_confirmation.html"

SERVICE_LABELS = {
    ReservationType.TRANSFER: "Transfer",
    ReservationType.FEATURED_TRANSFER: "Transfer",
    ReservationType.CHAUFFEUR: "Chauffeur Service",
    ReservationType.TOUR: "Tour",
}
DEFAULT_SERVICE_LABEL = "Reservation"
CURRENCY_SYMBOLS = {"EUR": "€", "USD": "$", "TRY": "₺"}


def _format_money(money: Money) -> str:
    symbol = CURRENCY_SYMBOLS.get(str(money.currency))
    amount = f"{money.rounded().amount:.2f}"
    return f"{symbol}{amount}" if symbol else f"{amount} {money.currency}"


class BookingConfirmationNotifier:
    """予約確認メールの作成と送信

    テンプレート描画・送信の例外はそのまま送出する。握りつぶすのはディスパッチャの責務。
    """

    def __init__(self, mailer: Mailer, env: Environment | None = None) -> None:
        self._mailer = mailer
        self._env = env or Environment(
            loader=FileSystemLoader(TEMPLATE_DIR),
            autoescape=select_autoescape(["html", "xml"]),
        )

    def notify(self, reservation: Reservation) -> None:
        """予約確認メールを送る"""
        label = self.service_label(reservation)
        html_body = self.render(reservation)
        self._mailer.send(
            to=str(reservation.contact.email),
            subject=f"{label} Reservation Confirmation",
            html_body=html_body,
        )
        logger.info(
            "Booking confirmation sent",
            extra={"reservation_id": str(reservation.id)},
        )

    def render(self, reservation: Reservation) -> str:
        template = self._env.get_template(TEMPLATE_NAME)
        return template.render(
            full_name=reservation.contact.full_name,
            reservation_id=str(reservation.id),
            service_label=self.service_label(reservation),
            tour_id=reservation.tour_id,
            vehicle_id=reservation.vehicle_id,
            passengers=reservation.passengers,
            pickup_location=reservation.pickup_location,
            dropoff_location=reservation.dropoff_location,
            pickup_datetime=(
                reservation.pickup_datetime.value.strftime("%d.%m.%Y %H:%M")
                if reservation.pickup_datetime
                else None
            ),
            add_ons=[
                {
                    "name": a.name or a.add_on_id,
                    "quantity": a.quantity,
                    "line_total": _format_money(a.line_total),
                }
                for a in reservation.add_ons
            ],
            total=_format_money(reservation.total_price),
        )

    @staticmethod
    def service_label(reservation: Reservation) -> str:
        if reservation.reservation_type is None:
            return DEFAULT_SERVICE_LABEL
        return SERVICE_LABELS[reservation.reservation_type]
