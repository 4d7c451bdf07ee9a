from decimal import Decimal
from typing import TypedDict

from services.catalog.domain.repository import CatalogRepository
from services.pricing.applications.quote_price import QuotePriceService
from services.pricing.domain.enum import ServiceKind
from services.pricing.domain.value_object import PriceQuote
from services.reservation.domain.entity import Reservation
from services.reservation.domain.enum import ReservationType
from services.reservation.domain.factory import ReservationDraft, ReservationFactory
from services.reservation.domain.repository import ReservationRepository
from services.reservation.domain.value_object import (
    AdditionalPassenger,
    CustomerContact,
    EmailAddress,
    ReservationAddOn,
)
from services.route.domain.value_object import Coordinate
from services.shared.domain import IsoDateTime, Money, ValidationException
from services.shared.utils import get_logger, to_decimal

logger = get_logger("reservation-service")

PRICE_TOLERANCE = Decimal("0.01")


class PassengerDetails(TypedDict):
    first_name: str
    last_name: str


class AddOnSelection(TypedDict):
    add_on_id: str
    quantity: int


class ReservationDetails(TypedDict, total=False):
    """予約リクエストの入力データ構造（TypedDict）"""

    full_name: str
    email: str
    phone: str | None
    passengers: int
    additional_passengers: list[PassengerDetails]
    add_ons: list[AddOnSelection]
    total_price: Decimal | float | str | None
    reservation_type: str | None
    vehicle_id: str | None
    tour_id: str | None
    pickup_location: str | None
    dropoff_location: str | None
    pickup_datetime: str | None
    pickup_date: str | None
    pickup_time: str | None
    distance_km: Decimal | float | None
    round_trip: bool
    duration_hours: Decimal | float | None
    origin: Coordinate | None
    destination: Coordinate | None


class ReservationService:
    """予約作成のユースケース

    入力を検証・正規化し、料金をサーバ側で再計算してから PENDING の予約を保存する。
    決済はここでは行わない。

    検証順:
        1. 連絡先（メールアドレス・氏名）
        2. 人数（1 以上の整数）
        3. 同乗者（人数 > 1 なら passengers - 1 件ちょうど）
        4. クライアント提示額の形式（有限かつ 0 以上）
        5. 追加サービスの正規化
        6. 車両 / ツアーの指定
    """

    def __init__(
        self,
        repository: ReservationRepository,
        factory: ReservationFactory,
        catalog: CatalogRepository,
        quote_service: QuotePriceService,
    ) -> None:
        self._repository = repository
        self._factory = factory
        self._catalog = catalog
        self._quote_service = quote_service

    def create(self, details: ReservationDetails) -> Reservation:
        """予約を作成する"""
        contact = self._contact(details)
        passengers = self._passengers(details.get("passengers"))
        additional_passengers = self._additional_passengers(
            passengers, details.get("additional_passengers") or []
        )
        submitted_price = self._submitted_price(details.get("total_price"))
        add_ons = self._normalize_add_ons(details.get("add_ons") or [])
        reservation_type, kind = self._service_kind(details)
        pickup_datetime = self._pickup_datetime(details)

        quote = self._quote(kind, details, passengers)
        if (
            submitted_price is not None
            and abs(submitted_price - quote.amount.amount) > PRICE_TOLERANCE
        ):
            logger.warning(
                "Submitted price does not match the quote",
                extra={
                    "submitted": str(submitted_price),
                    "quoted": str(quote.amount.amount),
                },
            )
            raise ValidationException("Submitted price does not match the current quote")

        draft: ReservationDraft = {
            "contact": contact,
            "total_price": self._total(quote, add_ons),
            "passengers": passengers,
            "vehicle_id": quote.vehicle_id,
            "tour_id": quote.tour_id,
            "reservation_type": reservation_type,
            "pickup_location": details.get("pickup_location"),
            "dropoff_location": details.get("dropoff_location"),
            "pickup_datetime": pickup_datetime,
            "additional_passengers": additional_passengers,
            "add_ons": add_ons,
        }
        reservation = self._factory.create(draft)
        self._repository.save(reservation)

        logger.info(
            "Reservation created",
            extra={
                "reservation_id": str(reservation.id),
                "total_price": str(reservation.total_price),
                "service": kind.value,
            },
        )
        return reservation

    @staticmethod
    def _contact(details: ReservationDetails) -> CustomerContact:
        try:
            email = EmailAddress(value=(details.get("email") or "").strip())
        except ValueError as e:
            raise ValidationException("A valid email address is required") from e
        full_name = (details.get("full_name") or "").strip()
        if not full_name:
            raise ValidationException("Full name is required")
        return CustomerContact(
            full_name=full_name, email=email, phone=details.get("phone") or None
        )

    @staticmethod
    def _passengers(value: object) -> int:
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            raise ValidationException(
                f"Passengers must be an integer of at least 1: {value!r}"
            )
        return value

    @staticmethod
    def _additional_passengers(
        passengers: int, entries: list[PassengerDetails]
    ) -> tuple[AdditionalPassenger, ...]:
        """人数 > 1 の場合は passengers - 1 件ちょうどの同乗者を要求する

        人数が 1 のときに送られてきた同乗者は無視する。
        """
        if passengers == 1:
            return ()

        required = passengers - 1
        try:
            manifest = tuple(
                AdditionalPassenger(
                    first_name=(entry.get("first_name") or "").strip(),
                    last_name=(entry.get("last_name") or "").strip(),
                )
                for entry in entries
            )
        except ValueError as e:
            raise ValidationException(f"passenger details required: {e}") from e

        if len(manifest) != required:
            raise ValidationException(
                f"passenger details required: expected {required} additional "
                f"passenger(s), got {len(manifest)}"
            )
        return manifest

    @staticmethod
    def _submitted_price(value: object) -> Decimal | None:
        if value is None:
            return None
        try:
            price = to_decimal(value)
        except ValueError as e:
            raise ValidationException(f"Total price must be a number: {value!r}") from e
        if not price.is_finite() or price < 0:
            raise ValidationException(
                f"Total price must be a finite non-negative number: {value!r}"
            )
        return price

    def _normalize_add_ons(
        self, selections: list[AddOnSelection]
    ) -> tuple[ReservationAddOn, ...]:
        """数量が 0 以下・未知・無効な追加サービスは捨てる"""
        normalized: list[ReservationAddOn] = []
        for selection in selections:
            add_on_id = selection.get("add_on_id")
            quantity = selection.get("quantity")
            if (
                not add_on_id
                or isinstance(quantity, bool)
                or not isinstance(quantity, int)
                or quantity <= 0
            ):
                continue

            add_on = self._catalog.get_add_on(add_on_id)
            if add_on is None or not add_on.is_active:
                logger.info("Skipping unknown add-on", extra={"add_on_id": add_on_id})
                continue
            normalized.append(ReservationAddOn.of(add_on, quantity))
        return tuple(normalized)

    @staticmethod
    def _service_kind(
        details: ReservationDetails,
    ) -> tuple[ReservationType | None, ServiceKind]:
        """予約種別と車両/ツアー指定の組み合わせを検証し、料金計算の種類を決める"""
        vehicle_id = details.get("vehicle_id")
        tour_id = details.get("tour_id")
        raw_type = details.get("reservation_type")

        reservation_type = None
        if raw_type:
            try:
                reservation_type = ReservationType(raw_type)
            except ValueError as e:
                raise ValidationException(f"Unknown reservation type: {raw_type}") from e

        if vehicle_id and tour_id:
            raise ValidationException("Specify either a vehicle or a tour, not both")

        if reservation_type is ReservationType.TOUR:
            if not tour_id:
                raise ValidationException("Tour id is required for tour reservations")
            return reservation_type, ServiceKind.TOUR
        if reservation_type is ReservationType.CHAUFFEUR:
            if not vehicle_id:
                raise ValidationException(
                    "Vehicle id is required for chauffeur reservations"
                )
            return reservation_type, ServiceKind.CHAUFFEUR
        if reservation_type is not None:
            if not vehicle_id:
                raise ValidationException(
                    f"Vehicle id is required for {reservation_type.value} reservations"
                )
            return reservation_type, ServiceKind.TRANSFER

        if tour_id:
            return None, ServiceKind.TOUR
        if vehicle_id:
            if details.get("duration_hours") is not None:
                return None, ServiceKind.CHAUFFEUR
            return None, ServiceKind.TRANSFER
        raise ValidationException("A vehicle or tour must be specified")

    @staticmethod
    def _pickup_datetime(details: ReservationDetails) -> IsoDateTime | None:
        """ISO 形式の日時、または日付 + 時刻（時刻の既定は 00:00）から組み立てる"""
        value = details.get("pickup_datetime")
        if not value and details.get("pickup_date"):
            value = f"{details['pickup_date']}T{details.get('pickup_time') or '00:00'}"
        if not value:
            return None
        try:
            return IsoDateTime.from_string(value)
        except ValueError as e:
            raise ValidationException(f"Invalid pickup date/time: {value}") from e

    def _quote(
        self, kind: ServiceKind, details: ReservationDetails, passengers: int
    ) -> PriceQuote:
        if kind is ServiceKind.TOUR:
            return self._quote_service.quote_tour(details["tour_id"], passengers)
        if kind is ServiceKind.CHAUFFEUR:
            return self._quote_service.quote_chauffeur(
                details["vehicle_id"], details.get("duration_hours")
            )
        return self._quote_service.quote_transfer(
            vehicle_id=details["vehicle_id"],
            distance_km=details.get("distance_km"),
            round_trip=bool(details.get("round_trip", False)),
            origin=details.get("origin"),
            destination=details.get("destination"),
        )

    @staticmethod
    def _total(quote: PriceQuote, add_ons: tuple[ReservationAddOn, ...]) -> Money:
        """合計 = 見積もり額 + 追加サービス小計の合計"""
        total = quote.amount
        for add_on in add_ons:
            if add_on.line_total.currency != total.currency:
                raise ValidationException(
                    f"Add-on {add_on.add_on_id} is priced in "
                    f"{add_on.line_total.currency}, expected {total.currency}"
                )
            total = total.add(add_on.line_total)
        return total.rounded()
