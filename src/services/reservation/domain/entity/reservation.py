from services.reservation.domain.enum import PaymentStatus, ReservationType
from services.reservation.domain.event import ReservationPaid
from services.reservation.domain.value_object import (
    AdditionalPassenger,
    CustomerContact,
    ReservationAddOn,
    ReservationId,
)
from services.shared.domain import AggregateRoot, IsoDateTime, Money
from services.shared.domain.exception import BusinessRuleViolationException


class Reservation(AggregateRoot[ReservationId]):
    """予約エンティティ（集約ルート）

    同乗者・追加サービスは作成時に確定し、以後変更しない。
    作成後に変化するのは決済ステータスのみ。
    """

    def __init__(
        self,
        id: ReservationId,
        contact: CustomerContact,
        total_price: Money,
        passengers: int,
        created_at: IsoDateTime,
        vehicle_id: str | None = None,
        tour_id: str | None = None,
        reservation_type: ReservationType | None = None,
        pickup_location: str | None = None,
        dropoff_location: str | None = None,
        pickup_datetime: IsoDateTime | None = None,
        additional_passengers: tuple[AdditionalPassenger, ...] = (),
        add_ons: tuple[ReservationAddOn, ...] = (),
        payment_status: PaymentStatus = PaymentStatus.PENDING,
    ) -> None:
        super().__init__(id)
        if isinstance(passengers, bool) or passengers < 1:
            raise ValueError(f"Passengers must be at least 1: {passengers!r}")
        self._contact = contact
        self._total_price = total_price
        self._passengers = passengers
        self._created_at = created_at
        self._vehicle_id = vehicle_id
        self._tour_id = tour_id
        self._reservation_type = reservation_type
        self._pickup_location = pickup_location
        self._dropoff_location = dropoff_location
        self._pickup_datetime = pickup_datetime
        self._additional_passengers = tuple(additional_passengers)
        self._add_ons = tuple(add_ons)
        self._payment_status = payment_status

    @property
    def contact(self) -> CustomerContact:
        return self._contact

    @property
    def total_price(self) -> Money:
        return self._total_price

    @property
    def passengers(self) -> int:
        return self._passengers

    @property
    def created_at(self) -> IsoDateTime:
        return self._created_at

    @property
    def vehicle_id(self) -> str | None:
        return self._vehicle_id

    @property
    def tour_id(self) -> str | None:
        return self._tour_id

    @property
    def reservation_type(self) -> ReservationType | None:
        return self._reservation_type

    @property
    def pickup_location(self) -> str | None:
        return self._pickup_location

    @property
    def dropoff_location(self) -> str | None:
        return self._dropoff_location

    @property
    def pickup_datetime(self) -> IsoDateTime | None:
        return self._pickup_datetime

    @property
    def additional_passengers(self) -> tuple[AdditionalPassenger, ...]:
        return self._additional_passengers

    @property
    def add_ons(self) -> tuple[ReservationAddOn, ...]:
        return self._add_ons

    @property
    def payment_status(self) -> PaymentStatus:
        return self._payment_status

    def is_terminal(self) -> bool:
        """決済が終端状態（PAID / FAILED）かどうか"""
        return self._payment_status.is_terminal

    def add_ons_total(self) -> Money:
        """追加サービスの小計合計"""
        total = Money.zero(self._total_price.currency)
        for add_on in self._add_ons:
            total = total.add(add_on.line_total)
        return total

    def fare(self) -> Money:
        """基本運賃（合計から追加サービス分を除いた額）"""
        return self._total_price.subtract(self.add_ons_total())

    def mark_paid(self, gateway_reference: str | None = None) -> None:
        """決済完了にする"""
        self._require_pending("paid")
        self._payment_status = PaymentStatus.PAID
        self.add_domain_event(
            ReservationPaid(
                reservation_id=str(self.id),
                amount=self._total_price,
                gateway_reference=gateway_reference,
            )
        )

    def mark_failed(self) -> None:
        """決済失敗にする"""
        self._require_pending("failed")
        self._payment_status = PaymentStatus.FAILED

    def _require_pending(self, target: str) -> None:
        if self._payment_status != PaymentStatus.PENDING:
            raise BusinessRuleViolationException(
                f"Cannot mark reservation {self.id} as {target} "
                f"in {self._payment_status.value} status"
            )
