import time
from decimal import Decimal
from typing import TypedDict

from services.notification.domain.port import NotificationDispatcher
from services.payment.domain.port import PaymentGateway, PaymentGatewayException
from services.payment.domain.value_object import (
    Address,
    BasketItem,
    BuyerInfo,
    CardDetails,
    ChargeRequest,
    ChargeResult,
    GatewayResponse,
    PaymentAttempt,
)
from services.reservation.domain.entity import Reservation
from services.reservation.domain.enum import PaymentStatus
from services.reservation.domain.event import ReservationPaid
from services.reservation.domain.repository import ReservationRepository
from services.reservation.domain.value_object import ReservationId
from services.shared.domain import (
    ResourceNotFoundException,
    ValidationException,
)
from services.shared.utils import get_logger

logger = get_logger("payment-service")

AMOUNT_TOLERANCE = Decimal("0.01")


class PaymentDetails(TypedDict, total=False):
    """決済の入力データ構造（TypedDict）

    amount / currency は任意。指定された場合は予約の合計金額と一致しなければならない。
    shipping_address を省略した場合は billing_address を使う。
    """

    card: CardDetails
    buyer: BuyerInfo
    billing_address: Address
    shipping_address: Address
    amount: Decimal | None
    currency: str | None


class ChargeReservationService:
    """予約の決済ユースケース

    状態遷移は PENDING → PAID / FAILED の一度きり。
    - 終端状態の予約はゲートウェイを呼ばずに記録済みの結果を返す
    - ゲートウェイの成功フラグが明示的に success の場合のみ PAID
    - ゲートウェイ呼び出しはリトライしない（二重請求を避ける）
    - 請求成功後のステータス更新失敗は critical ログで手動照合に回す
    - PAID 確定後の通知は非同期。通知の失敗は結果に影響しない
    """

    def __init__(
        self,
        repository: ReservationRepository,
        gateway: PaymentGateway,
        dispatcher: NotificationDispatcher | None = None,
    ) -> None:
        self._repository = repository
        self._gateway = gateway
        self._dispatcher = dispatcher

    def charge(self, reservation_id: str, payment_details: PaymentDetails) -> ChargeResult:
        """予約の合計金額を請求する"""
        reservation = self._load(reservation_id)

        if reservation.is_terminal():
            logger.info(
                "Reservation already settled, skipping gateway",
                extra={
                    "reservation_id": reservation_id,
                    "payment_status": reservation.payment_status.value,
                },
            )
            return ChargeResult(
                reservation_id=reservation_id,
                success=reservation.payment_status == PaymentStatus.PAID,
                payment_status=reservation.payment_status,
                message=f"Reservation already {reservation.payment_status.value.lower()}",
                already_processed=True,
            )

        request = self._build_request(reservation, payment_details)

        try:
            response = self._gateway.submit(request)
        except PaymentGatewayException as e:
            logger.warning(
                "Payment gateway error",
                extra={"reservation_id": reservation_id, "error": str(e)},
            )
            return self._gateway_failure(reservation, request, str(e))
        except Exception as e:
            logger.exception(
                "Unexpected payment gateway error",
                extra={"reservation_id": reservation_id},
            )
            return self._gateway_failure(reservation, request, repr(e))

        self._audit(
            request,
            success=response.success,
            reference=response.reference,
            error=response.error_message,
        )

        if not response.success:
            self._record_failure(reservation)
            return ChargeResult(
                reservation_id=reservation_id,
                success=False,
                payment_status=PaymentStatus.FAILED,
                gateway_reference=response.reference,
                message=response.error_message or "Payment was declined",
            )

        return self._record_success(reservation, response)

    def _gateway_failure(
        self, reservation: Reservation, request: ChargeRequest, error: str
    ) -> ChargeResult:
        """ゲートウェイ呼び出し自体が失敗した場合も FAILED への遷移を試みる"""
        self._audit(request, success=False, error=error)
        self._record_failure(reservation)
        return ChargeResult(
            reservation_id=str(reservation.id),
            success=False,
            payment_status=PaymentStatus.FAILED,
            message="Payment could not be processed",
        )

    def _load(self, reservation_id: str) -> Reservation:
        try:
            id_ = ReservationId(value=reservation_id)
        except ValueError as e:
            raise ValidationException("Reservation id is required") from e

        reservation = self._repository.find_by_id(id_)
        if reservation is None:
            raise ResourceNotFoundException(f"Reservation not found: {reservation_id}")
        return reservation

    def _build_request(
        self, reservation: Reservation, payment_details: PaymentDetails
    ) -> ChargeRequest:
        """請求額は常に予約の合計金額。クライアントの金額は照合のみに使う"""
        total = reservation.total_price

        currency = payment_details.get("currency")
        if currency and currency.upper() != str(total.currency):
            raise ValidationException(
                f"Currency {currency} does not match reservation currency {total.currency}"
            )
        amount = payment_details.get("amount")
        if amount is not None and abs(Decimal(amount) - total.amount) > AMOUNT_TOLERANCE:
            raise ValidationException("Charge amount does not match the reservation total")

        for key in ("card", "buyer", "billing_address"):
            if payment_details.get(key) is None:
                raise ValidationException(f"Payment detail is required: {key}")

        billing_address = payment_details["billing_address"]
        try:
            return ChargeRequest(
                reservation_id=str(reservation.id),
                conversation_id=f"RES-{reservation.id}-{int(time.time() * 1000)}",
                amount=total,
                card=payment_details["card"],
                buyer=payment_details["buyer"],
                billing_address=billing_address,
                shipping_address=payment_details.get("shipping_address")
                or billing_address,
                basket_items=self._basket_items(reservation),
            )
        except ValueError as e:
            raise ValidationException(str(e)) from e

    @staticmethod
    def _basket_items(reservation: Reservation) -> tuple[BasketItem, ...]:
        """基本運賃 1 行 + 追加サービスごとに 1 行（0 円の行は含めない）"""
        service_label = (
            reservation.reservation_type.value
            if reservation.reservation_type
            else "reservation"
        )
        items: list[BasketItem] = []
        fare = reservation.fare()
        if not fare.is_zero():
            items.append(
                BasketItem(
                    id=str(reservation.id),
                    name=f"{service_label} fare",
                    category=service_label,
                    price=fare,
                )
            )
        for add_on in reservation.add_ons:
            if add_on.line_total.is_zero():
                continue
            items.append(
                BasketItem(
                    id=add_on.add_on_id,
                    name=f"{add_on.name} x {add_on.quantity}",
                    category="add-on",
                    price=add_on.line_total,
                )
            )
        return tuple(items)

    def _record_failure(self, reservation: Reservation) -> None:
        """FAILED への遷移を試みる（書き込み失敗はログのみ）"""
        reservation.mark_failed()
        try:
            self._repository.update_payment_status(
                reservation, expected_status=PaymentStatus.PENDING
            )
        except Exception:
            logger.exception(
                "Failed to record FAILED payment status",
                extra={"reservation_id": str(reservation.id)},
            )
            return
        logger.info(
            "Payment status updated to FAILED",
            extra={"reservation_id": str(reservation.id)},
        )

    def _record_success(
        self, reservation: Reservation, response: GatewayResponse
    ) -> ChargeResult:
        reservation.mark_paid(response.reference)
        result = ChargeResult(
            reservation_id=str(reservation.id),
            success=True,
            payment_status=PaymentStatus.PAID,
            gateway_reference=response.reference,
            message="Payment completed",
        )

        try:
            self._repository.update_payment_status(
                reservation, expected_status=PaymentStatus.PENDING
            )
        except Exception:
            logger.critical(
                "Reconciliation required: payment charged but status update failed",
                extra={
                    "reservation_id": str(reservation.id),
                    "gateway_reference": response.reference,
                    "amount": str(reservation.total_price),
                },
                exc_info=True,
            )
            return result

        logger.info(
            "Payment status updated to PAID",
            extra={
                "reservation_id": str(reservation.id),
                "gateway_reference": response.reference,
            },
        )
        self._notify(reservation)
        return result

    def _notify(self, reservation: Reservation) -> None:
        events = reservation.flush_domain_events()
        if not any(isinstance(e, ReservationPaid) for e in events):
            return
        if self._dispatcher is None:
            logger.warning(
                "Notification dispatcher not configured, skipping confirmation",
                extra={"reservation_id": str(reservation.id)},
            )
            return
        try:
            self._dispatcher.dispatch(reservation)
        except Exception:
            logger.exception(
                "Failed to dispatch booking confirmation",
                extra={"reservation_id": str(reservation.id)},
            )

    @staticmethod
    def _audit(
        request: ChargeRequest,
        success: bool,
        reference: str | None = None,
        error: str | None = None,
    ) -> None:
        attempt = PaymentAttempt(
            reservation_id=request.reservation_id,
            conversation_id=request.conversation_id,
            amount=request.amount,
            success=success,
            gateway_reference=reference,
            error=error,
        )
        logger.info("Payment attempt", extra=attempt.to_log())
