from decimal import Decimal

from services.catalog.domain.value_object import TourRate, VehicleRate
from services.shared.domain import Money, ValidationException
from services.shared.utils.validators import is_positive_finite, to_decimal

MIN_CHAUFFEUR_HOURS = Decimal("4")
MAX_CHAUFFEUR_HOURS = Decimal("24")


class PriceQuoteEngine:
    """料金計算のドメインサービス

    すべて副作用のない純粋な計算。単価は呼び出し側がカタログから取得した値を渡す。
    非有限値・0以下の値は 0 に丸めずバリデーションエラーとする。
    """

    def quote_transfer(
        self,
        vehicle_rate: VehicleRate,
        distance_km: Decimal | int | float,
        round_trip: bool = False,
    ) -> Money:
        """送迎料金 = 距離(km) × km単価 × (往復なら2)

        車両の基本料金は含めない。
        """
        distance = self._require_positive(distance_km, "Distance (km)")
        self._require_positive_rate(vehicle_rate.per_km, "Vehicle per-km rate")

        amount = vehicle_rate.per_km.multiply(distance)
        if round_trip:
            amount = amount.multiply(2)
        return amount.rounded()

    def quote_chauffeur(
        self,
        vehicle_rate: VehicleRate,
        duration_hours: Decimal | int | float,
    ) -> Money:
        """貸切料金 = 時間単価 × 時間"""
        hours = self._require_positive(duration_hours, "Duration (hours)")
        self._require_positive_rate(vehicle_rate.hourly, "Vehicle hourly rate")

        return vehicle_rate.hourly.multiply(hours).rounded()

    def quote_tour(self, tour_rate: TourRate, number_of_persons: int) -> Money:
        """ツアー料金 = 1人あたり料金 × 人数（1人以上）"""
        if (
            isinstance(number_of_persons, bool)
            or not isinstance(number_of_persons, int)
            or number_of_persons < 1
        ):
            raise ValidationException(
                f"Number of persons must be an integer of at least 1: {number_of_persons!r}"
            )
        self._require_positive_rate(tour_rate.per_person, "Tour per-person rate")

        return tour_rate.per_person.multiply(number_of_persons).rounded()

    @staticmethod
    def clamp_duration_hours(duration_hours: Decimal | int | float) -> Decimal:
        """貸切時間を対応範囲（4〜24時間）に収める

        クランプは呼び出し側の責務。非有限値・0以下はクランプせずエラーにする。
        """
        hours = PriceQuoteEngine._require_positive(duration_hours, "Duration (hours)")
        return max(MIN_CHAUFFEUR_HOURS, min(MAX_CHAUFFEUR_HOURS, hours))

    @staticmethod
    def _require_positive(value: Decimal | int | float, label: str) -> Decimal:
        try:
            number = to_decimal(value)
        except ValueError as e:
            raise ValidationException(f"{label} must be a number: {value!r}") from e
        if not is_positive_finite(number):
            raise ValidationException(
                f"{label} must be a positive finite number: {value!r}"
            )
        return number

    @staticmethod
    def _require_positive_rate(rate: Money, label: str) -> None:
        if rate.amount <= 0:
            raise ValidationException(f"{label} is not configured")
