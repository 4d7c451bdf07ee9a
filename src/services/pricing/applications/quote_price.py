from decimal import Decimal

from services.catalog.domain.repository import CatalogRepository
from services.catalog.domain.value_object import TourRate, VehicleRate
from services.pricing.domain.enum import ServiceKind
from services.pricing.domain.service import PriceQuoteEngine
from services.pricing.domain.value_object import PriceQuote
from services.route.applications.resolve_route import RouteDistanceResolver
from services.route.domain.value_object import Coordinate
from services.shared.domain import ResourceNotFoundException, ValidationException
from services.shared.utils import to_decimal


class QuotePriceService:
    """見積もりのユースケース

    単価は必ずカタログから読み込む。呼び出し元は ID と距離・時間・人数のみを渡す。
    """

    def __init__(
        self,
        catalog: CatalogRepository,
        engine: PriceQuoteEngine | None = None,
        route_resolver: RouteDistanceResolver | None = None,
    ) -> None:
        self._catalog = catalog
        self._engine = engine or PriceQuoteEngine()
        self._route_resolver = route_resolver

    def quote_transfer(
        self,
        vehicle_id: str,
        distance_km: Decimal | float | None = None,
        round_trip: bool = False,
        origin: Coordinate | None = None,
        destination: Coordinate | None = None,
    ) -> PriceQuote:
        """送迎の見積もり

        出発地・目的地の座標があればサーバ側で距離を解決し、なければ distance_km を使う。
        """
        vehicle_rate = self._vehicle_rate(vehicle_id)
        distance = self._resolve_distance(distance_km, origin, destination)
        amount = self._engine.quote_transfer(vehicle_rate, distance, round_trip)
        return PriceQuote(
            service=ServiceKind.TRANSFER,
            amount=amount,
            unit_rate=vehicle_rate.per_km,
            vehicle_id=vehicle_rate.vehicle_id,
            distance_km=distance,
            round_trip=round_trip,
        )

    def quote_chauffeur(
        self, vehicle_id: str, duration_hours: Decimal | float
    ) -> PriceQuote:
        """貸切の見積もり（時間は 4〜24 時間に収める）"""
        vehicle_rate = self._vehicle_rate(vehicle_id)
        hours = self._engine.clamp_duration_hours(duration_hours)
        amount = self._engine.quote_chauffeur(vehicle_rate, hours)
        return PriceQuote(
            service=ServiceKind.CHAUFFEUR,
            amount=amount,
            unit_rate=vehicle_rate.hourly,
            vehicle_id=vehicle_rate.vehicle_id,
            duration_hours=hours,
        )

    def quote_tour(self, tour_id: str, number_of_persons: int) -> PriceQuote:
        """ツアーの見積もり"""
        tour_rate = self._tour_rate(tour_id)
        amount = self._engine.quote_tour(tour_rate, number_of_persons)
        return PriceQuote(
            service=ServiceKind.TOUR,
            amount=amount,
            unit_rate=tour_rate.per_person,
            tour_id=tour_rate.tour_id,
            number_of_persons=number_of_persons,
        )

    def _vehicle_rate(self, vehicle_id: str) -> VehicleRate:
        if not vehicle_id:
            raise ValidationException("Vehicle id is required")
        vehicle_rate = self._catalog.get_vehicle_rate(vehicle_id)
        if vehicle_rate is None:
            raise ResourceNotFoundException(f"Vehicle not found: {vehicle_id}")
        return vehicle_rate

    def _tour_rate(self, tour_id: str) -> TourRate:
        if not tour_id:
            raise ValidationException("Tour id is required")
        tour_rate = self._catalog.get_tour_rate(tour_id)
        if tour_rate is None:
            raise ResourceNotFoundException(f"Tour not found: {tour_id}")
        return tour_rate

    def _resolve_distance(
        self,
        distance_km: Decimal | float | None,
        origin: Coordinate | None,
        destination: Coordinate | None,
    ) -> Decimal:
        if (
            origin is not None
            and destination is not None
            and self._route_resolver is not None
        ):
            estimate = self._route_resolver.resolve(origin, destination)
            distance = to_decimal(estimate.distance_km)
            if distance <= 0:
                raise ValidationException(
                    "Pickup and dropoff locations are too close to price a transfer"
                )
            return distance

        if distance_km is None:
            raise ValidationException(
                "Distance (km) or pickup/dropoff coordinates are required"
            )
        try:
            return to_decimal(distance_km)
        except ValueError as e:
            raise ValidationException(f"Distance (km) must be a number: {distance_km!r}") from e
