from decimal import Decimal

import pytest

from services.catalog.domain.value_object import TourRate, VehicleRate
from services.pricing.domain.service import PriceQuoteEngine
from services.shared.domain import Money, ValidationException


class TestPriceQuoteEngine:
    @pytest.fixture
    def engine(self):
        return PriceQuoteEngine()

    def test_transfer_one_way(self, engine, vehicle_rate):
        assert engine.quote_transfer(vehicle_rate, 40) == Money.eur("100.00")

    def test_transfer_round_trip_doubles_price(self, engine, vehicle_rate):
        assert engine.quote_transfer(vehicle_rate, 40, round_trip=True) == Money.eur(
            "200.00"
        )

    def test_transfer_ignores_hourly_rate(self, engine):
        rate = VehicleRate(
            vehicle_id="v", per_km=Money.eur("1.10"), hourly=Money.eur("999")
        )
        assert engine.quote_transfer(rate, Decimal("12.5")) == Money.eur("13.75")

    def test_transfer_rounds_to_cents(self, engine, vehicle_rate):
        quote = engine.quote_transfer(vehicle_rate, Decimal("40.33"))
        assert quote.amount == Decimal("100.83")

    @pytest.mark.parametrize("distance", [0, -5, "NaN", "Infinity", "abc"])
    def test_transfer_rejects_invalid_distance(self, engine, vehicle_rate, distance):
        with pytest.raises(ValidationException, match="Distance"):
            engine.quote_transfer(vehicle_rate, distance)

    def test_transfer_rejects_unconfigured_rate(self, engine):
        rate = VehicleRate(vehicle_id="v", per_km=Money.eur("0"), hourly=Money.eur("50"))
        with pytest.raises(ValidationException, match="is not configured"):
            engine.quote_transfer(rate, 10)

    def test_chauffeur(self, engine, vehicle_rate):
        assert engine.quote_chauffeur(vehicle_rate, 6) == Money.eur("300.00")

    def test_tour(self, engine, tour_rate):
        assert engine.quote_tour(tour_rate, 3) == Money.eur("225.00")

    @pytest.mark.parametrize("persons", [0, -1, 2.5, True])
    def test_tour_rejects_invalid_persons(self, engine, tour_rate, persons):
        with pytest.raises(ValidationException, match="Number of persons"):
            engine.quote_tour(tour_rate, persons)

    def test_tour_rejects_unconfigured_rate(self, engine):
        with pytest.raises(ValidationException, match="is not configured"):
            engine.quote_tour(TourRate(tour_id="t", per_person=Money.eur("0")), 2)

    @pytest.mark.parametrize(
        "hours, expected",
        [(1, Decimal("4")), (4, Decimal("4")), (6, Decimal("6")), (30, Decimal("24"))],
    )
    def test_clamp_duration_hours(self, hours, expected):
        assert PriceQuoteEngine.clamp_duration_hours(hours) == expected

    def test_clamp_rejects_non_positive_hours(self):
        with pytest.raises(ValidationException):
            PriceQuoteEngine.clamp_duration_hours(0)
