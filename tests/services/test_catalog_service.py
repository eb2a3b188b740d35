"""
Tests for the static catalog and simulated weather services.
"""

from datetime import date

import pytest

from maharishi.services.catalog_service import (
    DEMO_FARMER,
    get_demo_farmer,
    get_farmer_listings,
    get_listings,
)
from maharishi.services.weather_service import SIMULATED_FORECAST, get_weather


class TestCatalog:

    def test_demo_farmer(self):
        farmer = get_demo_farmer()
        assert farmer.name == "Rajesh Kumar"
        assert farmer.pincode == "261001"
        assert farmer.wallet_balance == 15250.75

    def test_demo_farmer_is_a_copy(self):
        farmer = get_demo_farmer()
        farmer.wallet_balance = 0
        assert DEMO_FARMER.wallet_balance == 15250.75

    def test_open_listings_by_default(self):
        listings = get_listings()
        assert {listing.id for listing in listings} == {"L001", "L002", "L003"}
        assert all(listing.status == "OPEN" for listing in listings)

    def test_listings_newest_first(self):
        listings = get_listings()
        assert [listing.id for listing in listings] == ["L003", "L001", "L002"]

    def test_sold_listings(self):
        assert [listing.id for listing in get_listings(status="SOLD")] == ["L004"]

    def test_all_listings(self):
        assert len(get_listings(status=None)) == 4

    def test_farmer_listings(self):
        listings = get_farmer_listings("FARMER_001")
        assert {listing.id for listing in listings} == {"L001", "L002"}

    def test_unknown_farmer_has_no_listings(self):
        assert get_farmer_listings("FARMER_999") == []


class TestWeather:

    def test_simulated_snapshot(self):
        snapshot = get_weather("261001", today=date(2024, 11, 5))

        assert snapshot.pincode == "261001"
        assert snapshot.date == date(2024, 11, 5)
        assert snapshot.temperature_c == 32
        assert snapshot.rainfall_mm == 5
        assert snapshot.humidity == 75
        assert snapshot.wind_kph == 12
        assert snapshot.forecast == SIMULATED_FORECAST

    def test_defaults_to_today(self):
        assert get_weather("380001").date == date.today()

    def test_blank_pincode_rejected(self):
        with pytest.raises(ValueError):
            get_weather("  ")
