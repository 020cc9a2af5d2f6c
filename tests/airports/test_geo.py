"""Tests for great-circle distances and proximity queries."""

import math

import pytest

from airport_data.airports.engine import AirportEngine
from airport_data.airports.errors import ValidationError
from airport_data.airports.geo import EARTH_RADIUS_KM, NearbyAirport, haversine_km
from airport_data.airports.record import AirportRecord

LONDON = (51.5074, -0.1278)


class TestHaversine:
    """Test the distance function."""

    def test_known_distance(self) -> None:
        """Test Heathrow to JFK is about 5540 km."""
        assert haversine_km(51.4706, -0.461941, 40.639801, -73.7789) == pytest.approx(5540, abs=5)

    def test_zero_for_same_point(self) -> None:
        assert haversine_km(51.4706, -0.461941, 51.4706, -0.461941) == 0.0

    def test_symmetric(self) -> None:
        a = (1.35019, 103.994003)
        b = (-33.946098, 151.177002)
        assert haversine_km(*a, *b) == haversine_km(*b, *a)

    def test_antipodal_points(self) -> None:
        """Test half the circumference between antipodes."""
        assert haversine_km(0, 0, 0, 180) == pytest.approx(math.pi * EARTH_RADIUS_KM)

    def test_custom_radius(self) -> None:
        assert haversine_km(0, 0, 0, 180, radius_km=1.0) == pytest.approx(math.pi)


class TestDistanceBetween:
    """Test distances between airports given by code."""

    def test_iata_codes(self, engine: AirportEngine) -> None:
        assert engine.geo.distance_between("LHR", "JFK") == pytest.approx(5539.6, abs=1)

    def test_mixed_codes(self, engine: AirportEngine) -> None:
        """Test IATA and ICAO codes can be mixed."""
        assert engine.geo.distance_between("EGLL", "JFK") == engine.geo.distance_between("LHR", "KJFK")

    def test_symmetric(self, engine: AirportEngine) -> None:
        assert engine.geo.distance_between("SIN", "LGW") == engine.geo.distance_between("LGW", "SIN")

    def test_unresolved_code(self, engine: AirportEngine) -> None:
        assert engine.geo.distance_between("LHR", "ZZZ") is None
        assert engine.geo.distance_between("bad", "LHR") is None

    def test_airport_without_coordinates(self, engine: AirportEngine) -> None:
        assert engine.geo.distance_between("LHR", "EGLS") is None

    def test_distance_requires_coordinates(self, engine: AirportEngine) -> None:
        with pytest.raises(ValidationError):
            engine.geo.distance(engine.lookup.resolve_single("LHR"), engine.lookup.resolve_single("EGLS"))


class TestWithinRadius:
    """Test radius searches."""

    def test_london(self, engine: AirportEngine) -> None:
        """Test airports within 50 km of central London, in dataset order."""
        airports = engine.geo.within_radius(*LONDON, 50)
        assert [a.code for a in airports] == ["LHR", "LGW", "EGLW"]

    def test_smaller_radius(self, engine: AirportEngine) -> None:
        airports = engine.geo.within_radius(*LONDON, 30)
        assert [a.code for a in airports] == ["LHR", "EGLW"]

    def test_boundary_is_inclusive(self, engine: AirportEngine) -> None:
        """Test an airport exactly at the radius is included."""
        heathrow = engine.lookup.resolve_single("LHR")
        exact = haversine_km(*LONDON, heathrow.latitude, heathrow.longitude)

        assert heathrow in engine.geo.within_radius(*LONDON, exact)
        assert heathrow in engine.geo.within_radius(heathrow.latitude, heathrow.longitude, 0)

    def test_skips_records_without_coordinates(self, engine: AirportEngine) -> None:
        airports = engine.geo.within_radius(0, 0, 20100)
        assert len(airports) == 7
        assert all(a.has_coordinates for a in airports)

    @pytest.mark.parametrize(
        "lat, lon, radius",
        [(91, 0, 10), (0, -181, 10), (0, 0, -1), (float("nan"), 0, 10), ("51.5", 0, 10), (0, 0, None)],
    )
    def test_invalid_input(self, engine: AirportEngine, lat: object, lon: object, radius: object) -> None:
        with pytest.raises(ValidationError):
            engine.geo.within_radius(lat, lon, radius)  # type: ignore[arg-type]


class TestNearest:
    """Test nearest-airport queries."""

    def test_nearest_any(self, engine: AirportEngine) -> None:
        """Test the heliport is the closest facility to central London."""
        result = engine.geo.nearest(*LONDON)
        assert isinstance(result, NearbyAirport)
        assert result.airport.name == "London Heliport"
        assert result.distance_km == pytest.approx(5.48, abs=0.01)

    def test_distance_rounded_to_two_decimals(self, engine: AirportEngine) -> None:
        result = engine.geo.nearest(*LONDON)
        assert result.distance_km == round(result.distance_km, 2)

    def test_nearest_with_filters(self, engine: AirportEngine) -> None:
        result = engine.geo.nearest(*LONDON, {"type": "large_airport"})
        assert result.airport.iata == "LHR"
        assert result.distance_km == pytest.approx(23.49, abs=0.01)

    def test_no_candidate_with_coordinates(self, engine: AirportEngine) -> None:
        assert engine.geo.nearest(*LONDON, {"icao": "EGLS"}) is None
        assert engine.geo.nearest(*LONDON, {"country_code": "ZZ"}) is None

    def test_tie_keeps_dataset_order(self) -> None:
        """Test the first record wins when distances are equal."""
        first = AirportRecord(name="First", latitude=10.0, longitude=10.0)
        second = AirportRecord(name="Second", latitude=10.0, longitude=10.0)
        engine = AirportEngine.from_records([first, second])

        assert engine.geo.nearest(0, 0).airport is first

    def test_invalid_point(self, engine: AirportEngine) -> None:
        with pytest.raises(ValidationError):
            engine.geo.nearest(0, 200)
