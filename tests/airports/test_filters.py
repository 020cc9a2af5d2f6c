"""Tests for multi-criteria filtering."""

import pytest

from airport_data.airports.engine import AirportEngine
from airport_data.airports.errors import ValidationError
from airport_data.airports.filters import compile_filters


class TestFind:
    """Test FilterEngine.find()."""

    def test_no_filters_matches_everything(self, engine: AirportEngine) -> None:
        """Test empty and missing filters act as identity."""
        everything = list(engine.store.get_data())
        assert engine.filters.find() == everything
        assert engine.filters.find({}) == everything

    def test_scheduled_service_true(self, engine: AirportEngine) -> None:
        """Test the filter compares against the normalized flag."""
        airports = engine.filters.find({"has_scheduled_service": True})
        assert [a.code for a in airports] == ["LHR", "LGW", "JFK", "BSL", "SIN"]
        assert all(a.scheduled_service for a in airports)

    def test_scheduled_service_false(self, engine: AirportEngine) -> None:
        airports = engine.filters.find({"has_scheduled_service": False})
        assert [a.code for a in airports] == ["EGLW", "EGLS", "BSL"]

    def test_scheduled_service_filter_value_may_be_tri_form(self, engine: AirportEngine) -> None:
        assert engine.filters.find({"has_scheduled_service": "yes"}) == engine.filters.find(
            {"has_scheduled_service": True}
        )

    def test_min_runway(self, engine: AirportEngine) -> None:
        """Test records without runway length count as 0."""
        airports = engine.filters.find({"min_runway_ft": 12795})
        assert [a.code for a in airports] == ["LHR", "JFK", "BSL", "SIN"]

        assert len(engine.filters.find({"min_runway_ft": 0})) == 8

    def test_exact_field_match(self, engine: AirportEngine) -> None:
        airports = engine.filters.find({"country_code": "GB", "type": "large_airport"})
        assert [a.code for a in airports] == ["LHR", "LGW"]

    def test_exact_match_is_case_sensitive(self, engine: AirportEngine) -> None:
        assert engine.filters.find({"type": "LARGE_AIRPORT"}) == []

    def test_combined_filters(self, engine: AirportEngine) -> None:
        airports = engine.filters.find({"continent": "EU", "has_scheduled_service": True, "min_runway_ft": 11000})
        assert [a.code for a in airports] == ["LHR", "BSL"]


class TestMalformedFilters:
    """Test malformed filter sets are rejected."""

    def test_unknown_field(self, engine: AirportEngine) -> None:
        with pytest.raises(ValidationError, match="Unknown filter field"):
            engine.filters.find({"runway": 1000})

    def test_non_mapping(self, engine: AirportEngine) -> None:
        with pytest.raises(ValidationError):
            engine.filters.find([("country_code", "GB")])  # type: ignore[arg-type]

    @pytest.mark.parametrize("threshold", ["10000", None, True])
    def test_non_numeric_runway_threshold(self, threshold: object) -> None:
        with pytest.raises(ValidationError):
            compile_filters({"min_runway_ft": threshold})


class TestFieldValueNormalization:
    """Test equality filters accept values in the dataset's own forms."""

    def test_numeric_string(self, engine: AirportEngine) -> None:
        assert [a.icao for a in engine.filters.find({"runway_length": "12799"})] == ["EGLL"]
        assert [a.icao for a in engine.filters.find({"runway_length": 12799})] == ["EGLL"]
        assert [a.icao for a in engine.filters.find({"elevation": "885"})] == ["LFSB"]

    def test_coordinate_string(self, engine: AirportEngine) -> None:
        assert [a.icao for a in engine.filters.find({"latitude": "51.4706"})] == ["EGLL"]

    def test_tri_form_scheduled_service(self, engine: AirportEngine) -> None:
        """Test the raw field accepts the same forms as has_scheduled_service."""
        assert engine.filters.find({"scheduled_service": "yes"}) == engine.filters.find({"scheduled_service": True})
        assert [a.code for a in engine.filters.find({"scheduled_service": "No"})] == ["EGLW", "EGLS", "BSL"]

    def test_code_case(self, engine: AirportEngine) -> None:
        assert [a.code for a in engine.filters.find({"country_code": "gb", "iata": "lhr"})] == ["LHR"]

    def test_empty_value_matches_missing_field(self, engine: AirportEngine) -> None:
        assert [a.icao for a in engine.filters.find({"type": ""})] == ["EGLS"]
