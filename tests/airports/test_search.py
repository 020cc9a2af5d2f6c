"""Tests for name search and autocomplete."""

import pytest

from airport_data.airports.dataset import DatasetStore
from airport_data.airports.engine import AirportEngine
from airport_data.airports.errors import ValidationError
from airport_data.airports.record import AirportRecord
from airport_data.airports.search import Search


class TestSearchByName:
    """Test substring name search."""

    def test_case_insensitive_substring(self, engine: AirportEngine) -> None:
        """Test matches are case-insensitive and keep dataset order."""
        airports = engine.search.search_by_name("LONDON")
        assert [a.name for a in airports] == [
            "London Heathrow Airport",
            "London Gatwick Airport",
            "London Heliport",
        ]

    def test_no_match_is_empty(self, engine: AirportEngine) -> None:
        assert engine.search.search_by_name("Atlantis") == []

    @pytest.mark.parametrize("query", ["", "x"])
    def test_short_query_raises(self, engine: AirportEngine, query: str) -> None:
        with pytest.raises(ValidationError):
            engine.search.search_by_name(query)

    def test_two_characters_accepted(self, engine: AirportEngine) -> None:
        assert engine.search.search_by_name("he")


class TestAutocomplete:
    """Test autocomplete suggestions."""

    def test_matches_iata_code(self, engine: AirportEngine) -> None:
        """Test the IATA code is searched as well as the name."""
        suggestions = engine.search.autocomplete("jfk")
        assert [a.iata for a in suggestions] == ["JFK"]

    def test_short_query_returns_empty(self, engine: AirportEngine) -> None:
        """Test short queries fail soft."""
        assert engine.search.autocomplete("L") == []

    def test_limit(self, sample_blob: bytes) -> None:
        """Test suggestions are truncated to the configured limit."""
        search = Search(DatasetStore(sample_blob), autocomplete_limit=2)
        suggestions = search.autocomplete("airport")
        assert [a.iata for a in suggestions] == ["LHR", "LGW"]

    def test_default_limit_is_ten(self) -> None:
        """Test at most ten suggestions are returned by default."""
        records = [AirportRecord(name=f"Test Field {i}") for i in range(15)]
        search = Search(DatasetStore.from_records(records))
        assert len(search.autocomplete("test")) == 10
