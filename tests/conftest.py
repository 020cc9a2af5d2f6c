"""Pytest configuration and fixtures for all tests."""

import gzip
import json
from typing import Any

import pytest

from airport_data.airports.engine import AirportEngine
from airport_data.core.resource_path import get_dataset_path

SAMPLE_AIRPORTS: list[dict[str, Any]] = [
    {
        "iata": "LHR",
        "icao": "EGLL",
        "name": "London Heathrow Airport",
        "city": "London",
        "country_code": "GB",
        "continent": "EU",
        "type": "large_airport",
        "latitude": "51.4706",
        "longitude": "-0.461941",
        "runway_length": "12799",
        "elevation": "83",
        "scheduled_service": "yes",
        "time": "Europe/London",
        "website": "http://www.heathrow.com/",
        "wikipedia": "https://en.wikipedia.org/wiki/Heathrow_Airport",
        "flightradar24_url": "",
    },
    {
        "iata": "LGW",
        "icao": "EGKK",
        "name": "London Gatwick Airport",
        "city": "London",
        "country_code": "GB",
        "continent": "EU",
        "type": "large_airport",
        "latitude": "51.148102",
        "longitude": "-0.190278",
        "runway_length": 10879,
        "elevation": 202,
        "scheduled_service": True,
        "time": "Europe/London",
    },
    {
        "iata": "",
        "icao": "EGLW",
        "name": "London Heliport",
        "city": "London",
        "country_code": "GB",
        "continent": "EU",
        "type": "heliport",
        "latitude": 51.470001,
        "longitude": -0.179444,
        "runway_length": "",
        "elevation": "18",
        "scheduled_service": "no",
        "time": "Europe/London",
    },
    {
        "icao": "EGLS",
        "name": "Old Sarum Airfield",
        "city": "Salisbury",
        "country_code": "GB",
        "continent": "EU",
        "latitude": "",
        "longitude": "",
        "runway_length": "2543",
        "elevation": "",
        "scheduled_service": "FALSE",
        "time": "",
    },
    {
        "iata": "JFK",
        "icao": "KJFK",
        "name": "John F Kennedy International Airport",
        "city": "New York",
        "country_code": "US",
        "continent": "NA",
        "type": "large_airport",
        "latitude": 40.639801,
        "longitude": -73.7789,
        "runway_length": 14511,
        "elevation": 13,
        "scheduled_service": "TRUE",
        "time": "America/New_York",
    },
    {
        "iata": "BSL",
        "icao": "LFSB",
        "name": "EuroAirport Basel-Mulhouse-Freiburg Airport",
        "city": "Mulhouse",
        "country_code": "FR",
        "continent": "EU",
        "type": "large_airport",
        "latitude": "47.589583",
        "longitude": "7.529914",
        "runway_length": "12795",
        "elevation": "885",
        "scheduled_service": "yes",
        "time": "Europe/Paris",
    },
    {
        "iata": "BSL",
        "name": "Basel Bus Station",
        "city": "Basel",
        "country_code": "CH",
        "continent": "EU",
        "type": "bus_station",
        "latitude": "47.5476",
        "longitude": "7.5897",
        "scheduled_service": "no",
        "time": "Europe/Zurich",
    },
    {
        "iata": "SIN",
        "icao": "WSSS",
        "airport": "Singapore Changi Airport",
        "city": "Singapore",
        "country_code": "SG",
        "continent": "AS",
        "type": "large_airport",
        "latitude": "1.35019",
        "longitude": "103.994003",
        "runway_length": "13123",
        "elevation": "22",
        "scheduled_service": "Yes",
        "time": "Asia/Singapore",
    },
]


@pytest.fixture
def sample_items() -> list[dict[str, Any]]:
    """Raw dataset items covering the representation quirks of the dataset."""
    return [dict(item) for item in SAMPLE_AIRPORTS]


@pytest.fixture
def sample_blob(sample_items: list[dict[str, Any]]) -> bytes:
    """Gzip-compressed JSON blob of the sample items."""
    return gzip.compress(json.dumps(sample_items).encode("utf-8"))


@pytest.fixture
def engine(sample_blob: bytes) -> AirportEngine:
    """Engine over the sample blob."""
    return AirportEngine.open(sample_blob)


@pytest.fixture(scope="session")
def packaged_engine() -> AirportEngine:
    """Engine over the dataset shipped with the package."""
    return AirportEngine.from_path(get_dataset_path())
