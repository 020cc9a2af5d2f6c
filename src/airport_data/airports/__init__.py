"""Airport dataset query engine.

This package answers exact-code lookups, name search, geospatial queries,
filtering and statistics over a read-only airport dataset that is loaded
lazily from a compressed JSON blob.

Typical usage:
    from airport_data.airports import get_engine

    engine = get_engine()
    airport = engine.lookup.by_iata("LHR")[0]
    nearby = engine.geo.within_radius(51.5074, -0.1278, radius_km=50)
"""

from airport_data.airports.batch import Batch, DistanceMatrix
from airport_data.airports.dataset import DatasetStore
from airport_data.airports.engine import AirportEngine, get_engine
from airport_data.airports.errors import (
    AirportDataError,
    DatasetLoadError,
    FormatError,
    NotFoundError,
    UnresolvedCodesError,
    ValidationError,
)
from airport_data.airports.filters import FilterEngine
from airport_data.airports.geo import Geo, NearbyAirport, haversine_km
from airport_data.airports.index import IndexBuilder
from airport_data.airports.lookup import Lookup, LookupResult
from airport_data.airports.record import AirportRecord, normalize_scheduled_service
from airport_data.airports.search import Search
from airport_data.airports.stats import AirportStats, Stats

__all__ = [
    "AirportDataError",
    "AirportEngine",
    "AirportRecord",
    "AirportStats",
    "Batch",
    "DatasetLoadError",
    "DatasetStore",
    "DistanceMatrix",
    "FilterEngine",
    "FormatError",
    "Geo",
    "IndexBuilder",
    "Lookup",
    "LookupResult",
    "NearbyAirport",
    "NotFoundError",
    "Search",
    "Stats",
    "UnresolvedCodesError",
    "ValidationError",
    "get_engine",
    "haversine_km",
    "normalize_scheduled_service",
]
