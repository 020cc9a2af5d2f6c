"""Great-circle geometry and proximity queries.

Typical usage:
    geo = Geo(store, lookup, filters)

    km = geo.distance_between("LHR", "JFK")
    around_london = geo.within_radius(51.5074, -0.1278, 50)
    closest = geo.nearest(51.5074, -0.1278, {"type": "large_airport"})
"""

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from airport_data.airports.dataset import DatasetStore
from airport_data.airports.errors import ValidationError
from airport_data.airports.filters import FilterEngine
from airport_data.airports.lookup import Lookup
from airport_data.airports.record import AirportRecord

logger = logging.getLogger(__name__)

EARTH_RADIUS_KM = 6371.0


def haversine_km(
    lat1: float, lon1: float, lat2: float, lon2: float, radius_km: float = EARTH_RADIUS_KM
) -> float:
    """Calculate great circle distance between two points.

    Args:
        lat1: Latitude of the first point in degrees
        lon1: Longitude of the first point in degrees
        lat2: Latitude of the second point in degrees
        lon2: Longitude of the second point in degrees
        radius_km: Sphere radius in kilometers

    Returns:
        Distance in kilometers

    Examples:
        >>> round(haversine_km(51.4706, -0.461941, 40.639801, -73.7789))
        5540
    """
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    dphi = phi2 - phi1
    dlambda = math.radians(lon2 - lon1)

    a = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlambda / 2) ** 2
    c = 2 * math.asin(min(1.0, math.sqrt(a)))

    return c * radius_km


@dataclass(frozen=True)
class NearbyAirport:
    """An airport together with its distance from a query point.

    Attributes:
        airport: The matching record
        distance_km: Distance from the query point, rounded to 2 decimals
    """

    airport: AirportRecord
    distance_km: float


class Geo:
    """Distance and proximity queries over the airport dataset."""

    def __init__(
        self,
        store: DatasetStore,
        lookup: Lookup,
        filters: FilterEngine,
        earth_radius_km: float = EARTH_RADIUS_KM,
    ) -> None:
        self._store = store
        self._lookup = lookup
        self._filters = filters
        self.earth_radius_km = earth_radius_km

    def distance(self, a: AirportRecord, b: AirportRecord) -> float:
        """Distance in kilometers between two airports with coordinates.

        Raises:
            ValidationError: If either airport lacks coordinates.
        """
        for airport in (a, b):
            if not airport.has_coordinates:
                raise ValidationError(f"Airport has no usable coordinates: {airport.code or airport.name}")
        return haversine_km(a.latitude, a.longitude, b.latitude, b.longitude, self.earth_radius_km)

    def distance_between(self, code1: str, code2: str) -> float | None:
        """Distance in kilometers between two airports given by code.

        Args:
            code1: IATA or ICAO code of the first airport
            code2: IATA or ICAO code of the second airport

        Returns:
            Distance in kilometers, or None if either code does not resolve
            to an airport with coordinates.
        """
        first = self._lookup.resolve_single(code1)
        second = self._lookup.resolve_single(code2)
        if first is None or second is None:
            logger.debug("Cannot measure %s-%s: unresolved code", code1, code2)
            return None
        if not (first.has_coordinates and second.has_coordinates):
            return None
        return self.distance(first, second)

    def within_radius(self, lat: float, lon: float, radius_km: float) -> list[AirportRecord]:
        """Find airports within a radius of a point (boundary inclusive).

        Args:
            lat: Latitude in degrees
            lon: Longitude in degrees
            radius_km: Search radius in kilometers

        Returns:
            Airports with coordinates within the radius, in dataset order.

        Raises:
            ValidationError: If the point or radius is invalid.
        """
        _check_point(lat, lon)
        if not _is_number(radius_km) or radius_km < 0:
            raise ValidationError(f"Radius must be a non-negative number, got {radius_km!r}")

        results = [
            airport
            for airport in self._store.get_data()
            if airport.has_coordinates
            and haversine_km(lat, lon, airport.latitude, airport.longitude, self.earth_radius_km) <= radius_km
        ]
        logger.debug("Found %d airports within %.1f km of (%.4f, %.4f)", len(results), radius_km, lat, lon)
        return results

    def nearest(self, lat: float, lon: float, filters: Mapping[str, Any] | None = None) -> NearbyAirport | None:
        """Find the airport closest to a point.

        Args:
            lat: Latitude in degrees
            lon: Longitude in degrees
            filters: Optional filter mapping applied before measuring

        Returns:
            Closest airport and its distance, or None if no candidate has
            coordinates. On equal distances the first airport in dataset
            order wins.
        """
        _check_point(lat, lon)
        candidates = self._filters.find(filters) if filters else self._store.get_data()

        best: AirportRecord | None = None
        best_distance = math.inf
        for airport in candidates:
            if not airport.has_coordinates:
                continue
            distance = haversine_km(lat, lon, airport.latitude, airport.longitude, self.earth_radius_km)
            if distance < best_distance:
                best, best_distance = airport, distance

        if best is None:
            return None
        return NearbyAirport(airport=best, distance_km=round(best_distance, 2))


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


def _check_point(lat: float, lon: float) -> None:
    if not (_is_number(lat) and -90 <= lat <= 90):
        raise ValidationError(f"Latitude must be a number between -90 and 90, got {lat!r}")
    if not (_is_number(lon) and -180 <= lon <= 180):
        raise ValidationError(f"Longitude must be a number between -180 and 180, got {lon!r}")
