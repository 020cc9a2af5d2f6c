"""Grouped airport statistics and rankings.

Typical usage:
    stats = Stats(lookup)

    gb = stats.stats_by_country("GB")
    print(gb.total, gb.by_type)

    longest = stats.largest_by_continent("AS", limit=5)
"""

import logging
from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass, field

from airport_data.airports.errors import ValidationError
from airport_data.airports.lookup import Lookup
from airport_data.airports.record import AirportRecord

logger = logging.getLogger(__name__)

UNKNOWN_TYPE = "unknown"
UNKNOWN_COUNTRY = "unknown"
DEFAULT_LIMIT = 10

_SORT_KEYS = {
    "runway": lambda a: a.runway_length or 0,
    "elevation": lambda a: a.elevation or 0,
}


@dataclass(frozen=True)
class AirportStats:
    """Aggregate figures for a group of airports.

    Attributes:
        total: Number of airports
        by_type: Airport count per type ("unknown" when missing)
        with_scheduled_service: Airports with scheduled airline service
        average_runway_length: Mean runway length in feet over airports
            with a positive runway length, 0 if none
        average_elevation: Mean elevation in feet over airports with a
            known elevation, 0 if none
        timezones: Distinct timezones in first-seen order
        by_country: Airport count per country, "unknown" when missing
            (continent stats only)
    """

    total: int
    by_type: dict[str, int]
    with_scheduled_service: int
    average_runway_length: float
    average_elevation: float
    timezones: list[str]
    by_country: dict[str, int] | None = field(default=None)


def summarize(airports: Sequence[AirportRecord], group_by_country: bool = False) -> AirportStats:
    """Compute statistics over a sequence of airports.

    Args:
        airports: Airports to summarize.
        group_by_country: Also count airports per country.

    Returns:
        AirportStats for the sequence.
    """
    runways = [a.runway_length for a in airports if a.runway_length and a.runway_length > 0]
    elevations = [a.elevation for a in airports if a.elevation is not None]
    timezones = dict.fromkeys(a.time for a in airports if a.time)

    by_country = None
    if group_by_country:
        by_country = dict(Counter(a.country_code or UNKNOWN_COUNTRY for a in airports))

    return AirportStats(
        total=len(airports),
        by_type=dict(Counter(a.type or UNKNOWN_TYPE for a in airports)),
        with_scheduled_service=sum(1 for a in airports if a.scheduled_service),
        average_runway_length=sum(runways) / len(runways) if runways else 0,
        average_elevation=sum(elevations) / len(elevations) if elevations else 0,
        timezones=list(timezones),
        by_country=by_country,
    )


class Stats:
    """Statistics by country and continent."""

    def __init__(self, lookup: Lookup, default_limit: int = DEFAULT_LIMIT) -> None:
        self._lookup = lookup
        self.default_limit = default_limit

    def stats_by_country(self, code: str) -> AirportStats:
        """Summarize the airports of a country.

        Args:
            code: 2-letter country code (e.g., "GB")

        Returns:
            AirportStats for the country

        Raises:
            FormatError: If the code is malformed.
            NotFoundError: If the country has no airports.
        """
        return summarize(self._lookup.by_country(code))

    def stats_by_continent(self, code: str) -> AirportStats:
        """Summarize the airports of a continent, including per-country counts."""
        return summarize(self._lookup.by_continent(code), group_by_country=True)

    def largest_by_continent(
        self, code: str, limit: int | None = None, sort_by: str = "runway"
    ) -> list[AirportRecord]:
        """Rank a continent's airports by runway length or elevation.

        Args:
            code: 2-letter continent code (e.g., "AS")
            limit: Number of airports to return (default_limit if None)
            sort_by: "runway" or "elevation"; missing values count as 0

        Returns:
            Up to limit airports, largest first. Equal values keep dataset
            order.

        Raises:
            FormatError: If the code is malformed.
            NotFoundError: If the continent has no airports.
            ValidationError: If sort_by or limit is invalid.
        """
        key = _SORT_KEYS.get(sort_by)
        if key is None:
            raise ValidationError(f"sort_by must be one of {', '.join(_SORT_KEYS)}, got {sort_by!r}")
        if limit is None:
            limit = self.default_limit
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 0:
            raise ValidationError(f"limit must be a non-negative integer, got {limit!r}")

        airports = self._lookup.by_continent(code)
        ranked = sorted(airports, key=key, reverse=True)
        logger.debug("Ranked %d airports in %s by %s", len(ranked), code, sort_by)
        return ranked[:limit]
