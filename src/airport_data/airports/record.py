"""Airport record model and ingestion helpers.

This module defines the immutable AirportRecord and the functions that turn
raw dataset items into records. All representation quirks of the dataset
(numeric strings, tri-form booleans, empty strings) are resolved here so the
query engines only ever see canonical values.

Typical usage:
    from airport_data.airports.record import AirportRecord

    record = AirportRecord.from_dict({"iata": "LHR", "name": "London Heathrow Airport"})
    if record.has_coordinates:
        print(record.latitude, record.longitude)
"""

import math
import re
from collections.abc import Callable
from dataclasses import asdict, dataclass, fields
from typing import Any

IATA_PATTERN = r"^[A-Z]{3}$"
ICAO_PATTERN = r"^[A-Z0-9]{4}$"
COUNTRY_PATTERN = r"^[A-Z]{2}$"
CONTINENT_PATTERN = r"^[A-Z]{2}$"

_IATA_RE = re.compile(IATA_PATTERN)
_ICAO_RE = re.compile(ICAO_PATTERN)
_TWO_LETTER_RE = re.compile(COUNTRY_PATTERN)

_TRUE_STRINGS = frozenset({"yes", "true"})
_FALSE_STRINGS = frozenset({"no", "false"})

LINK_FIELDS = (
    "website",
    "wikipedia",
    "flightradar24_url",
    "radarbox_url",
    "flightaware_url",
)


def is_iata(code: Any) -> bool:
    """Check whether a value has the shape of an IATA code."""
    return isinstance(code, str) and _IATA_RE.match(code) is not None


def is_icao(code: Any) -> bool:
    """Check whether a value has the shape of an ICAO code."""
    return isinstance(code, str) and _ICAO_RE.match(code) is not None


def is_region_code(code: Any) -> bool:
    """Check whether a value has the shape of a country or continent code."""
    return isinstance(code, str) and _TWO_LETTER_RE.match(code) is not None


def normalize_scheduled_service(value: Any) -> bool:
    """Normalize a tri-form boolean to a canonical bool.

    Args:
        value: Native bool, or a case-insensitive "yes"/"no"/"true"/"false"
            string. Anything else counts as no scheduled service.

    Returns:
        True only for True, "yes" or "true" (any case).

    Examples:
        >>> normalize_scheduled_service("YES")
        True
        >>> normalize_scheduled_service("no")
        False
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE_STRINGS:
            return True
        if text in _FALSE_STRINGS:
            return False
    return False


def parse_coordinate(value: Any) -> float | None:
    """Parse a number or numeric string into a finite float.

    Returns:
        The parsed value, or None when missing, unparseable or not finite.
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def parse_int(value: Any) -> int | None:
    """Parse a number or numeric string (e.g. "12799" or 83.0) into an int."""
    number = parse_coordinate(value)
    if number is None:
        return None
    return int(number)


def _text(value: Any) -> str | None:
    """Return a stripped string, or None for missing and empty values."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _code(value: Any) -> str | None:
    text = _text(value)
    return text.upper() if text else None


_FIELD_PARSERS: dict[str, Callable[[Any], Any]] = {
    "iata": _code,
    "icao": _code,
    "country_code": _code,
    "continent": _code,
    "latitude": parse_coordinate,
    "longitude": parse_coordinate,
    "runway_length": parse_int,
    "elevation": parse_int,
    "scheduled_service": normalize_scheduled_service,
}


def parse_field(name: str, value: Any) -> Any:
    """Normalize a raw value the way ingestion normalizes the named field.

    Fields without a dedicated parser are plain text.

    Examples:
        >>> parse_field("runway_length", "12799")
        12799
        >>> parse_field("scheduled_service", "Yes")
        True
    """
    return _FIELD_PARSERS.get(name, _text)(value)


@dataclass(frozen=True)
class AirportRecord:
    """A single airport (or similar facility) from the dataset.

    Attributes:
        name: Display name
        iata: IATA code (3 letters), if any
        icao: ICAO code (4 alphanumerics), if any
        city: City served
        country_code: ISO country code (2 letters)
        continent: Continent code (2 letters)
        type: Facility category (e.g. "large_airport", "heliport")
        latitude: Latitude in decimal degrees, None if unusable
        longitude: Longitude in decimal degrees, None if unusable
        runway_length: Longest runway in feet
        elevation: Elevation in feet
        scheduled_service: Whether the airport has scheduled airline service
        time: IANA timezone identifier
        website: Airport website URL
        wikipedia: Wikipedia URL
        flightradar24_url: FlightRadar24 URL
        radarbox_url: RadarBox URL
        flightaware_url: FlightAware URL
    """

    name: str
    iata: str | None = None
    icao: str | None = None
    city: str | None = None
    country_code: str | None = None
    continent: str | None = None
    type: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    runway_length: int | None = None
    elevation: int | None = None
    scheduled_service: bool = False
    time: str | None = None
    website: str | None = None
    wikipedia: str | None = None
    flightradar24_url: str | None = None
    radarbox_url: str | None = None
    flightaware_url: str | None = None

    @classmethod
    def from_dict(cls, item: dict[str, Any]) -> "AirportRecord":
        """Build a record from one raw dataset item.

        The legacy key "airport" supplies the name when "name" is missing
        or empty.

        Args:
            item: Mapping as decoded from the dataset JSON.

        Returns:
            Canonical AirportRecord.

        Examples:
            >>> AirportRecord.from_dict({"iata": "lhr", "airport": "Heathrow"}).iata
            'LHR'
        """
        values = {name: parse_field(name, item.get(name)) for name in cls.field_names() if name != "name"}
        return cls(name=_text(item.get("name")) or _text(item.get("airport")) or "", **values)

    @classmethod
    def field_names(cls) -> frozenset[str]:
        """Names of all record fields."""
        return frozenset(f.name for f in fields(cls))

    @property
    def has_coordinates(self) -> bool:
        """Whether the record is usable for geospatial queries."""
        return self.latitude is not None and self.longitude is not None

    @property
    def code(self) -> str | None:
        """Preferred identifier: IATA code, falling back to ICAO."""
        return self.iata or self.icao

    def links(self) -> dict[str, str]:
        """Get the external links that are present on this record."""
        return {name: getattr(self, name) for name in LINK_FIELDS if getattr(self, name)}

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dictionary."""
        return asdict(self)
