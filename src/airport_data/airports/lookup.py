"""Exact-match airport lookups by code.

IATA and ICAO lookups go through the code indices; country and continent
lookups scan the snapshot since those codes are shared by many airports.
Every lookup validates the code shape before searching.

Each lookup exists in two forms:
    - find_*() returns a LookupResult that carries either records or the
      error, so absence can be handled without exceptions.
    - by_*() returns the records directly and raises on failure.

Typical usage:
    lookup = Lookup(store, indices)

    result = lookup.find_iata("LHR")
    if result.ok:
        print(result.records[0].name)

    airports = lookup.by_country("GB")
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from airport_data.airports.dataset import DatasetStore
from airport_data.airports.errors import (
    AirportDataError,
    FormatError,
    NotFoundError,
    ValidationError,
)
from airport_data.airports.index import IndexBuilder
from airport_data.airports.record import (
    CONTINENT_PATTERN,
    COUNTRY_PATTERN,
    IATA_PATTERN,
    ICAO_PATTERN,
    AirportRecord,
    is_iata,
    is_icao,
    is_region_code,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LookupResult:
    """Outcome of a lookup: matching records or the reason there are none.

    Attributes:
        records: Matching records in dataset order (empty on failure)
        error: FormatError or NotFoundError on failure, None on success
    """

    records: tuple[AirportRecord, ...] = ()
    error: AirportDataError | None = None

    @property
    def ok(self) -> bool:
        """Whether the lookup found at least one record."""
        return self.error is None

    def unwrap(self) -> list[AirportRecord]:
        """Get the records, raising the stored error on failure.

        Raises:
            FormatError: If the code was malformed.
            NotFoundError: If the code matched nothing.
        """
        if self.error is not None:
            raise self.error
        return list(self.records)


class Lookup:
    """Exact-match lookups over the airport dataset.

    Examples:
        >>> lookup = Lookup(store, indices)
        >>> [a.icao for a in lookup.by_iata("LHR")]
        ['EGLL']
        >>> lookup.resolve_single("XXXXX") is None
        True
    """

    def __init__(self, store: DatasetStore, indices: IndexBuilder) -> None:
        self._store = store
        self._indices = indices

    def find_iata(self, code: str) -> LookupResult:
        """Look up airports by IATA code without raising."""
        return self._find_indexed("iata", code, is_iata, IATA_PATTERN, "IATA")

    def find_icao(self, code: str) -> LookupResult:
        """Look up airports by ICAO code without raising."""
        return self._find_indexed("icao", code, is_icao, ICAO_PATTERN, "ICAO")

    def find_country(self, code: str) -> LookupResult:
        """Look up airports by country code without raising."""
        return self._find_scanned("country_code", code, COUNTRY_PATTERN, "country")

    def find_continent(self, code: str) -> LookupResult:
        """Look up airports by continent code without raising."""
        return self._find_scanned("continent", code, CONTINENT_PATTERN, "continent")

    def by_iata(self, code: str) -> list[AirportRecord]:
        """Get all airports with an IATA code.

        Args:
            code: 3-letter uppercase code (e.g., "LHR")

        Returns:
            Matching records in dataset order

        Raises:
            FormatError: If the code is not 3 uppercase letters.
            NotFoundError: If no airport has the code.
        """
        return self.find_iata(code).unwrap()

    def by_icao(self, code: str) -> list[AirportRecord]:
        """Get all airports with an ICAO code (e.g., "EGLL")."""
        return self.find_icao(code).unwrap()

    def by_country(self, code: str) -> list[AirportRecord]:
        """Get all airports in a country (e.g., "GB")."""
        return self.find_country(code).unwrap()

    def by_continent(self, code: str) -> list[AirportRecord]:
        """Get all airports on a continent (e.g., "EU")."""
        return self.find_continent(code).unwrap()

    def resolve_single(self, code: str) -> AirportRecord | None:
        """Resolve an IATA or ICAO code to one representative airport.

        Args:
            code: IATA or ICAO code; the shape decides which index is used.

        Returns:
            First matching record, or None if the code is unknown or matches
            neither shape.
        """
        if is_iata(code):
            field = "iata"
        elif is_icao(code):
            field = "icao"
        else:
            return None

        matches = self._indices.get_index(field).get(code)
        return matches[0] if matches else None

    def by_type(self, airport_type: str) -> list[AirportRecord]:
        """Get airports by facility type.

        Matching is case-insensitive. The generic type "airport" matches
        every type containing "airport" (small, medium and large airports).

        Args:
            airport_type: Type to match (e.g., "large_airport", "heliport")

        Returns:
            Matching records in dataset order (may be empty)

        Raises:
            ValidationError: If the type is empty.

        Examples:
            >>> len(lookup.by_type("LARGE_AIRPORT")) == len(lookup.by_type("large_airport"))
            True
        """
        if not isinstance(airport_type, str) or not airport_type.strip():
            raise ValidationError("Airport type must be a non-empty string")

        wanted = airport_type.strip().lower()
        airports = self._store.get_data()
        if wanted == "airport":
            return [a for a in airports if a.type and "airport" in a.type.lower()]
        return [a for a in airports if a.type and a.type.lower() == wanted]

    def by_timezone(self, timezone: str) -> list[AirportRecord]:
        """Get airports in an IANA timezone (e.g., "Europe/London").

        Raises:
            ValidationError: If the timezone is empty.
        """
        if not isinstance(timezone, str) or not timezone.strip():
            raise ValidationError("Timezone must be a non-empty string")
        return [a for a in self._store.get_data() if a.time == timezone]

    def links(self, code: str) -> dict[str, str] | None:
        """Get the external links of an airport.

        Args:
            code: IATA or ICAO code

        Returns:
            Mapping of link name to URL for the links present, or None if
            the code does not resolve.
        """
        airport = self.resolve_single(code)
        return airport.links() if airport else None

    def is_valid_iata(self, code: str) -> bool:
        """Check that a code is a well-formed IATA code present in the dataset."""
        return self.find_iata(code).ok

    def is_valid_icao(self, code: str) -> bool:
        """Check that a code is a well-formed ICAO code present in the dataset."""
        return self.find_icao(code).ok

    def _find_indexed(
        self,
        field: str,
        code: str,
        shape_check: Callable[[str], bool],
        pattern: str,
        label: str,
    ) -> LookupResult:
        if not shape_check(code):
            return LookupResult(error=FormatError(code, pattern, f"{label} code"))

        matches = self._indices.get_index(field).get(code, ())
        logger.debug("%s lookup %s: %d match(es)", label, code, len(matches))
        if not matches:
            return LookupResult(error=NotFoundError(code, label))
        return LookupResult(records=matches)

    def _find_scanned(self, field: str, code: str, pattern: str, label: str) -> LookupResult:
        if not is_region_code(code):
            return LookupResult(error=FormatError(code, pattern, f"{label} code"))

        matches = tuple(a for a in self._store.get_data() if getattr(a, field) == code)
        logger.debug("%s lookup %s: %d match(es)", label, code, len(matches))
        if not matches:
            return LookupResult(error=NotFoundError(code, label))
        return LookupResult(records=matches)
