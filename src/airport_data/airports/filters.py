"""Multi-criteria airport filtering.

Filters are a mapping of field name to expected value. Two keys have
special meaning:
    - has_scheduled_service: compared against the normalized
      scheduled_service flag (the filter value may be "yes", "no", ...).
    - min_runway_ft: minimum runway length in feet; airports without a
      runway length count as 0.
Every other key must name an AirportRecord field. Its value is normalized
like the dataset field ("12799" matches a runway of 12799, "gb" matches
GB) and then matched by equality.

Typical usage:
    filters = FilterEngine(store)
    uk_hubs = filters.find({"country_code": "GB", "type": "large_airport"})
"""

from collections.abc import Callable, Iterable, Mapping
from typing import Any

from airport_data.airports.dataset import DatasetStore
from airport_data.airports.errors import ValidationError
from airport_data.airports.record import AirportRecord, normalize_scheduled_service, parse_field

SCHEDULED_SERVICE_KEY = "has_scheduled_service"
MIN_RUNWAY_KEY = "min_runway_ft"


class FilterEngine:
    """Predicate matching over the airport dataset."""

    def __init__(self, store: DatasetStore) -> None:
        self._store = store

    def find(self, filters: Mapping[str, Any] | None = None) -> list[AirportRecord]:
        """Find airports matching every filter.

        Args:
            filters: Field to expected value. None or empty matches all.

        Returns:
            Matching records in dataset order.

        Raises:
            ValidationError: If the filter set is malformed.

        Examples:
            >>> engine.find({"has_scheduled_service": True, "min_runway_ft": 10000})
        """
        return self.apply(self._store.get_data(), filters)

    def apply(self, airports: Iterable[AirportRecord], filters: Mapping[str, Any] | None) -> list[AirportRecord]:
        """Filter an arbitrary sequence of records."""
        predicates = compile_filters(filters)
        return [a for a in airports if all(predicate(a) for predicate in predicates)]


def compile_filters(filters: Mapping[str, Any] | None) -> list[Callable[[AirportRecord], bool]]:
    """Turn a filter mapping into a list of record predicates.

    Raises:
        ValidationError: If filters is not a mapping, names an unknown
            field, or carries a non-numeric runway threshold.
    """
    if filters is None:
        return []
    if not isinstance(filters, Mapping):
        raise ValidationError("Filters must be a mapping of field name to value")

    known_fields = AirportRecord.field_names()
    predicates: list[Callable[[AirportRecord], bool]] = []
    for key, expected in filters.items():
        if key == SCHEDULED_SERVICE_KEY:
            wanted = normalize_scheduled_service(expected)
            predicates.append(lambda a, wanted=wanted: a.scheduled_service == wanted)
        elif key == MIN_RUNWAY_KEY:
            if isinstance(expected, bool) or not isinstance(expected, (int, float)):
                raise ValidationError(f"{MIN_RUNWAY_KEY} must be a number, got {expected!r}")
            predicates.append(lambda a, threshold=expected: (a.runway_length or 0) >= threshold)
        elif key in known_fields:
            wanted = parse_field(key, expected)
            predicates.append(lambda a, key=key, wanted=wanted: getattr(a, key) == wanted)
        else:
            raise ValidationError(f"Unknown filter field: {key!r}")
    return predicates
