"""Secondary code indices over the airport dataset.

Each index maps a code (IATA or ICAO) to every record carrying it, in
dataset order. Indices are built lazily by a single pass over the snapshot
and then reused.

Typical usage:
    indices = IndexBuilder(store)
    heathrow = indices.get_index("iata").get("LHR", ())
"""

import logging
import threading
from collections.abc import Mapping
from types import MappingProxyType

from airport_data.airports.dataset import DatasetStore
from airport_data.airports.errors import ValidationError
from airport_data.airports.record import AirportRecord

logger = logging.getLogger(__name__)

INDEXED_FIELDS = ("iata", "icao")


class IndexBuilder:
    """Lazily built, memoized code indices.

    Performance:
        - Build: O(n) once per field
        - Lookup: O(1) average

    Examples:
        >>> indices = IndexBuilder(store)
        >>> [a.name for a in indices.get_index("icao")["EGLL"]]
        ['London Heathrow Airport']
    """

    def __init__(self, store: DatasetStore) -> None:
        """Initialize with no indices built.

        Args:
            store: Dataset store to index.
        """
        self._store = store
        self._indices: dict[str, Mapping[str, tuple[AirportRecord, ...]]] = {}
        self._lock = threading.Lock()
        self.build_count = 0

    def get_index(self, field: str) -> Mapping[str, tuple[AirportRecord, ...]]:
        """Get the index for a code field, building it on first access.

        Args:
            field: "iata" or "icao".

        Returns:
            Read-only mapping from code to matching records.

        Raises:
            ValidationError: If the field is not indexed.
        """
        index = self._indices.get(field)
        if index is not None:
            return index

        if field not in INDEXED_FIELDS:
            raise ValidationError(f"No index for field {field!r}; indexed fields: {', '.join(INDEXED_FIELDS)}")

        with self._lock:
            if field not in self._indices:
                self._indices[field] = self._build(field)
            return self._indices[field]

    def _build(self, field: str) -> Mapping[str, tuple[AirportRecord, ...]]:
        self.build_count += 1
        grouped: dict[str, list[AirportRecord]] = {}
        for record in self._store.get_data():
            code = getattr(record, field)
            if code:
                grouped.setdefault(code, []).append(record)

        duplicates = sum(1 for matches in grouped.values() if len(matches) > 1)
        if duplicates:
            logger.debug("%d %s codes are shared by more than one record", duplicates, field)
        logger.info("Built %s index with %d codes", field, len(grouped))

        return MappingProxyType({code: tuple(matches) for code, matches in grouped.items()})
