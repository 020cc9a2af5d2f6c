"""Airport query engine facade.

AirportEngine owns one dataset store and one set of code indices and wires
the query engines on top of them. Build it explicitly from a blob, a file
or settings, or use get_engine() for a process-wide default over the
packaged dataset.

Typical usage:
    from airport_data.airports import get_engine

    engine = get_engine()
    heathrow = engine.lookup.by_iata("LHR")
    km = engine.geo.distance_between("LHR", "JFK")
    matrix = engine.batch.distance_matrix(["SIN", "LHR", "JFK"])
"""

import threading
from collections.abc import Iterable
from pathlib import Path

from airport_data.airports.batch import Batch
from airport_data.airports.dataset import DatasetStore
from airport_data.airports.filters import FilterEngine
from airport_data.airports.geo import Geo
from airport_data.airports.index import IndexBuilder
from airport_data.airports.lookup import Lookup
from airport_data.airports.record import AirportRecord
from airport_data.airports.search import Search
from airport_data.airports.stats import Stats
from airport_data.core.config import EngineSettings
from airport_data.core.logging_system import get_logger, initialize_logging
from airport_data.core.resource_path import get_dataset_path


class AirportEngine:
    """Read-only query engine over one airport snapshot.

    Nothing is decoded until the first query; every engine shares the same
    store and indices.

    Attributes:
        store: Dataset store owning the records
        indices: IATA/ICAO code indices
        lookup: Exact-match lookups
        search: Name search and autocomplete
        filters: Multi-criteria filtering
        geo: Distances and proximity queries
        stats: Statistics and rankings
        batch: Multi-code fetch and distance matrix

    Examples:
        >>> engine = AirportEngine.from_path("airports.json.gz")
        >>> engine.search.autocomplete("London")[0].name
        'London Heathrow Airport'
    """

    def __init__(self, store: DatasetStore, settings: EngineSettings | None = None) -> None:
        """Wire the query engines over a dataset store.

        Args:
            store: Dataset store to query.
            settings: Engine settings; defaults apply if None.
        """
        settings = settings or EngineSettings()
        self._log = get_logger(__name__)

        self.settings = settings
        self.store = store
        self.indices = IndexBuilder(store)
        self.lookup = Lookup(store, self.indices)
        self.search = Search(store, settings.min_query_length, settings.autocomplete_limit)
        self.filters = FilterEngine(store)
        self.geo = Geo(store, self.lookup, self.filters, settings.earth_radius_km)
        self.stats = Stats(self.lookup, settings.default_limit)
        self.batch = Batch(self.lookup, self.geo)

    @classmethod
    def open(cls, blob: bytes, settings: EngineSettings | None = None) -> "AirportEngine":
        """Create an engine over an in-memory dataset blob."""
        return cls(DatasetStore(blob), settings)

    @classmethod
    def from_path(cls, path: str | Path, settings: EngineSettings | None = None) -> "AirportEngine":
        """Create an engine over a dataset blob file, read on first query."""
        return cls(DatasetStore.from_path(path), settings)

    @classmethod
    def from_records(cls, records: Iterable[AirportRecord], settings: EngineSettings | None = None) -> "AirportEngine":
        """Create an engine over already parsed records."""
        return cls(DatasetStore.from_records(records), settings)

    @classmethod
    def from_settings(cls, settings: EngineSettings) -> "AirportEngine":
        """Create an engine as described by settings.

        Initializes logging first when settings name a logging config, then
        opens settings.dataset_path or the packaged dataset.
        """
        if settings.logging_config is not None:
            initialize_logging(settings.logging_config, use_platform_dir=False)
        return cls.from_path(settings.dataset_path or get_dataset_path(), settings)

    def warm_up(self) -> int:
        """Load the dataset and build both code indices now.

        Returns:
            Number of airports loaded.
        """
        count = len(self.store.get_data())
        self.indices.get_index("iata")
        self.indices.get_index("icao")
        self._log.info("Airport engine ready with %d airports", count)
        return count


_engine_lock = threading.Lock()
_engine: AirportEngine | None = None


def get_engine() -> AirportEngine:
    """Return the process-wide engine over the configured dataset.

    The engine is created once, from config/settings.yaml when present;
    concurrent first calls all receive the same instance.
    """
    global _engine
    if _engine is not None:
        return _engine

    with _engine_lock:
        if _engine is None:
            _engine = AirportEngine.from_settings(EngineSettings.load())
        return _engine
