"""Lazily materialized airport dataset.

The dataset ships as a compressed JSON array of airport items. DatasetStore
decodes it on first access, keeps the resulting snapshot for the lifetime of
the store and hands the same tuple to every caller afterwards.

Typical usage:
    store = DatasetStore.from_path("airports.json.gz")
    airports = store.get_data()  # decodes once
    airports = store.get_data()  # cached
"""

import gzip
import json
import logging
import threading
import zlib
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any

from airport_data.airports.errors import DatasetLoadError
from airport_data.airports.record import AirportRecord

logger = logging.getLogger(__name__)

_GZIP_MAGIC = b"\x1f\x8b"
_ZLIB_HEADERS = (b"\x78\x01", b"\x78\x5e", b"\x78\x9c", b"\x78\xda")


def decompress_blob(blob: bytes) -> bytes:
    """Decompress a dataset blob.

    The format is detected from the leading bytes: gzip, zlib, or
    uncompressed JSON.

    Args:
        blob: Raw blob bytes.

    Returns:
        Decompressed JSON bytes.

    Raises:
        DatasetLoadError: If the blob is corrupt.
    """
    try:
        if blob[:2] == _GZIP_MAGIC:
            return gzip.decompress(blob)
        if blob[:2] in _ZLIB_HEADERS:
            return zlib.decompress(blob)
    except (OSError, EOFError, zlib.error) as e:
        raise DatasetLoadError(f"Failed to decompress dataset: {e}") from e
    return blob


def decode_records(blob: bytes) -> tuple[AirportRecord, ...]:
    """Decode a dataset blob into airport records.

    Args:
        blob: Compressed (or plain) JSON array of airport objects.

    Returns:
        Records in dataset order.

    Raises:
        DatasetLoadError: If the blob is not a JSON array of objects.
    """
    raw_json = decompress_blob(blob)
    try:
        items = json.loads(raw_json.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise DatasetLoadError(f"Dataset is not valid JSON: {e}") from e

    if not isinstance(items, list):
        raise DatasetLoadError("Dataset must contain a JSON list")

    records = []
    for position, item in enumerate(items):
        if not isinstance(item, dict):
            raise DatasetLoadError(f"Dataset item {position} is not an object")
        records.append(AirportRecord.from_dict(item))
    return tuple(records)


class DatasetStore:
    """Owner of the airport record snapshot.

    The snapshot moves from uninitialized to loaded on the first call to
    get_data() and then stays resident. Concurrent first calls decode the
    blob exactly once; every caller waits for the single decode pass.

    Examples:
        >>> store = DatasetStore(blob)
        >>> len(store.get_data())
        3
        >>> store.load_count
        1
    """

    def __init__(self, blob: bytes | None = None, *, source: Callable[[], Any] | None = None) -> None:
        """Initialize an unloaded store.

        Args:
            blob: Dataset bytes.
            source: Callable producing the dataset on demand, either as
                bytes or as an iterable of already parsed records. Used
                instead of blob when the data should only be read on first
                access.

        Raises:
            ValueError: If neither or both of blob and source are given.
        """
        if (blob is None) == (source is None):
            raise ValueError("Provide exactly one of blob or source")

        self._source: Callable[[], Any] = source if source is not None else (lambda: blob)
        self._records: tuple[AirportRecord, ...] | None = None
        self._lock = threading.Lock()
        self.load_count = 0

    @classmethod
    def from_path(cls, path: str | Path) -> "DatasetStore":
        """Create a store that reads its blob from a file on first access.

        Args:
            path: Path to the dataset blob.

        Returns:
            Unloaded DatasetStore.
        """
        path = Path(path)

        def read_blob() -> bytes:
            if not path.exists():
                raise DatasetLoadError(f"Dataset file not found: {path}")
            logger.info("Reading airport dataset from %s", path)
            try:
                return path.read_bytes()
            except OSError as e:
                raise DatasetLoadError(f"Failed to read dataset {path}: {e}") from e

        return cls(source=read_blob)

    @classmethod
    def from_records(cls, records: Iterable[AirportRecord]) -> "DatasetStore":
        """Create a store over records that are already parsed."""
        snapshot = tuple(records)
        return cls(source=lambda: snapshot)

    @property
    def is_loaded(self) -> bool:
        """Whether the snapshot has been materialized."""
        return self._records is not None

    def get_data(self) -> tuple[AirportRecord, ...]:
        """Get the record snapshot, loading it on first access.

        Returns:
            All records in dataset order.

        Raises:
            DatasetLoadError: If the dataset cannot be loaded.
        """
        records = self._records
        if records is not None:
            return records

        with self._lock:
            if self._records is None:
                self._records = self._load()
            return self._records

    def _load(self) -> tuple[AirportRecord, ...]:
        """Run the single load pass. Caller holds the lock."""
        self.load_count += 1
        data = self._source()
        if isinstance(data, (bytes, bytearray)):
            records = decode_records(bytes(data))
        else:
            records = tuple(data)
        logger.info("Loaded %d airport records", len(records))
        return records
