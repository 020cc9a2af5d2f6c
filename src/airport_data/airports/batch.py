"""Multi-airport fetches and distance matrices."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from airport_data.airports.errors import UnresolvedCodesError, ValidationError
from airport_data.airports.geo import Geo
from airport_data.airports.lookup import Lookup
from airport_data.airports.record import AirportRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DistanceMatrix:
    """All-pairs distances between a set of airports.

    Attributes:
        airports: One summary per input code (code, name, iata, icao), in
            input order
        distances: distances[a][b] is the distance from a to b in whole
            kilometers; 0 on the diagonal
    """

    airports: list[dict[str, str | None]]
    distances: dict[str, dict[str, int]]


class Batch:
    """Operations over several airport codes at once."""

    def __init__(self, lookup: Lookup, geo: Geo) -> None:
        self._lookup = lookup
        self._geo = geo

    def get_many(self, codes: Sequence[str]) -> list[AirportRecord | None]:
        """Resolve several codes at once.

        Args:
            codes: IATA or ICAO codes

        Returns:
            One entry per code in input order; None where the code did not
            resolve.
        """
        return [self._lookup.resolve_single(code) for code in codes]

    def distance_matrix(self, codes: Sequence[str]) -> DistanceMatrix:
        """Build a symmetric distance table between airports.

        Args:
            codes: At least two IATA or ICAO codes

        Returns:
            DistanceMatrix keyed by the input codes

        Raises:
            ValidationError: If fewer than two codes are given, or a
                resolved airport has no coordinates.
            UnresolvedCodesError: Listing every code that did not resolve.

        Examples:
            >>> matrix = batch.distance_matrix(["SIN", "LHR", "JFK"])
            >>> matrix.distances["SIN"]["SIN"]
            0
        """
        if isinstance(codes, str) or len(codes) < 2:
            raise ValidationError("A distance matrix needs at least two airport codes")

        resolved = self.get_many(codes)
        missing = [code for code, airport in zip(codes, resolved) if airport is None]
        if missing:
            raise UnresolvedCodesError(missing)

        distances: dict[str, dict[str, int]] = {code: {} for code in codes}
        for i, (code_a, airport_a) in enumerate(zip(codes, resolved)):
            distances[code_a][code_a] = 0
            for code_b, airport_b in zip(codes[i + 1 :], resolved[i + 1 :]):
                if code_a == code_b:
                    continue
                km = round(self._geo.distance(airport_a, airport_b))
                distances[code_a][code_b] = km
                distances[code_b][code_a] = km

        logger.debug("Built %dx%d distance matrix", len(distances), len(distances))
        return DistanceMatrix(
            airports=[
                {"code": code, "name": airport.name, "iata": airport.iata, "icao": airport.icao}
                for code, airport in zip(codes, resolved)
            ],
            distances=distances,
        )
