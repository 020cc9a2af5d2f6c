"""Case-insensitive name search and autocomplete."""

import logging

from airport_data.airports.dataset import DatasetStore
from airport_data.airports.errors import ValidationError
from airport_data.airports.record import AirportRecord

logger = logging.getLogger(__name__)

MIN_QUERY_LENGTH = 2
AUTOCOMPLETE_LIMIT = 10


class Search:
    """Substring search over airport names.

    Examples:
        >>> search = Search(store)
        >>> [a.iata for a in search.search_by_name("heathrow")]
        ['LHR']
    """

    def __init__(
        self,
        store: DatasetStore,
        min_query_length: int = MIN_QUERY_LENGTH,
        autocomplete_limit: int = AUTOCOMPLETE_LIMIT,
    ) -> None:
        """Initialize search.

        Args:
            store: Dataset store to search.
            min_query_length: Shortest accepted query.
            autocomplete_limit: Maximum number of autocomplete suggestions.
        """
        self._store = store
        self.min_query_length = min_query_length
        self.autocomplete_limit = autocomplete_limit

    def search_by_name(self, query: str) -> list[AirportRecord]:
        """Find airports whose name contains the query (case-insensitive).

        Args:
            query: Substring to look for, at least min_query_length long.

        Returns:
            Matching records in dataset order (may be empty).

        Raises:
            ValidationError: If the query is too short.
        """
        if not self._accepts(query):
            raise ValidationError(f"Search query must be at least {self.min_query_length} characters long")

        needle = query.lower()
        results = [a for a in self._store.get_data() if needle in a.name.lower()]
        logger.debug("Name search %r: %d result(s)", query, len(results))
        return results

    def autocomplete(self, query: str) -> list[AirportRecord]:
        """Suggest airports whose name or IATA code contains the query.

        Short queries return no suggestions instead of raising.
        """
        if not self._accepts(query):
            return []

        needle = query.lower()
        suggestions: list[AirportRecord] = []
        for airport in self._store.get_data():
            if len(suggestions) >= self.autocomplete_limit:
                break
            if needle in airport.name.lower() or (airport.iata and needle in airport.iata.lower()):
                suggestions.append(airport)
        return suggestions

    def _accepts(self, query: str) -> bool:
        return isinstance(query, str) and len(query) >= self.min_query_length
