"""
In-memory movie list for one page view.
"""

from typing import Callable

from movie_catalog.core.errors import ConnectivityError
from movie_catalog.core.formatting import count_label
from movie_catalog.models.movie import MovieRecord
from movie_catalog.utils.logging_config import get_logger

logger = get_logger(__name__)


class MovieCatalog:
    """
    The current list of movies, replaced wholesale on every load.

    Each load takes a ticket from an increasing counter. A result (list or
    error) is only applied while its ticket is the latest one dispatched, so
    a slow response can never overwrite a newer one.
    """

    def __init__(self):
        self.movies: list[MovieRecord] = []
        self.error: ConnectivityError | None = None
        self.loaded = False
        self._last_dispatched = 0

    @property
    def count_label(self) -> str:
        return count_label(len(self.movies))

    @property
    def is_empty(self) -> bool:
        return not self.movies

    def begin_load(self) -> int:
        """Dispatch a new load and return its ticket."""
        self._last_dispatched += 1
        return self._last_dispatched

    def is_current(self, ticket: int) -> bool:
        return ticket == self._last_dispatched

    def complete(self, ticket: int, movies: list[MovieRecord]) -> bool:
        """Apply a successful load. Returns False if the result was stale."""
        if not self.is_current(ticket):
            logger.debug(f"Discarding stale movie list (ticket {ticket} < {self._last_dispatched})")
            return False
        self.movies = list(movies)
        self.error = None
        self.loaded = True
        return True

    def fail(self, ticket: int, error: ConnectivityError) -> bool:
        """Apply a failed load. Returns False if the failure was stale."""
        if not self.is_current(ticket):
            logger.debug(f"Discarding stale load error (ticket {ticket} < {self._last_dispatched})")
            return False
        self.error = error
        self.loaded = True
        return True

    def load(self, fetch: Callable[[], list[MovieRecord]]) -> bool:
        """
        Fetch and apply a movie list.

        Returns:
            True if the fetch succeeded and was applied. On failure the error
            is stored in self.error.
        """
        ticket = self.begin_load()
        try:
            movies = fetch()
        except ConnectivityError as e:
            logger.error(f"Error loading movies: {e}")
            self.fail(ticket, e)
            return False
        applied = self.complete(ticket, movies)
        if applied:
            logger.info(f"Loaded {self.count_label}")
        return applied
