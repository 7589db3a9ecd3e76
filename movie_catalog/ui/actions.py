"""
User actions: load, submit, reset and status checks.

These run the API calls and turn their outcomes into notifications. They
take their state objects as arguments and do not touch Streamlit, so the
page script stays a thin layout layer.
"""

from typing import Any, Mapping

from movie_catalog.core.catalog import MovieCatalog
from movie_catalog.core.errors import ConnectivityError, SubmissionRejected
from movie_catalog.core.notifier import Severity, TransientNotifier
from movie_catalog.core.status import StatusReflector
from movie_catalog.core.validation import validate_submission
from movie_catalog.ui.utils import api_client
from movie_catalog.utils.logging_config import get_logger

logger = get_logger(__name__)

CONNECTION_LOST_MESSAGE = "Cannot connect to server. Make sure backend is running."
LOAD_FAILED_MESSAGE = "Failed to load movies. Check console for details."


def load_movies(catalog: MovieCatalog, notifier: TransientNotifier) -> bool:
    """Reload the movie list. Notifies on failure."""
    ok = catalog.load(api_client.list_movies)
    if not ok and catalog.error is not None:
        notifier.notify(LOAD_FAILED_MESSAGE, Severity.ERROR)
    return ok


def submit_movie(
    fields: Mapping[str, Any],
    catalog: MovieCatalog,
    notifier: TransientNotifier,
    current_year: int | None = None,
) -> bool:
    """
    Validate the form and post the movie.

    Returns:
        True when the backend accepted the movie (the form should be reset).
    """
    try:
        movie = validate_submission(fields, current_year=current_year)
    except SubmissionRejected as e:
        logger.info(f"Submission rejected: {e.reason}")
        notifier.notify(e.message, Severity.ERROR)
        return False

    try:
        created = api_client.create_movie(movie)
    except ConnectivityError as e:
        logger.error(f"Error adding movie: {e}")
        notifier.notify(f"Failed to add movie: {e.message}", Severity.ERROR)
        return False

    logger.info(f"Added movie {created.title!r}")
    notifier.notify(f'"{created.title}" added successfully!', Severity.SUCCESS)
    load_movies(catalog, notifier)
    return True


def reset_form(notifier: TransientNotifier) -> None:
    notifier.notify("Form reset", Severity.INFO)


def refresh_status(reflector: StatusReflector, notifier: TransientNotifier) -> bool:
    """Probe the backend if due. Returns True when a probe ran."""
    if not reflector.check_if_due():
        return False
    if reflector.connection_failed:
        notifier.notify(CONNECTION_LOST_MESSAGE, Severity.ERROR)
    return True
