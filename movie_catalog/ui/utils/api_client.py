"""
Movie catalog backend client for the Streamlit UI.
"""

import requests

from movie_catalog.config import get_api_base_url, get_api_timeout
from movie_catalog.core.errors import ConnectivityError
from movie_catalog.models.movie import MovieRecord
from movie_catalog.utils.logging_config import get_logger

logger = get_logger(__name__)

MOVIES_ENDPOINT = "/api/movies"


def _error_message(response: requests.Response) -> str:
    """Backend-supplied `message` if the error body has one."""
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return f"HTTP error! status: {response.status_code}"


def _request(method: str, path: str, **kwargs) -> requests.Response:
    """Send a request, raising ConnectivityError on transport errors and non-2xx."""
    url = f"{get_api_base_url()}{path}"
    try:
        r = requests.request(method, url, timeout=get_api_timeout(), **kwargs)
    except requests.RequestException as e:
        logger.warning(f"{method} {url} failed: {e}")
        raise ConnectivityError(str(e)) from e
    if not r.ok:
        logger.warning(f"{method} {url} returned {r.status_code}")
        raise ConnectivityError(_error_message(r), status_code=r.status_code)
    return r


def list_movies() -> list[MovieRecord]:
    """Get all movies."""
    r = _request("GET", MOVIES_ENDPOINT)
    try:
        data = r.json()
    except ValueError as e:
        raise ConnectivityError(f"Invalid response from {MOVIES_ENDPOINT}: {e}", r.status_code) from e
    if not isinstance(data, list):
        raise ConnectivityError(
            f"Invalid response from {MOVIES_ENDPOINT}: expected a JSON array", r.status_code
        )

    movies = []
    for index, item in enumerate(data):
        try:
            movies.append(MovieRecord.model_validate(item))
        except ValueError as e:
            # Bad entries are dropped; the rest of the list is still shown
            logger.warning(f"Skipping movie #{index} from {MOVIES_ENDPOINT}: {e}")
    return movies


def create_movie(movie: MovieRecord) -> MovieRecord:
    """Add a movie. Returns the record as stored by the backend."""
    r = _request(
        "POST",
        MOVIES_ENDPOINT,
        json=movie.to_payload(),
    )
    try:
        return MovieRecord.model_validate(r.json())
    except ValueError:
        # Created, but the body is not a record; echo what was sent.
        return movie


def check_api_connection() -> None:
    """Reachability probe. Raises ConnectivityError when the backend is not usable."""
    _request("GET", MOVIES_ENDPOINT)
