"""
Tests for page actions: load, submit, reset and status refresh.
"""

from unittest.mock import patch

import pytest

from movie_catalog.core.catalog import MovieCatalog
from movie_catalog.core.errors import ConnectivityError
from movie_catalog.core.notifier import Severity, TransientNotifier
from movie_catalog.core.status import ApiStatus, StatusReflector
from movie_catalog.models.movie import MovieRecord
from movie_catalog.ui import actions

LIST_MOVIES = "movie_catalog.ui.utils.api_client.list_movies"
CREATE_MOVIE = "movie_catalog.ui.utils.api_client.create_movie"

VALID_FIELDS = {
    "title": " Inception ",
    "year": 2010,
    "genre": "Sci-Fi",
    "director": "Christopher Nolan",
    "description": "",
    "rating": 9,
}


@pytest.fixture
def catalog():
    return MovieCatalog()


@pytest.fixture
def notifier():
    return TransientNotifier(duration=3.0)


class TestLoadMovies:
    """Tests for list reloads."""

    def test_success(self, catalog, notifier):
        movies = [MovieRecord(title="Heat", year=1995, genre="Crime")]
        with patch(LIST_MOVIES, return_value=movies):
            assert actions.load_movies(catalog, notifier) is True
        assert catalog.count_label == "1 movie"
        assert notifier.current() is None

    def test_empty_backend(self, catalog, notifier):
        with patch(LIST_MOVIES, return_value=[]):
            actions.load_movies(catalog, notifier)
        assert catalog.is_empty
        assert catalog.count_label == "0 movies"

    def test_failure_notifies(self, catalog, notifier):
        with patch(LIST_MOVIES, side_effect=ConnectivityError("Connection refused")):
            assert actions.load_movies(catalog, notifier) is False
        assert catalog.error.message == "Connection refused"
        current = notifier.current()
        assert current.severity == Severity.ERROR
        assert current.message == actions.LOAD_FAILED_MESSAGE


class TestSubmitMovie:
    """Tests for the add-movie flow."""

    def test_success_posts_notifies_and_reloads(self, catalog, notifier):
        created = MovieRecord(title="Inception", year=2010, genre="Sci-Fi")
        with patch(CREATE_MOVIE, return_value=created) as mock_create, \
                patch(LIST_MOVIES, return_value=[created]) as mock_list:
            assert actions.submit_movie(VALID_FIELDS, catalog, notifier, current_year=2026) is True

        sent = mock_create.call_args.args[0]
        assert sent.title == "Inception"
        assert sent.rating == 9
        mock_list.assert_called_once()
        assert notifier.current().message == '"Inception" added successfully!'
        assert catalog.count_label == "1 movie"

    def test_validation_error_skips_network(self, catalog, notifier):
        fields = {**VALID_FIELDS, "title": ""}
        with patch(CREATE_MOVIE) as mock_create:
            assert actions.submit_movie(fields, catalog, notifier, current_year=2026) is False
        mock_create.assert_not_called()
        current = notifier.current()
        assert current.severity == Severity.ERROR
        assert current.message == "Please fill in all required fields (Title, Year, Genre)"

    def test_invalid_year_message(self, catalog, notifier):
        fields = {**VALID_FIELDS, "year": 1899}
        with patch(CREATE_MOVIE) as mock_create:
            actions.submit_movie(fields, catalog, notifier, current_year=2026)
        mock_create.assert_not_called()
        assert notifier.current().message == "Please enter a valid year (1900-present)"

    def test_backend_error_message(self, catalog, notifier):
        error = ConnectivityError("Movie already exists", status_code=409)
        with patch(CREATE_MOVIE, side_effect=error), patch(LIST_MOVIES) as mock_list:
            assert actions.submit_movie(VALID_FIELDS, catalog, notifier, current_year=2026) is False
        mock_list.assert_not_called()
        assert notifier.current().message == "Failed to add movie: Movie already exists"


class TestFormReset:
    def test_notifies_info(self, notifier):
        actions.reset_form(notifier)
        current = notifier.current()
        assert current.message == "Form reset"
        assert current.severity == Severity.INFO


class TestRefreshStatus:
    """Tests for the periodic status check."""

    def test_online(self, notifier):
        reflector = StatusReflector(lambda: None)
        assert actions.refresh_status(reflector, notifier) is True
        assert reflector.state == ApiStatus.ONLINE
        assert notifier.current() is None

    def test_unreachable_notifies(self, notifier):
        def probe():
            raise ConnectivityError("Connection refused")

        reflector = StatusReflector(probe)
        actions.refresh_status(reflector, notifier)
        assert reflector.state == ApiStatus.OFFLINE
        assert notifier.current().message == actions.CONNECTION_LOST_MESSAGE

    def test_http_error_offline_without_notification(self, notifier):
        def probe():
            raise ConnectivityError("HTTP error! status: 502", status_code=502)

        reflector = StatusReflector(probe)
        actions.refresh_status(reflector, notifier)
        assert reflector.state == ApiStatus.OFFLINE
        assert notifier.current() is None

    def test_not_due_does_nothing(self, notifier):
        reflector = StatusReflector(lambda: None, interval=60.0)
        actions.refresh_status(reflector, notifier)
        assert actions.refresh_status(reflector, notifier) is False
