"""
Client-side validation of the add-movie form.

The backend is the authority on what it stores; these checks only stop
obviously incomplete submissions before a request is sent.
"""

import math
import re
from datetime import date
from typing import Any, Mapping

from movie_catalog.core.errors import SubmissionRejected
from movie_catalog.models.movie import MovieRecord

MIN_YEAR = 1900
FUTURE_YEARS_ALLOWED = 2
DEFAULT_RATING = 5

MISSING_REQUIRED_FIELD = "missing required field"
INVALID_YEAR = "invalid year"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

GENRES = [
    "Action",
    "Adventure",
    "Animation",
    "Comedy",
    "Crime",
    "Documentary",
    "Drama",
    "Fantasy",
    "Horror",
    "Mystery",
    "Romance",
    "Sci-Fi",
    "Thriller",
    "Western",
]


def _text(value: Any) -> str:
    return "" if value is None else str(value).strip()


def _parse_int(value: Any) -> int | None:
    """Parse the leading integer of form input ('1995.7' -> 1995); None when there is none."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    match = _LEADING_INT.match(str(value))
    return int(match.group(1)) if match else None


def max_year(current_year: int | None = None) -> int:
    """Latest accepted release year."""
    if current_year is None:
        current_year = date.today().year
    return current_year + FUTURE_YEARS_ALLOWED


def validate_submission(
    fields: Mapping[str, Any],
    current_year: int | None = None,
) -> MovieRecord:
    """
    Validate and normalize raw form fields.

    Args:
        fields: Raw values keyed by title, year, genre, director,
            description, rating. Missing keys count as empty.
        current_year: Year used for the upper bound (default: today's year)

    Returns:
        MovieRecord with trimmed text and integer year/rating.

    Raises:
        SubmissionRejected: reason is MISSING_REQUIRED_FIELD or INVALID_YEAR
    """
    title = _text(fields.get("title"))
    genre = _text(fields.get("genre"))
    year = _parse_int(fields.get("year"))

    if not title or not genre or year is None:
        raise SubmissionRejected(
            MISSING_REQUIRED_FIELD,
            "Please fill in all required fields (Title, Year, Genre)",
        )

    if year < MIN_YEAR or year > max_year(current_year):
        raise SubmissionRejected(
            INVALID_YEAR,
            f"Please enter a valid year ({MIN_YEAR}-present)",
        )

    rating = _parse_int(fields.get("rating"))
    return MovieRecord(
        title=title,
        year=year,
        genre=genre,
        director=_text(fields.get("director")),
        description=_text(fields.get("description")),
        rating=DEFAULT_RATING if rating is None else rating,
    )
