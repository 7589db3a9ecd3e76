"""
Display formatting for movie cards.

Turns MovieRecords into plain strings for the card component: star
ratings, fallback labels for missing fields and the list count label.
"""

import math
from dataclasses import dataclass

from movie_catalog.models.movie import MovieRecord

FULL_STAR = "★"
HALF_STAR = "⯪"
EMPTY_STAR = "☆"
STAR_SLOTS = 5

UNKNOWN_DIRECTOR = "Unknown Director"
UNKNOWN_GENRE = "Uncategorized"
UNKNOWN_YEAR = "N/A"

# Characters with meaning in Streamlit markdown
_MARKDOWN_SPECIAL = set("\\`*_{}[]()<>#+-.!|~$:")


@dataclass(frozen=True)
class StarCounts:
    full: int
    half: int
    empty: int


@dataclass(frozen=True)
class MovieCardView:
    """Display strings for one movie card. Optional parts are None when hidden."""

    title: str
    year: str
    director: str
    genre: str
    rating: str | None = None
    stars: str | None = None
    description: str | None = None


def star_counts(rating: float) -> StarCounts:
    """
    Split a 0-10 rating into five star slots.

    Two rating points make a full star, an odd remainder makes a half star.
    The rating is not clamped: values outside 0-10 give counts that do not
    fit in five slots.

    Args:
        rating: Rating on the 0-10 scale

    Returns:
        StarCounts with full + half + empty == 5 for ratings in [0, 10]
    """
    full = math.floor(rating / 2)
    half = 1 if rating % 2 >= 1 else 0
    return StarCounts(full=full, half=half, empty=STAR_SLOTS - full - half)


def render_stars(rating: float) -> str:
    """Render a rating as a five-symbol star string, e.g. 7 -> '★★★⯪☆'."""
    counts = star_counts(rating)
    return (
        FULL_STAR * max(counts.full, 0)
        + HALF_STAR * counts.half
        + EMPTY_STAR * max(counts.empty, 0)
    )


def count_label(count: int) -> str:
    """'1 movie', otherwise '<n> movies'."""
    return f"{count} movie{'' if count == 1 else 's'}"


def escape_markdown(text: str) -> str:
    """Backslash-escape markdown syntax so user text renders literally."""
    return "".join(f"\\{c}" if c in _MARKDOWN_SPECIAL else c for c in text)


def _present(value) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return value.strip() != ""
    return True


def build_card_view(movie: MovieRecord) -> MovieCardView:
    """Apply display fallbacks to a movie record."""
    rating = stars = None
    if movie.rating is not None:
        rating = f"Rating: {movie.rating:g}/10"
        stars = render_stars(movie.rating)

    return MovieCardView(
        title=movie.title or "",
        year=str(movie.year) if _present(movie.year) else UNKNOWN_YEAR,
        director=movie.director if _present(movie.director) else UNKNOWN_DIRECTOR,
        genre=movie.genre if _present(movie.genre) else UNKNOWN_GENRE,
        rating=rating,
        stars=stars,
        description=movie.description if _present(movie.description) else None,
    )
