"""
Pydantic schema for Movie Records.
"""

import math

from pydantic import BaseModel, ConfigDict, field_validator

PAYLOAD_FIELDS = ("title", "year", "genre", "director", "description", "rating")
TEXT_FIELDS = ("title", "genre", "director", "description")


class MovieRecord(BaseModel):
    """A movie as returned by GET /api/movies or sent to POST /api/movies.

    Every field is optional here: backend records are displayed with
    fallbacks instead of being rejected. Values of the wrong type are
    coerced (text fields) or dropped (ratings that are not numbers).
    Extra backend fields (ids, timestamps) are kept.
    """

    model_config = ConfigDict(extra="allow")

    title: str | None = None
    year: int | str | None = None
    genre: str | None = None
    director: str | None = None
    description: str | None = None
    rating: int | float | None = None

    @field_validator(*TEXT_FIELDS, mode="before")
    @classmethod
    def _coerce_text(cls, value):
        if value is None or isinstance(value, str):
            return value
        return str(value)

    @field_validator("year", mode="before")
    @classmethod
    def _coerce_year(cls, value):
        if value is None or isinstance(value, str):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        if isinstance(value, float) and value.is_integer():
            return int(value)
        return str(value)

    @field_validator("rating", mode="before")
    @classmethod
    def _coerce_rating(cls, value):
        """Numbers pass through, numeric strings are parsed, anything else is no rating."""
        if isinstance(value, bool):
            return None
        if isinstance(value, str):
            try:
                value = float(value)
            except ValueError:
                return None
        if isinstance(value, float):
            if not math.isfinite(value):
                return None
            return int(value) if value.is_integer() else value
        if isinstance(value, int):
            return value
        return None

    def to_payload(self) -> dict:
        """JSON body for POST /api/movies."""
        return self.model_dump(include=set(PAYLOAD_FIELDS))
