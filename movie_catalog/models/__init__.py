"""
Pydantic schemas exchanged with the catalog backend.
"""

from movie_catalog.models.movie import MovieRecord

__all__ = ["MovieRecord"]
