"""
Movie display card component.
"""

import streamlit as st

from movie_catalog.core.formatting import build_card_view, escape_markdown
from movie_catalog.models.movie import MovieRecord


def render_movie_card(movie: MovieRecord) -> None:
    """
    Render one movie as a bordered card.

    Args:
        movie: Movie record from the backend
    """
    view = build_card_view(movie)

    with st.container(border=True):
        # Cards already sit in grid columns; no further column nesting here.
        st.markdown(f"**{escape_markdown(view.title)}** · {escape_markdown(view.year)}")
        st.caption(f"🎬 {escape_markdown(view.director)}")
        st.caption(f"🏷️ {escape_markdown(view.genre)}")
        if view.rating:
            st.caption(f"⭐ {view.rating}")
            st.markdown(view.stars)
        if view.description:
            st.write(escape_markdown(view.description))


def render_movie_grid(movies: list[MovieRecord], columns: int = 3) -> None:
    """Lay cards out left to right, `columns` per row."""
    for start in range(0, len(movies), columns):
        cols = st.columns(columns)
        for col, movie in zip(cols, movies[start:start + columns]):
            with col:
                render_movie_card(movie)
