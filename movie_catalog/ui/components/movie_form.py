"""
Add-movie form component.
"""

import streamlit as st

from movie_catalog.core.validation import DEFAULT_RATING, GENRES, MIN_YEAR, max_year

SUBMIT = "submit"
RESET = "reset"


def render_movie_form(form_version: int) -> tuple[str | None, dict | None]:
    """
    Render the add-movie form.

    Widgets are keyed by form_version; bumping it clears the form.

    Args:
        form_version: Current form version from session state

    Returns:
        (SUBMIT, raw fields) or (RESET, None) when a button was pressed,
        else (None, None). Fields are returned unvalidated.
    """
    with st.form(f"add_movie_form_{form_version}"):
        st.subheader("Add a movie")
        title = st.text_input("Title *", placeholder="e.g. Inception", max_chars=200)
        col1, col2 = st.columns(2)
        with col1:
            year = st.number_input(
                "Year *",
                min_value=MIN_YEAR,
                max_value=max_year(),
                value=None,
                step=1,
                placeholder="e.g. 2010",
            )
        with col2:
            genre = st.selectbox("Genre *", options=GENRES, index=None, placeholder="Select a genre")
        director = st.text_input("Director", placeholder="e.g. Christopher Nolan", max_chars=200)
        description = st.text_area("Description", placeholder="Short plot summary")
        rating = st.slider("Rating", min_value=0, max_value=10, value=DEFAULT_RATING)

        col1, col2 = st.columns(2)
        with col1:
            submitted = st.form_submit_button("Add Movie", type="primary", use_container_width=True)
        with col2:
            reset = st.form_submit_button("Reset", use_container_width=True)

    if reset:
        return RESET, None
    if submitted:
        return SUBMIT, {
            "title": title,
            "year": year,
            "genre": genre,
            "director": director,
            "description": description,
            "rating": rating,
        }
    return None, None
