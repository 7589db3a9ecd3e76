"""
Streamlit main app for the Movie Catalog.

Run: streamlit run movie_catalog/ui/app.py --server.port 8501
"""

import streamlit as st
import sys
from pathlib import Path

# Ensure project root in path
sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from movie_catalog.config import get_api_base_url
from movie_catalog.core.status import ApiStatus
from movie_catalog.ui import actions
from movie_catalog.ui.components.movie_card import render_movie_grid
from movie_catalog.ui.components.movie_form import RESET, SUBMIT, render_movie_form
from movie_catalog.ui.components.status_badge import render_status_badge
from movie_catalog.ui.components.toast import render_notification
from movie_catalog.ui.utils.session_state import (
    get_catalog,
    get_form_version,
    get_notifier,
    get_status_reflector,
    init_session_state,
    reset_form,
)
from movie_catalog.utils.logging_config import configure_ui_logging

# Fragment refresh periods in seconds. The status reflector decides when a
# probe is actually due; these only control how often that is re-evaluated.
NOTIFICATION_TICK = 1
STATUS_TICK = 5

configure_ui_logging()

st.set_page_config(
    page_title="Movie Catalog",
    page_icon="🎬",
    layout="wide",
)

init_session_state()


@st.fragment(run_every=NOTIFICATION_TICK)
def notification_area() -> None:
    render_notification(get_notifier())


@st.fragment(run_every=STATUS_TICK)
def status_area() -> None:
    reflector = get_status_reflector()
    badge = st.empty()
    if reflector.is_due():
        with badge:
            render_status_badge(ApiStatus.CHECKING)
        actions.refresh_status(reflector, get_notifier())
    with badge:
        render_status_badge(reflector.state)


header_col, status_col = st.columns([4, 1])
with header_col:
    st.title("🎬 Movie Catalog")
with status_col:
    status_area()

# Filled at the end of the script, once this run's actions have notified
notification_slot = st.container()

catalog = get_catalog()
notifier = get_notifier()

if not catalog.loaded:
    with st.spinner("Loading movies..."):
        actions.load_movies(catalog, notifier)

form_col, list_col = st.columns([1, 2], gap="large")

with form_col:
    action, fields = render_movie_form(get_form_version())
    if action == SUBMIT:
        with st.spinner("Adding movie..."):
            added = actions.submit_movie(fields, catalog, notifier)
        if added:
            reset_form()
            st.rerun()
    elif action == RESET:
        actions.reset_form(notifier)
        reset_form()
        st.rerun()

with list_col:
    title_col, refresh_col = st.columns([4, 1])
    with refresh_col:
        if st.button("🔄 Refresh", use_container_width=True):
            with st.spinner("Loading movies..."):
                actions.load_movies(catalog, notifier)
    with title_col:
        st.subheader("Movie Collection")
        st.caption(catalog.count_label)

    if catalog.error is not None:
        with st.container(border=True):
            st.error("⚠️ Unable to load movies")
            st.write(catalog.error.message)
            st.caption(f"Make sure the backend server is running on {get_api_base_url()}")
    elif catalog.is_empty:
        st.info("No movies yet. Add your first movie with the form!")
    else:
        render_movie_grid(catalog.movies)

with notification_slot:
    notification_area()
