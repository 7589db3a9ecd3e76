"""
Session state helpers for Streamlit.

Everything the page remembers between reruns lives here: the movie list,
the status tracker, the current notification and the form version used to
reset form widgets.
"""

import streamlit as st

from movie_catalog.config import get_status_check_interval, get_toast_duration
from movie_catalog.core.catalog import MovieCatalog
from movie_catalog.core.notifier import TransientNotifier
from movie_catalog.core.status import StatusReflector
from movie_catalog.ui.utils.api_client import check_api_connection


def init_session_state() -> None:
    """Initialize session state keys if not present."""
    if "catalog" not in st.session_state:
        st.session_state["catalog"] = MovieCatalog()
    if "notifier" not in st.session_state:
        st.session_state["notifier"] = TransientNotifier(duration=get_toast_duration())
    if "api_status" not in st.session_state:
        st.session_state["api_status"] = StatusReflector(
            check_api_connection,
            interval=get_status_check_interval(),
        )
    if "form_version" not in st.session_state:
        st.session_state["form_version"] = 0


def get_catalog() -> MovieCatalog:
    return st.session_state["catalog"]


def get_notifier() -> TransientNotifier:
    return st.session_state["notifier"]


def get_status_reflector() -> StatusReflector:
    return st.session_state["api_status"]


def get_form_version() -> int:
    return st.session_state["form_version"]


def reset_form() -> None:
    """Give the form widgets fresh keys so they return to their defaults."""
    st.session_state["form_version"] += 1
