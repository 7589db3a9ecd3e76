"""
Backend status badge.
"""

import streamlit as st

from movie_catalog.core.status import ApiStatus

_COLORS = {
    ApiStatus.CHECKING: "orange",
    ApiStatus.ONLINE: "green",
    ApiStatus.OFFLINE: "red",
}


def render_status_badge(state: ApiStatus) -> None:
    st.markdown(f"API status: :{_COLORS[state]}[● {state.label}]")
