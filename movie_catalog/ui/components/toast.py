"""
Notification banner for the current transient message.
"""

import streamlit as st

from movie_catalog.core.notifier import Severity, TransientNotifier

_RENDERERS = {
    Severity.SUCCESS: st.success,
    Severity.ERROR: st.error,
    Severity.WARNING: st.warning,
    Severity.INFO: st.info,
}


def render_notification(notifier: TransientNotifier) -> None:
    """Show the current notification, if it has not expired."""
    notification = notifier.current()
    if notification is None:
        return
    _RENDERERS[notification.severity](notification.message)
