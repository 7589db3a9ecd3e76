"""
Core presentation logic: formatting, validation, status and notifications.

Nothing in this package imports Streamlit; the UI layer renders what these
modules compute.
"""
