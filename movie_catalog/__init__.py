"""
Movie Catalog UI Application Package.

This package contains the Streamlit client for the movie catalog backend,
including display formatting, form validation, status tracking and the
HTTP client wrapper.
"""

__version__ = "1.0.0"
