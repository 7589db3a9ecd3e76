"""
UI configuration loaded from environment or defaults.
"""

import os


def get_api_base_url() -> str:
    """Get backend API base URL from env or default."""
    return os.getenv("API_BASE_URL", "http://localhost:3000").rstrip("/")


def get_api_timeout() -> float:
    """Get HTTP request timeout in seconds."""
    return float(os.getenv("API_TIMEOUT", "10"))


def get_status_check_interval() -> float:
    """Get seconds between backend reachability checks."""
    return float(os.getenv("STATUS_CHECK_INTERVAL", "60"))


def get_toast_duration() -> float:
    """Get seconds a notification stays visible."""
    return float(os.getenv("TOAST_DURATION", "3"))


def get_log_level() -> str:
    """Get log level from env or default."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_log_file() -> str | None:
    """Get optional log file name (written under logs/)."""
    return os.getenv("LOG_FILE") or None
