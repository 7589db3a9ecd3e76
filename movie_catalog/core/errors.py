"""
Error types surfaced to the user as notifications.
"""


class ConnectivityError(Exception):
    """Backend could not be reached or answered with a non-success status.

    status_code is None when the request never got a response (refused
    connection, DNS failure, timeout).
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    @property
    def unreachable(self) -> bool:
        return self.status_code is None


class SubmissionRejected(ValueError):
    """Form fields failed client-side validation."""

    def __init__(self, reason: str, message: str):
        super().__init__(reason)
        self.reason = reason
        self.message = message
