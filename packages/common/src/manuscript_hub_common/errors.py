"""Custom error types for manuscript-hub.

All errors follow the "fail fast" principle with explicit messages.
"""

from typing import Optional


class ManuscriptHubError(Exception):
    """Base exception for all manuscript-hub errors."""

    pass


class APIError(ManuscriptHubError):
    """Request to the manuscript REST API did not succeed.

    Raised for non-2xx responses and for network failures alike. ``message``
    is the server-provided message when the response body carried one,
    otherwise the fallback of the operation that failed.

    Attributes:
        message: Human-readable message suitable for a notification
        status_code: HTTP status, or None when no response was received
        endpoint: Request path relative to the API base URL
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        endpoint: str = "",
    ):
        self.message = message
        self.status_code = status_code
        self.endpoint = endpoint
        super().__init__(self._format())

    def _format(self) -> str:
        parts = []
        if self.status_code is not None:
            parts.append(f"[{self.status_code}]")
        if self.endpoint:
            parts.append(self.endpoint)
        parts.append(self.message)
        return " ".join(parts)
