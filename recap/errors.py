"""
Service error taxonomy.

Every failure a request handler can report maps to one of these classes.
The HTTP layer turns them into JSON error bodies using ``status_code`` and
``error_code``; services never build responses themselves.
"""

from typing import Any, Dict, Optional


class RecapError(Exception):
    """Base class for errors reported to API callers."""

    status_code: int = 500
    error_code: str = "INTERNAL_ERROR"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details


class BadRequest(RecapError):
    """Caller input is missing or malformed."""

    status_code = 400
    error_code = "BAD_REQUEST"


class ConfigError(RecapError):
    """Server configuration is missing or invalid."""

    status_code = 500
    error_code = "CONFIG_ERROR"


class UpstreamEmpty(RecapError):
    """The AI provider answered without any text."""

    status_code = 502
    error_code = "UPSTREAM_EMPTY"


class UpstreamError(RecapError):
    """The AI provider call itself failed (network, auth, quota)."""

    status_code = 500
    error_code = "UPSTREAM_ERROR"


class TransportError(RecapError):
    """The mail transport refused or failed to send a message."""

    status_code = 500
    error_code = "TRANSPORT_ERROR"


class InternalError(RecapError):
    """Unexpected decode or IO failure."""

    status_code = 500
    error_code = "INTERNAL_ERROR"
