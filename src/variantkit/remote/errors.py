"""Error hierarchy for the design-tool variables API."""
from __future__ import annotations

from typing import Any


class RemoteError(Exception):
    """Base error for all remote API failures."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause


class RemoteAPIError(RemoteError):
    """The API answered with a non-success status."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        raw: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.status_code = status_code
        self.raw = raw


# ---------------------------------------------------------------------------
# Status-specific errors
# ---------------------------------------------------------------------------


class AuthenticationError(RemoteAPIError):
    """The access token is missing or invalid."""


class AccessDeniedError(RemoteAPIError):
    """The token lacks the scope needed for this file (e.g. variables write)."""


class NotFoundError(RemoteAPIError):
    """Unknown file key."""


class InvalidRequestError(RemoteAPIError):
    """The payload was rejected."""


class RateLimitError(RemoteAPIError):
    """Too many requests."""


class ServerError(RemoteAPIError):
    """Server-side failure."""


# ---------------------------------------------------------------------------
# Transport errors
# ---------------------------------------------------------------------------


class RequestTimeoutError(RemoteError):
    """A request timed out."""


class NetworkError(RemoteError):
    """A connection-level failure occurred."""


class ResponseFormatError(RemoteError):
    """A success response whose body is not the expected JSON document."""


# ---------------------------------------------------------------------------
# Helper
# ---------------------------------------------------------------------------


def error_from_status_code(
    status_code: int,
    message: str,
    *,
    raw: dict[str, Any] | None = None,
) -> RemoteAPIError:
    """Map HTTP status code to the appropriate error type."""
    if status_code in (400, 422):
        return InvalidRequestError(message, status_code=status_code, raw=raw)
    if status_code == 401:
        return AuthenticationError(message, status_code=status_code, raw=raw)
    if status_code == 403:
        return AccessDeniedError(message, status_code=status_code, raw=raw)
    if status_code == 404:
        return NotFoundError(message, status_code=status_code, raw=raw)
    if status_code == 429:
        return RateLimitError(message, status_code=status_code, raw=raw)
    if 500 <= status_code <= 599:
        return ServerError(message, status_code=status_code, raw=raw)
    return RemoteAPIError(message, status_code=status_code, raw=raw)
