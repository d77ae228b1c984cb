"""HTTP client wrapper around httpx."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx

from variantkit.remote.errors import (
    NetworkError,
    RequestTimeoutError,
    ResponseFormatError,
    error_from_status_code,
)

TOKEN_HEADER = "X-Figma-Token"


@dataclass(frozen=True)
class HttpResponse:
    """Parsed HTTP response."""

    status_code: int
    body: dict[str, Any]
    headers: dict[str, str]
    raw_text: str = ""


def _error_message(body: Any, raw_text: str) -> str:
    # Error bodies look like {"status": 403, "error": true, "message": "..."}.
    if isinstance(body, dict):
        for key in ("message", "error"):
            value = body.get(key)
            if isinstance(value, str) and value:
                return value
    return raw_text


class HttpClient:
    """Thin wrapper around :mod:`httpx` that maps errors into remote exceptions."""

    def __init__(
        self,
        base_url: str,
        token: str,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._client = httpx.Client(
            base_url=base_url,
            headers={TOKEN_HEADER: token},
            timeout=httpx.Timeout(timeout),
            transport=transport,
        )

    def _send(self, method: str, path: str, json: dict[str, Any] | None = None) -> HttpResponse:
        try:
            resp = self._client.request(method, path, json=json)
        except httpx.TimeoutException as exc:
            raise RequestTimeoutError(str(exc), cause=exc) from exc
        except httpx.TransportError as exc:
            raise NetworkError(str(exc), cause=exc) from exc

        raw_text = resp.text
        try:
            body = resp.json()
        except ValueError:
            body = None

        if resp.status_code >= 300:
            raw = body if isinstance(body, dict) else {}
            raise error_from_status_code(resp.status_code, _error_message(body, raw_text), raw=raw)

        if not isinstance(body, dict):
            raise ResponseFormatError(f"Failed to parse response: {raw_text}")

        return HttpResponse(
            status_code=resp.status_code,
            body=body,
            headers=dict(resp.headers),
            raw_text=raw_text,
        )

    def get(self, path: str) -> HttpResponse:
        """Send a GET request and return the parsed response.

        Raises a remote error on non-2xx status or transport failure.
        """
        return self._send("GET", path)

    def post(self, path: str, json: dict[str, Any]) -> HttpResponse:
        """Send a POST request with a JSON body and return the parsed response."""
        return self._send("POST", path, json=json)

    def close(self) -> None:
        """Close the underlying httpx client."""
        self._client.close()
