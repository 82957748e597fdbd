"""
hammock.tier0_core.errors
──────────────────────────
Error taxonomy for hammock. Every error carries a stable machine-readable
code; fetch errors additionally carry the structured failure value that is
written into a state slice's ``error`` field.

Transport failures raised by the network primitive (``httpx.TransportError``
and friends) are not wrapped: they propagate unchanged.
"""
from __future__ import annotations

from typing import Any


# ── Base error ────────────────────────────────────────────────────────────────

class HammockError(Exception):
    """
    Base class for all hammock errors. Every error has:
    - code: stable machine-readable string (snake_case)
    - user_message: safe to surface to end users
    - detail: internal context
    """

    code: str = "hammock_error"

    def __init__(
        self,
        code: str | None = None,
        user_message: str = "An unexpected error occurred.",
        detail: str | None = None,
        **metadata: Any,
    ) -> None:
        self.code = code or self.__class__.code
        self.user_message = user_message
        self.detail = detail or user_message
        self.metadata = metadata
        super().__init__(self.detail)

    def to_dict(self) -> dict:
        return {
            "error": {
                "code": self.code,
                "message": self.user_message,
            }
        }


class ConfigurationError(HammockError):
    """Endpoint description or settings are unusable."""
    code = "configuration_error"


class CookieStoreUnavailable(HammockError):
    """A cookie source could not be read."""
    code = "cookie_store_unavailable"


# ── Fetch errors ──────────────────────────────────────────────────────────────

class FetchError(HammockError):
    """
    A completed HTTP exchange that resolved to a failure.

    ``payload`` is the structured failure value; ``status_code`` is the HTTP
    status of the response.
    """
    code = "fetch_error"

    def __init__(
        self,
        payload: Any,
        status_code: int,
        user_message: str = "The request failed.",
        **metadata: Any,
    ) -> None:
        self.payload = payload
        self.status_code = status_code
        super().__init__(
            None,
            user_message,
            detail=f"{user_message} (status {status_code})",
            **metadata,
        )

    def to_dict(self) -> dict:
        d = super().to_dict()
        d["error"]["status_code"] = self.status_code
        return d


class HTTPStatusError(FetchError):
    """Non-2xx response on the text path. Payload is ``(body_text, status_code)``."""
    code = "http_status_error"

    def __init__(self, text: str, status_code: int) -> None:
        super().__init__((text, status_code), status_code, "Unexpected HTTP status.")

    @property
    def text(self) -> str:
        return self.payload[0]


class JSONDecodeFailure(FetchError):
    """Response body is not valid JSON, whatever the status."""
    code = "invalid_json"

    def __init__(self, reason: str, status_code: int) -> None:
        super().__init__(
            {"error": f"Invalid JSON: {reason}", "error_status_code": status_code},
            status_code,
            "Response body is not valid JSON.",
        )


class JSONStatusError(FetchError):
    """Well-formed JSON body with a non-2xx status."""
    code = "json_status_error"

    def __init__(self, body: Any, status_code: int) -> None:
        if isinstance(body, dict):
            payload = {**body, "error_status_code": status_code}
        else:
            payload = {"body": body, "error_status_code": status_code}
        super().__init__(payload, status_code, "Unexpected HTTP status.")


__all__ = [
    "HammockError",
    "ConfigurationError",
    "CookieStoreUnavailable",
    "FetchError",
    "HTTPStatusError",
    "JSONDecodeFailure",
    "JSONStatusError",
]
