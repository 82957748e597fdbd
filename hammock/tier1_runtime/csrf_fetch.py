"""
hammock.tier1_runtime.csrf_fetch
─────────────────────────────────
CSRF-aware fetch for Django-style backends. Requests are built by an
ordered list of steps (headers, method, credentials, CSRF token), each
taking and returning an options dict, then handed to a network primitive
``async (url, options) -> response``.

Two resolutions of the response:
- text:  non-2xx raises HTTPStatusError, payload ``(text, status)``
- json:  parse first, then status; JSONDecodeFailure and JSONStatusError
         stay distinct

Backed by: httpx (default network primitive and cookie jar).
Configure via: HAMMOCK_BASE_URL, HAMMOCK_TIMEOUT, HAMMOCK_CSRF_COOKIE_NAME,
               HAMMOCK_CSRF_HEADER_NAME
"""
from __future__ import annotations

import json
from collections.abc import Awaitable, Callable, Mapping
from typing import Any

import httpx

from hammock.tier0_core.config import HammockConfig, get_config
from hammock.tier0_core.constants import CSRF_SAFE_METHODS
from hammock.tier0_core.errors import (
    HTTPStatusError,
    JSONDecodeFailure,
    JSONStatusError,
)
from hammock.tier0_core.http import Err, Ok, Result, is_success
from hammock.tier0_core.logging import get_logger
from hammock.tier0_core.redact import redact_headers
from hammock.tier1_runtime.cookies import CookieSource, client_cookies, read_cookie

logger = get_logger(__name__)

NetworkFetch = Callable[[str, Mapping[str, Any]], Awaitable[Any]]

JSON_HEADERS: dict[str, str] = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


def csrf_safe_method(method: str) -> bool:
    """True for HTTP methods that do not require CSRF protection."""
    return method in CSRF_SAFE_METHODS


# ── Request steps ─────────────────────────────────────────────────────────────

def ensure_headers(options: dict[str, Any]) -> dict[str, Any]:
    return {**options, "headers": dict(options.get("headers") or {})}


def ensure_method(options: dict[str, Any]) -> dict[str, Any]:
    return {"method": "GET", **options}


def set_credentials(options: dict[str, Any]) -> dict[str, Any]:
    return {**options, "credentials": "same-origin"}


def add_json_headers(options: dict[str, Any]) -> dict[str, Any]:
    return {**options, "headers": {**JSON_HEADERS, **(options.get("headers") or {})}}


# ── Network primitive ─────────────────────────────────────────────────────────

def httpx_fetch(client: httpx.AsyncClient) -> NetworkFetch:
    """
    Adapt an httpx client to the ``(url, options)`` primitive.

    Recognised options: method, headers, body, json, params. Headers whose
    value is None are not sent. ``credentials`` is informational: the
    client's cookie jar is already scoped per domain.
    """
    async def fetch(url: str, options: Mapping[str, Any]) -> httpx.Response:
        headers = {
            k: v for k, v in (options.get("headers") or {}).items() if v is not None
        }
        kwargs: dict[str, Any] = {}
        if "body" in options:
            kwargs["content"] = options["body"]
        if "json" in options:
            kwargs["json"] = options["json"]
        if "params" in options:
            kwargs["params"] = options["params"]
        return await client.request(
            options.get("method", "GET"), url, headers=headers, **kwargs
        )

    return fetch


async def read_text(response: Any) -> str:
    """Read the body of *response* as text, awaiting ``aread()`` when it exists."""
    aread = getattr(response, "aread", None)
    if aread is not None:
        await aread()
    return response.text


# ── Response stages ───────────────────────────────────────────────────────────

def parse_json(text: str, status_code: int) -> Result:
    """First stage: the body must be JSON. An empty body reads as ``{}``."""
    try:
        return Ok(json.loads(text or "{}"))
    except ValueError as exc:
        return Err(JSONDecodeFailure(str(exc), status_code))


def check_status(value: Any, status_code: int) -> Result:
    """Second stage: the status must be 2xx."""
    if is_success(status_code):
        return Ok(value)
    return Err(JSONStatusError(value, status_code))


# ── Fetcher ───────────────────────────────────────────────────────────────────

class CSRFFetcher:
    """
    Perform single HTTP exchanges with same-origin credentials and a CSRF
    header on unsafe methods.

    Usage::

        async with CSRFFetcher(client=httpx.AsyncClient(base_url=...)) as f:
            data = await f.fetch_json("/api/items/", {"method": "POST", "body": "{}"})

    *fetch* replaces the network primitive; *cookie_source* replaces where
    the CSRF cookie is read from (default: the httpx client's cookie jar).
    """

    def __init__(
        self,
        fetch: NetworkFetch | None = None,
        cookie_source: CookieSource | None = None,
        *,
        client: httpx.AsyncClient | None = None,
        config: HammockConfig | None = None,
    ) -> None:
        self._config = config or get_config()
        self._owns_client = False
        if fetch is None and client is None:
            client = httpx.AsyncClient(
                base_url=self._config.base_url,
                timeout=self._config.timeout,
            )
            self._owns_client = True
        self._client = client
        self._fetch = fetch or httpx_fetch(client)
        if cookie_source is None and client is not None:
            cookie_source = client_cookies(client)
        self._cookie_source = cookie_source

    async def __aenter__(self) -> "CSRFFetcher":
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the httpx client if this fetcher created it."""
        if self._owns_client and self._client is not None:
            await self._client.aclose()

    # ── request building ──────────────────────────────────────────────────────

    def csrf_token(self) -> str | None:
        return read_cookie(self._config.csrf_cookie_name, self._cookie_source)

    def inject_csrf_token(self, options: dict[str, Any]) -> dict[str, Any]:
        if csrf_safe_method(options["method"]):
            return options
        headers = {**options["headers"], self._config.csrf_header_name: self.csrf_token()}
        return {**options, "headers": headers}

    def format_request(self, init: Mapping[str, Any] | None = None) -> dict[str, Any]:
        options = dict(init or {})
        for step in (ensure_headers, ensure_method, set_credentials, self.inject_csrf_token):
            options = step(options)
        return options

    def format_json_request(self, init: Mapping[str, Any] | None = None) -> dict[str, Any]:
        return self.format_request(add_json_headers(dict(init or {})))

    # ── exchanges ─────────────────────────────────────────────────────────────

    async def _exchange(self, url: str, options: dict[str, Any]) -> tuple[str, int]:
        logger.debug(
            "csrf_fetch.request",
            url=url,
            method=options["method"],
            headers=redact_headers(
                options["headers"], frozenset({self._config.csrf_header_name})
            ),
        )
        response = await self._fetch(url, options)
        text = await read_text(response)
        logger.debug("csrf_fetch.response", url=url, status_code=response.status_code)
        return text, response.status_code

    async def fetch_text(self, url: str, init: Mapping[str, Any] | None = None) -> str:
        """Return the body text; non-2xx raises HTTPStatusError."""
        text, status_code = await self._exchange(url, self.format_request(init))
        if not is_success(status_code):
            raise HTTPStatusError(text, status_code)
        return text

    async def fetch_json(self, url: str, init: Mapping[str, Any] | None = None) -> Any:
        """
        Return the parsed JSON body.

        Raises JSONDecodeFailure for a malformed body (any status), then
        JSONStatusError for a well-formed body with a non-2xx status.
        """
        text, status_code = await self._exchange(url, self.format_json_request(init))
        result = parse_json(text, status_code)
        if isinstance(result, Ok):
            result = check_status(result.value, status_code)
        if isinstance(result, Err):
            raise result.error
        return result.value


# ── Module-level helpers ──────────────────────────────────────────────────────

_default_fetcher: CSRFFetcher | None = None


def get_default_fetcher() -> CSRFFetcher:
    """Return the shared fetcher, creating it from config on first use."""
    global _default_fetcher
    if _default_fetcher is None:
        _default_fetcher = CSRFFetcher()
    return _default_fetcher


def set_default_fetcher(fetcher: CSRFFetcher | None) -> None:
    """Replace the shared fetcher used by fetch_with_csrf / fetch_json_with_csrf."""
    global _default_fetcher
    _default_fetcher = fetcher


async def aclose_default_fetcher() -> None:
    """Close the shared fetcher, if any, and forget it."""
    global _default_fetcher
    fetcher, _default_fetcher = _default_fetcher, None
    if fetcher is not None:
        await fetcher.aclose()


async def fetch_with_csrf(url: str, init: Mapping[str, Any] | None = None) -> str:
    return await get_default_fetcher().fetch_text(url, init)


async def fetch_json_with_csrf(url: str, init: Mapping[str, Any] | None = None) -> Any:
    return await get_default_fetcher().fetch_json(url, init)


__all__ = [
    "NetworkFetch",
    "CSRFFetcher",
    "csrf_safe_method",
    "httpx_fetch",
    "read_text",
    "parse_json",
    "check_status",
    "get_default_fetcher",
    "set_default_fetcher",
    "aclose_default_fetcher",
    "fetch_with_csrf",
    "fetch_json_with_csrf",
]
