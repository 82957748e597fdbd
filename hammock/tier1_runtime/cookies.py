"""
hammock.tier1_runtime.cookies
──────────────────────────────
Cookie lookup over a ``;``-delimited cookie string. The string comes from a
cookie source: a zero-argument callable handed to the CSRF fetcher, so the
cookie store is an explicit dependency rather than ambient state.
"""
from __future__ import annotations

from collections.abc import Callable
from urllib.parse import unquote

import httpx

from hammock.tier0_core.errors import CookieStoreUnavailable

CookieSource = Callable[[], "str | None"]


def get_cookie(name: str, cookie_string: str | None) -> str | None:
    """
    Return the URL-decoded value of the first cookie called *name*, or None.
    """
    prefix = f"{name}="
    for cookie in (cookie_string or "").split(";"):
        cookie = cookie.strip()
        if cookie.startswith(prefix):
            return unquote(cookie[len(prefix):])
    return None


def read_cookie(name: str, source: CookieSource | None) -> str | None:
    """Look *name* up through *source*; an unavailable store reads as no cookie."""
    if source is None:
        return None
    try:
        cookie_string = source()
    except CookieStoreUnavailable:
        return None
    return get_cookie(name, cookie_string)


# ── Sources ───────────────────────────────────────────────────────────────────

def static_cookies(cookie_string: str | None) -> CookieSource:
    """A source that always returns *cookie_string*."""
    return lambda: cookie_string


def client_cookies(client: httpx.AsyncClient) -> CookieSource:
    """A source reading the cookie jar of an httpx client at call time."""
    def source() -> str:
        if client.is_closed:
            raise CookieStoreUnavailable(user_message="HTTP client is closed.")
        return "; ".join(f"{c.name}={c.value}" for c in client.cookies.jar)

    return source


__all__ = [
    "CookieSource",
    "get_cookie",
    "read_cookie",
    "static_cookies",
    "client_cookies",
]
