"""
hammock test configuration.

No test touches the network: HTTP exchanges go through a recording fake
primitive or through respx routes on an httpx client.
"""
from __future__ import annotations

import os
from typing import Any

import pytest

# ── Force quiet, deterministic settings ───────────────────────────────────
# These must be set before any hammock modules are imported.

os.environ.setdefault("HAMMOCK_LOG_LEVEL", "WARNING")
os.environ.setdefault("HAMMOCK_LOG_FORMAT", "console")
os.environ.setdefault("HAMMOCK_BASE_URL", "https://testserver")

CSRF_TOKEN = "asdf"


# ── Fakes ──────────────────────────────────────────────────────────────────

class FakeResponse:
    """Minimal response: a status code and a text body."""

    def __init__(self, status_code: int = 200, text: str = "") -> None:
        self.status_code = status_code
        self.text = text


class RecordingFetch:
    """A network primitive that records every call and returns a fixed response."""

    def __init__(self, response: FakeResponse | None = None) -> None:
        self.response = response or FakeResponse()
        self.calls: list[tuple[str, dict[str, Any]]] = []

    async def __call__(self, url: str, options: dict[str, Any]) -> FakeResponse:
        self.calls.append((url, options))
        return self.response

    @property
    def last_options(self) -> dict[str, Any]:
        return self.calls[-1][1]


class RecordingStore:
    """Collects dispatched events and, given a reducer, folds them into state."""

    def __init__(self, reducer: Any = None, state: Any = None) -> None:
        self.reducer = reducer
        self.state = state
        self.events: list[Any] = []

    def dispatch(self, event: Any) -> Any:
        self.events.append(event)
        if self.reducer is not None:
            self.state = self.reducer(self.state, event)
        return event

    @property
    def types(self) -> list[str]:
        return [event.type for event in self.events]


# ── Fixtures ───────────────────────────────────────────────────────────────

@pytest.fixture(autouse=True)
def reset_module_singletons():
    """
    Reset the cached config and the shared CSRF fetcher between tests so
    each test starts without state bleed.
    """
    from hammock.tier0_core.config import _reset_config
    from hammock.tier1_runtime import csrf_fetch as _csrf_fetch

    orig_fetcher = _csrf_fetch._default_fetcher

    yield

    _csrf_fetch._default_fetcher = orig_fetcher
    _reset_config()


@pytest.fixture
def fake_fetch() -> RecordingFetch:
    return RecordingFetch(FakeResponse(200, "Some text"))


@pytest.fixture
def csrf_fetcher(fake_fetch):
    """A CSRFFetcher over the recording primitive, with a csrftoken cookie set."""
    from hammock.tier1_runtime.cookies import static_cookies
    from hammock.tier1_runtime.csrf_fetch import CSRFFetcher

    return CSRFFetcher(fake_fetch, static_cookies(f"csrftoken={CSRF_TOKEN}"))


@pytest.fixture
def store() -> RecordingStore:
    return RecordingStore()
