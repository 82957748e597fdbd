"""
hammock.tier0_core.constants
─────────────────────────────
Shared tokens: HTTP verbs, fetch status values written into state slices,
and the default initial state for a derived reducer.
"""
from __future__ import annotations

from typing import Any

# ── Verbs ─────────────────────────────────────────────────────────────────

GET = "GET"
POST = "POST"
PATCH = "PATCH"
PUT = "PUT"
DELETE = "DELETE"

# Methods that never carry a CSRF token. Matched exactly, upper case only.
CSRF_SAFE_METHODS: frozenset[str] = frozenset({"GET", "HEAD", "OPTIONS", "TRACE"})

# ── Fetch status ──────────────────────────────────────────────────────────

FETCH_PROCESSING = "FETCH_PROCESSING"
FETCH_SUCCESS = "FETCH_SUCCESS"
FETCH_FAILURE = "FETCH_FAILURE"

# ── State ─────────────────────────────────────────────────────────────────

INITIAL_STATE: dict[str, Any] = {
    "loaded": False,
    "processing": False,
}


__all__ = [
    "GET", "POST", "PATCH", "PUT", "DELETE",
    "CSRF_SAFE_METHODS",
    "FETCH_PROCESSING", "FETCH_SUCCESS", "FETCH_FAILURE",
    "INITIAL_STATE",
]
