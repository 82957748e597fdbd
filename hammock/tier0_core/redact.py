"""
hammock.tier0_core.redact
──────────────────────────
Secret redaction for log output. CSRF tokens and cookies travel in request
headers, so request options are passed through here before they are logged.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

# ── Default redacted key names (case-insensitive) ─────────────────────────

_SENSITIVE_KEYS: frozenset[str] = frozenset({
    "password", "secret", "token", "authorization", "cookie", "set-cookie",
    "csrftoken", "x-csrftoken", "csrf_token", "sessionid",
})

REDACTED = "[REDACTED]"


# ── Public API ─────────────────────────────────────────────────────────────

def redact_dict(
    data: Mapping[str, Any],
    sensitive_keys: frozenset[str] | None = None,
    *,
    deep: bool = True,
) -> dict[str, Any]:
    """
    Return a copy of *data* with sensitive key values replaced by REDACTED.
    If *deep* is True, recurse into nested mappings and lists.
    """
    keys = sensitive_keys if sensitive_keys is not None else _SENSITIVE_KEYS
    result: dict[str, Any] = {}
    for k, v in data.items():
        if isinstance(k, str) and k.lower() in keys:
            result[k] = REDACTED
        elif deep and isinstance(v, Mapping):
            result[k] = redact_dict(v, keys, deep=True)
        elif deep and isinstance(v, list):
            result[k] = [
                redact_dict(item, keys, deep=True) if isinstance(item, Mapping) else item
                for item in v
            ]
        else:
            result[k] = v
    return result


def redact_headers(
    headers: Mapping[str, Any],
    extra: frozenset[str] = frozenset(),
) -> dict[str, Any]:
    """Redact a header mapping; *extra* adds configured header names."""
    keys = _SENSITIVE_KEYS | {h.lower() for h in extra}
    return redact_dict(headers, keys, deep=False)


def structlog_redact_processor(
    logger: Any,
    method: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """
    structlog processor that redacts sensitive keys from the event dict.
    Add to the structlog processor chain before any serialisation step.
    """
    return redact_dict(event_dict)


__all__ = [
    "REDACTED",
    "redact_dict",
    "redact_headers",
    "structlog_redact_processor",
]
