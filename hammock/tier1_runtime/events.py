"""
hammock.tier1_runtime.events
─────────────────────────────
Events are the values handed to a state container's dispatch function and
folded into state by a derived reducer. An event factory builds events of
one type from call arguments; the username-aware factory stores the first
argument under ``meta`` so reducers can keep one state fragment per user.
"""
from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

Dispatch = Callable[["Event"], Any]
EventFactory = Callable[..., "Event"]


@dataclass(frozen=True)
class Event:
    """A dispatched lifecycle event. ``error`` is True when the payload is an exception."""
    type: str
    payload: Any = None
    meta: Any = None
    error: bool = False


def first_arg(*args: Any) -> Any:
    return args[0] if args else None


def second_arg(*args: Any) -> Any:
    return args[1] if len(args) > 1 else None


def create_event_factory(
    type: str,
    payload_creator: Callable[..., Any] = first_arg,
    meta_creator: Callable[..., Any] | None = None,
) -> EventFactory:
    """
    Return a function that builds ``Event(type, ...)`` from its arguments.

    The payload defaults to the first argument. ``meta`` is only set when a
    meta creator is given.
    """
    def factory(*args: Any) -> Event:
        payload = payload_creator(*args)
        meta = meta_creator(*args) if meta_creator is not None else None
        return Event(
            type=type,
            payload=payload,
            meta=meta,
            error=isinstance(payload, BaseException),
        )

    return factory


def with_username(
    type: str,
    payload_creator: Callable[..., Any] = second_arg,
) -> EventFactory:
    """
    Event factory taking ``(username, payload)``; the username lands in ``meta``.
    """
    return create_event_factory(type, payload_creator, first_arg)


# ── State helpers ─────────────────────────────────────────────────────────────

def deep_merge(*mappings: Mapping[str, Any]) -> dict[str, Any]:
    """
    Merge mappings left to right into a fresh dict.

    Nested mappings are merged recursively; any other value from a later
    mapping replaces the earlier one. Inputs are never mutated.
    """
    result: dict[str, Any] = {}
    for mapping in mappings:
        for key, value in mapping.items():
            existing = result.get(key)
            if isinstance(value, Mapping):
                base = existing if isinstance(existing, Mapping) else {}
                result[key] = deep_merge(base, value)
            else:
                result[key] = value
    return result


def update_state_by_username(
    state: Mapping[str, Any],
    username: str,
    update: Mapping[str, Any],
) -> dict[str, Any]:
    """Deep-merge *update* into the fragment held for *username*."""
    return deep_merge({}, state, {username: update})


__all__ = [
    "Dispatch",
    "Event",
    "EventFactory",
    "create_event_factory",
    "with_username",
    "deep_merge",
    "update_state_by_username",
]
