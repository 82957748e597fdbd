"""
hammock.tier2_derive.action_types
──────────────────────────────────
Event type names. Each fragment is converted to snake_case, fragments are
joined with underscores and the result is upper-cased:

    request_action_type("GET", "fooBar")  → "REQUEST_GET_FOO_BAR"
    success_action_type("fooBar")         → "RECEIVE_FOO_BAR_SUCCESS"
    failure_action_type("fooBar")         → "RECEIVE_FOO_BAR_FAILURE"
    clear_action_type("fooBar")           → "CLEAR_FOO_BAR"
"""
from __future__ import annotations

import re

# Acronym followed by a capitalised word, a (capitalised) lower-case word,
# a run of capitals, or a run of digits.
_WORDS = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+|[A-Z]+|[0-9]+")


def snake_case(text: str) -> str:
    """``"fooBar"``, ``"FooBar"``, ``"foo-bar"`` and ``"foo bar"`` all become ``"foo_bar"``."""
    return "_".join(word.lower() for word in _WORDS.findall(text))


def _actionize(fragments: tuple[str, ...]) -> str:
    return "_".join(snake_case(f) for f in fragments).upper()


def request_action_type(*fragments: str) -> str:
    return f"REQUEST_{_actionize(fragments)}"


def success_action_type(*fragments: str) -> str:
    return f"RECEIVE_{_actionize(fragments)}_SUCCESS"


def failure_action_type(*fragments: str) -> str:
    return f"RECEIVE_{_actionize(fragments)}_FAILURE"


def clear_action_type(*fragments: str) -> str:
    return f"CLEAR_{_actionize(fragments)}"


__all__ = [
    "snake_case",
    "request_action_type",
    "success_action_type",
    "failure_action_type",
    "clear_action_type",
]
