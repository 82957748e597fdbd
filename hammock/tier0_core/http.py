"""
hammock.tier0_core.http
────────────────────────
HTTP primitives: status code helpers and the two-variant result type used
to classify a response in explicit stages. A stage returns ``Ok`` to pass
its value on, or ``Err`` to short-circuit the remaining stages.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


# ── Status codes ───────────────────────────────────────────────────────────

class HTTP:
    """Status codes referenced by hammock."""

    OK = 200
    MULTIPLE_CHOICES = 300


def is_success(status_code: int) -> bool:
    """True for statuses in [200, 300)."""
    return HTTP.OK <= status_code < HTTP.MULTIPLE_CHOICES


# ── Result ────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err(Generic[E]):
    error: E


Result = Union[Ok[Any], Err[Any]]


__all__ = ["HTTP", "is_success", "Ok", "Err", "Result"]
