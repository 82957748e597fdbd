"""
hammock.tier2_derive.endpoint
──────────────────────────────
Declarative description of one REST resource. Per-verb settings live in an
explicit ``VerbConfig`` record keyed by verb, looked up case-insensitively.
"""
from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Union

from hammock.tier0_core.errors import ConfigurationError
from hammock.tier1_runtime.csrf_fetch import NetworkFetch

UrlSource = Union[str, Callable[..., str]]
OptionsSource = Union[Mapping[str, Any], Callable[..., Mapping[str, Any]]]
CustomFetch = Callable[..., Awaitable[Any]]
SuccessHandler = Callable[[Any, Any], Any]
Transition = Callable[[Any, Any], Any]


@dataclass(frozen=True)
class VerbConfig:
    """Settings for one verb of an endpoint. Every field is optional."""
    url: UrlSource | None = None
    options: OptionsSource | None = None
    func: CustomFetch | None = None
    success_handler: SuccessHandler | None = None
    prefix: str | None = None


_EMPTY_VERB_CONFIG = VerbConfig()


@dataclass(frozen=True)
class Endpoint:
    """
    A REST resource: its name, the verbs it supports, and how each verb
    talks to the network.

    Usage::

        Endpoint(
            name="courses",
            verbs=[GET, POST],
            verb_configs={
                "get": VerbConfig(url="/api/v0/courses/"),
                "post": VerbConfig(
                    url="/api/v0/courses/",
                    options=lambda course: {"method": "POST", "body": json.dumps(course)},
                ),
            },
        )
    """
    name: str
    verbs: tuple[str, ...]
    verb_configs: Mapping[str, VerbConfig] = field(default_factory=dict)
    fetch_func: NetworkFetch | None = None
    namespace_on_username: bool = False
    username_initial_state: Mapping[str, Any] = field(default_factory=dict)
    initial_state: Mapping[str, Any] | None = None
    extra_actions: Mapping[str, Transition] = field(default_factory=dict)
    check_no_spinner: bool = False

    def __post_init__(self) -> None:
        if not self.name:
            raise ConfigurationError(user_message="Endpoint name must not be empty.")
        if isinstance(self.verbs, str) or not self.verbs:
            raise ConfigurationError(
                user_message=f"Endpoint {self.name!r} must declare a sequence of verbs."
            )
        object.__setattr__(self, "verbs", tuple(self.verbs))
        object.__setattr__(
            self,
            "verb_configs",
            MappingProxyType({k.lower(): v for k, v in self.verb_configs.items()}),
        )

    def config_for(self, verb: str) -> VerbConfig:
        return self.verb_configs.get(verb.lower(), _EMPTY_VERB_CONFIG)


__all__ = [
    "Endpoint",
    "VerbConfig",
    "UrlSource",
    "OptionsSource",
    "CustomFetch",
    "SuccessHandler",
    "Transition",
]
