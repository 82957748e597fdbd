"""
hammock.tier2_derive.fetch
───────────────────────────
Resolve the network call behind one verb of an endpoint.

A verb's custom ``func`` wins outright. Otherwise the URL and options are
resolved from the call arguments (either may be a literal or a callable)
and passed to the network primitive: the endpoint's ``fetch_func`` if set,
else ``fetch_with_csrf``.
"""
from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any

from hammock.tier1_runtime.csrf_fetch import NetworkFetch, fetch_with_csrf
from hammock.tier2_derive.endpoint import Endpoint

FetchFunc = Callable[..., Awaitable[Any]]


def _resolve(source: Any, args: tuple[Any, ...]) -> Any:
    return source(*args) if callable(source) else source


def make_fetch_func(
    endpoint: Endpoint,
    verb: str,
    fetch_impl: NetworkFetch | None = None,
) -> FetchFunc:
    """Return the coroutine function that performs *verb* for *endpoint*."""
    config = endpoint.config_for(verb)
    if config.func is not None:
        return config.func

    url = config.url
    options = config.options if config.options is not None else {}
    network_fetch = fetch_impl or endpoint.fetch_func or fetch_with_csrf

    async def fetch(*args: Any) -> Any:
        return await network_fetch(_resolve(url, args), dict(_resolve(options, args)))

    return fetch


def derive_verb_funcs(endpoint: Endpoint) -> dict[str, FetchFunc]:
    """Map each declared verb, lower-cased, to its fetch function."""
    return {verb.lower(): make_fetch_func(endpoint, verb) for verb in endpoint.verbs}


__all__ = ["FetchFunc", "make_fetch_func", "derive_verb_funcs"]
