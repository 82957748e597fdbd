"""
hammock.tier2_derive.reducers
──────────────────────────────
Derive reducers from an Endpoint and its derived actions. A reducer is a
mapping from event type to a pure ``(state, event) -> state`` transition:

    request  → <verb>Status=FETCH_PROCESSING, loaded=False, processing=True
    success  → <verb>Status=FETCH_SUCCESS, loaded=True, processing=False, data
    failure  → <verb>Status=FETCH_FAILURE, loaded=True, processing=False, error
    clear    → the endpoint's initial state

With ``namespace_on_username`` the update is deep-merged under the event's
``meta`` (the username) instead of into the top level of the state.
"""
from __future__ import annotations

import copy
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any

from hammock.tier0_core.constants import (
    FETCH_FAILURE,
    FETCH_PROCESSING,
    FETCH_SUCCESS,
    INITIAL_STATE,
)
from hammock.tier1_runtime.events import Event, update_state_by_username
from hammock.tier2_derive.actions import DerivedAction, DerivedActions
from hammock.tier2_derive.endpoint import Endpoint

Transition = Callable[[Any, Event], Any]


def _identity(payload: Any, previous: Any) -> Any:
    return payload


def derive_reducer(
    endpoint: Endpoint,
    action: DerivedAction,
    verb: str,
) -> dict[str, Transition]:
    """Return the request/success/failure transitions for one verb."""
    fetch_status = f"{verb.lower()}Status"
    success_handler = endpoint.config_for(verb).success_handler or _identity

    def update(state: Any, event: Event, changes: dict[str, Any]) -> dict[str, Any]:
        if endpoint.namespace_on_username:
            # Defaults only seed a username seen for the first time.
            if event.meta in state:
                return update_state_by_username(state, event.meta, changes)
            return update_state_by_username(
                state,
                event.meta,
                {**endpoint.username_initial_state, **changes},
            )
        return {**state, **changes}

    def previous_data(state: Any, event: Event) -> Any:
        if endpoint.namespace_on_username:
            fragment = state.get(event.meta)
            return fragment.get("data") if isinstance(fragment, Mapping) else None
        return state.get("data")

    def on_request(state: Any, event: Event) -> dict[str, Any]:
        return update(state, event, {
            fetch_status: FETCH_PROCESSING,
            "loaded": False,
            "processing": event.payload if endpoint.check_no_spinner else True,
        })

    def on_success(state: Any, event: Event) -> dict[str, Any]:
        return update(state, event, {
            fetch_status: FETCH_SUCCESS,
            "data": success_handler(event.payload, previous_data(state, event)),
            "loaded": True,
            "processing": False,
        })

    def on_failure(state: Any, event: Event) -> dict[str, Any]:
        return update(state, event, {
            fetch_status: FETCH_FAILURE,
            "error": event.payload,
            "loaded": True,
            "processing": False,
        })

    return {
        action.request_type: on_request,
        action.success_type: on_success,
        action.failure_type: on_failure,
    }


class DerivedReducer:
    """
    The full reducer for an endpoint. Unknown event types return the state
    object passed in, unchanged.
    """

    def __init__(self, handlers: Mapping[str, Transition], initial_state: Mapping[str, Any]) -> None:
        self.handlers: Mapping[str, Transition] = MappingProxyType(dict(handlers))
        self._initial_state = initial_state

    @property
    def initial_state(self) -> Any:
        return copy.deepcopy(self._initial_state)

    def __call__(self, state: Any, event: Event) -> Any:
        if state is None:
            state = self.initial_state
        handler = self.handlers.get(event.type)
        if handler is None:
            return state
        return handler(state, event)


def derive_reducers(endpoint: Endpoint, actions: DerivedActions) -> DerivedReducer:
    """
    Build the reducer for *endpoint*. Later sources win on a type collision:
    per-verb transitions, then ``extra_actions``, then clear.
    """
    initial_state = (
        endpoint.initial_state if endpoint.initial_state is not None else INITIAL_STATE
    )

    handlers: dict[str, Transition] = {}
    for verb in endpoint.verbs:
        handlers.update(derive_reducer(endpoint, actions[verb], verb))
    handlers.update(endpoint.extra_actions)
    handlers[actions.clear_type] = lambda state, event: copy.deepcopy(initial_state)

    return DerivedReducer(handlers, initial_state)


__all__ = ["Transition", "derive_reducer", "derive_reducers", "DerivedReducer"]
