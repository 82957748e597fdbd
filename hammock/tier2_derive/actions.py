"""
hammock.tier2_derive.actions
─────────────────────────────
Derive asynchronous actions from an Endpoint. Calling a derived action
with arguments returns a thunk; awaiting the thunk with a dispatch function
performs the request and dispatches exactly two events, in order:

    REQUEST_<VERB>_<NAME>
    RECEIVE_<VERB>_<NAME>_SUCCESS  or  RECEIVE_<VERB>_<NAME>_FAILURE

Usage::

    actions = derive_actions(endpoint)
    data = await actions.get(course_id)(store.dispatch)
"""
from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from hammock.tier0_core.logging import get_logger
from hammock.tier1_runtime.events import (
    Dispatch,
    EventFactory,
    create_event_factory,
    with_username,
)
from hammock.tier2_derive.action_types import (
    clear_action_type,
    failure_action_type,
    request_action_type,
    success_action_type,
)
from hammock.tier2_derive.endpoint import Endpoint
from hammock.tier2_derive.fetch import make_fetch_func

logger = get_logger(__name__)

Thunk = Callable[[Dispatch], Awaitable[Any]]


@dataclass(frozen=True)
class DerivedAction:
    """An action creator together with the event types it dispatches."""
    verb: str
    action: Callable[..., Thunk]
    request_type: str
    success_type: str
    failure_type: str

    def __call__(self, *args: Any) -> Thunk:
        return self.action(*args)


def _event_factory(endpoint: Endpoint) -> Callable[[str], EventFactory]:
    return with_username if endpoint.namespace_on_username else create_event_factory


def derive_action(endpoint: Endpoint, verb: str) -> DerivedAction:
    """Derive the action for one verb of *endpoint*."""
    config = endpoint.config_for(verb)
    prefix = config.prefix or verb

    request_type = request_action_type(prefix, endpoint.name)
    success_type = success_action_type(prefix, endpoint.name)
    failure_type = failure_action_type(prefix, endpoint.name)

    factory = _event_factory(endpoint)
    request_event = factory(request_type)
    success_event = factory(success_type)
    failure_event = factory(failure_type)

    fetch = make_fetch_func(endpoint, verb)
    namespaced = endpoint.namespace_on_username

    def action(*args: Any) -> Thunk:
        # With namespacing, args[0] is the username.
        def outcome_args(value: Any) -> tuple[Any, ...]:
            return (args[0] if args else None, value) if namespaced else (value,)

        async def thunk(dispatch: Dispatch) -> Any:
            logger.debug("hammock.action.dispatch", type=request_type)
            dispatch(request_event(*args))
            try:
                data = await fetch(*args)
            except Exception as exc:
                logger.warning(
                    "hammock.action.failed",
                    type=failure_type,
                    error=repr(exc),
                )
                logger.debug("hammock.action.dispatch", type=failure_type)
                dispatch(failure_event(*outcome_args(exc)))
                raise
            logger.debug("hammock.action.dispatch", type=success_type)
            dispatch(success_event(*outcome_args(data)))
            return data

        return thunk

    return DerivedAction(
        verb=verb,
        action=action,
        request_type=request_type,
        success_type=success_type,
        failure_type=failure_type,
    )


class DerivedActions:
    """
    All derived actions of an endpoint, keyed by lower-cased verb, plus the
    clear event type and its event factory.

    Supports both ``actions["get"]`` and ``actions.get``. Attribute access
    finds ``values``, ``clear`` and ``clear_type`` before any verb of the
    same name; item access always reaches the verb.
    """

    def __init__(
        self,
        actions: Mapping[str, DerivedAction],
        clear_type: str,
        clear: EventFactory,
    ) -> None:
        self._actions = dict(actions)
        self.clear_type = clear_type
        self.clear = clear

    def __getitem__(self, verb: str) -> DerivedAction:
        return self._actions[verb.lower()]

    def __iter__(self) -> Iterator[str]:
        return iter(self._actions)

    def __len__(self) -> int:
        return len(self._actions)

    def __contains__(self, verb: object) -> bool:
        return isinstance(verb, str) and verb.lower() in self._actions

    def values(self) -> list[DerivedAction]:
        return list(self._actions.values())

    def __getattr__(self, name: str) -> DerivedAction:
        try:
            return self.__dict__["_actions"][name.lower()]
        except KeyError:
            raise AttributeError(name) from None

    def __repr__(self) -> str:
        return f"DerivedActions({sorted(self._actions)!r}, clear_type={self.clear_type!r})"


def derive_actions(endpoint: Endpoint) -> DerivedActions:
    """Derive an action for every verb of *endpoint*, plus the clear event."""
    actions = {verb.lower(): derive_action(endpoint, verb) for verb in endpoint.verbs}
    clear_type = clear_action_type(endpoint.name)
    return DerivedActions(actions, clear_type, _event_factory(endpoint)(clear_type))


__all__ = ["Thunk", "DerivedAction", "DerivedActions", "derive_action", "derive_actions"]
