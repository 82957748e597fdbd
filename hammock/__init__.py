"""
hammock
───────
Stable top-level exports. Import from here, not from sub-modules directly.
Every name exported here is part of the public API and subject to semver.
"""
from hammock.tier0_core.constants import (
    GET,
    POST,
    PATCH,
    PUT,
    DELETE,
    FETCH_PROCESSING,
    FETCH_SUCCESS,
    FETCH_FAILURE,
    INITIAL_STATE,
)
from hammock.tier0_core.errors import (
    HammockError,
    ConfigurationError,
    CookieStoreUnavailable,
    FetchError,
    HTTPStatusError,
    JSONDecodeFailure,
    JSONStatusError,
)
from hammock.tier0_core.config import get_config, HammockConfig
from hammock.tier0_core.logging import get_logger

from hammock.tier1_runtime.events import (
    Event,
    create_event_factory,
    with_username,
    update_state_by_username,
)
from hammock.tier1_runtime.cookies import get_cookie, static_cookies, client_cookies
from hammock.tier1_runtime.csrf_fetch import (
    CSRFFetcher,
    csrf_safe_method,
    fetch_with_csrf,
    fetch_json_with_csrf,
    set_default_fetcher,
    aclose_default_fetcher,
)

from hammock.tier2_derive.endpoint import Endpoint, VerbConfig
from hammock.tier2_derive.action_types import (
    request_action_type,
    success_action_type,
    failure_action_type,
    clear_action_type,
)
from hammock.tier2_derive.fetch import make_fetch_func, derive_verb_funcs
from hammock.tier2_derive.actions import (
    DerivedAction,
    DerivedActions,
    derive_action,
    derive_actions,
)
from hammock.tier2_derive.reducers import DerivedReducer, derive_reducer, derive_reducers

__version__ = "0.1.0"
__all__ = [
    # constants
    "GET", "POST", "PATCH", "PUT", "DELETE",
    "FETCH_PROCESSING", "FETCH_SUCCESS", "FETCH_FAILURE", "INITIAL_STATE",
    # errors
    "HammockError", "ConfigurationError", "CookieStoreUnavailable",
    "FetchError", "HTTPStatusError", "JSONDecodeFailure", "JSONStatusError",
    # config / logging
    "get_config", "HammockConfig", "get_logger",
    # events
    "Event", "create_event_factory", "with_username", "update_state_by_username",
    # csrf fetch
    "get_cookie", "static_cookies", "client_cookies",
    "CSRFFetcher", "csrf_safe_method", "fetch_with_csrf", "fetch_json_with_csrf",
    "set_default_fetcher",
    "aclose_default_fetcher",
    # derivation
    "Endpoint", "VerbConfig",
    "request_action_type", "success_action_type",
    "failure_action_type", "clear_action_type",
    "make_fetch_func", "derive_verb_funcs",
    "DerivedAction", "DerivedActions", "derive_action", "derive_actions",
    "DerivedReducer", "derive_reducer", "derive_reducers",
]
