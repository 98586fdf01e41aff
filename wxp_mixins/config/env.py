"""
Environment overrides for the lifecycle vocabulary.

Event lists are comma-separated, e.g.::

    WXP_PAGE_EVENTS=onLoad,onShow,onTabItemTap
    WXP_PAGE_LOAD_EVENT=onLoad
"""

import os
from collections.abc import Mapping
from typing import Any, Callable, Optional

from .defaults import ENV_PREFIX


def parse_event_list(value: str) -> list[str]:
    """Split a comma-separated list of event names."""
    return [name.strip() for name in value.split(",") if name.strip()]


# option -> (variable, parser)
ENV_MAPPINGS: dict[str, tuple[str, Callable[[str], Any]]] = {
    "page.events": (f"{ENV_PREFIX}PAGE_EVENTS", parse_event_list),
    "page.load_event": (f"{ENV_PREFIX}PAGE_LOAD_EVENT", str.strip),
    "page.before_load_hook": (f"{ENV_PREFIX}PAGE_BEFORE_LOAD_HOOK", str.strip),
    "page.after_load_hook": (f"{ENV_PREFIX}PAGE_AFTER_LOAD_HOOK", str.strip),
    "page.native_load_hook": (f"{ENV_PREFIX}PAGE_NATIVE_LOAD_HOOK", str.strip),
    "app.events": (f"{ENV_PREFIX}APP_EVENTS", parse_event_list),
}


def load_env_config(environ: Optional[Mapping[str, str]] = None) -> dict[str, Any]:
    """Read the vocabulary options set in the environment.

    Args:
        environ: Variables to read, ``os.environ`` by default.

    Returns:
        ``{"page": {...}, "app": {...}}`` holding only the options that are set.
    """
    if environ is None:
        environ = os.environ

    result: dict[str, Any] = {"page": {}, "app": {}}

    for key, (env_var, parse) in ENV_MAPPINGS.items():
        value = environ.get(env_var)
        if value is not None:
            section, option = key.split(".", 1)
            result[section][option] = parse(value)

    return result
