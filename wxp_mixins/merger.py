"""
Merging collected mixin contributions into a page configuration.

Data and ordinary methods defined by the page always win. Lifecycle handlers
are never overwritten: every contributor runs, through a single dispatcher
installed under the event name.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, MutableMapping
from typing import Any, Callable, Optional

from wxp_mixins.collector import CollectedMethods
from wxp_mixins.compose import bind, compose
from wxp_mixins.models import Data

logger = logging.getLogger(__name__)


class LifecycleDispatcher:
    """Fans one lifecycle event out to an ordered list of handlers.

    Handlers run in list order. The first one receives the arguments the
    dispatcher was called with, each following one receives only the return
    value of the handler before it, and the dispatcher returns the value of
    the last one. Exceptions propagate unchanged and nothing is awaited.

    Accessed through an instance (the merged configuration used as a class
    namespace), plain-function handlers are bound to that instance.

    Example:
        on_show = LifecycleDispatcher("onShow", [track, refresh])
        on_show(query)  # refresh(track(query))
    """

    def __init__(
        self,
        event: str,
        handlers: Iterable[Callable[..., Any]],
        instance: Any = None,
    ) -> None:
        self.event = event
        self.handlers: tuple[Callable[..., Any], ...] = tuple(handlers)
        self._instance = instance

    def __get__(self, instance: Any, owner: Optional[type] = None) -> "LifecycleDispatcher":
        if instance is None:
            return self
        return LifecycleDispatcher(self.event, self.handlers, instance)

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        bound = [bind(handler, self._instance) for handler in self.handlers]
        # compose runs right to left
        return compose(*reversed(bound))(*args, **kwargs)

    def __len__(self) -> int:
        return len(self.handlers)

    def __iter__(self):
        return iter(self.handlers)

    def __repr__(self) -> str:
        return f"<LifecycleDispatcher event={self.event!r} handlers={len(self.handlers)}>"


def merge_data(mixin_data: Data, native_data: MutableMapping[str, Any]) -> MutableMapping[str, Any]:
    """Mix data in mixins into the page data.

    Args:
        mixin_data: Data collected from the mixins.
        native_data: The page's own data, updated in place.

    Returns:
        ``native_data``. Keys the page defines keep their value, even falsy
        ones and None.
    """
    for key, value in mixin_data.items():
        if key in native_data:
            continue
        native_data[key] = value

    return native_data


def merge_methods(
    collected: CollectedMethods,
    page_conf: MutableMapping[str, Any],
) -> MutableMapping[str, Any]:
    """Mix collected methods and lifecycle handlers into the page.

    Args:
        collected: Output of ``collect_methods``.
        page_conf: Page configuration, updated in place.

    Returns:
        ``page_conf``.
    """
    for event, mixin_handlers in collected.lifecycles.items():
        handlers = list(mixin_handlers)
        own = page_conf.get(event)
        if callable(own):
            handlers.append(own)

        page_conf[event] = LifecycleDispatcher(event, handlers)
        logger.debug(f"Installed {event} dispatcher with {len(handlers)} handler(s)")

    for key, method in collected.methods.items():
        if page_conf.get(key) is None:
            page_conf[key] = method
        else:
            logger.debug(f"Page already defines {key!r}, discarding mixin method")

    return page_conf
