"""
Page load sequence.

The load event is not fanned out like the other lifecycle events. The page
gets a fixed three step sequence instead: before-load hook, the page's own
load handler, after-load hook.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from wxp_mixins.compose import bind, noop


class LoadSequencer:
    """Runs the before, native and after load handlers in order.

    Each step receives the same arguments; return values are discarded.

    Example:
        page["onLoad"] = LoadSequencer(
            on_before_load=page.get("onBeforeLoad", noop),
            on_native_load=page.get("onLoad", noop),
        )
    """

    def __init__(
        self,
        on_before_load: Callable[..., Any] = noop,
        on_native_load: Callable[..., Any] = noop,
        on_after_load: Callable[..., Any] = noop,
        instance: Any = None,
    ) -> None:
        self.on_before_load = on_before_load
        self.on_native_load = on_native_load
        self.on_after_load = on_after_load
        self._instance = instance

    def __get__(self, instance: Any, owner: Optional[type] = None) -> "LoadSequencer":
        if instance is None:
            return self
        return LoadSequencer(
            self.on_before_load,
            self.on_native_load,
            self.on_after_load,
            instance,
        )

    def on_load(self, *args: Any, **kwargs: Any) -> None:
        """Run the load sequence with the host's load arguments."""
        bind(self.on_before_load, self._instance)(*args, **kwargs)
        bind(self.on_native_load, self._instance)(*args, **kwargs)
        bind(self.on_after_load, self._instance)(*args, **kwargs)

    __call__ = on_load

    def __repr__(self) -> str:
        return (
            f"<LoadSequencer before={_name(self.on_before_load)} "
            f"native={_name(self.on_native_load)} after={_name(self.on_after_load)}>"
        )


def _name(func: Callable[..., Any]) -> str:
    return getattr(func, "__qualname__", type(func).__name__)
