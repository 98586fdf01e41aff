"""
Mixin collection.

Walks the ordered mixin list and combines what the mixins contribute before
anything is merged into the page.
"""

from __future__ import annotations

import logging
from collections.abc import Collection, Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any, Callable

from wxp_mixins.config.defaults import DEFAULT_LOAD_EVENT, PAGE_EVENTS
from wxp_mixins.models import Data, Mixin

logger = logging.getLogger(__name__)


@dataclass
class CollectedMethods:
    """Methods and lifecycle handlers gathered from a list of mixins."""

    methods: dict[str, Callable[..., Any]] = field(default_factory=dict)
    """Ordinary methods, one per name. The last mixin defining a name wins."""

    lifecycles: dict[str, list[Callable[..., Any]]] = field(default_factory=dict)
    """Lifecycle handlers per event name, in mixin order."""

    def __len__(self) -> int:
        return len(self.methods) + len(self.lifecycles)


def collect_data(mixins: Iterable[Mixin]) -> Data:
    """Combine data from multiple mixins.

    Args:
        mixins: Mixins in merge order.

    Returns:
        Merged data. A later mixin overwrites an earlier one on the same key.
    """
    ret: Data = {}

    for mixin in mixins:
        for key, value in mixin.data.items():
            ret[key] = value

    return ret


def collect_methods(
    mixins: Iterable[Mixin],
    events: Sequence[str] = PAGE_EVENTS,
    excluded: Collection[str] = (DEFAULT_LOAD_EVENT,),
) -> CollectedMethods:
    """Combine methods and lifecycle handlers from multiple mixins.

    Args:
        mixins: Mixins in merge order.
        events: Recognized lifecycle event names.
        excluded: Names never collected, neither as methods nor as handlers.
            Entries of ``methods`` named after an event are never collected
            either; lifecycle handlers only come from top-level properties.

    Returns:
        The collected methods and lifecycle handler lists.
    """
    ret = CollectedMethods()

    for mixin in mixins:
        for key, method in mixin.methods.items():
            if key in excluded or key in events:
                continue
            if not callable(method):
                logger.debug(f"Skipping non-callable mixin method {key!r}")
                continue
            ret.methods[key] = method

        for event in events:
            if event in excluded:
                continue
            handler = mixin.handler(event)
            if handler is None:
                continue
            ret.lifecycles.setdefault(event, []).append(handler)

    return ret
