"""
wxp-mixins: mixins for mini-program pages.

Merges an ordered list of mixins, each contributing data, methods and
lifecycle handlers, into a single page configuration for the host framework.

Basic usage:
    from wxp_mixins import create_page

    def log_show(self, query):
        print("shown", query)
        return query

    logger_mixin = {"data": {"logged": True}, "onShow": log_show}

    page = create_page({
        "data": {"count": 0},
        "mixins": [logger_mixin],
        "onShow": lambda self, query: None,
    })

Merge rules:
    - data: the page wins, then the later mixin wins
    - methods: the page wins, then the later mixin wins
    - lifecycle handlers: all of them run, mixins first in order, the page last
    - onLoad: runs onBeforeLoad, the page's onLoad, then onAfterLoad
"""

__version__ = "0.1.0"
__license__ = "MIT"

from wxp_mixins.collector import CollectedMethods, collect_data, collect_methods
from wxp_mixins.compose import bind, compose, identity, noop
from wxp_mixins.config import (
    APP_EVENTS,
    PAGE_EVENTS,
    AppEvent,
    ConfigurationError,
    MixinConfig,
    PageEvent,
    load_config,
)
from wxp_mixins.lifecycle import LoadSequencer
from wxp_mixins.merger import LifecycleDispatcher, merge_data, merge_methods
from wxp_mixins.models import (
    AppConfig,
    Data,
    LifeCycle,
    Methods,
    Mixin,
    PageConfig,
    as_mixin,
    as_mixin_list,
)
from wxp_mixins.page import create_app, create_page

__all__ = [
    # Version
    "__version__",
    # Entry points
    "create_page",
    "create_app",
    # Models
    "Mixin",
    "PageConfig",
    "AppConfig",
    "Data",
    "Methods",
    "LifeCycle",
    "as_mixin",
    "as_mixin_list",
    # Engine
    "CollectedMethods",
    "collect_data",
    "collect_methods",
    "merge_data",
    "merge_methods",
    "LifecycleDispatcher",
    "LoadSequencer",
    "compose",
    "bind",
    "identity",
    "noop",
    # Configuration
    "MixinConfig",
    "PageEvent",
    "AppEvent",
    "PAGE_EVENTS",
    "APP_EVENTS",
    "ConfigurationError",
    "load_config",
]
