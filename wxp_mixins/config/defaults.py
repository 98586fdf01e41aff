"""
Default configuration values for wxp-mixins.

This module contains the lifecycle vocabularies and hook names used by the
merge engine, plus the defaults of the configuration system.
"""

from enum import Enum


class PageEvent(str, Enum):
    """Page lifecycle events invoked by the host framework."""

    ON_LOAD = "onLoad"
    ON_READY = "onReady"
    ON_SHOW = "onShow"
    ON_HIDE = "onHide"
    ON_UNLOAD = "onUnload"
    ON_PULL_DOWN_REFRESH = "onPullDownRefresh"
    ON_REACH_BOTTOM = "onReachBottom"
    ON_SHARE_APP_MESSAGE = "onShareAppMessage"


class AppEvent(str, Enum):
    """App lifecycle events invoked by the host framework."""

    ON_LAUNCH = "onLaunch"
    ON_SHOW = "onShow"
    ON_HIDE = "onHide"
    ON_ERROR = "onError"


# Lifecycle vocabularies
PAGE_EVENTS: list[str] = [event.value for event in PageEvent]
APP_EVENTS: list[str] = [event.value for event in AppEvent]

# Load sequence slots
DEFAULT_LOAD_EVENT = PageEvent.ON_LOAD.value
DEFAULT_BEFORE_LOAD_HOOK = "onBeforeLoad"
DEFAULT_AFTER_LOAD_HOOK = "onAfterLoad"
DEFAULT_NATIVE_LOAD_HOOK = "onNativeLoad"

# File config defaults
DEFAULT_CONFIG_FILENAME = "wxp.config"
DEFAULT_CONFIG_EXTENSIONS = [".json", ".yaml", ".yml", ".toml"]
DEFAULT_CONFIG_SEARCH_PATHS = [
    ".",
    "~/.config/wxp-mixins",
]

# Environment variable prefix
ENV_PREFIX = "WXP_"

