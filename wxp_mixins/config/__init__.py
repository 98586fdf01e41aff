"""
Configuration module for wxp-mixins.

This module decides which lifecycle names the merge engine fans out:
- Option classes validated by Pydantic (PageEventOptions, AppEventOptions)
- Configuration file loading (JSON, YAML, TOML)
- Environment variable overrides

Example usage:
    from wxp_mixins.config import MixinConfig, PageEventOptions, load_config

    # Load from file with environment overrides
    config = load_config("wxp.config.yaml")

    # Create programmatically
    config = MixinConfig(
        page=PageEventOptions(events=["onLoad", "onShow", "onTabItemTap"]),
    )

Environment variables:
    WXP_PAGE_EVENTS=onLoad,onShow,onHide
    WXP_PAGE_LOAD_EVENT=onLoad
    WXP_APP_EVENTS=onLaunch,onShow,onHide,onError
"""

from .defaults import (
    APP_EVENTS,
    DEFAULT_AFTER_LOAD_HOOK,
    DEFAULT_BEFORE_LOAD_HOOK,
    DEFAULT_LOAD_EVENT,
    DEFAULT_NATIVE_LOAD_HOOK,
    ENV_PREFIX,
    PAGE_EVENTS,
    AppEvent,
    PageEvent,
)
from .env import ENV_MAPPINGS, load_env_config, parse_event_list
from .loader import (
    ConfigurationError,
    find_config_file,
    get_default_config,
    load_config,
    load_file,
    merge_configs,
)
from .options import AppEventOptions, MixinConfig, PageEventOptions

__all__ = [
    # Main configuration class
    "MixinConfig",
    # Option classes
    "PageEventOptions",
    "AppEventOptions",
    # Enums
    "PageEvent",
    "AppEvent",
    # Loader functions
    "load_config",
    "load_file",
    "find_config_file",
    "merge_configs",
    "get_default_config",
    "ConfigurationError",
    # Environment
    "load_env_config",
    "parse_event_list",
    "ENV_MAPPINGS",
    "ENV_PREFIX",
    # Default values
    "PAGE_EVENTS",
    "APP_EVENTS",
    "DEFAULT_LOAD_EVENT",
    "DEFAULT_BEFORE_LOAD_HOOK",
    "DEFAULT_AFTER_LOAD_HOOK",
    "DEFAULT_NATIVE_LOAD_HOOK",
]
