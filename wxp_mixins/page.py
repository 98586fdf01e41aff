"""
Entry points merging mixins into page and app configurations.

Example:
    from wxp_mixins import create_page

    def track_show(self, query):
        self.setData({"visits": self.data["visits"] + 1})
        return query

    tracking = {"data": {"visits": 0}, "onShow": track_show}

    page = create_page({
        "data": {"title": "Index"},
        "mixins": [tracking],
        "onShow": lambda self, query: print(query),
    })
    # Hand ``page`` to the host framework's page registration.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, MutableMapping
from typing import Any, Optional, Union

from wxp_mixins.collector import collect_data, collect_methods
from wxp_mixins.compose import noop
from wxp_mixins.config.loader import get_default_config
from wxp_mixins.config.options import MixinConfig
from wxp_mixins.lifecycle import LoadSequencer
from wxp_mixins.merger import merge_data, merge_methods
from wxp_mixins.models import AppConfig, PageConfig, as_mixin_list

logger = logging.getLogger(__name__)


def _callable_or_noop(value: Any) -> Any:
    return value if callable(value) else noop


def _native_data(conf: MutableMapping[str, Any]) -> MutableMapping[str, Any]:
    data = conf.get("data")
    if isinstance(data, MutableMapping):
        return data
    if isinstance(data, Mapping):
        # read-only data is copied, its keys still win
        return dict(data)
    return {}


def create_page(
    page_conf: Union[MutableMapping[str, Any], PageConfig],
    config: Optional[MixinConfig] = None,
) -> MutableMapping[str, Any]:
    """Merge the page's mixins into the page configuration.

    Args:
        page_conf: Page configuration, with its mixins under ``mixins``.
            Mappings are updated in place; a ``PageConfig`` is flattened to
            a new dict first.
        config: Lifecycle vocabulary, defaults to the built-in one.

    Returns:
        The merged page configuration.
    """
    options = (config or get_default_config()).page

    if isinstance(page_conf, PageConfig):
        page_conf = page_conf.to_dict()

    mixins = as_mixin_list(page_conf.get("mixins"))
    on_before_load = _callable_or_noop(page_conf.get(options.before_load_hook))
    on_after_load = _callable_or_noop(page_conf.get(options.after_load_hook))
    on_native_load = _callable_or_noop(page_conf.get(options.load_event))
    native_data = _native_data(page_conf)

    mixin_data = collect_data(mixins)
    collected = collect_methods(
        mixins,
        events=options.fan_out_events,
        excluded=(options.load_event,),
    )

    page_conf.update(
        {
            "data": merge_data(mixin_data, native_data),
            options.load_event: LoadSequencer(on_before_load, on_native_load, on_after_load),
            options.before_load_hook: on_before_load,
            options.after_load_hook: on_after_load,
            options.native_load_hook: on_native_load,
        }
    )

    page_conf = merge_methods(collected, page_conf)

    logger.debug(
        f"Merged {len(mixins)} mixin(s) into page: "
        f"{len(mixin_data)} data key(s), {len(collected.methods)} method(s), "
        f"{len(collected.lifecycles)} lifecycle event(s)"
    )
    return page_conf


def create_app(
    app_conf: Union[MutableMapping[str, Any], AppConfig],
    config: Optional[MixinConfig] = None,
) -> MutableMapping[str, Any]:
    """Merge the app's mixins into the app configuration.

    Works like ``create_page`` with the app lifecycle vocabulary, where every
    event, ``onLaunch`` included, is fanned out.

    Args:
        app_conf: App configuration, with its mixins under ``mixins``.
        config: Lifecycle vocabulary, defaults to the built-in one.

    Returns:
        The merged app configuration.
    """
    options = (config or get_default_config()).app

    if isinstance(app_conf, PageConfig):
        app_conf = app_conf.to_dict()

    mixins = as_mixin_list(app_conf.get("mixins"))
    native_data = _native_data(app_conf)

    mixin_data = collect_data(mixins)
    collected = collect_methods(mixins, events=options.events, excluded=())

    app_conf["data"] = merge_data(mixin_data, native_data)
    app_conf = merge_methods(collected, app_conf)

    logger.debug(
        f"Merged {len(mixins)} mixin(s) into app: "
        f"{len(collected.lifecycles)} lifecycle event(s)"
    )
    return app_conf

