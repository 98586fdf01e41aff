"""
Data models for wxp-mixins.

A mixin contributes ``data``, ``methods`` and lifecycle handlers. Lifecycle
handlers are not declared fields: any extra property is kept as is and the
merge engine picks the ones named after a recognized lifecycle event.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Callable, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)

Data = dict[str, Any]
Methods = dict[str, Any]
LifeCycle = Callable[..., Any]


def _string_keyed(v: Mapping) -> dict[str, Any]:
    dropped = [key for key in v if not isinstance(key, str)]
    if dropped:
        logger.debug(f"Dropping non-string keys {dropped!r}")
    return {key: value for key, value in v.items() if isinstance(key, str)}


def _mapping_or_empty(v: Any) -> dict[str, Any]:
    if isinstance(v, Mapping):
        return _string_keyed(v)
    return {}


class Mixin(BaseModel):
    """A reusable bundle of page data, methods and lifecycle handlers.

    Example:
        share = Mixin(
            data={"shareTitle": "Hello"},
            methods={"share": do_share},
            onShow=track_show,
        )
    """

    model_config = ConfigDict(extra="allow", arbitrary_types_allowed=True, frozen=True)

    data: Data = Field(default_factory=dict, description="Data merged into the page")
    methods: Methods = Field(default_factory=dict, description="Methods merged into the page")

    @field_validator("data", "methods", mode="before")
    @classmethod
    def coerce_mapping(cls, v: Any) -> dict[str, Any]:
        """Treat anything that is not a mapping as empty."""
        return _mapping_or_empty(v)

    @property
    def extras(self) -> dict[str, Any]:
        """Properties beyond ``data`` and ``methods``."""
        return dict(self.model_extra or {})

    def handler(self, name: str) -> Optional[LifeCycle]:
        """Get the callable own property named ``name``, if any."""
        value = (self.model_extra or {}).get(name)
        return value if callable(value) else None


def as_mixin(value: Any) -> Mixin:
    """Coerce a mixin given as a model or a mapping.

    Mappings are validated into a new model, the input is not touched.
    Non-string keys are dropped and anything else becomes an empty mixin.
    """
    if isinstance(value, Mixin):
        return value
    if isinstance(value, Mapping):
        try:
            return Mixin.model_validate(_string_keyed(value))
        except ValidationError as e:
            logger.debug(f"Ignoring mixin that failed validation: {e}")
            return Mixin()

    logger.debug(f"Ignoring malformed mixin of type {type(value).__name__}")
    return Mixin()


def as_mixin_list(value: Any) -> list[Mixin]:
    """Coerce the ``mixins`` entry of a page into a list of mixins."""
    if value is None:
        return []
    if not isinstance(value, (list, tuple)):
        logger.debug(f"Ignoring mixins of type {type(value).__name__}, expected a list")
        return []
    return [as_mixin(item) for item in value]


class PageConfig(BaseModel):
    """Typed page configuration.

    Methods and lifecycle handlers are passed as extra properties. The merge
    engine works on the plain dict returned by ``to_dict``.

    Example:
        page = PageConfig(
            data={"count": 0},
            mixins=[share],
            onShow=refresh,
            increment=increment,
        )
        create_page(page)
    """

    model_config = ConfigDict(extra="allow", arbitrary_types_allowed=True)

    data: Data = Field(default_factory=dict, description="Page data")
    mixins: list[Any] = Field(default_factory=list, description="Mixins in merge order")

    @field_validator("data", mode="before")
    @classmethod
    def coerce_data(cls, v: Any) -> dict[str, Any]:
        """Treat anything that is not a mapping as empty."""
        return _mapping_or_empty(v)

    @field_validator("mixins", mode="before")
    @classmethod
    def coerce_mixins(cls, v: Any) -> list[Any]:
        """Treat anything that is not a list as no mixins."""
        if isinstance(v, (list, tuple)):
            return list(v)
        return []

    @property
    def methods(self) -> dict[str, Any]:
        """Methods and lifecycle handlers set on the page."""
        return dict(self.model_extra or {})

    def to_dict(self) -> dict[str, Any]:
        """Flatten to the mapping handed to the merge engine.

        Values are not copied, so handlers keep their identity.
        """
        return {"data": self.data, "mixins": list(self.mixins), **self.methods}


class AppConfig(PageConfig):
    """Typed app configuration, merged with the app lifecycle vocabulary."""
