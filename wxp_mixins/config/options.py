"""
Configuration options classes for wxp-mixins.

This module provides strongly-typed option classes describing the lifecycle
vocabulary the merge engine recognizes for pages and apps.
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from .defaults import (
    APP_EVENTS,
    DEFAULT_AFTER_LOAD_HOOK,
    DEFAULT_BEFORE_LOAD_HOOK,
    DEFAULT_LOAD_EVENT,
    DEFAULT_NATIVE_LOAD_HOOK,
    PAGE_EVENTS,
)


def _clean_event_names(v: Any) -> Any:
    """Strip names, drop empty ones and duplicates while keeping order."""
    if isinstance(v, str):
        v = v.split(",")
    if not isinstance(v, (list, tuple)):
        return v

    names: list[str] = []
    for item in v:
        name = str(item).strip()
        if name and name not in names:
            names.append(name)
    return names


class PageEventOptions(BaseModel):
    """Page lifecycle vocabulary.

    ``load_event`` is driven by the load sequence instead of the generic
    fan-out, so it must be part of ``events``.
    """

    events: list[str] = Field(
        default_factory=lambda: PAGE_EVENTS.copy(),
        description="Page lifecycle event names, in order",
    )
    load_event: str = Field(DEFAULT_LOAD_EVENT, min_length=1, description="Load event name")
    before_load_hook: str = Field(
        DEFAULT_BEFORE_LOAD_HOOK, min_length=1, description="Hook run before the page load handler"
    )
    after_load_hook: str = Field(
        DEFAULT_AFTER_LOAD_HOOK, min_length=1, description="Hook run after the page load handler"
    )
    native_load_hook: str = Field(
        DEFAULT_NATIVE_LOAD_HOOK, min_length=1, description="Slot keeping the page's own load handler"
    )

    @field_validator("events", mode="before")
    @classmethod
    def parse_events(cls, v: Any) -> Any:
        """Accept comma-separated strings and normalize names."""
        return _clean_event_names(v)

    @model_validator(mode="after")
    def check_load_event(self) -> "PageEventOptions":
        """Make sure the load event belongs to the vocabulary."""
        if self.load_event not in self.events:
            raise ValueError(
                f"load_event {self.load_event!r} is not one of the page events"
            )
        return self

    @property
    def fan_out_events(self) -> list[str]:
        """Events merged through the generic fan-out."""
        return [name for name in self.events if name != self.load_event]


class AppEventOptions(BaseModel):
    """App lifecycle vocabulary."""

    events: list[str] = Field(
        default_factory=lambda: APP_EVENTS.copy(),
        description="App lifecycle event names, in order",
    )

    @field_validator("events", mode="before")
    @classmethod
    def parse_events(cls, v: Any) -> Any:
        """Accept comma-separated strings and normalize names."""
        return _clean_event_names(v)


class MixinConfig(BaseModel):
    """Main configuration class combining page and app options."""

    page: PageEventOptions = Field(
        default_factory=PageEventOptions, description="Page event options"
    )
    app: AppEventOptions = Field(
        default_factory=AppEventOptions, description="App event options"
    )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MixinConfig":
        """Create configuration from dictionary."""
        return cls(**data)

    def merge(self, other: "MixinConfig") -> "MixinConfig":
        """Merge with another MixinConfig, fields set on other take precedence."""
        data = self.model_dump()
        for section in ("page", "app"):
            data[section].update(
                getattr(other, section).model_dump(exclude_unset=True)
            )
        return MixinConfig(**data)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        return self.model_dump()
