"""Parsed sizes attribute data structures."""

from __future__ import annotations

from typing import Literal, get_args

from pydantic import BaseModel, Field

MediaFeature = Literal["min-width", "max-width", "min-height", "max-height"]
SUPPORTED_FEATURES = set(get_args(MediaFeature))


class Condition(BaseModel):
    """A single media condition, such as `(min-width: 600px)`."""

    media_feature: MediaFeature
    value: str  # breakpoint, always a px value


class SizeRule(BaseModel):
    """One rule of a sizes attribute, such as `(min-width: 600px) 400px` or `100vw`."""

    conditions: list[Condition] = Field(default_factory=list)
    width: str

    @property
    def is_fallback(self) -> bool:
        return not self.conditions


FALLBACK_RULE = SizeRule(width="100vw")
