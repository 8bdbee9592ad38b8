"""Device catalog and resolved image data structures."""

from __future__ import annotations

from typing import Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

Orientation = Literal["landscape", "portrait"]


def orientation_of(w: float, h: float) -> Orientation:
    return "landscape" if w >= h else "portrait"


class Dimension(BaseModel):
    model_config = ConfigDict(frozen=True)

    w: float
    h: float


class Device(BaseModel):
    """A supported device. Accepts the historical `dppx`/`flip` catalog keys."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    w: float
    h: float
    densities: tuple[float, ...] = Field(
        validation_alias=AliasChoices("densities", "dppx")
    )
    can_rotate: bool = Field(
        default=False, validation_alias=AliasChoices("can_rotate", "canRotate", "flip")
    )
    name: str = ""

    @field_validator("densities")
    @classmethod
    def check_densities(cls, v: tuple[float, ...]) -> tuple[float, ...]:
        if not v:
            raise ValueError("a device needs at least one pixel density")
        if any(d <= 0 for d in v):
            raise ValueError(f"pixel densities must be positive, got {list(v)}")
        return v

    @property
    def orientation(self) -> Orientation:
        return orientation_of(self.w, self.h)

    def rotated(self) -> "Device":
        """Return a copy of this device with width and height swapped."""
        return self.model_copy(update={"w": self.h, "h": self.w})


class ResolvedImage(BaseModel):
    model_config = ConfigDict(frozen=True)

    w: int
    density: float
    orientation: Orientation
