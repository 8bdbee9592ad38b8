"""Errors raised while parsing and resolving sizes attributes."""

from __future__ import annotations


class SizesError(ValueError):
    """Base class for sizes parsing/resolution failures."""


class SizesParseError(SizesError):
    """A sizes attribute or CSS value could not be parsed."""


class UnsupportedUnitError(SizesError):
    """A CSS value uses a unit the calculator cannot resolve."""

    def __init__(self, unit: str, value: str, kind: str = "query", supported: str = "px"):
        self.unit = unit
        self.value = value
        self.kind = kind
        super().__init__(
            f"Invalid {kind} unit '{unit}' in '{value}': only {supported} is supported"
        )
