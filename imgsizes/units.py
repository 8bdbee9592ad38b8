"""CSS scalar values — split a value such as "400px" into magnitude and unit."""

from __future__ import annotations

import re

from imgsizes.errors import SizesParseError, UnsupportedUnitError

VALUE_PATTERN = re.compile(r"([\d.]+)(\D*)")


def css_value(text: str) -> tuple[float, str]:
    """Parse a CSS value with an optional unit.

    "400px" -> (400.0, "px"), "71.5%" -> (71.5, "%"), "400" -> (400.0, "").
    """
    match = VALUE_PATTERN.search(text)
    if not match:
        raise SizesParseError(f"Cannot parse CSS value '{text}'")
    magnitude, unit = match.groups()
    try:
        return float(magnitude), unit
    except ValueError as e:
        raise SizesParseError(f"Cannot parse CSS value '{text}'") from e


def px_value(text: str, kind: str = "query") -> float:
    """Return the magnitude of a px value, rejecting every other unit."""
    magnitude, unit = css_value(text)
    if unit.lower() != "px":
        raise UnsupportedUnitError(unit, text, kind=kind)
    return magnitude
