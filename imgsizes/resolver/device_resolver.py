"""Device image resolution — which sizes rule applies to a device, and which
raster widths that device needs at each pixel density and orientation."""

from __future__ import annotations

import logging
import math

from imgsizes.errors import UnsupportedUnitError
from imgsizes.models.device import Device, Orientation, ResolvedImage
from imgsizes.models.sizes import FALLBACK_RULE, Condition, SizeRule
from imgsizes.units import css_value, px_value

logger = logging.getLogger(__name__)

# Decimal places kept before rounding up, so 110 * 1.1 stays 121
PIXEL_PRECISION = 6


def orientations(device: Device) -> list[tuple[Orientation, Device]]:
    """The natural device first, then its rotated variant when it can rotate."""
    variants = [device]
    if device.can_rotate:
        variants.append(device.rotated())
    return [(variant.orientation, variant) for variant in variants]


def condition_holds(condition: Condition, device: Device) -> bool:
    value = px_value(condition.value, kind="query")
    feature = condition.media_feature
    if feature == "min-width":
        return device.w >= value
    if feature == "max-width":
        return device.w <= value
    if feature == "min-height":
        return device.h >= value
    if feature == "max-height":
        return device.h <= value
    return False


def select_rule(rules: list[SizeRule], device: Device) -> SizeRule:
    """Return the first rule whose conditions all hold for the device.

    Falls back to `100vw` when no rule matches.
    """
    for rule in rules:
        if all(condition_holds(c, device) for c in rule.conditions):
            return rule
    return FALLBACK_RULE


def css_width(width: str, device: Device) -> float:
    """Resolve a width token (px, vw or unitless) to CSS pixels on the device."""
    magnitude, unit = css_value(width)
    if unit.lower() == "vw":
        return device.w * magnitude / 100
    if unit.lower() in ("px", ""):
        return magnitude
    raise UnsupportedUnitError(unit, width, kind="width", supported="px or vw")


def raster_width(css_pixels: float, density: float) -> int:
    return math.ceil(round(css_pixels * density, PIXEL_PRECISION))


def resolve_device(rules: list[SizeRule], device: Device) -> list[ResolvedImage]:
    """Return the images a device needs, per orientation then per density."""
    images: list[ResolvedImage] = []
    for orientation, variant in orientations(device):
        rule = select_rule(rules, variant)
        css_pixels = css_width(rule.width, variant)
        for density in device.densities:
            images.append(ResolvedImage(
                w=raster_width(css_pixels, density),
                density=density,
                orientation=orientation,
            ))
    logger.debug(
        "Device %s (%sx%s) needs widths %s",
        device.name, device.w, device.h, [i.w for i in images],
    )
    return images


def device_widths(rules: list[SizeRule], device: Device) -> set[int]:
    """Distinct widths the device needs, regardless of density or orientation."""
    return {image.w for image in resolve_device(rules, device)}
