"""Catalog aggregation — runs the device resolver over a whole device catalog."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional, Union

from imgsizes.filtering.similarity import filter_sizes
from imgsizes.models.device import Device, Orientation, ResolvedImage
from imgsizes.models.sizes import SizeRule
from imgsizes.parser.sizes_parser import parse_sizes
from imgsizes.resolver.device_resolver import resolve_device

logger = logging.getLogger(__name__)

DEFAULT_MIN_SCALE = 0.8
DEFAULT_DEVICES_PATH = Path(__file__).resolve().parent.parent / "data" / "default_devices.json"


def load_devices(path: str | Path) -> list[Device]:
    """Load a device catalog from a JSON file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Device catalog not found: {path}")
    with open(path) as f:
        data = json.load(f)
    return [Device(**d) for d in data]


def load_default_devices() -> list[Device]:
    """Load the device catalog shipped with the package."""
    return load_devices(DEFAULT_DEVICES_PATH)


def _rules(sizes: Union[str, list[SizeRule]]) -> list[SizeRule]:
    return parse_sizes(sizes) if isinstance(sizes, str) else sizes


def device_images(sizes: Union[str, list[SizeRule]], device: Device) -> list[ResolvedImage]:
    """Images one device needs for a sizes attribute, without deduplication."""
    return resolve_device(_rules(sizes), device)


def widths_from_sizes(
    sizes: str,
    min_scale: Optional[float] = None,
    devices: Optional[list[Device]] = None,
) -> list[int]:
    """Return the image widths to generate so every device is served.

    Widths closer than `min_scale` to a larger kept width are dropped.
    """
    rules = parse_sizes(sizes)
    devices = devices if devices is not None else load_default_devices()

    need_widths: set[int] = set()
    for device in devices:
        need_widths.update(image.w for image in resolve_device(rules, device))

    widths = filter_sizes(
        list(need_widths),
        DEFAULT_MIN_SCALE if min_scale is None else min_scale,
    )
    logger.info(
        "%d devices need %d distinct widths, %d after filtering",
        len(devices), len(need_widths), len(widths),
    )
    return widths


def catalog_images(
    sizes: Union[str, list[SizeRule]],
    devices: Optional[list[Device]] = None,
) -> list[ResolvedImage]:
    """Distinct image descriptors needed across the catalog, in first-seen order."""
    rules = _rules(sizes)
    devices = devices if devices is not None else load_default_devices()

    seen: dict[ResolvedImage, None] = {}
    for device in devices:
        for image in resolve_device(rules, device):
            seen.setdefault(image, None)
    return list(seen)


def images_by_orientation(images: list[ResolvedImage]) -> dict[Orientation, list[int]]:
    """Group distinct image widths by orientation, largest first."""
    grouped: dict[Orientation, set[int]] = {"landscape": set(), "portrait": set()}
    for image in images:
        grouped[image.orientation].add(image.w)
    return {orientation: sorted(widths, reverse=True) for orientation, widths in grouped.items()}
