"""Similarity filtering — drops sizes too close to a larger kept size to be
worth generating."""

from __future__ import annotations

import logging
from typing import Union, overload

from imgsizes.models.device import Dimension

logger = logging.getLogger(__name__)

Number = Union[int, float]


def _is_dimension_list(items: list) -> bool:
    kinds = {isinstance(item, Dimension) for item in items}
    if len(kinds) > 1:
        raise TypeError("Cannot filter a mix of numbers and dimensions")
    return kinds == {True}


@overload
def filter_sizes(items: list[Dimension], factor: float = 0.8) -> list[Dimension]: ...


@overload
def filter_sizes(items: list[Number], factor: float = 0.8) -> list[Number]: ...


def filter_sizes(items, factor=0.8):
    """Filter sizes, keeping only those that downscale enough from the last kept one.

    Sizes are sorted largest first (by area for dimensions). A size is kept
    when its area relative to the previously kept size is below `factor`;
    0.8 drops any size that saves less than 20% of the pixels. Plain numbers
    are treated as squares.
    """
    dimensions = _is_dimension_list(items)
    for item in items:
        positive = item.w > 0 and item.h > 0 if dimensions else item > 0
        if not positive:
            raise ValueError(f"Cannot filter non-positive size {item}")

    if dimensions:
        ordered = sorted(items, key=lambda d: d.w * d.h, reverse=True)
    else:
        ordered = sorted(items, reverse=True)

    filtered = []
    i, j = 0, 1
    while i < len(ordered):
        kept = ordered[i]
        if j >= len(ordered):
            filtered.append(kept)
            break
        probe = ordered[j]
        if _scale(probe, kept) < factor:
            filtered.append(kept)
            i, j = j, j + 1
        else:
            j += 1

    logger.debug("Filtered %d sizes down to %d (factor %s)", len(items), len(filtered), factor)
    return filtered


def _scale(probe, kept) -> float:
    if isinstance(probe, Dimension):
        return (probe.w / kept.w) * (probe.h / kept.h)
    return (probe / kept) * (probe / kept)
