"""Pytest configuration and shared fixtures."""

import json
from pathlib import Path

import pytest

from imgsizes.models.device import Device
from imgsizes.models.sizes import Condition, SizeRule


# ============================================================================
# Device Fixtures
# ============================================================================


@pytest.fixture
def desktop() -> Device:
    """An 800x700 screen that cannot rotate."""
    return Device(w=800, h=700, densities=[1], can_rotate=False, name="desktop")


@pytest.fixture
def phone() -> Device:
    """A 375x667 retina phone that can rotate."""
    return Device(w=375, h=667, densities=[2], can_rotate=True, name="phone")


@pytest.fixture
def small_catalog(desktop: Device, phone: Device) -> list[Device]:
    return [desktop, phone]


@pytest.fixture
def devices_file(tmp_path: Path) -> Path:
    """A catalog file written with the historical dppx/flip keys."""
    path = tmp_path / "devices.json"
    path.write_text(json.dumps([
        {"w": 800, "h": 700, "dppx": [1], "flip": False},
        {"w": 375, "h": 667, "dppx": [2], "flip": True},
    ]))
    return path


# ============================================================================
# Sizes Fixtures
# ============================================================================


@pytest.fixture
def breakpoint_rules() -> list[SizeRule]:
    """`(min-width: 680px) 400px, 500px` as parsed rules."""
    return [
        SizeRule(
            conditions=[Condition(media_feature="min-width", value="680px")],
            width="400px",
        ),
        SizeRule(conditions=[], width="500px"),
    ]


@pytest.fixture
def scenario_widths() -> list[int]:
    return [200, 250, 380, 800, 801, 1000, 1050, 1100, 1440, 1900, 2000]
