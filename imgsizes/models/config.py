"""Configuration models for the sizes calculator."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from imgsizes.calculator.catalog import DEFAULT_MIN_SCALE, load_default_devices, load_devices
from imgsizes.models.device import Device


class SizerConfig(BaseModel):
    # Device catalog
    devices: list[Device] = Field(default_factory=load_default_devices)
    devices_file: Optional[str] = None  # JSON list of devices, replaces `devices`

    # Filtering
    min_scale: float = DEFAULT_MIN_SCALE

    # Named sizes attributes for batch runs, e.g. {"hero": "100vw"}
    sizes: dict[str, str] = Field(default_factory=dict)

    # Reporting
    report_output_dir: str = "./sizes-reports"

    @field_validator("min_scale")
    @classmethod
    def check_min_scale(cls, v: float) -> float:
        if not 0 < v <= 1:
            raise ValueError(f"min_scale must be in (0, 1], got {v}")
        return v

    def model_post_init(self, __context) -> None:
        if self.devices_file:
            self.devices = load_devices(self.devices_file)

    @classmethod
    def load(cls, path: str | Path) -> "SizerConfig":
        """Load config from a JSON file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        with open(path) as f:
            data = json.load(f)
        return cls(**data)

    def save(self, path: str | Path) -> None:
        """Save config to a JSON file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            json.dump(self.model_dump(), f, indent=2)
