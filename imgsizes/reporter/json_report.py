"""JSON report output."""

from __future__ import annotations

import json
import time
from pathlib import Path

from imgsizes.calculator.catalog import images_by_orientation
from imgsizes.models.device import ResolvedImage


def build_report(sizes: str, widths: list[int], images: list[ResolvedImage]) -> dict:
    return {
        "sizes": sizes,
        "widths": widths,
        "images": images_by_orientation(images),
        "image_count": len(images),
    }


def generate_json_report(
    sizes: str,
    widths: list[int],
    images: list[ResolvedImage],
    output_path: Path,
) -> None:
    """Write a machine-readable JSON report."""
    report = build_report(sizes, widths, images)
    report["generated_at"] = time.strftime("%Y-%m-%dT%H:%M:%SZ")

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w") as f:
        json.dump(report, f, indent=2)


def generate_batch_report(reports: dict[str, dict], output_path: Path) -> None:
    """Write one JSON document holding a report per named sizes attribute."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w") as f:
        json.dump(
            {"generated_at": time.strftime("%Y-%m-%dT%H:%M:%SZ"), "reports": reports},
            f,
            indent=2,
        )
