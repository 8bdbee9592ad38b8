"""CLI entry point for the sizes calculator."""

from __future__ import annotations

import logging
import sys
import time
from pathlib import Path
from typing import NoReturn, Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from imgsizes.calculator.catalog import catalog_images, device_images, widths_from_sizes
from imgsizes.errors import SizesError
from imgsizes.filtering.similarity import filter_sizes
from imgsizes.models.config import SizerConfig
from imgsizes.models.device import Device, ResolvedImage
from imgsizes.reporter.json_report import build_report, generate_batch_report, generate_json_report

console = Console()

DEFAULT_CONFIG = "sizes-config.json"


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )


def load_config(path: str) -> SizerConfig:
    """Load the config file, or the defaults when the default file is absent."""
    if path == DEFAULT_CONFIG and not Path(path).exists():
        return SizerConfig()
    try:
        return SizerConfig.load(path)
    except FileNotFoundError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        console.print("Run 'imgsizes init' to create a default config.")
        sys.exit(1)


def fail(message: object) -> NoReturn:
    console.print(f"[red]{escape(str(message))}[/red]")
    sys.exit(1)


def images_table(title: str, images: list[ResolvedImage]) -> Table:
    table = Table(title=title)
    table.add_column("Width", justify="right", style="bold")
    table.add_column("Density", justify="right")
    table.add_column("Orientation")
    for image in images:
        table.add_row(str(image.w), f"{image.density:g}x", image.orientation)
    return table


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Responsive image width calculator for img sizes attributes"""
    setup_logging(verbose)


@cli.command()
@click.argument("sizes")
@click.option("--min-scale", type=float, default=None, help="Similarity factor (default from config)")
@click.option("--output", "-o", default=None, help="Write a JSON report to this path")
@click.option("--config", "-c", default=DEFAULT_CONFIG, help="Config file path")
def widths(sizes: str, min_scale: Optional[float], output: Optional[str], config: str) -> None:
    """Compute the image widths to generate for a sizes attribute."""
    cfg = load_config(config)
    try:
        result = widths_from_sizes(
            sizes,
            min_scale=min_scale if min_scale is not None else cfg.min_scale,
            devices=cfg.devices,
        )
        images = catalog_images(sizes, cfg.devices) if output else []
    except SizesError as e:
        fail(e)

    console.print(" ".join(str(w) for w in result))
    if output:
        generate_json_report(sizes, result, images, Path(output))
        console.print(f"  JSON report: [blue]{output}[/blue]")


@cli.command()
@click.argument("sizes")
@click.option("--width", "-w", type=float, required=True, help="Device width in CSS px")
@click.option("--height", "-h", "height", type=float, required=True, help="Device height in CSS px")
@click.option("--density", "-d", type=float, multiple=True, default=(1.0,), help="Pixel density (repeatable)")
@click.option("--rotate/--no-rotate", default=False, help="Also resolve the rotated device")
def images(sizes: str, width: float, height: float, density: tuple[float, ...], rotate: bool) -> None:
    """Show the images a single device needs."""
    try:
        device = Device(w=width, h=height, densities=density, can_rotate=rotate)
        result = device_images(sizes, device)
    except (SizesError, ValueError) as e:
        fail(e)
    console.print(images_table(f"{width:g}x{height:g}", result))


@cli.command()
@click.argument("sizes")
@click.option("--config", "-c", default=DEFAULT_CONFIG, help="Config file path")
def catalog(sizes: str, config: str) -> None:
    """Show the distinct images needed across the device catalog."""
    cfg = load_config(config)
    try:
        result = catalog_images(sizes, cfg.devices)
    except SizesError as e:
        fail(e)
    result = sorted(result, key=lambda i: (i.orientation, -i.w))
    console.print(images_table(f"{len(cfg.devices)} devices", result))


@cli.command("filter")
@click.argument("values", nargs=-1, type=float, required=True)
@click.option("--factor", "-f", type=float, default=0.8, help="Similarity factor")
def filter_command(values: tuple[float, ...], factor: float) -> None:
    """Drop widths too similar to a larger one."""
    try:
        result = filter_sizes(list(values), factor)
    except ValueError as e:
        fail(e)
    console.print(" ".join(f"{v:g}" for v in result))


@cli.command()
@click.option("--config", "-c", default=DEFAULT_CONFIG, help="Config file path")
def devices(config: str) -> None:
    """List the configured device catalog."""
    cfg = load_config(config)
    table = Table(title="Devices")
    table.add_column("Name", style="bold")
    table.add_column("Size", justify="right")
    table.add_column("Densities")
    table.add_column("Rotates")
    for d in cfg.devices:
        table.add_row(
            d.name,
            f"{d.w:g}x{d.h:g}",
            ", ".join(f"{x:g}" for x in d.densities),
            "yes" if d.can_rotate else "no",
        )
    console.print(table)


@cli.command()
@click.option("--config", "-c", default=DEFAULT_CONFIG, help="Config file path")
def batch(config: str) -> None:
    """Compute widths for every named sizes attribute in the config."""
    cfg = load_config(config)
    if not cfg.sizes:
        console.print("[yellow]No sizes configured[/yellow]")
        return

    reports: dict[str, dict] = {}
    for name, sizes in cfg.sizes.items():
        try:
            result = widths_from_sizes(sizes, min_scale=cfg.min_scale, devices=cfg.devices)
            reports[name] = build_report(sizes, result, catalog_images(sizes, cfg.devices))
        except SizesError as e:
            fail(f"{name}: {e}")
        console.print(f"[green]{name}:[/green] {' '.join(str(w) for w in result)}")

    output_path = Path(cfg.report_output_dir) / f"sizes-{time.strftime('%Y%m%d-%H%M%S')}.json"
    generate_batch_report(reports, output_path)
    console.print(f"  JSON report: [blue]{output_path}[/blue]")


@cli.command()
def init() -> None:
    """Create a default configuration file."""
    config_path = Path(DEFAULT_CONFIG)
    if config_path.exists():
        if not click.confirm(f"{DEFAULT_CONFIG} already exists. Overwrite?"):
            return

    cfg = SizerConfig(sizes={"full-width": "100vw"})
    cfg.save(config_path)
    console.print(f"[green]Created {config_path}[/green]")
    console.print("\nAdd named sizes attributes to it and run:")
    console.print("  [blue]imgsizes batch[/blue]")


if __name__ == "__main__":
    cli()
