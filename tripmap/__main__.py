"""CLI entrypoint for inspecting and exporting continuation annotations.

Usage:
    python -m tripmap <annotations.yaml> [--config config.yaml] [--json]
                      [--output out.geojson] [--verbose]
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from tripmap.annotate.geojson_writer import annotations_to_feature_collection, write_geojson
from tripmap.config import TripMapConfig
from tripmap.errors import AnnotationLoadError
from tripmap.loader import load_annotations
from tripmap.types import TripContinuationAnnotation

console = Console()


def _build_annotation_table(annotations: list[TripContinuationAnnotation]) -> Table:
    """Build the annotation listing table."""
    table = Table(title="Trip Continuations", show_lines=True)
    table.add_column("#", style="cyan", width=4)
    table.add_column("Title", style="bold")
    table.add_column("Trip")
    table.add_column("Vehicle")
    table.add_column("Latitude", justify="right")
    table.add_column("Longitude", justify="right")

    for i, ann in enumerate(annotations):
        lat, lon = ann.coordinate
        ref = ann.trip_reference
        table.add_row(
            str(i),
            escape(ann.title) or "[dim](empty)[/dim]",
            escape(ref.trip_id),
            escape(ref.vehicle_id or "-"),
            f"{lat:.6f}",
            f"{lon:.6f}",
        )
    return table


def _build_summary_panel(annotations, source: Path, output: Path | None) -> Panel:
    """Build the load summary panel."""
    trips = {ann.trip_reference for ann in annotations}
    lines = [
        f"[bold]Source:[/bold] {source}",
        f"[bold]Annotations:[/bold] {len(annotations)}",
        f"[bold]Distinct trips:[/bold] {len(trips)}",
    ]
    if output is not None:
        lines.append(f"[bold]GeoJSON written to:[/bold] {output}")
    return Panel("\n".join(lines), title="Summary", border_style="blue")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Inspect trip continuation annotations and export them as GeoJSON.",
        prog="python -m tripmap",
    )
    parser.add_argument("annotations", type=Path, help="Path to annotations YAML")
    parser.add_argument("--config", type=Path, default=None, help="TripMap config YAML")
    parser.add_argument("--json", action="store_true", help="Print GeoJSON instead of rich report")
    parser.add_argument("--output", type=Path, default=None, help="Write GeoJSON to this file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable INFO logging")
    args = parser.parse_args(argv)

    logging.getLogger("tripmap").setLevel(logging.INFO if args.verbose else logging.WARNING)
    if args.verbose:
        logging.basicConfig(
            level=logging.INFO,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_time=True, show_path=False)],
        )
    else:
        logging.basicConfig(level=logging.WARNING)

    if not args.annotations.is_file():
        console.print(f"[red]Error: {args.annotations} not found[/red]")
        return 1

    try:
        config = TripMapConfig.from_yaml(args.config) if args.config else TripMapConfig.default()
    except (OSError, yaml.YAMLError, ValidationError) as e:
        console.print(f"[red]Error: invalid config {args.config}: {escape(str(e))}[/red]")
        return 1

    try:
        annotations = load_annotations(args.annotations, config.annotation)
    except AnnotationLoadError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        return 1

    if args.output is not None:
        write_geojson(
            args.output,
            annotations,
            include_trip=config.export.include_trip,
            indent=config.export.indent,
        )

    if args.json:
        collection = annotations_to_feature_collection(
            annotations, include_trip=config.export.include_trip
        )
        print(json.dumps(collection, indent=config.export.indent, ensure_ascii=False))
        return 0

    console.print()
    console.print(_build_annotation_table(annotations))
    console.print()
    console.print(_build_summary_panel(annotations, args.annotations, args.output))
    return 0


if __name__ == "__main__":
    sys.exit(main())
