"""``polyfills build`` — build polyfill files from a YAML config."""

from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path

import click

from polyfills_loader.cli_commands._output import console, print_polyfill_files


@click.command()
@click.argument("config", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--out",
    "-o",
    "out_dir",
    type=click.Path(file_okay=False),
    default="dist",
    show_default=True,
    help="Directory the polyfills directory is written into.",
)
@click.option("--dry-run", is_flag=True, help="Resolve and build in memory, write nothing.")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.option("--telemetry", is_flag=True, help="Export trace spans to the console.")
def build(
    config: str,
    out_dir: str,
    dry_run: bool,
    as_json: bool,
    verbose: bool,
    telemetry: bool,
) -> None:
    """Build the polyfills described by CONFIG yaml file."""
    from polyfills_loader.core.errors import PolyfillsLoaderError
    from polyfills_loader.sdk.builder import PolyfillsBuilder, write_polyfill_files

    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    if telemetry:
        from polyfills_loader.utils.telemetry import configure_telemetry

        try:
            configure_telemetry()
        except ImportError as exc:
            console.print(f"[red]Telemetry error:[/red] {exc}")
            sys.exit(1)

    try:
        builder = PolyfillsBuilder.from_yaml(config)
        files = asyncio.run(builder.build())
    except PolyfillsLoaderError as exc:
        console.print(f"[red]Build error:[/red] {exc}")
        sys.exit(1)

    print_polyfill_files(files, as_json=as_json)

    if dry_run:
        return

    written = write_polyfill_files(files, Path(out_dir))
    if not as_json:
        console.print(f"[green]Wrote {len(written)} polyfill file(s) to {out_dir}.[/green]")
