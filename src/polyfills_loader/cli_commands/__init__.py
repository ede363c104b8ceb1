"""CLI subcommand registration."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all subcommands on the CLI group."""
    from polyfills_loader.cli_commands.build import build
    from polyfills_loader.cli_commands.rules import rules

    cli.add_command(build)
    cli.add_command(rules)
