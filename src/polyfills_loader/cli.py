"""Polyfills loader CLI entrypoint."""

from __future__ import annotations

import click

from polyfills_loader import __version__


@click.group()
@click.version_option(version=__version__, prog_name="polyfills")
def main() -> None:
    """Build browser polyfill bundles."""


# Register subcommands
from polyfills_loader.cli_commands import register_commands  # noqa: E402

register_commands(main)

if __name__ == "__main__":
    main()
