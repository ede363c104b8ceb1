"""``polyfills rules`` — list the built-in polyfill rules."""

from __future__ import annotations

import click

from polyfills_loader.cli_commands._output import print_rules_table
from polyfills_loader.core.rules import POLYFILL_RULES


@click.command()
def rules() -> None:
    """List built-in polyfills in the order they load."""
    print_rules_table(POLYFILL_RULES)
