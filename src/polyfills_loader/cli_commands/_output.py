"""Shared CLI output formatters."""

from __future__ import annotations

import json

from rich.console import Console
from rich.table import Table

from polyfills_loader.core.models import PolyfillFile  # noqa: TC001
from polyfills_loader.core.rules import PolyfillRule  # noqa: TC001

console = Console()


def print_polyfill_files(files: list[PolyfillFile], *, as_json: bool = False) -> None:
    """Pretty-print built polyfill files (content omitted)."""
    if as_json:
        data = [f.model_dump(mode="json", exclude={"content"}) for f in files]
        console.print_json(json.dumps(data))
        return

    if not files:
        console.print("No polyfills configured.")
        return

    table = Table(title="Polyfills")
    table.add_column("#", justify="right")
    table.add_column("Name", style="cyan")
    table.add_column("Type")
    table.add_column("Path")
    table.add_column("Size", justify="right")
    table.add_column("Test")

    for index, polyfill in enumerate(files, start=1):
        table.add_row(
            str(index),
            polyfill.name,
            polyfill.type.value,
            polyfill.path,
            str(len(polyfill.content)),
            _truncate(polyfill.test or "(always)"),
        )

    console.print(table)


def print_rules_table(rules: tuple[PolyfillRule, ...]) -> None:
    """Pretty-print the rule table in load order."""
    table = Table(title="Polyfill Rules (load order)")
    table.add_column("#", justify="right")
    table.add_column("Name", style="cyan")

    for index, rule in enumerate(rules, start=1):
        table.add_row(str(index), rule.name)
    table.add_row(str(len(rules) + 1), "custom", style="dim")

    console.print(table)


def _truncate(text: str, max_len: int = 60) -> str:
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."
