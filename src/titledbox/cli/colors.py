"""Colors command: list the color names a box accepts."""

from __future__ import annotations

from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from ..core.colors import known_color_names, resolve_color


def _build_colors_table(names: list[str]) -> Table:
    table = Table(title="Known colors")
    table.add_column("Name", style="cyan")
    table.add_column("Hex", justify="right")
    table.add_column("Swatch")

    for name in names:
        color = resolve_color(name)
        swatch = "" if color.alpha == 0 else f"[on {color.hex}]      [/]"
        table.add_row(name, color.hex if color.alpha else "--", swatch)
    return table


@click.command()
@click.option("--match", "pattern", default=None, help="Only list names containing this text")
def colors(pattern: Optional[str]):
    """List the named colors accepted for text, background and border colors."""
    console = Console()
    names = known_color_names()
    if pattern:
        names = [name for name in names if pattern.lower() in name]
    if not names:
        console.print(f"[yellow]No colors match: {pattern}[/yellow]")
        return
    console.print(_build_colors_table(names))
