"""
Render command for the titledbox CLI.

Configures a single box from command-line options and prints the HTML
fragment, or writes it to a file.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click
from rich.console import Console

from ..core.errors import TitledBoxError
from ..core.settings import COLOR_ENV_VARS, DIMENSION_ENV_VARS
from ..widgets.titled_box import TitledBox

OPTION_FLAGS = {
    "text_color": "--text-color",
    "back_color": "--back-color",
    "padding": "--padding",
    "border_color": "--border-color",
    "border_width": "--border-width",
}


def _param_hint(exc: TitledBoxError, supplied: dict) -> Optional[str]:
    """Name the option, or the environment variable, that carried the bad value."""
    field = getattr(exc, "field", None)
    if field is None:
        return None
    if supplied.get(field) is not None:
        return OPTION_FLAGS.get(field)
    return {**COLOR_ENV_VARS, **DIMENSION_ENV_VARS}.get(field)


@click.command()
@click.option("--title", default=None, help="Box caption; omit to get a hidden box")
@click.option("--text-color", default=None, help="Title text color")
@click.option("--back-color", default=None, help="Inner frame background color")
@click.option("--padding", type=int, default=None, help="Inner frame cell padding")
@click.option("--border-color", default=None, help="Border color")
@click.option("--border-width", type=int, default=None, help="Border thickness")
@click.option("--content", default="", help="Text placed in the content row")
@click.option(
    "--output",
    "output_path",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write the fragment to a file instead of stdout",
)
def render(  # noqa: PLR0913
    title: Optional[str],
    text_color: Optional[str],
    back_color: Optional[str],
    padding: Optional[int],
    border_color: Optional[str],
    border_width: Optional[int],
    content: str,
    output_path: Optional[str],
):
    """Render a titled box as an HTML fragment."""
    console = Console(stderr=True)
    supplied = {
        "title": title,
        "text_color": text_color,
        "back_color": back_color,
        "padding": padding,
        "border_color": border_color,
        "border_width": border_width,
    }
    try:
        box = TitledBox(**{name: value for name, value in supplied.items() if value is not None})
        visible = box.configure()
    except TitledBoxError as exc:
        raise click.BadParameter(str(exc), param_hint=_param_hint(exc, supplied)) from exc

    if not visible:
        console.print("[yellow]No title given; the box is hidden and renders nothing.[/yellow]")
        return

    html = str(box.render(content))
    if output_path:
        Path(output_path).write_text(html + "\n", encoding="utf-8")
        console.print(f"[green]Wrote {output_path}[/green]")
    else:
        click.echo(html)
