"""
Command-line interface for titledbox.

Provides the CLI command group and registers individual subcommands.
"""

from __future__ import annotations

import logging

import click

from .. import __version__
from .colors import colors
from .render import render


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", is_flag=True, help="Enable debug logging")
def main(verbose):
    """TitledBox - bordered, titled boxes for server-rendered pages."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Register CLI subcommands
main.add_command(render)
main.add_command(colors)


if __name__ == "__main__":
    main()
