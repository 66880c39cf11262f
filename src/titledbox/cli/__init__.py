"""Command-line interface for titledbox."""

from .commands import main

__all__ = ["main"]
