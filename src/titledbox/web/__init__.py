"""Web host for titled boxes."""

from .app import create_app

__all__ = ["create_app"]
