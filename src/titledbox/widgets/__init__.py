"""Renderable widgets."""

from .elements import Label, Table
from .titled_box import TitledBox, render_titled_box

__all__ = ["Label", "Table", "TitledBox", "render_titled_box"]
