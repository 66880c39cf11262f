"""
TitledBox - bordered, titled boxes for server-rendered HTML pages.

A box draws a colored border around a padded content area with a bold
title row, and hides itself when no title is set.
"""

__version__ = "0.1.0"

from .core.colors import Color, resolve_color
from .core.errors import InvalidDimension, InvalidStyleValue, TitledBoxError, WidgetLifecycleError
from .core.models import FontInfo, StyleDefaults, TitledBoxConfig
from .core.settings import get_style_defaults
from .widgets.titled_box import TitledBox, render_titled_box

__all__ = [
    "Color",
    "FontInfo",
    "InvalidDimension",
    "InvalidStyleValue",
    "StyleDefaults",
    "TitledBox",
    "TitledBoxConfig",
    "TitledBoxError",
    "WidgetLifecycleError",
    "get_style_defaults",
    "render_titled_box",
    "resolve_color",
]
