"""Core models, color resolution and errors for titled boxes."""

from .colors import Color, known_color_names, resolve_color
from .errors import InvalidDimension, InvalidStyleValue, TitledBoxError, WidgetLifecycleError
from .models import FontInfo, StyleDefaults, TitledBoxConfig
from .settings import get_style_defaults, load_style_defaults

__all__ = [
    "Color",
    "FontInfo",
    "InvalidDimension",
    "InvalidStyleValue",
    "StyleDefaults",
    "TitledBoxConfig",
    "TitledBoxError",
    "WidgetLifecycleError",
    "get_style_defaults",
    "known_color_names",
    "load_style_defaults",
    "resolve_color",
]
