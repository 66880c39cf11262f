"""
Color resolution for titled box styling.

Colors are accepted either by name (the CSS3 named colors, matched
case-insensitively) or as ``#RGB`` / ``#RRGGBB`` hex values.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

import webcolors

from .errors import InvalidStyleValue

COLOR_SPEC = webcolors.CSS3
TRANSPARENT = "transparent"


@dataclass(frozen=True)
class Color:
    """A resolved RGBA color; equality ignores the name it was resolved from."""

    red: int
    green: int
    blue: int
    alpha: int = 255
    name: Optional[str] = field(default=None, compare=False)

    @property
    def hex(self) -> str:
        return f"#{self.red:02X}{self.green:02X}{self.blue:02X}"

    def to_html(self) -> str:
        """Return the value used in inline CSS."""
        if self.alpha == 0:
            return TRANSPARENT
        if self.name:
            return self.name
        return self.hex


def known_color_names() -> List[str]:
    """Return every color name accepted by :func:`resolve_color`."""
    return sorted({*webcolors.names(COLOR_SPEC), TRANSPARENT})


def resolve_color(value: object, field_name: str = "color") -> Color:
    """
    Resolve a color name or hex string into a :class:`Color`.

    Raises:
        InvalidStyleValue: if ``value`` is not a known name or a hex color.
    """
    if isinstance(value, Color):
        return value
    if not isinstance(value, str):
        raise InvalidStyleValue(field_name, value)

    text = value.strip()
    key = text.lower()
    if key == TRANSPARENT:
        return Color(255, 255, 255, alpha=0, name=TRANSPARENT)

    try:
        if text.startswith("#"):
            rgb = webcolors.hex_to_rgb(text)
            return Color(rgb.red, rgb.green, rgb.blue)
        rgb = webcolors.name_to_rgb(key, spec=COLOR_SPEC)
    except ValueError as exc:
        raise InvalidStyleValue(field_name, value) from exc
    return Color(rgb.red, rgb.green, rgb.blue, name=key)
