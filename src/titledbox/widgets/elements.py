"""
Child visual elements used by the titled box.

The elements mirror the small slice of a web forms table and label control
that the box needs: settable presentation properties plus the attribute and
inline-style strings the templates emit.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..core.colors import Color
from ..core.models import FontInfo


def _style_string(declarations: List[Tuple[str, str]]) -> str:
    return "".join(f"{prop}:{value};" for prop, value in declarations)


@dataclass
class Table:
    """A table whose background, spacing and padding can be set."""

    background_color: Optional[Color] = None
    cell_spacing: Optional[int] = None
    cell_padding: Optional[int] = None
    border: int = 0

    @property
    def is_styled(self) -> bool:
        return (
            self.background_color is not None
            or self.cell_spacing is not None
            or self.cell_padding is not None
        )

    @property
    def style(self) -> str:
        declarations: List[Tuple[str, str]] = []
        if self.background_color is not None:
            declarations.append(("background-color", self.background_color.to_html()))
        declarations.append(("width", "100%"))
        return _style_string(declarations)

    @property
    def spacing(self) -> int:
        return self.cell_spacing if self.cell_spacing is not None else 0

    @property
    def padding(self) -> int:
        return self.cell_padding if self.cell_padding is not None else 0


@dataclass
class Label:
    """A text span with a foreground color and font."""

    text: str = ""
    fore_color: Optional[Color] = None
    font: Optional[FontInfo] = None

    @property
    def is_styled(self) -> bool:
        return bool(self.text) or self.fore_color is not None or self.font is not None

    @property
    def style(self) -> str:
        declarations: List[Tuple[str, str]] = []
        if self.fore_color is not None:
            declarations.append(("color", self.fore_color.to_html()))
        if self.font is not None:
            declarations.append(("font-family", self.font.name))
            declarations.append(("font-size", self.font.size))
            if self.font.bold:
                declarations.append(("font-weight", "bold"))
        return _style_string(declarations)
