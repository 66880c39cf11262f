"""
Data models for titled box configuration.

``TitledBoxConfig`` is the record a page fills in for one box, and
``StyleDefaults`` holds the values a box starts from when the page leaves
a property unset. Both validate colors and dimensions on construction.
"""

from typing import NoReturn, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .colors import resolve_color
from .errors import InvalidDimension, InvalidStyleValue, TitledBoxError

COLOR_FIELDS = ("text_color", "back_color", "border_color")
DIMENSION_FIELDS = ("padding", "border_width")


def raise_style_error(exc: ValidationError) -> NoReturn:
    """Re-raise the first failure of a model validation as a :class:`TitledBoxError`."""
    error = exc.errors()[0]
    original = (error.get("ctx") or {}).get("error")
    if isinstance(original, TitledBoxError):
        raise original from exc
    field = str(error["loc"][0]) if error["loc"] else ""
    if field in DIMENSION_FIELDS:
        raise InvalidDimension(field, error.get("input")) from exc
    if field in COLOR_FIELDS:
        raise InvalidStyleValue(field, error.get("input")) from exc
    raise TitledBoxError(f"Invalid {field or 'configuration'}: {error['msg']}") from exc


class FontInfo(BaseModel):
    """Font applied to the title label."""

    model_config = ConfigDict(frozen=True)

    name: str = Field("Verdana", description="Font family")
    bold: bool = Field(True, description="Render the title in bold")
    size: str = Field("13pt", description="CSS font size")

    @field_validator("size", mode="before")
    @classmethod
    def default_unit_to_points(cls, v):
        text = str(v).strip()
        if text.isdigit():
            return f"{text}pt"
        return text


class StyleDefaults(BaseModel):
    """Static default styling injected into every box at construction time."""

    model_config = ConfigDict(frozen=True)

    text_color: str = Field("black", description="Title text color")
    back_color: str = Field("wheat", description="Inner frame background")
    padding: int = Field(2, ge=0, description="Inner frame cell padding")
    border_color: str = Field("gray", description="Outer frame background")
    border_width: int = Field(1, ge=0, description="Outer frame cell spacing")
    title_font: FontInfo = Field(default_factory=FontInfo, description="Title label font")

    @field_validator(*COLOR_FIELDS)
    @classmethod
    def validate_color(cls, v, info):
        resolve_color(v, info.field_name)
        return v.strip()

    def to_config(self, title: Optional[str] = None) -> "TitledBoxConfig":
        """Build a config that uses these defaults for every style property."""
        return TitledBoxConfig(
            title=title,
            text_color=self.text_color,
            back_color=self.back_color,
            padding=self.padding,
            border_color=self.border_color,
            border_width=self.border_width,
        )


class TitledBoxConfig(BaseModel):
    """The six public properties of a titled box."""

    title: Optional[str] = Field(None, description="Box caption; empty hides the box")
    text_color: str = Field("black", description="Title text color")
    back_color: str = Field("wheat", description="Inner frame background")
    padding: int = Field(2, ge=0, strict=True, description="Inner frame cell padding")
    border_color: str = Field("gray", description="Outer frame background")
    border_width: int = Field(1, ge=0, strict=True, description="Outer frame cell spacing")

    @field_validator(*COLOR_FIELDS)
    @classmethod
    def validate_color(cls, v, info):
        resolve_color(v, info.field_name)
        return v

    @property
    def has_title(self) -> bool:
        return bool(self.title)
