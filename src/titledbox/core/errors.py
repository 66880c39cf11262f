"""Exceptions raised while configuring and rendering titled boxes."""

from __future__ import annotations

from typing import Any


class TitledBoxError(ValueError):
    """Base class for configuration errors surfaced to the owning page."""


class InvalidStyleValue(TitledBoxError):
    """Raised when a color property cannot be resolved to a color value."""

    def __init__(self, field: str, value: Any) -> None:
        self.field = field
        self.value = value
        super().__init__(f"Invalid color for {field}: {value!r}")


class InvalidDimension(TitledBoxError):
    """Raised when padding or border width is negative or not an integer."""

    def __init__(self, field: str, value: Any) -> None:
        self.field = field
        self.value = value
        super().__init__(f"{field} must be a non-negative integer, got {value!r}")


class WidgetLifecycleError(RuntimeError):
    """Raised when a widget is rendered before it has been configured."""
