"""Common dependency providers for the web application."""

from __future__ import annotations

from fastapi import HTTPException

from ..core.errors import TitledBoxError
from ..core.models import StyleDefaults
from ..core.settings import get_style_defaults as _cached_style_defaults


def get_style_defaults() -> StyleDefaults:
    """
    FastAPI dependency that yields the process style defaults.

    Tests can override this dependency to inject other defaults.
    """
    try:
        return _cached_style_defaults()
    except TitledBoxError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
