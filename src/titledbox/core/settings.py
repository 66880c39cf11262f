"""Process-wide default styling loaded from the environment."""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import Dict

from pydantic import ValidationError

from .models import StyleDefaults, raise_style_error

logger = logging.getLogger(__name__)

ENV_PREFIX = "TITLEDBOX_"
COLOR_ENV_VARS = {
    "text_color": f"{ENV_PREFIX}TEXT_COLOR",
    "back_color": f"{ENV_PREFIX}BACK_COLOR",
    "border_color": f"{ENV_PREFIX}BORDER_COLOR",
}
DIMENSION_ENV_VARS = {
    "padding": f"{ENV_PREFIX}PADDING",
    "border_width": f"{ENV_PREFIX}BORDER_WIDTH",
}


def load_style_defaults() -> StyleDefaults:
    """
    Build :class:`StyleDefaults` from ``TITLEDBOX_*`` environment variables.

    Raises:
        InvalidStyleValue: if a color variable does not resolve.
        InvalidDimension: if a numeric variable is not a non-negative integer.
    """
    overrides: Dict[str, str] = {}
    for field, env_var in {**COLOR_ENV_VARS, **DIMENSION_ENV_VARS}.items():
        raw = os.environ.get(env_var)
        if raw and raw.strip():
            overrides[field] = raw.strip()
    if overrides:
        logger.debug("Style defaults overridden from environment: %s", sorted(overrides))
    try:
        return StyleDefaults(**overrides)
    except ValidationError as exc:
        raise_style_error(exc)


@lru_cache(maxsize=1)
def get_style_defaults() -> StyleDefaults:
    """Return the cached process defaults."""
    return load_style_defaults()
