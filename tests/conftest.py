"""Pytest configuration and fixtures."""

import pytest

from titledbox.core import settings as settings_module
from titledbox.core.models import StyleDefaults


@pytest.fixture(scope="session", autouse=True)
def isolated_style_defaults():
    """Ensure tests start from built-in defaults regardless of the environment."""

    monkeypatch = pytest.MonkeyPatch()
    for env_var in [*settings_module.COLOR_ENV_VARS.values(), *settings_module.DIMENSION_ENV_VARS.values()]:
        monkeypatch.delenv(env_var, raising=False)
    settings_module.get_style_defaults.cache_clear()
    try:
        yield
    finally:
        settings_module.get_style_defaults.cache_clear()
        monkeypatch.undo()


@pytest.fixture
def defaults():
    """Built-in style defaults."""
    return StyleDefaults()
