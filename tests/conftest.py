"""Pytest configuration shared by the whole suite."""

from __future__ import annotations

import pytest

from tests import _ensure_repo_on_path


def pytest_configure(config: pytest.Config) -> None:
    """Make the repository importable before any test module loads."""

    _ensure_repo_on_path()


@pytest.fixture(autouse=True)
def _isolate_settings_cache():
    """Drop the cached ``AppSettings`` so env tweaks in one test never leak."""

    from pokedex_api.settings import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
