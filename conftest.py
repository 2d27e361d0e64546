"""Global test configuration and shared fixtures."""

from __future__ import annotations

import typing as t

import pytest

import path_algebra.platform

pytest_plugins = ("path_algebra.pytest_plugin",)


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "touches_filesystem: test creates real files or directories under tmp_path",
    )


@pytest.fixture(autouse=True)
def reset_path_mode_state(
    monkeypatch: pytest.MonkeyPatch,
) -> t.Generator[None, None, None]:
    """Ensure every test starts from an undetected mode with no override."""
    monkeypatch.delenv(path_algebra.platform.PLATFORM_OVERRIDE_ENV, raising=False)
    path_algebra.platform.reset_mode_cache()
    yield
    path_algebra.platform.reset_mode_cache()
