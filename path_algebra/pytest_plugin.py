"""Pytest plugin providing fixtures that force a path grammar."""

from __future__ import annotations

import logging
import typing as t

import pytest

from .platform import ModeOverride, PathMode, forced_mode

logger = logging.getLogger(__name__)

_MODE_CHOICES: t.Final[tuple[str, ...]] = tuple(
    override.value for override in ModeOverride
)


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register command-line and ini options for the plugin."""
    group = parser.getgroup("path_algebra")
    group.addoption(
        "--path-mode",
        action="store",
        dest="path_algebra_mode",
        default=None,
        choices=_MODE_CHOICES,
        help=(
            "Path grammar applied by the path_mode fixture. Overrides the "
            "pytest.ini setting."
        ),
    )
    parser.addini(
        "path_algebra_mode",
        "Path grammar applied by the path_mode fixture.",
        default=ModeOverride.USE_DETECTED.value,
    )


def pytest_configure(config: pytest.Config) -> None:
    """Register plugin-specific markers."""
    config.addinivalue_line(
        "markers",
        "path_mode(mode): force the path grammar used by the path_mode fixture.",
    )


def _requested_override(request: pytest.FixtureRequest) -> object:
    """Return the grammar requested for the current test."""
    # Priority order: marker > fixture param > CLI option > INI setting
    marker = request.node.get_closest_marker("path_mode")
    if marker is not None and marker.args:
        return marker.args[0]

    param = getattr(request, "param", None)
    if param is not None:
        return param

    option = request.config.getoption("path_algebra_mode")
    if option is not None:
        return option

    return request.config.getini("path_algebra_mode")


@pytest.fixture
def path_mode(request: pytest.FixtureRequest) -> t.Iterator[PathMode]:
    """Force the requested grammar for the duration of a test.

    Parametrise indirectly to run a test under both grammars::

        @pytest.mark.parametrize(
            "path_mode", [PathMode.POSIX, PathMode.WINDOWS], indirect=True
        )
    """
    requested = _requested_override(request)
    with forced_mode(t.cast("t.Any", requested)) as mode:
        logger.debug("Running %s with path mode %s", request.node.nodeid, mode)
        yield mode


@pytest.fixture
def posix_mode() -> t.Iterator[PathMode]:
    """Force the POSIX grammar for the duration of a test."""
    with forced_mode(PathMode.POSIX) as mode:
        yield mode


@pytest.fixture
def windows_mode() -> t.Iterator[PathMode]:
    """Force the Windows grammar for the duration of a test."""
    with forced_mode(PathMode.WINDOWS) as mode:
        yield mode


__all__ = ["path_mode", "posix_mode", "windows_mode"]
