"""Platform mode resolution shared across path-algebra modules.

Every grammar-dependent function asks this module which path grammar is
active. Detection happens once per process; tests and callers that need the
other grammar set an explicit override instead of patching ``sys.platform``.
"""

from __future__ import annotations

import contextlib
import enum
import logging
import os
import sys
import threading
import typing as t

from .errors import InvalidModeError

logger = logging.getLogger(__name__)

# Read once, on first detection.
PLATFORM_OVERRIDE_ENV: t.Final[str] = "PATH_ALGEBRA_PLATFORM_OVERRIDE"

# ``sys.platform`` prefixes that select the Windows grammar. ``cygwin`` and
# ``msys`` report POSIX-style paths and therefore stay on the POSIX side.
_WINDOWS_PLATFORM_PREFIXES: t.Final[tuple[str, ...]] = ("win",)
_WINDOWS_PLATFORM_NAMES: t.Final[frozenset[str]] = frozenset({"nt", "windows"})


class PathMode(enum.Enum):
    """The two supported path grammars."""

    POSIX = "posix"
    WINDOWS = "windows"


class ModeOverride(enum.Enum):
    """User-settable switch forcing a grammar regardless of the host."""

    USE_DETECTED = "detected"
    FORCE_POSIX = "posix"
    FORCE_WINDOWS = "windows"

    @property
    def forced_mode(self) -> PathMode | None:
        """Return the mode this override forces, or ``None`` when inert."""
        if self is ModeOverride.FORCE_POSIX:
            return PathMode.POSIX
        if self is ModeOverride.FORCE_WINDOWS:
            return PathMode.WINDOWS
        return None


OverrideLike = t.Union[ModeOverride, PathMode, str, None]


class _ModeState:
    """Write-once detected mode plus the override slot."""

    def __init__(self) -> None:
        self.lock = threading.Lock()
        self.detected: PathMode | None = None
        self.override = ModeOverride.USE_DETECTED


_state = _ModeState()


def _normalise(platform: str) -> str:
    """Return a lowercase version of *platform* suitable for prefix checks."""
    return platform.strip().lower()


def _current_platform(platform: str | None = None) -> str:
    """Return the effective platform name, honouring the environment override."""
    if platform:
        return _normalise(platform)

    if override := os.getenv(PLATFORM_OVERRIDE_ENV):
        return _normalise(override)

    return _normalise(sys.platform)


def detect_mode(platform: str | None = None) -> PathMode:
    """Return the grammar for *platform* (default: the current host).

    Unknown platform names fall back to :attr:`PathMode.POSIX`.
    """
    platform_name = _current_platform(platform)
    if platform_name in _WINDOWS_PLATFORM_NAMES or platform_name.startswith(
        _WINDOWS_PLATFORM_PREFIXES
    ):
        return PathMode.WINDOWS
    return PathMode.POSIX


def _coerce_override(value: OverrideLike) -> ModeOverride:
    if value is None:
        return ModeOverride.USE_DETECTED
    if isinstance(value, ModeOverride):
        return value
    if isinstance(value, PathMode):
        return (
            ModeOverride.FORCE_WINDOWS
            if value is PathMode.WINDOWS
            else ModeOverride.FORCE_POSIX
        )
    if isinstance(value, str):
        name = _normalise(value)
        if name in ("", "detected", "auto"):
            return ModeOverride.USE_DETECTED
        if name in ("posix", "linux", "darwin"):
            return ModeOverride.FORCE_POSIX
        if name in _WINDOWS_PLATFORM_NAMES or name.startswith(
            _WINDOWS_PLATFORM_PREFIXES
        ):
            return ModeOverride.FORCE_WINDOWS
    msg = f"unrecognised platform override: {value!r}"
    raise InvalidModeError(msg)


def get_mode_override() -> ModeOverride:
    """Return the override currently in force."""
    return _state.override


def set_mode_override(value: OverrideLike) -> ModeOverride:
    """Install *value* as the process-wide override and return the previous one.

    Accepts a :class:`ModeOverride`, a :class:`PathMode`, ``None`` (use the
    detected mode) or a platform name such as ``"win32"`` or ``"posix"``.
    """
    override = _coerce_override(value)
    with _state.lock:
        previous = _state.override
        _state.override = override
    if override is not previous:
        logger.debug("Path mode override changed from %s to %s", previous, override)
    return previous


def current_mode() -> PathMode:
    """Return the active grammar, detecting it on first use."""
    forced = _state.override.forced_mode
    if forced is not None:
        return forced

    detected = _state.detected
    if detected is None:
        with _state.lock:
            if _state.detected is None:
                _state.detected = detect_mode()
                logger.debug("Detected path mode %s", _state.detected.value)
            detected = _state.detected
    return detected


def resolve_mode(mode: PathMode | None = None) -> PathMode:
    """Return *mode* when given, else the process-wide active mode."""
    return current_mode() if mode is None else mode


def reset_mode_cache() -> None:
    """Forget the detected mode and clear any override."""
    with _state.lock:
        _state.detected = None
        _state.override = ModeOverride.USE_DETECTED


@contextlib.contextmanager
def forced_mode(value: OverrideLike) -> t.Iterator[PathMode]:
    """Temporarily apply *value* as the override, yielding the active mode."""
    previous = set_mode_override(value)
    try:
        yield current_mode()
    finally:
        set_mode_override(previous)


__all__ = [
    "PLATFORM_OVERRIDE_ENV",
    "ModeOverride",
    "PathMode",
    "current_mode",
    "detect_mode",
    "forced_mode",
    "get_mode_override",
    "reset_mode_cache",
    "resolve_mode",
    "set_mode_override",
]
