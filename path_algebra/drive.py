"""Drive and root prefixes: splitting them off a path and putting them back.

A POSIX path has at most the single root ``/``. A Windows path may start
with a drive letter (``C:`` or ``C:\\``) or a UNC share prefix
(``\\\\server\\share\\``). In every case ``root + rest`` reproduces the
input exactly.
"""

from __future__ import annotations

import string
import typing as t

from .platform import PathMode
from .separators import Separators, separators_for

# Only ASCII letters name drives.
_DRIVE_LETTERS: t.Final[frozenset[str]] = frozenset(string.ascii_letters)


def _find_separator(path: str, start: int, seps: Separators) -> int:
    """Return the index of the first separator at or after *start*, or -1."""
    for index in range(start, len(path)):
        if path[index] in seps.path_separators:
            return index
    return -1


def _split_windows_drive(path: str, seps: Separators) -> tuple[str, str]:
    if len(path) >= 2 and path[0] in _DRIVE_LETTERS and path[1] == ":":
        if len(path) == 2:
            return path, ""
        if seps.is_path_separator(path[2]):
            return path[:3], path[3:]

    if len(path) >= 2 and seps.is_path_separator(path[0]) and seps.is_path_separator(
        path[1]
    ):
        # UNC: the root runs through ``\\server\share\``; a prefix that stops
        # early is all root.
        server_end = _find_separator(path, 2, seps)
        if server_end < 0:
            return path, ""
        share_end = _find_separator(path, server_end + 1, seps)
        if share_end < 0:
            return path, ""
        return path[: share_end + 1], path[share_end + 1 :]

    return "", path


def split_drive(path: str, *, mode: PathMode | None = None) -> tuple[str, str]:
    """Split *path* into its root/drive prefix and the remainder."""
    seps = separators_for(mode)
    if seps.mode is PathMode.POSIX:
        if path[:1] == seps.path_separator:
            return path[:1], path[1:]
        return "", path
    return _split_windows_drive(path, seps)


def join_drive(drive: str, rest: str, *, mode: PathMode | None = None) -> str:
    """Join a drive and the rest of a path; inverse of :func:`split_drive`."""
    seps = separators_for(mode)
    if seps.mode is PathMode.POSIX or not drive or not rest:
        return drive + rest
    if seps.ends_with_separator(drive):
        return drive + rest
    return drive + seps.path_separator + rest


def get_drive(path: str, *, mode: PathMode | None = None) -> str:
    """Return the drive/root prefix of *path* (``""`` when relative)."""
    return split_drive(path, mode=mode)[0]


def drop_drive(path: str, *, mode: PathMode | None = None) -> str:
    """Return *path* without its drive/root prefix."""
    return split_drive(path, mode=mode)[1]


def set_drive(path: str, drive: str, *, mode: PathMode | None = None) -> str:
    """Replace the drive of *path* with *drive*."""
    seps = separators_for(mode)
    return join_drive(drive, drop_drive(path, mode=seps.mode), mode=seps.mode)


def has_drive(path: str, *, mode: PathMode | None = None) -> bool:
    """Return ``True`` when *path* carries a drive/root prefix."""
    return bool(get_drive(path, mode=mode))


def is_relative(path: str, *, mode: PathMode | None = None) -> bool:
    """Return ``True`` when *path* is not anchored to a root or drive."""
    return not has_drive(path, mode=mode)


def is_absolute(path: str, *, mode: PathMode | None = None) -> bool:
    """Return ``True`` when *path* is anchored to a root or drive."""
    return not is_relative(path, mode=mode)


__all__ = [
    "drop_drive",
    "get_drive",
    "has_drive",
    "is_absolute",
    "is_relative",
    "join_drive",
    "set_drive",
    "split_drive",
]
