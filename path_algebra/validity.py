"""Detection and repair of characters the active grammar cannot store."""

from __future__ import annotations

import typing as t

from .drive import split_drive
from .platform import PathMode
from .separators import separators_for

# Characters Windows refuses outside the drive prefix.
RESERVED_CHARACTERS: t.Final[frozenset[str]] = frozenset(":*?><|")
REPLACEMENT_CHARACTER: t.Final[str] = "_"


def is_valid(path: str, *, mode: PathMode | None = None) -> bool:
    """Return ``True`` if a file could be created under *path*.

    Every string is valid in the POSIX grammar.
    """
    seps = separators_for(mode)
    if seps.mode is PathMode.POSIX:
        return True
    rest = split_drive(path, mode=seps.mode)[1]
    return not any(char in RESERVED_CHARACTERS for char in rest)


def make_valid(path: str, *, mode: PathMode | None = None) -> str:
    """Replace reserved characters outside the drive with ``_``.

    Already valid paths are returned unchanged.
    """
    seps = separators_for(mode)
    if seps.mode is PathMode.POSIX:
        return path
    drive, rest = split_drive(path, mode=seps.mode)
    repaired = "".join(
        REPLACEMENT_CHARACTER if char in RESERVED_CHARACTERS else char
        for char in rest
    )
    return drive + repaired


__all__ = ["REPLACEMENT_CHARACTER", "RESERVED_CHARACTERS", "is_valid", "make_valid"]
