"""Path equality and conversion between absolute and relative forms.

Everything here is lexical. Symlinks, mount points and filesystem case
tables are never consulted, so two paths that compare unequal may still name
the same file.
"""

from __future__ import annotations

import typing as t

from .drive import is_relative, split_drive
from .filename import combine
from .normalise import normalise
from .platform import PathMode
from .segments import join_path, split_directories, split_path
from .separators import Separators, separators_for

_PARENT: t.Final[str] = ".."

_ASCII_LOWER: t.Final[dict[int, int]] = {
    code: code + 32 for code in range(ord("A"), ord("Z") + 1)
}


def _fold_case(text: str, seps: Separators) -> str:
    """Lowercase ASCII letters when the grammar is case-insensitive."""
    if seps.mode is PathMode.WINDOWS:
        return text.translate(_ASCII_LOWER)
    return text


def _comparison_key(path: str, seps: Separators) -> str:
    normalised = normalise(path, mode=seps.mode)
    if seps.ends_with_separator(normalised):
        normalised = normalised[:-1]
    return _fold_case(normalised, seps)


def equal_file_path(left: str, right: str, *, mode: PathMode | None = None) -> bool:
    """Return ``True`` if *left* and *right* normalise to the same path.

    One trailing separator is ignored and the Windows grammar compares ASCII
    letters case-insensitively.
    """
    seps = separators_for(mode)
    return _comparison_key(left, seps) == _comparison_key(right, seps)


def full_path_with(base: str, path: str, *, mode: PathMode | None = None) -> str:
    """Resolve *path* against the directory *base* and normalise the result.

    An absolute *path* ignores *base*: ``full_path_with("/file/test/", "../bob")``
    is ``"/file/bob"`` while ``full_path_with("/file/test/", "/bob/dave")`` is
    ``"/bob/dave"``.
    """
    seps = separators_for(mode)
    return normalise(combine(base, path, mode=seps.mode), mode=seps.mode)


def short_path_with(base: str, path: str, *, mode: PathMode | None = None) -> str:
    """Express *path* relative to the directory *base* where possible.

    When either path is relative or their drives differ no relative form
    exists and the normalised *path* is returned. Otherwise one ``..`` is
    emitted for every component of *base* beyond the common prefix, followed
    by the rest of *path*::

        short_path_with("/fred/dave", "/fred/bill") == "../bill"
        short_path_with("/file/test", "/file/test/fred/") == "fred/"

    Identical paths yield ``""``.
    """
    seps = separators_for(mode)
    target = normalise(path, mode=seps.mode)
    if is_relative(path, mode=seps.mode) or is_relative(base, mode=seps.mode):
        return target

    target_drive, target_rest = split_drive(target, mode=seps.mode)
    base_drive, base_rest = split_drive(normalise(base, mode=seps.mode), mode=seps.mode)
    if _fold_case(target_drive, seps) != _fold_case(base_drive, seps):
        return target

    target_segments = split_path(target_rest, mode=seps.mode)
    target_names = [
        _fold_case(name, seps)
        for name in split_directories(target_rest, mode=seps.mode)
    ]
    base_names = [
        _fold_case(name, seps) for name in split_directories(base_rest, mode=seps.mode)
    ]

    common = 0
    for target_name, base_name in zip(target_names, base_names):
        if target_name != base_name:
            break
        common += 1

    relative = [_PARENT] * (len(base_names) - common) + target_segments[common:]
    return join_path(relative, mode=seps.mode)


__all__ = ["equal_file_path", "full_path_with", "short_path_with"]
