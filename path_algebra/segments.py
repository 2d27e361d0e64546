"""Splitting a path into separator-terminated segments and joining them back."""

from __future__ import annotations

import functools
import re
import typing as t

from .drive import split_drive
from .filename import add_file_name
from .separators import Separators, separators_for

if t.TYPE_CHECKING:
    from .platform import PathMode


@functools.lru_cache(maxsize=None)
def _segment_pattern(path_separators: str) -> re.Pattern[str]:
    # A run of name characters followed by the run of separators after it.
    chars = re.escape(path_separators)
    return re.compile(f"[^{chars}]*[{chars}]*")


def _split_segments(rest: str, seps: Separators) -> list[str]:
    return [
        segment
        for segment in _segment_pattern(seps.path_separators).findall(rest)
        if segment
    ]


def split_path(path: str, *, mode: PathMode | None = None) -> list[str]:
    """Split *path* into segments that each keep their trailing separators.

    ``split_path("test//item/")`` gives ``["test//", "item/"]`` and an
    absolute path starts with its root: ``["/", "file/", "test"]``. Joining
    the segments with ``"".join`` reproduces *path*.
    """
    seps = separators_for(mode)
    drive, rest = split_drive(path, mode=seps.mode)
    segments = [drive] if drive else []
    segments.extend(_split_segments(rest, seps))
    return segments


def split_directories(path: str, *, mode: PathMode | None = None) -> list[str]:
    """Like :func:`split_path` but without trailing separators.

    A leading drive or root is kept whole, and a segment made only of
    separators is kept as is.
    """
    seps = separators_for(mode)
    drive, rest = split_drive(path, mode=seps.mode)
    directories = [drive] if drive else []
    for segment in _split_segments(rest, seps):
        name = segment.rstrip(seps.path_separators)
        directories.append(name or segment)
    return directories


def join_path(segments: t.Iterable[str], *, mode: PathMode | None = None) -> str:
    """Join *segments*, adding a separator only where one is missing."""
    seps = separators_for(mode)
    joined = ""
    for segment in reversed(list(segments)):
        joined = add_file_name(segment, joined, mode=seps.mode)
    return joined


__all__ = ["join_path", "split_directories", "split_path"]
