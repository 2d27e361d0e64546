"""Directory helpers layered over the pure path functions.

These are the only path operations with side effects. They reach the disk
and the process environment exclusively through the injected
:class:`~path_algebra.filesystem.FileSystem` and
:class:`~path_algebra.environment.HostEnvironment` collaborators.
"""

from __future__ import annotations

import logging
import typing as t

from .compare import full_path_with, short_path_with
from .drive import join_drive, split_drive
from .environment import ProcessEnvironment
from .errors import FileSystemError, IOErrorKind
from .filename import combine
from .filesystem import LocalFileSystem
from .normalise import normalise
from .segments import split_path
from .separators import separators_for

if t.TYPE_CHECKING:
    from .environment import HostEnvironment
    from .filesystem import FileSystem
    from .platform import PathMode

logger = logging.getLogger(__name__)

# Entries naming the directory itself or its parent.
_ALIAS_ENTRIES: t.Final[frozenset[str]] = frozenset({".", ".."})


def _create_level(level: str, filesystem: FileSystem) -> None:
    """Create *level*, accepting a directory created concurrently."""
    try:
        filesystem.create_directory(level)
    except FileSystemError as exc:
        if exc.kind is IOErrorKind.ALREADY_EXISTS and filesystem.directory_exists(
            level
        ):
            logger.debug("Directory %s appeared concurrently", level)
            return
        raise


def ensure_directory(
    path: str,
    *,
    filesystem: FileSystem | None = None,
    mode: PathMode | None = None,
) -> list[str]:
    """Create *path* and any missing parents, like ``mkdir -p``.

    Walks the segments of the normalised *path* from the outermost inwards,
    creating each level that does not yet exist.

    Parameters
    ----------
    path : str
        The directory to create.
    filesystem : FileSystem | None, optional
        Filesystem collaborator. Defaults to :class:`LocalFileSystem`.
    mode : PathMode | None, optional
        Grammar used to split *path*. Defaults to the active mode.

    Returns
    -------
    list[str]
        The levels that were created, outermost first.

    Raises
    ------
    FileSystemError
        When a level cannot be created, or a non-directory occupies it.
    """
    seps = separators_for(mode)
    fs = filesystem if filesystem is not None else LocalFileSystem()
    drive, rest = split_drive(normalise(path, mode=seps.mode), mode=seps.mode)
    segments = split_path(rest, mode=seps.mode)
    if not segments:
        return []

    created: list[str] = []
    level = join_drive(drive, segments[0], mode=seps.mode)
    remaining = segments[1:]
    while True:
        if not fs.directory_exists(level):
            _create_level(level, fs)
            created.append(level)
            logger.debug("Ensured directory level %s", level)
        if not remaining:
            return created
        level = combine(level, remaining.pop(0), mode=seps.mode)


def get_directory_list(
    path: str,
    *,
    filesystem: FileSystem | None = None,
    mode: PathMode | None = None,
) -> list[str]:
    """Return the names of the sub-directories of *path*.

    The ``.`` and ``..`` aliases are never reported.
    """
    seps = separators_for(mode)
    fs = filesystem if filesystem is not None else LocalFileSystem()
    return [
        entry
        for entry in fs.list_directory_entries(path)
        if entry not in _ALIAS_ENTRIES
        and fs.directory_exists(combine(path, entry, mode=seps.mode))
    ]


def full_path(
    path: str,
    *,
    environment: HostEnvironment | None = None,
    mode: PathMode | None = None,
) -> str:
    """Resolve *path* against the current working directory."""
    env = environment if environment is not None else ProcessEnvironment()
    return full_path_with(env.current_working_directory(), path, mode=mode)


def short_path(
    path: str,
    *,
    environment: HostEnvironment | None = None,
    mode: PathMode | None = None,
) -> str:
    """Express *path* relative to the current working directory if possible."""
    env = environment if environment is not None else ProcessEnvironment()
    return short_path_with(env.current_working_directory(), path, mode=mode)


__all__ = ["ensure_directory", "full_path", "get_directory_list", "short_path"]
