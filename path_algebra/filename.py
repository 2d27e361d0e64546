"""Directory/file-name decomposition of a path."""

from __future__ import annotations

import typing as t

from .drive import is_absolute, split_drive
from .separators import separators_for

if t.TYPE_CHECKING:
    from .platform import PathMode


def split_file_name(path: str, *, mode: PathMode | None = None) -> tuple[str, str]:
    """Split *path* into a directory prefix and the final component.

    The directory keeps its trailing separator and the drive root, so the two
    halves concatenate back to *path*. ``"file/"`` splits into
    ``("file/", "")`` and ``"bob"`` into ``("", "bob")``.
    """
    seps = separators_for(mode)
    drive, rest = split_drive(path, mode=seps.mode)
    cut = max(rest.rfind(sep) for sep in seps.path_separators) + 1
    return drive + rest[:cut], rest[cut:]


def add_file_name(directory: str, name: str, *, mode: PathMode | None = None) -> str:
    """Append *name* to *directory*, inserting a separator when needed."""
    seps = separators_for(mode)
    if not directory:
        return name
    if not name or seps.ends_with_separator(directory):
        return directory + name
    return directory + seps.path_separator + name


def join_file_name(directory: str, name: str, *, mode: PathMode | None = None) -> str:
    """Inverse of :func:`split_file_name`."""
    return add_file_name(directory, name, mode=mode)


def get_file_name(path: str, *, mode: PathMode | None = None) -> str:
    """Return the final component of *path* (``""`` for ``"test/"``)."""
    return split_file_name(path, mode=mode)[1]


def drop_file_name(path: str, *, mode: PathMode | None = None) -> str:
    """Return the directory prefix of *path*, trailing separator included."""
    return split_file_name(path, mode=mode)[0]


def set_file_name(path: str, name: str, *, mode: PathMode | None = None) -> str:
    """Replace the final component of *path* with *name*."""
    seps = separators_for(mode)
    return join_file_name(drop_file_name(path, mode=seps.mode), name, mode=seps.mode)


def get_base_name(path: str, *, mode: PathMode | None = None) -> str:
    """Return the file name of *path* without directory or extension."""
    from .extension import drop_extension

    seps = separators_for(mode)
    return drop_extension(get_file_name(path, mode=seps.mode), mode=seps.mode)


def set_base_name(path: str, name: str, *, mode: PathMode | None = None) -> str:
    """Replace the base name of *path*, keeping its directory and extension.

    ``set_base_name("file/test.txt", "bob")`` gives ``"file/bob.txt"``.
    """
    from .extension import join_extension, split_extension

    seps = separators_for(mode)
    directory, file_name = split_file_name(path, mode=seps.mode)
    extension = split_extension(file_name, mode=seps.mode)[1]
    return join_file_name(
        directory, join_extension(name, extension, mode=seps.mode), mode=seps.mode
    )


def get_directory(path: str, *, mode: PathMode | None = None) -> str:
    """Return the parent directory of *path* without trailing separators.

    A directory made only of separators keeps one, so the parent of
    ``"/foo"`` is ``"/"``. A Windows drive loses its separator like any other
    directory: the parent of ``"c:\\foo"`` is ``"c:"``.
    """
    seps = separators_for(mode)
    directory = drop_file_name(path, mode=seps.mode)
    return directory.rstrip(seps.path_separators) or directory[:1]


def set_directory(path: str, directory: str, *, mode: PathMode | None = None) -> str:
    """Move the file name of *path* into *directory*."""
    seps = separators_for(mode)
    return join_file_name(
        directory, get_file_name(path, mode=seps.mode), mode=seps.mode
    )


def is_directory_like(path: str, *, mode: PathMode | None = None) -> bool:
    """Return ``True`` if *path* ends in a separator.

    This is purely syntactic; the filesystem is never consulted.
    """
    return separators_for(mode).ends_with_separator(path)


def combine(left: str, right: str, *, mode: PathMode | None = None) -> str:
    """Join two paths; an absolute *right* replaces *left* entirely."""
    seps = separators_for(mode)
    if is_absolute(right, mode=seps.mode):
        return right
    return add_file_name(left, right, mode=seps.mode)


__all__ = [
    "add_file_name",
    "combine",
    "drop_file_name",
    "get_base_name",
    "get_directory",
    "get_file_name",
    "is_directory_like",
    "join_file_name",
    "set_base_name",
    "set_directory",
    "set_file_name",
    "split_file_name",
]
