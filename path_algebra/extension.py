"""File extension handling.

Only the final file-name component is searched for an extension separator;
dots inside directory names never count. :func:`split_extension` splits at
the last separator while :func:`split_extensions` splits at the first one, so
``"file.tar.gz"`` yields ``".gz"`` and ``".tar.gz"`` respectively.
"""

from __future__ import annotations

import typing as t

from .filename import get_file_name, split_file_name
from .separators import separators_for

if t.TYPE_CHECKING:
    from .platform import PathMode


def split_extension(path: str, *, mode: PathMode | None = None) -> tuple[str, str]:
    """Split off the last extension of *path*, separator included."""
    seps = separators_for(mode)
    directory, file_name = split_file_name(path, mode=seps.mode)
    index = file_name.rfind(seps.extension_separator)
    if index < 0:
        return path, ""
    return directory + file_name[:index], file_name[index:]


def split_extensions(path: str, *, mode: PathMode | None = None) -> tuple[str, str]:
    """Split off every extension of *path*, e.g. ``".tar.gz"``."""
    seps = separators_for(mode)
    directory, file_name = split_file_name(path, mode=seps.mode)
    index = file_name.find(seps.extension_separator)
    if index < 0:
        return path, ""
    return directory + file_name[:index], file_name[index:]


def add_extension(path: str, extension: str, *, mode: PathMode | None = None) -> str:
    """Append *extension* to *path* even if it already has one.

    The separator is inserted unless *extension* already starts with it; an
    empty *extension* leaves *path* untouched.
    """
    seps = separators_for(mode)
    if not extension:
        return path
    if seps.is_extension_separator(extension[0]):
        return path + extension
    return path + seps.extension_separator + extension


def join_extension(path: str, extension: str, *, mode: PathMode | None = None) -> str:
    """Inverse of :func:`split_extension`."""
    return add_extension(path, extension, mode=mode)


def get_extension(path: str, *, mode: PathMode | None = None) -> str:
    """Return the last extension of *path*, or ``""``."""
    return split_extension(path, mode=mode)[1]


def drop_extension(path: str, *, mode: PathMode | None = None) -> str:
    """Remove the last extension of *path*."""
    return split_extension(path, mode=mode)[0]


def set_extension(path: str, extension: str, *, mode: PathMode | None = None) -> str:
    """Replace the last extension of *path* with *extension*."""
    seps = separators_for(mode)
    return add_extension(
        drop_extension(path, mode=seps.mode), extension, mode=seps.mode
    )


def has_extension(path: str, *, mode: PathMode | None = None) -> bool:
    """Return ``True`` if the file name of *path* contains an extension."""
    seps = separators_for(mode)
    return seps.extension_separator in get_file_name(path, mode=seps.mode)


def get_extensions(path: str, *, mode: PathMode | None = None) -> str:
    """Return every extension of *path*, or ``""``."""
    return split_extensions(path, mode=mode)[1]


def drop_extensions(path: str, *, mode: PathMode | None = None) -> str:
    """Remove every extension of *path*."""
    return split_extensions(path, mode=mode)[0]


__all__ = [
    "add_extension",
    "drop_extension",
    "drop_extensions",
    "get_extension",
    "get_extensions",
    "has_extension",
    "join_extension",
    "set_extension",
    "split_extension",
    "split_extensions",
]
