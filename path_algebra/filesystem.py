"""Filesystem collaborator used by the directory and temporary-name helpers.

The pure path functions never call into this module. Helpers that must
touch the disk accept any :class:`FileSystem`, which lets tests substitute an
in-memory double for :class:`LocalFileSystem`.
"""

from __future__ import annotations

import logging
import os
import typing as t
from pathlib import Path

from .errors import FileSystemError, IOErrorKind

_logger = logging.getLogger(__name__)


class FileSystem(t.Protocol):
    """Capabilities the directory helpers need from a filesystem."""

    def path_exists(self, path: str) -> bool:
        """Return ``True`` if anything exists at *path*."""
        ...

    def directory_exists(self, path: str) -> bool:
        """Return ``True`` if *path* is an existing directory."""
        ...

    def create_directory(self, path: str) -> None:
        """Create the single directory *path*; its parent must exist."""
        ...

    def list_directory_entries(self, path: str) -> t.Sequence[str]:
        """Return the names of the entries inside *path*."""
        ...


def _as_path(path: str) -> Path:
    # ``Path("")`` silently means the current directory.
    return Path(path or os.curdir)


class LocalFileSystem:
    """
    :class:`FileSystem` backed by the host operating system.

    Parameters
    ----------
    logger : logging.Logger | None, optional
        Logger for created directories. Defaults to the module logger.

    Raises
    ------
    FileSystemError
        From :meth:`create_directory` and :meth:`list_directory_entries` when
        the underlying call fails; the original ``OSError`` is chained.
    """

    def __init__(self, *, logger: logging.Logger | None = None) -> None:
        self._logger = logger or _logger

    def path_exists(self, path: str) -> bool:
        """Return ``True`` if a file, directory or other entry is at *path*."""
        return _as_path(path).exists()

    def directory_exists(self, path: str) -> bool:
        """Return ``True`` if *path* is a directory."""
        return _as_path(path).is_dir()

    def create_directory(self, path: str) -> None:
        """Create *path* without creating missing parents."""
        try:
            _as_path(path).mkdir()
        except OSError as exc:
            raise FileSystemError.wrap("create_directory", path, exc) from exc
        self._logger.debug("Created directory %s", path)

    def list_directory_entries(self, path: str) -> list[str]:
        """Return the entry names of *path* in directory order."""
        try:
            return os.listdir(_as_path(path))
        except OSError as exc:
            raise FileSystemError.wrap("list_directory_entries", path, exc) from exc

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        """Return a debug representation."""
        return "LocalFileSystem()"


__all__ = ["FileSystem", "FileSystemError", "IOErrorKind", "LocalFileSystem"]
