"""Separator and character classifiers for the active path grammar."""

from __future__ import annotations

import dataclasses as dc
import typing as t

from .platform import PathMode, resolve_mode


@dc.dataclass(frozen=True, slots=True)
class Separators:
    """
    Separator characters of one path grammar.

    Attributes
    ----------
    mode : PathMode
        The grammar these separators belong to.
    path_separator : str
        The preferred separator emitted when building paths.
    path_separators : str
        Every character accepted as a path separator.
    search_path_separator : str
        Separator between entries of a ``PATH``-style list.
    extension_separator : str
        Character introducing a file extension.
    """

    mode: PathMode
    path_separator: str
    path_separators: str
    search_path_separator: str
    extension_separator: str = "."

    def is_path_separator(self, char: str) -> bool:
        """Return ``True`` if *char* separates path components."""
        return len(char) == 1 and char in self.path_separators

    def is_search_path_separator(self, char: str) -> bool:
        """Return ``True`` if *char* separates search-path entries."""
        return char == self.search_path_separator

    def is_extension_separator(self, char: str) -> bool:
        """Return ``True`` if *char* introduces an extension."""
        return char == self.extension_separator

    def ends_with_separator(self, path: str) -> bool:
        """Return ``True`` when the last character of *path* is a separator."""
        return bool(path) and path[-1] in self.path_separators


POSIX_SEPARATORS: t.Final[Separators] = Separators(
    mode=PathMode.POSIX,
    path_separator="/",
    path_separators="/",
    search_path_separator=":",
)

WINDOWS_SEPARATORS: t.Final[Separators] = Separators(
    mode=PathMode.WINDOWS,
    path_separator="\\",
    path_separators="\\/",
    search_path_separator=";",
)

_BY_MODE: t.Final[dict[PathMode, Separators]] = {
    PathMode.POSIX: POSIX_SEPARATORS,
    PathMode.WINDOWS: WINDOWS_SEPARATORS,
}


def separators_for(mode: PathMode | None = None) -> Separators:
    """Return the separators of *mode* (default: the active mode)."""
    return _BY_MODE[resolve_mode(mode)]


def path_separator(*, mode: PathMode | None = None) -> str:
    """Return the preferred path separator."""
    return separators_for(mode).path_separator


def path_separators(*, mode: PathMode | None = None) -> str:
    """Return every accepted path separator, preferred one first."""
    return separators_for(mode).path_separators


def is_path_separator(char: str, *, mode: PathMode | None = None) -> bool:
    """Return ``True`` if *char* is a path separator."""
    return separators_for(mode).is_path_separator(char)


def search_path_separator(*, mode: PathMode | None = None) -> str:
    """Return the separator used by ``PATH``-style lists."""
    return separators_for(mode).search_path_separator


def is_search_path_separator(char: str, *, mode: PathMode | None = None) -> bool:
    """Return ``True`` if *char* separates ``PATH`` entries."""
    return separators_for(mode).is_search_path_separator(char)


def extension_separator(*, mode: PathMode | None = None) -> str:
    """Return the extension separator (``"."`` in both grammars)."""
    return separators_for(mode).extension_separator


def is_extension_separator(char: str, *, mode: PathMode | None = None) -> bool:
    """Return ``True`` if *char* is the extension separator."""
    return separators_for(mode).is_extension_separator(char)


__all__ = [
    "POSIX_SEPARATORS",
    "WINDOWS_SEPARATORS",
    "Separators",
    "extension_separator",
    "is_extension_separator",
    "is_path_separator",
    "is_search_path_separator",
    "path_separator",
    "path_separators",
    "search_path_separator",
    "separators_for",
]
