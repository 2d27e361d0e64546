"""Helpers for ``PATH``-style search lists."""

from __future__ import annotations

import typing as t

from .environment import ProcessEnvironment
from .errors import MissingEnvironmentError
from .separators import separators_for

if t.TYPE_CHECKING:
    from .environment import HostEnvironment
    from .platform import PathMode

SEARCH_PATH_ENV: t.Final[str] = "PATH"


def split_search_path(value: str, *, mode: PathMode | None = None) -> list[str]:
    """Split *value* on the search-path separator, dropping empty entries."""
    separator = separators_for(mode).search_path_separator
    return [entry for entry in value.split(separator) if entry]


def get_search_path(
    *,
    environment: HostEnvironment | None = None,
    mode: PathMode | None = None,
) -> list[str]:
    """Return the entries of ``PATH`` read from *environment*.

    Raises
    ------
    MissingEnvironmentError
        If ``PATH`` is not set.
    """
    env = environment if environment is not None else ProcessEnvironment()
    value = env.environment_variable(SEARCH_PATH_ENV)
    if value is None:
        raise MissingEnvironmentError(SEARCH_PATH_ENV)
    return split_search_path(value, mode=mode)


__all__ = ["SEARCH_PATH_ENV", "get_search_path", "split_search_path"]
