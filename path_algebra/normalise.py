"""Lexical normalisation of paths.

:func:`normalise` never looks at the filesystem. It canonicalises separators,
collapses separator runs, drops ``.`` components and cancels each ``..``
against the closest preceding real component. A ``..`` with nothing left to
cancel is kept, because nothing is known about what lies above the start of
the path.
"""

from __future__ import annotations

import typing as t

from .drive import join_drive, split_drive
from .separators import Separators, separators_for

if t.TYPE_CHECKING:
    from .platform import PathMode

_CURRENT: t.Final[str] = "."
_PARENT: t.Final[str] = ".."


def _canonical_separators(text: str, seps: Separators) -> str:
    """Replace every accepted separator in *text* with the preferred one."""
    for sep in seps.path_separators:
        if sep != seps.path_separator:
            text = text.replace(sep, seps.path_separator)
    return text


def _collapse_separators(text: str, seps: Separators) -> str:
    """Replace each run of separators in *text* with one preferred separator."""
    collapsed: list[str] = []
    previous_was_separator = False
    for char in text:
        is_separator = seps.is_path_separator(char)
        if is_separator and previous_was_separator:
            continue
        collapsed.append(seps.path_separator if is_separator else char)
        previous_was_separator = is_separator
    return "".join(collapsed)


def _resolve_dots(names: t.Iterable[str]) -> list[str]:
    """Drop ``.`` and cancel ``..`` against preceding real components."""
    leading_parents: list[str] = []
    real: list[str] = []
    for name in names:
        if name == _CURRENT:
            continue
        if name == _PARENT:
            if real:
                real.pop()
            else:
                leading_parents.append(name)
            continue
        real.append(name)
    return leading_parents + real


def normalise(path: str, *, mode: PathMode | None = None) -> str:
    """Return the canonical lexical form of *path*.

    Examples in the POSIX grammar::

        normalise("/file/./test") == "/file/test"
        normalise("/test/file/../bob/fred/") == "/test/bob/fred/"
        normalise("../bob/fred/") == "../bob/fred/"
        normalise("./bob/fred/") == "bob/fred/"

    A trailing separator on the input is kept as exactly one separator. A
    relative path whose components all cancel out becomes ``""``, with no
    trailing separator even when the input had one. The function is
    idempotent.
    """
    if not path:
        return ""

    seps = separators_for(mode)
    sep = seps.path_separator
    drive, rest = split_drive(path, mode=seps.mode)
    drive = _canonical_separators(drive, seps)
    rest = _collapse_separators(rest, seps)

    # The drive already ends in a separator whenever anything follows it, so
    # a separator opening *rest* would form a run with it.
    leading = ""
    if rest.startswith(sep):
        rest = rest[1:]
        if not drive:
            leading = sep

    names = _resolve_dots(name for name in rest.split(sep) if name)
    body = leading + sep.join(names)
    result = join_drive(drive, body, mode=seps.mode)

    if (
        result
        and seps.ends_with_separator(path)
        and not seps.ends_with_separator(result)
    ):
        result += sep
    return result


__all__ = ["normalise"]
