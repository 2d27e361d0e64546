"""Host environment collaborator: working directory, variables and temp dir."""

from __future__ import annotations

import contextlib
import logging
import os
import sys
import tempfile
import typing as t
from pathlib import Path

logger = logging.getLogger(__name__)

_FALLBACK_PROCESS_NAME: t.Final[str] = "python"


class HostEnvironment(t.Protocol):
    """Read-only view of the process environment used by the path helpers."""

    def current_working_directory(self) -> str:
        """Return the current working directory."""
        ...

    def environment_variable(self, name: str) -> str | None:
        """Return the value of *name*, or ``None`` when unset."""
        ...

    def temporary_directory(self) -> str:
        """Return the directory used for temporary files."""
        ...

    def process_name(self) -> str:
        """Return the name of the running program."""
        ...


class ProcessEnvironment:
    """:class:`HostEnvironment` backed by the running interpreter."""

    def current_working_directory(self) -> str:
        """Return :func:`os.getcwd`."""
        return os.getcwd()

    def environment_variable(self, name: str) -> str | None:
        """Look *name* up in :data:`os.environ`."""
        return os.environ.get(name)

    def temporary_directory(self) -> str:
        """Return :func:`tempfile.gettempdir`."""
        return tempfile.gettempdir()

    def process_name(self) -> str:
        """Return the stem of ``sys.argv[0]``, falling back to ``"python"``."""
        argv0 = sys.argv[0] if sys.argv else ""
        name = Path(argv0).stem if argv0 else ""
        if not name:
            logger.debug(
                "No program name in sys.argv; using %r", _FALLBACK_PROCESS_NAME
            )
            return _FALLBACK_PROCESS_NAME
        return name

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        """Return a debug representation."""
        return "ProcessEnvironment()"


def _restore_env(orig_env: dict[str, str]) -> None:
    """Reset ``os.environ`` to the snapshot stored in ``orig_env``."""
    os.environ.clear()
    os.environ.update(orig_env)


@contextlib.contextmanager
def temporary_env(
    mapping: dict[str, str], *, remove: t.Iterable[str] = ()
) -> t.Iterator[None]:
    """Temporarily apply *mapping* and unset the names in *remove*."""
    orig_env = os.environ.copy()
    os.environ.update(mapping)
    for name in remove:
        os.environ.pop(name, None)
    try:
        yield
    finally:
        _restore_env(orig_env)


__all__ = ["HostEnvironment", "ProcessEnvironment", "temporary_env"]
