"""Temporary file names built from the program name and a numeric seed.

Only names are produced; nothing is created. A name reported as free by
:func:`get_temporary_file_new` may be taken by another process before the
caller uses it.
"""

from __future__ import annotations

import logging
import typing as t

from .environment import ProcessEnvironment
from .extension import add_extension
from .filename import combine
from .filesystem import LocalFileSystem
from .separators import separators_for
from .validity import make_valid

if t.TYPE_CHECKING:
    from .environment import HostEnvironment
    from .filesystem import FileSystem
    from .platform import PathMode

logger = logging.getLogger(__name__)

DEFAULT_SEED: t.Final[int] = 1
MAX_SEED: t.Final[int] = 100


def get_temporary_file_seed(
    seed: int,
    extension: str,
    *,
    environment: HostEnvironment | None = None,
    mode: PathMode | None = None,
) -> str:
    """Return ``<tmpdir>/<program><seed><extension>``, made valid."""
    seps = separators_for(mode)
    env = environment if environment is not None else ProcessEnvironment()
    name = f"{env.process_name()}{seed}"
    candidate = combine(env.temporary_directory(), name, mode=seps.mode)
    candidate = add_extension(candidate, extension, mode=seps.mode)
    return make_valid(candidate, mode=seps.mode)


def get_temporary_file(
    extension: str,
    *,
    environment: HostEnvironment | None = None,
    mode: PathMode | None = None,
) -> str:
    """Return the temporary file name for the default seed."""
    return get_temporary_file_seed(
        DEFAULT_SEED, extension, environment=environment, mode=mode
    )


def get_temporary_file_new(
    extension: str,
    *,
    environment: HostEnvironment | None = None,
    filesystem: FileSystem | None = None,
    max_seed: int = MAX_SEED,
    mode: PathMode | None = None,
) -> str | None:
    """Return the first temporary file name that does not exist yet.

    Seeds ``1`` to *max_seed* are tried in order. ``None`` is returned when
    every candidate is taken.
    """
    if max_seed < DEFAULT_SEED:
        msg = f"max_seed must be >= {DEFAULT_SEED}"
        raise ValueError(msg)

    seps = separators_for(mode)
    env = environment if environment is not None else ProcessEnvironment()
    fs = filesystem if filesystem is not None else LocalFileSystem()
    for seed in range(DEFAULT_SEED, max_seed + 1):
        candidate = get_temporary_file_seed(
            seed, extension, environment=env, mode=seps.mode
        )
        if not fs.path_exists(candidate):
            return candidate
        logger.debug("Temporary name %s is taken", candidate)

    logger.warning(
        "No free temporary name with extension %r after %d attempts",
        extension,
        max_seed,
    )
    return None


__all__ = [
    "DEFAULT_SEED",
    "MAX_SEED",
    "get_temporary_file",
    "get_temporary_file_new",
    "get_temporary_file_seed",
]
