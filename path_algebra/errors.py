"""Exception hierarchy for path-algebra."""

from __future__ import annotations

import enum
import errno


class PathAlgebraError(Exception):
    """Base class for errors raised by path-algebra."""


class InvalidModeError(PathAlgebraError, ValueError):
    """Raised when a platform mode or override value is not recognised."""


class MissingEnvironmentError(PathAlgebraError, KeyError):
    """Raised when a required environment variable is unset."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        """Return a readable message instead of ``KeyError``'s quoted repr."""
        return f"environment variable {self.name!r} is not set"


class IOErrorKind(enum.Enum):
    """Coarse classification of filesystem failures."""

    NOT_FOUND = "not-found"
    PERMISSION_DENIED = "permission-denied"
    ALREADY_EXISTS = "already-exists"
    OTHER = "other"

    @classmethod
    def from_exception(cls, exc: OSError) -> IOErrorKind:
        """Classify *exc* by exception type, falling back to its errno."""
        if isinstance(exc, FileNotFoundError) or exc.errno == errno.ENOENT:
            return cls.NOT_FOUND
        if isinstance(exc, PermissionError) or exc.errno in (
            errno.EACCES,
            errno.EPERM,
        ):
            return cls.PERMISSION_DENIED
        if isinstance(exc, FileExistsError) or exc.errno == errno.EEXIST:
            return cls.ALREADY_EXISTS
        return cls.OTHER


class FileSystemError(OSError):
    """
    Raised when a filesystem collaborator call fails.

    Parameters
    ----------
    operation : str
        Name of the collaborator operation, e.g. ``"create_directory"``.
    path : str
        The path the operation was applied to.
    kind : IOErrorKind
        Classification of the failure.
    cause : OSError | None
        The underlying exception, if any.
    """

    def __init__(
        self,
        operation: str,
        path: str,
        kind: IOErrorKind,
        cause: OSError | None = None,
    ) -> None:
        detail = f": {cause.strerror or cause}" if cause is not None else ""
        msg = f"{operation} failed for {path!r} ({kind.value}){detail}"
        super().__init__(msg)
        self.operation = operation
        self.path = path
        self.kind = kind
        self.cause = cause

    @classmethod
    def wrap(cls, operation: str, path: str, exc: OSError) -> FileSystemError:
        """Build an error for *exc* raised while running *operation*."""
        return cls(operation, path, IOErrorKind.from_exception(exc), exc)


__all__ = [
    "FileSystemError",
    "IOErrorKind",
    "InvalidModeError",
    "MissingEnvironmentError",
    "PathAlgebraError",
]
