"""Platform-aware algebra over file-path strings.

Paths are decomposed, recomposed, normalised and compared as plain strings in
either the POSIX or the Windows grammar, selected once per process and
overridable for cross-platform use. Only :mod:`path_algebra.directories` and
:mod:`path_algebra.tempfiles` touch the host, through injectable
collaborators.
"""

from __future__ import annotations

from .compare import equal_file_path, full_path_with, short_path_with
from .directories import ensure_directory, full_path, get_directory_list, short_path
from .drive import (
    drop_drive,
    get_drive,
    has_drive,
    is_absolute,
    is_relative,
    join_drive,
    set_drive,
    split_drive,
)
from .environment import HostEnvironment, ProcessEnvironment, temporary_env
from .errors import (
    FileSystemError,
    InvalidModeError,
    IOErrorKind,
    MissingEnvironmentError,
    PathAlgebraError,
)
from .extension import (
    add_extension,
    drop_extension,
    drop_extensions,
    get_extension,
    get_extensions,
    has_extension,
    join_extension,
    set_extension,
    split_extension,
    split_extensions,
)
from .filename import (
    add_file_name,
    combine,
    drop_file_name,
    get_base_name,
    get_directory,
    get_file_name,
    is_directory_like,
    join_file_name,
    set_base_name,
    set_directory,
    set_file_name,
    split_file_name,
)
from .filesystem import FileSystem, LocalFileSystem
from .normalise import normalise
from .platform import (
    PLATFORM_OVERRIDE_ENV,
    ModeOverride,
    PathMode,
    current_mode,
    detect_mode,
    forced_mode,
    get_mode_override,
    reset_mode_cache,
    resolve_mode,
    set_mode_override,
)
from .search_path import get_search_path, split_search_path
from .segments import join_path, split_directories, split_path
from .separators import (
    Separators,
    extension_separator,
    is_extension_separator,
    is_path_separator,
    is_search_path_separator,
    path_separator,
    path_separators,
    search_path_separator,
    separators_for,
)
from .tempfiles import (
    get_temporary_file,
    get_temporary_file_new,
    get_temporary_file_seed,
)
from .validity import is_valid, make_valid

__all__ = [
    "PLATFORM_OVERRIDE_ENV",
    "FileSystem",
    "FileSystemError",
    "HostEnvironment",
    "IOErrorKind",
    "InvalidModeError",
    "LocalFileSystem",
    "MissingEnvironmentError",
    "ModeOverride",
    "PathAlgebraError",
    "PathMode",
    "ProcessEnvironment",
    "Separators",
    "add_extension",
    "add_file_name",
    "combine",
    "current_mode",
    "detect_mode",
    "drop_drive",
    "drop_extension",
    "drop_extensions",
    "drop_file_name",
    "ensure_directory",
    "equal_file_path",
    "extension_separator",
    "forced_mode",
    "full_path",
    "full_path_with",
    "get_base_name",
    "get_directory",
    "get_directory_list",
    "get_drive",
    "get_extension",
    "get_extensions",
    "get_file_name",
    "get_mode_override",
    "get_search_path",
    "get_temporary_file",
    "get_temporary_file_new",
    "get_temporary_file_seed",
    "has_drive",
    "has_extension",
    "is_absolute",
    "is_directory_like",
    "is_extension_separator",
    "is_path_separator",
    "is_relative",
    "is_search_path_separator",
    "is_valid",
    "join_drive",
    "join_extension",
    "join_file_name",
    "join_path",
    "make_valid",
    "normalise",
    "path_separator",
    "path_separators",
    "reset_mode_cache",
    "resolve_mode",
    "search_path_separator",
    "separators_for",
    "set_base_name",
    "set_directory",
    "set_drive",
    "set_extension",
    "set_file_name",
    "set_mode_override",
    "short_path",
    "short_path_with",
    "split_directories",
    "split_drive",
    "split_extension",
    "split_extensions",
    "split_file_name",
    "split_path",
    "split_search_path",
    "temporary_env",
]
