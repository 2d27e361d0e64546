"""Unit tests for the directory helpers."""

from __future__ import annotations

import typing as t

import pytest

from path_algebra.directories import (
    ensure_directory,
    full_path,
    get_directory_list,
    short_path,
)
from path_algebra.errors import FileSystemError, IOErrorKind
from path_algebra.platform import PathMode
from tests.helpers.fakes import FakeEnvironment, FakeFileSystem

if t.TYPE_CHECKING:
    from pathlib import Path

POSIX = PathMode.POSIX
WINDOWS = PathMode.WINDOWS


def test_ensure_directory_creates_missing_levels() -> None:
    """Only the missing levels are created, outermost first."""
    fs = FakeFileSystem(directories=["/one"])

    created = ensure_directory("/one/two/three", filesystem=fs, mode=POSIX)

    assert created == ["/one/two/", "/one/two/three"]
    assert fs.created == created
    assert fs.directory_exists("/one/two/three")


def test_ensure_directory_relative_path() -> None:
    """Relative paths are created below the working directory."""
    fs = FakeFileSystem()

    created = ensure_directory("./One/Two/", filesystem=fs, mode=POSIX)

    assert created == ["One/", "One/Two/"]


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("/a/./b/../c", ["/a/c"]),
        ("/a//c/./d/", ["/a/c/", "/a/c/d/"]),
        ("/a/b/../..", []),
    ],
)
def test_ensure_directory_walks_normalised_levels(
    path: str, expected: list[str]
) -> None:
    """Dots and repeated separators never become levels of their own."""
    fs = FakeFileSystem(directories=["/a"])

    created = ensure_directory(path, filesystem=fs, mode=POSIX)

    assert created == expected
    assert fs.created == expected


def test_ensure_directory_existing_path_is_noop() -> None:
    """Nothing is created when every level exists."""
    fs = FakeFileSystem(directories=["/a", "/a/b"])

    assert ensure_directory("/a/b/", filesystem=fs, mode=POSIX) == []
    assert fs.created == []


@pytest.mark.parametrize("path", ["", "/"])
def test_ensure_directory_root_or_empty(path: str) -> None:
    """A bare root or empty path has nothing to create."""
    fs = FakeFileSystem()
    assert ensure_directory(path, filesystem=fs, mode=POSIX) == []


def test_ensure_directory_windows_drive() -> None:
    """The drive is never created; levels below it are."""
    fs = FakeFileSystem(mode=WINDOWS)

    created = ensure_directory("c:\\work\\src", filesystem=fs, mode=WINDOWS)

    assert created == ["c:\\work\\", "c:\\work\\src"]


def test_ensure_directory_tolerates_concurrent_creation() -> None:
    """A level created between the check and the mkdir is accepted."""
    fs = FakeFileSystem()
    real_exists = fs.directory_exists
    calls: list[str] = []

    def racing_exists(path: str) -> bool:
        key = fs.key(path)
        calls.append(key)
        if key == "/race" and calls.count(key) == 1:
            fs.directories.add("/race")
            return False
        return real_exists(path)

    fs.directory_exists = racing_exists  # type: ignore[method-assign]

    created = ensure_directory("/race/child", filesystem=fs, mode=POSIX)

    assert created == ["/race/", "/race/child"]
    assert fs.created == ["/race/child"]


def test_ensure_directory_file_in_the_way() -> None:
    """A file occupying a level is reported, not silently ignored."""
    fs = FakeFileSystem(files=["/a"])

    with pytest.raises(FileSystemError) as excinfo:
        ensure_directory("/a/b", filesystem=fs, mode=POSIX)

    assert excinfo.value.kind is IOErrorKind.ALREADY_EXISTS


def test_ensure_directory_surfaces_permission_errors() -> None:
    """Collaborator failures propagate with their kind."""
    fs = FakeFileSystem()
    fs.failures["/locked"] = IOErrorKind.PERMISSION_DENIED

    with pytest.raises(FileSystemError) as excinfo:
        ensure_directory("/locked/inner", filesystem=fs, mode=POSIX)

    assert excinfo.value.kind is IOErrorKind.PERMISSION_DENIED
    assert fs.created == []


@pytest.mark.touches_filesystem
def test_ensure_directory_on_disk(tmp_path: Path) -> None:
    """The default collaborator creates real directories."""
    target = tmp_path / "x" / "y" / "z"

    ensure_directory(str(target))

    assert target.is_dir()


def test_get_directory_list_filters_aliases_and_files() -> None:
    """Only real sub-directories are listed."""
    fs = FakeFileSystem(
        directories=["/data", "/data/a", "/data/b"], files=["/data/c.txt"]
    )

    assert get_directory_list("/data", filesystem=fs, mode=POSIX) == ["a", "b"]


def test_get_directory_list_missing_directory() -> None:
    """A missing directory is an error, not an empty listing."""
    with pytest.raises(FileSystemError):
        get_directory_list("/nope", filesystem=FakeFileSystem(), mode=POSIX)


@pytest.mark.touches_filesystem
def test_get_directory_list_on_disk(tmp_path: Path) -> None:
    """The default collaborator lists real sub-directories."""
    (tmp_path / "one").mkdir()
    (tmp_path / "two").mkdir()
    (tmp_path / "file.txt").write_text("x")

    assert sorted(get_directory_list(str(tmp_path))) == ["one", "two"]


def test_full_path_uses_working_directory() -> None:
    """Relative paths resolve against the environment's cwd."""
    env = FakeEnvironment(cwd="/home/user/project")

    assert full_path("../lib/x.py", environment=env, mode=POSIX) == (
        "/home/user/lib/x.py"
    )
    assert full_path("/etc", environment=env, mode=POSIX) == "/etc"


def test_short_path_uses_working_directory() -> None:
    """Absolute paths are shortened relative to the environment's cwd."""
    env = FakeEnvironment(cwd="/home/user/project")

    assert short_path("/home/user/project/src/a.py", environment=env, mode=POSIX) == (
        "src/a.py"
    )
    assert short_path("/home/other", environment=env, mode=POSIX) == "../../other"


def test_short_path_windows_other_drive() -> None:
    """Without a shared drive the normalised path comes back."""
    env = FakeEnvironment(cwd="c:\\work")

    assert short_path("d:/data/x", environment=env, mode=WINDOWS) == "d:\\data\\x"
