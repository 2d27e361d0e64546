"""Tests for drive/root splitting and joining."""

from __future__ import annotations

import pytest

from path_algebra import drive
from path_algebra.platform import PathMode

POSIX = PathMode.POSIX
WINDOWS = PathMode.WINDOWS


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("/test", ("/", "test")),
        ("test/file", ("", "test/file")),
        ("file", ("", "file")),
        ("", ("", "")),
        ("/", ("/", "")),
        ("//server/share", ("/", "/server/share")),
        ("c:/file", ("", "c:/file")),
    ],
)
def test_split_drive_posix(path: str, expected: tuple[str, str]) -> None:
    """POSIX only knows the single ``/`` root."""
    assert drive.split_drive(path, mode=POSIX) == expected


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("file", ("", "file")),
        ("c:", ("c:", "")),
        ("C:", ("C:", "")),
        ("c:/file", ("c:/", "file")),
        ("c:\\file", ("c:\\", "file")),
        ("c:file", ("", "c:file")),
        ("1:\\file", ("", "1:\\file")),
        ("\\\\server\\share\\dir\\file", ("\\\\server\\share\\", "dir\\file")),
        ("\\\\server\\share", ("\\\\server\\share", "")),
        ("\\\\server", ("\\\\server", "")),
        ("//server/share/x", ("//server/share/", "x")),
        ("\\file", ("", "\\file")),
        ("", ("", "")),
    ],
)
def test_split_drive_windows(path: str, expected: tuple[str, str]) -> None:
    """Windows recognises drive letters and UNC prefixes in priority order."""
    assert drive.split_drive(path, mode=WINDOWS) == expected


def test_split_drive_rejects_non_ascii_letters() -> None:
    """Only ASCII letters name drives."""
    assert drive.split_drive("é:\\file", mode=WINDOWS) == ("", "é:\\file")


@pytest.mark.parametrize(
    ("mode", "root", "rest", "expected"),
    [
        (POSIX, "/", "test", "/test"),
        (POSIX, "", "test", "test"),
        (WINDOWS, "c:", "file", "c:\\file"),
        (WINDOWS, "c:\\", "file", "c:\\file"),
        (WINDOWS, "c:/", "file", "c:/file"),
        (WINDOWS, "", "file", "file"),
        (WINDOWS, "c:", "", "c:"),
        (WINDOWS, "\\\\server\\share", "dir", "\\\\server\\share\\dir"),
    ],
)
def test_join_drive(mode: PathMode, root: str, rest: str, expected: str) -> None:
    """Windows inserts a separator only between two non-empty halves."""
    assert drive.join_drive(root, rest, mode=mode) == expected


@pytest.mark.parametrize(
    ("mode", "path"),
    [
        (POSIX, "/usr/lib"),
        (POSIX, "relative/dir"),
        (WINDOWS, "c:"),
        (WINDOWS, "c:\\windows"),
        (WINDOWS, "\\\\server\\share\\file"),
        (WINDOWS, "\\\\server"),
        (WINDOWS, "dir\\file"),
    ],
)
def test_join_drive_inverts_split_drive(mode: PathMode, path: str) -> None:
    """``join_drive(*split_drive(x)) == x``."""
    root, rest = drive.split_drive(path, mode=mode)
    assert root + rest == path
    assert drive.join_drive(root, rest, mode=mode) == path


def test_drive_accessors() -> None:
    """get/drop/has/set are views over split_drive."""
    assert drive.get_drive("c:\\file", mode=WINDOWS) == "c:\\"
    assert drive.drop_drive("c:\\file", mode=WINDOWS) == "file"
    assert drive.has_drive("c:\\file", mode=WINDOWS)
    assert not drive.has_drive("file", mode=WINDOWS)
    assert drive.set_drive("c:\\file", "d:\\", mode=WINDOWS) == "d:\\file"
    assert drive.set_drive("/usr", "", mode=POSIX) == "usr"


@pytest.mark.parametrize("path", ["c:\\file", "d:", "x/y", ""])
def test_set_drive_with_own_drive_is_identity(path: str) -> None:
    """``set_drive(x, get_drive(x)) == x``."""
    root = drive.get_drive(path, mode=WINDOWS)
    assert drive.set_drive(path, root, mode=WINDOWS) == path


@pytest.mark.parametrize(
    ("mode", "path", "relative"),
    [
        (WINDOWS, "path\\test", True),
        (WINDOWS, "c:\\test", False),
        (WINDOWS, "\\\\server\\share", False),
        (POSIX, "test/path", True),
        (POSIX, "/test", False),
        (POSIX, "", True),
    ],
)
def test_is_relative_and_is_absolute(mode: PathMode, path: str, relative: bool) -> None:
    """A path is relative exactly when it has no drive."""
    assert drive.is_relative(path, mode=mode) is relative
    assert drive.is_absolute(path, mode=mode) is not relative
