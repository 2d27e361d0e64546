"""Unit tests for the host environment collaborator."""

from __future__ import annotations

import os
import sys
import tempfile
import typing as t

import pytest

from path_algebra.environment import ProcessEnvironment, temporary_env

if t.TYPE_CHECKING:
    from pathlib import Path


def test_process_environment_reads_host_state(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """The working directory, variables and temp dir come from the host."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("PATH_ALGEBRA_TEST_VAR", "value")
    env = ProcessEnvironment()

    assert env.current_working_directory() == os.getcwd()
    assert env.environment_variable("PATH_ALGEBRA_TEST_VAR") == "value"
    assert env.temporary_directory() == tempfile.gettempdir()


def test_environment_variable_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    """Unset variables read as None."""
    monkeypatch.delenv("PATH_ALGEBRA_TEST_VAR", raising=False)
    assert ProcessEnvironment().environment_variable("PATH_ALGEBRA_TEST_VAR") is None


@pytest.mark.parametrize(
    ("argv", "expected"),
    [
        (["/usr/local/bin/tool"], "tool"),
        (["scripts/build.py", "--fast"], "build"),
        ([""], "python"),
        ([], "python"),
    ],
)
def test_process_name(
    monkeypatch: pytest.MonkeyPatch, argv: list[str], expected: str
) -> None:
    """The program name is the stem of argv[0] with a fallback."""
    monkeypatch.setattr(sys, "argv", argv)
    assert ProcessEnvironment().process_name() == expected


def test_temporary_env_applies_and_restores() -> None:
    """Values are applied inside the block and restored afterwards."""
    os.environ["PATH_ALGEBRA_KEEP"] = "original"
    try:
        with temporary_env(
            {"PATH_ALGEBRA_NEW": "1"}, remove=["PATH_ALGEBRA_KEEP"]
        ):
            assert os.environ["PATH_ALGEBRA_NEW"] == "1"
            assert "PATH_ALGEBRA_KEEP" not in os.environ
        assert "PATH_ALGEBRA_NEW" not in os.environ
        assert os.environ["PATH_ALGEBRA_KEEP"] == "original"
    finally:
        os.environ.pop("PATH_ALGEBRA_KEEP", None)


def test_temporary_env_restores_after_error() -> None:
    """The environment is restored even when the block raises."""
    before = os.environ.copy()
    with pytest.raises(RuntimeError), temporary_env({"PATH_ALGEBRA_TMP": "x"}):
        raise RuntimeError
    assert os.environ == before
