from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

from python_provision import PathEncodingError, pythonpath_env, set_pythonpath


def test_set_pythonpath(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PYTHONPATH", raising=False)
    set_pythonpath(tmp_path / "__pypackages__" / "3.12" / "lib")
    assert os.environ["PYTHONPATH"] == str(tmp_path / "__pypackages__" / "3.12" / "lib")


def test_set_pythonpath_overwrites(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PYTHONPATH", "/somewhere/else")
    set_pythonpath(str(tmp_path))
    assert os.environ["PYTHONPATH"] == str(tmp_path)


def test_set_pythonpath_null_character(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PYTHONPATH", "before")
    with pytest.raises(PathEncodingError, match="null character"):
        set_pythonpath("lib\0path")
    assert os.environ["PYTHONPATH"] == "before"


@pytest.mark.skipif(sys.platform == "win32", reason="the Windows filesystem encoding passes surrogates through")
def test_set_pythonpath_unencodable() -> None:
    with pytest.raises(PathEncodingError):
        set_pythonpath("lib\ud800")


@pytest.mark.parametrize("value", [b"/bytes/path", 42])
def test_set_pythonpath_not_a_str_path(value: object) -> None:
    with pytest.raises(PathEncodingError):
        set_pythonpath(value)  # type: ignore[arg-type]


def test_pythonpath_env_leaves_process_untouched(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PYTHONPATH", "before")
    env = pythonpath_env(tmp_path)
    assert env["PYTHONPATH"] == str(tmp_path)
    assert os.environ["PYTHONPATH"] == "before"
    assert env["PATH"] == os.environ["PATH"]


def test_pythonpath_env_from_mapping(tmp_path: Path) -> None:
    base = {"HOME": "/home/user"}
    env = pythonpath_env(tmp_path, base)
    assert env == {"HOME": "/home/user", "PYTHONPATH": str(tmp_path)}
    assert base == {"HOME": "/home/user"}
