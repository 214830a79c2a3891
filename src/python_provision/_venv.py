"""Locate the executables of a virtual environment on POSIX (``bin``) and Windows (``Scripts``) layouts."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Final, NamedTuple

from ._errors import LayoutNotFoundError

if TYPE_CHECKING:
    from collections.abc import Iterator

_LOGGER: Final[logging.Logger] = logging.getLogger(__name__)

VENV_DIR: Final[str] = ".venv"
LIB_DIR: Final[str] = "lib"
BIN_DIRS: Final[tuple[str, ...]] = ("bin", "Scripts")
_EXE_SUFFIXES: Final[dict[str, tuple[str, ...]]] = {"bin": ("",), "Scripts": ("", ".exe")}


class EnvironmentPaths(NamedTuple):
    bin_path: Path
    """executables of the environment itself, ``<root>/.venv/bin``"""
    lib_bin_path: Path
    """console scripts of packages installed with ``--target <root>/lib``"""


def _executable(folder: Path, name: str) -> Path | None:
    for suffix in _EXE_SUFFIXES[folder.name]:
        candidate = folder / f"{name}{suffix}"
        if candidate.exists():
            return candidate
    return None


def _layouts(venv_path: Path) -> Iterator[Path]:
    for bin_dir in BIN_DIRS:
        yield venv_path / bin_dir


def venv_exists(venv_path: str | os.PathLike[str]) -> bool:
    """Check if *venv_path* holds an interpreter and pip in the same layout folder."""
    for folder in _layouts(Path(venv_path)):
        if _executable(folder, "python") is not None and _executable(folder, "pip") is not None:
            _LOGGER.debug("found virtual environment at %s", folder)
            return True
    return False


def venv_python(venv_path: str | os.PathLike[str]) -> Path:
    """Return the interpreter of the virtual environment at *venv_path*."""
    for folder in _layouts(Path(venv_path)):
        if (exe := _executable(folder, "python")) is not None:
            return exe
    raise LayoutNotFoundError(venv_path)


def find_bin_path(vers_path: str | os.PathLike[str]) -> EnvironmentPaths:
    """
    Resolve the binary folders of the environment living in ``<vers_path>/.venv``.

    The primary folder is the one inside the virtual environment; the secondary is the sibling folder under ``lib``,
    where console scripts land when packages are installed with ``--target`` instead of into the environment.

    :raises LayoutNotFoundError: when neither ``.venv/bin`` nor ``.venv/Scripts`` exists
    """
    root = Path(vers_path)
    for folder in _layouts(root / VENV_DIR):
        if folder.exists():
            result = EnvironmentPaths(folder, root / LIB_DIR / folder.name)
            _LOGGER.debug("resolved binary folders %s and %s", *result)
            return result
    raise LayoutNotFoundError(root)


__all__ = [
    "BIN_DIRS",
    "EnvironmentPaths",
    "find_bin_path",
    "venv_exists",
    "venv_python",
]
