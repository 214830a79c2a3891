"""Point a child interpreter at a managed package folder through ``PYTHONPATH``."""

from __future__ import annotations

import logging
import os
import threading
from typing import TYPE_CHECKING, Final

from ._errors import PathEncodingError

if TYPE_CHECKING:
    from collections.abc import Mapping

_LOGGER: Final[logging.Logger] = logging.getLogger(__name__)
PYTHONPATH: Final[str] = "PYTHONPATH"
_ENVIRON_LOCK: Final[threading.Lock] = threading.Lock()


def _native(lib_path: str | os.PathLike[str]) -> str:
    try:
        value = os.fspath(lib_path)
    except TypeError as exception:
        raise PathEncodingError(lib_path, str(exception)) from exception
    if isinstance(value, bytes):
        msg = "bytes paths are not supported"
        raise PathEncodingError(lib_path, msg)
    if "\0" in value:
        msg = "embedded null character"
        raise PathEncodingError(lib_path, msg)
    try:
        os.fsencode(value)
    except UnicodeEncodeError as exception:
        raise PathEncodingError(lib_path, str(exception)) from exception
    return value


def pythonpath_env(lib_path: str | os.PathLike[str], env: Mapping[str, str] | None = None) -> dict[str, str]:
    """Return a copy of *env* (the process environment by default) that makes Python import from *lib_path*."""
    result = dict(os.environ if env is None else env)
    result[PYTHONPATH] = _native(lib_path)
    return result


def set_pythonpath(lib_path: str | os.PathLike[str]) -> None:
    """
    Set ``PYTHONPATH`` of the current process to *lib_path*.

    Only children started afterwards see the change. Prefer passing :func:`pythonpath_env` to the child instead.

    :raises PathEncodingError: if the path cannot be stored in the environment
    """
    value = _native(lib_path)
    with _ENVIRON_LOCK:
        os.environ[PYTHONPATH] = value
    _LOGGER.debug("set %s=%s", PYTHONPATH, value)


__all__ = [
    "PYTHONPATH",
    "pythonpath_env",
    "set_pythonpath",
]
