"""Bounded polling for directories that an external process is expected to create."""

from __future__ import annotations

import logging
import os
import time
from typing import TYPE_CHECKING, Final

from ._config import DEFAULT_WAIT_ATTEMPTS, DEFAULT_WAIT_INTERVAL
from ._errors import DirectoryWaitTimeout

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

_LOGGER: Final[logging.Logger] = logging.getLogger(__name__)


def wait_for_dirs(  # noqa: PLR0913
    dirs: Iterable[str | os.PathLike[str]],
    *,
    interval: float = DEFAULT_WAIT_INTERVAL,
    attempts: int = DEFAULT_WAIT_ATTEMPTS,
    sleep: Callable[[float], None] | None = None,
    exists: Callable[[str | os.PathLike[str]], bool] | None = None,
    clock: Callable[[], float] | None = None,
) -> None:
    """
    Block until every path of *dirs* exists.

    Every path is probed on each of at most *attempts* iterations, sleeping *interval* seconds between them. *sleep*,
    *exists* and *clock* default to :func:`time.sleep`, :func:`os.path.exists` and :func:`time.monotonic`.

    :raises DirectoryWaitTimeout: when some path is still missing after the last iteration
    """
    if attempts < 1:
        msg = f"attempts must be at least 1, got {attempts}"
        raise ValueError(msg)
    if interval < 0:
        msg = f"interval must not be negative, got {interval}"
        raise ValueError(msg)
    sleep = time.sleep if sleep is None else sleep
    exists = os.path.exists if exists is None else exists
    clock = time.monotonic if clock is None else clock
    paths = tuple(dirs)
    start = clock()
    missing: list[str | os.PathLike[str]] = []
    for attempt in range(attempts):
        missing = [path for path in paths if not exists(path)]
        if not missing:
            _LOGGER.debug("%d directories ready after %d checks", len(paths), attempt + 1)
            return
        sleep(interval)
    raise DirectoryWaitTimeout(missing, clock() - start)


__all__ = [
    "wait_for_dirs",
]
