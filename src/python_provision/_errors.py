"""Error types raised by the provisioning helpers and the top-level handler that turns them into an exit."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Generator, Iterable
    from os import PathLike

_LOGGER: Final[logging.Logger] = logging.getLogger(__name__)


class ProvisionError(RuntimeError):
    """Base class for every recoverable failure reported by this package."""


class RegistryError(ProvisionError):
    """Release data could not be obtained from the package registry."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"failed to obtain release data for {name!r}: {reason}")


class DirectoryWaitTimeout(ProvisionError):  # noqa: N818
    """Directories expected from an external process did not appear in time."""

    def __init__(self, missing: Iterable[str | PathLike[str]], elapsed: float) -> None:
        self.missing = tuple(str(i) for i in missing)
        self.elapsed = elapsed
        super().__init__(
            "timed out after {:.2f}s waiting for directories to be created: {}".format(
                elapsed, ", ".join(self.missing)
            )
        )


class LayoutNotFoundError(ProvisionError):
    """Neither the ``bin`` nor the ``Scripts`` layout exists inside a virtual environment."""

    def __init__(self, root: str | PathLike[str]) -> None:
        self.root = str(root)
        super().__init__(
            f"can't find the binary directory (ie `bin` or `Scripts`) in the virtual environment under {self.root}"
        )


class PathEncodingError(ProvisionError):
    """A path cannot be represented as a native environment string."""

    def __init__(self, path: object, reason: str) -> None:
        self.path = path
        super().__init__(f"cannot use {path!r} as an environment value: {reason}")


@contextmanager
def exit_on_error(code: int = 1) -> Generator[None]:
    """Turn a :class:`ProvisionError` raised in the block into one error-level log record and a process exit with *code*."""
    try:
        yield
    except ProvisionError as exception:
        _LOGGER.error("%s", exception)  # noqa: TRY400
        raise SystemExit(code) from exception


__all__ = [
    "DirectoryWaitTimeout",
    "LayoutNotFoundError",
    "PathEncodingError",
    "ProvisionError",
    "RegistryError",
    "exit_on_error",
]
