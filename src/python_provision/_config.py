"""Runtime settings read from the process environment."""

from __future__ import annotations

import logging
import math
import os
import sys
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

_DC_KW = {"frozen": True, "kw_only": True, "slots": True} if sys.version_info >= (3, 10) else {"frozen": True}
_LOGGER: Final[logging.Logger] = logging.getLogger(__name__)
_T = TypeVar("_T", int, float)

DEFAULT_INDEX_URL: Final[str] = "https://pypi.org"
DEFAULT_REQUEST_TIMEOUT: Final[float] = 30.0
DEFAULT_WAIT_INTERVAL: Final[float] = 0.01  # seconds between two readiness probes
DEFAULT_WAIT_ATTEMPTS: Final[int] = 1000


def _number(
    env: Mapping[str, str],
    key: str,
    convert: Callable[[str], _T],
    default: _T,
    *,
    minimum: _T,
    inclusive: bool = True,
) -> _T:
    raw = env.get(key)
    if raw is None or not raw.strip():
        return default
    try:
        value = convert(raw.strip())
    except ValueError:
        value = None
    if value is None or not math.isfinite(value) or value < minimum or (not inclusive and value == minimum):
        _LOGGER.warning("ignoring invalid value %r for %s, using %r", raw, key, default)
        return default
    return value


@dataclass(**_DC_KW)
class Settings:
    """Tunables for registry access and the directory readiness wait."""

    index_url: str = DEFAULT_INDEX_URL
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    wait_interval: float = DEFAULT_WAIT_INTERVAL
    wait_attempts: int = DEFAULT_WAIT_ATTEMPTS

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if env is None else env
        return cls(
            index_url=(env.get("PYTHON_PROVISION_INDEX_URL") or DEFAULT_INDEX_URL).rstrip("/"),
            request_timeout=_number(env, "PYTHON_PROVISION_TIMEOUT", float, DEFAULT_REQUEST_TIMEOUT, minimum=0.0, inclusive=False),
            wait_interval=_number(env, "PYTHON_PROVISION_WAIT_INTERVAL", float, DEFAULT_WAIT_INTERVAL, minimum=0.0),
            wait_attempts=_number(env, "PYTHON_PROVISION_WAIT_ATTEMPTS", int, DEFAULT_WAIT_ATTEMPTS, minimum=1),
        )


__all__ = [
    "DEFAULT_INDEX_URL",
    "DEFAULT_REQUEST_TIMEOUT",
    "DEFAULT_WAIT_ATTEMPTS",
    "DEFAULT_WAIT_INTERVAL",
    "Settings",
]
