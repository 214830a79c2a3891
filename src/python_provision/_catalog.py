"""The interpreter versions considered when matching releases against Pythons."""

from __future__ import annotations

from typing import Final

from ._specifier import InterpreterVersion, RequiresPython

# keep sorted ascending, this is the only place the supported set is maintained
SUPPORTED_VERSIONS: Final[tuple[str, ...]] = (
    "2.0",
    "2.1",
    "2.2",
    "2.3",
    "2.4",
    "2.5",
    "2.6",
    "2.7",
    "3.3",
    "3.4",
    "3.5",
    "3.6",
    "3.7",
    "3.8",
    "3.9",
    "3.10",
    "3.11",
    "3.12",
)


def possible_py_versions() -> list[InterpreterVersion]:
    """Return every supported interpreter version, oldest first."""
    return [InterpreterVersion.from_string(version) for version in SUPPORTED_VERSIONS]


def compatible_versions(requires_python: str | None) -> list[InterpreterVersion]:
    """Return the supported versions satisfying a ``Requires-Python`` expression (all of them when unset)."""
    constraint = RequiresPython.from_string(requires_python)
    return [version for version in possible_py_versions() if constraint.contains(version)]


def latest_compatible(requires_python: str | None) -> InterpreterVersion | None:
    if versions := compatible_versions(requires_python):
        return versions[-1]
    return None


__all__ = [
    "SUPPORTED_VERSIONS",
    "compatible_versions",
    "latest_compatible",
    "possible_py_versions",
]
