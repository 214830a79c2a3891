"""Release metadata and virtual environment helpers for Python environment managers."""

from __future__ import annotations

from importlib.metadata import version

from ._catalog import SUPPORTED_VERSIONS, compatible_versions, latest_compatible, possible_py_versions
from ._config import Settings
from ._env import pythonpath_env, set_pythonpath
from ._errors import (
    DirectoryWaitTimeout,
    LayoutNotFoundError,
    PathEncodingError,
    ProvisionError,
    RegistryError,
    exit_on_error,
)
from ._registry import RegistryClient, ReleaseArtifact, ReleaseCatalog, get_warehouse_data
from ._specifier import InterpreterVersion, RequiresPython
from ._venv import EnvironmentPaths, find_bin_path, venv_exists, venv_python
from ._wait import wait_for_dirs

__version__ = version("python-provision")

__all__ = [
    "SUPPORTED_VERSIONS",
    "DirectoryWaitTimeout",
    "EnvironmentPaths",
    "InterpreterVersion",
    "LayoutNotFoundError",
    "PathEncodingError",
    "ProvisionError",
    "RegistryClient",
    "RegistryError",
    "ReleaseArtifact",
    "ReleaseCatalog",
    "RequiresPython",
    "Settings",
    "__version__",
    "compatible_versions",
    "exit_on_error",
    "find_bin_path",
    "get_warehouse_data",
    "latest_compatible",
    "possible_py_versions",
    "pythonpath_env",
    "set_pythonpath",
    "venv_exists",
    "venv_python",
    "wait_for_dirs",
]
