"""Fetch release metadata of a project from a PyPI compatible registry (the JSON API)."""

from __future__ import annotations

import logging
import re
import sys
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Final

import requests

from ._config import DEFAULT_INDEX_URL, DEFAULT_REQUEST_TIMEOUT, Settings
from ._errors import RegistryError
from ._specifier import InterpreterVersion, RequiresPython

if TYPE_CHECKING:
    from types import TracebackType

    from typing_extensions import Self

_DC_KW = {"frozen": True, "kw_only": True, "slots": True} if sys.version_info >= (3, 10) else {"frozen": True}
_LOGGER: Final[logging.Logger] = logging.getLogger(__name__)
_PROJECT_NAME_RE: Final[re.Pattern[str]] = re.compile(
    r"""
    ^
    [a-z0-9]                # starts with a letter or digit
    (?:[a-z0-9._-]*         # then letters, digits and separators
    [a-z0-9])?              # and ends on a letter or digit
    $
    """,
    re.VERBOSE | re.IGNORECASE,
)
_VERSION_TAG_RE: Final[re.Pattern[str]] = re.compile(
    r"""
    ^
    (?P<major>\d+)
    (?:\.(?P<minor>\d+))?
    (?:\.\d+)?
    $
    """,
    re.VERBOSE,
)
_PYTHON_TAG_RE: Final[re.Pattern[str]] = re.compile(
    r"""
    ^
    (?:py|cp|pp|ip|jy|graalpy)  # implementation abbreviation
    (?P<major>\d)               # major is always a single digit
    (?P<minor>\d+)?             # the remaining digits are the minor
    $
    """,
    re.VERBOSE | re.IGNORECASE,
)
_UNIVERSAL_TAGS: Final[frozenset[str]] = frozenset({"", "any", "source", "none"})


def _tag_supports(tag: str, version: InterpreterVersion) -> bool:
    """Check the coarse ``python_version`` tag of an artifact (``py3``, ``cp310``, ``py2.py3``, ``3.10``)."""
    tag = tag.strip()
    if tag.lower() in _UNIVERSAL_TAGS:
        return True
    if match := _VERSION_TAG_RE.match(tag):
        minor = match["minor"]
        return int(match["major"]) == version.major and (minor is None or int(minor) == version.minor)
    recognized = False
    for part in tag.split("."):
        if not (match := _PYTHON_TAG_RE.match(part)):
            continue
        recognized = True
        minor = match["minor"]
        if int(match["major"]) == version.major and (minor is None or int(minor) == version.minor):
            return True
    if not recognized:
        _LOGGER.debug("unknown python version tag %r, assuming it matches %s", tag, version)
    return not recognized


@dataclass(**_DC_KW)
class ReleaseArtifact:
    """One downloadable file of a release as described by the registry."""

    has_sig: bool
    # bookkeeping only, neither the digest nor the signature are verified here
    md5_digest: str
    packagetype: str
    python_version: str
    url: str
    requires_python: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ReleaseArtifact:
        """Build from one entry of the ``releases`` payload, ignoring every key we do not consume."""
        if not isinstance(data, Mapping):
            msg = f"release artifact must be an object, got {type(data).__name__}"
            raise TypeError(msg)
        requires_python = data.get("requires_python")
        values = {
            "has_sig": data["has_sig"],
            "md5_digest": data["md5_digest"],
            "packagetype": data["packagetype"],
            "python_version": data["python_version"],
            "url": data["url"],
        }
        if not isinstance(values["has_sig"], bool):
            msg = f"has_sig must be a boolean, got {values['has_sig']!r}"
            raise TypeError(msg)
        for key in ("md5_digest", "packagetype", "python_version", "url"):
            if not isinstance(values[key], str):
                msg = f"{key} must be a string, got {values[key]!r}"
                raise TypeError(msg)
        if requires_python is not None and not isinstance(requires_python, str):
            msg = f"requires_python must be a string or null, got {requires_python!r}"
            raise TypeError(msg)
        return cls(requires_python=requires_python or None, **values)

    @property
    def filename(self) -> str:
        return self.url.rsplit("/", 1)[-1]

    def supports(self, version: InterpreterVersion) -> bool:
        """Whether this artifact can be installed for the interpreter *version*."""
        if self.requires_python and not RequiresPython.from_string(self.requires_python).contains(version):
            return False
        return _tag_supports(self.python_version, version)


class ReleaseCatalog(dict[str, list[ReleaseArtifact]]):
    """Release version string to the artifacts of that release, in the order the registry lists them."""

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> ReleaseCatalog:
        """Build from a registry JSON document, only the ``releases`` field is consumed."""
        if not isinstance(payload, Mapping):
            msg = f"response must be an object, got {type(payload).__name__}"
            raise TypeError(msg)
        releases = payload["releases"]
        if not isinstance(releases, Mapping):
            msg = f"releases must be an object, got {type(releases).__name__}"
            raise TypeError(msg)
        catalog = cls()
        for version, artifacts in releases.items():
            if not isinstance(artifacts, list):
                msg = f"artifacts of release {version} must be a list, got {type(artifacts).__name__}"
                raise TypeError(msg)
            catalog[version] = [ReleaseArtifact.from_dict(artifact) for artifact in artifacts]
        return catalog

    def compatible(self, version: InterpreterVersion) -> ReleaseCatalog:
        """Restrict to artifacts installable on *version*, releases left without artifacts are dropped."""
        result = ReleaseCatalog()
        for release, artifacts in self.items():
            if supported := [artifact for artifact in artifacts if artifact.supports(version)]:
                result[release] = supported
        return result


class RegistryClient:
    """Synchronous client for the ``/pypi/<name>/json`` endpoint of a registry."""

    def __init__(
        self,
        index_url: str = DEFAULT_INDEX_URL,
        *,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
        session: requests.Session | None = None,
    ) -> None:
        self.index_url = index_url.rstrip("/")
        self.timeout = timeout
        self._session = session
        self._owns_session = session is None

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        *,
        session: requests.Session | None = None,
    ) -> RegistryClient:
        settings = Settings.from_env() if settings is None else settings
        return cls(settings.index_url, timeout=settings.request_timeout, session=session)

    @property
    def session(self) -> requests.Session:
        if self._session is None:
            self._session = requests.Session()
        return self._session

    def releases_url(self, name: str) -> str:
        return f"{self.index_url}/pypi/{name}/json"

    def get_releases(self, name: str) -> ReleaseCatalog:
        """Fetch the release catalog of project *name*; raise :class:`RegistryError` when that is not possible."""
        if not isinstance(name, str) or not _PROJECT_NAME_RE.match(name):
            msg = f"invalid project name {name!r}"
            raise ValueError(msg)
        payload = self._request(name)
        try:
            catalog = ReleaseCatalog.from_payload(payload)
        except (KeyError, TypeError) as exception:
            raise RegistryError(name, f"unexpected response shape: {exception}") from exception
        _LOGGER.debug("got %d releases of %s", len(catalog), name)
        return catalog

    def _request(self, name: str) -> Any:  # noqa: ANN401
        url = self.releases_url(name)
        _LOGGER.info("fetch release data from %s", url)
        try:
            response = self.session.get(url, timeout=self.timeout, headers={"Accept": "application/json"})
        except requests.RequestException as exception:
            raise RegistryError(name, str(exception) or type(exception).__name__) from exception
        if not 200 <= response.status_code < 300:  # noqa: PLR2004
            raise RegistryError(name, f"{url} answered with HTTP {response.status_code}")
        try:
            return response.json()
        except ValueError as exception:
            raise RegistryError(name, f"{url} returned invalid JSON") from exception

    def close(self) -> None:
        if self._owns_session and self._session is not None:
            self._session.close()
            self._session = None

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self, exc_type: type[BaseException] | None, exc_val: BaseException | None, exc_tb: TracebackType | None
    ) -> None:
        self.close()


def get_warehouse_data(name: str, settings: Settings | None = None) -> ReleaseCatalog:
    """Fetch the release catalog of *name* once, with settings taken from the environment by default."""
    with RegistryClient.from_settings(settings) as client:
        return client.get_releases(name)


__all__ = [
    "RegistryClient",
    "ReleaseArtifact",
    "ReleaseCatalog",
    "get_warehouse_data",
]
