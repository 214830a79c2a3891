"""Interpreter versions and ``Requires-Python`` expressions (the subset of PEP 440 that registries publish)."""

from __future__ import annotations

import logging
import operator
import re
import sys
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

_DC_KW = {"frozen": True, "kw_only": True, "slots": True} if sys.version_info >= (3, 10) else {"frozen": True}
_LOGGER: Final[logging.Logger] = logging.getLogger(__name__)

_VERSION_RE: Final[re.Pattern[str]] = re.compile(
    r"""
    ^
    (\d+)               # major
    (?:\.(\d+))?        # optional minor
    (?:\.(\d+))?        # optional micro
    $
    """,
    re.VERBOSE,
)
_CLAUSE_RE: Final[re.Pattern[str]] = re.compile(
    r"""
    ^
    (?P<op>===|==|~=|!=|<=|>=|<|>)  # comparison operator
    \s*
    v?
    (?P<release>\d+(?:\.\d+)*)      # release segment
    (?P<wildcard>\.\*)?             # prefix match, only for == and !=
    (?P<suffix>[-_.]?[a-z]+\d*)*    # pre, post and dev tags, ignored for interpreter matching
    $
    """,
    re.VERBOSE | re.IGNORECASE,
)
_COMPARATORS: Final[dict[str, Callable[[tuple[int, ...], tuple[int, ...]], bool]]] = {
    "==": operator.eq,
    "===": operator.eq,
    "!=": operator.ne,
    "<": operator.lt,
    "<=": operator.le,
    ">": operator.gt,
    ">=": operator.ge,
}


def _pad(release: tuple[int, ...], size: int) -> tuple[int, ...]:
    return release + (0,) * (size - len(release))


@dataclass(order=True, **_DC_KW)
class InterpreterVersion:
    """A ``major.minor[.micro]`` interpreter version, ordered numerically (``3.9 < 3.10``)."""

    major: int
    minor: int = 0
    micro: int = 0
    text: str = field(default="", compare=False)

    @classmethod
    def from_string(cls, text: str) -> InterpreterVersion:
        stripped = text.strip()
        if not (match := _VERSION_RE.match(stripped)):
            msg = f"Invalid interpreter version: {text!r}"
            raise ValueError(msg)
        major, minor, micro = (int(part) if part else 0 for part in match.groups())
        return cls(major=major, minor=minor, micro=micro, text=stripped)

    @property
    def release(self) -> tuple[int, int, int]:
        return self.major, self.minor, self.micro

    def __str__(self) -> str:
        return self.text or ".".join(str(i) for i in self.release)

    def __repr__(self) -> str:
        return f"InterpreterVersion('{self}')"


@dataclass(**_DC_KW)
class RequiresClause:
    """One ``<op><version>`` clause of a ``Requires-Python`` expression."""

    op: str
    release: tuple[int, ...]
    wildcard: bool = False

    @classmethod
    def from_string(cls, text: str) -> RequiresClause:
        if not (match := _CLAUSE_RE.match(text.strip())):
            msg = f"Invalid specifier: {text!r}"
            raise ValueError(msg)
        op, wildcard = match["op"], match["wildcard"] is not None
        if wildcard and op not in {"==", "!="}:
            msg = f"Invalid specifier: {text!r} (wildcards need == or !=)"
            raise ValueError(msg)
        if op == "~=" and match["release"].count(".") == 0:
            msg = f"Invalid specifier: {text!r} (~= needs at least two release parts)"
            raise ValueError(msg)
        release = tuple(int(part) for part in match["release"].split("."))
        return cls(op=op, release=release, wildcard=wildcard)

    def contains(self, version: InterpreterVersion) -> bool:
        candidate = version.release
        if self.wildcard:
            size = len(self.release)
            same = _pad(candidate, size)[:size] == self.release
            return same if self.op == "==" else not same
        if self.op == "~=":
            prefix = self.release[:-1]
            size = max(len(self.release), len(candidate))
            in_series = _pad(candidate, len(prefix))[: len(prefix)] == prefix
            return in_series and _pad(candidate, size) >= _pad(self.release, size)
        size = max(len(self.release), len(candidate))
        return _COMPARATORS[self.op](_pad(candidate, size), _pad(self.release, size))

    def __str__(self) -> str:
        return "{}{}{}".format(self.op, ".".join(str(i) for i in self.release), ".*" if self.wildcard else "")


@dataclass(**_DC_KW)
class RequiresPython:
    """A comma separated ``Requires-Python`` expression; every clause must hold."""

    text: str
    clauses: tuple[RequiresClause, ...]

    @classmethod
    def from_string(cls, text: str | None) -> RequiresPython:
        stripped = (text or "").strip()
        clauses: list[RequiresClause] = []
        for item in (part.strip() for part in stripped.split(",")):
            if not item:
                continue
            try:
                clauses.append(RequiresClause.from_string(item))
            except ValueError:
                _LOGGER.debug("ignoring unparseable clause %r of requires-python %r", item, stripped)
        return cls(text=stripped, clauses=tuple(clauses))

    def contains(self, version: InterpreterVersion | str) -> bool:
        if isinstance(version, str):
            version = InterpreterVersion.from_string(version)
        return all(clause.contains(version) for clause in self.clauses)

    def __iter__(self) -> Iterator[RequiresClause]:
        return iter(self.clauses)

    def __bool__(self) -> bool:
        return bool(self.clauses)

    def __str__(self) -> str:
        return self.text


__all__ = [
    "InterpreterVersion",
    "RequiresClause",
    "RequiresPython",
]
