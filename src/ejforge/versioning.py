"""Semantic version parsing and short display formatting."""

from __future__ import annotations

import re
from typing import NamedTuple

from .errors import UnparseableVersionError

__all__ = ["SemanticVersion", "format_short_version", "parse_version"]


_NUMERIC = r"0|[1-9][0-9]*"
_PRE_IDENTIFIER = rf"(?:{_NUMERIC}|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*)"
_SEMVER_PATTERN = re.compile(
    rf"(?P<major>{_NUMERIC})\.(?P<minor>{_NUMERIC})\.(?P<patch>{_NUMERIC})"
    rf"(?:-(?P<pre>{_PRE_IDENTIFIER}(?:\.{_PRE_IDENTIFIER})*))?"
    r"(?:\+(?P<build>[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?"
)


class SemanticVersion(NamedTuple):
    major: int
    minor: int
    patch: int
    pre: tuple[str, ...] = ()
    build: tuple[str, ...] = ()


def parse_version(version: str) -> SemanticVersion:
    """Parse ``version`` following the SemVer 2.0 grammar.

    Raises :class:`UnparseableVersionError` when ``version`` is not valid
    semantic version syntax.
    """

    match = _SEMVER_PATTERN.fullmatch(version) if isinstance(version, str) else None
    if match is None:
        raise UnparseableVersionError(f"Invalid version: {version!r}")

    pre = match.group("pre")
    build = match.group("build")
    return SemanticVersion(
        major=int(match.group("major")),
        minor=int(match.group("minor")),
        patch=int(match.group("patch")),
        pre=tuple(pre.split(".")) if pre else (),
        build=tuple(build.split(".")) if build else (),
    )


def format_short_version(version: str) -> str:
    """Return ``major.minor`` plus the first prerelease identifier, if any.

    >>> format_short_version("1.2.3-rc.1")
    '1.2-rc'
    """

    parsed = parse_version(version)
    short = f"{parsed.major}.{parsed.minor}"
    if parsed.pre:
        short += f"-{parsed.pre[0]}"
    return short
