"""Semantic version parsing and ordering.

Versions follow Semantic Versioning 2.0.0. Precedence compares
major/minor/patch numerically, ranks a pre-release below its release, compares
pre-release identifiers one by one (numeric ones numerically and below
alphanumeric ones) and ignores build metadata entirely.
"""

import functools
import re
from dataclasses import dataclass

from selfupdate.core.errors import SelfUpdateError

_NUMERIC = r"0|[1-9][0-9]*"
_PRERELEASE_ID = rf"(?:{_NUMERIC}|[0-9]*[A-Za-z-][0-9A-Za-z-]*)"
_BUILD_ID = r"[0-9A-Za-z-]+"

SEMVER_RE = re.compile(
    rf"""
    (?P<major>{_NUMERIC})\.
    (?P<minor>{_NUMERIC})\.
    (?P<patch>{_NUMERIC})
    (?:-(?P<prerelease>{_PRERELEASE_ID}(?:\.{_PRERELEASE_ID})*))?
    (?:\+(?P<build>{_BUILD_ID}(?:\.{_BUILD_ID})*))?
    """,
    re.VERBOSE,
)


class NotSemVerError(SelfUpdateError, ValueError):
    """Version text does not follow semantic versioning."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Not a semantic version: {text!r}")


def _identifier_key(identifier: str) -> tuple[int, int | str]:
    if identifier.isdigit():
        return (0, int(identifier))
    return (1, identifier)


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class SemVer:
    """A parsed semantic version."""

    major: int
    minor: int
    patch: int
    prerelease: tuple[str, ...] = ()
    build: tuple[str, ...] = ()

    @classmethod
    def parse(cls, text: str) -> "SemVer":
        """Parse ``text`` strictly. Raises NotSemVerError."""
        match = SEMVER_RE.fullmatch(text)
        if match is None:
            raise NotSemVerError(text)

        prerelease = match.group("prerelease")
        build = match.group("build")
        return cls(
            major=int(match.group("major")),
            minor=int(match.group("minor")),
            patch=int(match.group("patch")),
            prerelease=tuple(prerelease.split(".")) if prerelease else (),
            build=tuple(build.split(".")) if build else (),
        )

    @property
    def is_prerelease(self) -> bool:
        return bool(self.prerelease)

    def _precedence(self) -> tuple:
        # A release outranks any of its pre-releases.
        if self.prerelease:
            pre = (0, tuple(_identifier_key(i) for i in self.prerelease))
        else:
            pre = (1, ())
        return (self.major, self.minor, self.patch, pre)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SemVer):
            return NotImplemented
        return self._precedence() == other._precedence()

    def __lt__(self, other: "SemVer") -> bool:
        if not isinstance(other, SemVer):
            return NotImplemented
        return self._precedence() < other._precedence()

    def __hash__(self) -> int:
        return hash(self._precedence())

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            text += "-" + ".".join(self.prerelease)
        if self.build:
            text += "+" + ".".join(self.build)
        return text


def parse_version(tag: str) -> SemVer:
    """Parse a release tag, stripping one optional leading ``v``."""
    text = tag[1:] if tag.startswith("v") else tag
    return SemVer.parse(text)
