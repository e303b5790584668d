from __future__ import annotations

import re
from dataclasses import dataclass

from relrun.core.result import Err, Ok, Result
from relrun.versioning.errors import MalformedVersion


_IDENT = r"(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)"
_VERSION_RE = re.compile(
    r"^(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)"
    rf"(?:-({_IDENT}(?:\.{_IDENT})*))?"
    r"(?:\+([0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?$"
)
_PRERELEASE_RE = re.compile(rf"{_IDENT}(?:\.{_IDENT})*")


@dataclass(frozen=True, slots=True)
class Version:
    """A semantic version.

    Equality is structural (build metadata included). Ordering follows
    semantic-version precedence: build metadata is ignored and a prerelease
    sorts before the release with the same core.
    """

    major: int
    minor: int
    patch: int
    prerelease: str | None = None
    build: str | None = None

    def __str__(self) -> str:
        out = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            out += f"-{self.prerelease}"
        if self.build:
            out += f"+{self.build}"
        return out

    @property
    def core(self) -> Version:
        """This version without prerelease or build metadata."""
        return Version(self.major, self.minor, self.patch)

    def _precedence(self) -> tuple[object, ...]:
        if self.prerelease is None:
            # A release outranks any prerelease of the same core.
            return (self.major, self.minor, self.patch, 1, ())
        idents: list[tuple[int, int, str]] = []
        for part in self.prerelease.split("."):
            if part.isdigit():
                idents.append((0, int(part), ""))
            else:
                idents.append((1, 0, part))
        return (self.major, self.minor, self.patch, 0, tuple(idents))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._precedence() < other._precedence()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._precedence() <= other._precedence()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._precedence() > other._precedence()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._precedence() >= other._precedence()


def parse_version(text: str) -> Result[Version, MalformedVersion]:
    """Parse a canonical version string (no leading ``v``)."""
    m = _VERSION_RE.match(text.strip())
    if m is None:
        return Err(
            MalformedVersion(
                value=text,
                message=f"malformed version: {text!r}",
                hint="expected MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD]",
            )
        )
    return Ok(
        Version(
            major=int(m.group(1)),
            minor=int(m.group(2)),
            patch=int(m.group(3)),
            prerelease=m.group(4),
            build=m.group(5),
        )
    )


def is_prerelease_identifier(text: str) -> bool:
    """True if ``text`` can follow the ``-`` of a version (``rc``, ``beta.2``)."""
    return _PRERELEASE_RE.fullmatch(text) is not None
