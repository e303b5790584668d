"""Errors raised by version computation.

Each is fatal to the computation for one component. They are returned to
the caller and never retried: the same inputs always fail the same way.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class MalformedVersion:
    """The current version string is not ``MAJOR.MINOR.PATCH[-PRE][+BUILD]``."""

    value: str
    message: str
    hint: str | None = None

    @property
    def kind(self) -> str:
        return "malformed_version"


@dataclass(frozen=True, slots=True)
class InvalidClassification:
    """The bump classification is not one of patch, minor, breaking or major."""

    value: str
    message: str
    hint: str | None = None

    @property
    def kind(self) -> str:
        return "invalid_classification"


@dataclass(frozen=True, slots=True)
class InvalidPrereleaseType:
    """The prerelease label is not a dot-separated list of semver identifiers."""

    value: str
    message: str
    hint: str | None = None

    @property
    def kind(self) -> str:
        return "invalid_prerelease_type"


type VersioningError = MalformedVersion | InvalidClassification | InvalidPrereleaseType
