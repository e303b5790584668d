"""Versioning strategies.

A strategy turns (current version, bump classification) into the next
version. It is built once per release run from primitive options, holds no
mutable state, and may be called for any number of components in any order.

This module defines:
- StrategyOptions: immutable construction options
- VersioningStrategy: base class implementing the shared bump contract
- DefaultVersioningStrategy: plain semantic versioning
- MinorBreakingVersioningStrategy: breaking changes bump minor, not major
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass

from relrun.core.result import Err, Ok, Result
from relrun.core.structured import get_bool, get_str
from relrun.versioning.bump import BumpClassification, parse_classification
from relrun.versioning.errors import InvalidClassification, InvalidPrereleaseType, VersioningError
from relrun.versioning.version import Version, is_prerelease_identifier, parse_version

__all__ = [
    "DEFAULT_PRERELEASE_TYPE",
    "StrategyOptions",
    "VersioningStrategy",
    "DefaultVersioningStrategy",
    "MinorBreakingVersioningStrategy",
]

DEFAULT_PRERELEASE_TYPE = "beta"


@dataclass(frozen=True, slots=True)
class StrategyOptions:
    """Options a strategy is constructed from.

    Attributes:
        force_major: A breaking change on a 0.x version releases 1.0.0.
        prerelease: Produce prerelease versions (``X.Y.Z-<type>.N``).
        prerelease_type: Prerelease label; ``beta`` when unset.
    """

    force_major: bool = False
    prerelease: bool = False
    prerelease_type: str | None = None

    @property
    def prerelease_label(self) -> str:
        return self.prerelease_type or DEFAULT_PRERELEASE_TYPE

    @classmethod
    def from_config(cls, data: Mapping[str, object]) -> StrategyOptions:
        """Read options from a release-please package config object.

        Recognized keys: ``force-major``, ``prerelease``, ``prerelease-type``.
        Anything else belongs to release-please and is ignored.
        """
        return cls(
            force_major=get_bool(data, "force-major") or False,
            prerelease=get_bool(data, "prerelease") or False,
            prerelease_type=get_str(data, "prerelease-type"),
        )


class VersioningStrategy(ABC):
    """Base class for versioning strategies.

    Subclasses only decide how the version core moves for a classification
    (``next_core``). Parsing, error reporting and prerelease handling are
    shared so every strategy honours the same contract:

    - the result is strictly greater than ``current``
    - ``current`` is never modified
    - bad input is returned as an ``Err``, never silently defaulted
    """

    id: str

    def __init__(self, options: StrategyOptions | None = None) -> None:
        self._options = options or StrategyOptions()

    @property
    def options(self) -> StrategyOptions:
        return self._options

    @abstractmethod
    def next_core(self, current: Version, kind: BumpClassification) -> Version:
        """Return the next release core for a stable ``current`` core."""
        ...

    def bump(
        self,
        current: Version | str,
        classification: BumpClassification | str,
    ) -> Result[Version, VersioningError]:
        """Compute the next version.

        Args:
            current: An already released version, parsed or as a string.
            classification: The bump kind, parsed or as a string.

        Returns:
            Ok(next version), or Err(MalformedVersion | InvalidClassification |
            InvalidPrereleaseType).
        """
        if isinstance(current, str):
            parsed = parse_version(current)
            if isinstance(parsed, Err):
                return parsed
            current = parsed.value

        kind: object = classification
        if isinstance(kind, str):
            parsed_kind = parse_classification(kind)
            if isinstance(parsed_kind, Err):
                return parsed_kind
            kind = parsed_kind.value
        if not isinstance(kind, BumpClassification):
            return Err(
                InvalidClassification(
                    value=repr(kind),
                    message=f"invalid bump classification: {kind!r}",
                    hint=f"expected one of: {', '.join(k.value for k in BumpClassification)}",
                )
            )

        if self._options.prerelease:
            label = self._options.prerelease_label
            if not is_prerelease_identifier(label):
                return Err(
                    InvalidPrereleaseType(
                        value=label,
                        message=f"invalid prerelease type: {label!r}",
                        hint="use dot-separated alphanumerics and hyphens, e.g. rc or beta",
                    )
                )
            counter = _prerelease_counter(current, label)
            if counter is not None:
                return Ok(
                    Version(current.major, current.minor, current.patch, f"{label}.{counter + 1}")
                )
            core = self.next_core(current.core, kind)
            return Ok(Version(core.major, core.minor, core.patch, f"{label}.1"))

        return Ok(self.next_core(current.core, kind))


def _prerelease_counter(version: Version, label: str) -> int | None:
    """Return N for ``X.Y.Z-<label>.N``, else None."""
    if version.prerelease is None:
        return None
    head, sep, tail = version.prerelease.rpartition(".")
    if not sep or head != label or not tail.isdigit():
        return None
    return int(tail)


class DefaultVersioningStrategy(VersioningStrategy):
    """Plain semantic versioning.

    Breaking changes bump major, except during initial development (0.x)
    where they bump minor.
    """

    id = "default"

    def next_core(self, current: Version, kind: BumpClassification) -> Version:
        match kind:
            case BumpClassification.PATCH:
                return Version(current.major, current.minor, current.patch + 1)
            case BumpClassification.MINOR:
                return Version(current.major, current.minor + 1, 0)
            case BumpClassification.BREAKING:
                if current.major == 0 and not self._options.force_major:
                    return Version(0, current.minor + 1, 0)
                return Version(current.major + 1, 0, 0)
            case BumpClassification.MAJOR:
                return Version(current.major + 1, 0, 0)


class MinorBreakingVersioningStrategy(VersioningStrategy):
    """Breaking changes are released as minor versions.

    ``patch`` -> ``M.m.(p+1)``; ``minor`` and ``breaking`` -> ``M.(m+1).0``.
    With ``force_major`` a breaking change on 0.x graduates to ``1.0.0``.
    Only an explicit ``major`` classification produces ``(M+1).0.0``.
    """

    id = "minor-breaking"

    def next_core(self, current: Version, kind: BumpClassification) -> Version:
        match kind:
            case BumpClassification.PATCH:
                return Version(current.major, current.minor, current.patch + 1)
            case BumpClassification.MINOR:
                return Version(current.major, current.minor + 1, 0)
            case BumpClassification.BREAKING:
                if current.major == 0 and self._options.force_major:
                    return Version(1, 0, 0)
                return Version(current.major, current.minor + 1, 0)
            case BumpClassification.MAJOR:
                return Version(current.major + 1, 0, 0)
