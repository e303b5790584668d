"""Hand relrun's versioning strategies to release-please.

release-please only resolves its own ``versioning`` types. Packages whose
strategy lives in relrun are sent to it as ``default`` and, when a release PR
is due, pinned with ``release-as`` to the version relrun computed:

1. ``release-pr --dry-run`` on a one-package config with ``default``
   versioning proposes a version.
2. The proposal is classified against the manifest version (major moved ->
   breaking, minor moved -> minor, otherwise patch).
3. The package's own strategy turns that classification into the version that
   gets pinned.
"""

from __future__ import annotations

from collections.abc import Callable, Collection, Mapping
from dataclasses import dataclass

from relrun.core.result import Err, Ok, Result
from relrun.core.structured import StrDict, as_str_dict, get_str, get_table
from relrun.release.errors import RunnerError
from relrun.release.manifest import component_config
from relrun.versioning import (
    BumpClassification,
    RegistryError,
    StrategyOptions,
    StrategyRegistry,
    Version,
    VersioningError,
    parse_version,
)

__all__ = [
    "RELEASE_PLEASE_VERSIONING",
    "PinError",
    "PinnedVersion",
    "classify_proposal",
    "owned_paths",
    "pin_versions",
    "proposal_config",
    "release_please_config",
]

# Versioning types release-please resolves itself.
RELEASE_PLEASE_VERSIONING = frozenset(
    {
        "default",
        "always-bump-patch",
        "always-bump-minor",
        "always-bump-major",
        "service-pack",
        "prerelease",
    }
)

# Options only relrun reads.
_RELRUN_ONLY_KEYS = ("force-major",)

# Options that would move the proposal away from plain semver.
_PROPOSAL_DROPPED_KEYS = (
    "versioning",
    "release-as",
    "pull-request-title-pattern",
    "bump-minor-pre-major",
    "bump-patch-for-minor-pre-major",
    "prerelease",
    "prerelease-type",
    *_RELRUN_ONLY_KEYS,
)

type PinError = RunnerError | RegistryError | VersioningError

Propose = Callable[[StrDict], Result[Version | None, RunnerError]]


@dataclass(frozen=True, slots=True)
class PinnedVersion:
    path: str
    strategy_id: str
    current: Version
    proposed: Version
    classification: BumpClassification
    version: Version


def owned_paths(strategies: Mapping[str, str]) -> list[str]:
    """Packages whose strategy release-please cannot resolve."""
    return [path for path, sid in strategies.items() if sid not in RELEASE_PLEASE_VERSIONING]


def classify_proposal(current: Version, proposed: Version) -> BumpClassification:
    if proposed.major > current.major:
        return BumpClassification.BREAKING
    if proposed.major == current.major and proposed.minor > current.minor:
        return BumpClassification.MINOR
    return BumpClassification.PATCH


def _without(table: Mapping[str, object], keys: Collection[str]) -> StrDict:
    return {k: v for k, v in table.items() if k not in keys}


def proposal_config(config: Mapping[str, object], path: str) -> StrDict:
    """One-package copy of ``config`` that release-please versions as plain semver."""
    packages = get_table(config, "packages") or {}
    entry = _without(get_table(packages, path) or {}, _PROPOSAL_DROPPED_KEYS)
    entry["versioning"] = "default"
    out = _without(config, (*_PROPOSAL_DROPPED_KEYS, "packages"))
    out["versioning"] = "default"
    out["packages"] = {path: entry}
    return out


def release_please_config(
    config: Mapping[str, object],
    owned: Collection[str],
    pins: Mapping[str, Version] | None = None,
) -> StrDict:
    """Copy of ``config`` release-please accepts.

    ``owned`` packages (and a relrun-only top-level id) become ``default``;
    ``pins`` add ``release-as``. Relrun-only options are dropped.
    """
    pins = pins or {}
    out = _without(config, _RELRUN_ONLY_KEYS)
    top_id = get_str(config, "versioning")
    if top_id is not None and top_id not in RELEASE_PLEASE_VERSIONING:
        out["versioning"] = "default"

    packages = get_table(config, "packages")
    if packages is None:
        return out
    translated: StrDict = {}
    for path, raw in packages.items():
        entry = _without(as_str_dict(raw) or {}, _RELRUN_ONLY_KEYS)
        if path in owned:
            entry["versioning"] = "default"
        if path in pins:
            entry["release-as"] = str(pins[path])
        translated[path] = entry
    out["packages"] = translated
    return out


def pin_versions(
    *,
    config: Mapping[str, object],
    manifest: Mapping[str, str],
    strategies: Mapping[str, str],
    registry: StrategyRegistry,
    propose: Propose,
) -> Result[list[PinnedVersion], PinError]:
    """Compute the ``release-as`` version of every owned package with a pending release.

    Packages are skipped, not failed, when release-please proposes nothing,
    when they have no manifest version yet (release-please picks the initial
    version), or when the config already sets ``release-as``.
    """
    pinned: list[PinnedVersion] = []
    for path in owned_paths(strategies):
        settings = component_config(config, path)
        if "release-as" in settings:
            continue
        current_text = manifest.get(path)
        if current_text is None:
            continue
        current = parse_version(current_text)
        if isinstance(current, Err):
            return current

        proposed = propose(proposal_config(config, path))
        if isinstance(proposed, Err):
            return proposed
        if proposed.value is None:
            continue

        strategy_id = strategies[path]
        strategy = registry.create(strategy_id, StrategyOptions.from_config(settings))
        if isinstance(strategy, Err):
            return strategy
        classification = classify_proposal(current.value.core, proposed.value.core)
        version = strategy.value.bump(current.value, classification)
        if isinstance(version, Err):
            return version

        pinned.append(
            PinnedVersion(
                path=path,
                strategy_id=strategy_id,
                current=current.value,
                proposed=proposed.value,
                classification=classification,
                version=version.value,
            )
        )
    return Ok(pinned)
