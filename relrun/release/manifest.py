"""Release manifest loading and next-version planning.

The manifest maps component paths to their last released version. Planning
applies each component's configured strategy to that version; it never
decides *whether* a component is released, only what it would be released as.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from relrun.core.result import Err, Ok, Result
from relrun.core.structured import StrDict, as_str_dict, get_str, get_table
from relrun.release.errors import RunnerError
from relrun.versioning import (
    DEFAULT_STRATEGY_ID,
    BumpClassification,
    RegistryError,
    StrategyOptions,
    StrategyRegistry,
    Version,
    VersioningError,
)

type PlanError = RunnerError | VersioningError | RegistryError


@dataclass(frozen=True, slots=True)
class ComponentPlan:
    path: str
    strategy_id: str
    current: str | None
    outcome: Result[Version, PlanError]


def load_manifest(path: Path) -> Result[dict[str, str], RunnerError]:
    """Read ``{component_path: version}``. Versions are parsed when planned."""
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return Err(RunnerError(kind="manifest_not_found", message=f"manifest not found: {path}"))
    except (OSError, UnicodeDecodeError) as e:
        return Err(RunnerError(kind="manifest_invalid", message=f"cannot read manifest {path}: {e}"))

    try:
        obj: object = json.loads(text)
    except json.JSONDecodeError as e:
        return Err(RunnerError(kind="manifest_invalid", message=f"invalid JSON in {path}: {e}"))

    data = as_str_dict(obj)
    if data is None:
        return Err(
            RunnerError(kind="manifest_invalid", message=f"manifest root must be an object: {path}")
        )

    out: dict[str, str] = {}
    for component, version in data.items():
        if not isinstance(version, str):
            return Err(
                RunnerError(
                    kind="manifest_invalid",
                    message=f"manifest version for {component!r} must be a string",
                )
            )
        out[component] = version
    return Ok(out)


def component_config(config: Mapping[str, object], path: str) -> StrDict:
    """Top-level options overlaid with the package's own entry."""
    merged: StrDict = {k: v for k, v in config.items() if k != "packages"}
    packages = get_table(config, "packages") or {}
    merged.update(get_table(packages, path) or {})
    return merged


def strategy_id_for(config: Mapping[str, object], path: str) -> str:
    return get_str(component_config(config, path), "versioning") or DEFAULT_STRATEGY_ID


def _unknown_strategy(where: str, strategy_id: str, registry: StrategyRegistry) -> RegistryError:
    return RegistryError(
        kind="unknown_strategy",
        message=f"{where}: unknown versioning strategy: {strategy_id}",
        hint=f"registered: {', '.join(registry.ids())}",
    )


def check_strategies(
    config: Mapping[str, object],
    registry: StrategyRegistry,
) -> Result[dict[str, str], RegistryError]:
    """Resolve every configured package's strategy id against ``registry``.

    Returns ``{package_path: strategy_id}``; an unregistered id, top-level or
    per package, fails the whole config before anything is sent to GitHub.
    """
    top_id = get_str(config, "versioning")
    if top_id is not None and top_id not in registry:
        return Err(_unknown_strategy("top-level", top_id, registry))

    packages = get_table(config, "packages") or {}
    resolved: dict[str, str] = {}
    for path in packages:
        strategy_id = strategy_id_for(config, path)
        if strategy_id not in registry:
            return Err(_unknown_strategy(path, strategy_id, registry))
        resolved[path] = strategy_id
    return Ok(resolved)


def plan_versions(
    *,
    config: Mapping[str, object],
    manifest: Mapping[str, str],
    bumps: Mapping[str, BumpClassification | str],
    registry: StrategyRegistry,
) -> list[ComponentPlan]:
    """Compute the next version of every component in ``bumps``.

    Each component gets its own outcome so the caller can decide whether one
    failure aborts the run or only skips that component.
    """
    plans: list[ComponentPlan] = []
    for path, classification in bumps.items():
        settings = component_config(config, path)
        strategy_id = strategy_id_for(config, path)
        current = manifest.get(path)
        plans.append(
            ComponentPlan(
                path=path,
                strategy_id=strategy_id,
                current=current,
                outcome=_plan_one(
                    path=path,
                    current=current,
                    classification=classification,
                    strategy_id=strategy_id,
                    options=StrategyOptions.from_config(settings),
                    registry=registry,
                ),
            )
        )
    return plans


def _plan_one(
    *,
    path: str,
    current: str | None,
    classification: BumpClassification | str,
    strategy_id: str,
    options: StrategyOptions,
    registry: StrategyRegistry,
) -> Result[Version, PlanError]:
    if current is None:
        return Err(
            RunnerError(
                kind="initial_release",
                message=f"{path}: no released version in manifest",
                hint="first releases use the initial version configured for release-please",
            )
        )

    strategy = registry.create(strategy_id, options)
    if isinstance(strategy, Err):
        return strategy

    outcome = strategy.value.bump(current, classification)
    if isinstance(outcome, Err):
        return outcome
    return Ok(outcome.value)
