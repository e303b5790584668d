"""End-to-end release run: inputs -> merged config -> releases -> pull requests."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from relrun import __version__
from relrun.core.result import Err, Ok, Result
from relrun.core.structured import StrDict
from relrun.output.console import ConsoleProtocol, Style
from relrun.release.config_file import (
    PROPOSAL_CONFIG_FILE,
    apply_overrides,
    read_config,
    write_config,
)
from relrun.release.errors import RunnerError
from relrun.release.inputs import RunnerInputs, parse_inputs
from relrun.release.manifest import check_strategies, load_manifest
from relrun.release.orchestrator import OrchestratorFactory, ReleasePleaseCli
from relrun.release.outputs import Echo, output_pull_requests, output_releases
from relrun.release.pinning import (
    PinError,
    owned_paths,
    pin_versions,
    release_please_config,
)
from relrun.versioning import StrategyRegistry, Version

type RunError = PinError


@dataclass(frozen=True, slots=True)
class RunSummary:
    releases_created: int
    prs_created: int


def run_release(
    *,
    env: Mapping[str, str] | None,
    repo_root: Path,
    work_dir: Path,
    registry: StrategyRegistry,
    console: ConsoleProtocol,
    echo: Echo,
    orchestrator_factory: OrchestratorFactory = ReleasePleaseCli,
) -> Result[RunSummary, RunError]:
    """Run release-please once for the repository described by ``env``.

    Releases are created before pull requests, each against a freshly built
    orchestrator. Either step is skipped by its ``SKIP_*`` input. Packages on
    a relrun strategy are pinned with ``release-as`` before the PR step.
    """
    console.print(f"Running relrun version: {__version__}", Style.HEADER)

    inputs = parse_inputs(env)
    if isinstance(inputs, Err):
        return inputs

    config = read_config(repo_root / inputs.value.config_file)
    if isinstance(config, Err):
        return config
    merged = apply_overrides(config.value, inputs.value)

    strategies = check_strategies(merged, registry)
    if isinstance(strategies, Err):
        return strategies
    for path, strategy_id in strategies.value.items():
        console.print(f"{path}: versioning={strategy_id}")
    owned = owned_paths(strategies.value)

    config_path = write_config(release_please_config(merged, owned), work_dir)
    if isinstance(config_path, Err):
        return config_path

    releases_created = 0
    if not inputs.value.skip_github_release:
        console.print("Loading manifest from config file")
        orchestrator = orchestrator_factory(inputs.value, config_path.value)
        console.print("Creating releases", Style.INFO)
        releases = orchestrator.create_releases()
        if isinstance(releases, Err):
            return releases
        output_releases(releases.value, echo)
        releases_created = len(releases.value)

    prs_created = 0
    if not inputs.value.skip_github_pull_request:
        if owned:
            pins = _pin(
                merged=merged,
                strategies=strategies.value,
                inputs=inputs.value,
                repo_root=repo_root,
                work_dir=work_dir,
                registry=registry,
                console=console,
                orchestrator_factory=orchestrator_factory,
            )
            if isinstance(pins, Err):
                return pins
            config_path = write_config(release_please_config(merged, owned, pins.value), work_dir)
            if isinstance(config_path, Err):
                return config_path

        console.print("Loading manifest from config file")
        orchestrator = orchestrator_factory(inputs.value, config_path.value)
        console.print("Creating pull requests", Style.INFO)
        prs = orchestrator.create_pull_requests()
        if isinstance(prs, Err):
            return prs
        output_pull_requests(prs.value, echo)
        prs_created = len(prs.value)

    return Ok(RunSummary(releases_created=releases_created, prs_created=prs_created))


def _pin(
    *,
    merged: StrDict,
    strategies: Mapping[str, str],
    inputs: RunnerInputs,
    repo_root: Path,
    work_dir: Path,
    registry: StrategyRegistry,
    console: ConsoleProtocol,
    orchestrator_factory: OrchestratorFactory,
) -> Result[dict[str, Version], RunError]:
    manifest = load_manifest(repo_root / inputs.manifest_file)
    if isinstance(manifest, Err):
        return manifest
    for path in owned_paths(strategies):
        if path not in manifest.value:
            console.print(
                f"{path}: no released version, release-please picks the initial version",
                Style.WARNING,
            )

    def propose(proposal: StrDict) -> Result[Version | None, RunnerError]:
        proposal_path = write_config(proposal, work_dir, file_name=PROPOSAL_CONFIG_FILE)
        if isinstance(proposal_path, Err):
            return proposal_path
        return orchestrator_factory(inputs, proposal_path.value).propose_version()

    console.print("Computing versions", Style.INFO)
    pinned = pin_versions(
        config=merged,
        manifest=manifest.value,
        strategies=strategies,
        registry=registry,
        propose=propose,
    )
    if isinstance(pinned, Err):
        return pinned
    for pin in pinned.value:
        console.print(
            f"{pin.path}: {pin.current} -> {pin.version} "
            f"({pin.strategy_id}, {pin.classification}; release-please proposed {pin.proposed})",
            Style.DIM,
        )
    return Ok({pin.path: pin.version for pin in pinned.value})
