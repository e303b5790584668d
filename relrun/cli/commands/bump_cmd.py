from __future__ import annotations

import typer

from relrun.cli.commands._helpers import exit_on_error
from relrun.cli.context import build_context
from relrun.core.result import Err
from relrun.versioning import MINOR_BREAKING_STRATEGY_ID, StrategyOptions


def bump(
    version: str = typer.Argument(..., help="Current released version, e.g. 1.4.2."),
    kind: str = typer.Argument(..., help="patch, minor, breaking or major."),
    strategy: str = typer.Option(
        MINOR_BREAKING_STRATEGY_ID,
        "--strategy",
        help="Versioning strategy id (see `relrun strategies`).",
    ),
    force_major: bool = typer.Option(
        False,
        "--force-major",
        help="Breaking changes on 0.x release 1.0.0.",
    ),
    prerelease: bool = typer.Option(False, "--prerelease", help="Produce a prerelease version."),
    prerelease_type: str | None = typer.Option(
        None,
        "--prerelease-type",
        help="Prerelease label (default: beta).",
    ),
) -> None:
    """Print the next version as version=<next>."""
    ctx = build_context()
    options = StrategyOptions(
        force_major=force_major,
        prerelease=prerelease,
        prerelease_type=prerelease_type,
    )
    created = ctx.registry.create(strategy, options)
    if isinstance(created, Err):
        exit_on_error(created.error)

    result = created.value.bump(version, kind)
    if isinstance(result, Err):
        exit_on_error(result.error)
    typer.echo(f"version={result.value}")
