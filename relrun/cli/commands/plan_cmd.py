"""Plan command - preview next versions for manifest components."""

from __future__ import annotations

import os
from pathlib import Path

import typer

from relrun.cli.commands._helpers import error_code_for, exit_on_error, exit_with
from relrun.cli.context import build_context
from relrun.core.errors import ErrorCode
from relrun.core.result import Err
from relrun.output.console import Style
from relrun.release.config_file import read_config
from relrun.release.inputs import DEFAULT_CONFIG_FILE, DEFAULT_MANIFEST_FILE
from relrun.release.manifest import load_manifest, plan_versions


def _parse_bumps(items: list[str]) -> dict[str, str]:
    out: dict[str, str] = {}
    for item in items:
        if "=" not in item:
            exit_with(f"invalid --bump (expected path=kind): {item}", code=ErrorCode.USER_ERROR)
        k, v = item.split("=", 1)
        k = k.strip()
        v = v.strip()
        if not k or not v:
            exit_with(f"invalid --bump (expected path=kind): {item}", code=ErrorCode.USER_ERROR)
        out[k] = v
    return out


def plan(
    bump_items: list[str] = typer.Option(
        ...,
        "--bump",
        help="Component bump as path=kind (repeatable), e.g. --bump .=breaking.",
    ),
    repo_root: Path = typer.Option(Path("."), "--repo-root", help="Repository root."),
    config_file: str | None = typer.Option(
        None,
        "--config-file",
        help=f"release-please config (default: $CONFIG_FILE or {DEFAULT_CONFIG_FILE}).",
    ),
    manifest_file: str | None = typer.Option(
        None,
        "--manifest-file",
        help=f"release manifest (default: $MANIFEST_FILE or {DEFAULT_MANIFEST_FILE}).",
    ),
) -> None:
    """Print <path>=<next version> for each --bump, using each package's strategy."""
    ctx = build_context()
    bumps = _parse_bumps(bump_items)

    root = repo_root.expanduser().resolve()
    config_name = config_file or os.environ.get("CONFIG_FILE") or DEFAULT_CONFIG_FILE
    manifest_name = manifest_file or os.environ.get("MANIFEST_FILE") or DEFAULT_MANIFEST_FILE

    config = read_config(root / config_name)
    if isinstance(config, Err):
        exit_on_error(config.error)
    manifest = load_manifest(root / manifest_name)
    if isinstance(manifest, Err):
        exit_on_error(manifest.error)

    failed: list[ErrorCode] = []
    for item in plan_versions(
        config=config.value,
        manifest=manifest.value,
        bumps=bumps,
        registry=ctx.registry,
    ):
        if isinstance(item.outcome, Err):
            error = item.outcome.error
            ctx.console.error(f"{item.path}: {error.message}")
            if error.hint:
                ctx.console.print(f"hint: {error.hint}", Style.DIM)
            failed.append(error_code_for(error.kind))
            continue
        ctx.console.print(
            f"{item.path}: {item.current} -> {item.outcome.value} ({item.strategy_id})",
            Style.DIM,
        )
        typer.echo(f"{item.path}={item.outcome.value}")

    if failed:
        raise typer.Exit(code=int(failed[0]))
