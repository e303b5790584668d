"""Run command - create releases and release PRs with release-please."""

from __future__ import annotations

import os
from pathlib import Path

import typer

from relrun.cli.commands._helpers import error_code_for
from relrun.cli.context import build_context
from relrun.core.result import Err
from relrun.release.runner import run_release


def run(
    repo_root: Path = typer.Option(
        Path("."),
        "--repo-root",
        help="Repository root that CONFIG_FILE is relative to.",
    ),
    work_dir: Path = typer.Option(
        Path("."),
        "--work-dir",
        help="Directory for the merged release-please config.",
    ),
) -> None:
    """Create GitHub releases and release PRs (configured via environment)."""
    ctx = build_context()
    result = run_release(
        env=os.environ,
        repo_root=repo_root.expanduser().resolve(),
        work_dir=work_dir.expanduser().resolve(),
        registry=ctx.registry,
        console=ctx.console,
        echo=typer.echo,
    )
    if isinstance(result, Err):
        error = result.error
        typer.echo(f"release-please failed: {error.message}", err=True)
        if error.hint:
            typer.echo(f"hint: {error.hint}", err=True)
        raise typer.Exit(code=int(error_code_for(error.kind)))
