from __future__ import annotations

import typer

from relrun.cli.context import build_context


def strategies() -> None:
    """List registered versioning strategy ids."""
    ctx = build_context()
    for strategy_id in ctx.registry.ids():
        typer.echo(strategy_id)
