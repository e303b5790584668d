from __future__ import annotations

import typer

from relrun import __version__
from relrun.cli.commands.bump_cmd import bump
from relrun.cli.commands.plan_cmd import plan
from relrun.cli.commands.run_cmd import run
from relrun.cli.commands.strategies_cmd import strategies


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# Commands
app.command()(run)
app.command()(bump)
app.command()(plan)
app.command()(strategies)


def _print_version(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=0)


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit.",
        callback=_print_version,
        is_eager=True,
    ),
) -> None:
    """Run release-please with the minor-breaking versioning strategy."""
    del version


def main() -> None:
    app()
