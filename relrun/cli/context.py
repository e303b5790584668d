from __future__ import annotations

from dataclasses import dataclass

from relrun.output.console import ConsoleProtocol, RichConsole
from relrun.versioning import StrategyRegistry, default_registry


@dataclass(frozen=True, slots=True)
class CLIContext:
    registry: StrategyRegistry
    console: ConsoleProtocol


def build_context() -> CLIContext:
    """Process startup: build the strategy registry and the console once."""
    return CLIContext(
        registry=default_registry(),
        console=RichConsole(),
    )
