"""Strategy registry.

Maps a strategy identifier (the ``versioning`` value in a release-please
package config) to a factory. The registry is built once at startup by
``default_registry()`` and handed to whatever needs to resolve strategies;
importing this module registers nothing.

Usage:
    registry = default_registry()
    match registry.create("minor-breaking", StrategyOptions(force_major=True)):
        case Ok(strategy):
            strategy.bump("0.3.1", "breaking")  # Ok(Version(1, 0, 0))
        case Err(error):
            print(error.message)
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Literal

from relrun.core.result import Err, Ok, Result
from relrun.versioning.strategy import (
    DefaultVersioningStrategy,
    MinorBreakingVersioningStrategy,
    StrategyOptions,
    VersioningStrategy,
)

__all__ = [
    "DEFAULT_STRATEGY_ID",
    "MINOR_BREAKING_STRATEGY_ID",
    "RegistryError",
    "StrategyFactory",
    "StrategyRegistry",
    "default_registry",
]

DEFAULT_STRATEGY_ID = DefaultVersioningStrategy.id
MINOR_BREAKING_STRATEGY_ID = MinorBreakingVersioningStrategy.id

StrategyFactory = Callable[[StrategyOptions], VersioningStrategy]


@dataclass(frozen=True, slots=True)
class RegistryError:
    kind: Literal["unknown_strategy", "duplicate_strategy"]
    message: str
    hint: str | None = None


class StrategyRegistry:
    """String-keyed strategy factories, in registration order."""

    def __init__(self) -> None:
        self._factories: dict[str, StrategyFactory] = {}

    def register(self, strategy_id: str, factory: StrategyFactory) -> Result[None, RegistryError]:
        if strategy_id in self._factories:
            return Err(
                RegistryError(
                    kind="duplicate_strategy",
                    message=f"versioning strategy already registered: {strategy_id}",
                )
            )
        self._factories[strategy_id] = factory
        return Ok(None)

    def ids(self) -> tuple[str, ...]:
        return tuple(self._factories)

    def __contains__(self, strategy_id: object) -> bool:
        return strategy_id in self._factories

    def create(
        self,
        strategy_id: str,
        options: StrategyOptions | None = None,
    ) -> Result[VersioningStrategy, RegistryError]:
        """Build the strategy registered under ``strategy_id``."""
        factory = self._factories.get(strategy_id)
        if factory is None:
            return Err(
                RegistryError(
                    kind="unknown_strategy",
                    message=f"unknown versioning strategy: {strategy_id}",
                    hint=f"registered: {', '.join(self._factories) or '(none)'}",
                )
            )
        return Ok(factory(options or StrategyOptions()))


def default_registry() -> StrategyRegistry:
    """Build the registry with every strategy relrun ships."""
    registry = StrategyRegistry()
    registry.register(DEFAULT_STRATEGY_ID, DefaultVersioningStrategy)
    registry.register(MINOR_BREAKING_STRATEGY_ID, MinorBreakingVersioningStrategy)
    return registry
