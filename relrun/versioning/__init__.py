"""Version computation: versions, bump kinds, strategies and their registry.

Nothing in this package performs I/O or depends on the CLI.
"""

from .bump import BumpClassification, parse_classification
from .errors import (
    InvalidClassification,
    InvalidPrereleaseType,
    MalformedVersion,
    VersioningError,
)
from .registry import (
    DEFAULT_STRATEGY_ID,
    MINOR_BREAKING_STRATEGY_ID,
    RegistryError,
    StrategyRegistry,
    default_registry,
)
from .strategy import (
    DefaultVersioningStrategy,
    MinorBreakingVersioningStrategy,
    StrategyOptions,
    VersioningStrategy,
)
from .version import Version, is_prerelease_identifier, parse_version

__all__ = [
    # bump
    "BumpClassification",
    "parse_classification",
    # errors
    "InvalidClassification",
    "InvalidPrereleaseType",
    "MalformedVersion",
    "VersioningError",
    # registry
    "DEFAULT_STRATEGY_ID",
    "MINOR_BREAKING_STRATEGY_ID",
    "RegistryError",
    "StrategyRegistry",
    "default_registry",
    # strategy
    "DefaultVersioningStrategy",
    "MinorBreakingVersioningStrategy",
    "StrategyOptions",
    "VersioningStrategy",
    # version
    "Version",
    "is_prerelease_identifier",
    "parse_version",
]
