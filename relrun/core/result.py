"""Result type for explicit error handling.

Fallible operations in relrun return ``Result[T, E]`` instead of raising:
a version that cannot be parsed, a missing ``GITHUB_TOKEN`` or a failed
release-please invocation all come back as ``Err`` values the caller has to
look at.

Usage:
    match parse_version("1.4.2"):
        case Ok(version):
            print(version.minor)
        case Err(error):
            print(error.message)
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """A successful result.

    Attributes:
        value: The success value.
    """

    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err[E]:
    """A failed result.

    Attributes:
        error: The error payload (usually a frozen dataclass with ``message``).
    """

    error: E

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


type Result[T, E] = Ok[T] | Err[E]
