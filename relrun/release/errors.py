from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


RunnerErrorKind = Literal[
    "missing_token",
    "missing_repo",
    "invalid_repo",
    "config_not_found",
    "config_invalid",
    "config_write_failed",
    "manifest_not_found",
    "manifest_invalid",
    "initial_release",
    "release_please_missing",
    "release_please_failed",
    "network_failed",
]


@dataclass(frozen=True, slots=True)
class RunnerError:
    kind: RunnerErrorKind
    message: str
    hint: str | None = None

    def pretty(self) -> str:
        if self.hint:
            return f"{self.message} (hint: {self.hint})"
        return self.message
