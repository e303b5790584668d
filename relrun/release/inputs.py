"""Runner inputs read from the CI environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from relrun.core.result import Err, Ok, Result
from relrun.release.errors import RunnerError

DEFAULT_CONFIG_FILE = "release-please-config.json"
DEFAULT_MANIFEST_FILE = ".release-please-manifest.json"


@dataclass(frozen=True, slots=True)
class RunnerInputs:
    token: str
    repo_url: str  # owner/name
    target_branch: str | None = None
    config_file: str = DEFAULT_CONFIG_FILE
    manifest_file: str = DEFAULT_MANIFEST_FILE
    skip_github_release: bool = False
    skip_github_pull_request: bool = False
    pull_request_title_pattern: str | None = None
    pull_request_header: str | None = None

    @property
    def owner(self) -> str:
        return self.repo_url.split("/", 1)[0]

    @property
    def repo(self) -> str:
        return self.repo_url.split("/", 1)[1]


def _env_str(env: Mapping[str, str], key: str) -> str | None:
    value = env.get(key)
    return value or None


def _env_flag(env: Mapping[str, str], key: str) -> bool:
    # Only the literal "true" enables a flag, as GitHub Actions renders booleans.
    return env.get(key) == "true"


def parse_inputs(env: Mapping[str, str] | None = None) -> Result[RunnerInputs, RunnerError]:
    """Read runner inputs.

    Args:
        env: Environment mapping (``os.environ`` if None).

    Returns:
        Ok(RunnerInputs), or Err for a missing token or repository.
    """
    if env is None:
        env = os.environ

    token = _env_str(env, "GITHUB_TOKEN")
    if token is None:
        return Err(
            RunnerError(
                kind="missing_token",
                message="GITHUB_TOKEN environment variable is required",
            )
        )

    repo_url = _env_str(env, "REPO_URL") or _env_str(env, "GITHUB_REPOSITORY")
    if repo_url is None:
        return Err(
            RunnerError(
                kind="missing_repo",
                message="REPO_URL or GITHUB_REPOSITORY environment variable is required",
            )
        )

    owner, sep, name = repo_url.strip().partition("/")
    if not sep or not owner or not name or "/" in name:
        return Err(
            RunnerError(
                kind="invalid_repo",
                message=f"invalid repository: {repo_url}",
                hint="expected owner/repo",
            )
        )

    return Ok(
        RunnerInputs(
            token=token,
            repo_url=f"{owner}/{name}",
            target_branch=_env_str(env, "TARGET_BRANCH"),
            config_file=_env_str(env, "CONFIG_FILE") or DEFAULT_CONFIG_FILE,
            manifest_file=_env_str(env, "MANIFEST_FILE") or DEFAULT_MANIFEST_FILE,
            skip_github_release=_env_flag(env, "SKIP_GITHUB_RELEASE"),
            skip_github_pull_request=_env_flag(env, "SKIP_GITHUB_PULL_REQUEST"),
            pull_request_title_pattern=_env_str(env, "PULL_REQUEST_TITLE_PATTERN"),
            pull_request_header=_env_str(env, "PULL_REQUEST_HEADER"),
        )
    )
