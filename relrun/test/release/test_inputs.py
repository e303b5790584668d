from __future__ import annotations

import pytest

from relrun.core.result import Err, Ok
from relrun.release.inputs import (
    DEFAULT_CONFIG_FILE,
    DEFAULT_MANIFEST_FILE,
    RunnerInputs,
    parse_inputs,
)


def test_minimal_environment_uses_defaults() -> None:
    result = parse_inputs({"GITHUB_TOKEN": "t0k", "REPO_URL": "grafana/alloy"})
    assert result == Ok(RunnerInputs(token="t0k", repo_url="grafana/alloy"))
    assert isinstance(result, Ok)
    assert result.value.config_file == DEFAULT_CONFIG_FILE
    assert result.value.manifest_file == DEFAULT_MANIFEST_FILE
    assert result.value.owner == "grafana"
    assert result.value.repo == "alloy"


def test_full_environment() -> None:
    env = {
        "GITHUB_TOKEN": "t0k",
        "REPO_URL": "grafana/alloy",
        "TARGET_BRANCH": "release/v1.4",
        "CONFIG_FILE": "ci/rp-config.json",
        "MANIFEST_FILE": "ci/rp-manifest.json",
        "SKIP_GITHUB_RELEASE": "true",
        "SKIP_GITHUB_PULL_REQUEST": "true",
        "PULL_REQUEST_TITLE_PATTERN": "chore: release ${version}",
        "PULL_REQUEST_HEADER": ":robot: release",
    }
    result = parse_inputs(env)
    assert isinstance(result, Ok)
    inputs = result.value
    assert inputs.target_branch == "release/v1.4"
    assert inputs.config_file == "ci/rp-config.json"
    assert inputs.manifest_file == "ci/rp-manifest.json"
    assert inputs.skip_github_release is True
    assert inputs.skip_github_pull_request is True
    assert inputs.pull_request_title_pattern == "chore: release ${version}"
    assert inputs.pull_request_header == ":robot: release"


def test_github_repository_fallback() -> None:
    result = parse_inputs({"GITHUB_TOKEN": "t", "GITHUB_REPOSITORY": "owner/repo"})
    assert isinstance(result, Ok)
    assert result.value.repo_url == "owner/repo"


def test_repo_url_wins_over_github_repository() -> None:
    result = parse_inputs(
        {"GITHUB_TOKEN": "t", "REPO_URL": "a/b", "GITHUB_REPOSITORY": "c/d"}
    )
    assert isinstance(result, Ok)
    assert result.value.repo_url == "a/b"


@pytest.mark.parametrize("value", ["TRUE", "1", "yes", ""])
def test_skip_flags_require_literal_true(value: str) -> None:
    result = parse_inputs(
        {"GITHUB_TOKEN": "t", "REPO_URL": "a/b", "SKIP_GITHUB_RELEASE": value}
    )
    assert isinstance(result, Ok)
    assert result.value.skip_github_release is False


def test_missing_token() -> None:
    result = parse_inputs({"REPO_URL": "a/b"})
    assert isinstance(result, Err)
    assert result.error.kind == "missing_token"
    assert result.error.message == "GITHUB_TOKEN environment variable is required"


def test_empty_token_is_missing() -> None:
    result = parse_inputs({"GITHUB_TOKEN": "", "REPO_URL": "a/b"})
    assert isinstance(result, Err)
    assert result.error.kind == "missing_token"


def test_missing_repo() -> None:
    result = parse_inputs({"GITHUB_TOKEN": "t"})
    assert isinstance(result, Err)
    assert result.error.kind == "missing_repo"


@pytest.mark.parametrize("repo", ["alloy", "/alloy", "grafana/", "a/b/c"])
def test_invalid_repo(repo: str) -> None:
    result = parse_inputs({"GITHUB_TOKEN": "t", "REPO_URL": repo})
    assert isinstance(result, Err)
    assert result.error.kind == "invalid_repo"


def test_reads_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GITHUB_TOKEN", "env-token")
    monkeypatch.setenv("REPO_URL", "env/repo")
    monkeypatch.delenv("TARGET_BRANCH", raising=False)
    result = parse_inputs()
    assert isinstance(result, Ok)
    assert result.value.token == "env-token"
    assert result.value.target_branch is None
