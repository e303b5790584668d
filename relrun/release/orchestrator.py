"""Boundary to the release orchestrator.

Creating releases and release pull requests is done by release-please. The
runner only sees the ``ReleaseOrchestrator`` protocol; ``ReleasePleaseCli`` is
the adapter that drives the release-please command line. The same boundary
reports the version release-please would propose for the next release PR,
which the runner re-computes with its own strategy.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from relrun.core.result import Err, Ok, Result
from relrun.platform.process import ProcessError
from relrun.platform.process import run as run_process
from relrun.release.errors import RunnerError
from relrun.release.inputs import RunnerInputs
from relrun.versioning import Version, parse_version

__all__ = [
    "CreatedPullRequest",
    "CreatedRelease",
    "OrchestratorFactory",
    "ReleaseOrchestrator",
    "ReleasePleaseCli",
    "RELEASE_PLEASE_COMMAND",
    "RELEASE_PLEASE_TIMEOUT_SECONDS",
    "parse_proposed_version",
]

RELEASE_PLEASE_COMMAND: tuple[str, ...] = ("npx", "--yes", "release-please")
RELEASE_PLEASE_TIMEOUT_SECONDS = 10 * 60.0

_RELEASE_URL_RE = re.compile(r"https://github\.com/[^/\s]+/[^/\s]+/releases/tag/([^\s\"')]+)")
_PR_URL_RE = re.compile(r"https://github\.com/[^/\s]+/[^/\s]+/pull/(\d+)")
_DRY_RUN_TITLE_RE = re.compile(r"^title:[ \t]*(.*?)[ \t]*$", re.MULTILINE)
_TITLE_VERSION_RE = re.compile(r"v?(\d+\.\d+\.\d+\S*)$")


@dataclass(frozen=True, slots=True)
class CreatedRelease:
    """A release reported by the orchestrator.

    ``entries`` keeps the orchestrator's payload keys in their original order
    (``tagName``, ``url``, ``notes`` ...) so every field can be echoed.
    """

    entries: tuple[tuple[str, object], ...]

    @classmethod
    def from_payload(cls, payload: Mapping[str, object]) -> CreatedRelease:
        return cls(entries=tuple(payload.items()))

    def get(self, key: str) -> object:
        for k, v in self.entries:
            if k == key:
                return v
        return None

    @property
    def tag_name(self) -> str:
        value = self.get("tagName")
        return value if isinstance(value, str) else ""

    @property
    def path(self) -> str:
        value = self.get("path")
        return value if isinstance(value, str) and value else "."


@dataclass(frozen=True, slots=True)
class CreatedPullRequest:
    number: int
    title: str | None = None
    html_url: str | None = None


class ReleaseOrchestrator(Protocol):
    """Creates releases and release PRs for one repository."""

    def create_releases(self) -> Result[list[CreatedRelease], RunnerError]: ...

    def create_pull_requests(self) -> Result[list[CreatedPullRequest], RunnerError]: ...

    def propose_version(self) -> Result[Version | None, RunnerError]:
        """Version the next release PR would carry; None when nothing is pending."""
        ...


OrchestratorFactory = Callable[[RunnerInputs, Path], ReleaseOrchestrator]


def _is_network_error(error: ProcessError) -> bool:
    text = f"{error.stderr}\n{error.stdout}".lower()
    markers = (
        "econnreset",
        "econnrefused",
        "etimedout",
        "enotfound",
        "socket hang up",
        "service unavailable",
        "bad gateway",
        "gateway timeout",
        "network is unreachable",
    )
    return any(marker in text for marker in markers)


def _process_error(error: ProcessError, *, action: str) -> RunnerError:
    if error.returncode == -1 and "timed out" not in error.stderr:
        return RunnerError(
            kind="release_please_missing",
            message=f"cannot start release-please: {error.stderr.strip()}",
            hint="Install Node.js (npx) or pass a release-please command",
        )
    hint = error.stderr.strip() or error.stdout.strip() or None
    if _is_network_error(error):
        return RunnerError(kind="network_failed", message=f"{action}: GitHub unreachable", hint=hint)
    return RunnerError(kind="release_please_failed", message=f"{action}: {error}", hint=hint)


def parse_created_releases(output: str) -> list[CreatedRelease]:
    """Extract releases from the GitHub release URLs in release-please output."""
    seen: set[str] = set()
    releases: list[CreatedRelease] = []
    for m in _RELEASE_URL_RE.finditer(output):
        url = m.group(0)
        if url in seen:
            continue
        seen.add(url)
        releases.append(CreatedRelease.from_payload({"tagName": m.group(1), "url": url}))
    return releases


def parse_created_pull_requests(output: str) -> list[CreatedPullRequest]:
    """Extract pull requests from the GitHub PR URLs in release-please output."""
    seen: set[int] = set()
    prs: list[CreatedPullRequest] = []
    for m in _PR_URL_RE.finditer(output):
        number = int(m.group(1))
        if number in seen:
            continue
        seen.add(number)
        prs.append(CreatedPullRequest(number=number, html_url=m.group(0)))
    return prs


def parse_proposed_version(output: str) -> Result[Version | None, RunnerError]:
    """Read the version from the release PR title in ``release-pr --dry-run`` output.

    No ``title:`` line means release-please found nothing to release.
    """
    titles = [m.group(1) for m in _DRY_RUN_TITLE_RE.finditer(output)]
    if not titles:
        return Ok(None)
    for title in titles:
        m = _TITLE_VERSION_RE.search(title)
        if m is None:
            continue
        parsed = parse_version(m.group(1))
        if isinstance(parsed, Ok):
            return Ok(parsed.value)
    return Err(
        RunnerError(
            kind="release_please_failed",
            message=f"no version in proposed release PR title: {titles[0]!r}",
            hint="the proposal is built with the default pull-request-title-pattern",
        )
    )


class ReleasePleaseCli:
    """``ReleaseOrchestrator`` backed by the release-please command line."""

    def __init__(
        self,
        inputs: RunnerInputs,
        config_path: Path,
        *,
        cwd: Path | None = None,
        command: tuple[str, ...] = RELEASE_PLEASE_COMMAND,
        timeout: float = RELEASE_PLEASE_TIMEOUT_SECONDS,
    ) -> None:
        self._inputs = inputs
        self._config_path = config_path
        self._cwd = cwd or config_path.parent
        self._command = command
        self._timeout = timeout

    def _args(self, subcommand: str, *flags: str) -> list[str]:
        args = [
            *self._command,
            subcommand,
            *flags,
            f"--token={self._inputs.token}",
            f"--repo-url={self._inputs.repo_url}",
            f"--config-file={self._config_path}",
            f"--manifest-file={self._inputs.manifest_file}",
        ]
        if self._inputs.target_branch:
            args.append(f"--target-branch={self._inputs.target_branch}")
        return args

    def _run(self, subcommand: str, *flags: str, action: str) -> Result[str, RunnerError]:
        result = run_process(self._args(subcommand, *flags), cwd=self._cwd, timeout=self._timeout)
        if isinstance(result, Err):
            return Err(_process_error(result.error, action=action))
        return result

    def create_releases(self) -> Result[list[CreatedRelease], RunnerError]:
        output = self._run("github-release", action="creating releases")
        if isinstance(output, Err):
            return output
        return Ok(parse_created_releases(output.value))

    def create_pull_requests(self) -> Result[list[CreatedPullRequest], RunnerError]:
        output = self._run("release-pr", action="creating pull requests")
        if isinstance(output, Err):
            return output
        return Ok(parse_created_pull_requests(output.value))

    def propose_version(self) -> Result[Version | None, RunnerError]:
        output = self._run("release-pr", "--dry-run", action="proposing a release")
        if isinstance(output, Err):
            return output
        return parse_proposed_version(output.value)
