"""CI-friendly ``key=value`` output of created releases and pull requests."""

from __future__ import annotations

import json
from collections.abc import Callable, Sequence

import typer

from relrun.release.orchestrator import CreatedPullRequest, CreatedRelease

Echo = Callable[[str], None]

# release-please payload keys -> names used by the GitHub release API.
RELEASE_KEY_RENAMES: dict[str, str] = {
    "tagName": "tag_name",
    "uploadUrl": "upload_url",
    "notes": "body",
    "url": "html_url",
}


def _bool(value: bool) -> str:
    return "true" if value else "false"


def _value(value: object) -> str:
    if isinstance(value, bool):
        return _bool(value)
    if value is None:
        return ""
    return str(value)


def release_lines(releases: Sequence[CreatedRelease | None]) -> list[str]:
    created = [r for r in releases if r is not None]
    lines = [f"releases_created={_bool(bool(created))}"]
    paths_released: list[str] = []
    for release in created:
        paths_released.append(release.path)
        lines.append(f"Created release: {release.tag_name}")
        for raw_key, value in release.entries:
            key = RELEASE_KEY_RENAMES.get(raw_key, raw_key)
            lines.append(f"  {key}={_value(value)}")
    lines.append(f"paths_released={json.dumps(paths_released, separators=(',', ':'))}")
    return lines


def pull_request_lines(prs: Sequence[CreatedPullRequest | None]) -> list[str]:
    created = [pr for pr in prs if pr is not None]
    lines = [f"prs_created={_bool(bool(created))}"]
    for pr in created:
        if pr.title:
            lines.append(f"Created/updated PR #{pr.number}: {pr.title}")
        else:
            lines.append(f"Created/updated PR #{pr.number}")
    return lines


def output_releases(releases: Sequence[CreatedRelease | None], echo: Echo = typer.echo) -> None:
    for line in release_lines(releases):
        echo(line)


def output_pull_requests(prs: Sequence[CreatedPullRequest | None], echo: Echo = typer.echo) -> None:
    for line in pull_request_lines(prs):
        echo(line)
