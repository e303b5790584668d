"""release-please config loading and override merging."""

from __future__ import annotations

import json
from pathlib import Path

from relrun.core.result import Err, Ok, Result
from relrun.core.structured import StrDict, as_str_dict
from relrun.release.errors import RunnerError
from relrun.release.inputs import RunnerInputs

MERGED_CONFIG_FILE = ".release-please-config.tmp.json"
PROPOSAL_CONFIG_FILE = ".release-please-proposal.tmp.json"


def read_config(path: Path) -> Result[StrDict, RunnerError]:
    """Read a release-please config file; the root must be a JSON object."""
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return Err(RunnerError(kind="config_not_found", message=f"config file not found: {path}"))
    except (OSError, UnicodeDecodeError) as e:
        return Err(RunnerError(kind="config_invalid", message=f"cannot read config {path}: {e}"))

    try:
        obj: object = json.loads(text)
    except json.JSONDecodeError as e:
        return Err(RunnerError(kind="config_invalid", message=f"invalid JSON in {path}: {e}"))

    data = as_str_dict(obj)
    if data is None:
        return Err(
            RunnerError(kind="config_invalid", message=f"config root must be an object: {path}")
        )
    return Ok(data)


def apply_overrides(config: StrDict, inputs: RunnerInputs) -> StrDict:
    """Return a copy of ``config`` with the PR title/header inputs applied."""
    merged = dict(config)
    if inputs.pull_request_title_pattern:
        merged["pull-request-title-pattern"] = inputs.pull_request_title_pattern
    if inputs.pull_request_header:
        merged["pull-request-header"] = inputs.pull_request_header
    return merged


def write_config(
    config: StrDict,
    out_dir: Path,
    *,
    file_name: str = MERGED_CONFIG_FILE,
) -> Result[Path, RunnerError]:
    """Write ``config`` to ``out_dir/file_name`` and return its path."""
    out_path = out_dir / file_name
    try:
        out_path.write_text(json.dumps(config, indent=2), encoding="utf-8")
    except OSError as e:
        return Err(
            RunnerError(
                kind="config_write_failed",
                message=f"cannot write config {out_path}: {e}",
            )
        )
    return Ok(out_path)
