from __future__ import annotations

import json
from pathlib import Path

from relrun.core.result import Err, Ok
from relrun.release.config_file import (
    MERGED_CONFIG_FILE,
    apply_overrides,
    read_config,
    write_config,
)
from relrun.release.inputs import RunnerInputs


def _write(path: Path, data: object) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_read_config(tmp_path: Path) -> None:
    path = _write(tmp_path / "rp.json", {"packages": {".": {"versioning": "minor-breaking"}}})
    assert read_config(path) == Ok({"packages": {".": {"versioning": "minor-breaking"}}})


def test_read_config_missing(tmp_path: Path) -> None:
    result = read_config(tmp_path / "nope.json")
    assert isinstance(result, Err)
    assert result.error.kind == "config_not_found"


def test_read_config_bad_json(tmp_path: Path) -> None:
    path = tmp_path / "rp.json"
    path.write_text("{", encoding="utf-8")
    result = read_config(path)
    assert isinstance(result, Err)
    assert result.error.kind == "config_invalid"


def test_read_config_root_must_be_object(tmp_path: Path) -> None:
    result = read_config(_write(tmp_path / "rp.json", ["x"]))
    assert isinstance(result, Err)
    assert result.error.kind == "config_invalid"


def test_apply_overrides_sets_title_and_header() -> None:
    config: dict[str, object] = {"pull-request-title-pattern": "old", "packages": {}}
    inputs = RunnerInputs(
        token="t",
        repo_url="a/b",
        pull_request_title_pattern="chore${scope}: release${component} ${version}",
        pull_request_header="Release",
    )
    merged = apply_overrides(config, inputs)
    assert merged["pull-request-title-pattern"] == "chore${scope}: release${component} ${version}"
    assert merged["pull-request-header"] == "Release"
    assert config["pull-request-title-pattern"] == "old"


def test_apply_overrides_leaves_config_untouched_without_inputs() -> None:
    config: dict[str, object] = {"pull-request-header": "keep"}
    assert apply_overrides(config, RunnerInputs(token="t", repo_url="a/b")) == config


def test_write_config_uses_two_space_indent(tmp_path: Path) -> None:
    result = write_config({"packages": {".": {}}}, tmp_path)
    assert result == Ok(tmp_path / MERGED_CONFIG_FILE)
    assert (tmp_path / MERGED_CONFIG_FILE).read_text(encoding="utf-8") == (
        '{\n  "packages": {\n    ".": {}\n  }\n}'
    )


def test_write_config_failure(tmp_path: Path) -> None:
    result = write_config({}, tmp_path / "missing-dir")
    assert isinstance(result, Err)
    assert result.error.kind == "config_write_failed"
