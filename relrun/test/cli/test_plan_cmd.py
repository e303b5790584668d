from __future__ import annotations

import json
from pathlib import Path

import pytest
import typer

from relrun.cli.commands import plan_cmd
from relrun.cli.context import CLIContext
from relrun.core.errors import ErrorCode
from relrun.output.console import MockConsole
from relrun.versioning import default_registry


def _setup(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    *,
    manifest: dict[str, str],
) -> MockConsole:
    config = {
        "versioning": "minor-breaking",
        "packages": {".": {}, "operator": {"versioning": "default"}},
    }
    (tmp_path / "release-please-config.json").write_text(json.dumps(config), encoding="utf-8")
    (tmp_path / ".release-please-manifest.json").write_text(json.dumps(manifest), encoding="utf-8")
    monkeypatch.delenv("CONFIG_FILE", raising=False)
    monkeypatch.delenv("MANIFEST_FILE", raising=False)

    console = MockConsole()
    ctx = CLIContext(registry=default_registry(), console=console)
    monkeypatch.setattr(plan_cmd, "build_context", lambda: ctx)
    return console


def test_plan_prints_next_versions(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    console = _setup(tmp_path, monkeypatch, manifest={".": "1.4.2", "operator": "1.4.2"})

    plan_cmd.plan(
        bump_items=[".=breaking", "operator=breaking"],
        repo_root=tmp_path,
        config_file=None,
        manifest_file=None,
    )

    assert capsys.readouterr().out == ".=1.5.0\noperator=2.0.0\n"
    assert ".: 1.4.2 -> 1.5.0 (minor-breaking)" in console.messages


def test_plan_reports_failures_and_exits(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    console = _setup(tmp_path, monkeypatch, manifest={".": "1.4.2"})

    with pytest.raises(typer.Exit) as exc:
        plan_cmd.plan(
            bump_items=[".=patch", "operator=minor"],
            repo_root=tmp_path,
            config_file=None,
            manifest_file=None,
        )

    assert exc.value.exit_code == int(ErrorCode.USER_ERROR)
    assert capsys.readouterr().out == ".=1.4.3\n"
    assert console.has_error()
    assert "no released version in manifest" in console.text


def test_plan_rejects_bad_bump_syntax(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    _setup(tmp_path, monkeypatch, manifest={".": "1.4.2"})

    with pytest.raises(typer.Exit) as exc:
        plan_cmd.plan(
            bump_items=["breaking"],
            repo_root=tmp_path,
            config_file=None,
            manifest_file=None,
        )
    assert exc.value.exit_code == int(ErrorCode.USER_ERROR)


def test_plan_missing_manifest_is_io_error(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    _setup(tmp_path, monkeypatch, manifest={})

    with pytest.raises(typer.Exit) as exc:
        plan_cmd.plan(
            bump_items=[".=patch"],
            repo_root=tmp_path,
            config_file=None,
            manifest_file="missing.json",
        )
    assert exc.value.exit_code == int(ErrorCode.IO_ERROR)
