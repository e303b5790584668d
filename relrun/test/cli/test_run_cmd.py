from __future__ import annotations

from pathlib import Path

import pytest
import typer

from relrun.cli.commands import run_cmd
from relrun.cli.context import CLIContext
from relrun.core.errors import ErrorCode
from relrun.core.result import Err, Ok
from relrun.output.console import MockConsole
from relrun.release.errors import RunnerError
from relrun.release.runner import RunSummary
from relrun.versioning import default_registry


@pytest.fixture(autouse=True)
def _ctx(monkeypatch: pytest.MonkeyPatch) -> None:
    ctx = CLIContext(registry=default_registry(), console=MockConsole())
    monkeypatch.setattr(run_cmd, "build_context", lambda: ctx)


def test_run_passes_resolved_paths(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    seen: dict[str, object] = {}

    def fake_run_release(**kwargs: object) -> Ok[RunSummary]:
        seen.update(kwargs)
        return Ok(RunSummary(releases_created=0, prs_created=0))

    monkeypatch.setattr(run_cmd, "run_release", fake_run_release)

    run_cmd.run(repo_root=tmp_path, work_dir=tmp_path / "work")

    assert seen["repo_root"] == tmp_path.resolve()
    assert seen["work_dir"] == (tmp_path / "work").resolve()
    assert seen["registry"] is not None


@pytest.mark.parametrize(
    ("kind", "code"),
    [
        ("missing_token", ErrorCode.ENV_ERROR),
        ("config_not_found", ErrorCode.IO_ERROR),
        ("release_please_failed", ErrorCode.RELEASE_ERROR),
        ("network_failed", ErrorCode.NETWORK_ERROR),
        ("initial_release", ErrorCode.USER_ERROR),
    ],
)
def test_run_failure_exit_codes(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
    kind: str,
    code: ErrorCode,
) -> None:
    def fake_run_release(**kwargs: object) -> Err[RunnerError]:
        del kwargs
        return Err(RunnerError(kind=kind, message="it broke", hint="try again"))  # type: ignore[arg-type]

    monkeypatch.setattr(run_cmd, "run_release", fake_run_release)

    with pytest.raises(typer.Exit) as exc:
        run_cmd.run(repo_root=tmp_path, work_dir=tmp_path)

    assert exc.value.exit_code == int(code)
    err = capsys.readouterr().err
    assert "release-please failed: it broke" in err
    assert "hint: try again" in err
