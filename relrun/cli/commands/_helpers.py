"""Shared helpers for CLI commands."""

from __future__ import annotations

from typing import NoReturn

import typer

from relrun.core.errors import ErrorCode


def error_code_for(kind: str) -> ErrorCode:
    """Map an error ``kind`` to the process exit code."""
    if kind in {"missing_token", "missing_repo", "invalid_repo", "release_please_missing"}:
        return ErrorCode.ENV_ERROR
    if kind in {"network_failed"}:
        return ErrorCode.NETWORK_ERROR
    if kind in {"release_please_failed"}:
        return ErrorCode.RELEASE_ERROR
    if kind in {
        "config_not_found",
        "config_invalid",
        "config_write_failed",
        "manifest_not_found",
        "manifest_invalid",
    }:
        return ErrorCode.IO_ERROR
    return ErrorCode.USER_ERROR


def exit_with(message: str, *, code: ErrorCode, hint: str | None = None) -> NoReturn:
    typer.echo(f"error: {message}", err=True)
    if hint:
        typer.echo(f"hint: {hint}", err=True)
    raise typer.Exit(code=int(code))


def exit_on_error(error: object) -> NoReturn:
    """Exit for an error payload with ``kind``, ``message`` and optional ``hint``."""
    kind: str = getattr(error, "kind", "")
    message: str = getattr(error, "message", str(error))
    hint: str | None = getattr(error, "hint", None)
    exit_with(message, code=error_code_for(kind), hint=hint)
