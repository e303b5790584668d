from __future__ import annotations

from relrun.core.result import Err, Ok
from relrun.versioning import BumpClassification, InvalidClassification, parse_classification


def test_parse_known_kinds() -> None:
    assert parse_classification("patch") == Ok(BumpClassification.PATCH)
    assert parse_classification("minor") == Ok(BumpClassification.MINOR)
    assert parse_classification("breaking") == Ok(BumpClassification.BREAKING)
    assert parse_classification("major") == Ok(BumpClassification.MAJOR)


def test_parse_is_case_insensitive() -> None:
    assert parse_classification(" Breaking ") == Ok(BumpClassification.BREAKING)


def test_parse_unknown_kind() -> None:
    result = parse_classification("unknown")
    assert isinstance(result, Err)
    assert isinstance(result.error, InvalidClassification)
    assert result.error.kind == "invalid_classification"
    assert result.error.hint is not None
    assert "breaking" in result.error.hint


def test_str() -> None:
    assert str(BumpClassification.BREAKING) == "breaking"
