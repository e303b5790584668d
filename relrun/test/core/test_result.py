"""Tests for relrun.core.result module."""

from relrun.core.result import Err, Ok, Result


class TestOk:
    def test_holds_value(self) -> None:
        assert Ok("1.4.3").value == "1.4.3"

    def test_repr(self) -> None:
        assert repr(Ok("1.4.3")) == "Ok('1.4.3')"


class TestErr:
    def test_holds_error(self) -> None:
        assert Err("boom").error == "boom"

    def test_repr(self) -> None:
        assert repr(Err("boom")) == "Err('boom')"

    def test_not_equal_to_ok(self) -> None:
        assert Err(1) != Ok(1)


class TestNarrowing:
    def test_isinstance(self) -> None:
        result: Result[int, str] = Ok(1)
        assert isinstance(result, Ok)
        assert not isinstance(result, Err)

    def test_pattern_matching(self) -> None:
        result: Result[int, str] = Err("nope")
        match result:
            case Ok(value):
                seen = f"ok {value}"
            case Err(error):
                seen = f"err {error}"
        assert seen == "err nope"
