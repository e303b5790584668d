"""Tests for relrun.core.errors module."""

from relrun.core.errors import ErrorCode


class TestErrorCodeValues:
    def test_values_are_stable(self) -> None:
        assert ErrorCode.OK == 0
        assert ErrorCode.USER_ERROR == 1
        assert ErrorCode.ENV_ERROR == 2
        assert ErrorCode.RELEASE_ERROR == 3
        assert ErrorCode.NETWORK_ERROR == 4
        assert ErrorCode.IO_ERROR == 5


class TestErrorCodeUsage:
    def test_str_is_human_readable(self) -> None:
        assert str(ErrorCode.RELEASE_ERROR) == "release error"
