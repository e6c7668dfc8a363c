"""Tests for lib/result.py - Result helpers used with run_with."""

import pytest

from aws_clients.lib.errors import ClientFailure
from aws_clients.lib.result import Err, Ok, is_err, is_ok, map_err, map_ok, unwrap, unwrap_or


class TestPredicates:
    def test_is_ok(self) -> None:
        assert is_ok(Ok(1)) is True
        assert is_ok(Err("error")) is False

    def test_is_err(self) -> None:
        assert is_err(Err("error")) is True
        assert is_err(Ok(1)) is False


class TestMapping:
    def test_map_ok_transforms_value(self) -> None:
        assert map_ok(Ok(5), lambda x: x * 2) == Ok(10)

    def test_map_ok_leaves_err(self) -> None:
        err = Err("nope")
        assert map_ok(err, lambda x: x * 2) is err

    def test_map_err_transforms_error(self) -> None:
        assert map_err(Err("nope"), str.upper) == Err("NOPE")

    def test_map_err_leaves_ok(self) -> None:
        ok = Ok(1)
        assert map_err(ok, str.upper) is ok


class TestUnwrap:
    def test_unwrap_ok(self) -> None:
        assert unwrap(Ok("value")) == "value"

    def test_unwrap_err_raises(self) -> None:
        with pytest.raises(ValueError, match="Called unwrap on Err"):
            unwrap(Err("broken"))

    def test_unwrap_chains_failure_cause(self) -> None:
        cause = RuntimeError("boom")
        failure = ClientFailure(kind="s3", region="us-east-1", reason="boom", cause=cause)

        with pytest.raises(ValueError) as exc_info:
            unwrap(Err(failure))

        assert exc_info.value.__cause__ is cause

    def test_unwrap_or(self) -> None:
        assert unwrap_or(Ok(1), 0) == 1
        assert unwrap_or(Err("x"), 0) == 0


class TestClientFailureEquality:
    def test_cause_ignored_in_equality(self) -> None:
        a = ClientFailure("s3", "us-east-1", "boom", RuntimeError("a"))
        b = ClientFailure("s3", "us-east-1", "boom", RuntimeError("b"))
        assert a == b
