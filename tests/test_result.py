from __future__ import annotations

import dataclasses

import pytest

from result_core import (
    ContractViolation,
    Err,
    InvalidStateError,
    Ok,
    collect,
    err,
    is_err,
    is_ok,
    ok,
)


@pytest.mark.parametrize("value", [0, 5, "text", None, [1, 2], {"k": "v"}])
def test_ok_carries_value_unchanged(value: object) -> None:
    result = ok(value)

    assert result.is_ok()
    assert not result.is_err()
    assert result.unwrap_value() is value


@pytest.mark.parametrize("message", ["Division by zero", "", "bad input"])
def test_err_carries_message(message: str) -> None:
    result = err(message)

    assert result.is_err()
    assert not result.is_ok()
    assert result.unwrap_error() == message
    assert result.cause is None


def test_unwrap_value_on_err_raises_invalid_state() -> None:
    with pytest.raises(InvalidStateError) as ei:
        err("boom").unwrap_value()

    assert "boom" in str(ei.value)


def test_unwrap_value_on_err_chains_exception_cause() -> None:
    cause = ValueError("root cause")

    with pytest.raises(InvalidStateError) as ei:
        err("wrapped", cause=cause).unwrap_value()

    assert ei.value.__cause__ is cause


def test_unwrap_error_on_ok_raises_invalid_state() -> None:
    with pytest.raises(InvalidStateError):
        ok(1).unwrap_error()


def test_module_level_predicates() -> None:
    assert is_ok(ok(1))
    assert not is_ok(err("x"))
    assert is_err(err("x"))
    assert not is_err(ok(1))


def test_results_are_immutable() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        ok(1).value = 2  # type: ignore[misc]
    with pytest.raises(dataclasses.FrozenInstanceError):
        err("x").error = "y"  # type: ignore[misc]


def test_err_equality_ignores_cause() -> None:
    assert err("x", cause=RuntimeError("a")) == Err("x")
    assert ok(5) == Ok(5)
    assert ok(5) != err(5)


def test_pattern_matching_positional_and_keyword() -> None:
    match ok(3):
        case Ok(value):
            assert value == 3
        case _:
            pytest.fail("expected Ok")

    match err("bad"):
        case Err(error=message):
            assert message == "bad"
        case _:
            pytest.fail("expected Err")


def test_unwrap_or() -> None:
    assert ok(1).unwrap_or(0) == 1
    assert err("x").unwrap_or(0) == 0


def test_map_only_touches_ok() -> None:
    assert ok(2).map(lambda v: v * 10) == Ok(20)

    failed = err("x")
    assert failed.map(lambda v: v * 10) is failed


def test_map_err_keeps_cause() -> None:
    cause = KeyError("k")
    mapped = err("x", cause=cause).map_err(str.upper)

    assert mapped == Err("X")
    assert mapped.cause is cause

    succeeded = ok(1)
    assert succeeded.map_err(str.upper) is succeeded


def test_and_then_chains_and_short_circuits() -> None:
    def half(value: int):
        return ok(value // 2) if value % 2 == 0 else err(f"{value} is odd")

    assert ok(8).and_then(half).and_then(half) == Ok(2)
    assert ok(6).and_then(half).and_then(half) == Err("3 is odd")

    failed = err("early")
    assert failed.and_then(half) is failed


def test_collect_all_ok() -> None:
    assert collect([ok(1), ok(2), ok(3)]) == Ok([1, 2, 3])
    assert collect([]) == Ok([])


def test_collect_returns_first_err() -> None:
    first = err("first")
    result = collect([ok(1), first, err("second")])

    assert result is first


def test_collect_rejects_non_result_items() -> None:
    with pytest.raises(ContractViolation, match="got int"):
        collect([ok(1), 5])  # type: ignore[list-item]
