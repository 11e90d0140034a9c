"""
개발 단계 계약 검사(assertion)와 반환 값 shape 검사 데코레이터를 제공합니다.

Development-time contract checks and the shape-checked return wrapper.

- 검사 활성화 여부는 CheckSettings 에서 읽습니다 (프로세스 시작 시 1회 로드).
  Whether checks run is read from CheckSettings (loaded once per process).
- 데코레이터는 장식 시점에 토글을 확인하고, 꺼져 있으면 원래 함수를 그대로 반환합니다.
  Decorators read the toggle at decoration time and return the original
  function unchanged when it is off.
"""

from collections.abc import Callable
from functools import wraps
from inspect import signature
import logging
from typing import Any

from .config import get_settings
from .errors import ContractViolation, ShapeMismatchError
from .result import Err, Ok, Result
from .shapes import check_shape, describe_shape


logger = logging.getLogger(__name__)


def _assertions_enabled() -> bool:
    return get_settings().assertions


def _type_checks_enabled(enabled: bool | None) -> bool:
    if enabled is not None:
        return enabled
    return get_settings().type_checks


def _shape_mismatch(value: Any, shape: Any, *, name: str) -> ShapeMismatchError | None:
    match check_shape(value, shape):
        case Err(error=detail):
            message = f"{name} does not match {describe_shape(shape)}: {detail}"
            logger.error("Shape check failed: %s", message)
            return ShapeMismatchError(message, name=name, shape=shape, value=value)
        case _:
            return None


def dev_assert(condition: object, message: str) -> None:
    """
    assertion 이 켜져 있을 때 condition 이 거짓이면 ContractViolation 을 발생시킨다.
    Raise ContractViolation when assertions are enabled and `condition` is falsy.
    """
    if not _assertions_enabled() or condition:
        return
    logger.error("Contract violated: %s", message)
    raise ContractViolation(message)


def assert_shape[V](value: V, shape: Any, *, name: str = "value") -> V:
    """
    assertion 이 켜져 있으면 value 를 shape 로 검사하고, value 를 그대로 반환한다.
    Check `value` against `shape` when assertions are enabled; return it unchanged.
    """
    if not _assertions_enabled():
        return value
    mismatch = _shape_mismatch(value, shape, name=name)
    if mismatch is not None:
        raise mismatch
    return value


def checked_args[F: Callable[..., Any]](**shapes: Any) -> Callable[[F], F]:
    """
    이름이 지정된 인자들을 호출마다 shape 로 검사하는 데코레이터.
    Decorator asserting named arguments against shapes on every call.

    예 / Example::

        @checked_args(a=int | float, b=int | float)
        def divide(a, b): ...
    """

    def decorator(fn: F) -> F:
        if not _assertions_enabled():
            return fn

        sig = signature(fn)
        unknown = sorted(set(shapes) - set(sig.parameters))
        if unknown:
            raise ContractViolation(
                f"{fn.__qualname__} has no parameter(s): {', '.join(unknown)}"
            )

        logger.debug("Installing argument checks on %s", fn.__qualname__)

        @wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            bound = sig.bind(*args, **kwargs)
            for name, shape in shapes.items():
                if name not in bound.arguments:
                    # 기본값이 쓰인 인자는 검사하지 않는다.
                    # Arguments left at their default are not checked.
                    continue
                mismatch = _shape_mismatch(
                    bound.arguments[name],
                    shape,
                    name=f"{fn.__qualname__}() argument '{name}'",
                )
                if mismatch is not None:
                    raise mismatch
            return fn(*args, **kwargs)

        return wrapper  # type: ignore[return-value]

    return decorator


def result_for[**P, T, E](
    shape: Any,
    *,
    enabled: bool | None = None,
) -> Callable[[Callable[P, Result[T, E]]], Callable[P, Result[T, E]]]:
    """
    Result 를 반환하는 함수의 Ok 값을 shape 로 검사하는 데코레이터.
    Decorator validating the Ok value of a Result-returning function.

    - 토글이 꺼져 있으면 원래 함수를 그대로 반환한다 (오버헤드 없음).
      When the toggle is off the original function is returned as is.
    - Ok 값이 shape 와 다르면 호출자에게 전달되기 전에 ShapeMismatchError 가 발생한다.
      A mismatching Ok value raises ShapeMismatchError before reaching the caller.
    - Err 는 검사하지 않고 그대로 전달한다.
      Err results pass through unchecked.
    - enabled 를 지정하면 설정 값 대신 사용한다.
      `enabled` overrides the settings toggle when given.
    """

    def decorator(fn: Callable[P, Result[T, E]]) -> Callable[P, Result[T, E]]:
        if not _type_checks_enabled(enabled):
            return fn

        logger.debug(
            "Installing return shape check on %s (shape=%s)",
            fn.__qualname__,
            describe_shape(shape),
        )

        @wraps(fn)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T, E]:
            result = fn(*args, **kwargs)

            match result:
                case Ok(value=value):
                    mismatch = _shape_mismatch(
                        value,
                        shape,
                        name=f"{fn.__qualname__}() return value",
                    )
                    if mismatch is not None:
                        raise mismatch
                    return result

                case Err():
                    return result

                case _:
                    # Result 타입이 아닌 값이 반환된 경우 (invariant broken).
                    # A non-Result value was returned (invariant broken).
                    message = (
                        f"{fn.__qualname__}() must return Ok or Err, "
                        f"got {type(result).__name__}"
                    )
                    logger.error("Contract violated: %s", message)
                    raise ContractViolation(message)

        return wrapper

    return decorator


__all__ = [
    "assert_shape",
    "checked_args",
    "dev_assert",
    "result_for",
]
