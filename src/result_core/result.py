from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any, Never

from .errors import ContractViolation, InvalidStateError


@dataclass(slots=True, frozen=True)
class Ok[T]:
    """
    성공 결과 값을 담는 래퍼입니다.

    Wrapper type that represents the successful branch of a Result.
    """

    # match Ok(value) 구문에서 위치 인자로 매칭될 필드 정의
    # Define which field is used positionally in `match Ok(value)`
    __match_args__ = ("value",)

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap_value(self) -> T:
        return self.value

    def unwrap_error(self) -> Never:
        raise InvalidStateError(
            f"unwrap_error() called on Ok: {self.value!r}"
        )

    def unwrap_or[D](self, default: D) -> T:
        return self.value

    def map[U](self, fn: Callable[[T], U]) -> "Ok[U]":
        """
        성공 값에 fn 을 적용한 새 Ok 를 반환합니다.

        Return a new Ok holding fn(value).
        """
        return Ok(fn(self.value))

    def map_err[F](self, fn: Callable[[Any], F]) -> "Ok[T]":
        return self

    def and_then[U, F](
        self,
        fn: "Callable[[T], Result[U, F]]",
    ) -> "Result[U, F]":
        """
        Result 를 반환하는 다음 단계를 이어서 호출합니다.

        Chain a Result-returning step onto the success value.
        """
        return fn(self.value)


@dataclass(slots=True, frozen=True)
class Err[E]:
    """
    실패(에러) 정보를 담는 래퍼입니다.

    Wrapper type that represents the error branch of a Result.

    - error: 사람이 읽을 수 있는 메시지 또는 도메인 에러 객체
      (human-readable message or a structured domain error)
    - cause: 실패를 유발한 원인(예외 등, 선택)
      (optional underlying cause, e.g. the original exception)
    """

    # match Err(error) 구문에서 위치 인자로 매칭될 필드 정의
    # Define which field is used positionally in `match Err(error)`
    __match_args__ = ("error",)

    error: E
    cause: object | None = field(default=None, compare=False)

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap_value(self) -> Never:
        message = f"unwrap_value() called on Err: {self.error!r}"
        if isinstance(self.cause, BaseException):
            raise InvalidStateError(message) from self.cause
        raise InvalidStateError(message)

    def unwrap_error(self) -> E:
        return self.error

    def unwrap_or[D](self, default: D) -> D:
        return default

    def map[U](self, fn: Callable[[Any], U]) -> "Err[E]":
        return self

    def map_err[F](self, fn: Callable[[E], F]) -> "Err[F]":
        """
        에러 값을 변환합니다. cause 는 그대로 유지됩니다.

        Transform the error payload, keeping the original cause.
        """
        return Err(fn(self.error), cause=self.cause)

    def and_then[U, F](self, fn: Callable[[Any], Any]) -> "Err[E]":
        return self


type Result[T, E] = Ok[T] | Err[E]
"""
도메인/서비스 계층에서 사용하는 공용 Result 타입입니다.

Generic Result type used as the shared error/value representation
across domain and service boundaries.

- T: 성공 시 반환되는 값의 타입 (success type)
- E: 실패(에러) 시 반환되는 정보의 타입 (error type)
"""


def ok[T](value: T) -> Ok[T]:
    """
    value 를 그대로 담은 성공 Result 를 만듭니다.

    Build a successful Result carrying `value` unchanged.
    """
    return Ok(value)


def err[E](message: E, cause: object | None = None) -> Err[E]:
    """
    실패 Result 를 만듭니다.

    Build a failed Result carrying `message` and an optional cause.
    """
    return Err(message, cause=cause)


def is_ok[T, E](result: Result[T, E]) -> bool:
    """
    Result가 Ok 인지 여부를 반환합니다.

    Return True if the given Result is an Ok value.
    """
    return isinstance(result, Ok)


def is_err[T, E](result: Result[T, E]) -> bool:
    """
    Result가 Err 인지 여부를 반환합니다.

    Return True if the given Result is an Err value.
    """
    return isinstance(result, Err)


def collect[T, E](results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """
    여러 Result 를 하나로 모읍니다. 첫 번째 Err 에서 멈춥니다.

    Combine Results into Ok(list of values), or return the first Err.
    """
    values: list[T] = []
    for result in results:
        match result:
            case Ok(value):
                values.append(value)
            case Err():
                return result
            case _:
                # Result 가 아닌 값이 섞인 경우 (invariant broken).
                # A non-Result item was passed in (invariant broken).
                raise ContractViolation(
                    f"collect() expects Ok or Err items, got {type(result).__name__}"
                )
    return Ok(values)


__all__ = [
    "Ok",
    "Err",
    "Result",
    "ok",
    "err",
    "is_ok",
    "is_err",
    "collect",
]
