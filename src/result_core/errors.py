"""
result_core 에서 사용하는 예외 계층을 정의합니다.

Exception hierarchy used by result_core.

- 검증 실패는 예외가 아니라 Err 값으로 반환됩니다.
  Validation failures are returned as Err values, not raised.
- 여기 정의된 예외는 프로그래밍 버그(잘못된 unwrap, 계약 위반)만 표현합니다.
  The exceptions below only represent programming bugs
  (invalid unwrap, contract violations).
"""

from typing import Any


class ResultCoreError(Exception):
    """
    result_core 예외의 최상위 타입입니다.

    Base exception for result_core.
    """


class InvalidStateError(ResultCoreError):
    """
    Ok 에서 에러를, Err 에서 값을 꺼내려 할 때 발생합니다.

    Raised when unwrapping the wrong branch of a Result.
    """


class ContractViolation(ResultCoreError, AssertionError):
    """
    개발 단계 계약(assertion) 위반을 나타냅니다.

    Development-time contract violation (an assertion failure).
    """


class ShapeMismatchError(ContractViolation):
    """
    값이 선언된 shape 와 일치하지 않을 때 발생합니다.

    Raised when a value does not match its declared shape.
    """

    def __init__(
        self,
        message: str,
        *,
        name: str,
        shape: Any,
        value: Any,
    ) -> None:
        super().__init__(message)
        self.name = name
        self.shape = shape
        self.value = value
