"""
result_core 패키지.

명시적인 Ok/Err 결과 전달과 개발 단계 타입 검사를 함께 쓰기 위한
코어 유틸리티를 제공합니다.

The `result_core` package.

Provides the Result type used for explicit ok/err result passing, together
with development-time assertions and an optional shape-checked return
wrapper that can be switched off in production.
"""

import logging

from .config import CheckSettings, get_settings
from .contracts import assert_shape, checked_args, dev_assert, result_for
from .errors import (
    ContractViolation,
    InvalidStateError,
    ResultCoreError,
    ShapeMismatchError,
)
from .result import Err, Ok, Result, collect, err, is_err, is_ok, ok
from .shapes import check_shape, describe_shape, format_validation_error

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Ok",
    "Err",
    "Result",
    "ok",
    "err",
    "is_ok",
    "is_err",
    "collect",
    "CheckSettings",
    "get_settings",
    "assert_shape",
    "checked_args",
    "dev_assert",
    "result_for",
    "check_shape",
    "describe_shape",
    "format_validation_error",
    "ResultCoreError",
    "InvalidStateError",
    "ContractViolation",
    "ShapeMismatchError",
]
