"""
값이 선언된 타입 기술자(shape)와 일치하는지 검사합니다.

Checks whether a value matches a declared type descriptor (shape).

shape 는 일반적인 타입 어노테이션입니다.
A shape is a regular type annotation:

- int, str, list[int], dict[str, float], int | None, Literal[...], TypedDict
- pydantic 모델 / dataclass (인스턴스만 허용) / pydantic models and dataclasses
  (instances only)
- pydantic 이 스키마를 만들 수 없는 일반 클래스 (isinstance 검사)
  plain classes pydantic cannot build a schema for (isinstance check)

검사는 pydantic strict 모드로 수행되며 값을 변환하지 않습니다.
Validation runs in pydantic strict mode and never coerces the value.
"""

from dataclasses import is_dataclass
from functools import lru_cache
from types import GenericAlias
from typing import Any

from pydantic import BaseModel, TypeAdapter, ValidationError
from pydantic.errors import PydanticSchemaGenerationError

from .result import Result, err, ok


def _is_plain_class(shape: Any) -> bool:
    return isinstance(shape, type) and not isinstance(shape, GenericAlias)


def _requires_instance(shape: Any) -> bool:
    # 모델/dataclass 는 dict 입력도 통과시키므로 인스턴스 여부만 본다.
    # Models and dataclasses would accept dict input, so only instances count.
    return _is_plain_class(shape) and (
        issubclass(shape, BaseModel) or is_dataclass(shape)
    )


def _build_adapter(shape: Any) -> TypeAdapter[Any] | None:
    try:
        return TypeAdapter(shape)
    except PydanticSchemaGenerationError:
        if _is_plain_class(shape):
            return None
        raise


@lru_cache(maxsize=256)
def _cached_adapter(shape: Any) -> TypeAdapter[Any] | None:
    return _build_adapter(shape)


def _adapter_for(shape: Any) -> TypeAdapter[Any] | None:
    try:
        hash(shape)
    except TypeError:
        return _build_adapter(shape)
    return _cached_adapter(shape)


def describe_shape(shape: Any) -> str:
    """
    메시지에 쓸 shape 이름을 반환합니다.

    Render a shape for use in messages.
    """
    if _is_plain_class(shape):
        return shape.__qualname__
    return repr(shape).replace("typing.", "")


def format_validation_error(
    exc: ValidationError,
    *,
    default_loc: str | None = None,
) -> str:
    """
    pydantic 검증 에러를 `field: message` 목록 문자열로 만든다.
    Render a pydantic ValidationError as `field: message` pairs.

    위치가 비어 있는 에러는 default_loc 를 쓰고, 없으면 메시지만 남긴다.
    Errors without a location use `default_loc`, or just the message.
    """
    parts: list[str] = []
    for detail in exc.errors():
        loc = ".".join(str(item) for item in detail["loc"]) or default_loc
        parts.append(f"{loc}: {detail['msg']}" if loc else detail["msg"])
    return "; ".join(parts)


def check_shape(value: Any, shape: Any) -> Result[None, str]:
    """
    value 가 shape 와 일치하면 Ok(None), 아니면 설명 메시지를 담은 Err 를 반환합니다.

    Return Ok(None) when `value` matches `shape`, otherwise an Err with
    a description of the mismatch.
    """
    expected = describe_shape(shape)

    if _requires_instance(shape):
        if isinstance(value, shape):
            return ok(None)
        return err(f"expected {expected}, got {type(value).__name__}")

    adapter = _adapter_for(shape)
    if adapter is None:
        if isinstance(value, shape):
            return ok(None)
        return err(f"expected {expected}, got {type(value).__name__}")

    try:
        adapter.validate_python(value, strict=True)
    except ValidationError as exc:
        return err(
            f"expected {expected}, got {type(value).__name__} "
            f"({format_validation_error(exc)})",
            cause=exc,
        )
    return ok(None)


__all__ = ["check_shape", "describe_shape", "format_validation_error"]
