"""
예제 함수들이 반환하는 값 모델을 정의합니다.

Defines the value models returned by the example functions.
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """
    검증을 통과한 사용자입니다.

    A user that passed validation.
    """

    model_config = ConfigDict(frozen=True)

    name: Annotated[str, Field(
        min_length=1,
        description="앞뒤 공백이 제거된 사용자 이름 / User name, stripped.",
    )]

    age: Annotated[int, Field(
        ge=0,
        le=150,
        description="나이(0~150) / Age in years (0-150).",
    )]

    email: Annotated[str | None, Field(
        default=None,
        description="이메일 주소(선택) / Optional e-mail address.",
    )]


class AppConfig(BaseModel):
    """
    process_config 가 만들어 내는 애플리케이션 설정입니다.

    Application configuration produced by process_config.
    """

    model_config = ConfigDict(extra="forbid")

    name: Annotated[str, Field(
        min_length=1,
        description="애플리케이션 이름 / Application name.",
    )]

    port: Annotated[int, Field(
        ge=1,
        le=65535,
        description="수신 포트(1~65535) / Listening port (1-65535).",
    )]

    debug: Annotated[bool, Field(
        default=False,
        description="디버그 모드 여부 / Whether debug mode is on.",
    )]

    tags: Annotated[list[str], Field(
        default_factory=list,
        description="자유 형식 태그 목록 / Free-form tags.",
    )]
