from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CheckSettings(BaseSettings):
    """
    개발 단계 검사(assertion / shape check) 토글 설정.
    Toggles for development-time assertions and return shape checks.

    환경 변수 예시 / Environment variables:
    - RESULT_CORE_ASSERTIONS=1
    - RESULT_CORE_TYPE_CHECKS=1
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="RESULT_CORE_",
        extra="ignore",
    )

    assertions: bool = Field(
        default=False,
        description=(
            "개발 단계 assertion 활성화 여부 / "
            "Whether development-time assertions are enabled."
        ),
    )
    type_checks: bool = Field(
        default=False,
        description=(
            "반환 값 shape 검사 활성화 여부 / "
            "Whether return-value shape checking is enabled."
        ),
    )


@lru_cache
def get_settings() -> CheckSettings:
    """
    환경 변수 및 .env 파일에서 설정을 로드한다.
    Load settings from environment variables and .env file (cached).
    """
    return CheckSettings()
