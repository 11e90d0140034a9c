from collections.abc import Mapping
import logging
from typing import Any

from pydantic import ValidationError

from result_core import Result, err, format_validation_error, ok, result_for

from .models import AppConfig


logger = logging.getLogger(__name__)


@result_for(AppConfig)
def process_config(raw: Mapping[str, Any]) -> Result[AppConfig, str]:
    """
    원시 설정 mapping 을 AppConfig 로 검증한다.
    Validate a raw configuration mapping into an AppConfig.

    잘못된 필드가 있으면 모든 필드 에러를 하나의 Err 메시지로 모아 반환한다.
    Every failing field is listed in a single Err message.
    """
    if not isinstance(raw, Mapping):
        return err("config must be a mapping")

    try:
        config = AppConfig.model_validate(dict(raw))
    except ValidationError as exc:
        message = format_validation_error(exc, default_loc="config")
        logger.warning("Rejected configuration: %s", message)
        return err(message, cause=exc)

    return ok(config)
