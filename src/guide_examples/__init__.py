"""
guide_examples 패키지.

result_core 위에서 작성한 가이드 예제 함수들입니다.

The `guide_examples` package: the guide's illustrative functions written on
top of result_core.
"""

from .arithmetic import divide
from .configs import process_config
from .errors import UserError, UserErrorCode, UserResult
from .models import AppConfig, User
from .users import UserRegistry, create_user, register_user

__all__ = [
    "divide",
    "create_user",
    "register_user",
    "process_config",
    "UserRegistry",
    "User",
    "AppConfig",
    "UserError",
    "UserErrorCode",
    "UserResult",
]
