from dataclasses import dataclass
from enum import Enum

from result_core import Result


class UserErrorCode(str, Enum):
    """
    사용자 등록 과정에서 발생하는 에러 코드.
    Error codes for user registration.
    """

    INVALID_INPUT = "invalid_input"
    DUPLICATE = "duplicate"


@dataclass(slots=True, frozen=True)
class UserError:
    """
    사용자 등록 도메인 에러 표현.
    Domain error representation for user registration.
    """

    code: UserErrorCode
    message: str


type UserResult[T] = Result[T, UserError]
