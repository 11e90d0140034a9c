"""
사용자 생성/등록 예제.

User creation and registration examples. Validation failures are returned
as Err values; only programming bugs raise.
"""

import logging

from result_core import Err, Ok, Result, err, ok, result_for

from .errors import UserError, UserErrorCode, UserResult
from .models import User


logger = logging.getLogger(__name__)

_MAX_AGE = 150


class UserRegistry:
    """
    이름을 키로 사용자들을 보관하는 메모리 저장소.
    In-memory store of users keyed by name.
    """

    def __init__(self) -> None:
        self._users: dict[str, User] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._users

    def __len__(self) -> int:
        return len(self._users)

    def get(self, name: str) -> User | None:
        return self._users.get(name)

    def add(self, user: User) -> None:
        self._users[user.name] = user


def _validate_email(email: str) -> Result[str, str]:
    if not isinstance(email, str):
        return err(f"Email must be a string, got {type(email).__name__}")
    local, sep, domain = email.strip().partition("@")
    if not sep or not local or not domain or "@" in domain:
        return err(f"Invalid email address: {email!r}")
    return ok(f"{local}@{domain}")


@result_for(User)
def create_user(
    name: str,
    age: int,
    email: str | None = None,
) -> Result[User, str]:
    """
    입력 값을 검증해 User 를 만든다.
    Validate the inputs and build a User.

    - name: 공백 제거 후 비어 있으면 안 된다 / must not be blank
    - age: 0~150 사이 정수 (bool 불가) / int in 0..150, bool rejected
    - email: 선택, `local@domain` 형식 / optional, `local@domain`
    """
    if not isinstance(name, str) or not name.strip():
        return err("Name must be a non-empty string")

    if isinstance(age, bool) or not isinstance(age, int):
        return err(f"Age must be an integer, got {type(age).__name__}")
    if not 0 <= age <= _MAX_AGE:
        return err(f"Age must be between 0 and {_MAX_AGE}, got {age}")

    normalized_email: str | None = None
    if email is not None:
        match _validate_email(email):
            case Ok(value=address):
                normalized_email = address
            case Err() as failed:
                return failed

    return ok(User(name=name.strip(), age=age, email=normalized_email))


@result_for(User)
def register_user(
    registry: UserRegistry,
    name: str,
    age: int,
    email: str | None = None,
) -> UserResult[User]:
    """
    사용자를 검증한 뒤 registry 에 등록한다.
    Validate a user and add it to `registry`.

    검증 실패는 INVALID_INPUT, 이름 중복은 DUPLICATE 에러로 반환한다.
    Validation failures map to INVALID_INPUT, duplicate names to DUPLICATE.
    """
    # 1) 입력 검증 / Validate input
    match create_user(name, age, email):
        case Ok(value=user):
            pass
        case Err(error=message) as failed:
            return err(
                UserError(code=UserErrorCode.INVALID_INPUT, message=message),
                cause=failed,
            )
        case _:
            return err(
                UserError(
                    code=UserErrorCode.INVALID_INPUT,
                    message="Unexpected result type from create_user.",
                )
            )

    # 2) 중복 확인 / Reject duplicates
    if user.name in registry:
        return err(
            UserError(
                code=UserErrorCode.DUPLICATE,
                message=f"User {user.name!r} already exists",
            )
        )

    # 3) 등록 / Register
    registry.add(user)
    logger.info("Registered user %s", user.name)
    return ok(user)
