from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from result_core import get_settings


_TOGGLE_ENV_VARS = ("RESULT_CORE_ASSERTIONS", "RESULT_CORE_TYPE_CHECKS")


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    # 실제 .env / 환경 변수의 영향을 받지 않도록 격리한다.
    monkeypatch.chdir(tmp_path)
    for name in _TOGGLE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def set_toggles(monkeypatch: pytest.MonkeyPatch) -> Callable[..., None]:
    def _set(*, assertions: bool = False, type_checks: bool = False) -> None:
        monkeypatch.setenv("RESULT_CORE_ASSERTIONS", "1" if assertions else "0")
        monkeypatch.setenv("RESULT_CORE_TYPE_CHECKS", "1" if type_checks else "0")
        get_settings.cache_clear()

    return _set
