from __future__ import annotations

from pathlib import Path

import pytest

from result_core import CheckSettings, get_settings


def test_defaults_are_off() -> None:
    settings = get_settings()

    assert settings.assertions is False
    assert settings.type_checks is False


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("1", True), ("0", False), ("true", True), ("false", False)],
)
def test_toggles_read_from_env(
    monkeypatch: pytest.MonkeyPatch,
    raw: str,
    expected: bool,
) -> None:
    monkeypatch.setenv("RESULT_CORE_ASSERTIONS", raw)
    monkeypatch.setenv("RESULT_CORE_TYPE_CHECKS", raw)

    settings = CheckSettings()

    assert settings.assertions is expected
    assert settings.type_checks is expected


def test_toggles_read_from_dotenv(tmp_path: Path) -> None:
    # conftest 가 tmp_path 로 chdir 해 두었으므로 .env 가 읽힌다.
    (tmp_path / ".env").write_text(
        "RESULT_CORE_TYPE_CHECKS=1\nUNRELATED=ignored\n",
        encoding="utf-8",
    )

    settings = CheckSettings()

    assert settings.type_checks is True
    assert settings.assertions is False


def test_get_settings_is_cached(monkeypatch: pytest.MonkeyPatch) -> None:
    first = get_settings()
    monkeypatch.setenv("RESULT_CORE_ASSERTIONS", "1")

    # 프로세스 시작 시 1회만 읽는다.
    assert get_settings() is first
    assert get_settings().assertions is False

    get_settings.cache_clear()
    assert get_settings().assertions is True
