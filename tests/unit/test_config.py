"""Unit tests for settings loading."""

from pathlib import Path
from typing import Any

import pytest
from pydantic import ValidationError

from bestnotes.config import Settings, get_settings


def test_defaults(monkeypatch: Any, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    settings = Settings()
    assert settings.start_screen == "title"
    assert settings.log_level == "INFO"
    assert settings.log_file.name == "bestnotes.log"


def test_env_prefix_overrides(monkeypatch: Any, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("BESTNOTES_START_SCREEN", "login")
    monkeypatch.setenv("BESTNOTES_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("BESTNOTES_LOG_FILE", str(tmp_path / "x.log"))

    settings = get_settings()

    assert settings.start_screen == "login"
    assert settings.log_level == "DEBUG"
    assert settings.log_file == tmp_path / "x.log"


def test_home_start_screen_is_rejected(monkeypatch: Any, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("BESTNOTES_START_SCREEN", "home")
    with pytest.raises(ValidationError):
        Settings()


def test_dotenv_file_is_read(monkeypatch: Any, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env").write_text("BESTNOTES_START_SCREEN=onboarding\n", encoding="utf-8")
    assert Settings().start_screen == "onboarding"
