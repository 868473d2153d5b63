"""Unit tests for startup settings resolution."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from survey_app.config import ConfigError, DEFAULT_MAX_QUESTION_INDEX, load_settings

QUESTIONNAIRE_TEST = "# Test Questions\n\n## Q1\nQuestion\n=1\n- choice1\n- choice2\n## End"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ("QUESTIONNAIRE_STRING", "QUESTIONNAIRE", "ADMIN_SECRET", "CORS_ORIGINS", "MAX_QUESTION_INDEX"):
        monkeypatch.delenv(key, raising=False)


def test_inline_questionnaire_and_defaults(monkeypatch):
    monkeypatch.setenv("QUESTIONNAIRE_STRING", QUESTIONNAIRE_TEST)
    monkeypatch.setenv("ADMIN_SECRET", "1234")
    settings = load_settings()
    assert settings.questionnaire == QUESTIONNAIRE_TEST
    assert settings.admin_secret == "1234"
    assert settings.cors_origins == ["*"]
    assert settings.max_question_index == DEFAULT_MAX_QUESTION_INDEX


def test_inline_questionnaire_wins_over_file(monkeypatch, tmp_path: Path):
    path = tmp_path / "q.md"
    path.write_text("from file", encoding="utf-8")
    monkeypatch.setenv("QUESTIONNAIRE_STRING", "inline")
    monkeypatch.setenv("QUESTIONNAIRE", str(path))
    monkeypatch.setenv("ADMIN_SECRET", "1234")
    assert load_settings().questionnaire == "inline"


def test_questionnaire_read_from_file(monkeypatch, tmp_path: Path):
    path = tmp_path / "q.md"
    path.write_text(QUESTIONNAIRE_TEST, encoding="utf-8")
    monkeypatch.setenv("QUESTIONNAIRE", str(path))
    monkeypatch.setenv("ADMIN_SECRET", "1234")
    assert load_settings().questionnaire == QUESTIONNAIRE_TEST


def test_missing_admin_secret_is_fatal(monkeypatch):
    monkeypatch.setenv("QUESTIONNAIRE_STRING", QUESTIONNAIRE_TEST)
    with pytest.raises(ConfigError, match="ADMIN_SECRET"):
        load_settings()


def test_empty_admin_secret_is_rejected(monkeypatch):
    monkeypatch.setenv("QUESTIONNAIRE_STRING", QUESTIONNAIRE_TEST)
    monkeypatch.setenv("ADMIN_SECRET", "")
    with pytest.raises(ValidationError):
        load_settings()


def test_missing_questionnaire_source_is_fatal(monkeypatch):
    monkeypatch.setenv("ADMIN_SECRET", "1234")
    with pytest.raises(ConfigError, match="QUESTIONNAIRE"):
        load_settings()


def test_unreadable_questionnaire_file_is_fatal(monkeypatch, tmp_path: Path, mocker):
    monkeypatch.setenv("QUESTIONNAIRE", str(tmp_path / "missing.md"))
    monkeypatch.setenv("ADMIN_SECRET", "1234")
    log_error = mocker.patch("survey_app.config.logger.error")
    with pytest.raises(ConfigError, match="Couldn't read"):
        load_settings()
    log_error.assert_called_once()


def test_cors_origins_and_max_index_overrides(monkeypatch):
    monkeypatch.setenv("QUESTIONNAIRE_STRING", "q")
    monkeypatch.setenv("ADMIN_SECRET", "1234")
    monkeypatch.setenv("CORS_ORIGINS", "http://a.example, http://b.example,")
    monkeypatch.setenv("MAX_QUESTION_INDEX", "9")
    settings = load_settings()
    assert settings.cors_origins == ["http://a.example", "http://b.example"]
    assert settings.max_question_index == 9


def test_invalid_max_index_is_rejected(monkeypatch):
    monkeypatch.setenv("QUESTIONNAIRE_STRING", "q")
    monkeypatch.setenv("ADMIN_SECRET", "1234")
    monkeypatch.setenv("MAX_QUESTION_INDEX", "-1")
    with pytest.raises(ValidationError):
        load_settings()


def test_settings_are_immutable(monkeypatch):
    monkeypatch.setenv("QUESTIONNAIRE_STRING", "q")
    monkeypatch.setenv("ADMIN_SECRET", "1234")
    settings = load_settings()
    with pytest.raises(ValidationError):
        settings.admin_secret = "other"
