"""Settings loading and the demo entry point."""

from __future__ import annotations

import os

import pytest
from pydantic import ValidationError

import main
from kansuji.config import ParserSettings, get_settings, load_settings


class TestSettings:
    def test_defaults(self):
        settings = load_settings()
        assert settings.allow_incomplete_sequence is False
        assert settings.max_input_length == 10_000
        assert settings.max_batch_size == 100
        assert settings.log_level == "WARNING"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("KANSUJI_ALLOW_INCOMPLETE_SEQUENCE", "1")
        monkeypatch.setenv("KANSUJI_MAX_INPUT_LENGTH", "500")
        monkeypatch.setenv("KANSUJI_LOG_LEVEL", "debug")
        settings = load_settings()
        assert settings.allow_incomplete_sequence is True
        assert settings.max_input_length == 500
        assert settings.log_level == "DEBUG"

    def test_falsy_flag(self, monkeypatch):
        monkeypatch.setenv("KANSUJI_ALLOW_INCOMPLETE_SEQUENCE", "no")
        assert load_settings().allow_incomplete_sequence is False

    def test_bad_limit_rejected(self, monkeypatch):
        monkeypatch.setenv("KANSUJI_MAX_BATCH_SIZE", "0")
        with pytest.raises(ValidationError):
            load_settings()

    def test_bad_log_level_rejected(self):
        with pytest.raises(ValidationError):
            ParserSettings(log_level="LOUD", _env_file=None)

    def test_misspelled_flag_rejected(self, monkeypatch):
        monkeypatch.setenv("KANSUJI_ALLOW_INCOMPLETE_SEQUENCE", "ture")
        with pytest.raises(ValidationError):
            load_settings()

    def test_non_numeric_limit_rejected(self, monkeypatch):
        monkeypatch.setenv("KANSUJI_MAX_INPUT_LENGTH", "lots")
        with pytest.raises(ValidationError):
            load_settings()

    def test_dotenv_file_is_read(self, tmp_path):
        # conftest runs each test from an empty tmp_path
        (tmp_path / ".env").write_text(
            "KANSUJI_ALLOW_INCOMPLETE_SEQUENCE=yes\nKANSUJI_MAX_BATCH_SIZE=7\n",
            encoding="utf-8",
        )
        settings = load_settings()
        assert settings.allow_incomplete_sequence is True
        assert settings.max_batch_size == 7

    def test_environment_beats_dotenv(self, tmp_path, monkeypatch):
        (tmp_path / ".env").write_text("KANSUJI_MAX_BATCH_SIZE=7\n", encoding="utf-8")
        monkeypatch.setenv("KANSUJI_MAX_BATCH_SIZE", "9")
        assert load_settings().max_batch_size == 9

    def test_dotenv_does_not_touch_environ(self, tmp_path):
        (tmp_path / ".env").write_text("KANSUJI_LOG_LEVEL=INFO\n", encoding="utf-8")
        assert load_settings().log_level == "INFO"
        assert "KANSUJI_LOG_LEVEL" not in os.environ

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()


class TestMain:
    def test_all_valid_exits_zero(self, capsys):
        assert main.main(["四千三百二十一", "一億五千万"]) == 0
        out = capsys.readouterr().out
        assert "4,321" in out
        assert "150,000,000" in out

    def test_invalid_exits_one(self, capsys):
        assert main.main(["数ではない"]) == 1
        assert "INVALID_NUMERAL" in capsys.readouterr().out

    def test_rejection_shows_position(self, capsys):
        assert main.main(["一万不可"]) == 1
        out = capsys.readouterr().out
        assert "INVALID_NUMERAL" in out
        assert "position: 4" in out

    def test_samples_include_a_rejection(self):
        assert main.main([]) == 1
