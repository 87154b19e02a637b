"""Tests for settings configuration."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from intentlayer.config.settings import DEFAULT_HUGGINGFACE_MODEL, Settings

_VARS = (
    "INTENTLAYER_INTENT_MODEL",
    "INTENTLAYER_HUGGINGFACE_MODEL",
    "INTENTLAYER_DEVICE",
    "INTENTLAYER_BOT_NAME",
    "INTENTLAYER_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)


class TestSettings:
    def test_default_values(self):
        s = Settings()
        assert s.intent_model == "rule"
        assert s.huggingface_model == DEFAULT_HUGGINGFACE_MODEL
        assert s.device == -1
        assert s.bot_name == "PrimeBot"
        assert s.log_level == "INFO"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("INTENTLAYER_INTENT_MODEL", "huggingface")
        monkeypatch.setenv("INTENTLAYER_HUGGINGFACE_MODEL", "org/custom")
        monkeypatch.setenv("INTENTLAYER_DEVICE", "0")
        monkeypatch.setenv("INTENTLAYER_BOT_NAME", "Echo")
        monkeypatch.setenv("INTENTLAYER_LOG_LEVEL", "DEBUG")
        s = Settings()
        assert s.intent_model == "huggingface"
        assert s.huggingface_model == "org/custom"
        assert s.device == 0
        assert s.bot_name == "Echo"
        assert s.log_level == "DEBUG"

    def test_invalid_device(self, monkeypatch):
        monkeypatch.setenv("INTENTLAYER_DEVICE", "gpu")
        with pytest.raises(ValidationError):
            Settings()

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("BOT_NAME", "wrong-name")
        s = Settings()
        assert s.bot_name == "PrimeBot"

    def test_fixture_settings(self, mock_settings):
        assert mock_settings.bot_name == "TestBot"
        assert mock_settings.huggingface_model == "test/sentiment-model"
