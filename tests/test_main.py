"""Tests for main entry point and dependency wiring."""

from __future__ import annotations

import logging
from unittest.mock import MagicMock, patch

import pytest

from intentlayer.classifiers.huggingface import HuggingFaceIntentModel
from intentlayer.classifiers.registry import ModelRegistry
from intentlayer.classifiers.rule_based import RuleBasedIntentModel
from intentlayer.exceptions import ModelNotFoundError
from intentlayer.main import build_engine, build_intent_model, configure_logging
from intentlayer.semantic.engine import SemanticEngine


class TestBuildIntentModel:
    def test_default_is_rule(self, mock_settings):
        assert isinstance(build_intent_model(mock_settings), RuleBasedIntentModel)

    def test_huggingface_uses_settings(self, mock_settings):
        model = build_intent_model(mock_settings, kind="huggingface")
        assert isinstance(model, HuggingFaceIntentModel)
        assert model.name == "test/sentiment-model"
        assert not model.is_initialized()

    def test_kind_from_settings(self, monkeypatch, mock_settings):
        monkeypatch.setenv("INTENTLAYER_INTENT_MODEL", "huggingface")
        from intentlayer.config.settings import Settings

        assert isinstance(build_intent_model(Settings()), HuggingFaceIntentModel)

    def test_unknown_kind(self, mock_settings):
        with pytest.raises(ModelNotFoundError):
            build_intent_model(mock_settings, kind="bert")

    def test_custom_registry(self, mock_settings):
        sentinel = MagicMock()
        registry = ModelRegistry()
        registry.register("custom", lambda: sentinel)
        assert build_intent_model(mock_settings, kind="custom", registry=registry) is sentinel


class TestBuildEngine:
    def test_returns_engine(self, mock_settings):
        engine = build_engine(mock_settings)
        assert isinstance(engine, SemanticEngine)
        assert isinstance(engine.intent_model, RuleBasedIntentModel)

    def test_bot_name_propagated(self, mock_settings, greeting_context):
        engine = build_engine(mock_settings)
        response = engine.generate_contextual_response(greeting_context, ["Hello"], [])
        assert response == "Hello! I'm TestBot. How can I help you today?"

    def test_explicit_model(self, mock_settings, hf_model):
        assert build_engine(mock_settings, intent_model=hf_model).intent_model is hf_model


class TestConfigureLogging:
    def test_level_from_settings(self, mock_settings):
        with patch("intentlayer.main.logging.basicConfig") as basic:
            configure_logging(mock_settings)
        assert basic.call_args.kwargs["level"] == "DEBUG"

    def test_level_is_upper_cased(self, monkeypatch):
        monkeypatch.setenv("INTENTLAYER_LOG_LEVEL", "warning")
        from intentlayer.config.settings import Settings

        with patch("intentlayer.main.logging.basicConfig") as basic:
            configure_logging(Settings())
        assert basic.call_args.kwargs["level"] == logging.getLevelName(logging.WARNING)
