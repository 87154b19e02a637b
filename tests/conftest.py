"""Shared fixtures and mocks for all tests."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from intentlayer.classifiers.huggingface import HuggingFaceIntentModel
from intentlayer.classifiers.rule_based import RuleBasedIntentModel
from intentlayer.config.settings import Settings
from intentlayer.models.intent import Intent, ResonantWord, SemanticContext
from intentlayer.semantic.engine import SemanticEngine


@pytest.fixture
def mock_settings(monkeypatch):
    monkeypatch.setenv("INTENTLAYER_INTENT_MODEL", "rule")
    monkeypatch.setenv("INTENTLAYER_HUGGINGFACE_MODEL", "test/sentiment-model")
    monkeypatch.setenv("INTENTLAYER_DEVICE", "-1")
    monkeypatch.setenv("INTENTLAYER_BOT_NAME", "TestBot")
    monkeypatch.setenv("INTENTLAYER_LOG_LEVEL", "DEBUG")
    return Settings()


@pytest.fixture
def engine():
    return SemanticEngine(bot_name="PrimeBot")


@pytest.fixture
def classifier():
    """Stand-in for a loaded transformers pipeline."""
    return MagicMock(return_value=[{"label": "POSITIVE", "score": 0.8}])


@pytest.fixture
def pipeline_factory(classifier):
    return MagicMock(return_value=classifier)


@pytest.fixture
def hf_model(pipeline_factory):
    return HuggingFaceIntentModel("test/sentiment-model", pipeline_factory=pipeline_factory)


@pytest.fixture
def rule_model():
    return RuleBasedIntentModel()


@pytest.fixture
def greeting_context():
    return SemanticContext(
        intent=Intent.GREETING,
        entities=[],
        semantic_boosts=["hello", "greeting", "welcome"],
        confidence=0.9,
    )


@pytest.fixture
def sample_resonant_words():
    return [
        ResonantWord(word="hello", resonance=10.0),
        ResonantWord(word="world", resonance=5.0),
    ]
