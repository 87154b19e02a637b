"""Tests for the model registry."""

from __future__ import annotations

import pytest

from intentlayer.classifiers.huggingface import HuggingFaceIntentModel
from intentlayer.classifiers.registry import ModelRegistry
from intentlayer.classifiers.rule_based import RuleBasedIntentModel
from intentlayer.exceptions import ModelNotFoundError


class TestModelRegistry:
    def test_available(self):
        assert ModelRegistry().available() == ["huggingface", "rule"]

    def test_create_rule(self):
        assert isinstance(ModelRegistry().create("rule"), RuleBasedIntentModel)

    def test_create_huggingface_with_kwargs(self):
        model = ModelRegistry().create("huggingface", model_name="custom/model")
        assert isinstance(model, HuggingFaceIntentModel)
        assert model.name == "custom/model"

    def test_unknown_kind(self):
        with pytest.raises(ModelNotFoundError, match="Model type 'bert' not registered"):
            ModelRegistry().create("bert")

    def test_get_unknown_returns_none(self):
        assert ModelRegistry().get("bert") is None

    def test_register(self):
        registry = ModelRegistry()
        registry.register("custom", RuleBasedIntentModel)
        assert "custom" in registry.available()
        assert isinstance(registry.create("custom"), RuleBasedIntentModel)

    def test_each_create_returns_new_instance(self):
        registry = ModelRegistry()
        assert registry.create("rule") is not registry.create("rule")
