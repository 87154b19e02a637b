"""Maps a model kind to the factory that builds it."""

from __future__ import annotations

from typing import Any, Callable

from intentlayer.classifiers.base import IntentModel
from intentlayer.classifiers.huggingface import HuggingFaceIntentModel
from intentlayer.classifiers.rule_based import RuleBasedIntentModel
from intentlayer.exceptions import ModelNotFoundError

ModelFactory = Callable[..., IntentModel]


class ModelRegistry:
    def __init__(self) -> None:
        self._factories: dict[str, ModelFactory] = {
            "rule": RuleBasedIntentModel,
            "huggingface": HuggingFaceIntentModel,
        }

    def available(self) -> list[str]:
        return sorted(self._factories)

    def get(self, kind: str) -> ModelFactory | None:
        return self._factories.get(kind)

    def register(self, kind: str, factory: ModelFactory) -> None:
        self._factories[kind] = factory

    def create(self, kind: str, **kwargs: Any) -> IntentModel:
        factory = self.get(kind)
        if factory is None:
            raise ModelNotFoundError(kind)
        return factory(**kwargs)
