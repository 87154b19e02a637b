"""Entry point and dependency wiring."""

from __future__ import annotations

import logging

from intentlayer.classifiers.base import IntentModel
from intentlayer.classifiers.registry import ModelRegistry
from intentlayer.cli.app import app
from intentlayer.config.settings import Settings
from intentlayer.semantic.engine import SemanticEngine


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_intent_model(
    settings: Settings | None = None,
    kind: str | None = None,
    registry: ModelRegistry | None = None,
) -> IntentModel:
    settings = settings or Settings()
    registry = registry or ModelRegistry()
    kind = kind or settings.intent_model

    if kind == "huggingface":
        return registry.create(
            kind, model_name=settings.huggingface_model, device=settings.device
        )
    return registry.create(kind)


def build_engine(
    settings: Settings | None = None,
    intent_model: IntentModel | None = None,
) -> SemanticEngine:
    settings = settings or Settings()
    return SemanticEngine(
        bot_name=settings.bot_name,
        intent_model=intent_model or build_intent_model(settings),
    )


if __name__ == "__main__":
    app()
