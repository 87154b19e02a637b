"""Custom exception hierarchy for intentlayer."""

from __future__ import annotations


class IntentLayerError(Exception):
    """Base exception for all intentlayer errors."""


class InvalidInputError(IntentLayerError):
    """Raised when classification receives an empty string."""


class EmptyInputError(IntentLayerError):
    """Raised when classification receives whitespace-only text."""


class ModelNotInitializedError(IntentLayerError):
    """Raised when a model is used before ``initialize()`` completed."""

    def __init__(self, model_name: str) -> None:
        super().__init__(f"Model {model_name} not initialized")
        self.model_name = model_name


class ModelInitializationError(IntentLayerError):
    """Raised when the underlying model or pipeline fails to load."""

    def __init__(self, model_name: str, cause: BaseException | str) -> None:
        super().__init__(f"Failed to initialize model {model_name}: {cause}")
        self.model_name = model_name


class ClassificationError(IntentLayerError):
    """Raised when inference fails on an otherwise valid request."""


class ModelNotFoundError(IntentLayerError):
    """Raised when the registry has no factory for a model kind."""

    def __init__(self, kind: str) -> None:
        super().__init__(f"Model type '{kind}' not registered")
        self.kind = kind
