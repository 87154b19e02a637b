"""Abstract base for pluggable intent models."""

from __future__ import annotations

import abc
import asyncio
import logging

from intentlayer.exceptions import (
    ClassificationError,
    EmptyInputError,
    IntentLayerError,
    InvalidInputError,
    ModelInitializationError,
    ModelNotInitializedError,
)
from intentlayer.models.classification import (
    ClassificationResult,
    DetailedClassificationResult,
    ModelInfo,
    ModelState,
)
from intentlayer.models.intent import Intent

logger = logging.getLogger(__name__)


class IntentModel(abc.ABC):
    """Shared lifecycle for intent classifiers.

    A model starts ``UNINITIALIZED``. ``initialize()`` moves it through
    ``INITIALIZING`` to ``READY``; a failed load returns it to
    ``UNINITIALIZED`` so the caller may retry. Concurrent ``initialize()``
    calls await a single load task.

    Subclasses implement ``_load`` and ``_predict``.
    """

    name: str
    version: str = "1.0.0"
    description: str = ""
    intents: tuple[Intent, ...] = tuple(Intent)

    def __init__(self) -> None:
        self._state = ModelState.UNINITIALIZED
        self._init_task: asyncio.Task[None] | None = None

    @property
    def state(self) -> ModelState:
        return self._state

    def is_initialized(self) -> bool:
        return self._state == ModelState.READY

    async def initialize(self) -> None:
        if self._state == ModelState.READY:
            return

        if self._init_task is None:
            self._init_task = asyncio.create_task(self._run_load())
        await asyncio.shield(self._init_task)

    async def _run_load(self) -> None:
        self._state = ModelState.INITIALIZING
        logger.info("Initializing intent model %s", self.name)
        try:
            await self._load()
        except Exception as exc:
            self._state = ModelState.UNINITIALIZED
            logger.error("Failed to initialize %s: %s", self.name, exc)
            raise ModelInitializationError(self.name, exc) from exc
        finally:
            # Reset by the task itself; its callers may all have been cancelled.
            self._init_task = None
        self._state = ModelState.READY
        logger.info("Intent model %s initialized", self.name)

    async def classify(self, text: str) -> ClassificationResult:
        detailed = await self.classify_with_details(text)
        return ClassificationResult(intent=detailed.intent, confidence=detailed.confidence)

    async def classify_with_details(self, text: str) -> DetailedClassificationResult:
        self._validate_input(text)
        if not self.is_initialized():
            raise ModelNotInitializedError(self.name)

        try:
            result = await self._predict(text)
        except IntentLayerError:
            raise
        except Exception as exc:
            logger.error("Intent classification failed for %s: %s", self.name, exc)
            raise ClassificationError(f"Intent classification failed: {exc}") from exc

        if result.intent not in self.intents:
            raise ClassificationError(
                f"Intent classification failed: {result.intent.value} is not supported by {self.name}"
            )
        logger.debug(
            "Classified %r as %s (%.2f)", text[:50], result.intent.value, result.confidence
        )
        return result

    def get_model_info(self) -> ModelInfo:
        return ModelInfo(
            name=self.name,
            version=self.version,
            intents=list(self.intents),
            initialized=self.is_initialized(),
            description=self.description,
        )

    @staticmethod
    def _validate_input(text: str) -> None:
        if not text or not isinstance(text, str):
            raise InvalidInputError(
                "Invalid input for intent classification: must be a non-empty string"
            )
        if not text.strip():
            raise EmptyInputError("Empty input for intent classification")

    @abc.abstractmethod
    async def _load(self) -> None:
        ...  # pragma: no cover

    @abc.abstractmethod
    async def _predict(self, text: str) -> DetailedClassificationResult:
        ...  # pragma: no cover
