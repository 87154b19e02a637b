"""HuggingFace transformer-backed intent classification."""

from __future__ import annotations

import asyncio
import logging
import re
from typing import Any, Callable

from intentlayer.classifiers.base import IntentModel
from intentlayer.config.settings import DEFAULT_HUGGINGFACE_MODEL
from intentlayer.models.classification import DetailedClassificationResult
from intentlayer.models.intent import Intent
from intentlayer.semantic.patterns import SemanticRule

logger = logging.getLogger(__name__)

_MY_THING = r"\bmy (?:dog|cat|car|pet)\b"

# Applied to the lower-cased utterance after the transformer has run.
KEYWORD_RULES: tuple[SemanticRule, ...] = (
    SemanticRule("greeting", re.compile(r"\b(?:hello|hi|hey)\b"), Intent.GREETING, 0.9, ()),
    SemanticRule(
        "identity_introduction",
        re.compile(r"\bmy name is\b|\bi am\b|\bi'm\b"),
        Intent.IDENTITY_INTRODUCTION,
        0.9,
        (),
    ),
    SemanticRule(
        "identity_query",
        re.compile(r"\bwhat is my name\b|\bmy name\?"),
        Intent.IDENTITY_QUERY,
        0.9,
        (),
    ),
    SemanticRule(
        "entity_query",
        re.compile(rf"^(?=.*{_MY_THING})(?=.*\b(?:what|tell me)\b)", re.DOTALL),
        Intent.ENTITY_QUERY,
        0.85,
        (),
    ),
    SemanticRule("entity_introduction", re.compile(_MY_THING), Intent.ENTITY_INTRODUCTION, 0.85, ()),
    SemanticRule("help_request", re.compile(r"help|assist"), Intent.HELP_REQUEST, 0.8, ()),
    SemanticRule("gratitude", re.compile(r"thank"), Intent.GRATITUDE, 0.8, ()),
    SemanticRule(
        "positive_feedback",
        re.compile(r"great|awesome|excellent"),
        Intent.POSITIVE_FEEDBACK,
        0.8,
        (),
    ),
    SemanticRule("question", re.compile(r"what|how|\?"), Intent.QUESTION, 0.7, ()),
)

DEFAULT_INTENT = Intent.INFORMATION_REQUEST
DEFAULT_CONFIDENCE = 0.5


def _top_prediction(output: Any) -> dict[str, Any] | None:
    """First ``{label, score}`` entry of a pipeline result, if any."""
    while isinstance(output, list) and output:
        output = output[0]
    return output if isinstance(output, dict) else None


class HuggingFaceIntentModel(IntentModel):
    """Wraps a sequence-classification pipeline and maps it onto ``Intent``.

    The pipeline yields sentiment-style ``{label, score}`` output, so the
    final intent comes from a keyword layer applied on top of it. Both
    loading and inference run in a worker thread.
    """

    description = "HuggingFace transformer-based intent classifier using a sequence-classification pipeline"
    intents = (
        Intent.GREETING,
        Intent.IDENTITY_INTRODUCTION,
        Intent.ENTITY_INTRODUCTION,
        Intent.IDENTITY_QUERY,
        Intent.ENTITY_QUERY,
        Intent.HELP_REQUEST,
        Intent.GRATITUDE,
        Intent.POSITIVE_FEEDBACK,
        Intent.INFORMATION_REQUEST,
        Intent.KNOWLEDGE_REQUEST,
        Intent.QUESTION,
    )

    def __init__(
        self,
        model_name: str | None = None,
        pipeline_factory: Callable[..., Any] | None = None,
        task: str = "text-classification",
        device: int = -1,
    ) -> None:
        super().__init__()
        self.name = model_name or DEFAULT_HUGGINGFACE_MODEL
        self._pipeline_factory = pipeline_factory
        self._task = task
        self._device = device
        self._classifier: Callable[[str], Any] | None = None

    async def _load(self) -> None:
        factory = self._pipeline_factory
        if factory is None:
            from transformers import pipeline as factory

        classifier = await asyncio.to_thread(
            factory, self._task, model=self.name, device=self._device
        )
        if classifier is None:
            raise RuntimeError(f"pipeline factory returned nothing for {self.name}")
        self._classifier = classifier

    async def _predict(self, text: str) -> DetailedClassificationResult:
        logger.debug("Running %s on %r", self.name, text[:50])
        output = await asyncio.to_thread(self._classifier, text)

        reasoning: list[str] = []
        top = _top_prediction(output)
        if top is not None:
            reasoning.append(
                f"Model output: {top.get('label')} ({float(top.get('score', 0.0)):.3f})"
            )
        else:
            reasoning.append("Model output: no label")

        lowered = text.lower()
        for rule in KEYWORD_RULES:
            if rule.match(lowered):
                reasoning.append(f"Keyword rule '{rule.name}' matched")
                reasoning.append(f"Mapped to {rule.intent.value}")
                return DetailedClassificationResult(
                    intent=rule.intent,
                    confidence=rule.confidence,
                    model_output=output,
                    reasoning=reasoning,
                )

        reasoning.append(f"No keyword rule matched; defaulting to {DEFAULT_INTENT.value}")
        return DetailedClassificationResult(
            intent=DEFAULT_INTENT,
            confidence=DEFAULT_CONFIDENCE,
            model_output=output,
            reasoning=reasoning,
        )
