"""Classification models: output of an IntentModel."""

from __future__ import annotations

import enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from intentlayer.models.intent import Intent


class ModelState(str, enum.Enum):
    UNINITIALIZED = "UNINITIALIZED"
    INITIALIZING = "INITIALIZING"
    READY = "READY"


class ClassificationResult(BaseModel):
    intent: Intent
    confidence: float = Field(ge=0.0, le=1.0)


class DetailedClassificationResult(ClassificationResult):
    model_config = ConfigDict(protected_namespaces=())

    model_output: Any = None
    reasoning: list[str] = Field(default_factory=list)


class ModelInfo(BaseModel):
    name: str
    version: str
    intents: list[Intent]
    initialized: bool
    description: str
