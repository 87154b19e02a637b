"""Intent models: output of semantic analysis."""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict, Field


class Intent(str, enum.Enum):
    GREETING = "GREETING"
    IDENTITY_INTRODUCTION = "IDENTITY_INTRODUCTION"
    IDENTITY_QUERY = "IDENTITY_QUERY"
    ENTITY_INTRODUCTION = "ENTITY_INTRODUCTION"
    ENTITY_QUERY = "ENTITY_QUERY"
    BOT_IDENTITY_QUERY = "BOT_IDENTITY_QUERY"
    HELP_REQUEST = "HELP_REQUEST"
    GRATITUDE = "GRATITUDE"
    POSITIVE_FEEDBACK = "POSITIVE_FEEDBACK"
    QUESTION = "QUESTION"
    INFORMATION_REQUEST = "INFORMATION_REQUEST"
    KNOWLEDGE_REQUEST = "KNOWLEDGE_REQUEST"
    GENERAL_CONVERSATION = "GENERAL_CONVERSATION"


# Role -> most recently mentioned literal, e.g. {"user_name": "Alice"}.
EntityMap = dict[str, str]


class SemanticContext(BaseModel):
    model_config = ConfigDict(frozen=True)

    intent: Intent
    entities: list[str] = Field(default_factory=list)
    semantic_boosts: list[str] = Field(default_factory=list)
    confidence: float = Field(ge=0.0, le=1.0)


class ResonantWord(BaseModel):
    word: str
    resonance: float
