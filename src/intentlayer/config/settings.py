"""Application settings loaded from environment variables."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings

DEFAULT_HUGGINGFACE_MODEL = "distilbert-base-uncased-finetuned-sst-2-english"


class Settings(BaseSettings):
    model_config = {"env_prefix": "INTENTLAYER_"}

    intent_model: str = Field(
        default="rule", description="Active intent model kind (rule/huggingface)"
    )
    huggingface_model: str = Field(
        default=DEFAULT_HUGGINGFACE_MODEL,
        description="HuggingFace model id for the transformer classifier",
    )
    device: int = Field(default=-1, description="Inference device (-1 for CPU)")
    bot_name: str = Field(default="PrimeBot", description="Name used in replies")
    log_level: str = Field(default="INFO", description="Logging level")
