"""Typer CLI commands."""

from __future__ import annotations

import asyncio
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from intentlayer.cli.output import (
    print_classification,
    print_context,
    print_entities,
    print_error,
    print_info,
    print_model_info,
    print_response,
)
from intentlayer.cli.prompts import ask_utterance
from intentlayer.config.settings import Settings
from intentlayer.exceptions import IntentLayerError
from intentlayer.models.intent import EntityMap, Intent, ResonantWord, SemanticContext
from intentlayer.semantic.engine import SemanticEngine, extract_keywords

console = Console()
app = typer.Typer(name="intentlayer", help="Conversational intent and entity analysis.")


def _get_settings() -> Settings:
    from intentlayer.main import configure_logging

    settings = Settings()
    configure_logging(settings)
    return settings


def _get_engine(settings: Settings, kind: str | None = None) -> SemanticEngine:
    from intentlayer.main import build_engine, build_intent_model

    return build_engine(settings, intent_model=build_intent_model(settings, kind=kind))


def _entity_reply(context: SemanticContext, entities: EntityMap) -> str | None:
    """Answer entity intents from the conversation's entity map."""
    if context.intent == Intent.ENTITY_INTRODUCTION:
        name = entities.get("entity_name")
        noun = entities.get("entity_type", "friend")
        if name:
            return f"Nice to know that your {noun} is named {name}!"
    if context.intent == Intent.ENTITY_QUERY and context.entities:
        noun = context.entities[0].lower()
        name = entities.get(f"{noun}_name")
        if name:
            return f"Your {noun} is named {name}."
        return f"I don't recall you mentioning your {noun}'s name. What is it?"
    return None


def reply(engine: SemanticEngine, history: list[str]) -> tuple[SemanticContext, str | None]:
    """Analyze the newest utterance in ``history`` and pick a response."""
    text = history[-1]
    context = engine.analyze_semantic_context(text)
    resonant = [ResonantWord(word=word, resonance=1.0) for word in extract_keywords(text)]
    ranked = sorted(
        engine.enhance_resonance_with_semantics(resonant, context),
        key=lambda item: item.resonance,
        reverse=True,
    )
    response = engine.generate_contextual_response(
        context, history, [item.word for item in ranked]
    )
    if response is None:
        response = _entity_reply(context, engine.extract_entities_from_context(history))
    return context, response


@app.command()
def analyze(
    text: str = typer.Argument(..., help="Utterance to analyze"),
    history: Optional[List[str]] = typer.Option(
        None, "--history", "-H", help="Earlier utterances, oldest first"
    ),
    model: Optional[str] = typer.Option(
        None, "--model", "-m", help="Classify with an intent model (rule/huggingface)"
    ),
) -> None:
    """Analyze one utterance and show its semantic context."""
    settings = _get_settings()
    try:
        engine = _get_engine(settings, kind=model)
        if model:
            context = asyncio.run(engine.analyze_with_model(text))
        else:
            context = engine.analyze_semantic_context(text)
    except IntentLayerError as exc:
        print_error(str(exc))
        raise typer.Exit(1)

    print_context(context)
    response = engine.generate_contextual_response(
        context, [*(history or []), text], context.entities
    )
    print_response(settings.bot_name, response)


@app.command()
def entities(
    utterances: List[str] = typer.Argument(..., help="Conversation, oldest first"),
) -> None:
    """Extract the most recent entity values from a conversation."""
    settings = _get_settings()
    engine = _get_engine(settings, kind="rule")
    print_entities(engine.extract_entities_from_context(utterances))


@app.command()
def classify(
    text: str = typer.Argument(..., help="Utterance to classify"),
    model: Optional[str] = typer.Option(
        None, "--model", "-m", help="Intent model kind (defaults to settings)"
    ),
) -> None:
    """Classify an utterance with a pluggable intent model."""
    settings = _get_settings()

    async def _run():
        engine = _get_engine(settings, kind=model)
        await engine.intent_model.initialize()
        return await engine.intent_model.classify_with_details(text)

    try:
        result = asyncio.run(_run())
    except IntentLayerError as exc:
        print_error(str(exc))
        raise typer.Exit(1)
    print_classification(result)


@app.command()
def info(
    model: Optional[str] = typer.Option(
        None, "--model", "-m", help="Intent model kind (defaults to settings)"
    ),
) -> None:
    """Show metadata for an intent model without loading it."""
    settings = _get_settings()
    try:
        engine = _get_engine(settings, kind=model)
    except IntentLayerError as exc:
        print_error(str(exc))
        raise typer.Exit(1)
    print_model_info(engine.intent_model.get_model_info())


@app.command()
def chat() -> None:
    """Talk to the engine interactively; history is kept for the session."""
    settings = _get_settings()
    engine = _get_engine(settings, kind="rule")
    history: list[str] = []

    print_info("Type 'exit' to leave.")
    while True:
        text = ask_utterance()
        if text is None:
            break
        if not text.strip():
            continue
        history.append(text)
        _, response = reply(engine, history)
        print_response(
            settings.bot_name,
            response or "Tell me more about that.",
        )


@app.command(name="config")
def show_config() -> None:
    """Show current configuration."""
    try:
        settings = Settings()
    except Exception as exc:
        print_error(f"Failed to load settings: {exc}")
        raise typer.Exit(1)

    table_data = {
        "Intent Model": settings.intent_model,
        "HuggingFace Model": settings.huggingface_model,
        "Device": str(settings.device),
        "Bot Name": settings.bot_name,
        "Log Level": settings.log_level,
    }

    table = Table(title="Configuration", show_header=False)
    table.add_column("Setting", style="bold cyan")
    table.add_column("Value")
    for k, v in table_data.items():
        table.add_row(k, v)
    console.print(table)
