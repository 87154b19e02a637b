"""Rich display helpers for CLI output."""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from intentlayer.models.classification import DetailedClassificationResult, ModelInfo
from intentlayer.models.intent import EntityMap, SemanticContext

console = Console()


def print_context(context: SemanticContext) -> None:
    table = Table(title="Semantic Context", show_header=False, expand=True)
    table.add_column("Field", style="bold cyan")
    table.add_column("Value")
    table.add_row("Intent", context.intent.value)
    table.add_row("Confidence", f"{context.confidence:.0%}")
    if context.entities:
        table.add_row("Entities", ", ".join(context.entities))
    if context.semantic_boosts:
        table.add_row("Boosts", ", ".join(context.semantic_boosts))
    console.print(table)


def print_entities(entities: EntityMap) -> None:
    if not entities:
        print_info("No entities found.")
        return

    table = Table(title="Entities", expand=True)
    table.add_column("Role", style="bold cyan")
    table.add_column("Value")
    for role, value in entities.items():
        table.add_row(role, value)
    console.print(table)


def print_classification(result: DetailedClassificationResult) -> None:
    table = Table(title="Classification", show_header=False, expand=True)
    table.add_column("Field", style="bold cyan")
    table.add_column("Value")
    table.add_row("Intent", result.intent.value)
    table.add_row("Confidence", f"{result.confidence:.0%}")
    if result.reasoning:
        table.add_row("Reasoning", "\n".join(result.reasoning))
    console.print(table)


def print_model_info(info: ModelInfo) -> None:
    table = Table(title="Model", show_header=False, expand=True)
    table.add_column("Field", style="bold cyan")
    table.add_column("Value")
    table.add_row("Name", info.name)
    table.add_row("Version", info.version)
    table.add_row("Initialized", "[green]Yes[/]" if info.initialized else "[red]No[/]")
    table.add_row("Intents", ", ".join(i.value for i in info.intents))
    table.add_row("Description", info.description)
    console.print(table)


def print_response(bot_name: str, response: str | None) -> None:
    if response is None:
        print_info("No template response for this intent.")
        return
    console.print(f"[bold green]{bot_name}[/] {response}")


def print_error(message: str) -> None:
    console.print(Panel(f"[red]{message}[/]", title="Error", border_style="red"))


def print_info(message: str) -> None:
    console.print(f"[dim]{message}[/]")
