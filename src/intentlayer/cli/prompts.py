"""Interactive input for the chat loop."""

from __future__ import annotations

from rich.console import Console
from rich.prompt import Prompt

console = Console()

EXIT_WORDS = frozenset({"exit", "quit", "bye"})


def ask_utterance() -> str | None:
    """Read one utterance; ``None`` means the user wants to leave."""
    try:
        text = Prompt.ask("[bold cyan]you[/]", console=console, default="", show_default=False)
    except (EOFError, KeyboardInterrupt):
        return None
    if text.strip().lower() in EXIT_WORDS:
        return None
    return text
