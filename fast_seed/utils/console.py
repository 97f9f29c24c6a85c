import os
from typing import Optional

from rich.console import Console


def is_cli() -> bool:
    """
    Whether the process runs as a command line tool.

    ASGI apps and queue workers export APP_CONTEXT (e.g. `asgi`, `worker`);
    everything else is treated as an interactive console.
    """
    return os.getenv("APP_CONTEXT", "cli").strip().lower() == "cli"


def write(text: str, color: Optional[str] = None) -> None:
    """Print a single status line, optionally coloured (e.g. `green`, `red`)."""
    console = Console(highlight=False)
    console.print(text, style=color, markup=False, emoji=False, soft_wrap=True)
