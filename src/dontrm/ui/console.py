"""Rich console utilities for output formatting."""

from __future__ import annotations

import logging
import platform

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.text import Text

from dontrm import __version__


def create_console(stderr: bool = False) -> Console:
    """Create a configured Rich console."""
    # Windows-specific console settings
    if platform.system() == "Windows":
        return Console(stderr=stderr, legacy_windows=True, emoji=False)
    return Console(stderr=stderr)


def print_version(console: Console) -> None:
    """Print the dontrm version line."""
    text = Text()
    text.append("DON'T rm!", style="bold")
    text.append(f" {__version__}")
    console.print(text)


def configure_logging(console: Console, level: int = logging.WARNING) -> None:
    """Route log records through Rich on the given console."""
    handler = RichHandler(console=console, show_time=False, show_path=False)
    logging.basicConfig(level=level, format="%(message)s", handlers=[handler], force=True)


def print_notice(console: Console, message: str) -> None:
    """Print a dimmed informational message."""
    console.print(f"[dim]{escape(message)}[/dim]", highlight=False, soft_wrap=True)


def print_error(console: Console, message: str) -> None:
    """Print an error message."""
    console.print(f"[red]{escape(message)}[/red]", highlight=False, soft_wrap=True)
