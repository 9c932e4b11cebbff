"""User experience utilities for the edgeapp CLI.

Status messages, warnings, errors and prompts are written to stderr so that
stdout only ever carries command output (e.g. revealed secret values).
"""

import logging
from typing import Any

from rich.console import Console
from rich.prompt import Prompt
from rich.theme import Theme

# Define a custom theme for consistent styling
CUSTOM_THEME = Theme(
    {
        "info": "bold cyan",
        "success": "bold green",
        "warning": "bold yellow",
        "error": "bold red",
        "secret": "bold magenta",
        "prompt": "bold white on blue",
        "heading": "bold white on blue",
    }
)

# Create console for terminal output
console = Console(theme=CUSTOM_THEME, stderr=True)

logger = logging.getLogger("edgeapp")


def print_info(
    message: str,
    *args: Any,
    log: bool = True,
    console_output: bool = True,
    **kwargs: Any,
) -> None:
    """Print an informational message.

    Args:
        message: The message to print
        log: Whether to log to file
        console_output: Whether to print to console
    """
    if console_output:
        console.print(f"[info]INFO:[/info] {message}", *args, **kwargs)
    if log:
        logger.info(message)


def print_warning(
    message: str,
    *args: Any,
    log: bool = True,
    console_output: bool = True,
    **kwargs: Any,
) -> None:
    """Print a warning message."""
    if console_output:
        console.print(f"[warning]WARNING:[/warning] {message}", *args, **kwargs)
    if log:
        logger.warning(message)


def print_error(
    message: str,
    *args: Any,
    log: bool = True,
    console_output: bool = True,
    **kwargs: Any,
) -> None:
    """Print an error message."""
    if console_output:
        console.print(f"[error]ERROR:[/error] {message}", *args, **kwargs)
    if log:
        logger.error(message, exc_info=True)


def prompt_text(message: str) -> str:
    """Ask for a line of text on the console, re-asking until it is not blank.

    Raises:
        EOFError: If the input stream is closed before a value is entered
    """
    while True:
        value = Prompt.ask(f"[prompt]{message}[/prompt]", console=console).strip()
        if value:
            return value
        console.print("[warning]A value is required.[/warning]")
