"""Error reporting for CLI commands."""

from __future__ import annotations

import logging
from collections.abc import Generator
from contextlib import contextmanager

import typer
from rich.console import Console
from rich.panel import Panel

logger = logging.getLogger(__name__)
console = Console(stderr=True)


class CLIError(Exception):
    """Raised for user-facing command failures such as unreadable paths."""

    pass


@contextmanager
def cli_error_handler(title: str) -> Generator[None]:
    """Report a failed command as a red error panel and exit with code 1.

    CLIError messages are shown as they are; any other exception is
    prefixed with its type so that parser and configuration errors stay
    distinguishable.

    Args:
        title: Panel title for the error display.

    """
    try:
        yield
    except typer.Exit:
        raise
    except Exception as e:
        message = str(e) if isinstance(e, CLIError) else f"{type(e).__name__}: {e}"
        logger.error("%s: %s", title, message)
        console.print(Panel(f"[red]{message}[/red]", title=title, border_style="red"))
        raise typer.Exit(1) from e
