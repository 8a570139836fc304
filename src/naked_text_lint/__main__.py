"""Main entry point for naked-text-lint.

Provides the command-line interface for checking JavaScript and TypeScript
sources for text rendered outside of a text component.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from naked_text_lint.cli import check_command
from naked_text_lint.parser import ScriptKind

app = typer.Typer(name="naked-text-lint", no_args_is_help=True)


@app.callback()
def main() -> None:
    """Find text rendered outside of <Text> components in JSX/TSX UI trees."""


@app.command()
def check(
    paths: Annotated[
        list[Path],
        typer.Argument(
            help="Files or directories to check",
        ),
    ],
    script_kind: Annotated[
        ScriptKind | None,
        typer.Option(
            "--script-kind",
            "-k",
            help="Parse every file as this script kind (detected from the extension by default)",
            case_sensitive=False,
        ),
    ] = None,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to a YAML configuration file",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Set logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
            case_sensitive=False,
        ),
    ] = "INFO",
) -> None:
    """Check files for naked text and report a warning for each one.

    Example:
        naked-text-lint check src/
        naked-text-lint check App.js --script-kind jsx

    """
    check_command(paths, script_kind, config, log_level)


if __name__ == "__main__":
    app()
