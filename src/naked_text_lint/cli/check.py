"""CLI command implementation for checking source files."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import typer

from naked_text_lint.cli.errors import CLIError, cli_error_handler
from naked_text_lint.cli.formatting import OutputFormatter
from naked_text_lint.config import NakedTextLintConfig
from naked_text_lint.diagnostics import DiagnosticCollection
from naked_text_lint.logging import setup_logging
from naked_text_lint.models import SourceDocument
from naked_text_lint.parser import ScriptKind, supported_extensions
from naked_text_lint.validator import start_validating

logger = logging.getLogger(__name__)

_EXCLUDED_DIRECTORIES = frozenset({"node_modules"})


def iter_source_files(paths: list[Path]) -> Iterator[Path]:
    """Expand files and directories into the source files to check.

    Directories are searched recursively for supported extensions, skipping
    dependency and hidden directories. Files given explicitly are always
    yielded.

    Args:
        paths: Files and directories named on the command line

    Yields:
        Paths of files to check, directories expanded in sorted order

    Raises:
        CLIError: If a path does not exist

    """
    extensions = set(supported_extensions())
    for path in paths:
        if path.is_file():
            yield path
        elif path.is_dir():
            for candidate in sorted(path.rglob("*")):
                relative_parts = candidate.relative_to(path).parts[:-1]
                if any(
                    part in _EXCLUDED_DIRECTORIES or part.startswith(".")
                    for part in relative_parts
                ):
                    continue
                if candidate.is_file() and candidate.suffix.lower() in extensions:
                    yield candidate
        else:
            raise CLIError(f"Path does not exist: {path}")


def check_command(
    paths: list[Path],
    script_kind: ScriptKind | None = None,
    config_path: Path | None = None,
    log_level: str = "INFO",
) -> None:
    """CLI command implementation for checking files for naked text.

    Args:
        paths: Files and directories to check
        script_kind: Grammar variant for every file (detected per file if None)
        config_path: Optional YAML configuration file
        log_level: Logging level

    Raises:
        typer.Exit: With code 1 if any diagnostics were reported

    """
    setup_logging(level=log_level)

    with cli_error_handler("Naked text check failed"):
        config = (
            NakedTextLintConfig.from_yaml_file(config_path)
            if config_path
            else NakedTextLintConfig()
        )
        collection = DiagnosticCollection()

        for file_path in iter_source_files(paths):
            kind = script_kind or ScriptKind.from_path(file_path)
            try:
                text = file_path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                raise CLIError(f"Failed to read {file_path}: {e}") from e

            logger.debug("Checking %s as %s", file_path, kind.value)
            start_validating(
                SourceDocument(uri=str(file_path), text=text), kind, collection, config
            )

        OutputFormatter().format_diagnostics(collection)

    if collection.total() > 0:
        raise typer.Exit(1)
