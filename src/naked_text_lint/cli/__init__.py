"""CLI command implementations for naked-text-lint."""

from naked_text_lint.cli.check import check_command, iter_source_files
from naked_text_lint.cli.errors import CLIError

__all__ = [
    "CLIError",
    "check_command",
    "iter_source_files",
]
