"""Rich output formatting for CLI commands."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from naked_text_lint.diagnostics import DiagnosticCollection
from naked_text_lint.models import DiagnosticSeverity

_SEVERITY_STYLES = {
    DiagnosticSeverity.ERROR: "red",
    DiagnosticSeverity.WARNING: "yellow",
    DiagnosticSeverity.INFORMATION: "blue",
    DiagnosticSeverity.HINT: "dim",
}


class OutputFormatter:
    """Formats diagnostic collections for the terminal."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialise the formatter.

        Args:
            console: Console to print to (a new stdout console if None)

        """
        self.console = console or Console()

    def format_diagnostics(self, collection: DiagnosticCollection) -> None:
        """Print every diagnostic as a table row followed by a summary.

        Lines and columns are shown one-based.
        """
        total = collection.total()
        if total == 0:
            self.console.print(
                f"[green]✅ No naked text found in {len(collection)} file(s)[/green]"
            )
            return

        table = Table(title=f"Naked text ({collection.name})")
        table.add_column("File", style="cyan")
        table.add_column("Location", justify="right")
        table.add_column("Severity")
        table.add_column("Message")

        for uri, diagnostics in collection:
            for diagnostic in diagnostics:
                start = diagnostic.range.start
                style = _SEVERITY_STYLES[diagnostic.severity]
                table.add_row(
                    uri,
                    f"{start.line + 1}:{start.column + 1}",
                    f"[{style}]{diagnostic.severity.value}[/{style}]",
                    diagnostic.message,
                )

        self.console.print(table)
        self.console.print(
            f"[yellow]⚠️  {total} naked text(s) found in {len(collection)} file(s)[/yellow]"
        )
