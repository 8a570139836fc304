"""Diagnostic sinks keyed by document identity."""

from collections.abc import Iterator
from typing import Protocol, runtime_checkable

from naked_text_lint.models import Diagnostic


@runtime_checkable
class DiagnosticSink(Protocol):
    """Receiver of published diagnostics.

    Each call replaces the full set of diagnostics held for ``uri``.
    """

    def set(self, uri: str, diagnostics: list[Diagnostic]) -> None:
        """Replace the diagnostics published for a document."""
        ...


class DiagnosticCollection:
    """In-memory diagnostic sink, one list per document identity."""

    def __init__(self, name: str = "naked-text-lint") -> None:
        """Create an empty collection.

        Args:
            name: Label for the collection, used in output and logs

        """
        self.name = name
        self._entries: dict[str, list[Diagnostic]] = {}

    def set(self, uri: str, diagnostics: list[Diagnostic]) -> None:
        """Replace the diagnostics for a document with a copy of ``diagnostics``."""
        self._entries[uri] = list(diagnostics)

    def get(self, uri: str) -> list[Diagnostic]:
        """Get the diagnostics for a document (empty if none were published)."""
        return list(self._entries.get(uri, []))

    def has(self, uri: str) -> bool:
        """Check if diagnostics were ever published for a document."""
        return uri in self._entries

    def delete(self, uri: str) -> None:
        """Remove a document's entry."""
        self._entries.pop(uri, None)

    def clear(self) -> None:
        """Remove every entry."""
        self._entries.clear()

    def total(self) -> int:
        """Count diagnostics across all documents."""
        return sum(len(diagnostics) for diagnostics in self._entries.values())

    def __contains__(self, uri: object) -> bool:
        return uri in self._entries

    def __iter__(self) -> Iterator[tuple[str, list[Diagnostic]]]:
        for uri, diagnostics in self._entries.items():
            yield uri, list(diagnostics)

    def __len__(self) -> int:
        return len(self._entries)
