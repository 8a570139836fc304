"""Detection of naked text in JSX/TSX UI trees.

This package finds text rendered directly inside a UI tree instead of
through a dedicated text component, and publishes a warning diagnostic
for each occurrence.

Use: document → extract_all_naked_texts → start_validating → DiagnosticSink
"""

from .config import NakedTextLintConfig
from .diagnostics import DiagnosticCollection, DiagnosticSink
from .errors import (
    ConfigError,
    NakedTextLintError,
    ParserError,
    UnsupportedScriptKindError,
)
from .extractor import extract_all_naked_texts, is_naked_text
from .models import (
    Diagnostic,
    DiagnosticSeverity,
    NakedText,
    Position,
    Range,
    SourceDocument,
)
from .parser import ScriptKind, SourceCodeParser
from .validator import start_validating

__all__ = [
    "ConfigError",
    "Diagnostic",
    "DiagnosticCollection",
    "DiagnosticSeverity",
    "DiagnosticSink",
    "NakedText",
    "NakedTextLintConfig",
    "NakedTextLintError",
    "ParserError",
    "Position",
    "Range",
    "ScriptKind",
    "SourceCodeParser",
    "SourceDocument",
    "UnsupportedScriptKindError",
    "extract_all_naked_texts",
    "is_naked_text",
    "start_validating",
]
