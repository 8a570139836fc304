"""Data models for scan findings and diagnostics."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class DiagnosticSeverity(str, Enum):
    """Severity of a published diagnostic."""

    ERROR = "error"
    WARNING = "warning"
    INFORMATION = "information"
    HINT = "hint"


class Position(BaseModel):
    """A zero-based line/column position in a document."""

    model_config = ConfigDict(frozen=True)

    line: int
    column: int


class Range(BaseModel):
    """A span between two positions; the end is exclusive."""

    model_config = ConfigDict(frozen=True)

    start: Position
    end: Position


class NakedText(BaseModel):
    """A text fragment rendered outside of a text component."""

    model_config = ConfigDict(frozen=True)

    text: str
    range: Range


class Diagnostic(BaseModel):
    """A diagnostic record published to a sink."""

    model_config = ConfigDict(frozen=True)

    range: Range
    message: str
    severity: DiagnosticSeverity = DiagnosticSeverity.WARNING


class SourceDocument(BaseModel):
    """A document supplied by the host for a single scan."""

    model_config = ConfigDict(frozen=True)

    uri: str
    text: str
