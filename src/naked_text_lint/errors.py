"""Error classes for naked-text-lint.

This module provides:
- NakedTextLintError: Base exception class for all package errors
- ParserError, UnsupportedScriptKindError: Parser-related exceptions
- ConfigError: Configuration exception
"""


class NakedTextLintError(Exception):
    """Base exception for all naked-text-lint errors."""

    pass


class ParserError(NakedTextLintError):
    """Base exception for parser-related errors."""

    pass


class UnsupportedScriptKindError(ParserError):
    """Raised when a document is scanned with a script kind that has no grammar."""

    pass


class ConfigError(NakedTextLintError):
    """Raised when configuration is invalid."""

    pass
