"""Source code parser using tree-sitter."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

import tree_sitter_javascript
import tree_sitter_typescript
from tree_sitter import Language, Node, Parser

from naked_text_lint.errors import UnsupportedScriptKindError

_DEFAULT_ENCODING = "utf-8"


class ScriptKind(str, Enum):
    """Grammar variant a document is parsed as."""

    UNKNOWN = "unknown"
    JS = "js"
    JSX = "jsx"
    TS = "ts"
    TSX = "tsx"
    JSON = "json"

    @classmethod
    def from_path(cls, file_path: Path) -> ScriptKind:
        """Detect the script kind from a file extension.

        Args:
            file_path: Path to the source file

        Returns:
            Script kind matching the extension

        Raises:
            UnsupportedScriptKindError: If the extension has no supported kind

        """
        extension = file_path.suffix.lower()

        for script_kind, extensions in _EXTENSIONS.items():
            if extension in extensions:
                return script_kind

        raise UnsupportedScriptKindError(
            f"Cannot detect script kind for file extension: {extension}"
        )


_EXTENSIONS: dict[ScriptKind, list[str]] = {
    ScriptKind.JS: [".js", ".mjs", ".cjs"],
    ScriptKind.JSX: [".jsx"],
    ScriptKind.TS: [".ts", ".mts", ".cts"],
    ScriptKind.TSX: [".tsx"],
}

# JavaScript always allows JSX, plain TypeScript never does
_LANGUAGE_REGISTRY: dict[ScriptKind, Language] = {}
_LANGUAGE_REGISTRY[ScriptKind.JS] = Language(tree_sitter_javascript.language())
_LANGUAGE_REGISTRY[ScriptKind.JSX] = _LANGUAGE_REGISTRY[ScriptKind.JS]
_LANGUAGE_REGISTRY[ScriptKind.TS] = Language(
    tree_sitter_typescript.language_typescript()
)
_LANGUAGE_REGISTRY[ScriptKind.TSX] = Language(tree_sitter_typescript.language_tsx())


def supported_extensions() -> list[str]:
    """List every file extension with a supported script kind."""
    return [ext for extensions in _EXTENSIONS.values() for ext in extensions]


def _get_tree_sitter_language(script_kind: ScriptKind) -> Language:
    """Get a tree-sitter Language object for the specified script kind.

    Args:
        script_kind: Grammar variant to look up

    Returns:
        Tree-sitter Language object for the script kind

    Raises:
        UnsupportedScriptKindError: If the script kind is not supported

    """
    if not isinstance(script_kind, ScriptKind) or (
        script_kind not in _LANGUAGE_REGISTRY
    ):
        supported = [kind.value for kind in _LANGUAGE_REGISTRY]
        raise UnsupportedScriptKindError(
            f"Unsupported script kind: {script_kind!r}. Supported: {supported}"
        )
    return _LANGUAGE_REGISTRY[script_kind]


class SourceCodeParser:
    """Error-tolerant parser for JavaScript and TypeScript sources."""

    def __init__(self, script_kind: ScriptKind) -> None:
        """Initialise the parser.

        Args:
            script_kind: Grammar variant to parse documents as

        Raises:
            UnsupportedScriptKindError: If the script kind is not supported

        """
        self.script_kind = script_kind
        self.parser = Parser()
        self.parser.language = _get_tree_sitter_language(script_kind)

    def parse(self, source_code: str | bytes) -> Node:
        """Parse source code.

        Syntax errors never raise; they surface as ERROR or MISSING nodes
        in the returned tree.

        Args:
            source_code: Source code to parse, as text or UTF-8 bytes

        Returns:
            AST root node

        """
        if isinstance(source_code, str):
            source_code = source_code.encode(_DEFAULT_ENCODING)
        tree = self.parser.parse(source_code)
        return tree.root_node
