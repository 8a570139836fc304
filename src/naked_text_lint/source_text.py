"""Offset and position helpers over a document's source text.

Tree-sitter reports spans as UTF-8 byte offsets. Findings are expressed in
characters, so every span is translated through a ``SourceText`` built once
per scan.
"""

from bisect import bisect_right

from naked_text_lint.models import Position

_DEFAULT_ENCODING = "utf-8"
_LINE_FEED = "\n"


class SourceText:
    """Source content with its encoded form and line-start index."""

    def __init__(self, content: str) -> None:
        """Index the content for offset translation.

        Args:
            content: Full document text

        """
        self.content = content
        self.encoded = content.encode(_DEFAULT_ENCODING)
        self._char_at_byte = _build_byte_index(content, len(self.encoded))
        self._line_starts = [0]
        offset = content.find(_LINE_FEED)
        while offset != -1:
            self._line_starts.append(offset + 1)
            offset = content.find(_LINE_FEED, offset + 1)

    def char_offset(self, byte_offset: int) -> int:
        """Convert a UTF-8 byte offset into a character offset."""
        if self._char_at_byte is None:
            return byte_offset
        return self._char_at_byte[byte_offset]

    def byte_slice(self, start_byte: int, end_byte: int) -> str:
        """Decode the text between two byte offsets."""
        return self.encoded[start_byte:end_byte].decode(_DEFAULT_ENCODING)

    def position_at(self, offset: int) -> Position:
        """Convert a character offset into a zero-based line/column position.

        Args:
            offset: Character offset into the content (may equal its length)

        Returns:
            Position with the line index and the column counted from the
            start of that line

        """
        line = bisect_right(self._line_starts, offset) - 1
        return Position(line=line, column=offset - self._line_starts[line])

    def trimmed_span(self, start: int, end: int) -> tuple[int, int] | None:
        """Narrow a character span to exclude leading and trailing whitespace.

        Args:
            start: Inclusive character offset
            end: Exclusive character offset

        Returns:
            The trimmed ``(start, end)`` pair with ``end`` exclusive, or None
            if the span holds only whitespace

        """
        raw = self.content[start:end]
        stripped = raw.strip()
        if not stripped:
            return None
        trimmed_start = start + len(raw) - len(raw.lstrip())
        return trimmed_start, trimmed_start + len(stripped)


def _utf8_width(char: str) -> int:
    code_point = ord(char)
    if code_point < 0x80:
        return 1
    if code_point < 0x800:
        return 2
    if code_point < 0x10000:
        return 3
    return 4


def _build_byte_index(content: str, byte_length: int) -> list[int] | None:
    """Map every UTF-8 byte offset to the index of the character it belongs to.

    Returns None for ASCII content, where both offsets coincide.
    """
    if byte_length == len(content):
        return None

    char_at_byte: list[int] = []
    for index, char in enumerate(content):
        char_at_byte.extend([index] * _utf8_width(char))
    char_at_byte.append(len(content))
    return char_at_byte
