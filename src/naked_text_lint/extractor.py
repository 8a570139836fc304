"""Extraction of naked text fragments from JSX/TSX UI trees."""

import logging

from tree_sitter import Node

from naked_text_lint.config import NakedTextLintConfig
from naked_text_lint.models import NakedText, Range
from naked_text_lint.parser import ScriptKind, SourceCodeParser
from naked_text_lint.source_text import SourceText
from naked_text_lint.tree import (
    continues_jsx_text,
    enclosing_tag_name,
    has_ui_tree_ancestor,
    is_inside_attribute,
    is_quoted_literal_wrapper,
    is_text_like,
    text_run_end,
    walk_preorder,
    wrapper_text,
)

logger = logging.getLogger(__name__)


def is_naked_text(node: Node, source: SourceText, exempt_tags: frozenset[str]) -> bool:
    """Check if a node is text rendered outside of a text component.

    JSX child text is classified as a whole run starting at ``node``; all
    parts of a run share one parent, so the ancestor checks hold for each.

    Args:
        node: Node to classify (the first node of a text run)
        source: Indexed source the node was parsed from
        exempt_tags: Tag names allowed to contain text

    Returns:
        True if the node should be reported

    """
    if not is_text_like(node):
        return False

    if not has_ui_tree_ancestor(node):
        return False

    # Prop values are never rendered as children
    if is_inside_attribute(node):
        return False

    if enclosing_tag_name(node, source) in exempt_tags:
        return False

    if not source.byte_slice(node.start_byte, text_run_end(node).end_byte).strip():
        return False

    wrapped = wrapper_text(node, source)
    if wrapped is not None and is_quoted_literal_wrapper(wrapped):
        return False

    return True


def _to_naked_text(node: Node, source: SourceText) -> NakedText | None:
    start = source.char_offset(node.start_byte)
    end = source.char_offset(text_run_end(node).end_byte)
    span = source.trimmed_span(start, end)
    if span is None:
        return None

    trimmed_start, trimmed_end = span
    return NakedText(
        text=source.content[trimmed_start:trimmed_end],
        range=Range(
            start=source.position_at(trimmed_start),
            end=source.position_at(trimmed_end),
        ),
    )


def extract_all_naked_texts(
    content: str,
    script_kind: ScriptKind,
    config: NakedTextLintConfig | None = None,
) -> list[NakedText]:
    """Find every naked text fragment in a document.

    The document is parsed error-tolerantly, so a malformed region only
    loses the findings it contains.

    Args:
        content: Full document text
        script_kind: Grammar variant to parse the document as
        config: Scan configuration (defaults apply if None)

    Returns:
        Findings in document order, each with its whitespace-trimmed text
        and range

    Raises:
        UnsupportedScriptKindError: If the script kind is not supported

    """
    config = config or NakedTextLintConfig()
    parser = SourceCodeParser(script_kind)
    source = SourceText(content)
    root_node = parser.parse(source.encoded)
    exempt_tags = config.exempt_tags

    naked_texts: list[NakedText] = []
    for node in walk_preorder(root_node):
        # Reported with the run it continues
        if continues_jsx_text(node):
            continue
        if not is_naked_text(node, source, exempt_tags):
            continue
        naked_text = _to_naked_text(node, source)
        if naked_text is not None:
            naked_texts.append(naked_text)

    logger.debug(
        "Found %d naked text(s) in %s document (syntax errors: %s)",
        len(naked_texts),
        script_kind.value,
        root_node.has_error,
    )
    return naked_texts
