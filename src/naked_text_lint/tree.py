"""Structural predicates over tree-sitter JSX/TSX syntax trees.

All ancestor checks walk parent links iteratively from the node to the root.
"""

import re
from collections.abc import Iterator

from tree_sitter import Node

from naked_text_lint.source_text import SourceText

# JSX node types
JSX_TEXT_TYPE = "jsx_text"
JSX_ELEMENT_TYPE = "jsx_element"
JSX_SELF_CLOSING_ELEMENT_TYPE = "jsx_self_closing_element"
JSX_OPENING_ELEMENT_TYPE = "jsx_opening_element"
JSX_ATTRIBUTE_TYPE = "jsx_attribute"
JSX_EXPRESSION_TYPE = "jsx_expression"
HTML_CHARACTER_REFERENCE_TYPE = "html_character_reference"

UI_ELEMENT_TYPES = frozenset({JSX_ELEMENT_TYPE, JSX_SELF_CLOSING_ELEMENT_TYPE})

# String-literal-like node types
_STRING_TYPE = "string"
_TEMPLATE_STRING_TYPE = "template_string"
_TEMPLATE_SUBSTITUTION_TYPE = "template_substitution"

# First `<` followed by a run that is not a slash, whitespace or `>`
_TAG_PATTERN = re.compile(r"<([^/\s>]+)")

# One or more of {'...'}, {"..."} or {`...`} and nothing else
_QUOTED_LITERAL_WRAPPER_PATTERN = re.compile(r"(?:\{['\"`].*?['\"`]\})+")


def get_node_text(node: Node, source: SourceText) -> str:
    """Get the text content of an AST node.

    Args:
        node: Tree-sitter node with start_byte and end_byte attributes
        source: Indexed source the node was parsed from

    Returns:
        Text content of the node

    """
    return source.byte_slice(node.start_byte, node.end_byte)


def find_child_by_type(node: Node, child_type: str) -> Node | None:
    """Find the first direct child of a specific type.

    Args:
        node: Parent node to search in
        child_type: Type of child node to find

    Returns:
        First matching child node or None

    """
    for child in node.children:
        if child.type == child_type:
            return child
    return None


def iter_ancestors(node: Node) -> Iterator[Node]:
    """Yield the ancestors of a node, nearest first, up to the root."""
    parent = node.parent
    while parent is not None:
        yield parent
        parent = parent.parent


def walk_preorder(root: Node) -> Iterator[Node]:
    """Yield every node under root in pre-order, left to right."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def is_jsx_text_part(node: Node) -> bool:
    """Check if a node is part of a run of JSX child text.

    The grammar splits child text at line feeds and character references,
    so one run of prose can span several sibling nodes.
    """
    if node.type == JSX_TEXT_TYPE:
        return True
    parent = node.parent
    return (
        node.type == HTML_CHARACTER_REFERENCE_TYPE
        and parent is not None
        and parent.type == JSX_ELEMENT_TYPE
    )


def continues_jsx_text(node: Node) -> bool:
    """Check if a node extends a text run started by an earlier sibling."""
    previous = node.prev_sibling
    return (
        is_jsx_text_part(node)
        and previous is not None
        and is_jsx_text_part(previous)
    )


def text_run_end(node: Node) -> Node:
    """Get the last sibling of the text run starting at node.

    Nodes that are not JSX child text are runs of their own.
    """
    last = node
    if not is_jsx_text_part(node):
        return last
    while last.next_sibling is not None and is_jsx_text_part(last.next_sibling):
        last = last.next_sibling
    return last


def is_text_like(node: Node) -> bool:
    """Check if a node is JSX child text or a plain string literal.

    Template strings count only when they have no substitutions.
    """
    if is_jsx_text_part(node):
        return True
    if not node.is_named:
        return False
    if node.type == _STRING_TYPE:
        return True
    if node.type == _TEMPLATE_STRING_TYPE:
        return find_child_by_type(node, _TEMPLATE_SUBSTITUTION_TYPE) is None
    return False


def has_ui_tree_ancestor(node: Node) -> bool:
    """Check if any ancestor is a JSX element or self-closing element."""
    return any(ancestor.type in UI_ELEMENT_TYPES for ancestor in iter_ancestors(node))


def is_inside_attribute(node: Node) -> bool:
    """Check if any ancestor is a JSX attribute."""
    return any(ancestor.type == JSX_ATTRIBUTE_TYPE for ancestor in iter_ancestors(node))


def sniff_tag_name(text: str) -> str | None:
    """Find the first tag name opened in a piece of source text."""
    match = _TAG_PATTERN.search(text)
    return match.group(1) if match else None


def get_tag_name(element: Node, source: SourceText) -> str | None:
    """Get the tag name of a JSX element.

    The name is read from the element's ``name`` field. Elements recovered
    from malformed input may lack one, in which case the name is sniffed
    from the element's source text instead.

    Args:
        element: A jsx_element or jsx_self_closing_element node
        source: Indexed source the node was parsed from

    Returns:
        The tag name, or None for fragments and unnamed elements

    """
    tag_holder: Node | None = element
    if element.type == JSX_ELEMENT_TYPE:
        tag_holder = find_child_by_type(element, JSX_OPENING_ELEMENT_TYPE)

    if tag_holder is None:
        return sniff_tag_name(get_node_text(element, source))

    name_node = tag_holder.child_by_field_name("name")
    if name_node is not None:
        return get_node_text(name_node, source)
    if tag_holder.has_error:
        return sniff_tag_name(get_node_text(tag_holder, source))
    return None


def enclosing_tag_name(node: Node, source: SourceText) -> str | None:
    """Get the tag name of the nearest named element enclosing a node.

    Fragments are skipped so that text inside ``<Text><>...</></Text>`` is
    attributed to ``Text``.
    """
    for ancestor in iter_ancestors(node):
        if ancestor.type in UI_ELEMENT_TYPES:
            tag_name = get_tag_name(ancestor, source)
            if tag_name is not None:
                return tag_name
    return None


def is_quoted_literal_wrapper(text: str) -> bool:
    """Check if text is entirely made of ``{'...'}``-style literal wrappers."""
    return _QUOTED_LITERAL_WRAPPER_PATTERN.fullmatch(text) is not None


def wrapper_text(node: Node, source: SourceText) -> str | None:
    """Get the braced expression text wrapping a node, if any.

    Args:
        node: A text-like node
        source: Indexed source the node was parsed from

    Returns:
        The node's own trimmed text when it is braced, otherwise the trimmed
        text of its parent expression container, or None

    """
    text = get_node_text(node, source).strip()
    if text.startswith("{") and text.endswith("}"):
        return text
    parent = node.parent
    if parent is not None and parent.type == JSX_EXPRESSION_TYPE:
        return get_node_text(parent, source).strip()
    return None
