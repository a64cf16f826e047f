"""Static evaluation of string-valued expressions.

Message content must be knowable without running the program. A value is
static when it is a string literal, a template literal without
substitutions, a parenthesised static value, or a ``+`` concatenation of
static values. Anything else evaluates to None.

Python 3.13+.
"""

import html

from tree_sitter import Node

from intllint.host import node_text

__all__ = ["decode_escape", "property_name", "static_string"]

_SIMPLE_ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "b": "\b",
    "f": "\f",
    "v": "\v",
    "0": "\0",
}

_LINE_TERMINATORS = frozenset({"\n", "\r", "\r\n", "\u2028", "\u2029"})


def decode_escape(sequence: str) -> str:
    """Decode one JavaScript escape sequence (including the backslash).

    Example:
        >>> decode_escape("\\\\u{1F600}")
        '😀'
        >>> decode_escape("\\\\'")
        "'"
    """
    body = sequence[1:]
    if body in _LINE_TERMINATORS:
        return ""
    if body in _SIMPLE_ESCAPES:
        return _SIMPLE_ESCAPES[body]
    try:
        if body.startswith("u{") and body.endswith("}"):
            return chr(int(body[2:-1], 16))
        if body[:1] in ("u", "x") and len(body) > 1:
            return chr(int(body[1:], 16))
    except ValueError:
        return body
    return body


def _literal_content(node: Node, *, jsx: bool) -> str | None:
    """Content of a ``string`` or substitution-free ``template_string``."""
    parts: list[str] = []
    for child in node.children:
        match child.type:
            case "string_fragment":
                parts.append(node_text(child))
            case "escape_sequence":
                # JSX attribute strings have no escapes; keep them verbatim
                parts.append(node_text(child) if jsx else decode_escape(node_text(child)))
            case "html_character_reference":
                parts.append(html.unescape(node_text(child)))
            case "template_substitution":
                return None
            case _:
                # Quote and backtick delimiters, comments
                continue
    return "".join(parts)


def static_string(node: Node | None, *, jsx: bool = False) -> str | None:
    """Evaluate ``node`` to a string without running anything.

    Args:
        node: Expression node (or None for a missing value)
        jsx: True for JSX attribute values, which may be wrapped in an
            expression container and do not process backslash escapes

    Returns:
        The string value, or None when the value is not static
    """
    if node is None:
        return None
    match node.type:
        case "string" | "template_string":
            return _literal_content(node, jsx=jsx and node.type == "string")
        case "parenthesized_expression":
            inner = [c for c in node.named_children if c.type != "comment"]
            return static_string(inner[0]) if len(inner) == 1 else None
        case "binary_expression":
            operator = node.child_by_field_name("operator")
            if operator is None or operator.type != "+":
                return None
            left = static_string(node.child_by_field_name("left"))
            if left is None:
                return None
            right = static_string(node.child_by_field_name("right"))
            return None if right is None else left + right
        case "jsx_expression" if jsx:
            inner = [c for c in node.named_children if c.type != "comment"]
            return static_string(inner[0]) if len(inner) == 1 else None
        case _:
            return None


def property_name(node: Node | None) -> str | None:
    """Static name of an object key or JSX attribute name.

    Handles ``key``, ``"key"`` and ``'key'``. Computed keys return None
    unless they hold a static string.
    """
    if node is None:
        return None
    match node.type:
        case "property_identifier" | "identifier" | "jsx_identifier":
            return node_text(node)
        case "string":
            return static_string(node)
        case "computed_property_name":
            inner = [c for c in node.named_children if c.type != "comment"]
            return static_string(inner[0]) if len(inner) == 1 else None
        case _:
            return None
