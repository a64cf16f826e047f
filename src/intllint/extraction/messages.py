"""Message-site extraction.

Finds the places in a syntax tree that define or format an ICU message and
pulls out the message descriptor. A site is one of:

    - a call to ``defineMessage`` / ``defineMessages`` imported from the
      framework module, under any local name or through a namespace import
    - a call to a well-known format function (``formatMessage``,
      ``intl.formatMessage``, ``$t``, ...), matched by name alone
    - a ``<FormattedMessage>`` element imported from the framework module

Each site yields MessageCandidate objects; the rule driver parses and
validates their default message.

Python 3.13+.
"""

import logging
from dataclasses import dataclass

from tree_sitter import Node

from intllint.constants import (
    DEFINE_MESSAGE,
    DEFINE_MESSAGES,
    DESCRIPTOR_DEFAULT_MESSAGE,
    DESCRIPTOR_DESCRIPTION,
    DESCRIPTOR_ID,
    FORMAT_FUNCTION_NAMES,
    FORMATTED_MESSAGE,
    INTL_OBJECT_NAMES,
)
from intllint.host import node_text

from .imports import DEFAULT_IMPORT, NAMESPACE_IMPORT, TrackedSymbols
from .scope import resolves_to_import
from .values import property_name, static_string

__all__ = ["MessageCandidate", "MessageDescriptor", "extract_messages"]

logger = logging.getLogger(__name__)

_DESCRIPTOR_KEYS = frozenset({DESCRIPTOR_ID, DESCRIPTOR_DEFAULT_MESSAGE, DESCRIPTOR_DESCRIPTION})


@dataclass(frozen=True, slots=True)
class MessageDescriptor:
    """Statically known parts of a message descriptor.

    A field is None when it is absent or not a static string.
    """

    id: str | None = None
    default_message: str | None = None
    description: str | None = None


@dataclass(frozen=True, slots=True)
class MessageCandidate:
    """One message found in source.

    Attributes:
        descriptor: The extracted descriptor
        message_node: Node holding the default message (diagnostic anchor),
            None when the site has no ``defaultMessage``
        node: The call or element the message was found in
    """

    descriptor: MessageDescriptor
    message_node: Node | None
    node: Node


def _named(node: Node | None) -> list[Node]:
    if node is None:
        return []
    return [child for child in node.named_children if child.type != "comment"]


# ============================================================================
# CALLEE RECOGNITION
# ============================================================================


def _resolves_to(callee: Node | None, tracked: TrackedSymbols, export: str) -> bool:
    """True if ``callee`` names framework export ``export``.

    Accepts ``local`` (a named import, possibly renamed) and ``ns.export``
    (a namespace or default import used as an object).
    """
    if callee is None or not tracked:
        return False
    match callee.type:
        case "identifier" | "jsx_identifier":
            return any(
                symbol.imported_name == export and resolves_to_import(callee, symbol)
                for symbol in tracked.by_local_name(node_text(callee))
            )
        case "member_expression" | "nested_identifier":
            parts = _named(callee)
            if callee.type == "member_expression":
                obj = callee.child_by_field_name("object")
                prop = callee.child_by_field_name("property")
            else:
                obj, prop = (parts[0], parts[-1]) if len(parts) >= 2 else (None, None)
            if obj is None or prop is None or node_text(prop) != export:
                return False
            if obj.type not in ("identifier", "jsx_identifier"):
                return False
            return any(
                symbol.imported_name in (NAMESPACE_IMPORT, DEFAULT_IMPORT)
                and resolves_to_import(obj, symbol)
                for symbol in tracked.by_local_name(node_text(obj))
            )
        case _:
            return False


def _is_format_function(callee: Node | None) -> bool:
    """Direct name match: ``formatMessage(...)``, ``intl.formatMessage(...)``.

    The receiver may itself be a member access ending in ``intl``, as in
    ``this.props.intl.formatMessage(...)``.
    """
    if callee is None:
        return False
    match callee.type:
        case "identifier":
            return node_text(callee) in FORMAT_FUNCTION_NAMES
        case "member_expression":
            prop = callee.child_by_field_name("property")
            obj = callee.child_by_field_name("object")
            if prop is None or obj is None or node_text(prop) not in FORMAT_FUNCTION_NAMES:
                return False
            match obj.type:
                case "identifier":
                    return node_text(obj) in INTL_OBJECT_NAMES
                case "member_expression":
                    inner = obj.child_by_field_name("property")
                    return inner is not None and node_text(inner) in INTL_OBJECT_NAMES
                case _:
                    return False
        case _:
            return False


# ============================================================================
# DESCRIPTOR READING
# ============================================================================


def _candidate_from_object(obj: Node, site: Node) -> MessageCandidate:
    values: dict[str, str | None] = {}
    anchor: Node | None = None
    for prop in _named(obj):
        if prop.type != "pair":
            continue
        key = property_name(prop.child_by_field_name("key"))
        if key not in _DESCRIPTOR_KEYS:
            continue
        value = prop.child_by_field_name("value")
        values[key] = static_string(value)
        if key == DESCRIPTOR_DEFAULT_MESSAGE:
            anchor = value
    return MessageCandidate(
        descriptor=MessageDescriptor(
            id=values.get(DESCRIPTOR_ID),
            default_message=values.get(DESCRIPTOR_DEFAULT_MESSAGE),
            description=values.get(DESCRIPTOR_DESCRIPTION),
        ),
        message_node=anchor,
        node=site,
    )


def _candidate_from_element(element: Node) -> MessageCandidate:
    values: dict[str, str | None] = {}
    anchor: Node | None = None
    for attribute in _named(element):
        if attribute.type != "jsx_attribute":
            continue
        parts = _named(attribute)
        if not parts:
            continue
        key = property_name(parts[0])
        if key not in _DESCRIPTOR_KEYS:
            continue
        value = parts[1] if len(parts) > 1 else None
        values[key] = static_string(value, jsx=True)
        if key == DESCRIPTOR_DEFAULT_MESSAGE:
            anchor = value
    return MessageCandidate(
        descriptor=MessageDescriptor(
            id=values.get(DESCRIPTOR_ID),
            default_message=values.get(DESCRIPTOR_DEFAULT_MESSAGE),
            description=values.get(DESCRIPTOR_DESCRIPTION),
        ),
        message_node=anchor,
        node=element,
    )


def _first_argument(call: Node) -> Node | None:
    arguments = call.child_by_field_name("arguments")
    if arguments is None or arguments.type != "arguments":
        # Tagged templates carry a template_string here
        return None
    args = _named(arguments)
    return args[0] if args else None


# ============================================================================
# PUBLIC API
# ============================================================================


def extract_messages(node: Node, tracked: TrackedSymbols) -> list[MessageCandidate]:
    """Message candidates defined at ``node``.

    Args:
        node: A ``call_expression``, ``jsx_opening_element`` or
            ``jsx_self_closing_element``; other node types yield nothing
        tracked: Framework imports visible in the file

    Returns:
        Candidates in source order (several for ``defineMessages``)
    """
    match node.type:
        case "jsx_opening_element" | "jsx_self_closing_element":
            if _resolves_to(node.child_by_field_name("name"), tracked, FORMATTED_MESSAGE):
                return [_candidate_from_element(node)]
            return []
        case "call_expression":
            first = _first_argument(node)
            if first is None or first.type != "object":
                return []
            callee = node.child_by_field_name("function")
            if _is_format_function(callee) or _resolves_to(callee, tracked, DEFINE_MESSAGE):
                return [_candidate_from_object(first, node)]
            if _resolves_to(callee, tracked, DEFINE_MESSAGES):
                candidates = []
                for prop in _named(first):
                    value = prop.child_by_field_name("value") if prop.type == "pair" else None
                    if value is not None and value.type == "object":
                        candidates.append(_candidate_from_object(value, node))
                    else:
                        logger.debug("Skipping non-literal descriptor in %s", DEFINE_MESSAGES)
                return candidates
            return []
        case _:
            return []
