"""Lexical scope checks for tracked identifiers.

An identifier refers to a tracked import when it sits inside the import's
scope and no scope between it and the module re-declares the same name.
This is a syntactic approximation: ``var`` declarations are only seen in
the block that contains them.

Python 3.13+.
"""

from collections.abc import Iterator

from tree_sitter import Node

from intllint.host import node_text

from .imports import TrackedSymbol

__all__ = ["binding_names", "declared_names", "resolves_to_import"]

_FUNCTION_TYPES = frozenset({
    "function_declaration",
    "function_expression",
    "function",
    "generator_function",
    "generator_function_declaration",
    "arrow_function",
    "method_definition",
})

_BLOCK_TYPES = frozenset({"statement_block", "switch_case"})

_LOOP_TYPES = frozenset({"for_statement", "for_in_statement"})

_DECLARATION_TYPES = frozenset({
    "lexical_declaration",
    "variable_declaration",
    "function_declaration",
    "generator_function_declaration",
    "class_declaration",
})


def binding_names(pattern: Node | None) -> Iterator[str]:
    """Names bound by a declaration target or parameter pattern.

    Walks destructuring patterns, defaults and rest elements.
    """
    if pattern is None:
        return
    match pattern.type:
        case "identifier" | "shorthand_property_identifier_pattern":
            yield node_text(pattern)
        case "assignment_pattern" | "object_assignment_pattern":
            yield from binding_names(pattern.child_by_field_name("left"))
        case "pair_pattern":
            yield from binding_names(pattern.child_by_field_name("value"))
        case "required_parameter" | "optional_parameter":
            yield from binding_names(pattern.child_by_field_name("pattern"))
        case "variable_declarator":
            yield from binding_names(pattern.child_by_field_name("name"))
        case (
            "object_pattern"
            | "array_pattern"
            | "rest_pattern"
            | "formal_parameters"
            | "lexical_declaration"
            | "variable_declaration"
        ):
            for child in pattern.named_children:
                yield from binding_names(child)
        case "function_declaration" | "generator_function_declaration" | "class_declaration":
            yield from binding_names(pattern.child_by_field_name("name"))
        case _:
            return


def declared_names(scope: Node) -> Iterator[str]:
    """Names that ``scope`` itself declares (not its nested scopes)."""
    if scope.type in _FUNCTION_TYPES:
        yield from binding_names(scope.child_by_field_name("parameters"))
        yield from binding_names(scope.child_by_field_name("parameter"))
        if scope.type in ("function_expression", "function", "generator_function"):
            # A named function expression binds its own name inside itself
            yield from binding_names(scope.child_by_field_name("name"))
    elif scope.type in _BLOCK_TYPES:
        for statement in scope.named_children:
            if statement.type in _DECLARATION_TYPES:
                yield from binding_names(statement)
    elif scope.type in _LOOP_TYPES:
        yield from binding_names(scope.child_by_field_name("initializer"))
        # for (const x of xs): only a declaring loop binds its left side
        if scope.child_by_field_name("kind") is not None:
            yield from binding_names(scope.child_by_field_name("left"))
    elif scope.type == "catch_clause":
        yield from binding_names(scope.child_by_field_name("parameter"))


def resolves_to_import(identifier: Node, symbol: TrackedSymbol) -> bool:
    """True if ``identifier`` refers to the binding ``symbol`` describes.

    Example:
        ``function f(defineMessage) { defineMessage({...}) }`` does not
        resolve: the parameter shadows the import.
    """
    if not symbol.scope.contains(identifier):
        return False
    name = symbol.local_name
    scope = identifier.parent
    # The module scope (the root) holds the import itself
    while scope is not None and scope.parent is not None:
        if name in declared_names(scope):
            return False
        scope = scope.parent
    return True
