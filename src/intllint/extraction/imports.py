"""Import tracking for the message framework module.

Records which local names a file binds to exports of the framework module
(``react-intl`` by default), including renamed and namespace imports, so
the extractor can recognize ``defineMessage`` even when it is called
``dm`` locally.

Python 3.13+.
"""

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field

from tree_sitter import Node

from intllint.constants import FRAMEWORK_MODULE
from intllint.host import node_text

from .values import static_string

__all__ = [
    "DEFAULT_IMPORT",
    "NAMESPACE_IMPORT",
    "ImportTracker",
    "ScopeRange",
    "TrackedSymbol",
    "TrackedSymbols",
]

logger = logging.getLogger(__name__)

# imported_name markers for the two binding forms that do not name an export
DEFAULT_IMPORT = "default"
NAMESPACE_IMPORT = "*"


@dataclass(frozen=True, slots=True)
class ScopeRange:
    """Byte range of the scope a binding belongs to."""

    start_byte: int
    end_byte: int

    def contains(self, node: Node) -> bool:
        return self.start_byte <= node.start_byte and node.end_byte <= self.end_byte


@dataclass(frozen=True, slots=True)
class TrackedSymbol:
    """One local binding created by a framework import.

    Attributes:
        local_name: Name the binding has in this file
        imported_name: Export it refers to ("default", "*" or an export name)
        scope: Range in which the binding is visible (the module)
    """

    local_name: str
    imported_name: str
    scope: ScopeRange


@dataclass(frozen=True, slots=True)
class TrackedSymbols:
    """Immutable set of tracked symbols for one file.

    Example:
        >>> TrackedSymbols().by_local_name("defineMessage")
        ()
    """

    symbols: frozenset[TrackedSymbol] = field(default_factory=frozenset)

    def __iter__(self) -> Iterator[TrackedSymbol]:
        return iter(self.symbols)

    def __len__(self) -> int:
        return len(self.symbols)

    def __bool__(self) -> bool:
        return bool(self.symbols)

    def by_local_name(self, local_name: str) -> tuple[TrackedSymbol, ...]:
        """Symbols bound to ``local_name`` (usually zero or one)."""
        return tuple(s for s in self.symbols if s.local_name == local_name)

    def local_names(self) -> frozenset[str]:
        return frozenset(s.local_name for s in self.symbols)


def _module_scope(node: Node) -> ScopeRange:
    root = node
    while root.parent is not None:
        root = root.parent
    return ScopeRange(root.start_byte, root.end_byte)


def _specifier_symbols(named_imports: Node, scope: ScopeRange) -> Iterator[TrackedSymbol]:
    for specifier in named_imports.named_children:
        if specifier.type != "import_specifier":
            continue
        name = specifier.child_by_field_name("name")
        if name is None:
            continue
        alias = specifier.child_by_field_name("alias")
        imported = static_string(name) if name.type == "string" else node_text(name)
        if imported is None:
            continue
        local = node_text(alias) if alias is not None else imported
        yield TrackedSymbol(local_name=local, imported_name=imported, scope=scope)


class ImportTracker:
    """Recognizes import statements of one module.

    Thread-safe: holds only the module name.
    """

    __slots__ = ("_module_name",)

    def __init__(self, module_name: str = FRAMEWORK_MODULE) -> None:
        self._module_name = module_name

    @property
    def module_name(self) -> str:
        return self._module_name

    def track(self, node: Node) -> TrackedSymbols | None:
        """Symbols bound by ``node`` if it imports the tracked module.

        Returns:
            A fresh TrackedSymbols for a qualifying ``import_statement``
            (possibly empty, for side-effect imports), or None when the
            node is not an import of the tracked module. The caller replaces
            its per-file set with the returned one.
        """
        if node.type != "import_statement":
            return None
        source = node.child_by_field_name("source")
        if source is None or static_string(source) != self._module_name:
            return None

        scope = _module_scope(node)
        symbols: list[TrackedSymbol] = []
        for clause in node.named_children:
            if clause.type != "import_clause":
                continue
            for child in clause.named_children:
                match child.type:
                    case "identifier":
                        symbols.append(TrackedSymbol(node_text(child), DEFAULT_IMPORT, scope))
                    case "namespace_import":
                        ident = next(
                            (c for c in child.named_children if c.type == "identifier"), None
                        )
                        if ident is not None:
                            symbols.append(TrackedSymbol(node_text(ident), NAMESPACE_IMPORT, scope))
                    case "named_imports":
                        symbols.extend(_specifier_symbols(child, scope))
                    case _:
                        continue

        tracked = TrackedSymbols(frozenset(symbols))
        logger.debug(
            "Tracked %d symbol(s) from %r: %s",
            len(tracked),
            self._module_name,
            sorted(tracked.local_names()),
        )
        return tracked
