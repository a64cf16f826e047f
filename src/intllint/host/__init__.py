"""Host layer: source files, grammars, Vue components and traversal.

Stands in for the linter runtime that hands syntax nodes to rules.
"""

from .languages import EXTENSION_LANGUAGES, get_language, language_for, make_parser, script_language
from .source import LineOffsetCache, SourceFile, node_text
from .traversal import NodeHandler, VisitorTable, iter_named, walk
from .vue import FragmentKind, VueDocument, VueFragment

__all__ = [
    "EXTENSION_LANGUAGES",
    "FragmentKind",
    "LineOffsetCache",
    "NodeHandler",
    "SourceFile",
    "VisitorTable",
    "VueDocument",
    "VueFragment",
    "get_language",
    "iter_named",
    "language_for",
    "make_parser",
    "node_text",
    "script_language",
]
