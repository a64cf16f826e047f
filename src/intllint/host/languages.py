"""Grammar registry: file extension -> SourceLanguage -> tree-sitter Language.

Grammar objects are created once per process and cached. Parsers are cheap
and stateful, so a fresh one is handed out per request.

Python 3.13+.
"""

import logging
from functools import cache
from pathlib import PurePath

import tree_sitter_javascript
import tree_sitter_typescript
from tree_sitter import Language, Parser

from intllint.enums import SourceLanguage

__all__ = [
    "EXTENSION_LANGUAGES",
    "get_language",
    "language_for",
    "make_parser",
    "script_language",
]

logger = logging.getLogger(__name__)

EXTENSION_LANGUAGES: dict[str, SourceLanguage] = {
    ".js": SourceLanguage.JAVASCRIPT,
    ".jsx": SourceLanguage.JAVASCRIPT,
    ".mjs": SourceLanguage.JAVASCRIPT,
    ".cjs": SourceLanguage.JAVASCRIPT,
    ".ts": SourceLanguage.TYPESCRIPT,
    ".mts": SourceLanguage.TYPESCRIPT,
    ".cts": SourceLanguage.TYPESCRIPT,
    ".tsx": SourceLanguage.TSX,
    ".vue": SourceLanguage.VUE,
}

# Vue <script lang="..."> values
_SCRIPT_LANGS: dict[str, SourceLanguage] = {
    "js": SourceLanguage.JAVASCRIPT,
    "jsx": SourceLanguage.JAVASCRIPT,
    "ts": SourceLanguage.TYPESCRIPT,
    "tsx": SourceLanguage.TSX,
}


def language_for(filename: str) -> SourceLanguage | None:
    """Select the grammar for a file by its extension.

    Returns:
        The SourceLanguage, or None if the extension is not supported

    Example:
        >>> language_for("src/App.tsx")
        <SourceLanguage.TSX: 'tsx'>
        >>> language_for("README.md") is None
        True
    """
    return EXTENSION_LANGUAGES.get(PurePath(filename).suffix.lower())


def script_language(lang_attr: str | None) -> SourceLanguage:
    """Grammar for a Vue ``<script>`` block from its ``lang`` attribute."""
    if lang_attr is None:
        return SourceLanguage.JAVASCRIPT
    return _SCRIPT_LANGS.get(lang_attr.strip().lower(), SourceLanguage.JAVASCRIPT)


@cache
def get_language(language: SourceLanguage) -> Language:
    """Tree-sitter Language for a SourceLanguage (cached per process)."""
    match language:
        case SourceLanguage.JAVASCRIPT | SourceLanguage.VUE:
            # Vue template expressions are plain JavaScript
            grammar = tree_sitter_javascript.language()
        case SourceLanguage.TYPESCRIPT:
            grammar = tree_sitter_typescript.language_typescript()
        case SourceLanguage.TSX:
            grammar = tree_sitter_typescript.language_tsx()
    logger.debug("Loaded tree-sitter grammar for %s", language)
    return Language(grammar)


def make_parser(language: SourceLanguage) -> Parser:
    """New tree-sitter Parser bound to the grammar of ``language``."""
    return Parser(get_language(language))
