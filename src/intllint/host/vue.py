"""Vue single-file component splitting.

A ``.vue`` file is not parsed as one tree. Its ``<script>`` blocks are parsed
as programs, and every template expression (``{{ ... }}`` interpolations and
bound directive values) is parsed as a tiny program of its own.

Each fragment is parsed from a buffer as long as the file up to the fragment's
end, with every byte before the fragment blanked to a space (newlines kept).
Byte offsets, lines and columns of the resulting nodes therefore equal those
of the original file, and one SourceFile converts all of them.

Python 3.13+.
"""

import logging
import re
from dataclasses import dataclass
from enum import StrEnum

from intllint.enums import SourceLanguage

from .languages import script_language

__all__ = ["FragmentKind", "VueDocument", "VueFragment"]

logger = logging.getLogger(__name__)

_SCRIPT_RE = re.compile(rb"<script(?P<attrs>\s[^>]*)?>(?P<body>.*?)</script\s*>", re.DOTALL)
_LANG_RE = re.compile(rb"""\blang\s*=\s*["']([^"']*)["']""")
_TEMPLATE_OPEN_RE = re.compile(rb"<template(?:\s[^>]*)?>")
_TEMPLATE_CLOSE = b"</template>"
_COMMENT_RE = re.compile(rb"<!--.*?-->", re.DOTALL)
_INTERPOLATION_RE = re.compile(rb"\{\{(?P<expr>.*?)\}\}", re.DOTALL)
_DIRECTIVE_RE = re.compile(
    rb"""(?<=\s)(?P<name>(?::|@|v-)[^\s=/>"']+)\s*=\s*(?:"(?P<dq>[^"]*)"|'(?P<sq>[^']*)')"""
)
_NON_NEWLINE_RE = re.compile(rb"[^\n]")

# Directive values that are not JavaScript expressions
_SKIPPED_DIRECTIVES: tuple[bytes, ...] = (b"v-for", b"v-slot")


class FragmentKind(StrEnum):
    """Where a fragment came from in the component."""

    SCRIPT = "script"
    TEMPLATE = "template"


@dataclass(frozen=True, slots=True)
class VueFragment:
    """Byte range of one parseable region of a ``.vue`` file.

    Attributes:
        start: Byte offset of the first byte of the region
        end: Byte offset after the region
        kind: Script block or template expression
        language: Grammar for the region
    """

    kind: FragmentKind
    start: int
    end: int
    language: SourceLanguage = SourceLanguage.JAVASCRIPT


class VueDocument:
    """Fragments of a Vue single-file component and their parse buffers.

    Example:
        >>> doc = VueDocument(b"<template><p>{{ $t('hi') }}</p></template>")
        >>> [f.kind for f in doc.fragments]
        [<FragmentKind.TEMPLATE: 'template'>]
    """

    __slots__ = ("_blank", "_data", "fragments")

    def __init__(self, data: bytes) -> None:
        self._data = data
        self._blank = _NON_NEWLINE_RE.sub(b" ", data)
        self.fragments: tuple[VueFragment, ...] = (
            *self._script_fragments(),
            *self._template_fragments(),
        )
        logger.debug("Vue component split into %d fragments", len(self.fragments))

    @property
    def script_fragments(self) -> tuple[VueFragment, ...]:
        return tuple(f for f in self.fragments if f.kind is FragmentKind.SCRIPT)

    @property
    def template_fragments(self) -> tuple[VueFragment, ...]:
        return tuple(f for f in self.fragments if f.kind is FragmentKind.TEMPLATE)

    def buffer(self, fragment: VueFragment) -> bytes:
        """Parse buffer for a fragment, aligned with the file's byte offsets."""
        return self._blank[: fragment.start] + self._data[fragment.start : fragment.end]

    def _script_fragments(self) -> list[VueFragment]:
        fragments = []
        for match in _SCRIPT_RE.finditer(self._data):
            lang = None
            if attrs := match.group("attrs"):
                if lang_match := _LANG_RE.search(attrs):
                    lang = lang_match.group(1).decode("ascii", errors="replace")
            fragments.append(
                VueFragment(
                    kind=FragmentKind.SCRIPT,
                    start=match.start("body"),
                    end=match.end("body"),
                    language=script_language(lang),
                )
            )
        return fragments

    def _template_fragments(self) -> list[VueFragment]:
        opening = _TEMPLATE_OPEN_RE.search(self._data)
        if opening is None:
            return []
        # The root template may contain nested <template> elements; the last
        # closing tag in the file belongs to the root.
        body_end = self._data.rfind(_TEMPLATE_CLOSE)
        if body_end < opening.end():
            logger.debug("Unclosed <template> block ignored")
            return []
        body_start = opening.end()
        comments = [m.span() for m in _COMMENT_RE.finditer(self._data, body_start, body_end)]

        def in_comment(pos: int) -> bool:
            return any(start <= pos < end for start, end in comments)

        ranges: list[tuple[int, int]] = []
        for match in _INTERPOLATION_RE.finditer(self._data, body_start, body_end):
            ranges.append(match.span("expr"))
        for match in _DIRECTIVE_RE.finditer(self._data, body_start, body_end):
            if match.group("name").startswith(_SKIPPED_DIRECTIVES):
                continue
            group = "dq" if match.group("dq") is not None else "sq"
            ranges.append(match.span(group))

        return [
            VueFragment(kind=FragmentKind.TEMPLATE, start=start, end=end)
            for start, end in sorted(ranges)
            if end > start and not in_comment(start)
        ]
