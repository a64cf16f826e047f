"""Source text and position bookkeeping for the host layer.

Tree-sitter reports byte offsets into the UTF-8 encoding of a file. Diagnostics
use character offsets and 1-indexed line/column pairs, like text editors. This
module converts between the two.

Python 3.13+.
"""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from intllint.diagnostics import SourceSpan

if TYPE_CHECKING:
    from tree_sitter import Node

    from intllint.enums import SourceLanguage

__all__ = ["LineOffsetCache", "SourceFile", "node_text"]


def node_text(node: Node) -> str:
    """Decoded source text of a tree-sitter node."""
    raw = node.text
    return raw.decode("utf-8", errors="replace") if raw is not None else ""


class LineOffsetCache:
    """Cached line offset computation for efficient position lookups.

    Precomputes line start offsets in a single pass, then answers
    line:column queries with a binary search.

    Example:
        >>> cache = LineOffsetCache("abc\\ndef\\nghi")
        >>> cache.get_line_col(0)
        (1, 1)
        >>> cache.get_line_col(5)  # 'e' in "def"
        (2, 2)

    Thread Safety:
        Thread-safe. Internal state is only set during __init__.
    """

    __slots__ = ("_offsets", "_source_len")

    def __init__(self, source: str) -> None:
        offsets = [0]
        for i, char in enumerate(source):
            if char == "\n":
                offsets.append(i + 1)
        self._offsets: tuple[int, ...] = tuple(offsets)
        self._source_len = len(source)

    @property
    def line_count(self) -> int:
        """Number of lines in the source (at least 1)."""
        return len(self._offsets)

    def get_line_col(self, pos: int) -> tuple[int, int]:
        """Get 1-indexed (line, column) for a character position.

        Positions outside the source are clamped to its bounds.
        """
        pos = max(0, min(pos, self._source_len))
        line_index = bisect_right(self._offsets, pos) - 1
        return line_index + 1, pos - self._offsets[line_index] + 1


@dataclass(slots=True)
class SourceFile:
    """One source file being linted.

    ``data`` is the UTF-8 encoding of ``text``. Every tree parsed for the
    file (the whole program, or one Vue template fragment) uses buffers whose
    byte offsets line up with ``data``, so a single SourceFile converts any
    node of any of them.

    Attributes:
        filename: Display name used in diagnostics
        text: Decoded source text
        language: Grammar selected for the file
    """

    filename: str
    text: str
    language: SourceLanguage
    data: bytes = field(init=False, repr=False)
    _lines: LineOffsetCache = field(init=False, repr=False)
    _ascii: bool = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.data = self.text.encode("utf-8")
        self._lines = LineOffsetCache(self.text)
        self._ascii = self.text.isascii()

    def char_offset(self, byte_offset: int) -> int:
        """Convert a byte offset into ``data`` to a character offset."""
        if self._ascii:
            return byte_offset
        return len(self.data[:byte_offset].decode("utf-8", errors="ignore"))

    def line_col(self, char_offset: int) -> tuple[int, int]:
        """1-indexed line and column of a character offset."""
        return self._lines.get_line_col(char_offset)

    def span_of(self, node: Node) -> SourceSpan:
        """SourceSpan covering a tree-sitter node."""
        start = self.char_offset(node.start_byte)
        end = self.char_offset(node.end_byte)
        line, column = self.line_col(start)
        return SourceSpan(start=start, end=max(start, end), line=line, column=column)
