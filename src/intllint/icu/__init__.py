"""ICU message parsing package.

Provides the element tree, the cursor-based parser and its convenience
function. Separate from the rules so tooling can parse messages without
linting source files.

Python 3.13+.
"""

from .ast import (
    ArgumentElement,
    DateElement,
    LiteralElement,
    Location,
    MessageElement,
    NumberElement,
    PluralElement,
    PluralOrSelectOption,
    PoundElement,
    SelectElement,
    TagElement,
    TimeElement,
)
from .cursor import Cursor, ParseResult
from .parser import IcuParser, parse_message

__all__ = [
    "ArgumentElement",
    "Cursor",
    "DateElement",
    "IcuParser",
    "LiteralElement",
    "Location",
    "MessageElement",
    "NumberElement",
    "ParseResult",
    "PluralElement",
    "PluralOrSelectOption",
    "PoundElement",
    "SelectElement",
    "TagElement",
    "TimeElement",
    "parse_message",
]
