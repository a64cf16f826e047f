"""Enumerations for intllint type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class ElementType(StrEnum):
    """Kind of a parsed ICU message element.

    StrEnum provides automatic string conversion: str(ElementType.PLURAL) == "plural"
    """

    LITERAL = "literal"
    """Plain text: Hello"""

    ARGUMENT = "argument"
    """Simple placeholder: {name}"""

    NUMBER = "number"
    """Number formatter: {count, number, percent}"""

    DATE = "date"
    """Date formatter: {when, date, short}"""

    TIME = "time"
    """Time formatter: {when, time, short}"""

    SELECT = "select"
    """Select construct: {gender, select, male {...} other {...}}"""

    PLURAL = "plural"
    """Plural construct: {count, plural, one {...} other {...}}"""

    POUND = "pound"
    """Plural value reference inside a plural option: #"""

    TAG = "tag"
    """Rich text tag: <b>...</b>"""


class PluralType(StrEnum):
    """Plural flavour: cardinal (plural) or ordinal (selectordinal)."""

    CARDINAL = "cardinal"
    ORDINAL = "ordinal"


class RuleType(StrEnum):
    """Rule category, as declared in rule metadata."""

    PROBLEM = "problem"
    SUGGESTION = "suggestion"
    LAYOUT = "layout"


class SourceLanguage(StrEnum):
    """Grammar used to parse a source file, selected by extension."""

    JAVASCRIPT = "javascript"
    TYPESCRIPT = "typescript"
    TSX = "tsx"
    VUE = "vue"


class IcuErrorKind(StrEnum):
    """ICU parser error kinds.

    Values match the error vocabulary of the reference ICU message parser
    so reports stay recognizable to users of that toolchain.
    """

    EXPECT_ARGUMENT_CLOSING_BRACE = "EXPECT_ARGUMENT_CLOSING_BRACE"
    EMPTY_ARGUMENT = "EMPTY_ARGUMENT"
    MALFORMED_ARGUMENT = "MALFORMED_ARGUMENT"
    EXPECT_ARGUMENT_TYPE = "EXPECT_ARGUMENT_TYPE"
    INVALID_ARGUMENT_TYPE = "INVALID_ARGUMENT_TYPE"
    EXPECT_ARGUMENT_STYLE = "EXPECT_ARGUMENT_STYLE"
    UNCLOSED_QUOTE_IN_ARGUMENT_STYLE = "UNCLOSED_QUOTE_IN_ARGUMENT_STYLE"
    EXPECT_SELECT_ARGUMENT_OPTIONS = "EXPECT_SELECT_ARGUMENT_OPTIONS"
    EXPECT_PLURAL_ARGUMENT_OFFSET_VALUE = "EXPECT_PLURAL_ARGUMENT_OFFSET_VALUE"
    INVALID_PLURAL_ARGUMENT_OFFSET_VALUE = "INVALID_PLURAL_ARGUMENT_OFFSET_VALUE"
    EXPECT_SELECT_ARGUMENT_SELECTOR = "EXPECT_SELECT_ARGUMENT_SELECTOR"
    EXPECT_PLURAL_ARGUMENT_SELECTOR = "EXPECT_PLURAL_ARGUMENT_SELECTOR"
    EXPECT_SELECT_ARGUMENT_SELECTOR_FRAGMENT = "EXPECT_SELECT_ARGUMENT_SELECTOR_FRAGMENT"
    EXPECT_PLURAL_ARGUMENT_SELECTOR_FRAGMENT = "EXPECT_PLURAL_ARGUMENT_SELECTOR_FRAGMENT"
    INVALID_PLURAL_ARGUMENT_SELECTOR = "INVALID_PLURAL_ARGUMENT_SELECTOR"
    DUPLICATE_PLURAL_ARGUMENT_SELECTOR = "DUPLICATE_PLURAL_ARGUMENT_SELECTOR"
    DUPLICATE_SELECT_ARGUMENT_SELECTOR = "DUPLICATE_SELECT_ARGUMENT_SELECTOR"
    MISSING_OTHER_CLAUSE = "MISSING_OTHER_CLAUSE"
    INVALID_TAG = "INVALID_TAG"
    UNMATCHED_CLOSING_TAG = "UNMATCHED_CLOSING_TAG"
    UNCLOSED_TAG = "UNCLOSED_TAG"


__all__ = [
    "ElementType",
    "IcuErrorKind",
    "PluralType",
    "RuleType",
    "SourceLanguage",
]
