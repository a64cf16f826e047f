"""ICU message element tree.

A closed tagged union of frozen dataclasses. Every element carries a
ClassVar ``type`` discriminator matching ElementType, so both ``match``
on the class and comparison on ``element.type`` are available.

Includes type guards as static methods (eliminates circular imports).

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import ClassVar, TypeIs

from intllint.enums import ElementType, PluralType

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Base types
    "Location",
    # Elements
    "LiteralElement",
    "ArgumentElement",
    "NumberElement",
    "DateElement",
    "TimeElement",
    "SelectElement",
    "PluralElement",
    "PoundElement",
    "TagElement",
    # Options
    "PluralOrSelectOption",
    # Type aliases
    "MessageElement",
]

# ============================================================================
# BASE TYPES
# ============================================================================


@dataclass(frozen=True, slots=True)
class Location:
    """Character offsets of an element within its message text.

    Attributes:
        start: Starting offset (inclusive)
        end: Ending offset (exclusive)
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate location invariants."""
        if self.start < 0:
            msg = f"Location start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"Location end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)


# ============================================================================
# SIMPLE ELEMENTS
# ============================================================================


@dataclass(frozen=True, slots=True)
class LiteralElement:
    """Plain text segment, with ICU quoting already resolved."""

    type: ClassVar[ElementType] = ElementType.LITERAL

    value: str
    location: Location | None = None


@dataclass(frozen=True, slots=True)
class ArgumentElement:
    """Simple placeholder: {name}"""

    type: ClassVar[ElementType] = ElementType.ARGUMENT

    value: str
    location: Location | None = None

    @staticmethod
    def guard(elem: object) -> TypeIs["ArgumentElement"]:
        """Type guard for ArgumentElement."""
        return isinstance(elem, ArgumentElement)


@dataclass(frozen=True, slots=True)
class NumberElement:
    """Number formatter: {count, number} or {ratio, number, ::percent}

    The style is kept as raw text; skeletons keep their leading ``::``.
    """

    type: ClassVar[ElementType] = ElementType.NUMBER

    value: str
    style: str | None = None
    location: Location | None = None


@dataclass(frozen=True, slots=True)
class DateElement:
    """Date formatter: {when, date, short}"""

    type: ClassVar[ElementType] = ElementType.DATE

    value: str
    style: str | None = None
    location: Location | None = None


@dataclass(frozen=True, slots=True)
class TimeElement:
    """Time formatter: {when, time, short}"""

    type: ClassVar[ElementType] = ElementType.TIME

    value: str
    style: str | None = None
    location: Location | None = None


@dataclass(frozen=True, slots=True)
class PoundElement:
    """Plural value reference (#) inside a plural option."""

    type: ClassVar[ElementType] = ElementType.POUND

    location: Location | None = None


# ============================================================================
# BRANCHING ELEMENTS
# ============================================================================


@dataclass(frozen=True, slots=True)
class PluralOrSelectOption:
    """Nested content for one selector keyword.

    Attributes:
        value: Ordered elements of the option body
        location: Offsets of the braces around the body
    """

    value: tuple["MessageElement", ...]
    location: Location | None = None


@dataclass(frozen=True, slots=True)
class SelectElement:
    """Select construct.

    Example:
        {gender, select, male {He} female {She} other {They}}
    """

    type: ClassVar[ElementType] = ElementType.SELECT

    value: str
    options: Mapping[str, PluralOrSelectOption]
    location: Location | None = None

    @staticmethod
    def guard(elem: object) -> TypeIs["SelectElement"]:
        """Type guard for SelectElement."""
        return isinstance(elem, SelectElement)


@dataclass(frozen=True, slots=True)
class PluralElement:
    """Plural or selectordinal construct.

    Options keep the order in which the parser met them. Keys are plural
    categories ("one", "other", ...) or exact selectors ("=0", "=1", ...).
    The parser never produces an empty options mapping.

    Example:
        {count, plural, offset:1 =0 {nobody} one {# other} other {# others}}
    """

    type: ClassVar[ElementType] = ElementType.PLURAL

    value: str
    options: Mapping[str, PluralOrSelectOption]
    offset: int = 0
    plural_type: PluralType = PluralType.CARDINAL
    location: Location | None = None

    @staticmethod
    def guard(elem: object) -> TypeIs["PluralElement"]:
        """Type guard for PluralElement.

        Example:
            if PluralElement.guard(elem):
                elem.options  # Type-safe! mypy knows elem is PluralElement
        """
        return isinstance(elem, PluralElement)


@dataclass(frozen=True, slots=True)
class TagElement:
    """Rich text tag: <b>bold {name}</b>"""

    type: ClassVar[ElementType] = ElementType.TAG

    value: str
    children: tuple["MessageElement", ...]
    location: Location | None = None

    @staticmethod
    def guard(elem: object) -> TypeIs["TagElement"]:
        """Type guard for TagElement."""
        return isinstance(elem, TagElement)


# ============================================================================
# TYPE ALIASES
# ============================================================================

type MessageElement = (
    LiteralElement
    | ArgumentElement
    | NumberElement
    | DateElement
    | TimeElement
    | SelectElement
    | PluralElement
    | PoundElement
    | TagElement
)
