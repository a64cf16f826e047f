"""ICU MessageFormat parser.

Turns raw message text into the element tree defined in
:mod:`intllint.icu.ast`. Grammar, quoting rules and error kinds follow the
reference ICU message parser used by the JavaScript tooling this linter
mirrors, so a message rejected there is rejected here with the same kind.

Architecture:
    The parser uses the immutable cursor pattern
    (:class:`~intllint.icu.cursor.Cursor`). Every sub-parser takes a cursor
    and returns a :class:`~intllint.icu.cursor.ParseResult` holding the
    parsed value and the cursor after it. Failures raise
    :class:`~intllint.diagnostics.MessageSyntaxError` immediately; there is
    no error recovery inside a single message.

Quoting:
    - ``''`` is always a literal apostrophe
    - ``'`` before ``{ } < >`` (and ``#`` inside plurals) starts a quoted
      literal that runs to the next unpaired apostrophe
    - any other apostrophe is literal text

Security:
    Nesting (plural/select options and tags) is bounded by a DepthGuard.
"""

import re
from typing import NoReturn

from intllint.constants import MAX_DEPTH
from intllint.core.depth_guard import DepthGuard
from intllint.diagnostics import ErrorTemplate, MessageSyntaxError
from intllint.enums import IcuErrorKind, PluralType

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

__all__ = ["IcuParser", "parse_message"]

# Unicode Pattern_Syntax code points. Identifiers stop at these and at white space.
_PATTERN_SYNTAX: str = (
    r"!-/:-@\[-\^`{-~"
    r"¡-§©«¬®°±¶»¿×÷"
    r"‐-‧‰-‾⁁-⁓⁕-⁞←-⑟"
    r"─-❵➔-⯿⸀-⹿、-〃〈-〠〰"
    r"﴾﴿﹅﹆"
)
_IDENTIFIER_RE = re.compile(rf"[^\s{_PATTERN_SYNTAX}]*")

_PLURAL_ARG_TYPES: frozenset[str] = frozenset({"plural", "selectordinal"})

_ASCII_DIGITS: str = "0123456789"

# Offsets and exact selectors must fit in a JavaScript safe integer.
_MAX_SAFE_INTEGER: int = 2**53 - 1


def _is_alpha(char: str | None) -> bool:
    return char is not None and char.isascii() and char.isalpha()


def _is_alpha_or_slash(char: str | None) -> bool:
    return char == "/" or _is_alpha(char)


def _is_tag_name_char(char: str) -> bool:
    return char in "-._" or char.isalnum()


def _parse_identifier(cursor: Cursor) -> ParseResult[str]:
    """Match the longest identifier at cursor (possibly empty)."""
    match = _IDENTIFIER_RE.match(cursor.source, cursor.pos)
    end = match.end() if match else cursor.pos
    return ParseResult(cursor.slice_to(end), Cursor(cursor.source, end))


def _parse_tag_name(cursor: Cursor) -> ParseResult[str]:
    start = cursor
    while not cursor.is_eof and _is_tag_name_char(cursor.current):
        cursor = cursor.advance()
    return ParseResult(start.slice_to(cursor.pos), cursor)


class IcuParser:
    """ICU message parser using immutable cursor pattern.

    Stateless between calls: every parse() builds its own DepthGuard, so one
    instance can be shared.

    Attributes:
        requires_other_clause: Reject plural/select without an "other" option
        ignore_tag: Treat "<" as plain text instead of parsing rich text tags
        max_nesting_depth: Maximum nesting of options and tags (default: 100)
    """

    __slots__ = ("_ignore_tag", "_max_nesting_depth", "_requires_other_clause")

    def __init__(
        self,
        *,
        requires_other_clause: bool = True,
        ignore_tag: bool = False,
        max_nesting_depth: int | None = None,
    ) -> None:
        """Initialize parser.

        Args:
            requires_other_clause: Reject plural/select without "other" (default: True)
            ignore_tag: Do not parse rich text tags (default: False)
            max_nesting_depth: Maximum nesting depth (default: MAX_DEPTH)
        """
        self._requires_other_clause = requires_other_clause
        self._ignore_tag = ignore_tag
        self._max_nesting_depth = (
            max_nesting_depth if max_nesting_depth is not None else MAX_DEPTH
        )

    @property
    def requires_other_clause(self) -> bool:
        """Whether plural/select constructs need an "other" option."""
        return self._requires_other_clause

    @property
    def ignore_tag(self) -> bool:
        """Whether rich text tags are treated as plain text."""
        return self._ignore_tag

    @property
    def max_nesting_depth(self) -> int:
        """Maximum allowed nesting depth."""
        return self._max_nesting_depth

    def parse(self, text: str) -> tuple[MessageElement, ...]:
        """Parse ICU message text into an element tree.

        Args:
            text: Raw message text

        Returns:
            Ordered tuple of top-level elements

        Raises:
            MessageSyntaxError: If the message is malformed
            DepthLimitExceededError: If nesting exceeds max_nesting_depth

        Example:
            >>> IcuParser().parse("Hello {name}")
            (LiteralElement(value='Hello ', ...), ArgumentElement(value='name', ...))
        """
        guard = DepthGuard(max_depth=self._max_nesting_depth)
        result = self._parse_message(
            Cursor(text, 0), guard, nesting=0, parent_arg_type="", expecting_close_tag=False
        )
        return result.value

    # ========================================================================
    # ERRORS
    # ========================================================================

    @staticmethod
    def _fail(kind: IcuErrorKind, cursor: Cursor) -> NoReturn:
        raise MessageSyntaxError(
            ErrorTemplate.icu_syntax_error(kind, cursor.pos),
            kind=kind,
            offset=cursor.pos,
            original_message=cursor.source,
        )

    # ========================================================================
    # MESSAGE BODY
    # ========================================================================

    def _parse_message(
        self,
        cursor: Cursor,
        guard: DepthGuard,
        nesting: int,
        parent_arg_type: str,
        expecting_close_tag: bool,
    ) -> ParseResult[tuple[MessageElement, ...]]:
        """Parse elements until EOF, an option's closing brace or a closing tag."""
        elements: list[MessageElement] = []
        while not cursor.is_eof:
            char = cursor.current
            result: ParseResult[MessageElement]
            if char == "{":
                result = self._parse_argument(cursor, guard, nesting, expecting_close_tag)
            elif char == "}" and nesting > 0:
                break
            elif char == "#" and parent_arg_type in _PLURAL_ARG_TYPES:
                after = cursor.advance()
                result = ParseResult(PoundElement(Location(cursor.pos, after.pos)), after)
            elif char == "<" and not self._ignore_tag and cursor.peek(1) == "/":
                if expecting_close_tag:
                    break
                self._fail(IcuErrorKind.UNMATCHED_CLOSING_TAG, cursor)
            elif char == "<" and not self._ignore_tag and _is_alpha(cursor.peek(1)):
                result = self._parse_tag(cursor, guard, nesting, parent_arg_type)
            else:
                result = self._parse_literal(cursor, nesting, parent_arg_type)
            elements.append(result.value)
            cursor = result.cursor
        return ParseResult(tuple(elements), cursor)

    def _parse_literal(
        self, cursor: Cursor, nesting: int, parent_arg_type: str
    ) -> ParseResult[MessageElement]:
        start = cursor
        parts: list[str] = []
        while True:
            piece = (
                self._try_parse_quote(cursor, parent_arg_type)
                or self._try_parse_unquoted(cursor, nesting, parent_arg_type)
                or self._try_parse_left_angle_bracket(cursor)
            )
            if piece is None:
                break
            parts.append(piece.value)
            cursor = piece.cursor
        element = LiteralElement("".join(parts), Location(start.pos, cursor.pos))
        return ParseResult(element, cursor)

    @staticmethod
    def _try_parse_quote(cursor: Cursor, parent_arg_type: str) -> ParseResult[str] | None:
        if cursor.is_eof or cursor.current != "'":
            return None
        following = cursor.peek(1)
        if following == "'":
            return ParseResult("'", cursor.advance(2))
        if following not in ("{", "<", ">", "}") and not (
            following == "#" and parent_arg_type in _PLURAL_ARG_TYPES
        ):
            return None

        cursor = cursor.advance()
        chars = [cursor.current]
        cursor = cursor.advance()
        while not cursor.is_eof:
            char = cursor.current
            if char == "'":
                if cursor.peek(1) == "'":
                    chars.append("'")
                    cursor = cursor.advance(2)
                    continue
                cursor = cursor.advance()
                break
            chars.append(char)
            cursor = cursor.advance()
        return ParseResult("".join(chars), cursor)

    @staticmethod
    def _try_parse_unquoted(
        cursor: Cursor, nesting: int, parent_arg_type: str
    ) -> ParseResult[str] | None:
        if cursor.is_eof:
            return None
        char = cursor.current
        if (
            char in ("<", "{")
            or (char == "#" and parent_arg_type in _PLURAL_ARG_TYPES)
            or (char == "}" and nesting > 0)
        ):
            return None
        return ParseResult(char, cursor.advance())

    def _try_parse_left_angle_bracket(self, cursor: Cursor) -> ParseResult[str] | None:
        if (
            not cursor.is_eof
            and cursor.current == "<"
            and (self._ignore_tag or not _is_alpha_or_slash(cursor.peek(1)))
        ):
            return ParseResult("<", cursor.advance())
        return None

    # ========================================================================
    # TAGS
    # ========================================================================

    def _parse_tag(
        self, cursor: Cursor, guard: DepthGuard, nesting: int, parent_arg_type: str
    ) -> ParseResult[MessageElement]:
        start = cursor
        name = _parse_tag_name(cursor.advance())
        cursor = name.cursor.skip_whitespace()

        self_closing = cursor.expect("/>")
        if self_closing is not None:
            literal = LiteralElement(f"<{name.value}/>", Location(start.pos, self_closing.pos))
            return ParseResult(literal, self_closing)

        opened = cursor.expect(">")
        if opened is None:
            self._fail(IcuErrorKind.INVALID_TAG, start)

        with guard:
            children = self._parse_message(
                opened, guard, nesting + 1, parent_arg_type, expecting_close_tag=True
            )

        end_tag_start = children.cursor
        closing = end_tag_start.expect("</")
        if closing is None:
            self._fail(IcuErrorKind.UNCLOSED_TAG, start)
        if closing.is_eof or not _is_alpha(closing.current):
            self._fail(IcuErrorKind.INVALID_TAG, end_tag_start)

        closing_name = _parse_tag_name(closing)
        if closing_name.value != name.value:
            self._fail(IcuErrorKind.UNMATCHED_CLOSING_TAG, end_tag_start)

        end = closing_name.cursor.skip_whitespace().expect(">")
        if end is None:
            self._fail(IcuErrorKind.INVALID_TAG, end_tag_start)

        tag = TagElement(name.value, children.value, Location(start.pos, end.pos))
        return ParseResult(tag, end)

    # ========================================================================
    # ARGUMENTS
    # ========================================================================

    def _parse_argument(
        self, cursor: Cursor, guard: DepthGuard, nesting: int, expecting_close_tag: bool
    ) -> ParseResult[MessageElement]:
        opening = cursor
        cursor = cursor.advance().skip_whitespace()
        if cursor.is_eof:
            self._fail(IcuErrorKind.EXPECT_ARGUMENT_CLOSING_BRACE, opening)
        if cursor.current == "}":
            self._fail(IcuErrorKind.EMPTY_ARGUMENT, opening)

        name = _parse_identifier(cursor)
        if not name.value:
            self._fail(IcuErrorKind.MALFORMED_ARGUMENT, opening)

        cursor = name.cursor.skip_whitespace()
        if cursor.is_eof:
            self._fail(IcuErrorKind.EXPECT_ARGUMENT_CLOSING_BRACE, opening)

        match cursor.current:
            case "}":
                cursor = cursor.advance()
                element = ArgumentElement(name.value, Location(opening.pos, cursor.pos))
                return ParseResult(element, cursor)
            case ",":
                cursor = cursor.advance().skip_whitespace()
                if cursor.is_eof:
                    self._fail(IcuErrorKind.EXPECT_ARGUMENT_CLOSING_BRACE, opening)
                return self._parse_argument_options(
                    cursor, guard, nesting, expecting_close_tag, name.value, opening
                )
            case _:
                self._fail(IcuErrorKind.MALFORMED_ARGUMENT, opening)

    def _parse_argument_options(  # noqa: PLR0913
        self,
        cursor: Cursor,
        guard: DepthGuard,
        nesting: int,
        expecting_close_tag: bool,
        value: str,
        opening: Cursor,
    ) -> ParseResult[MessageElement]:
        arg_type = _parse_identifier(cursor)
        cursor = arg_type.cursor

        match arg_type.value:
            case "":
                self._fail(IcuErrorKind.EXPECT_ARGUMENT_TYPE, cursor)

            case "number" | "date" | "time":
                cursor = cursor.skip_whitespace()
                style: str | None = None
                comma = cursor.expect(",")
                if comma is not None:
                    cursor = comma.skip_whitespace()
                    style_result = self._parse_simple_arg_style(cursor)
                    style = style_result.value.rstrip()
                    if not style:
                        self._fail(IcuErrorKind.EXPECT_ARGUMENT_STYLE, cursor)
                    cursor = style_result.cursor
                cursor = self._expect_argument_close(cursor, opening)
                location = Location(opening.pos, cursor.pos)
                simple: MessageElement
                match arg_type.value:
                    case "number":
                        simple = NumberElement(value, style, location)
                    case "date":
                        simple = DateElement(value, style, location)
                    case _:
                        simple = TimeElement(value, style, location)
                return ParseResult(simple, cursor)

            case "plural" | "selectordinal" | "select":
                cursor = cursor.skip_whitespace()
                comma = cursor.expect(",")
                if comma is None:
                    self._fail(IcuErrorKind.EXPECT_SELECT_ARGUMENT_OPTIONS, cursor)

                selector = _parse_identifier(comma.skip_whitespace())
                offset = 0
                if arg_type.value != "select" and selector.value == "offset":
                    colon = selector.cursor.expect(":")
                    if colon is None:
                        self._fail(
                            IcuErrorKind.EXPECT_PLURAL_ARGUMENT_OFFSET_VALUE, selector.cursor
                        )
                    number = self._parse_decimal_integer(
                        colon.skip_whitespace(),
                        IcuErrorKind.EXPECT_PLURAL_ARGUMENT_OFFSET_VALUE,
                        IcuErrorKind.INVALID_PLURAL_ARGUMENT_OFFSET_VALUE,
                    )
                    offset = number.value
                    selector = _parse_identifier(number.cursor.skip_whitespace())

                options = self._parse_options(
                    selector, guard, nesting, arg_type.value, expecting_close_tag
                )
                cursor = self._expect_argument_close(options.cursor, opening)
                location = Location(opening.pos, cursor.pos)
                branching: MessageElement
                if arg_type.value == "select":
                    branching = SelectElement(value, options.value, location)
                else:
                    plural_type = (
                        PluralType.ORDINAL
                        if arg_type.value == "selectordinal"
                        else PluralType.CARDINAL
                    )
                    branching = PluralElement(value, options.value, offset, plural_type, location)
                return ParseResult(branching, cursor)

            case _:
                self._fail(IcuErrorKind.INVALID_ARGUMENT_TYPE, arg_type.cursor)

    def _parse_simple_arg_style(self, cursor: Cursor) -> ParseResult[str]:
        """Read style text up to the argument's closing brace.

        Balanced braces and quoted sections are part of the style.
        """
        start = cursor
        nested_braces = 0
        while not cursor.is_eof:
            char = cursor.current
            if char == "'":
                quote = cursor
                end = cursor.source.find("'", cursor.pos + 1)
                if end == -1:
                    self._fail(IcuErrorKind.UNCLOSED_QUOTE_IN_ARGUMENT_STYLE, quote)
                cursor = Cursor(cursor.source, end + 1)
            elif char == "{":
                nested_braces += 1
                cursor = cursor.advance()
            elif char == "}":
                if nested_braces == 0:
                    break
                nested_braces -= 1
                cursor = cursor.advance()
            else:
                cursor = cursor.advance()
        return ParseResult(start.slice_to(cursor.pos), cursor)

    def _parse_options(
        self,
        first_selector: ParseResult[str],
        guard: DepthGuard,
        nesting: int,
        parent_arg_type: str,
        expecting_close_tag: bool,
    ) -> ParseResult[dict[str, PluralOrSelectOption]]:
        """Parse ``selector {message}`` pairs of a plural or select."""
        is_select = parent_arg_type == "select"
        options: dict[str, PluralOrSelectOption] = {}
        has_other_clause = False
        selector = first_selector.value
        cursor = first_selector.cursor

        while True:
            if not selector:
                equals = None if is_select else cursor.expect("=")
                if equals is None:
                    break
                number = self._parse_decimal_integer(
                    equals,
                    IcuErrorKind.EXPECT_PLURAL_ARGUMENT_SELECTOR,
                    IcuErrorKind.INVALID_PLURAL_ARGUMENT_SELECTOR,
                )
                selector = cursor.slice_to(number.cursor.pos)
                cursor = number.cursor

            if selector in options:
                self._fail(
                    IcuErrorKind.DUPLICATE_SELECT_ARGUMENT_SELECTOR
                    if is_select
                    else IcuErrorKind.DUPLICATE_PLURAL_ARGUMENT_SELECTOR,
                    cursor,
                )
            if selector == "other":
                has_other_clause = True

            opening = cursor.skip_whitespace()
            body_start = opening.expect("{")
            if body_start is None:
                self._fail(
                    IcuErrorKind.EXPECT_SELECT_ARGUMENT_SELECTOR_FRAGMENT
                    if is_select
                    else IcuErrorKind.EXPECT_PLURAL_ARGUMENT_SELECTOR_FRAGMENT,
                    opening,
                )

            with guard:
                fragment = self._parse_message(
                    body_start, guard, nesting + 1, parent_arg_type, expecting_close_tag
                )
            cursor = self._expect_argument_close(fragment.cursor, opening)
            options[selector] = PluralOrSelectOption(
                fragment.value, Location(opening.pos, cursor.pos)
            )

            next_selector = _parse_identifier(cursor.skip_whitespace())
            selector = next_selector.value
            cursor = next_selector.cursor

        if not options:
            self._fail(
                IcuErrorKind.EXPECT_SELECT_ARGUMENT_SELECTOR
                if is_select
                else IcuErrorKind.EXPECT_PLURAL_ARGUMENT_SELECTOR,
                cursor,
            )
        if self._requires_other_clause and not has_other_clause:
            self._fail(IcuErrorKind.MISSING_OTHER_CLAUSE, cursor)

        return ParseResult(options, cursor)

    # ========================================================================
    # PRIMITIVES
    # ========================================================================

    def _expect_argument_close(self, cursor: Cursor, opening: Cursor) -> Cursor:
        if cursor.is_eof or cursor.current != "}":
            self._fail(IcuErrorKind.EXPECT_ARGUMENT_CLOSING_BRACE, opening)
        return cursor.advance()

    def _parse_decimal_integer(
        self,
        cursor: Cursor,
        expect_kind: IcuErrorKind,
        invalid_kind: IcuErrorKind,
    ) -> ParseResult[int]:
        start = cursor
        sign = 1
        if cursor.starts_with("+"):
            cursor = cursor.advance()
        elif cursor.starts_with("-"):
            sign = -1
            cursor = cursor.advance()

        digits_start = cursor
        while not cursor.is_eof and cursor.current in _ASCII_DIGITS:
            cursor = cursor.advance()
        digits = digits_start.slice_to(cursor.pos)
        if not digits:
            self._fail(expect_kind, start)

        value = sign * int(digits)
        if abs(value) > _MAX_SAFE_INTEGER:
            self._fail(invalid_kind, start)
        return ParseResult(value, cursor)


def parse_message(
    text: str,
    *,
    requires_other_clause: bool = True,
    ignore_tag: bool = False,
) -> tuple[MessageElement, ...]:
    """Parse ICU message text into an element tree.

    Convenience function for IcuParser().parse().

    Args:
        text: Raw message text
        requires_other_clause: Reject plural/select without "other" (default: True)
        ignore_tag: Do not parse rich text tags (default: False)

    Returns:
        Ordered tuple of top-level elements

    Raises:
        MessageSyntaxError: If the message is malformed

    Example:
        >>> from intllint.icu import parse_message
        >>> elements = parse_message("{count, plural, one {# item} other {# items}}")
        >>> elements[0].type
        <ElementType.PLURAL: 'plural'>
    """
    parser = IcuParser(requires_other_clause=requires_other_clause, ignore_tag=ignore_tag)
    return parser.parse(text)
