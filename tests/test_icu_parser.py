"""Tests for icu/parser.py: ICU message grammar and error kinds.

Python 3.13+.
"""

from __future__ import annotations

import pytest
from hypothesis import event, given, settings
from hypothesis import strategies as st

from intllint.diagnostics import DepthLimitExceededError, DiagnosticCode, MessageSyntaxError
from intllint.enums import ElementType, IcuErrorKind, PluralType
from intllint.icu import (
    ArgumentElement,
    DateElement,
    IcuParser,
    LiteralElement,
    NumberElement,
    PluralElement,
    PoundElement,
    SelectElement,
    TagElement,
    TimeElement,
    parse_message,
)
from tests.strategies import SAFE_TEXT_CHARS, icu_messages, lower_case_names


def _kind(text: str, **kwargs: bool) -> str:
    with pytest.raises(MessageSyntaxError) as exc_info:
        parse_message(text, **kwargs)
    return exc_info.value.kind


# ============================================================================
# Literals and quoting
# ============================================================================


class TestLiterals:
    """Plain text and apostrophe quoting."""

    def test_empty_message(self) -> None:
        assert parse_message("") == ()

    def test_plain_text_is_one_literal(self) -> None:
        (element,) = parse_message("Hello, world!")
        assert isinstance(element, LiteralElement)
        assert element.value == "Hello, world!"
        assert element.type is ElementType.LITERAL

    def test_doubled_apostrophe_is_literal_apostrophe(self) -> None:
        (element,) = parse_message("it''s")
        assert element.value == "it's"

    def test_lone_apostrophe_is_kept(self) -> None:
        (element,) = parse_message("don't")
        assert element.value == "don't"

    def test_quoted_braces(self) -> None:
        (element,) = parse_message("a '{b}' c")
        assert element.value == "a {b} c"

    def test_unterminated_quote_runs_to_end(self) -> None:
        (element,) = parse_message("a '{b")
        assert element.value == "a {b"

    def test_top_level_closing_brace_is_text(self) -> None:
        (element,) = parse_message("a } b")
        assert element.value == "a } b"

    def test_pound_outside_plural_is_text(self) -> None:
        (element,) = parse_message("# of items")
        assert isinstance(element, LiteralElement)
        assert element.value == "# of items"

    def test_literal_location(self) -> None:
        first, _arg, last = parse_message("ab {x} cd")
        assert (first.location.start, first.location.end) == (0, 3)
        assert (last.location.start, last.location.end) == (6, 9)

    @given(st.text(alphabet=SAFE_TEXT_CHARS, min_size=1))
    def test_safe_text_round_trips_as_single_literal(self, text: str) -> None:
        (element,) = parse_message(text)
        assert element == LiteralElement(text, element.location)


# ============================================================================
# Arguments
# ============================================================================


class TestArguments:
    """Simple and formatted placeholders."""

    def test_simple_argument(self) -> None:
        literal, argument = parse_message("Hello {name}")
        assert literal.value == "Hello "
        assert isinstance(argument, ArgumentElement)
        assert argument.value == "name"
        assert (argument.location.start, argument.location.end) == (6, 12)

    def test_whitespace_inside_braces(self) -> None:
        (argument,) = parse_message("{  name  }")
        assert argument == ArgumentElement("name", argument.location)

    @pytest.mark.parametrize(
        ("text", "cls", "style"),
        [
            ("{n, number}", NumberElement, None),
            ("{n, number, percent}", NumberElement, "percent"),
            ("{n, number, ::currency/EUR}", NumberElement, "::currency/EUR"),
            ("{d, date, short}", DateElement, "short"),
            ("{t, time}", TimeElement, None),
        ],
    )
    def test_formatted_arguments(self, text: str, cls: type, style: str | None) -> None:
        (element,) = parse_message(text)
        assert isinstance(element, cls)
        assert element.style == style

    def test_style_keeps_quoted_braces(self) -> None:
        (element,) = parse_message("{n, number, '{'0'}'}")
        assert element.style == "'{'0'}'"

    @given(lower_case_names)
    def test_any_identifier_is_an_argument(self, name: str) -> None:
        assert parse_message("{" + name + "}") == (
            ArgumentElement(name, parse_message("{" + name + "}")[0].location),
        )


# ============================================================================
# Plural and select
# ============================================================================


class TestBranching:
    """Plural, selectordinal and select constructs."""

    def test_plural_options_in_source_order(self) -> None:
        (plural,) = parse_message("{count, plural, one {1 item} other {many items}}")
        assert isinstance(plural, PluralElement)
        assert plural.value == "count"
        assert list(plural.options) == ["one", "other"]
        assert plural.options["one"].value[0].value == "1 item"
        assert plural.offset == 0
        assert plural.plural_type is PluralType.CARDINAL

    def test_type_guards(self) -> None:
        elements = parse_message("{a} {g, select, other {x}} {n, plural, other {#}} <b>y</b>")
        assert [ArgumentElement.guard(e) for e in elements].count(True) == 1
        assert [SelectElement.guard(e) for e in elements].count(True) == 1
        assert [PluralElement.guard(e) for e in elements].count(True) == 1
        assert TagElement.guard(elements[-1])
        assert not PluralElement.guard(elements[0])

    def test_pound_inside_plural(self) -> None:
        (plural,) = parse_message("{n, plural, other {# items}}")
        pound, literal = plural.options["other"].value
        assert isinstance(pound, PoundElement)
        assert literal.value == " items"

    def test_quoted_pound_inside_plural(self) -> None:
        (plural,) = parse_message("{n, plural, other {'#' items}}")
        (literal,) = plural.options["other"].value
        assert literal.value == "# items"

    def test_exact_selectors_and_offset(self) -> None:
        (plural,) = parse_message(
            "{n, plural, offset:1 =0 {nobody} =1 {just you} one {# other} other {# others}}"
        )
        assert plural.offset == 1
        assert list(plural.options) == ["=0", "=1", "one", "other"]

    def test_selectordinal(self) -> None:
        (plural,) = parse_message("{n, selectordinal, one {#st} two {#nd} other {#th}}")
        assert plural.plural_type is PluralType.ORDINAL
        assert plural.type is ElementType.PLURAL

    def test_select(self) -> None:
        (select,) = parse_message("{g, select, male {He} female {She} other {They}}")
        assert isinstance(select, SelectElement)
        assert list(select.options) == ["male", "female", "other"]

    def test_pound_inside_select_is_text(self) -> None:
        (select,) = parse_message("{g, select, other {#}}")
        (literal,) = select.options["other"].value
        assert isinstance(literal, LiteralElement)

    def test_nested_plural_inside_plural(self) -> None:
        (outer,) = parse_message("{a, plural, one {{b, plural, one {x} other {y}}} other {z}}")
        (inner,) = outer.options["one"].value
        assert isinstance(inner, PluralElement)
        assert inner.value == "b"

    def test_missing_other_allowed_when_not_required(self) -> None:
        (plural,) = parse_message("{n, plural, one {x}}", requires_other_clause=False)
        assert list(plural.options) == ["one"]


# ============================================================================
# Tags
# ============================================================================


class TestTags:
    """Rich text markup."""

    def test_tag_with_children(self) -> None:
        (tag,) = parse_message("<b>bold {name}</b>")
        assert isinstance(tag, TagElement)
        assert tag.value == "b"
        literal, argument = tag.children
        assert literal.value == "bold "
        assert argument.value == "name"

    def test_self_closing_tag_is_literal(self) -> None:
        (element,) = parse_message("<br/>")
        assert element == LiteralElement("<br/>", element.location)

    def test_ignore_tag_treats_markup_as_text(self) -> None:
        (element,) = parse_message("<b>x</b>", ignore_tag=True)
        assert element.value == "<b>x</b>"

    def test_less_than_before_non_letter_is_text(self) -> None:
        (element,) = parse_message("a < 3")
        assert element.value == "a < 3"


# ============================================================================
# Errors
# ============================================================================


class TestErrors:
    """Every malformed input fails with a reference error kind."""

    @pytest.mark.parametrize(
        ("text", "kind"),
        [
            ("Hello {name", IcuErrorKind.EXPECT_ARGUMENT_CLOSING_BRACE),
            ("{", IcuErrorKind.EXPECT_ARGUMENT_CLOSING_BRACE),
            ("{}", IcuErrorKind.EMPTY_ARGUMENT),
            ("{a b}", IcuErrorKind.MALFORMED_ARGUMENT),
            ("{n, }", IcuErrorKind.EXPECT_ARGUMENT_TYPE),
            ("{n, foo}", IcuErrorKind.INVALID_ARGUMENT_TYPE),
            ("{n, number, }", IcuErrorKind.EXPECT_ARGUMENT_STYLE),
            ("{n, number, 'x}", IcuErrorKind.UNCLOSED_QUOTE_IN_ARGUMENT_STYLE),
            ("{n, plural}", IcuErrorKind.EXPECT_SELECT_ARGUMENT_OPTIONS),
            ("{n, plural, offset:x other {}}", IcuErrorKind.EXPECT_PLURAL_ARGUMENT_OFFSET_VALUE),
            ("{n, plural, }", IcuErrorKind.EXPECT_PLURAL_ARGUMENT_SELECTOR),
            ("{n, select, }", IcuErrorKind.EXPECT_SELECT_ARGUMENT_SELECTOR),
            ("{n, plural, one x}", IcuErrorKind.EXPECT_PLURAL_ARGUMENT_SELECTOR_FRAGMENT),
            ("{n, select, a x}", IcuErrorKind.EXPECT_SELECT_ARGUMENT_SELECTOR_FRAGMENT),
            ("{n, plural, =x {a} other {b}}", IcuErrorKind.EXPECT_PLURAL_ARGUMENT_SELECTOR),
            (
                "{n, plural, one {a} one {b} other {c}}",
                IcuErrorKind.DUPLICATE_PLURAL_ARGUMENT_SELECTOR,
            ),
            (
                "{n, select, a {a} a {b} other {c}}",
                IcuErrorKind.DUPLICATE_SELECT_ARGUMENT_SELECTOR,
            ),
            ("{n, plural, one {x}}", IcuErrorKind.MISSING_OTHER_CLAUSE),
            ("<b x>", IcuErrorKind.INVALID_TAG),
            ("</b>", IcuErrorKind.UNMATCHED_CLOSING_TAG),
            ("<b>x</i>", IcuErrorKind.UNMATCHED_CLOSING_TAG),
            ("<b>x", IcuErrorKind.UNCLOSED_TAG),
        ],
    )
    def test_error_kind(self, text: str, kind: IcuErrorKind) -> None:
        assert _kind(text) == kind

    def test_error_carries_diagnostic(self) -> None:
        with pytest.raises(MessageSyntaxError) as exc_info:
            parse_message("Hello {name")
        error = exc_info.value
        assert error.diagnostic is not None
        assert error.diagnostic.code is DiagnosticCode.ICU_SYNTAX_ERROR
        assert error.diagnostic.message == "EXPECT_ARGUMENT_CLOSING_BRACE"
        assert error.offset == 6
        assert error.original_message == "Hello {name"
        assert str(error) == "EXPECT_ARGUMENT_CLOSING_BRACE"

    def test_nesting_beyond_limit(self) -> None:
        depth = 150
        text = "{a, select, other {" * depth + "x" + "}}" * depth
        with pytest.raises(DepthLimitExceededError) as exc_info:
            parse_message(text)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.ICU_NESTING_DEPTH_EXCEEDED

    def test_nesting_within_custom_limit(self) -> None:
        text = "{a, select, other {" * 3 + "x" + "}}" * 3
        assert len(IcuParser(max_nesting_depth=3).parse(text)) == 1
        with pytest.raises(DepthLimitExceededError):
            IcuParser(max_nesting_depth=2).parse(text)


# ============================================================================
# Properties
# ============================================================================


class TestParserProperties:
    """Generated well-formed messages always parse."""

    @given(icu_messages())
    def test_generated_messages_parse(self, message) -> None:  # type: ignore[no-untyped-def]
        elements = parse_message(message.text)
        event(f"top_level_elements={min(len(elements), 5)}")
        assert isinstance(elements, tuple)

    def test_parser_is_reusable(self) -> None:
        parser = IcuParser()
        first = parser.parse("{a, plural, other {#}}")
        second = parser.parse("{a, plural, other {#}}")
        assert first == second

    @pytest.mark.fuzz
    @settings(max_examples=1500)
    @given(st.text(alphabet="{}#<>/',= abcOne0123plural select", max_size=60))
    def test_arbitrary_text_raises_only_syntax_errors(self, text: str) -> None:
        try:
            parse_message(text)
        except MessageSyntaxError as e:
            event(f"kind={e.kind}")
            assert e.kind in set(IcuErrorKind)
            assert 0 <= e.offset <= len(text)
