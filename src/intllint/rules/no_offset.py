"""no-offset: plural constructs must not declare an offset."""

from intllint.core import DepthGuard
from intllint.diagnostics import Diagnostic, ErrorTemplate
from intllint.enums import RuleType
from intllint.icu import (
    ArgumentElement,
    DateElement,
    LiteralElement,
    MessageElement,
    NumberElement,
    PluralElement,
    PoundElement,
    SelectElement,
    TagElement,
    TimeElement,
)

from .base import Rule, RuleMeta

__all__ = ["NoOffset", "verify_no_offset"]


def verify_no_offset(
    elements: tuple[MessageElement, ...], guard: DepthGuard | None = None
) -> Diagnostic | None:
    """First plural with a non-zero offset, searching plural and select options."""
    guard = guard if guard is not None else DepthGuard()
    with guard:
        for element in elements:
            match element:
                case PluralElement(value=name, offset=offset, options=options):
                    if offset:
                        return ErrorTemplate.plural_offset(name, offset)
                    for option in options.values():
                        if (violation := verify_no_offset(option.value, guard)) is not None:
                            return violation
                case SelectElement(options=options):
                    for option in options.values():
                        if (violation := verify_no_offset(option.value, guard)) is not None:
                            return violation
                case (
                    LiteralElement()
                    | ArgumentElement()
                    | NumberElement()
                    | DateElement()
                    | TimeElement()
                    | PoundElement()
                    | TagElement()
                ):
                    continue
    return None


class NoOffset(Rule):
    """Disallow offset in plural rules."""

    __slots__ = ()

    meta = RuleMeta(
        id="no-offset",
        type=RuleType.PROBLEM,
        description="Disallow offset in plural rules",
        url=ErrorTemplate.rule_url("no-offset"),
        fixable="code",
    )

    def verify(self, elements: tuple[MessageElement, ...]) -> Diagnostic | None:
        return verify_no_offset(elements)
