"""no-multiple-plurals: a message may hold at most one plural construct.

The count is shared by the whole traversal: a plural nested in another
plural's option counts the same as a sibling.
"""

from dataclasses import dataclass

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

__all__ = ["NoMultiplePlurals", "PluralCounter", "verify_no_multiple_plurals"]

# Plural constructs allowed in one message
_MAX_PLURALS = 1


@dataclass(slots=True)
class PluralCounter:
    """Running plural count for one traversal."""

    count: int = 0


def verify_no_multiple_plurals(
    elements: tuple[MessageElement, ...],
    counter: PluralCounter | None = None,
    guard: DepthGuard | None = None,
) -> Diagnostic | None:
    """Report the second plural met in traversal order.

    Args:
        elements: Element sequence to check
        counter: Count carried over from enclosing sequences (None starts at 0)
        guard: Recursion guard carried over from enclosing sequences
    """
    counter = counter if counter is not None else PluralCounter()
    guard = guard if guard is not None else DepthGuard()
    with guard:
        for element in elements:
            match element:
                case PluralElement(options=options):
                    counter.count += 1
                    if counter.count > _MAX_PLURALS:
                        return ErrorTemplate.multiple_plurals()
                    for option in options.values():
                        violation = verify_no_multiple_plurals(option.value, counter, guard)
                        if violation is not None:
                            return violation
                case (
                    LiteralElement()
                    | ArgumentElement()
                    | NumberElement()
                    | DateElement()
                    | TimeElement()
                    | SelectElement()
                    | PoundElement()
                    | TagElement()
                ):
                    continue
    return None


class NoMultiplePlurals(Rule):
    """Disallow multiple plural rules in the same message."""

    __slots__ = ()

    meta = RuleMeta(
        id="no-multiple-plurals",
        type=RuleType.PROBLEM,
        description="Disallow multiple plural rules in the same message",
        url=ErrorTemplate.rule_url("no-multiple-plurals"),
        fixable="code",
    )

    def verify(self, elements: tuple[MessageElement, ...]) -> Diagnostic | None:
        return verify_no_multiple_plurals(elements)
