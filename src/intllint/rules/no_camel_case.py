"""no-camel-case: placeholder names must not contain upper-case letters.

Checks argument placeholders and plural placeholders, descending into the
options of plurals. Other element kinds are passed over.
"""

import re

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

__all__ = ["NoCamelCase", "verify_no_camel_case"]

_CAMEL_CASE_RE = re.compile(r"[A-Z]")


def verify_no_camel_case(
    elements: tuple[MessageElement, ...], guard: DepthGuard | None = None
) -> Diagnostic | None:
    """First camel-case placeholder in traversal order, as a diagnostic.

    Example:
        >>> verify_no_camel_case((ArgumentElement("userName"),)).message
        'Camel case arguments are not allowed'
        >>> verify_no_camel_case((ArgumentElement("name"),)) is None
        True
    """
    guard = guard if guard is not None else DepthGuard()
    with guard:
        for element in elements:
            match element:
                case ArgumentElement(value=name):
                    if _CAMEL_CASE_RE.search(name):
                        return ErrorTemplate.camel_case_argument(name)
                case PluralElement(value=name, options=options):
                    if _CAMEL_CASE_RE.search(name):
                        return ErrorTemplate.camel_case_argument(name)
                    for option in options.values():
                        if (violation := verify_no_camel_case(option.value, guard)) is not None:
                            return violation
                case (
                    LiteralElement()
                    | NumberElement()
                    | DateElement()
                    | TimeElement()
                    | SelectElement()
                    | PoundElement()
                    | TagElement()
                ):
                    continue
    return None


class NoCamelCase(Rule):
    """Disallow camel case placeholders in messages."""

    __slots__ = ()

    meta = RuleMeta(
        id="no-camel-case",
        type=RuleType.PROBLEM,
        description="Disallow camel case placeholders in message",
        url=ErrorTemplate.rule_url("no-camel-case"),
        fixable="code",
    )

    def verify(self, elements: tuple[MessageElement, ...]) -> Diagnostic | None:
        return verify_no_camel_case(elements)
