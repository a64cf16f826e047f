"""enforce-plural-rules: plurals must carry required keywords, not forbidden ones.

The required set is the union of the configured ``required_plural_rules`` and,
when a locale is configured, the CLDR plural categories of that locale
(``selectordinal`` uses the ordinal categories). Exact selectors such as
``=0`` are never required; they may be forbidden.
"""

import logging
from collections.abc import Iterable

from babel.core import UnknownLocaleError

from intllint.config import LintConfig
from intllint.core import DepthGuard
from intllint.diagnostics import Diagnostic, ErrorTemplate
from intllint.enums import PluralType, RuleType
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
from intllint.locale_utils import plural_categories

from .base import Rule, RuleMeta

__all__ = ["EnforcePluralRules", "verify_plural_rules"]

logger = logging.getLogger(__name__)


def verify_plural_rules(
    elements: tuple[MessageElement, ...],
    required: Iterable[str] = (),
    forbidden: Iterable[str] = (),
    *,
    ordinal_required: Iterable[str] | None = None,
    guard: DepthGuard | None = None,
) -> Diagnostic | None:
    """First plural missing a required keyword or carrying a forbidden one.

    Keywords are checked in the order given, required before forbidden.

    Args:
        elements: Element sequence to check
        required: Keywords every ``plural`` must have
        forbidden: Keywords no plural may have
        ordinal_required: Keywords every ``selectordinal`` must have
            (None: same as ``required``)
        guard: Recursion guard carried over from enclosing sequences

    Example:
        >>> from intllint.icu import parse_message
        >>> msg = parse_message("{n, plural, one {#} other {#}}")
        >>> verify_plural_rules(msg, required=("few",)).message
        'Missing plural rule "few"'
    """
    required = tuple(required)
    forbidden = tuple(forbidden)
    ordinal = tuple(ordinal_required) if ordinal_required is not None else required
    guard = guard if guard is not None else DepthGuard()
    with guard:
        for element in elements:
            match element:
                case PluralElement(options=options, plural_type=plural_type):
                    wanted = ordinal if plural_type is PluralType.ORDINAL else required
                    for keyword in wanted:
                        if keyword not in options:
                            return ErrorTemplate.missing_plural_rule(keyword)
                    for keyword in forbidden:
                        if keyword in options:
                            return ErrorTemplate.forbidden_plural_rule(keyword)
                    for option in options.values():
                        violation = verify_plural_rules(
                            option.value,
                            required,
                            forbidden,
                            ordinal_required=ordinal,
                            guard=guard,
                        )
                        if violation is not None:
                            return violation
                case SelectElement(options=options):
                    for option in options.values():
                        violation = verify_plural_rules(
                            option.value,
                            required,
                            forbidden,
                            ordinal_required=ordinal,
                            guard=guard,
                        )
                        if violation is not None:
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


def _merge(*groups: Iterable[str]) -> tuple[str, ...]:
    """Ordered union, first occurrence wins."""
    return tuple(dict.fromkeys(keyword for group in groups for keyword in group))


class EnforcePluralRules(Rule):
    """Enforce plural rules to always specify certain categories."""

    __slots__ = ("_forbidden", "_ordinal_required", "_required")

    meta = RuleMeta(
        id="enforce-plural-rules",
        type=RuleType.PROBLEM,
        description="Enforce plural rules to always specify certain categories",
        url=ErrorTemplate.rule_url("enforce-plural-rules"),
        fixable="code",
    )

    def __init__(self, config: LintConfig) -> None:
        """Resolve the keyword sets once.

        Raises:
            ValueError: If the configured locale is unknown to Babel
        """
        super().__init__(config)
        cardinal: tuple[str, ...] = ()
        ordinal: tuple[str, ...] = ()
        if config.locale is not None:
            try:
                cardinal = tuple(sorted(plural_categories(config.locale)))
                ordinal = tuple(sorted(plural_categories(config.locale, PluralType.ORDINAL)))
            except (UnknownLocaleError, ValueError) as e:
                msg = f"Unknown locale for enforce-plural-rules: {config.locale!r}"
                raise ValueError(msg) from e
            logger.debug(
                "Plural categories for %s: cardinal=%s ordinal=%s",
                config.locale,
                cardinal,
                ordinal,
            )
        forbidden = config.forbidden_plural_rules
        self._required = _merge(config.required_plural_rules, cardinal)
        self._ordinal_required = _merge(config.required_plural_rules, ordinal)
        # An explicitly forbidden keyword wins over a locale-derived one
        self._required = tuple(k for k in self._required if k not in forbidden)
        self._ordinal_required = tuple(k for k in self._ordinal_required if k not in forbidden)
        self._forbidden = forbidden

    @property
    def required(self) -> tuple[str, ...]:
        return self._required

    @property
    def forbidden(self) -> tuple[str, ...]:
        return self._forbidden

    def verify(self, elements: tuple[MessageElement, ...]) -> Diagnostic | None:
        return verify_plural_rules(
            elements,
            self._required,
            self._forbidden,
            ordinal_required=self._ordinal_required,
        )
