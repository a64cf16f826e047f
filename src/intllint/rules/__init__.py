"""Message rules and their registry.

Each rule module exposes a pure validator (``verify_*``) and a Rule
subclass that runs it on every message found in a file.
"""

from .base import Rule, RuleContext, RuleHandler, RuleMeta, TemplateVisitors
from .enforce_plural_rules import EnforcePluralRules, verify_plural_rules
from .no_camel_case import NoCamelCase, verify_no_camel_case
from .no_multiple_plurals import NoMultiplePlurals, PluralCounter, verify_no_multiple_plurals
from .no_offset import NoOffset, verify_no_offset

RULES: dict[str, type[Rule]] = {
    rule.meta.id: rule
    for rule in (NoCamelCase, NoMultiplePlurals, NoOffset, EnforcePluralRules)
}

__all__ = [
    "RULES",
    "EnforcePluralRules",
    "NoCamelCase",
    "NoMultiplePlurals",
    "NoOffset",
    "PluralCounter",
    "Rule",
    "RuleContext",
    "RuleHandler",
    "RuleMeta",
    "TemplateVisitors",
    "verify_no_camel_case",
    "verify_no_multiple_plurals",
    "verify_no_offset",
    "verify_plural_rules",
]
